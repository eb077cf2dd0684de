"""Safety tips and emergency contacts - Pure data and lookups.

Static guidance shown next to alerts. Tips exist in English for every
category and in Spanish for a subset; lookups fall back to English.
"""

from dataclasses import dataclass


DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class SafetyTip:
    """A piece of safety guidance for one disaster category.

    Attributes:
        id: Unique tip ID
        disaster_type: Category the tip applies to
        title: Short headline
        content: Full guidance text
        language: ISO 639-1 language code
    """
    id: str
    disaster_type: str
    title: str
    content: str
    language: str = DEFAULT_LANGUAGE


@dataclass(frozen=True)
class EmergencyContact:
    """An emergency phone line.

    Attributes:
        id: Unique contact ID
        name: Display name
        number: Phone number
        description: What the line is for
        region: Region served (None for nationwide)
    """
    id: str
    name: str
    number: str
    description: str
    region: str | None = None


SAFETY_TIPS: tuple[SafetyTip, ...] = (
    SafetyTip(
        id="eq-1",
        disaster_type="earthquake",
        title="Drop, Cover, and Hold On",
        content=(
            "DROP to the ground; take COVER by getting under a sturdy table or "
            "other piece of furniture; HOLD ON until the shaking stops. If there "
            "isn't a table or desk near you, cover your face and head with your "
            "arms and crouch in an inside corner of the building."
        ),
    ),
    SafetyTip(
        id="eq-2",
        disaster_type="earthquake",
        title="Stay Away from Glass, Windows, Outside Doors and Walls",
        content=(
            "These items may shatter and cause injury. DO NOT run outside while "
            "the ground is still shaking. Most earthquake-related casualties "
            "result from collapsing walls, flying glass, and falling objects."
        ),
    ),
    SafetyTip(
        id="fl-1",
        disaster_type="flood",
        title="Move to Higher Ground",
        content=(
            "If you are in a flood-prone area or are camping in a low-lying area, "
            "get to higher ground immediately. Do not drive through flooded areas "
            "or attempt to cross flowing streams."
        ),
    ),
    SafetyTip(
        id="fl-2",
        disaster_type="flood",
        title="Avoid Contact with Floodwater",
        content=(
            "Floodwater may be contaminated with oil, gasoline, or raw sewage. It "
            "may also be electrically charged from underground or downed power lines."
        ),
    ),
    SafetyTip(
        id="hu-1",
        disaster_type="hurricane",
        title="Prepare a Disaster Supply Kit",
        content=(
            "Include items like water, food, battery-powered or hand crank radio, "
            "flashlight, first aid kit, extra batteries, cell phone with chargers "
            "and a backup battery."
        ),
    ),
    SafetyTip(
        id="hu-2",
        disaster_type="hurricane",
        title="Secure Your Home",
        content=(
            'Cover all windows with hurricane shutters or 5/8" marine plywood. '
            "Tape does NOT prevent windows from breaking. Trim trees and shrubs "
            "around your home to minimize risk of broken branches and debris."
        ),
    ),
    SafetyTip(
        id="to-1",
        disaster_type="tornado",
        title="Find Safe Shelter Immediately",
        content=(
            "Go to a pre-designated shelter area such as a safe room, basement, "
            "storm cellar, or the lowest building level. If there is no basement, "
            "go to the center of an interior room on the lowest level away from "
            "corners, windows, doors, and outside walls."
        ),
    ),
    SafetyTip(
        id="wf-1",
        disaster_type="wildfire",
        title="Create Defensible Space",
        content=(
            "Clear debris, vegetation, and other flammable materials within 30 feet "
            "of your house. Keep your gutters clean and roof clear of leaves and "
            "branches."
        ),
    ),
    SafetyTip(
        id="ts-1",
        disaster_type="tsunami",
        title="Evacuate to Higher Ground",
        content=(
            "If you feel a strong earthquake near the coast, or receive an official "
            "tsunami warning, immediately move to higher ground or inland away from "
            'water. Wait for official "all clear" before returning.'
        ),
    ),
    SafetyTip(
        id="eq-1-es",
        disaster_type="earthquake",
        title="Agacharse, Cubrirse y Sujetarse",
        content=(
            "AGÁCHESE al suelo; CÚBRASE debajo de una mesa resistente u otro mueble; "
            "SUJÉTESE hasta que el temblor se detenga. Si no hay una mesa cerca, "
            "cúbrase la cara y la cabeza con los brazos y agáchese en una esquina "
            "interior del edificio."
        ),
        language="es",
    ),
    SafetyTip(
        id="fl-1-es",
        disaster_type="flood",
        title="Diríjase a un Lugar Más Alto",
        content=(
            "Si está en una zona propensa a inundaciones, vaya inmediatamente a un "
            "lugar más alto. No conduzca a través de áreas inundadas ni intente "
            "cruzar arroyos con corriente."
        ),
        language="es",
    ),
    SafetyTip(
        id="hu-1-es",
        disaster_type="hurricane",
        title="Prepare un Kit de Suministros para Desastres",
        content=(
            "Incluya artículos como agua, alimentos, radio a pilas o de manivela, "
            "linterna, botiquín de primeros auxilios, pilas adicionales, teléfono "
            "móvil con cargadores y batería de respaldo."
        ),
        language="es",
    ),
)


EMERGENCY_CONTACTS: tuple[EmergencyContact, ...] = (
    EmergencyContact(
        id="911",
        name="Emergency Services",
        number="911",
        description="Police, fire and medical emergencies",
    ),
    EmergencyContact(
        id="fema",
        name="FEMA Helpline",
        number="1-800-621-3362",
        description="Federal disaster assistance",
    ),
    EmergencyContact(
        id="redcross",
        name="American Red Cross",
        number="1-800-733-2767",
        description="Shelter and relief services",
    ),
    EmergencyContact(
        id="poison",
        name="Poison Control",
        number="1-800-222-1222",
        description="Poisoning and contamination exposure",
    ),
    EmergencyContact(
        id="la-ems",
        name="Los Angeles Emergency Management",
        number="213-484-4800",
        description="Local emergency information",
        region="Los Angeles",
    ),
)


def get_safety_tips(
    disaster_type: str | None = None,
    language: str = DEFAULT_LANGUAGE,
    tips: tuple[SafetyTip, ...] = SAFETY_TIPS,
) -> list[SafetyTip]:
    """Get safety tips, optionally for one category.

    Pure function. The fallback is per category: a category with no tip
    in the requested language contributes its English tips instead, so
    every covered category appears in the result. Callers can tell a
    fallback apart by each tip's ``language``.

    Args:
        disaster_type: Category to filter by (None for all)
        language: Preferred language code
        tips: Tip catalog to search

    Returns:
        Matching tips grouped by category, in first-seen category order
    """
    selected = tuple(
        t for t in tips
        if disaster_type is None or t.disaster_type == disaster_type
    )

    result: list[SafetyTip] = []
    for category in get_covered_types(selected):
        in_category = [t for t in selected if t.disaster_type == category]
        localized = [t for t in in_category if t.language == language]
        result.extend(localized or [t for t in in_category if t.language == DEFAULT_LANGUAGE])

    return result


def get_covered_types(tips: tuple[SafetyTip, ...] = SAFETY_TIPS) -> list[str]:
    """Categories that have at least one tip, in first-seen order."""
    seen: list[str] = []
    for tip in tips:
        if tip.disaster_type not in seen:
            seen.append(tip.disaster_type)
    return seen


def get_emergency_contacts(region: str | None = None) -> list[EmergencyContact]:
    """Get nationwide contacts plus those for the given region.

    Pure function.
    """
    return [
        c for c in EMERGENCY_CONTACTS
        if c.region is None or (region is not None and c.region.lower() == region.lower())
    ]
