"""Unit tests for safety tips and emergency contacts."""

from src.core.safety import (
    SAFETY_TIPS,
    get_covered_types,
    get_emergency_contacts,
    get_safety_tips,
)


class TestGetSafetyTips:
    """Tests for get_safety_tips function."""

    def test_all_english_tips(self):
        tips = get_safety_tips()

        assert tips
        assert all(t.language == "en" for t in tips)

    def test_filter_by_type(self):
        tips = get_safety_tips("earthquake")

        assert [t.id for t in tips] == ["eq-1", "eq-2"]

    def test_spanish_tips(self):
        tips = get_safety_tips("flood", "es")

        assert [t.id for t in tips] == ["fl-1-es"]

    def test_falls_back_to_english(self):
        tips = get_safety_tips("tornado", "es")

        assert [t.id for t in tips] == ["to-1"]
        assert tips[0].language == "en"

    def test_fallback_is_per_category(self):
        tips = get_safety_tips(language="es")
        ids = [t.id for t in tips]

        assert ids[:2] == ["eq-1-es", "fl-1-es"]
        assert "eq-1" not in ids
        assert {"to-1", "wf-1", "ts-1"} <= set(ids)
        assert {t.disaster_type for t in tips} == set(get_covered_types(SAFETY_TIPS))

    def test_unknown_type_returns_empty(self):
        assert get_safety_tips("volcano") == []

    def test_covered_types(self):
        types = get_covered_types(SAFETY_TIPS)

        assert types[0] == "earthquake"
        assert "other" not in types
        assert len(types) == len(set(types))


class TestGetEmergencyContacts:
    """Tests for get_emergency_contacts function."""

    def test_nationwide_only(self):
        contacts = get_emergency_contacts()

        assert all(c.region is None for c in contacts)
        assert contacts[0].number == "911"

    def test_includes_region_case_insensitive(self):
        contacts = get_emergency_contacts("los angeles")

        assert any(c.region == "Los Angeles" for c in contacts)
