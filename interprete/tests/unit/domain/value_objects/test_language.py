"""
Unit tests for the supported language catalog.

Usage:
    laborant interprete --unit
"""

from shared.tests import LaborantTest

from interprete.domain.value_objects import (
    SUPPORTED_LANGUAGES,
    find_language,
    language_name,
    languages_payload,
)


class TestLanguageCatalog(LaborantTest):
    """Unit tests for language lookups."""

    component_name = "interprete"
    test_category = "unit"

    def test_catalog_codes_are_unique(self):
        """Test every language code appears once."""
        codes = [lang.code for lang in SUPPORTED_LANGUAGES]
        assert len(codes) == len(set(codes))
        assert "en" in codes and "es" in codes

    def test_language_name_known(self):
        """Test known codes map to display names."""
        assert language_name("es") == "Spanish"
        assert language_name("ja") == "Japanese"

    def test_language_name_unknown_falls_back_to_code(self):
        """Test unknown codes are returned unchanged."""
        assert language_name("tlh") == "tlh"
        assert find_language("tlh") is None

    def test_payload_shape(self):
        """Test wire form is a list of {code, name}."""
        payload = languages_payload()

        assert len(payload) == len(SUPPORTED_LANGUAGES)
        assert payload[0] == {"code": "en", "name": "English"}
        assert all(set(item) == {"code", "name"} for item in payload)


if __name__ == "__main__":
    TestLanguageCatalog.run_as_main()
