"""Unit tests for the ISO and UN M49 code registries."""

from __future__ import annotations

import pytest

from stdcodes import UnknownConstantError
from stdcodes.iso import ISO3166_1, ISO4217, ISO6391, ISO15924
from stdcodes.registry import CodeRegistry
from stdcodes.unstats import UNM49

# =============================================================================
# Test Constants - Duplicated from src for test isolation
# =============================================================================

TEST_COUNTRY_FRANCE = "FR"
TEST_COUNTRY_DENMARK = "DK"
TEST_CURRENCY_EURO = "EUR"
TEST_LANGUAGE_FRENCH = "fr"
TEST_SCRIPT_LATIN = "Latn"
TEST_M49_FRANCE = "FRA"
TEST_UNKNOWN = "XX"

REGISTRIES: list[type[CodeRegistry]] = [ISO15924, ISO3166_1, ISO4217, ISO6391, UNM49]
REGISTRY_IDS = ["iso15924", "iso3166_1", "iso4217", "iso6391", "unm49"]

# =============================================================================
# Contract Tests
# =============================================================================


class TestRegistryContract:
    """Contract checks applied to every registry."""

    @pytest.mark.parametrize("registry", REGISTRIES, ids=REGISTRY_IDS)
    def test_every_declared_code_is_included(self, registry: type[CodeRegistry]) -> None:
        """Test that includes accepts every code listed by get_all."""
        for code in registry.get_all().values():
            assert registry.includes(code)

    @pytest.mark.parametrize("registry", REGISTRIES, ids=REGISTRY_IDS)
    def test_get_constant_round_trips(self, registry: type[CodeRegistry]) -> None:
        """Test that every declared code resolves back to its member name."""
        for name, code in registry.get_all().items():
            assert registry.get_constant(code) == name

    @pytest.mark.parametrize("registry", REGISTRIES, ids=REGISTRY_IDS)
    def test_unknown_code(self, registry: type[CodeRegistry]) -> None:
        """Test that an unknown code is rejected by every lookup."""
        assert not registry.includes(TEST_UNKNOWN)
        assert registry.get(TEST_UNKNOWN) is None
        assert registry.get_constant(TEST_UNKNOWN) is None
        with pytest.raises(UnknownConstantError):
            registry.validate(TEST_UNKNOWN)

    @pytest.mark.parametrize("registry", REGISTRIES, ids=REGISTRY_IDS)
    def test_codes_are_unique(self, registry: type[CodeRegistry]) -> None:
        """Test that no registry declares the same code twice."""
        codes = registry.enums()
        assert len(codes) == len(set(codes))


# =============================================================================
# Registry Specific Tests
# =============================================================================


class TestISO3166_1:
    """Tests for ISO 3166-1 alpha-2 country codes."""

    def test_known_countries(self) -> None:
        """Test lookup of well-known country codes."""
        assert ISO3166_1.FR == TEST_COUNTRY_FRANCE
        assert ISO3166_1.get(TEST_COUNTRY_DENMARK) == TEST_COUNTRY_DENMARK
        assert ISO3166_1.get_constant(TEST_COUNTRY_FRANCE) == "FR"

    def test_size(self) -> None:
        """Test the number of assigned country codes."""
        assert len(ISO3166_1.get_all()) == 249

    def test_lowercase_rejected(self) -> None:
        """Test that codes are case-sensitive."""
        assert not ISO3166_1.includes("fr")


class TestISO4217:
    """Tests for ISO 4217 currency codes."""

    def test_known_currencies(self) -> None:
        """Test lookup of well-known currency codes."""
        assert ISO4217.EUR == TEST_CURRENCY_EURO
        assert ISO4217.includes("USD")
        assert ISO4217.includes("JPY")
        assert ISO4217.validate(TEST_CURRENCY_EURO) is None


class TestISO6391:
    """Tests for ISO 639-1 language codes."""

    def test_values_are_lowercase(self) -> None:
        """Test that member names are upper case while codes are lower case."""
        assert ISO6391.FR == TEST_LANGUAGE_FRENCH
        assert ISO6391.get_constant(TEST_LANGUAGE_FRENCH) == "FR"
        assert not ISO6391.includes("FR")

    def test_all_codes_two_letters(self) -> None:
        """Test that every code has two lowercase letters."""
        for code in ISO6391.enums():
            assert len(code) == 2
            assert code.islower()


class TestISO15924:
    """Tests for ISO 15924 script codes."""

    def test_title_case_codes(self) -> None:
        """Test that script codes are four letters in title case."""
        assert ISO15924.LATN == TEST_SCRIPT_LATIN
        assert ISO15924.includes("Cyrl")
        assert not ISO15924.includes("LATN")
        for code in ISO15924.enums():
            assert len(code) == 4
            assert code[0].isupper()


class TestUNM49:
    """Tests for UN M49 country codes."""

    def test_alpha3_codes(self) -> None:
        """Test that M49 entries are identified by their alpha-3 code."""
        assert UNM49.FRA == TEST_M49_FRANCE
        assert UNM49.includes("DNK")
        assert UNM49.get_constant("USA") == "USA"
        for code in UNM49.enums():
            assert len(code) == 3
