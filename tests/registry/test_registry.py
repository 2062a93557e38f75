"""Tests for the IBAN country registry and the bundled dataset."""

import pytest

from openiban.exceptions import ConfigurationError, PatternFormatError
from openiban.registry import IbanCountry, IbanRegistry
from openiban.registry.dataset import COUNTRIES
from openiban.validation.checksum import is_valid_checksum
from openiban.validation.structure import compile_pattern

pytestmark = pytest.mark.unit

SEPA_CODES = [
    "AD", "AT", "BE", "BG", "CH", "CY", "CZ", "DE", "DK", "EE", "ES", "FI",
    "FR", "GB", "GI", "GR", "HR", "HU", "IE", "IS", "IT", "LI", "LT", "LU",
    "LV", "MC", "MT", "NL", "NO", "PL", "PT", "RO", "SE", "SI", "SK", "SM", "VA",
]  # fmt: skip


class TestLookup:
    """Test registry lookups."""

    @pytest.mark.parametrize("code", ["NL", "nl", "Nl", "nL"])
    def test_lookup_is_case_insensitive(self, registry, code):
        """Test that lookups ignore the case of the code."""
        country = registry.lookup(code)

        assert country is not None
        assert country.code == "NL"
        assert country.length == 18
        assert country.bban_pattern == "4!a10!n"

    @pytest.mark.parametrize("code", ["ZZ", "XX", "NLD", "N"])
    def test_unknown_code_returns_none(self, registry, code):
        """Test that unknown codes are reported as absent, not raised."""
        assert registry.lookup(code) is None

    @pytest.mark.parametrize("code", [None, ""])
    def test_missing_code_returns_none(self, registry, code):
        """Test that an empty or missing code returns None."""
        assert registry.lookup(code) is None

    @pytest.mark.parametrize("code", ["\u0131t", "n\u0131"])
    def test_non_ascii_code_not_case_mapped(self, registry, code):
        """Test that dotless i does not uppercase into a known code."""
        assert registry.lookup(code) is None
        assert code not in registry

    def test_contains(self, registry):
        """Test membership checks."""
        assert "de" in registry
        assert "ZZ" not in registry
        assert 42 not in registry


class TestEnumeration:
    """Test listing countries."""

    def test_all_countries_sorted_by_code(self, registry):
        """Test that countries come back ordered by ISO code."""
        codes = [country.code for country in registry.all_countries()]

        assert codes == sorted(codes)
        assert len(codes) == len(registry)
        assert len(registry) >= 75

    def test_iteration_matches_all_countries(self, registry):
        """Test that iterating yields the same countries."""
        assert tuple(registry) == registry.all_countries()

    @pytest.mark.parametrize("code", SEPA_CODES)
    def test_sepa_country_present(self, registry, code):
        """Test that every SEPA country is in the registry."""
        country = registry.lookup(code)

        assert country is not None
        assert country.is_sepa is True

    def test_sepa_countries_only_sepa(self, registry):
        """Test that the SEPA listing excludes non-SEPA countries."""
        sepa = registry.sepa_countries()

        assert {country.code for country in sepa} == set(SEPA_CODES)
        assert "BR" not in {country.code for country in sepa}

    def test_repr(self, registry):
        """Test the developer representation."""
        assert repr(registry) == f"<IbanRegistry countries={len(registry)}>"


class TestConstruction:
    """Test building registries."""

    def test_duplicate_code_rejected(self):
        """Test that a country code may appear only once."""
        countries = [
            IbanCountry(code="NL", bban_pattern="4!a10!n", length=18),
            IbanCountry(code="nl", bban_pattern="4!a10!n", length=18),
        ]

        with pytest.raises(ConfigurationError, match="Duplicate country code"):
            IbanRegistry(countries)

    @pytest.mark.parametrize("pattern", ["4!a9!n", "4!a11!n", "4!a10!n1!c"])
    def test_pattern_must_cover_bban_length(self, pattern):
        """Test that a pattern longer or shorter than the BBAN is a configuration error."""
        country = IbanCountry(code="NL", bban_pattern=pattern, length=18)

        with pytest.raises(ConfigurationError, match="expected 14") as exc_info:
            IbanRegistry([country])

        assert exc_info.value.context["country"] == "NL"
        assert exc_info.value.context["setting"] == "bban_pattern"

    def test_malformed_pattern_rejected(self):
        """Test that an uncompilable pattern fails when the registry is built."""
        with pytest.raises(PatternFormatError) as exc_info:
            IbanRegistry([IbanCountry(code="XX", bban_pattern="4!x", length=8)])

        assert exc_info.value.pattern == "4!x"

    def test_empty_registry(self):
        """Test that an empty registry knows no countries."""
        registry = IbanRegistry([])

        assert len(registry) == 0
        assert registry.lookup("NL") is None

    def test_from_rows(self):
        """Test building from plain mappings."""
        registry = IbanRegistry.from_rows(
            [{"code": "nl", "bban_pattern": "4!a10!n", "length": 18, "is_sepa": True}]
        )

        assert registry.lookup("NL").is_sepa is True

    def test_from_rows_invalid_row(self):
        """Test that an invalid row is reported with its position."""
        rows = [
            {"code": "NL", "bban_pattern": "4!a10!n", "length": 18},
            {"code": "NLD", "bban_pattern": "4!a10!n", "length": 18},
        ]

        with pytest.raises(ConfigurationError) as exc_info:
            IbanRegistry.from_rows(rows)

        assert exc_info.value.context["row"] == 1
        assert exc_info.value.original_error is not None


class TestFromYaml:
    """Test loading a registry from YAML."""

    def test_list_document(self, tmp_path):
        """Test a document holding a plain list of rows."""
        path = tmp_path / "countries.yaml"
        path.write_text(
            "- code: NL\n"
            "  bban_pattern: 4!a10!n\n"
            "  length: 18\n"
            "  is_sepa: true\n"
            "- code: DE\n"
            "  bban_pattern: 8!n10!n\n"
            "  length: 22\n",
            encoding="utf-8",
        )

        registry = IbanRegistry.from_yaml(path)

        assert len(registry) == 2
        assert registry.lookup("nl").is_sepa is True
        assert registry.lookup("DE").is_sepa is False

    def test_mapping_document(self, tmp_path):
        """Test a document with a top-level countries key."""
        path = tmp_path / "countries.yaml"
        path.write_text(
            "countries:\n"
            "  - code: XK\n"
            "    bban_pattern: 4!n10!n2!n\n"
            "    length: 20\n",
            encoding="utf-8",
        )

        registry = IbanRegistry.from_yaml(str(path))

        assert registry.lookup("XK").length == 20

    def test_pattern_length_mismatch(self, tmp_path):
        """Test that a row whose pattern misses a character fails to load."""
        path = tmp_path / "countries.yaml"
        path.write_text(
            "- code: NL\n"
            "  bban_pattern: 4!a9!n\n"
            "  length: 18\n",
            encoding="utf-8",
        )

        with pytest.raises(ConfigurationError, match="4!a9!n of NL covers 13 characters"):
            IbanRegistry.from_yaml(path)

    def test_missing_file(self, tmp_path):
        """Test that a missing file is a configuration error."""
        with pytest.raises(ConfigurationError, match="Cannot read"):
            IbanRegistry.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test that unparsable YAML is a configuration error."""
        path = tmp_path / "broken.yaml"
        path.write_text("countries: [code: NL\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="not valid YAML"):
            IbanRegistry.from_yaml(path)

    def test_not_a_list(self, tmp_path):
        """Test that a scalar document is rejected."""
        path = tmp_path / "scalar.yaml"
        path.write_text("just text\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must be a list"):
            IbanRegistry.from_yaml(path)


class TestDataset:
    """Consistency checks of the bundled SWIFT dataset."""

    @pytest.mark.parametrize("country", COUNTRIES, ids=lambda c: c.code)
    def test_pattern_matches_length(self, country):
        """Test that each pattern covers exactly the BBAN length."""
        assert compile_pattern(country.bban_pattern).length == country.bban_length

    @pytest.mark.parametrize(
        "country", [c for c in COUNTRIES if c.example], ids=lambda c: c.code
    )
    def test_example_is_consistent(self, country):
        """Test that each example has the right prefix, length, structure and checksum."""
        example = country.example

        assert example.startswith(country.code)
        assert len(example) == country.length
        assert compile_pattern(country.bban_pattern).matches(example[4:])
        assert is_valid_checksum(example)

    def test_length_extremes(self, registry):
        """Test the shortest and longest countries of the dataset."""
        lengths = {country.code: country.length for country in registry}

        assert min(lengths.values()) == lengths["NO"] == 15
        assert max(lengths.values()) == lengths["RU"] == 33
