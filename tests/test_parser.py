"""Tests for idscan/aamva/parser.py."""
from __future__ import annotations

import pytest

from idscan.aamva.parser import (
    ParsedRecord,
    find_header,
    parse_aamva,
    scan_elements,
    split_lines,
)


# ---------------------------------------------------------------------------
# Line handling
# ---------------------------------------------------------------------------


class TestSplitLines:
    def test_crlf_and_bare_cr_are_line_breaks(self) -> None:
        assert split_lines("A\r\nB\rC\nD") == ["A", "B", "C", "D"]

    def test_lines_trimmed_and_blanks_dropped(self) -> None:
        assert split_lines("  DCSDOE  \n\n   \nDACJOHN\t") == ["DCSDOE", "DACJOHN"]

    def test_empty_payload(self) -> None:
        assert split_lines("") == []


# ---------------------------------------------------------------------------
# Header detection
# ---------------------------------------------------------------------------


class TestFindHeader:
    def test_at_line_wins_when_first(self) -> None:
        assert find_header(["@", "ANSI 636000"], "") == "@"

    def test_ansi_line(self) -> None:
        assert find_header(["DCSDOE", "ANSI 636000DL"], "") == "ANSI 636000DL"

    def test_aamva_line_case_insensitive(self) -> None:
        assert find_header(["aamva 01"], "") == "aamva 01"

    def test_falls_back_to_first_64_chars(self) -> None:
        payload = "X" * 100
        assert find_header(["X" * 100], payload) == "X" * 64


class TestHeaderMetadata:
    def test_ansi_header_sets_flag(self) -> None:
        record = parse_aamva("ANSI 636014040002DL\nDCSDOE")
        assert record.aamva is True

    def test_lowercase_marker_sets_flag(self) -> None:
        assert parse_aamva("ansi 636014 DL").aamva is True

    def test_version_captured_after_marker(self) -> None:
        assert parse_aamva("AAMVA version 08 DL").version == "08"

    def test_version_falls_back_to_whole_payload(self, basic_payload: str) -> None:
        # Header window is the bare "@" line; version comes from the ANSI line.
        record = parse_aamva(basic_payload)
        assert record.aamva is False
        assert record.version == "63"

    def test_issuer_id_from_header(self) -> None:
        record = parse_aamva("ANSI 636014 DL 08")
        assert record.issuer_id == "636014"

    def test_issuer_id_case_insensitive_file_type(self) -> None:
        assert parse_aamva("ANSI 636014id").issuer_id == "636014"

    def test_issuer_id_payload_fallback_requires_leading_space(self) -> None:
        record = parse_aamva("@\nHEADER\nsomething 604427 DL")
        assert record.issuer_id == "604427"

    def test_issuer_id_absent_inside_longer_number(self) -> None:
        record = parse_aamva("@\nX9999604427DL")
        assert record.issuer_id is None

    def test_file_type_standalone_token(self) -> None:
        assert parse_aamva("ANSI 636014 DL 08").file_type == "DL"

    def test_file_type_id(self) -> None:
        assert parse_aamva("AAMVA 636014 ID").file_type == "ID"

    def test_file_type_not_matched_inside_digits(self) -> None:
        assert parse_aamva("ANSI 636014040002DL00410278").file_type is None


# ---------------------------------------------------------------------------
# Element scanning
# ---------------------------------------------------------------------------


class TestScanElements:
    def test_one_element_per_line(self) -> None:
        assert scan_elements("DCSDOE\nDACJOHN") == {"DCS": "DOE", "DAC": "JOHN"}

    def test_value_is_trimmed(self) -> None:
        assert scan_elements("DAK 95823 ") == {"DAK": "95823"}

    def test_repeated_tag_appended_with_space(self) -> None:
        result = scan_elements("DAC JOHN\nDCSDOE\nDAC MIDDLE-CONTINUED")
        assert result["DAC"] == "JOHN MIDDLE-CONTINUED"

    def test_repeated_tag_with_empty_value_not_padded(self) -> None:
        assert scan_elements("DACJOHN\nDAC") == {"DAC": "JOHN"}

    def test_value_runs_to_end_of_line(self) -> None:
        # The cursor resumes at the line break, so later uppercase runs on
        # the same line belong to the first tag's value.
        result = scan_elements("DAG123 MAIN STREET")
        assert result == {"DAG": "123 MAIN STREET"}

    def test_tag_may_start_mid_line(self) -> None:
        assert scan_elements("12DCSDOE") == {"DCS": "DOE"}

    def test_tag_with_empty_value(self) -> None:
        assert scan_elements("DAH\nDAICITY") == {"DAH": "", "DAI": "CITY"}

    def test_lowercase_letters_are_not_tags(self) -> None:
        assert scan_elements("dcsdoe\nabc") == {}

    def test_empty_text(self) -> None:
        assert scan_elements("") == {}


# ---------------------------------------------------------------------------
# parse_aamva end to end
# ---------------------------------------------------------------------------


class TestParseAamva:
    def test_raw_is_unmodified(self, full_payload: str) -> None:
        assert parse_aamva(full_payload).raw == full_payload

    def test_basic_payload_elements(self, basic_payload: str) -> None:
        elements = parse_aamva(basic_payload).elements
        assert elements["DCS"] == "DOE"
        assert elements["DAC"] == "JOHN"
        assert elements["DAQ"] == "12345678"
        assert elements["DBB"] == "01012000"
        assert elements["DAJ"] == "CA"

    def test_header_line_is_swallowed_as_one_value(self, basic_payload: str) -> None:
        elements = parse_aamva(basic_payload).elements
        assert elements["ANS"] == "I 636000090002DL00410288ZF03230090ZZ"

    def test_full_payload_crlf_and_padding(self, full_payload: str) -> None:
        elements = parse_aamva(full_payload).elements
        assert elements["DAQ"] == "D1234562"
        assert elements["DAK"] == "958230000"
        assert elements["DAU"] == "070 IN"
        assert "\r" not in "".join(elements.values())

    def test_parse_is_pure(self, full_payload: str) -> None:
        assert parse_aamva(full_payload) == parse_aamva(full_payload)

    def test_none_treated_as_empty(self) -> None:
        record = parse_aamva(None)
        assert record.raw == ""
        assert record.elements == {}

    def test_bytes_rejected(self) -> None:
        with pytest.raises(TypeError):
            parse_aamva(b"DCSDOE")  # type: ignore[arg-type]


class TestParseAamvaNoHeader:
    """Payloads with no header never raise and carry no metadata."""

    @pytest.mark.parametrize(
        "payload",
        ["", "   ", "\r\n\r\n", "hello world", "\x00\x01\x02\xff", "12 34 56"],
    )
    def test_no_metadata(self, payload: str) -> None:
        record = parse_aamva(payload)
        assert record.aamva is False
        assert record.version is None
        assert record.issuer_id is None
        assert record.file_type is None
        assert record.elements == {}

    def test_noise_with_uppercase_run_yields_element(self) -> None:
        record = parse_aamva("noise XYZ noise")
        assert record.aamva is False
        assert record.elements == {"XYZ": "noise"}


class TestParsedRecordAccessors:
    def test_get_missing(self) -> None:
        assert ParsedRecord(raw="").get("DAQ") is None

    def test_first_of_precedence(self) -> None:
        record = ParsedRecord(raw="", elements={"DCA": "C", "DAR": "D"})
        assert record.first_of("DCA", "DAR") == "C"

    def test_first_of_falls_through_empty(self) -> None:
        record = ParsedRecord(raw="", elements={"DCA": "", "DAR": "D"})
        assert record.first_of("DCA", "DAR") == "D"

    def test_first_of_none(self) -> None:
        assert ParsedRecord(raw="").first_of("DCA", "DAR") is None

    def test_looks_like_license_by_header(self) -> None:
        assert ParsedRecord(raw="", aamva=True).looks_like_license is True

    def test_looks_like_license_by_customer_id(self) -> None:
        assert ParsedRecord(raw="", elements={"DAQ": "1"}).looks_like_license is True

    def test_looks_like_license_false(self) -> None:
        assert ParsedRecord(raw="", elements={"XYZ": "1"}).looks_like_license is False


class TestNonAsciiDigits:
    def test_version_skips_arabic_indic_digits(self) -> None:
        record = parse_aamva("ANSI ٠٨ 636014 DL")
        assert record.version == "63"

    def test_version_absent_with_only_fullwidth_digits(self) -> None:
        assert parse_aamva("ANSI ０８ DL").version is None

    def test_issuer_id_requires_ascii_digits(self) -> None:
        assert parse_aamva("ANSI ６３６０１４ DL").issuer_id is None
        assert parse_aamva("@\nxx ٦٣٦٠١٤ DL").issuer_id is None
