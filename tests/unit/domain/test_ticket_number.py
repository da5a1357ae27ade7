"""Unit tests for the ticket number codec"""

import pytest
from src.domain.ticket_number import (
    END_FORMAT_MESSAGE,
    INVALID_RANGE_CODE,
    PREFIX_MISMATCH_MESSAGE,
    RANGE_TOO_LARGE_MESSAGE,
    REVERSED_RANGE_MESSAGE,
    START_FORMAT_MESSAGE,
    TicketId,
    first_overlap,
    format_ticket_number,
    is_ticket_in_range,
    numbers_in_range,
    parse_ticket_number,
    validate_ticket_range,
)


class TestParseTicketNumber:

    def test_parses_prefix_and_number(self):
        assert parse_ticket_number("AB00001234") == TicketId(prefix="AB", num=1234)

    def test_parse_is_case_insensitive(self):
        assert parse_ticket_number("ab00001234") == TicketId(prefix="AB", num=1234)

    @pytest.mark.parametrize(
        "value",
        [
            "", "A00000001", "AAA0000001", "AA0000001", "AA000000001", "11AA000000", "AA0000000X", " AA00000001",
            "AA00000001\n",
            "AA\u0660\u0660\u0660\u0660\u0660\u0660\u0660\u0661",  # Arabic-Indic digits
            "AA\uff10\uff10\uff10\uff10\uff10\uff10\uff10\uff11",  # fullwidth digits
            "\u00df00000001",  # upper-cases to SS
        ],
    )
    def test_malformed_values_return_none(self, value):
        assert parse_ticket_number(value) is None

    def test_non_string_returns_none(self):
        assert parse_ticket_number(None) is None
        assert parse_ticket_number(12345678) is None


class TestFormatTicketNumber:

    def test_pads_number_to_eight_digits(self):
        assert format_ticket_number(TicketId("ZZ", 7)) == "ZZ00000007"

    def test_parse_of_format_is_identity(self):
        for ticket_id in (TicketId("AA", 0), TicketId("QX", 42), TicketId("ZZ", 99999999)):
            assert parse_ticket_number(format_ticket_number(ticket_id)) == ticket_id

    def test_str_is_canonical_form(self):
        assert str(TicketId("CD", 120)) == "CD00000120"


class TestTicketId:

    @pytest.mark.parametrize("prefix", ["A", "ABC", "ab", "A1", "ÄB"])
    def test_rejects_invalid_prefix(self, prefix):
        with pytest.raises(ValueError):
            TicketId(prefix, 1)

    @pytest.mark.parametrize("num", [-1, 100000000])
    def test_rejects_number_out_of_range(self, num):
        with pytest.raises(ValueError):
            TicketId("AA", num)

    def test_is_immutable(self):
        ticket_id = TicketId("AA", 1)
        with pytest.raises(Exception):
            ticket_id.num = 2


class TestValidateTicketRange:

    def test_valid_range_returns_parsed_pair(self):
        result = validate_ticket_range("AA00000001", "AA00000010")

        assert result.is_ok()
        assert result.value == (TicketId("AA", 1), TicketId("AA", 10))

    def test_inputs_are_trimmed_and_upper_cased(self):
        result = validate_ticket_range("  aa00000001 ", "aa00000002")

        assert result.is_ok()
        assert result.value[0] == TicketId("AA", 1)

    def test_single_ticket_range_is_valid(self):
        assert validate_ticket_range("AA00000005", "AA00000005").is_ok()

    def test_malformed_start(self):
        result = validate_ticket_range("A00000001", "AA00000010")

        assert result.is_err()
        assert result.error.code == INVALID_RANGE_CODE
        assert result.error.message == START_FORMAT_MESSAGE

    def test_malformed_end(self):
        result = validate_ticket_range("AA00000001", None)

        assert result.error.message == END_FORMAT_MESSAGE

    def test_non_ascii_digits_are_malformed(self):
        result = validate_ticket_range("AA00000001", "AA\u0660\u0660\u0660\u0660\u0660\u0660\u0661\u0660")

        assert result.is_err()
        assert result.error.message == END_FORMAT_MESSAGE

    def test_prefix_mismatch(self):
        result = validate_ticket_range("AA00000001", "BB00000010")

        assert result.is_err()
        assert result.error.message == PREFIX_MISMATCH_MESSAGE

    def test_reversed_range(self):
        result = validate_ticket_range("AA00000010", "AA00000001")

        assert result.error.message == REVERSED_RANGE_MESSAGE

    def test_span_of_exactly_ten_thousand_is_valid(self):
        assert validate_ticket_range("AA00000001", "AA00010000").is_ok()

    def test_span_over_ten_thousand_is_too_large(self):
        result = validate_ticket_range("AA00000001", "AA00010001")

        assert result.is_err()
        assert result.error.message == RANGE_TOO_LARGE_MESSAGE

    def test_every_failure_has_a_distinct_message(self):
        messages = {
            validate_ticket_range("bad", "AA00000001").error.message,
            validate_ticket_range("AA00000001", "bad").error.message,
            validate_ticket_range("AA00000001", "BB00000001").error.message,
            validate_ticket_range("AA00000002", "AA00000001").error.message,
            validate_ticket_range("AA00000001", "AA00020000").error.message,
        }
        assert len(messages) == 5


class TestNumbersInRange:

    def test_yields_ascending_canonical_numbers(self):
        assert list(numbers_in_range("AA00000001", "AA00000005")) == [
            "AA00000001",
            "AA00000002",
            "AA00000003",
            "AA00000004",
            "AA00000005",
        ]

    def test_invalid_pair_yields_nothing(self):
        assert list(numbers_in_range("AA00000005", "AA00000001")) == []
        assert list(numbers_in_range("AA00000001", "BB00000005")) == []
        assert list(numbers_in_range("oops", "AA00000005")) == []

    def test_is_lazy(self):
        numbers = numbers_in_range("AA00000000", "AA99999999")
        assert next(numbers) == "AA00000000"
        assert next(numbers) == "AA00000001"


class TestIsTicketInRange:

    def test_inclusive_bounds(self):
        assert is_ticket_in_range("AA00000001", "AA00000001", "AA00000005")
        assert is_ticket_in_range("AA00000005", "AA00000001", "AA00000005")

    def test_outside_or_other_prefix(self):
        assert not is_ticket_in_range("AA00000006", "AA00000001", "AA00000005")
        assert not is_ticket_in_range("AB00000003", "AA00000001", "AA00000005")
        assert not is_ticket_in_range("junk", "AA00000001", "AA00000005")


class TestFirstOverlap:

    def test_returns_lowest_shared_number(self):
        assert first_overlap("AA00000005", "AA00000020", "AA00000010", "AA00000030") == "AA00000010"
        assert first_overlap("AA00000010", "AA00000030", "AA00000005", "AA00000020") == "AA00000010"

    def test_disjoint_ranges(self):
        assert first_overlap("AA00000001", "AA00000005", "AA00000006", "AA00000010") is None

    def test_different_prefixes_never_overlap(self):
        assert first_overlap("AA00000001", "AA00000005", "BB00000001", "BB00000005") is None
