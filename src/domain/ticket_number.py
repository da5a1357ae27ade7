"""Ticket Number Codec

Ticket numbers are two uppercase letters followed by eight digits
(``AB00001234``). Ranges of numbers are handed to managers as blocks of
pre-printed tickets.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple
from libs.result import Result, Return, Error

TICKET_NUMBER_PATTERN = re.compile(r"([A-Z]{2})([0-9]{8})", re.ASCII)
TICKET_NUMBER_LENGTH = 10
TICKET_NUMBER_DIGITS = 8
MAX_TICKET_NUM = 10 ** TICKET_NUMBER_DIGITS - 1
MAX_RANGE_SIZE = 10000

INVALID_RANGE_CODE = "INVALID_TICKET_RANGE"
START_FORMAT_MESSAGE = "Range start must match AA00000000 (2 letters + 8 digits)"
END_FORMAT_MESSAGE = "Range end must match AA00000000 (2 letters + 8 digits)"
PREFIX_MISMATCH_MESSAGE = "Range start and end must share the same 2-letter prefix"
REVERSED_RANGE_MESSAGE = "Range start cannot be greater than range end"
RANGE_TOO_LARGE_MESSAGE = f"A range may contain at most {MAX_RANGE_SIZE} tickets"


@dataclass(frozen=True)
class TicketId:
    """Structured ticket number: letter prefix and numeric suffix"""

    prefix: str
    num: int

    def __post_init__(self):
        if len(self.prefix) != 2 or not self.prefix.isascii() or not self.prefix.isalpha() \
                or not self.prefix.isupper():
            raise ValueError(f"Invalid ticket prefix: {self.prefix!r}")
        if not 0 <= self.num <= MAX_TICKET_NUM:
            raise ValueError(f"Ticket number out of range: {self.num}")

    def __str__(self) -> str:
        return format_ticket_number(self)


def parse_ticket_number(value: str) -> Optional[TicketId]:
    """Parse a ticket number case-insensitively, None when malformed"""
    # Length and charset first: str.upper() can expand non-ASCII letters
    if not isinstance(value, str) or len(value) != TICKET_NUMBER_LENGTH or not value.isascii():
        return None
    match = TICKET_NUMBER_PATTERN.fullmatch(value.upper())
    if not match:
        return None
    return TicketId(prefix=match.group(1), num=int(match.group(2)))


def format_ticket_number(ticket_id: TicketId) -> str:
    return f"{ticket_id.prefix}{ticket_id.num:0{TICKET_NUMBER_DIGITS}d}"


def normalize_ticket_number(value: Optional[str]) -> str:
    return str(value or "").strip().upper()


def validate_ticket_range(start: str, end: str) -> Result[Tuple[TicketId, TicketId]]:
    """
    Validate a ticket range before it is handed to a manager

    Args:
        start: First ticket number (inclusive)
        end: Last ticket number (inclusive)

    Returns:
        Result with the parsed (start, end) pair, or an INVALID_TICKET_RANGE
        error whose message names the violated rule
    """
    start_id = parse_ticket_number(normalize_ticket_number(start))
    if start_id is None:
        return Return.err(Error(code=INVALID_RANGE_CODE, message=START_FORMAT_MESSAGE))

    end_id = parse_ticket_number(normalize_ticket_number(end))
    if end_id is None:
        return Return.err(Error(code=INVALID_RANGE_CODE, message=END_FORMAT_MESSAGE))

    if start_id.prefix != end_id.prefix:
        return Return.err(Error(code=INVALID_RANGE_CODE, message=PREFIX_MISMATCH_MESSAGE))

    if start_id.num > end_id.num:
        return Return.err(Error(code=INVALID_RANGE_CODE, message=REVERSED_RANGE_MESSAGE))

    if end_id.num - start_id.num + 1 > MAX_RANGE_SIZE:
        return Return.err(
            Error(
                code=INVALID_RANGE_CODE,
                message=RANGE_TOO_LARGE_MESSAGE,
                reason=f"size={end_id.num - start_id.num + 1}",
            )
        )

    return Return.ok((start_id, end_id))


def numbers_in_range(start: str, end: str) -> Iterator[str]:
    """Yield every ticket number from start to end, nothing if the pair is invalid"""
    start_id = parse_ticket_number(start)
    end_id = parse_ticket_number(end)
    if not start_id or not end_id or start_id.prefix != end_id.prefix or start_id.num > end_id.num:
        return
    for num in range(start_id.num, end_id.num + 1):
        yield format_ticket_number(TicketId(start_id.prefix, num))


def is_ticket_in_range(ticket: str, start: str, end: str) -> bool:
    ticket_id = parse_ticket_number(ticket)
    start_id = parse_ticket_number(start)
    end_id = parse_ticket_number(end)
    if not ticket_id or not start_id or not end_id:
        return False
    if ticket_id.prefix != start_id.prefix or start_id.prefix != end_id.prefix:
        return False
    return start_id.num <= ticket_id.num <= end_id.num


def first_overlap(start: str, end: str, other_start: str, other_end: str) -> Optional[str]:
    """First number of start..end that also lies in other_start..other_end"""
    a, b = parse_ticket_number(start), parse_ticket_number(end)
    c, d = parse_ticket_number(other_start), parse_ticket_number(other_end)
    if not (a and b and c and d):
        return None
    if not (a.prefix == b.prefix == c.prefix == d.prefix):
        return None
    low = max(a.num, c.num)
    if low > min(b.num, d.num):
        return None
    return format_ticket_number(TicketId(a.prefix, low))
