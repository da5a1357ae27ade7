"""Range Allocator

Computes which ticket numbers of a manager's ranges are still free.
"""

from typing import FrozenSet, Iterable, Iterator, Sequence, Tuple
from src.domain.ticket_number import numbers_in_range


class AvailableTicketNumbers:
    """
    Restartable view over the unused numbers of a set of ranges

    Numbers come out range by range, in the order the ranges were given,
    ascending inside each range. Every call to iter() starts over from the
    same inputs; nothing is reserved or mutated.

    Usage:
        available = AvailableTicketNumbers([("AA00000001", "AA00000005")], {"AA00000003"})
        list(available)  # ["AA00000001", "AA00000002", "AA00000004", "AA00000005"]
    """

    def __init__(self, ranges: Iterable[Tuple[str, str]], used: Iterable[str]):
        self._ranges: Sequence[Tuple[str, str]] = tuple(ranges)
        self._used: FrozenSet[str] = frozenset(used)

    def __iter__(self) -> Iterator[str]:
        for start, end in self._ranges:
            for number in numbers_in_range(start, end):
                if number not in self._used:
                    yield number
