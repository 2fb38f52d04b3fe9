"""Mirror-image coordinate rules for reverse decoys.

A reverse decoy reads the target backwards, except that a leading initiator
methionine stays at position 1. Every one-based position ``p`` of a target of
length ``L`` therefore has a mirror position:

- no initiator:   p → L - p + 1
- with initiator: 1 → 1, p → L - p + 2 (p > 1)

Ranges map to ranges of the same length with begin and end swapped through
the mirror.
"""

from typing import Tuple

from ..constants import INITIATOR_RESIDUE, N_TERMINAL_POSITION


def reverse_sequence(sequence: str) -> str:
    """Reverse a sequence, keeping a leading initiator methionine in place.

    Examples
    --------
    >>> reverse_sequence("MABCDE")
    'MEDCBA'
    >>> reverse_sequence("ABCDE")
    'EDCBA'
    """
    if sequence.startswith(INITIATOR_RESIDUE):
        return sequence[0] + sequence[:0:-1]
    return sequence[::-1]


def reverse_position(position: int, length: int, has_initiator: bool) -> int:
    """Mirror a one-based position.

    Examples
    --------
    >>> reverse_position(3, 6, True)
    5
    >>> reverse_position(1, 6, True)
    1
    >>> reverse_position(2, 5, False)
    4
    """
    if has_initiator:
        if position == N_TERMINAL_POSITION:
            return N_TERMINAL_POSITION
        return length - position + 2
    return length - position + 1


def reverse_range(begin: int, end: int, length: int) -> Tuple[int, int]:
    """Mirror an inclusive range through the whole sequence (no pinning)."""
    return length - end + 1, length - begin + 1


def reverse_pinned_range(begin: int, end: int, length: int) -> Tuple[int, int]:
    """Mirror an inclusive range that lies after a pinned initiator."""
    return length - end + 2, length - begin + 2


def reverse_bond(begin: int, end: int, length: int, has_initiator: bool) -> Tuple[int, int]:
    """Mirror both endpoints of a disulfide bond, returned in ascending order.

    A bond from the initiator (begin == 1) stays anchored at 1 while its
    partner moves to ``L - end + 2``.

    Examples
    --------
    >>> reverse_bond(2, 5, 8, False)
    (4, 7)
    >>> reverse_bond(1, 5, 8, True)
    (1, 5)
    """
    first = reverse_position(begin, length, has_initiator)
    second = reverse_position(end, length, has_initiator)
    return min(first, second), max(first, second)


def reverse_splice_site(begin: int, end: int, length: int, has_initiator: bool) -> Tuple[int, int]:
    """Mirror a splice site range.

    Four cases:
    1. Initiator present and site is exactly (1, 1): unchanged
    2. Initiator present and site starts at 1: length-preserving swap to
       ``(L - end + 1, L)``, not anchored at residue 1
    3. Initiator present, site after residue 1: mirror with +2 offset
    4. No initiator: mirror with +1 offset

    Examples
    --------
    >>> reverse_splice_site(1, 3, 10, True)
    (8, 10)
    >>> reverse_splice_site(4, 6, 10, True)
    (6, 8)
    >>> reverse_splice_site(4, 6, 10, False)
    (5, 7)
    """
    if has_initiator and begin == 1 and end == 1:
        return 1, 1
    if has_initiator and begin == 1:
        new_end = length - begin + 1
        return new_end - end + begin, new_end
    if has_initiator:
        return reverse_pinned_range(begin, end, length)
    return reverse_range(begin, end, length)


def reverse_proteolysis_range(begin: int, end: int, length: int, has_initiator: bool) -> Tuple[int, int]:
    """Mirror a proteolysis product range.

    With an initiator the product boundaries already describe fixed terminal
    fragments (initiator removal, signal peptide) and are kept as is.

    Examples
    --------
    >>> reverse_proteolysis_range(2, 10, 10, True)
    (2, 10)
    >>> reverse_proteolysis_range(1, 4, 10, False)
    (7, 10)
    """
    if has_initiator:
        return begin, end
    return reverse_range(begin, end, length)
