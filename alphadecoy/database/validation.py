"""Record validation and target/decoy sanity checks.

Decoys are a null model: a decoy with silently corrupted coordinates is worse
than no decoy at all. ``validate_record`` therefore rejects any annotation
that points outside its sequence before a transform touches it.

Also provides checks on finished decoys:
- Palindromic sequences (reverse decoy identical to its target)
- Residue composition and mass preservation
"""

import logging
from collections import Counter
from typing import List, Optional, Tuple

from ..constants import AA_MASSES_DICT, AA_MASSES_NONSTANDARD, DECOY_MASS_TOLERANCE, H2O_MASS
from ..modifications import ModificationMap
from .records import BioPolymerRecord, SequenceVariation

logger = logging.getLogger(__name__)


class InvalidRecordError(ValueError):
    """A record annotation references a position outside its sequence."""


# =============================================================================
# Record Validation
# =============================================================================

def _check_modification_positions(
    modifications: ModificationMap,
    length: int,
    what: str,
) -> List[str]:
    return [
        f"{what} modification at position {position} outside 1..{length}"
        for position in modifications
        if not 1 <= position <= length
    ]


def _check_range(begin: int, end: int, length: int, what: str, ordered: bool = True) -> List[str]:
    problems = []
    if not (1 <= begin <= length and 1 <= end <= length):
        problems.append(f"{what} ({begin}, {end}) outside 1..{length}")
    elif ordered and begin > end:
        problems.append(f"{what} ({begin}, {end}) has begin > end")
    return problems


def _check_variations(
    variations: List[SequenceVariation],
    reference_length: int,
    what: str,
) -> List[str]:
    problems = []
    for sv in variations:
        label = f"{what} variant {sv.original_sequence}->{sv.variant_sequence}"
        problems.extend(_check_range(sv.begin, sv.end, reference_length, label))
        problems.extend(
            _check_modification_positions(
                sv.modifications,
                sv.variant_applied_length(reference_length),
                label,
            )
        )
    return problems


def find_record_problems(record: BioPolymerRecord) -> List[str]:
    """List every out-of-bounds annotation in a record.

    Parameters
    ----------
    record : BioPolymerRecord
        Record to check

    Returns
    -------
    problems : List[str]
        Human-readable descriptions (empty if the record is consistent)

    Notes
    -----
    Unapplied variants are checked against the consensus record's length,
    applied variants against the record's own length. Variant-scoped
    modifications are checked against the variant-applied length.
    """
    length = record.length
    problems = _check_modification_positions(record.modifications, length, "record")

    for pp in record.proteolysis_products:
        problems.extend(_check_range(pp.begin, pp.end, length, f"proteolysis product {pp.type!r}"))
    for bond in record.disulfide_bonds:
        problems.extend(
            _check_range(bond.begin, bond.end, length, "disulfide bond", ordered=False)
        )
    for site in record.splice_sites:
        problems.extend(_check_range(site.begin, site.end, length, "splice site"))

    problems.extend(
        _check_variations(record.sequence_variations, record.consensus_record.length, "unapplied")
    )
    problems.extend(
        _check_variations(record.applied_sequence_variations, length, "applied")
    )
    return problems


def validate_record(record: BioPolymerRecord) -> None:
    """Raise InvalidRecordError if any annotation is out of bounds.

    Examples
    --------
    >>> validate_record(BioPolymerRecord("PEPTIDE", "P1"))  # passes silently
    """
    problems = find_record_problems(record)
    if problems:
        raise InvalidRecordError(
            f"Record {record.accession} has {len(problems)} invalid annotation(s): "
            + "; ".join(problems)
        )


# =============================================================================
# Decoy Sanity Checks
# =============================================================================

def is_palindromic(sequence: Optional[str], degree_cutoff: Optional[int] = None) -> Tuple[bool, int]:
    """Check whether a sequence reads the same from both ends.

    Parameters
    ----------
    sequence : str or None
        Sequence to check
    degree_cutoff : int, optional
        Minimum number of mirrored residues (counted from the termini inward)
        to call the sequence palindromic. If None, the whole sequence must
        be a palindrome.

    Returns
    -------
    palindromic : bool
    degree : int
        Number of residue pairs matching from the termini inward (the middle
        residue of odd-length sequences counts as a match)

    Examples
    --------
    >>> is_palindromic("AABBAA")
    (True, 3)
    >>> is_palindromic("ABCDEFCBA")
    (False, 3)
    >>> is_palindromic("ABCDEFCBA", degree_cutoff=3)
    (True, 3)
    """
    if not sequence:
        return False, 0

    half = (len(sequence) + 1) // 2
    degree = 0
    for i in range(half):
        if sequence[i] != sequence[-1 - i]:
            break
        degree += 1

    if degree_cutoff is None:
        return degree == half, degree
    return degree >= degree_cutoff, degree


def has_same_composition(target: str, decoy: str) -> bool:
    """True if target and decoy contain the same residues in any order."""
    return Counter(target) == Counter(decoy)


def calculate_neutral_mass(sequence: str) -> float:
    """Unmodified neutral mass (residues + H2O), unknown symbols count as 0."""
    total = 0.0
    for aa in sequence:
        total += AA_MASSES_DICT.get(aa, AA_MASSES_NONSTANDARD.get(aa, 0.0))
    return total + H2O_MASS


def validate_decoy_mass(target: str, decoy: str) -> bool:
    """Validate that decoy has same mass as target.

    Examples
    --------
    >>> validate_decoy_mass("MPEPTIDEK", "MKEDITPEP")
    True
    """
    target_mass = calculate_neutral_mass(target)
    decoy_mass = calculate_neutral_mass(decoy)
    mass_diff = abs(target_mass - decoy_mass)

    if mass_diff > DECOY_MASS_TOLERANCE:
        logger.warning(
            f"Decoy mass mismatch: {target} ({target_mass:.4f} Da) → "
            f"{decoy} ({decoy_mass:.4f} Da), diff = {mass_diff:.4f} Da"
        )
        return False

    return True
