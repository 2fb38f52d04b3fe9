"""Reverse decoys with full annotation remapping.

The decoy sequence is the target read backwards, with a leading initiator
methionine kept at position 1. Every positional annotation is mirrored so it
still sits on the same residues:

- Modifications: mirror position (position 1 pinned with an initiator)
- Proteolysis products: mirrored range (kept as is with an initiator)
- Disulfide bonds: both endpoints mirrored
- Splice sites: four cases around the initiator
- Sequence variants: five cases around the initiator plus stop gain,
  reversed runs, variant-scoped modifications on the variant-applied length

Unapplied variants are mirrored through the consensus record, applied
variants through the record itself.

Examples
--------
>>> from alphadecoy.database.records import BioPolymerRecord
>>> decoy = generate_reverse_decoy(BioPolymerRecord("MABCDE", "P12345"))
>>> decoy.sequence, decoy.accession
('MEDCBA', 'DECOY_P12345')
"""

import logging
from typing import List

from ..constants import DECOY_IDENTIFIER, INITIATOR_RESIDUE, STOP_CODON
from ..database.records import (
    BioPolymerRecord,
    DisulfideBond,
    ProteolysisProduct,
    SequenceVariation,
    SpliceSite,
)
from ..database.validation import validate_record
from .coordinates import (
    reverse_bond,
    reverse_pinned_range,
    reverse_position,
    reverse_proteolysis_range,
    reverse_range,
    reverse_sequence,
    reverse_splice_site,
)
from .variants import (
    assemble_decoy_record,
    remap_modifications,
    remap_variant_modifications,
    variant_label,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Sequence Variants
# =============================================================================

def _reverse_stop_gain(
    sv: SequenceVariation,
    reference_length: int,
    has_initiator: bool,
    decoy_identifier: str,
) -> SequenceVariation:
    """Stop-gain variant: range kept, residues before the stop reversed.

    Examples
    --------
    >>> decoy = _reverse_stop_gain(SequenceVariation(3, 3, "E", "KR*"), 8, False, "DECOY")
    >>> decoy.begin, decoy.end, decoy.variant_sequence
    (3, 3, 'RK*')
    """
    modifications = {position: list(mods) for position, mods in sv.modifications.items()}
    mirrored = remap_variant_modifications(
        sv, reference_length, has_initiator, reverse_position
    )
    for position, mods in mirrored.items():
        modifications.setdefault(position, mods)

    return SequenceVariation(
        begin=sv.begin,
        end=sv.end,
        original_sequence=sv.original_sequence[::-1],
        variant_sequence=sv.variant_sequence[-2::-1] + STOP_CODON,
        description=variant_label(decoy_identifier, sv.description),
        modifications=modifications,
    )


def reverse_sequence_variation(
    sv: SequenceVariation,
    reference_length: int,
    has_initiator: bool,
    decoy_identifier: str = DECOY_IDENTIFIER,
) -> SequenceVariation:
    """Mirror one sequence variant into reverse decoy coordinates.

    Parameters
    ----------
    sv : SequenceVariation
        Target variant, in the coordinates of its reference sequence
    reference_length : int
        Length L of the reference sequence
    has_initiator : bool
        Whether the reference starts with the initiator methionine
    decoy_identifier : str
        Prefix for the decoy description

    Returns
    -------
    SequenceVariation
        Decoy variant with reversed runs

    Notes
    -----
    Cases, checked in order (runs are reversed residue by residue first):

    0. Stop gain (variant run ends with '*'): range kept as is, residues
       before the stop reversed with the stop kept last. Each variant
       modification stays at its own key and is also added at its mirrored
       key.
    1. Start loss (begin 1, original run of two or more residues starting
       with M, variant does not): range (L - end + 2, L); the trailing M is
       trimmed from the original run
    2. Variant at 1 starting with M, original longer than one residue:
       range (L - end + 2, L); one trailing residue trimmed from both runs
    3. Single-residue variant at 1 that involves M (initiator gain, or a
       single-residue start loss such as M -> V): range (1, 1), runs
       untrimmed. Applying case 1 here would give the empty range (L + 1, L).
    4. Reference starts with M, variant elsewhere: (L - end + 2, L - begin + 2)
    5. No initiator: (L - end + 1, L - begin + 1)

    Examples
    --------
    >>> sv = SequenceVariation(1, 2, "MA", "A", "startloss")
    >>> decoy = reverse_sequence_variation(sv, 8, False)
    >>> decoy.begin, decoy.end, decoy.original_sequence, decoy.variant_sequence
    (8, 8, 'A', 'A')
    """
    if sv.is_stop_gain:
        return _reverse_stop_gain(sv, reference_length, has_initiator, decoy_identifier)

    length = reference_length
    original = sv.original_sequence[::-1]
    variant = sv.variant_sequence[::-1]

    at_start = sv.begin == 1
    original_has_m = sv.original_sequence.startswith(INITIATOR_RESIDUE)
    variant_has_m = sv.variant_sequence.startswith(INITIATOR_RESIDUE)
    multi_residue = len(sv.original_sequence) > 1

    if at_start and original_has_m and not variant_has_m and multi_residue:
        begin, end = length - sv.end + 2, length
        original = original[:-1]
    elif at_start and variant_has_m and multi_residue:
        begin, end = length - sv.end + 2, length
        original = original[:-1]
        variant = variant[:-1]
    elif at_start and (variant_has_m or original_has_m):
        begin, end = 1, 1
    elif has_initiator:
        begin, end = reverse_pinned_range(sv.begin, sv.end, length)
    else:
        begin, end = reverse_range(sv.begin, sv.end, length)

    modifications = remap_variant_modifications(
        sv, reference_length, has_initiator, reverse_position
    )

    return SequenceVariation(
        begin=begin,
        end=end,
        original_sequence=original,
        variant_sequence=variant,
        description=variant_label(decoy_identifier, sv.description),
        modifications=modifications,
    )


def reverse_sequence_variations(
    variations: List[SequenceVariation],
    reference: BioPolymerRecord,
    decoy_identifier: str = DECOY_IDENTIFIER,
) -> List[SequenceVariation]:
    """Mirror a list of variants through their reference record."""
    return [
        reverse_sequence_variation(
            sv, reference.length, reference.starts_with_initiator, decoy_identifier
        )
        for sv in variations
    ]


# =============================================================================
# Decoy Record
# =============================================================================

def generate_reverse_decoy(
    record: BioPolymerRecord,
    decoy_identifier: str = DECOY_IDENTIFIER,
    validate: bool = True,
) -> BioPolymerRecord:
    """Generate the reverse decoy of one record.

    Parameters
    ----------
    record : BioPolymerRecord
        Target record (never modified)
    decoy_identifier : str
        Prefix for the accession ("DECOY_P12345") and annotation labels
    validate : bool
        Check annotation bounds first (raises InvalidRecordError)

    Returns
    -------
    BioPolymerRecord
        Decoy with ``is_decoy=True``. If the target has a consensus record,
        the decoy's consensus is the reverse decoy of that record.
    """
    if validate:
        validate_record(record)

    length = record.length
    has_initiator = record.starts_with_initiator

    modifications = remap_modifications(
        record.modifications,
        lambda p: reverse_position(p, length, has_initiator),
    )

    proteolysis_products = [
        ProteolysisProduct(
            *reverse_proteolysis_range(pp.begin, pp.end, length, has_initiator),
            f"{decoy_identifier} {pp.type}",
        )
        for pp in record.proteolysis_products
    ]

    disulfide_bonds = [
        DisulfideBond(
            *reverse_bond(bond.begin, bond.end, length, has_initiator),
            f"{decoy_identifier} {bond.description}",
        )
        for bond in record.disulfide_bonds
    ]

    splice_sites = [
        SpliceSite(
            *reverse_splice_site(site.begin, site.end, length, has_initiator),
            f"{decoy_identifier} {site.description}",
        )
        for site in record.splice_sites
    ]

    sequence_variations = reverse_sequence_variations(
        record.sequence_variations, record.consensus_record, decoy_identifier
    )
    applied_sequence_variations = reverse_sequence_variations(
        record.applied_sequence_variations, record, decoy_identifier
    )

    decoy_consensus = None
    if record.consensus is not None:
        decoy_consensus = generate_reverse_decoy(record.consensus, decoy_identifier, validate)

    logger.debug(f"Reverse decoy for {record.accession} ({length} residues)")

    return assemble_decoy_record(
        record,
        decoy_identifier,
        sequence=reverse_sequence(record.sequence),
        modifications=modifications,
        proteolysis_products=proteolysis_products,
        disulfide_bonds=disulfide_bonds,
        splice_sites=splice_sites,
        sequence_variations=sequence_variations,
        applied_sequence_variations=applied_sequence_variations,
        consensus=decoy_consensus,
    )
