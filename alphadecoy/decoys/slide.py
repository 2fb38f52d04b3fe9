"""Slide decoys: reflected-translation permutation of the target sequence.

``decoy[i] = target[permute(i, shift, L, has_initiator)]`` with the shift
starting at 20 and bumped by one when the (effective) length divides it.
A leading initiator methionine is pinned at position 1.

Annotations:
- Modifications: position p → permute(p - 1) + 1 (position 1 pinned)
- Proteolysis products: copied unchanged (length preserved)
- Disulfide bonds / splice sites: endpoints permuted without initiator
  pinning, relabeled "DECOY DISULFIDE BOND: ..." / "DECOY SPLICE SITE: ..."
- Sequence variants: runs slid within their own length, starting from the
  reference's adjusted shift (bumped for the original run, then carried
  into the variant run); the decoy range uses the mirror-based anchor of
  reverse decoys. Stop-gain variants get no special case here.

The variant anchor is mirror-based even though the residues were slid, not
reversed, so a slide decoy variant does not generally sit on the residues it
describes. Existing slide decoy databases were built this way and the
behavior is kept for reproducibility.
"""

import logging
from typing import List, Tuple

from ..constants import DECOY_IDENTIFIER, DEFAULT_SLIDE_SHIFT, INITIATOR_RESIDUE
from ..database.records import (
    BioPolymerRecord,
    DisulfideBond,
    ProteolysisProduct,
    SequenceVariation,
    SpliceSite,
)
from ..database.validation import validate_record
from .permutation import adjust_shift, permute, permute_run, slide_indices
from .variants import (
    assemble_decoy_record,
    initiator_change_label,
    mirror_variant_anchor,
    remap_modifications,
    remap_variant_modifications,
    variant_label,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Sequence and Positions
# =============================================================================

def sequence_shift(length: int, has_initiator: bool, shift: int = DEFAULT_SLIDE_SHIFT) -> int:
    """Shift for a whole sequence (adjusted on the permuted length).

    Examples
    --------
    >>> sequence_shift(10, False)
    21
    >>> sequence_shift(11, True)
    21
    >>> sequence_shift(10, True)
    20
    """
    return adjust_shift(shift, length - 1 if has_initiator else length)


def slide_sequence(sequence: str, shift: int = DEFAULT_SLIDE_SHIFT) -> str:
    """Slide a sequence, keeping a leading initiator methionine in place.

    Examples
    --------
    >>> slide_sequence("ABCDE")
    'BADCE'
    """
    has_initiator = sequence.startswith(INITIATOR_RESIDUE)
    effective_shift = sequence_shift(len(sequence), has_initiator, shift)
    indices = slide_indices(len(sequence), effective_shift, has_initiator)
    return ''.join(sequence[j] for j in indices)


def slide_position(position: int, length: int, has_initiator: bool, shift: int) -> int:
    """Move a one-based position through the permutation."""
    return int(permute(position - 1, shift, length, has_initiator)) + 1


def slide_endpoints(begin: int, end: int, length: int, shift: int):
    """Permute both endpoints without initiator pinning; ascending order."""
    first = slide_position(begin, length, False, shift)
    second = slide_position(end, length, False, shift)
    return min(first, second), max(first, second)


# =============================================================================
# Sequence Variants
# =============================================================================

def slide_variant_runs(original: str, variant: str, shift: int) -> Tuple[str, str]:
    """Slide the original and variant runs of a variant.

    The shift starts from the reference sequence's adjusted shift, is bumped
    for the original run's length, and the result carries over to the
    variant run, which bumps it again for its own length.

    Examples
    --------
    >>> slide_variant_runs("DEF", "KLM", 21)
    ('EFD', 'LMK')
    >>> slide_variant_runs("DEF", "KLM", 20)
    ('FDE', 'MKL')
    """
    original_shift = adjust_shift(shift, len(original))
    variant_shift = adjust_shift(original_shift, len(variant))
    return permute_run(original, original_shift), permute_run(variant, variant_shift)


def _slide_variant_position(position: int, variant_length: int, has_initiator: bool, shift: int) -> int:
    effective_shift = sequence_shift(variant_length, has_initiator, shift)
    return slide_position(position, variant_length, has_initiator, effective_shift)


def slide_sequence_variation(
    sv: SequenceVariation,
    reference_length: int,
    has_initiator: bool,
    shift: int = DEFAULT_SLIDE_SHIFT,
    decoy_identifier: str = DECOY_IDENTIFIER,
) -> List[SequenceVariation]:
    """Slide one sequence variant.

    Parameters
    ----------
    sv : SequenceVariation
        Target variant, in the coordinates of its reference sequence
    reference_length : int
        Length L of the reference sequence
    has_initiator : bool
        Whether the reference starts with the initiator methionine
    shift : int
        Shift of the reference sequence, already adjusted for its length
        (see sequence_shift()); bumped further for each run length
    decoy_identifier : str
        Prefix for the decoy descriptions

    Returns
    -------
    List[SequenceVariation]
        The decoy variant, preceded by a single-residue "Initiator
        Methionine Change" variant when the target variant loses the
        initiator methionine

    Examples
    --------
    >>> sv = SequenceVariation(1, 2, "MA", "V", "start lost")
    >>> [(v.begin, v.end, v.original_sequence, v.variant_sequence)
    ...  for v in slide_sequence_variation(sv, 8, True)]
    [(1, 1, 'M', ''), (8, 8, 'A', 'V')]
    """
    decoy_variations = []
    original = sv.original_sequence
    variant = sv.variant_sequence

    if sv.begin == 1:
        original_has_m = original.startswith(INITIATOR_RESIDUE)
        variant_has_m = variant.startswith(INITIATOR_RESIDUE)
        if original_has_m and not variant_has_m:
            decoy_variations.append(
                SequenceVariation(
                    1, 1, INITIATOR_RESIDUE, "",
                    initiator_change_label(decoy_identifier, sv.description),
                )
            )
        if original_has_m:
            original = original[1:]
        if variant_has_m:
            variant = variant[1:]

    begin, end = mirror_variant_anchor(sv.begin, sv.end, reference_length, len(original))
    slid_original, slid_variant = slide_variant_runs(original, variant, shift)

    modifications = remap_variant_modifications(
        sv,
        reference_length,
        has_initiator,
        lambda p, variant_length, pinned: _slide_variant_position(p, variant_length, pinned, shift),
    )

    decoy_variations.append(
        SequenceVariation(
            begin=begin,
            end=end,
            original_sequence=slid_original,
            variant_sequence=slid_variant,
            description=variant_label(decoy_identifier, sv.description),
            modifications=modifications,
        )
    )
    return decoy_variations


def slide_sequence_variations(
    variations: List[SequenceVariation],
    reference: BioPolymerRecord,
    shift: int = DEFAULT_SLIDE_SHIFT,
    decoy_identifier: str = DECOY_IDENTIFIER,
) -> List[SequenceVariation]:
    """Slide a list of variants against their reference record.

    ``shift`` is the starting shift; it is adjusted for the reference
    sequence once and every variant starts from that value.
    """
    has_initiator = reference.starts_with_initiator
    reference_shift = sequence_shift(reference.length, has_initiator, shift)
    decoy_variations = []
    for sv in variations:
        decoy_variations.extend(
            slide_sequence_variation(
                sv,
                reference.length,
                has_initiator,
                reference_shift,
                decoy_identifier,
            )
        )
    return decoy_variations


# =============================================================================
# Decoy Record
# =============================================================================

def generate_slide_decoy(
    record: BioPolymerRecord,
    decoy_identifier: str = DECOY_IDENTIFIER,
    validate: bool = True,
    shift: int = DEFAULT_SLIDE_SHIFT,
) -> BioPolymerRecord:
    """Generate the slide decoy of one record.

    Parameters
    ----------
    record : BioPolymerRecord
        Target record (never modified)
    decoy_identifier : str
        Prefix for the accession and annotation labels
    validate : bool
        Check annotation bounds first (raises InvalidRecordError)
    shift : int
        Starting slide distance (default: 20)

    Returns
    -------
    BioPolymerRecord
        Decoy with ``is_decoy=True``; the consensus record, if any, is slid
        the same way
    """
    if validate:
        validate_record(record)

    length = record.length
    has_initiator = record.starts_with_initiator
    effective_shift = sequence_shift(length, has_initiator, shift)

    modifications = remap_modifications(
        record.modifications,
        lambda p: slide_position(p, length, has_initiator, effective_shift),
    )

    proteolysis_products = [
        ProteolysisProduct(pp.begin, pp.end, pp.type)
        for pp in record.proteolysis_products
    ]

    disulfide_bonds = [
        DisulfideBond(
            *slide_endpoints(bond.begin, bond.end, length, effective_shift),
            f"{decoy_identifier} DISULFIDE BOND: {bond.description}",
        )
        for bond in record.disulfide_bonds
    ]

    splice_sites = [
        SpliceSite(
            *slide_endpoints(site.begin, site.end, length, effective_shift),
            f"{decoy_identifier} SPLICE SITE: {site.description}",
        )
        for site in record.splice_sites
    ]

    sequence_variations = slide_sequence_variations(
        record.sequence_variations, record.consensus_record, shift, decoy_identifier
    )
    applied_sequence_variations = slide_sequence_variations(
        record.applied_sequence_variations, record, shift, decoy_identifier
    )

    decoy_consensus = None
    if record.consensus is not None:
        decoy_consensus = generate_slide_decoy(record.consensus, decoy_identifier, validate, shift)

    logger.debug(
        f"Slide decoy for {record.accession} ({length} residues, shift {effective_shift})"
    )

    return assemble_decoy_record(
        record,
        decoy_identifier,
        sequence=slide_sequence(record.sequence, shift),
        modifications=modifications,
        proteolysis_products=proteolysis_products,
        disulfide_bonds=disulfide_bonds,
        splice_sites=splice_sites,
        sequence_variations=sequence_variations,
        applied_sequence_variations=applied_sequence_variations,
        consensus=decoy_consensus,
    )
