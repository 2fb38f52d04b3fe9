"""Helpers shared by the reverse and slide transforms.

- Moving position-keyed modification maps through a coordinate mapper
- Variant-scoped modifications (measured on the variant-applied length)
- The mirror-based anchor used for slide decoy variants
- Decoy label formatting and decoy record assembly
"""

import logging
from typing import Callable, List, Optional, Tuple

from ..constants import INITIATOR_RESIDUE, N_TERMINAL_POSITION
from ..database.records import (
    BioPolymerRecord,
    DisulfideBond,
    ProteolysisProduct,
    SequenceVariation,
    SpliceSite,
)
from ..modifications import ModificationMap

logger = logging.getLogger(__name__)

# (one-based position, sequence length, has_initiator) -> one-based position
PositionMapper = Callable[[int, int, bool], int]


def remap_modifications(
    modifications: ModificationMap,
    mapper: Callable[[int], int],
) -> ModificationMap:
    """Move every key of a modification map, copying the value lists.

    Keys mapping onto the same decoy position have their lists merged
    (a warning is logged; modification entries are never dropped).
    """
    remapped: ModificationMap = {}
    for position, mods in modifications.items():
        new_position = mapper(position)
        if new_position in remapped:
            logger.warning(
                f"Modification positions collide at decoy position {new_position}; merging"
            )
            remapped[new_position].extend(mods)
        else:
            remapped[new_position] = list(mods)
    return remapped


def remap_variant_modifications(
    sv: SequenceVariation,
    reference_length: int,
    has_initiator: bool,
    mapper: PositionMapper,
) -> ModificationMap:
    """Move variant-scoped modifications into decoy coordinates.

    Positions are measured on the variant-applied sequence, whose length is
    ``reference_length + len(variant) - len(original)``. The N-terminal
    position stays at 1 when the allele keeps an initiator methionine there:
    either the reference starts with one, or the variant itself places one at
    position 1.
    """
    variant_length = sv.variant_applied_length(reference_length)
    gains_initiator = sv.begin == 1 and sv.variant_sequence.startswith(INITIATOR_RESIDUE)

    def _map(position: int) -> int:
        if position == N_TERMINAL_POSITION and (has_initiator or gains_initiator):
            return N_TERMINAL_POSITION
        return mapper(position, variant_length, has_initiator)

    return remap_modifications(sv.modifications, _map)


def mirror_variant_anchor(
    begin: int,
    end: int,
    reference_length: int,
    original_run_length: int,
) -> Tuple[int, int]:
    """Mirror-based decoy range of a variant.

    ``end' = L - begin + 2 + [end == L] - [begin == 1]`` and
    ``begin' = end' - original_run_length + 1``, where
    ``original_run_length`` is the length of the (possibly trimmed) original
    run written into the decoy variant.

    Examples
    --------
    >>> mirror_variant_anchor(3, 3, 10, 1)
    (9, 9)
    >>> mirror_variant_anchor(8, 10, 10, 3)
    (3, 5)
    """
    decoy_end = (
        reference_length
        - begin
        + 2
        + int(end == reference_length)
        - int(begin == 1)
    )
    decoy_begin = decoy_end - original_run_length + 1
    return decoy_begin, decoy_end


def variant_label(decoy_identifier: str, description: str) -> str:
    return f"{decoy_identifier} VARIANT: {description}"


def initiator_change_label(decoy_identifier: str, description: str) -> str:
    return f"{decoy_identifier} VARIANT: Initiator Methionine Change in {description}"


def assemble_decoy_record(
    source: BioPolymerRecord,
    decoy_identifier: str,
    sequence: str,
    modifications: ModificationMap,
    proteolysis_products: List[ProteolysisProduct],
    disulfide_bonds: List[DisulfideBond],
    splice_sites: List[SpliceSite],
    sequence_variations: List[SequenceVariation],
    applied_sequence_variations: List[SequenceVariation],
    consensus: Optional[BioPolymerRecord] = None,
) -> BioPolymerRecord:
    """Build a decoy record: new sequence and annotations, copied descriptors."""
    return BioPolymerRecord(
        sequence=sequence,
        accession=f"{decoy_identifier}_{source.accession}",
        organism=source.organism,
        name=source.name,
        full_name=source.full_name,
        gene_names=list(source.gene_names),
        modifications=modifications,
        proteolysis_products=proteolysis_products,
        disulfide_bonds=disulfide_bonds,
        splice_sites=splice_sites,
        sequence_variations=sequence_variations,
        applied_sequence_variations=applied_sequence_variations,
        is_contaminant=source.is_contaminant,
        is_decoy=True,
        sample_name=source.sample_name,
        database_file_path=source.database_file_path,
        consensus=consensus,
    )
