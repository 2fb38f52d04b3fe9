"""Decoy record generation (reverse and slide).

Target records go in, decoy records with every positional annotation
remapped come out:
- Reverse: mirror-image sequence, initiator methionine pinned
- Slide: reflected-translation permutation, initiator methionine pinned
- Modifications, proteolysis products, disulfide bonds, splice sites,
  unapplied and applied sequence variants all follow their residues
"""

from .permutation import (
    permute,
    slide_indices,
    adjust_shift,
    permute_run,
)

from .coordinates import (
    reverse_sequence,
    reverse_position,
    reverse_bond,
    reverse_splice_site,
    reverse_proteolysis_range,
)

from .reverse import (
    reverse_sequence_variation,
    generate_reverse_decoy,
)

from .slide import (
    slide_sequence,
    slide_position,
    slide_sequence_variation,
    slide_variant_runs,
    generate_slide_decoy,
)

from .generator import (
    DecoyType,
    DecoyGenerationParams,
    DecoyGenerator,
    UnsupportedDecoyTypeError,
    generate_decoys,
)

__all__ = [
    # Permutation
    'permute',
    'slide_indices',
    'adjust_shift',
    'permute_run',

    # Reverse coordinates
    'reverse_sequence',
    'reverse_position',
    'reverse_bond',
    'reverse_splice_site',
    'reverse_proteolysis_range',

    # Transforms
    'reverse_sequence_variation',
    'generate_reverse_decoy',
    'slide_sequence',
    'slide_position',
    'slide_sequence_variation',
    'slide_variant_runs',
    'generate_slide_decoy',

    # Orchestration
    'DecoyType',
    'DecoyGenerationParams',
    'DecoyGenerator',
    'UnsupportedDecoyTypeError',
    'generate_decoys',
]
