"""Sequence records and record validation.

Records are in-memory snapshots produced by database loaders:
- BioPolymerRecord with modifications, proteolysis products, disulfide
  bonds, splice sites and sequence variants (all one-based)
- Bounds validation before decoy generation
- Target/decoy sanity checks (palindromes, composition, mass)
"""

from .records import (
    BioPolymerRecord,
    SequenceVariation,
    ProteolysisProduct,
    DisulfideBond,
    SpliceSite,
)

from .validation import (
    InvalidRecordError,
    find_record_problems,
    validate_record,
    is_palindromic,
    has_same_composition,
    validate_decoy_mass,
)

__all__ = [
    # Records
    'BioPolymerRecord',
    'SequenceVariation',
    'ProteolysisProduct',
    'DisulfideBond',
    'SpliceSite',

    # Validation
    'InvalidRecordError',
    'find_record_problems',
    'validate_record',
    'is_palindromic',
    'has_same_composition',
    'validate_decoy_mass',
]
