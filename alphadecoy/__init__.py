"""alphadecoy - Decoy sequence generation for proteomics databases.

Derives reverse and slide decoy records from target protein records for
target-decoy FDR estimation. Every positional annotation (modifications,
proteolysis products, disulfide bonds, splice sites, sequence variants) is
remapped onto the decoy, and the initiator methionine stays at position 1.

All transforms are deterministic; decoys are reproducible across runs.
"""

__version__ = "0.1.0"

from alphadecoy import database
from alphadecoy import decoys
from alphadecoy import modifications
from alphadecoy import convenience

from alphadecoy.database import BioPolymerRecord, SequenceVariation
from alphadecoy.decoys import DecoyType, generate_decoys

__all__ = [
    "database",
    "decoys",
    "modifications",
    "convenience",
    "BioPolymerRecord",
    "SequenceVariation",
    "DecoyType",
    "generate_decoys",
]
