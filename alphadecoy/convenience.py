"""Convenience wrappers for bare sequences.

Use these when you only have sequence strings (e.g. from read_fasta-style
tuples) and no annotations to remap. For full records with modifications
and variants, use alphadecoy.decoys.generate_decoys().

Examples
--------
>>> reverse_decoy_sequence("MPEPTIDEK")
'MKEDITPEP'

>>> generate_sequence_decoys(["ABCDE", "MABCDE"], method="reverse")
['EDCBA', 'MEDCBA']
"""

import logging
from typing import List, Tuple

from .constants import DECOY_IDENTIFIER, DEFAULT_SLIDE_SHIFT
from .database.records import BioPolymerRecord
from .decoys.coordinates import reverse_sequence
from .decoys.generator import DecoyType, UnsupportedDecoyTypeError, generate_decoys
from .decoys.slide import slide_sequence

logger = logging.getLogger(__name__)


def reverse_decoy_sequence(sequence: str) -> str:
    """Reverse decoy of a bare sequence (leading M kept in place).

    Examples
    --------
    >>> reverse_decoy_sequence("ABCDE")
    'EDCBA'
    """
    return reverse_sequence(sequence)


def slide_decoy_sequence(sequence: str, shift: int = DEFAULT_SLIDE_SHIFT) -> str:
    """Slide decoy of a bare sequence (leading M kept in place).

    Examples
    --------
    >>> slide_decoy_sequence("ABCDE")
    'BADCE'
    """
    return slide_sequence(sequence, shift)


def generate_sequence_decoys(
    sequences: List[str],
    method: str = 'reverse',
) -> List[str]:
    """Generate decoy sequences from target sequences.

    Parameters
    ----------
    sequences : List[str]
        Target sequences
    method : str
        'reverse' (default) or 'slide'

    Returns
    -------
    decoys : List[str]
        Decoy sequences (same order as targets)

    Raises
    ------
    UnsupportedDecoyTypeError
        If method is not 'reverse' or 'slide'
    """
    decoy_type = DecoyType.parse(method)
    if decoy_type is DecoyType.REVERSE:
        generator = reverse_decoy_sequence
    elif decoy_type is DecoyType.SLIDE:
        generator = slide_decoy_sequence
    else:
        raise UnsupportedDecoyTypeError(
            f"Unknown decoy method: {method}. Must be 'reverse' or 'slide'"
        )

    logger.info(f"Generating {len(sequences):,} decoy sequences (method: {decoy_type.value})...")
    return [generator(sequence) for sequence in sequences]


def decoy_records_from_tuples(
    proteins: List[Tuple[str, str, str]],
    method: str = 'reverse',
    decoy_identifier: str = DECOY_IDENTIFIER,
) -> List[BioPolymerRecord]:
    """Build records from (protein_id, sequence, description) tuples and decoy them.

    Parameters
    ----------
    proteins : List[Tuple[str, str, str]]
        (protein_id, sequence, description) tuples, as produced by FASTA readers
    method : str
        'reverse' or 'slide'
    decoy_identifier : str
        Prefix for decoy accessions

    Returns
    -------
    decoys : List[BioPolymerRecord]
        Decoy records sorted by accession

    Examples
    --------
    >>> decoys = decoy_records_from_tuples([("P12345", "MABCDE", "sp|P12345|TEST")])
    >>> decoys[0].accession, decoys[0].sequence, decoys[0].full_name
    ('DECOY_P12345', 'MEDCBA', 'sp|P12345|TEST')
    """
    records = [
        BioPolymerRecord(sequence=sequence, accession=protein_id, full_name=description)
        for protein_id, sequence, description in proteins
    ]
    return generate_decoys(records, method, decoy_identifier=decoy_identifier)
