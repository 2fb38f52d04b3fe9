"""Decoy record generation for FDR control.

Builds one decoy per target record for the target-decoy approach:
- Reverse: mirror-image sequence (initiator methionine kept at position 1)
- Slide: reflected-translation permutation (initiator methionine kept)
- None: no decoys

Design principles:
1. Deterministic: same record and decoy type always give the same decoy
2. Independent: one task per record, no shared state besides the result sink
3. Fail loudly: unsupported types abort before any work, invalid records
   abort the whole call instead of producing corrupted coordinates

Examples
--------
>>> from alphadecoy.database.records import BioPolymerRecord
>>> targets = [BioPolymerRecord("MABCDE", "P12345"), BioPolymerRecord("ABCDE", "Q99999")]
>>> decoys = generate_decoys(targets, DecoyType.REVERSE)
>>> [(d.accession, d.sequence) for d in decoys]
[('DECOY_P12345', 'MEDCBA'), ('DECOY_Q99999', 'EDCBA')]
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Union

from ..constants import DECOY_IDENTIFIER, DEFAULT_SLIDE_SHIFT
from ..database.records import BioPolymerRecord
from ..database.validation import is_palindromic
from .reverse import generate_reverse_decoy
from .slide import generate_slide_decoy

logger = logging.getLogger(__name__)


class UnsupportedDecoyTypeError(ValueError):
    """Requested decoy type is unknown or not implemented."""


class DecoyType(Enum):
    """Decoy generation strategies."""
    NONE = "none"
    REVERSE = "reverse"
    SLIDE = "slide"
    SHUFFLE = "shuffle"  # reserved, not implemented
    RANDOM = "random"    # reserved, not implemented

    @classmethod
    def parse(cls, value: Union["DecoyType", str, None]) -> "DecoyType":
        """Accept a DecoyType, its name or value (case-insensitive), or None."""
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedDecoyTypeError(
                f"Unknown decoy type: {value!r}. "
                f"Must be one of {[t.value for t in cls]}"
            ) from None


@dataclass
class DecoyGenerationParams:
    """Parameters for decoy generation.

    Attributes
    ----------
    decoy_type : DecoyType
        Strategy (default: REVERSE)
    max_workers : int, optional
        Maximum worker threads; None or -1 uses the executor default
    decoy_identifier : str
        Prefix for decoy accessions and labels (default: "DECOY")
    slide_shift : int
        Starting shift of slide decoys (default: 20)
    validate : bool
        Reject records with out-of-bounds annotations (default: True)
    """

    decoy_type: DecoyType = DecoyType.REVERSE
    max_workers: Optional[int] = None
    decoy_identifier: str = DECOY_IDENTIFIER
    slide_shift: int = DEFAULT_SLIDE_SHIFT
    validate: bool = True

    def __post_init__(self):
        self.decoy_type = DecoyType.parse(self.decoy_type)
        if self.max_workers == -1:
            self.max_workers = None
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1 or None, got {self.max_workers}")
        if not self.decoy_identifier:
            raise ValueError("decoy_identifier must be a non-empty string")

    @classmethod
    def for_decoy_type(cls, decoy_type: Union[DecoyType, str], **kwargs) -> 'DecoyGenerationParams':
        """Create parameters for a decoy type with default settings.

        Args:
            decoy_type: DecoyType or its name ("reverse", "slide", ...)
            **kwargs: Overrides for the remaining fields

        Returns:
            DecoyGenerationParams
        """
        return cls(decoy_type=DecoyType.parse(decoy_type), **kwargs)


class DecoyGenerator:
    """Generate decoy records in parallel.

    Examples
    --------
    >>> generator = DecoyGenerator(DecoyGenerationParams.for_decoy_type("slide"))
    >>> decoys = generator.generate(targets)  # doctest: +SKIP
    """

    def __init__(self, params: Optional[DecoyGenerationParams] = None):
        self.params = params if params is not None else DecoyGenerationParams()

    def _transform(self) -> Optional[Callable[[BioPolymerRecord], BioPolymerRecord]]:
        params = self.params
        if params.decoy_type is DecoyType.NONE:
            return None
        if params.decoy_type is DecoyType.REVERSE:
            return lambda record: generate_reverse_decoy(
                record, params.decoy_identifier, params.validate
            )
        if params.decoy_type is DecoyType.SLIDE:
            return lambda record: generate_slide_decoy(
                record, params.decoy_identifier, params.validate, params.slide_shift
            )
        raise UnsupportedDecoyTypeError(
            f"Decoy type {params.decoy_type.name} is not implemented. "
            f"Must be 'none', 'reverse' or 'slide'"
        )

    def generate(self, records: Iterable[BioPolymerRecord]) -> List[BioPolymerRecord]:
        """Generate one decoy per record.

        Parameters
        ----------
        records : Iterable[BioPolymerRecord]
            Target records

        Returns
        -------
        decoys : List[BioPolymerRecord]
            Decoy records sorted by accession

        Raises
        ------
        UnsupportedDecoyTypeError
            If the decoy type is not implemented (raised before any work)
        InvalidRecordError
            If a record has out-of-bounds annotations (no decoys returned)
        """
        transform = self._transform()
        records = list(records)
        if transform is None:
            logger.info("Decoy type NONE: no decoys generated")
            return []

        logger.info(
            f"Generating {len(records):,} decoy records "
            f"(method: {self.params.decoy_type.value})..."
        )

        decoys: List[BioPolymerRecord] = []
        sink_lock = threading.Lock()

        def _run(record: BioPolymerRecord) -> None:
            decoy = transform(record)
            with sink_lock:
                decoys.append(decoy)

        with ThreadPoolExecutor(max_workers=self.params.max_workers) as pool:
            futures = [pool.submit(_run, record) for record in records]
            try:
                for future in futures:
                    future.result()
            except BaseException:
                for pending in futures:
                    pending.cancel()
                raise

        decoys.sort(key=lambda record: record.accession)

        _log_identical_decoys(records, decoys, self.params.decoy_identifier)
        logger.info(f"✓ Generated {len(decoys):,} decoys")

        return decoys


def _log_identical_decoys(
    targets: List[BioPolymerRecord],
    decoys: List[BioPolymerRecord],
    decoy_identifier: str,
) -> None:
    target_sequences: Dict[str, str] = {t.accession: t.sequence for t in targets}
    prefix = f"{decoy_identifier}_"
    identical = 0
    for decoy in decoys:
        target = target_sequences.get(decoy.accession[len(prefix):])
        if target is not None and target == decoy.sequence and len(target) > 1:
            identical += 1
            palindromic, _ = is_palindromic(target)
            logger.debug(
                f"Decoy {decoy.accession} equals its target"
                + (" (palindromic sequence)" if palindromic else "")
            )
    if identical:
        logger.warning(f"{identical:,} decoys are identical to their target sequence")


def generate_decoys(
    records: Iterable[BioPolymerRecord],
    decoy_type: Union[DecoyType, str, None] = DecoyType.REVERSE,
    max_workers: Optional[int] = None,
    decoy_identifier: str = DECOY_IDENTIFIER,
) -> List[BioPolymerRecord]:
    """Generate decoy records from target records.

    Parameters
    ----------
    records : Iterable[BioPolymerRecord]
        Target records
    decoy_type : DecoyType or str
        - 'reverse': mirror-image decoys (default)
        - 'slide': reflected-translation decoys
        - 'none': no decoys
        'shuffle' and 'random' are reserved and raise
    max_workers : int, optional
        Maximum worker threads (None or -1: executor default)
    decoy_identifier : str
        Prefix for decoy accessions and labels

    Returns
    -------
    decoys : List[BioPolymerRecord]
        Decoy records sorted by accession

    Raises
    ------
    UnsupportedDecoyTypeError
        If decoy_type is not recognized or not implemented
    """
    params = DecoyGenerationParams(
        decoy_type=DecoyType.parse(decoy_type),
        max_workers=max_workers,
        decoy_identifier=decoy_identifier,
    )
    return DecoyGenerator(params).generate(records)
