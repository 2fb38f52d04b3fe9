"""Sequence records and their positional annotations.

Records are produced by parsing code (FASTA/UniProt XML loaders) and treated
as immutable snapshots here: decoy transforms read them and build new,
independent records. All positions are one-based and inclusive.

Design principles:
1. Frozen dataclasses (no mutation after construction)
2. Plain containers (str, list, dict) so records pickle and copy cheaply
3. Consensus link is lookup-only (never copied, never mutated)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..constants import INITIATOR_RESIDUE, STOP_CODON
from ..modifications import ModificationMap


@dataclass(frozen=True)
class ProteolysisProduct:
    """Annotated cleavage fragment (signal peptide, chain, propeptide, ...)."""

    begin: int
    end: int
    type: str = ""


@dataclass(frozen=True)
class DisulfideBond:
    """Covalent cross-link between two cysteines (begin == end for interchain)."""

    begin: int
    end: int
    description: str = ""


@dataclass(frozen=True)
class SpliceSite:
    """Exon junction over a residue range."""

    begin: int
    end: int
    description: str = ""


@dataclass(frozen=True)
class SequenceVariation:
    """Allelic difference between a reference sequence and an observed one.

    ``begin`` and ``end`` are in the reference (original) coordinate space.
    For substitutions ``end - begin + 1 == len(original_sequence)``;
    insertions and deletions change the length of the variant allele.

    Attributes
    ----------
    begin, end : int
        One-based inclusive range in the reference sequence
    original_sequence : str
        Reference residues over [begin, end]
    variant_sequence : str
        Replacement residues
    description : str
        Free text (VCF line, dbSNP id, ...)
    modifications : ModificationMap
        Modifications on the variant allele, keyed by position in the
        variant-applied sequence
    """

    begin: int
    end: int
    original_sequence: str
    variant_sequence: str
    description: str = ""
    modifications: ModificationMap = field(default_factory=dict)

    @property
    def is_point(self) -> bool:
        """Single-residue substitution."""
        return (
            self.begin == self.end
            and len(self.original_sequence) == 1
            and len(self.variant_sequence) == 1
        )

    @property
    def length_change(self) -> int:
        """Residues gained (positive) or lost (negative) by the variant allele."""
        return len(self.variant_sequence) - len(self.original_sequence)

    @property
    def starts_with_initiator_loss(self) -> bool:
        """True if the variant removes a leading initiator methionine."""
        return (
            self.begin == 1
            and self.original_sequence.startswith(INITIATOR_RESIDUE)
            and not self.variant_sequence.startswith(INITIATOR_RESIDUE)
        )

    @property
    def is_stop_gain(self) -> bool:
        """True if the variant run ends in a premature stop codon ('*')."""
        return self.variant_sequence.endswith(STOP_CODON)

    def variant_applied_length(self, reference_length: int) -> int:
        """Length of the reference sequence once this variant is applied."""
        return reference_length + self.length_change


@dataclass(frozen=True)
class BioPolymerRecord:
    """A protein (or other biopolymer) entry with positional annotations.

    Attributes
    ----------
    sequence : str
        Base sequence, one symbol per residue
    accession : str
        Database accession ("P12345"); decoys get "DECOY_P12345"
    modifications : ModificationMap
        One-based localized modifications; position 1 is the N-terminus
    sequence_variations : List[SequenceVariation]
        Unapplied variants, relative to the consensus record
    applied_sequence_variations : List[SequenceVariation]
        Variants already applied to ``sequence``, relative to this record
    consensus : BioPolymerRecord, optional
        Non-variant record this one was derived from. Lookup only: it is
        excluded from equality and repr, and never mutated.

    Examples
    --------
    >>> record = BioPolymerRecord("MPEPTIDE", "P12345")
    >>> record.starts_with_initiator
    True
    >>> record.consensus_record is record
    True
    """

    sequence: str
    accession: str
    organism: str = ""
    name: str = ""
    full_name: str = ""
    gene_names: List[str] = field(default_factory=list)
    modifications: ModificationMap = field(default_factory=dict)
    proteolysis_products: List[ProteolysisProduct] = field(default_factory=list)
    disulfide_bonds: List[DisulfideBond] = field(default_factory=list)
    splice_sites: List[SpliceSite] = field(default_factory=list)
    sequence_variations: List[SequenceVariation] = field(default_factory=list)
    applied_sequence_variations: List[SequenceVariation] = field(default_factory=list)
    is_contaminant: bool = False
    is_decoy: bool = False
    sample_name: str = ""
    database_file_path: str = ""
    consensus: Optional["BioPolymerRecord"] = field(
        default=None, repr=False, compare=False
    )

    @property
    def length(self) -> int:
        return len(self.sequence)

    @property
    def starts_with_initiator(self) -> bool:
        return self.sequence.startswith(INITIATOR_RESIDUE)

    @property
    def consensus_record(self) -> "BioPolymerRecord":
        """The non-variant record (self when no consensus is attached)."""
        return self.consensus if self.consensus is not None else self

    def modification_count(self) -> int:
        """Total number of modifications over all positions."""
        return sum(len(mods) for mods in self.modifications.values())
