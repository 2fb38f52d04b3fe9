"""Tests for slide decoy records.

Tests:
- Slid sequence (hand-computed), length and composition preservation
- Initiator pinning
- Modification, disulfide and splice site remapping
- Proteolysis products copied unchanged
- Sequence variants, including the extra initiator-change variant
- Shift carried from the reference into variant runs
"""

import copy

import pytest

from alphadecoy.database.records import (
    BioPolymerRecord,
    DisulfideBond,
    ProteolysisProduct,
    SequenceVariation,
    SpliceSite,
)
from alphadecoy.database.validation import has_same_composition
from alphadecoy.decoys.slide import (
    generate_slide_decoy,
    sequence_shift,
    slide_endpoints,
    slide_position,
    slide_sequence,
    slide_sequence_variation,
    slide_variant_runs,
)


# =============================================================================
# Sequence
# =============================================================================

class TestSlideSequence:
    """Test the slid sequence."""

    def test_without_initiator(self):
        """Length 5: shift 20 is a multiple, bumped to 21."""
        assert slide_sequence("ABCDE") == "BADCE"

    def test_with_initiator(self):
        """Effective length 5: shift bumped to 21, M pinned."""
        assert slide_sequence("MABCDE") == "MBADCE"

    def test_fixture_sequences(self, methionine_record, plain_record):
        assert slide_sequence(methionine_record.sequence) == "MCCFDCEKGH"
        assert slide_sequence(plain_record.sequence) == "CACDFECGKH"

    def test_short_sequences(self):
        assert slide_sequence("") == ""
        assert slide_sequence("A") == "A"
        assert slide_sequence("M") == "M"
        assert slide_sequence("MA") == "MA"

    def test_length_and_composition(self, long_sequences):
        for sequence in long_sequences:
            decoy = slide_sequence(sequence)
            assert len(decoy) == len(sequence)
            assert has_same_composition(sequence, decoy)

    def test_initiator_pinned(self, long_sequences):
        for sequence in long_sequences:
            if sequence.startswith("M"):
                assert slide_sequence(sequence)[0] == "M"

    def test_deterministic(self):
        assert slide_sequence("MPEPTIDEKRLLS") == slide_sequence("MPEPTIDEKRLLS")

    def test_custom_shift(self):
        """Shift 3 on length 5 is not bumped."""
        assert slide_sequence("ABCDE", shift=3) != slide_sequence("ABCDE")


class TestSequenceShift:
    """Test shift adjustment on the effective length."""

    def test_without_initiator(self):
        assert sequence_shift(10, False) == 21
        assert sequence_shift(9, False) == 20

    def test_with_initiator(self):
        assert sequence_shift(11, True) == 21
        assert sequence_shift(10, True) == 20


class TestSlidePositions:
    """Test position mapping helpers."""

    def test_slide_position(self):
        assert slide_position(2, 10, False, 21) == 1
        assert slide_position(10, 10, False, 21) == 9

    def test_slide_position_pinned(self):
        assert slide_position(1, 10, True, 20) == 1

    def test_slide_endpoints_sorted(self):
        """(2, 8) on length 10, shift 21 -> (1, 7)."""
        assert slide_endpoints(2, 8, 10, 21) == (1, 7)
        assert slide_endpoints(8, 2, 10, 21) == (1, 7)


# =============================================================================
# Record Annotations
# =============================================================================

class TestSlideDecoyRecord:
    """Test annotations of slide decoy records."""

    def test_descriptors(self, methionine_record):
        decoy = generate_slide_decoy(methionine_record)
        assert decoy.accession == "DECOY_P12345"
        assert decoy.is_decoy is True
        assert decoy.gene_names == ["TST1", "TST2"]
        assert decoy.organism == "Homo sapiens"

    def test_modifications_with_initiator(self, methionine_record, acetyl, phospho):
        decoy = generate_slide_decoy(methionine_record)
        assert decoy.modifications == {1: [acetyl], 6: [phospho]}

    def test_modifications_without_initiator(self, plain_record, phospho):
        decoy = generate_slide_decoy(plain_record)
        assert decoy.modifications == {1: [phospho], 9: [phospho]}

    def test_small_record(self, acetyl, oxidation):
        record = BioPolymerRecord("MABCDE", "P1", modifications={1: [acetyl], 3: [oxidation]})
        decoy = generate_slide_decoy(record)
        assert decoy.sequence == "MBADCE"
        assert decoy.modifications == {1: [acetyl], 2: [oxidation]}

    def test_modification_count_preserved(self, oxidation):
        """A modification on every residue: none lost, none merged."""
        for sequence in ("ACDEFGHIKLMNPQRSTVWYACDEFGHIKL", "MCDEFGHIKLMNPQRSTVWYACDEFGHIKL"):
            mods = {p: [oxidation] for p in range(1, len(sequence) + 1)}
            decoy = generate_slide_decoy(BioPolymerRecord(sequence, "P1", modifications=mods))
            assert sorted(decoy.modifications) == list(range(1, len(sequence) + 1))
            assert decoy.modification_count() == len(sequence)

    def test_proteolysis_unchanged(self, methionine_record, plain_record):
        assert generate_slide_decoy(methionine_record).proteolysis_products == [
            ProteolysisProduct(2, 10, "chain")
        ]
        assert generate_slide_decoy(plain_record).proteolysis_products == [
            ProteolysisProduct(1, 4, "signal peptide")
        ]

    def test_disulfide(self, plain_record):
        decoy = generate_slide_decoy(plain_record)
        assert decoy.sequence == "CACDFECGKH"
        assert decoy.disulfide_bonds == [
            DisulfideBond(1, 7, "DECOY DISULFIDE BOND: intrachain")
        ]

    def test_disulfide_with_initiator(self, methionine_record):
        decoy = generate_slide_decoy(methionine_record)
        assert decoy.disulfide_bonds == [
            DisulfideBond(2, 8, "DECOY DISULFIDE BOND: interchain")
        ]

    def test_splice_sites(self, plain_record, methionine_record):
        assert generate_slide_decoy(plain_record).splice_sites == [
            SpliceSite(3, 5, "DECOY SPLICE SITE: exon 2")
        ]
        assert generate_slide_decoy(methionine_record).splice_sites == [
            SpliceSite(1, 1, "DECOY SPLICE SITE: start"),
            SpliceSite(4, 6, "DECOY SPLICE SITE: exon 2"),
        ]

    def test_custom_shift(self, plain_record):
        decoy = generate_slide_decoy(plain_record, shift=3)
        assert decoy.sequence == slide_sequence(plain_record.sequence, 3)

    def test_target_unchanged(self, methionine_record):
        before = copy.deepcopy(methionine_record)
        generate_slide_decoy(methionine_record)
        assert methionine_record == before


# =============================================================================
# Sequence Variants
# =============================================================================

class TestSlideSequenceVariants:
    """Test slide decoy variants."""

    def test_substitution(self, methionine_record):
        decoy = generate_slide_decoy(methionine_record)
        assert decoy.sequence_variations == [
            SequenceVariation(9, 9, "D", "N", "DECOY VARIANT: rs1")
        ]

    def test_multi_residue_runs_slid(self):
        """Reference shift 20 (effective length 9) is kept for both runs."""
        sv = SequenceVariation(4, 6, "DEF", "KLM", "complex")
        [decoy] = slide_sequence_variation(sv, 10, True)
        assert (decoy.begin, decoy.end) == (6, 8)
        assert decoy.original_sequence == "FDE"
        assert decoy.variant_sequence == "MKL"

    def test_start_loss_adds_initiator_change(self):
        sv = SequenceVariation(1, 2, "MA", "A", "startloss")
        variations = slide_sequence_variation(sv, 10, True)
        assert len(variations) == 2

        change, decoy = variations
        assert (change.begin, change.end) == (1, 1)
        assert change.original_sequence == "M"
        assert change.variant_sequence == ""
        assert change.description == (
            "DECOY VARIANT: Initiator Methionine Change in startloss"
        )

        assert (decoy.begin, decoy.end) == (10, 10)
        assert decoy.original_sequence == "A"
        assert decoy.variant_sequence == "A"
        assert decoy.description == "DECOY VARIANT: startloss"

    def test_no_extra_variant_when_initiator_kept(self):
        sv = SequenceVariation(1, 2, "MA", "MV", "missense")
        variations = slide_sequence_variation(sv, 10, True)
        assert len(variations) == 1

    def test_variant_modification_with_initiator(self, phospho):
        sv = SequenceVariation(4, 4, "D", "T", "sub", {4: [phospho]})
        [decoy] = slide_sequence_variation(sv, 10, True)
        assert decoy.modifications == {6: [phospho]}

    def test_variant_modification_without_initiator(self, phospho):
        sv = SequenceVariation(3, 3, "D", "T", "sub", {3: [phospho]})
        [decoy] = slide_sequence_variation(sv, 9, False)
        assert decoy.modifications == {5: [phospho]}

    def test_variant_modification_n_terminal_pinned(self, acetyl):
        sv = SequenceVariation(3, 3, "D", "E", "sub", {1: [acetyl]})
        [decoy] = slide_sequence_variation(sv, 10, True)
        assert decoy.modifications == {1: [acetyl]}

    def test_variant_modification_initiator_gain(self, acetyl):
        sv = SequenceVariation(1, 1, "A", "M", "startgain", {1: [acetyl]})
        [decoy] = slide_sequence_variation(sv, 9, False)
        assert decoy.modifications == {1: [acetyl]}


class TestSlideVariantShift:
    """Test the shift carried from the reference into variant runs."""

    def test_record_without_initiator(self):
        """Length 10: reference shift 21, bumped to 22 by the original run."""
        record = BioPolymerRecord(
            "ACKDEFGHIL", "P1",
            sequence_variations=[SequenceVariation(4, 6, "DEF", "KLM", "complex")],
        )
        [decoy] = generate_slide_decoy(record).sequence_variations
        assert (decoy.begin, decoy.end) == (6, 8)
        assert decoy.original_sequence == "EFD"
        assert decoy.variant_sequence == "LMK"

    def test_record_with_initiator(self):
        """Effective length 9: reference shift 20 is used for both runs."""
        record = BioPolymerRecord(
            "MACDEFGHIK", "P1",
            sequence_variations=[SequenceVariation(4, 6, "DEF", "KLM", "complex")],
        )
        [decoy] = generate_slide_decoy(record).sequence_variations
        assert decoy.original_sequence == "FDE"
        assert decoy.variant_sequence == "MKL"

    def test_original_bump_carries_into_variant(self):
        assert slide_variant_runs("DEF", "KLM", 21) == ("EFD", "LMK")
        assert slide_variant_runs("DEF", "KLM", 20) == ("FDE", "MKL")

    def test_variant_run_bumped_again(self):
        """Shift 21 -> 22 for the length-3 run, then 23 for the length-2 run.

        At 22 the length-2 run would swap; at 23 it maps onto itself.
        """
        assert slide_variant_runs("DEF", "KL", 21) == ("EFD", "KL")

    def test_each_variant_starts_from_reference_shift(self):
        record = BioPolymerRecord(
            "ACKDEFGHIL", "P1",
            sequence_variations=[
                SequenceVariation(4, 6, "DEF", "KLM", "first"),
                SequenceVariation(4, 6, "DEF", "KLM", "second"),
            ],
        )
        first, second = generate_slide_decoy(record).sequence_variations
        assert first.original_sequence == second.original_sequence == "EFD"
        assert first.variant_sequence == second.variant_sequence == "LMK"


class TestSlideConsensus:
    """Test unapplied variants against the consensus record."""

    @pytest.fixture
    def variant_record(self):
        consensus = BioPolymerRecord("MACDEFGHIK", "P1")
        sv = SequenceVariation(3, 3, "C", "Z", "missense")
        return BioPolymerRecord(
            "MAZDEFGHIKLL",
            "P1_variant",
            sequence_variations=[sv],
            applied_sequence_variations=[sv],
            consensus=consensus,
        )

    def test_unapplied_and_applied(self, variant_record):
        decoy = generate_slide_decoy(variant_record)
        unapplied = decoy.sequence_variations[0]
        applied = decoy.applied_sequence_variations[0]
        assert (unapplied.begin, unapplied.end) == (9, 9)
        assert (applied.begin, applied.end) == (11, 11)

    def test_consensus_slid(self, variant_record):
        decoy = generate_slide_decoy(variant_record)
        assert decoy.consensus.sequence == "MDAFCHEKGI"
        assert decoy.consensus.accession == "DECOY_P1"
