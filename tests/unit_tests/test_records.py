"""Tests for sequence records and annotation types."""

import dataclasses

import pytest

from alphadecoy.database.records import BioPolymerRecord, SequenceVariation


class TestSequenceVariation:
    """Test variant helpers."""

    def test_point(self):
        assert SequenceVariation(3, 3, "C", "Z").is_point
        assert not SequenceVariation(3, 4, "CD", "ZZ").is_point
        assert not SequenceVariation(3, 3, "C", "").is_point

    def test_length_change(self):
        assert SequenceVariation(4, 4, "P", "PPP").length_change == 2
        assert SequenceVariation(4, 5, "PE", "").length_change == -2
        assert SequenceVariation(4, 4, "P", "V").length_change == 0

    def test_variant_applied_length(self):
        assert SequenceVariation(4, 4, "P", "PP").variant_applied_length(8) == 9

    def test_initiator_loss(self):
        assert SequenceVariation(1, 2, "MA", "A").starts_with_initiator_loss
        assert not SequenceVariation(1, 2, "MA", "MV").starts_with_initiator_loss
        assert not SequenceVariation(2, 2, "M", "A").starts_with_initiator_loss

    def test_stop_gain(self):
        assert SequenceVariation(3, 3, "E", "E*").is_stop_gain
        assert SequenceVariation(3, 3, "E", "*").is_stop_gain
        assert not SequenceVariation(3, 3, "E", "K").is_stop_gain
        assert not SequenceVariation(3, 3, "E", "").is_stop_gain


class TestBioPolymerRecord:
    """Test record helpers."""

    def test_length_and_initiator(self):
        record = BioPolymerRecord("MPEPTIDE", "P1")
        assert record.length == 8
        assert record.starts_with_initiator
        assert not BioPolymerRecord("PEPTIDE", "P2").starts_with_initiator

    def test_frozen(self):
        record = BioPolymerRecord("PEPTIDE", "P1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.sequence = "EDITPEP"

    def test_consensus_excluded_from_equality(self):
        consensus = BioPolymerRecord("MPEPTIDE", "P1")
        with_link = BioPolymerRecord("MPEPTIDE", "P1", consensus=consensus)
        assert with_link == BioPolymerRecord("MPEPTIDE", "P1")
        assert "consensus" not in repr(with_link)

    def test_consensus_record(self):
        consensus = BioPolymerRecord("MPEPTIDE", "P1")
        variant = BioPolymerRecord("MPEVTIDE", "P1_v", consensus=consensus)
        assert variant.consensus_record is consensus
        assert consensus.consensus_record is consensus

    def test_modification_count(self, methionine_record):
        assert methionine_record.modification_count() == 2
