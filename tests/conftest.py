"""Pytest configuration for alphadecoy tests.

Common record fixtures. All fixtures build fresh records, so tests may
compare targets before and after decoy generation.
"""

import pytest

from alphadecoy.database.records import (
    BioPolymerRecord,
    DisulfideBond,
    ProteolysisProduct,
    SequenceVariation,
    SpliceSite,
)
from alphadecoy.modifications import COMMON_MODIFICATIONS, build_modification_lookup


@pytest.fixture
def modification_lookup():
    """Lookup of the built-in common modifications."""
    return build_modification_lookup(COMMON_MODIFICATIONS)


@pytest.fixture
def acetyl(modification_lookup):
    return modification_lookup["Acetyl"][0]


@pytest.fixture
def oxidation(modification_lookup):
    return modification_lookup["Oxidation"][0]


@pytest.fixture
def phospho(modification_lookup):
    return modification_lookup["Phospho"][0]


@pytest.fixture
def methionine_record(acetyl, phospho):
    """Record starting with the initiator methionine (L=10)."""
    return BioPolymerRecord(
        sequence="MCDCEFGCHK",
        accession="P12345",
        organism="Homo sapiens",
        name="TEST_HUMAN",
        full_name="Test protein",
        gene_names=["TST1", "TST2"],
        modifications={1: [acetyl], 4: [phospho]},
        proteolysis_products=[ProteolysisProduct(2, 10, "chain")],
        disulfide_bonds=[DisulfideBond(2, 8, "interchain")],
        splice_sites=[SpliceSite(1, 1, "start"), SpliceSite(4, 6, "exon 2")],
        sequence_variations=[SequenceVariation(3, 3, "D", "N", "rs1")],
        is_contaminant=False,
        sample_name="sample1",
        database_file_path="/data/human.xml",
    )


@pytest.fixture
def plain_record(phospho):
    """Record without an initiator methionine (L=10)."""
    return BioPolymerRecord(
        sequence="ACDCEFGCHK",
        accession="Q99999",
        organism="Mus musculus",
        gene_names=["Abc"],
        modifications={2: [phospho], 10: [phospho]},
        proteolysis_products=[ProteolysisProduct(1, 4, "signal peptide")],
        disulfide_bonds=[DisulfideBond(2, 8, "intrachain")],
        splice_sites=[SpliceSite(4, 6, "exon 2")],
        is_contaminant=True,
    )


@pytest.fixture
def long_sequences():
    """Sequences of every length from 1 to 60, with and without leading M."""
    alphabet = "ACDEFGHIKLNPQRSTVWY"
    sequences = []
    for length in range(1, 61):
        body = "".join(alphabet[(i * 7) % len(alphabet)] for i in range(length))
        sequences.append(body)
        sequences.append("M" + body)
    return sequences
