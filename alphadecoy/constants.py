"""Constants for decoy generation and residue mass bookkeeping.

This module collects the fixed values used throughout alphadecoy: the
initiator residue that is never scrambled, the default decoy label, the
slide transform's starting shift, and the monoisotopic residue masses used
to check that a decoy preserves its target's composition.

Key Features
------------
- Initiator methionine is pinned at position 1 by every transform
- DECOY identifier shared by accessions and annotation labels
- Residue mass tables for composition and mass checks
- Common modification masses (Carbamidomethyl, Oxidation, Acetyl, ...)

Sources
-------
- IUPAC amino acid masses: https://www.unimod.org/masses.html
- Unimod modification masses: https://www.unimod.org/modifications_list.php
"""

# =============================================================================
# Decoy Generation
# =============================================================================

# Initiator methionine: first residue of most translated proteins.
# Kept at position 1 in every decoy.
INITIATOR_RESIDUE = 'M'

# Prefix for decoy accessions ("DECOY_P12345") and labels ("DECOY VARIANT: ...")
DECOY_IDENTIFIER = 'DECOY'

# Starting shift of the slide permutation.
# Incremented by one whenever the sequence length divides it.
DEFAULT_SLIDE_SHIFT = 20

# Position key of the N-terminus in one-based modification maps
N_TERMINAL_POSITION = 1

# Terminal symbol of a variant run that introduces a premature stop codon
STOP_CODON = '*'

# =============================================================================
# Fundamental Physical Constants (NIST values)
# =============================================================================

# Water mass (H2O)
# Calculated: 2*1.007825 + 15.994915 = 18.010564684
H2O_MASS = 18.010564684  # Da

# =============================================================================
# Amino Acid Monoisotopic Masses (Da)
# =============================================================================

# Standard 20 amino acids (unmodified)
# Values are monoisotopic masses of residues (not including N/C terminals)
AA_MASSES_DICT = {
    'A': 71.037114,   # Alanine
    'R': 156.101111,  # Arginine
    'N': 114.042927,  # Asparagine
    'D': 115.026943,  # Aspartic acid
    'C': 103.009185,  # Cysteine (unmodified)
    'E': 129.042593,  # Glutamic acid
    'Q': 128.058578,  # Glutamine
    'G': 57.021464,   # Glycine
    'H': 137.058912,  # Histidine
    'I': 113.084064,  # Isoleucine
    'L': 113.084064,  # Leucine
    'K': 128.094963,  # Lysine
    'M': 131.040485,  # Methionine
    'F': 147.068414,  # Phenylalanine
    'P': 97.052764,   # Proline
    'S': 87.032028,   # Serine
    'T': 101.047679,  # Threonine
    'W': 186.079313,  # Tryptophan
    'Y': 163.063320,  # Tyrosine
    'V': 99.068414,   # Valine
}

# Non-standard amino acids mapped to the closest standard mass.
# UniProt entries occasionally carry these codes.
AA_MASSES_NONSTANDARD = {
    'X': 113.084064,  # Unknown → Leu/Ile (most common)
    'Z': 128.058578,  # Glu/Gln → Gln
    'B': 114.042927,  # Asp/Asn → Asn
    'J': 113.084064,  # Leu/Ile → Leu
    'U': 103.009185,  # Selenocysteine → Cys (similar mass)
    'O': 131.040485,  # Pyrrolysine → Met (closest mass)
}

# =============================================================================
# Common Modification Masses
# =============================================================================

# Carbamidomethylation of Cysteine (Unimod:4)
# C2H3NO: 57.021464 Da
CARBAMIDOMETHYL_MASS = 57.021464

# Oxidation of Methionine (Unimod:35)
# O: 15.994915 Da
OXIDATION_MASS = 15.994915

# Acetylation (Protein N-term, Unimod:1)
# C2H2O: 42.010565 Da
ACETYL_MASS = 42.010565

# Phosphorylation (Unimod:21)
# HPO3: 79.966331 Da
PHOSPHO_MASS = 79.966331

# Deamidation (Unimod:7)
# NH → O: 0.984016 Da
DEAMIDATION_MASS = 0.984016

# Decoys built from the same residues must match their target within this
# tolerance (floating point summation only).
DECOY_MASS_TOLERANCE = 0.001  # Da
