"""Localized modifications carried by sequence records.

Records store modifications as one-based, position-keyed maps
(``Dict[int, List[Modification]]``). Decoy transforms move the keys and keep
the values; this module provides the value type and the helpers used to
build such maps.

Key Features
------------
- Immutable ``Modification`` value type (id, type, target residue, mass)
- Built-in set of common modifications (Carbamidomethyl, Oxidation, ...)
- Explicit id → modification lookup, built once per load and passed in
- Parse modification/site strings into one-based position maps

Examples
--------
>>> lookup = build_modification_lookup(COMMON_MODIFICATIONS)
>>> mods = parse_modification_sites("Oxidation@M;Phospho@S", "1;4", lookup)
>>> sorted(mods)
[1, 4]
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .constants import (
    ACETYL_MASS,
    CARBAMIDOMETHYL_MASS,
    DEAMIDATION_MASS,
    OXIDATION_MASS,
    PHOSPHO_MASS,
)

logger = logging.getLogger(__name__)

ModificationMap = Dict[int, List["Modification"]]


@dataclass(frozen=True)
class Modification:
    """A single localized modification.

    Only ``id`` takes part in lookups; the remaining fields are carried
    unchanged from target to decoy.
    """

    id: str
    modification_type: str = ""
    target: str = ""  # residue symbol, '' for "any"
    location_restriction: str = "Anywhere."
    monoisotopic_mass: float = 0.0

    def __str__(self) -> str:
        return f"{self.modification_type}:{self.id}" if self.modification_type else self.id


# =============================================================================
# Common Modifications
# =============================================================================

COMMON_MODIFICATIONS = [
    Modification("Carbamidomethyl", "Common Fixed", "C", "Anywhere.", CARBAMIDOMETHYL_MASS),
    Modification("Oxidation", "Common Variable", "M", "Anywhere.", OXIDATION_MASS),
    Modification("Acetyl", "Common Biological", "", "N-terminal.", ACETYL_MASS),
    Modification("Phospho", "Common Biological", "S", "Anywhere.", PHOSPHO_MASS),
    Modification("Phospho", "Common Biological", "T", "Anywhere.", PHOSPHO_MASS),
    Modification("Phospho", "Common Biological", "Y", "Anywhere.", PHOSPHO_MASS),
    Modification("Deamidation", "Common Artifact", "N", "Anywhere.", DEAMIDATION_MASS),
    Modification("Deamidation", "Common Artifact", "Q", "Anywhere.", DEAMIDATION_MASS),
]


# =============================================================================
# Modification Lookup
# =============================================================================

def build_modification_lookup(
    modifications: Iterable[Modification],
) -> Dict[str, List[Modification]]:
    """Build an id → candidate modifications dictionary.

    The lookup is an ordinary dictionary owned by the caller. Build it once
    per load operation and pass it to the parsing functions that need it.

    Parameters
    ----------
    modifications : Iterable[Modification]
        Known modifications. Several entries may share an id when they
        target different residues (e.g. Phospho on S, T and Y).

    Returns
    -------
    lookup : Dict[str, List[Modification]]
        Candidates per id, in input order

    Examples
    --------
    >>> lookup = build_modification_lookup(COMMON_MODIFICATIONS)
    >>> [m.target for m in lookup["Phospho"]]
    ['S', 'T', 'Y']
    """
    lookup: Dict[str, List[Modification]] = defaultdict(list)
    for mod in modifications:
        lookup[mod.id].append(mod)
    return dict(lookup)


def _select_candidate(
    candidates: List[Modification],
    residue: Optional[str],
) -> Optional[Modification]:
    if residue is None:
        return candidates[0]
    for mod in candidates:
        if mod.target in ("", residue):
            return mod
    return None


# =============================================================================
# Modification Site Parsing
# =============================================================================

def parse_modification_sites(
    mods: str,
    mod_sites: str,
    lookup: Dict[str, List[Modification]],
) -> ModificationMap:
    """Parse modification/site strings into a one-based position map.

    Parameters
    ----------
    mods : str
        Modification string, e.g. "Oxidation@M;Phospho@S"
        Multiple modifications separated by semicolons
    mod_sites : str
        One-based positions, e.g. "1;4"
    lookup : Dict[str, List[Modification]]
        Lookup from build_modification_lookup()

    Returns
    -------
    ModificationMap
        position → list of modifications (position 1 is the N-terminus)

    Examples
    --------
    >>> lookup = build_modification_lookup(COMMON_MODIFICATIONS)
    >>> parse_modification_sites("Phospho@T", "7", lookup)[7][0].target
    'T'

    >>> parse_modification_sites("", "", lookup)
    {}

    Notes
    -----
    - Unknown ids and malformed sites are skipped with a warning
    - Handles byte strings (from pandas/numpy)
    """
    if not mods:
        return {}

    mod_list = mods.split(";")
    site_list = mod_sites.split(";") if ";" in mod_sites else [mod_sites]

    result: ModificationMap = {}
    for mod, site in zip(mod_list, site_list):
        mod = mod.strip()
        site = str(site).strip()

        # Handle byte strings from pandas/numpy
        if site.startswith("b'") and site.endswith("'"):
            site = site[2:-1]

        if not site.isdigit():
            logger.warning(f"Skipping modification {mod!r}: invalid site {site!r}")
            continue

        mod_id, _, residue = mod.partition("@")
        candidates = lookup.get(mod_id)
        if not candidates:
            logger.warning(f"Skipping unknown modification {mod_id!r}")
            continue

        selected = _select_candidate(candidates, residue or None)
        if selected is None:
            logger.warning(f"Skipping modification {mod!r}: no candidate targets {residue!r}")
            continue

        result.setdefault(int(site), []).append(selected)

    return result


def total_modification_mass(modifications: ModificationMap) -> float:
    """Sum the monoisotopic mass shifts of a position-keyed map."""
    return sum(
        mod.monoisotopic_mass
        for mods_at_site in modifications.values()
        for mod in mods_at_site
    )
