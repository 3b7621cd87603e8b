"""Alias maps for resolving record kinds, default attribute names, and stored units."""

import difflib

# units in which record values are stored
stored_unit_map = {
    "cell_length": "angstrom",
    "cell_angle": "degree",
    "torsion": "radian",
    "angle": "radian",
    "energy": "kJ/mol",
}

# attribute names assigned by record constructors
default_attribute_map = {
    "pair": "PairData",
    "comment": "Comment",
    "conformer": "Conformers",
    "external_bond": "ExternalBondData",
    "virtual_bond": "VirtualBondData",
    "ring": "RingData",
    "torsion": "TorsionData",
    "angle": "AngleData",
    "unit_cell": "UnitCell",
    "symmetry": "Symmetry",
    "custom": "Custom",
}

kind_aliases = {
    "undefined": {"undefined", "none", "unknown"},
    "pair": {"pair", "pairdata", "key_value", "keyvalue", "kv"},
    "energy": {"energy", "energetics", "energydata"},
    "comment": {"comment", "commentdata", "note"},
    "conformer": {"conformer", "conformers", "conformerdata", "conformer_set"},
    "external_bond": {"external_bond", "externalbond", "externalbonddata", "exbond"},
    "rotamer_list": {"rotamer_list", "rotamers", "rotamerlist"},
    "virtual_bond": {"virtual_bond", "virtualbond", "virtualbonddata", "virtbond"},
    "ring": {"ring", "rings", "ringdata", "sssr", "ring_set"},
    "torsion": {"torsion", "torsions", "torsiondata", "dihedral", "dihedrals", "torsion_set"},
    "angle": {"angle", "angles", "angledata", "angle_set"},
    "serial_nums": {"serial_nums", "serialnums", "serial_numbers"},
    "unit_cell": {"unit_cell", "unitcell", "cell", "lattice"},
    "spin": {"spin", "spindata"},
    "charge": {"charge", "chargedata", "charges"},
    "symmetry": {"symmetry", "symmetrydata", "point_group", "space_group"},
    "chiral": {"chiral", "chirality", "chiraldata"},
    "occupation": {"occupation", "occupationdata"},
    "density": {"density", "densitydata", "cube"},
    "electronic": {"electronic", "electronicdata", "orbitals"},
    "vibration": {"vibration", "vibrational", "vibrationdata"},
    "rotation": {"rotation", "rotational", "rotationdata"},
    "nuclear": {"nuclear", "nucleardata"},
    "custom": {"custom", "customdata", "user"},
}


def get_stored_unit(name: str) -> str:
    """
    Retrieve the units in which a quantity is stored on its record.

    Parameters
    ----------
    name: str
        Quantity to return the stored units for.

    Returns
    -------
    str
        Stored units for name.
    """
    try:
        return stored_unit_map[name]
    except KeyError as e:
        raise KeyError(f"Key '{name}' does not exist in stored_unit_map: {stored_unit_map.keys()}") from e


def resolve_attr_key(key: str, alias_map: dict[str, set[str]], cutoff: float = 0.6) -> str:
    """
    Resolve an attribute name to its canonical key using aliases and fuzzy matching.

    Parameters
    ----------
    key : str
        The attribute name to resolve.
    alias_map : dict[str, set[str]]
        Canonical keys mapped to their accepted aliases.
    cutoff : float, optional
        Minimum similarity score to accept a match (default: 0.6).

    Returns
    -------
    str
        The canonical key corresponding to the input value.
    """
    # validate input
    try:
        value = key.lower()
    except AttributeError as e:
        raise TypeError(f"Input value must be a string, got {type(key)}: {key!r}") from e

    best_match = None
    best_score = 0.0
    match_to_key = {}

    # Flatten all aliases to map them back to their canonical key
    for canonical_key, aliases in alias_map.items():
        if not isinstance(aliases, (list, tuple, set)):
            raise TypeError(f"Aliases for key '{canonical_key}' must be list/tuple/set, got {type(aliases)}")

        for alias in aliases:
            try:
                alias_lower = alias.lower()
            except AttributeError as e:
                raise TypeError(f"Alias must be a string, got {type(alias)}: {alias!r}") from e

            match_to_key[alias_lower] = canonical_key.lower()
            # exact alias hits win outright
            if alias_lower == value:
                return match_to_key[alias_lower]

            score = difflib.SequenceMatcher(None, value, alias_lower).ratio()
            if score > best_score:
                best_score = score
                best_match = alias_lower

    # check that score obeys cutoff mark
    if best_score >= cutoff and isinstance(best_match, str):
        return match_to_key[best_match]
    raise KeyError(f"No close match found for '{value}' (best score: {best_score:.2f})")
