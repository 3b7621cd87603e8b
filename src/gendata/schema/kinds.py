"""Closed enumeration of record kinds used as the fast lookup discriminator."""

from enum import Enum

from gendata.data.mapped import default_attribute_map, kind_aliases, resolve_attr_key
from gendata.exceptions import UnknownDataKindError


class DataKind(Enum):
    """Category of data carried by a record."""

    UNDEFINED = "undefined"
    PAIR = "pair"
    ENERGY = "energy"
    COMMENT = "comment"
    CONFORMER = "conformer"
    EXTERNAL_BOND = "external_bond"
    ROTAMER_LIST = "rotamer_list"
    VIRTUAL_BOND = "virtual_bond"
    RING = "ring"
    TORSION = "torsion"
    ANGLE = "angle"
    SERIAL_NUMS = "serial_nums"
    UNIT_CELL = "unit_cell"
    SPIN = "spin"
    CHARGE = "charge"
    SYMMETRY = "symmetry"
    CHIRAL = "chiral"
    OCCUPATION = "occupation"
    DENSITY = "density"
    ELECTRONIC = "electronic"
    VIBRATION = "vibration"
    ROTATION = "rotation"
    NUCLEAR = "nuclear"
    CUSTOM = "custom"

    @property
    def default_attribute(self) -> str:
        """str: Attribute name given to new records of this kind."""
        return default_attribute_map.get(self.value, "")


def resolve_kind(value: "DataKind | str", cutoff: float = 0.6) -> DataKind:
    """
    Resolve a kind given as an enum member, a canonical name, or an alias.

    Parameters
    ----------
    value : DataKind or str
        Kind to resolve, e.g. ``DataKind.UNIT_CELL``, ``"unit_cell"`` or ``"UnitCell"``.
    cutoff : float, optional
        Minimum alias similarity for fuzzy matches; 1.0 accepts exact aliases only.

    Returns
    -------
    DataKind
        The matching enum member.
    """
    if isinstance(value, DataKind):
        return value
    if not isinstance(value, str):
        raise UnknownDataKindError(f"Cannot resolve {type(value).__name__} {value!r} to a DataKind")

    try:
        canonical = resolve_attr_key(value.replace(" ", "_"), kind_aliases, cutoff=cutoff)
    except KeyError as e:
        raise UnknownDataKindError(f"Unknown data kind: {value!r}") from e
    return DataKind(canonical)
