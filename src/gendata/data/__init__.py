"""Handles alias maps, default attribute names, and stored units."""

from gendata.data.mapped import (
    default_attribute_map,
    get_stored_unit,
    kind_aliases,
    resolve_attr_key,
    stored_unit_map,
)

__all__ = ["default_attribute_map", "get_stored_unit", "kind_aliases", "resolve_attr_key", "stored_unit_map"]
