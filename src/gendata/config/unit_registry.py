"""
Shared pint unit registry.

A single registry is used package-wide so that quantities created in different
modules can be combined and converted.
"""

from functools import lru_cache

import pint


@lru_cache(maxsize=1)
def load_unit_registry() -> pint.UnitRegistry:
    """
    Return the package-wide unit registry.

    Returns
    -------
    pint.UnitRegistry
        Registry with ``Quantity`` bound to it.
    """
    return pint.UnitRegistry()
