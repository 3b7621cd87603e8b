"""Element lookups backed by the RDKit periodic table."""

import re

from rdkit.Chem import GetPeriodicTable


def get_atomic_number(symbol: str) -> int:
    """
    Return the atomic number for an element symbol.

    Parameters
    ----------
    symbol : str
        Element symbol, case-insensitive (e.g., "H", "cl", "Fe").

    Returns
    -------
    int
        Atomic number of the element.
    """
    match = re.match(r"[A-Za-z]+", symbol.strip())
    if not match:
        raise ValueError(f"Invalid element symbol: {symbol!r}")

    element = match.group(0).capitalize()
    ptable = GetPeriodicTable()
    try:
        atomic_number = ptable.GetAtomicNumber(element)
    except (RuntimeError, ValueError) as e:
        raise ValueError(f"Unknown element symbol: {symbol!r}") from e

    if atomic_number <= 0:
        raise ValueError(f"Unknown element symbol: {symbol!r}")
    return atomic_number


def is_valid_element(symbol: str) -> bool:
    """Check whether a string is a recognized element symbol."""
    try:
        get_atomic_number(symbol)
        return True
    except ValueError:
        return False
