"""String and unit formatting."""


def resolve_units(requested: str, default: str) -> str:
    """Return the requested unit if provided, otherwise fall back to the default."""
    return requested if requested else default


def format_vector(vec) -> str:
    """Format a 3-vector as a compact string for log messages and reprs."""
    return "(" + ", ".join(f"{float(x):.4f}" for x in vec) + ")"
