"""Exception types raised by gendata records and stores."""


class GenericDataError(Exception):
    """Base class for gendata failures."""


class SingularLatticeError(GenericDataError, ValueError):
    """Raised when a unit cell has zero volume and cannot be inverted."""


class UnknownDataKindError(GenericDataError, KeyError):
    """Raised when a value cannot be resolved to a DataKind."""
