"""Common exception types for thermocascade property evaluation."""

class DegenerateTableError(RuntimeError):
    """Raised when a query lands on two adjacent samples sharing one coordinate."""


class TableLoadError(RuntimeError):
    """Raised when a reference table file is missing, empty or malformed."""


class InvalidInputError(ValueError):
    """Raised when the x, y, z request is not three numeric values."""
