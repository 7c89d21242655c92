class InvalidParameters(ValueError):
    """Raised before any trial runs when the run inputs are out of range."""


class EmptyResultSet(ValueError):
    """Raised when summarizing a result set that holds no trials."""
