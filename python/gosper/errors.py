class GosperError(Exception):
    pass


class InvalidGenerationError(GosperError, ValueError):
    """Raised for a generation count that is negative or not an integer."""
