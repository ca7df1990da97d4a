"""Error types raised by the starfield package."""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes a value the layout cannot work with.

    Covers negative or non-integer sizes, invalid layout parameters and
    random values outside the unit interval. Subclasses ValueError so callers
    that already guard against ValueError keep working.
    """
