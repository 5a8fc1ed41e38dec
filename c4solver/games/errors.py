"""Board errors."""


class BoardFormatError(ValueError):
    """Textual board could not be parsed."""


class UnplaceError(RuntimeError):
    """Unplace on an empty column: a place/unplace pairing was broken."""
