"""
StyleLens error types.
"""


class StyleLensError(Exception):
    """Base class for analysis errors."""


class ParseError(StyleLensError):
    """A document could not be parsed under its dialect's grammar."""

    def __init__(self, file_id: str, message: str):
        super().__init__(f"{file_id}: {message}")
        self.file_id = file_id
        self.message = message


class ReadError(StyleLensError):
    """The host could not read a document."""

    def __init__(self, file_id: str, message: str):
        super().__init__(f"{file_id}: {message}")
        self.file_id = file_id
        self.message = message


class InvalidNameError(StyleLensError):
    def __init__(self, name: str):
        super().__init__(f"Invalid class name {name!r}: expected lowercase letters, digits, '_' or '-'")
        self.name = name


class NoDefinitionTarget(StyleLensError):
    """No stylesheet is available to receive a generated rule."""
