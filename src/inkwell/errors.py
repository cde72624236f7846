"""
Exception types raised by inkwell.
"""


# ---------------------------------------------------------------------------- #
class InkwellError(Exception):
    """Base class for all inkwell errors."""


class UnsupportedLanguage(InkwellError, LookupError):
    """
    No inflection rules are registered for the requested language code.
    """

    def __init__(self, language):
        self.language = language
        super().__init__(f'{language!r} is an unsupported language.')


class InvalidArgument(InkwellError, ValueError):
    """A structurally invalid parameter was passed to an operation."""
