"""
Errors raised by the practice-session core.
"""


class PracticeError(Exception):
    """Base class for practice-session errors."""
    pass


class EmptyInputError(PracticeError):
    """Raised when there are no source items or no drill types to build a session from."""
    pass


class InvalidOperationError(PracticeError):
    """Raised when a session operation is called out of order."""
    pass


class DrillTypeSelectionError(PracticeError):
    """Raised when the enabled drill types are unknown or too few for a flow."""
    pass


class SourceDataError(PracticeError):
    """Raised when a source provider cannot parse its input."""
    pass
