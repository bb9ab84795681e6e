"""
Error types raised by the alignment package.
"""

from enum import Enum


class AlignmentError(Exception):
    """Base class for every error raised by the package."""


class SeqErrorKind(Enum):
    """General categories of SequenceError."""
    EMPTY_STRING = "EmptyString"
    INVALID_CODE = "InvalidCode"
    NON_ASCII = "NonAscii"


_SEQ_MESSAGES = {
    SeqErrorKind.EMPTY_STRING: "The string must contain at least one IUPAC code.",
    SeqErrorKind.INVALID_CODE: "The string contains a non valid IUPAC code.",
    SeqErrorKind.NON_ASCII: "All the IUPAC codes must be ASCII characters.",
}


class SequenceError(AlignmentError, ValueError):
    """Raised while mapping raw text to alphabet symbols."""

    def __init__(self, kind: SeqErrorKind, detail: str = ""):
        self.kind = kind
        message = _SEQ_MESSAGES[kind]
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class GridIndexError(AlignmentError, IndexError):
    """Raised when a grid cell outside the allocated dimensions is accessed."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        self.row = row
        self.col = col
        super().__init__(
            f"Cell ({row}, {col}) is out of bounds for a {rows}x{cols} grid"
        )


class EmptySequenceError(AlignmentError, ValueError):
    """Raised when an empty sequence reaches the alignment engine."""


class ScoringError(AlignmentError, ValueError):
    """Raised for incomplete substitution tables or invalid gap costs."""


class InputErrorKind(Enum):
    """General categories of InputError."""
    ALIGNER_NOT_EXIST = "AlignerNotExist"
    GAP_MODEL_NOT_EXIST = "GapModelNotExist"
    SCORING_MATRIX_NOT_EXIST = "ScoringMatrixNotExist"
    ALPHABET_NOT_EXIST = "AlphabetNotExist"


_INPUT_MESSAGES = {
    InputErrorKind.ALIGNER_NOT_EXIST: "The chosen aligner algorithm does not exist.",
    InputErrorKind.GAP_MODEL_NOT_EXIST: "The chosen gap model does not exist.",
    InputErrorKind.SCORING_MATRIX_NOT_EXIST: "The chosen scoring matrix does not exist.",
    InputErrorKind.ALPHABET_NOT_EXIST: "The chosen alphabet does not exist.",
}


class InputError(AlignmentError, ValueError):
    """Raised when a selector name from the configuration or CLI is unknown."""

    def __init__(self, kind: InputErrorKind, value=None):
        self.kind = kind
        self.value = value
        message = _INPUT_MESSAGES[kind]
        if value is not None:
            message = f"{message} Got {value!r}."
        super().__init__(f"({kind.value}) {message} Please check the documentation for more information.")


class SessionError(AlignmentError, RuntimeError):
    """Raised when an alignment session is run more than once."""


__all__ = [
    'AlignmentError',
    'SeqErrorKind',
    'SequenceError',
    'GridIndexError',
    'EmptySequenceError',
    'ScoringError',
    'InputErrorKind',
    'InputError',
    'SessionError',
]
