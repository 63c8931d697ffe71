"""
Exceptions
==========

All errors raised by IsoBands derive from :class:`IsobandsError`. They
fall into two groups so that callers can tell "fix your input" apart
from "this is a bug in the engine":

InvalidInputError
    Raised before any computation starts when the samples, the grid
    dimensions or the thresholds are unusable. Also a ``ValueError``.
InternalError
    Raised when the classifier, the tracer or the polygon reconstruction
    reach a state that correct input can never produce. Also a
    ``RuntimeError``. These are never retried since the computation is
    deterministic.
"""


class IsobandsError(Exception):
    """Base class for all IsoBands errors."""


class InvalidInputError(IsobandsError, ValueError):
    """The caller passed samples, dimensions or thresholds that cannot be used."""


class BadDataError(InvalidInputError):
    """The sample array is empty."""


class BadDimensionError(InvalidInputError):
    """The number of samples does not match ``width * height``."""


class BadIntervalsError(InvalidInputError):
    """Fewer than two thresholds, or thresholds not strictly increasing."""


class InternalError(IsobandsError, RuntimeError):
    """The engine reached an inconsistent state."""


class UnexpectedCellCodeError(InternalError):
    """A cell code without an entry in the shape table."""

    def __init__(self, code, i=None, j=None):
        self.code = code
        location = "" if i is None else f" at cell ({i}, {j})"
        super().__init__(f"Unexpected cell code {code}{location}")


class OutOfBoundsError(InternalError):
    """A cell index outside of the cell grid."""


class UnexpectedOutOfGridMoveError(InternalError):
    """The tracer left the grid in a way it could not recover from."""


class PolygonReconstructionError(InternalError):
    """A hole ring without any exterior ring enclosing it."""
