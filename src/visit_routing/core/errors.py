"""Exception hierarchy for the visit routing solver."""


class VisitRoutingError(Exception):
    """Base class for all solver errors."""


class ConfigurationError(VisitRoutingError, ValueError):
    """Invalid input or configuration, reported before any search starts."""


class InvalidTourError(ConfigurationError):
    """A tour is not a permutation of the city indices."""


class InvalidMatrixError(ConfigurationError):
    """A distance matrix is not square, symmetric, finite and non-negative."""


class SolverError(VisitRoutingError, RuntimeError):
    """
    The solver could not produce any result.

    Raised by the parallel coordinator when every worker failed.

    Attributes:
        errors: Mapping of worker id to the error message it raised
    """

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = dict(errors or {})
