"""
Error Taxonomy for Projection Computations.

Construction-time and call-time failures are kept strictly apart:

- `ConfigurationError` is raised only while building an ellipsoid, a
  projection or a configuration object.
- `ProjectionError` and its subclasses are raised only by `project`,
  `inverse_project` and `convert` calls.

Hierarchy
---------
::

    MappingError
    ├── ConfigurationError
    └── ProjectionError
        ├── DomainError
        └── ConvergenceError

`ConfigurationError` and `DomainError` also derive from `ValueError` and
`ConvergenceError` from `ArithmeticError`, so callers that only know the
builtin exception types still catch them sensibly.
"""

from typing import Optional


class MappingError(Exception):
    """Base class of every error raised by this library."""


class ConfigurationError(MappingError, ValueError):
    """Invalid construction-time parameters.

    Parameters
    ----------
    message : str
        Description of the invalid parameter combination.
    parameter : str, optional
        Name of the offending parameter.
    value : float, optional
        The offending value.
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        value: Optional[float] = None
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class ProjectionError(MappingError):
    """Base class of call-time failures of a projection or pipeline."""


class DomainError(ProjectionError, ValueError):
    """A coordinate lies outside the valid domain of an operation.

    Attributes
    ----------
    parameter : str
        Name of the offending coordinate (e.g. 'lat', 'x').
    value : float
        The offending value.
    constraint : str
        Human-readable description of the violated bound.
    """

    def __init__(self, parameter: str, value: float, constraint: str):
        super().__init__(
            f"{parameter}={value!r} violates constraint: {constraint}"
        )
        self.parameter = parameter
        self.value = value
        self.constraint = constraint


class ConvergenceError(ProjectionError, ArithmeticError):
    """An iterative inverse did not reach its tolerance in time.

    Attributes
    ----------
    last_estimate : float
        The last latitude estimate in degrees.
    iterations : int
        Number of iterations performed.
    """

    def __init__(self, last_estimate: float, iterations: int):
        super().__init__(
            f"Inverse latitude did not converge after {iterations} iterations "
            f"(last estimate {last_estimate!r} deg)"
        )
        self.last_estimate = last_estimate
        self.iterations = iterations
