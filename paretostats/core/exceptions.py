"""
Exception hierarchy for paretostats.

All exceptions inherit from ParetoStatsError so callers can catch any
library-specific error with one clause. Errors raised by the raising
error policy carry the offending value and the function that rejected it.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the parameter and interpolate the actual value
    - Never catch and re-raise with less information
"""


class ParetoStatsError(Exception):
    """Base exception for all paretostats errors."""
    pass


class ValidationError(ParetoStatsError):
    """
    Input validation failed.

    Raised on API misuse that no error policy can turn into a number:
    unsupported dtypes, unknown policy names, non-numeric arguments.
    """
    pass


class DomainError(ValidationError):
    """
    A value lies outside the mathematical domain of the operation.

    Raised by the raising error policy for invalid distribution parameters,
    invalid evaluation arguments, and moments requested where they are
    undefined.

    Attributes:
        function: Qualified name of the function that rejected the value
        value: The offending value, as a float (None if not applicable)
    """

    def __init__(
        self,
        message: str,
        function: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.function = function
        self.value = value


class NumericalError(ParetoStatsError):
    """
    Numerical evaluation failed.

    Base class for errors arising while evaluating a well-defined formula.
    """
    pass


class EvaluationOverflowError(NumericalError):
    """
    The result of an evaluation is not representable.

    Raised by the raising error policy when a derived quantity (hazard,
    coefficient of variation) overflows the working precision.

    Attributes:
        function: Qualified name of the function that overflowed
        value: The argument that produced the overflow, if any
    """

    def __init__(
        self,
        message: str,
        function: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.function = function
        self.value = value


class DomainWarning(UserWarning):
    """Emitted by the warning error policy in place of raising."""
    pass
