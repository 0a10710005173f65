"""Error types shared by the takeoff models and the computation core."""

from __future__ import annotations
import math


class InvalidArgumentError(ValueError):
    """A numeric or geometric input is malformed.

    Raised fail-fast by every core function; never clamped or retried.
    `param` names the offending argument (or project field).
    """

    def __init__(self, param: str, message: str) -> None:
        self.param = param
        self.message = message
        super().__init__(message)


def require_finite(value: float, param: str) -> None:
    if math.isnan(value) or math.isinf(value):
        raise InvalidArgumentError(param, f"{param} must be a finite number.")


def require_non_negative(value: float, param: str) -> None:
    require_finite(value, param)
    if value < 0:
        raise InvalidArgumentError(param, f"{param} cannot be negative.")


def require_positive(value: float, param: str) -> None:
    require_finite(value, param)
    if value <= 0:
        raise InvalidArgumentError(param, f"{param} must be greater than zero.")
