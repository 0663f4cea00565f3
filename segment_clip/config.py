"""
Clipping Configuration
======================

Immutable settings shared by the batch API, the renderer and the CLI.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


def _validate_number(name: str, value: object, allow_zero: bool) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(float(value)):
        raise ValidationError(f"{name} must be finite, got {value}")
    if allow_zero and value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    if not allow_zero and value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class ClipConfig:
    """Settings for a clipping run.

    Attributes:
        parallel_epsilon: Cyrus-Beck treats an edge as parallel to the segment
                          when |normal . direction| falls below this value
        view_padding_ratio: Fraction of the data span added around the fitted view
        view_min_padding: Lower bound on the view padding, in world units
        grid_step: Spacing of grid lines in the rendered view, in world units

    Raises:
        ValidationError: If any value is not a finite number in range
    """

    parallel_epsilon: float = 1e-12
    view_padding_ratio: float = 0.12
    view_min_padding: float = 1.0
    grid_step: float = 1.0

    def __post_init__(self) -> None:
        _validate_number("parallel_epsilon", self.parallel_epsilon, allow_zero=False)
        _validate_number("view_padding_ratio", self.view_padding_ratio, allow_zero=True)
        _validate_number("view_min_padding", self.view_min_padding, allow_zero=True)
        _validate_number("grid_step", self.grid_step, allow_zero=False)


DEFAULT_CONFIG = ClipConfig()
