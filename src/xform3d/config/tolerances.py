"""Numeric tolerance configuration.

This module defines the thresholds used by the conversion layer and by the
verification helpers, so that callers can tighten or loosen them in one place.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class ToleranceConfig:
    """Tolerances for conversions and approximate comparisons.

    Attributes:
        axis_singularity: Below this value of sin(angle / 2) the rotation axis
            is treated as undefined by ``to_axis_angle``
        rtol: Relative tolerance for approximate equality
        atol: Absolute tolerance for approximate equality
        rotation_atol: Absolute tolerance for orthonormality and determinant
            checks on rotation matrices
    """

    axis_singularity: float = 1e-3
    rtol: float = 1e-9
    atol: float = 1e-9
    rotation_atol: float = 1e-6

    def __post_init__(self) -> None:
        for f in fields(self):
            # Frozen dataclass: store the coerced float directly
            object.__setattr__(self, f.name, self.validate(f.name, getattr(self, f.name)))

    @staticmethod
    def validate(name: str, value: float) -> float:
        """Validate a single tolerance value.

        :param name: Tolerance name (used in error messages)
        :param value: Value to validate
        :returns: The value as float
        :raises ValueError: If value is not a number or is negative
        """
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValueError(f"{name}: expected number, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"{name}={value} must be non-negative")
        return float(value)

    def with_overrides(self, **overrides: float) -> ToleranceConfig:
        """Return a copy with some tolerances replaced.

        :param overrides: Tolerance names and new values
        :returns: New ToleranceConfig
        :raises AttributeError: If a name is not a known tolerance
        """
        known = {f.name for f in fields(self)}
        for name in overrides:
            if name not in known:
                raise AttributeError(f"Unknown tolerance '{name}'. Available: {sorted(known)}")
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update(overrides)
        return ToleranceConfig(**values)


DEFAULT_TOLERANCES = ToleranceConfig()
