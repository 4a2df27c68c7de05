"""Configuration for xform3d."""

from xform3d.config.tolerances import DEFAULT_TOLERANCES, ToleranceConfig

__all__ = [
    "DEFAULT_TOLERANCES",
    "ToleranceConfig",
]
