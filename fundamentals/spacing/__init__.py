from .scale import (
    SPACING_PROPERTIES,
    ScaleBound,
    SpacingProperty,
    spacing_value,
    synthesize_spacing,
    synthesize_step,
    warn_if_large,
)

__all__ = [
    "SPACING_PROPERTIES",
    "ScaleBound",
    "SpacingProperty",
    "spacing_value",
    "synthesize_spacing",
    "synthesize_step",
    "warn_if_large",
]
