from .fluid import (
    FluidAuxiliary,
    FluidRange,
    FluidResult,
    calculate_clamp,
    fluid_clamps,
    fluid_font_sizes,
    fluid_type,
)

__all__ = [
    "FluidAuxiliary",
    "FluidRange",
    "FluidResult",
    "calculate_clamp",
    "fluid_clamps",
    "fluid_font_sizes",
    "fluid_type",
]
