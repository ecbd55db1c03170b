"""
Fluid typography, container components and a bounded spacing
scale for a utility-first CSS build.
"""

from fundamentals.api.build import Stylesheet, build_stylesheet
from fundamentals.plugin.plugins import containers, custom_spacing
from fundamentals.typography.fluid import fluid_type

__all__ = ["Stylesheet", "build_stylesheet", "containers", "custom_spacing", "fluid_type"]
