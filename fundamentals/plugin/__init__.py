"""plugin — host-facing plugin entry points."""

from fundamentals.plugin.api import PluginApi, RuleCollector
from fundamentals.plugin.plugins import containers, custom_spacing

__all__ = ["PluginApi", "RuleCollector", "containers", "custom_spacing"]
