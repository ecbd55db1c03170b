from .rule import StyleRule, rules_to_dict

__all__ = ["StyleRule", "rules_to_dict"]
