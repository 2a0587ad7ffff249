"""Meal plan pipeline stages.

Subpackages:
- calories: household calorie targets
- prompting: prompt construction
- parsing: completion envelope and JSON plan parsing
- export: plain-text and iCalendar serializers

pipeline wires them together for the web layer.
"""
__all__ = ["calories", "prompting", "parsing", "export", "pipeline"]
