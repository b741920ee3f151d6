"""Client-side logic layer.

Subpackages:
- conversation: command round-trips, bot-turn text and the session dispatcher
- suggestions: command completion from a fixed catalogue
- summary: sidebar lines for the current plan
"""
__all__ = ["conversation", "suggestions", "summary"]
