"""Sidebar summary of the current plan.

Provides summarize_plan(plan) -> list of display lines.
"""
from typing import List, Optional
from planchat.domain.Plan import Plan
from planchat.utilities.constants import EMPTY_PLAN_MESSAGE, PRIORITY_GLYPHS, UNKNOWN_PRIORITY_GLYPH

__all__ = ['summarize_plan', 'format_hours']


def format_hours(hours) -> str:
    """10.0 -> '10', 7.5 -> '7.5'."""
    try:
        return f"{float(hours):g}"
    except (TypeError, ValueError):
        return str(hours)


def summarize_plan(plan: Optional[Plan]) -> List[str]:
    if plan is None or plan.is_empty():
        return [EMPTY_PLAN_MESSAGE]
    lines = [f"{len(plan.courses)} Subject(s)"]
    for course in plan.courses:
        glyph = PRIORITY_GLYPHS.get(course.priority_name, UNKNOWN_PRIORITY_GLYPH)
        lines.append(f"{glyph} {course.id} ({format_hours(course.workload_hours)}h)")
    return lines
