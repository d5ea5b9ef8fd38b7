"""
PICOTS Assistant - Framework Completion
=======================================
Progress and per-field status for a PICOTS framework.
"""

from typing import Dict, Optional

from utils.i18n import get_text

from .state import FrameworkState, PICOTSField


def is_filled(value: str) -> bool:
    """True if the value has content other than whitespace."""
    return len((value or "").strip()) > 0


def completion(state: FrameworkState) -> int:
    """
    Percentage of PICOTS fields with non-blank content.

    Unlike pitfall analysis, whitespace-only text does not count here.
    """
    values = [value for _, value in state.items()]
    filled = sum(1 for value in values if is_filled(value))
    return round(filled / len(values) * 100)


def field_status(state: FrameworkState, lang: Optional[str] = None) -> Dict[PICOTSField, str]:
    """'Completed' / 'Not defined' per field, judged on raw (untrimmed) text."""
    completed = get_text("status_completed", lang)
    not_defined = get_text("status_not_defined", lang)
    return {
        picots_field: completed if value else not_defined
        for picots_field, value in state.items()
    }


def field_summary(state: FrameworkState, lang: Optional[str] = None) -> Dict[str, str]:
    """Field label -> content, with a placeholder for empty fields."""
    not_defined = get_text("status_not_defined", lang)
    return {picots_field.label: value or not_defined for picots_field, value in state.items()}
