"""
PICOTS Assistant - Utility Modules
==================================
"""

from .i18n import get_text, set_language, get_current_language, SUPPORTED_LANGUAGES

__all__ = ["get_text", "set_language", "get_current_language", "SUPPORTED_LANGUAGES"]
