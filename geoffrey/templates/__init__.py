"""
Templates layer: bundled markdown bodies and placeholder substitution.

Note: folder split
- geoffrey/templates/*.py → code (this module)
- geoffrey/templates/root/, data_sources/ → template bodies (package data)
"""

from .renderer import (
    PLACEHOLDER_PATTERN,
    detect_placeholders,
    has_placeholders,
    load_template,
    render_template,
    replace_placeholders,
    warn_unresolved,
)

__all__ = [
    "PLACEHOLDER_PATTERN",
    "detect_placeholders",
    "has_placeholders",
    "replace_placeholders",
    "load_template",
    "render_template",
    "warn_unresolved",
]
