"""
Template renderer: static markdown bodies + placeholder substitution.

Placeholders are literal triple-angle-bracket tokens:
- <<<project_name>>>      → project base name
- <<<data_source_name>>>  → data source base name

Substitution is a plain replace-all; no escaping, no expressions.
"""

import logging
import re
from pathlib import Path

from geoffrey.domain.errors import ErrorCodes, GeoffError

logger = logging.getLogger(__name__)

# Template bodies shipped next to this module (root/, data_sources/)
TEMPLATES_ROOT = Path(__file__).parent

PLACEHOLDER_PATTERN = re.compile(r"<<<(\w+)>>>")


# =============================================================================
# Placeholder Detection
# =============================================================================


def detect_placeholders(text: str) -> list[str]:
    """
    Placeholder names in text.

    "# <<<project_name>>>" → ["project_name"]

    Args:
        text: template body

    Returns:
        placeholder names, in order of appearance (duplicates kept)
    """
    return PLACEHOLDER_PATTERN.findall(text)


def has_placeholders(text: str) -> bool:
    """True if text contains any placeholder."""
    return bool(PLACEHOLDER_PATTERN.search(text))


def warn_unresolved(text: str, source: str) -> list[str]:
    """
    Log a warning for placeholders left after substitution.

    Args:
        text: rendered body
        source: template name, for the log line

    Returns:
        leftover placeholder names (empty when fully rendered)
    """
    if not has_placeholders(text):
        return []

    leftover = detect_placeholders(text)
    logger.warning(f"{source} still contains placeholder(s): {', '.join(leftover)}")
    return leftover


# =============================================================================
# Substitution
# =============================================================================


def replace_placeholders(text: str, replacements: dict[str, str]) -> str:
    """
    Replace every occurrence of each token.

    Args:
        text: template body
        replacements: full token ("<<<project_name>>>") → value

    Returns:
        substituted text (unchanged if no token occurs)
    """
    for token, value in replacements.items():
        count = text.count(token)
        if count:
            logger.debug(f"Replacing {count} occurrence(s) of {token} with {value!r}")
        text = text.replace(token, value)
    return text


# =============================================================================
# Loading
# =============================================================================


def load_template(relative_path: str, templates_root: Path | None = None) -> str:
    """
    Read a template body.

    Args:
        relative_path: e.g. "root/README.md"
        templates_root: override for tests (default: bundled templates)

    Returns:
        template text

    Raises:
        GeoffError: TEMPLATE_NOT_FOUND
    """
    root = templates_root or TEMPLATES_ROOT
    template_path = root / relative_path

    try:
        return template_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise GeoffError(
            ErrorCodes.TEMPLATE_NOT_FOUND,
            f"Template {relative_path} is missing from the geoff installation",
            path=template_path,
        ) from e


def render_template(
    relative_path: str,
    replacements: dict[str, str],
    templates_root: Path | None = None,
) -> str:
    """load_template + replace_placeholders; unknown tokens are kept and logged."""
    text = replace_placeholders(load_template(relative_path, templates_root), replacements)
    warn_unresolved(text, relative_path)
    return text
