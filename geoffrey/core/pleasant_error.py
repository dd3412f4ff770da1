"""
Pleasant errors: OSError → user-facing GeoffError.

Rules:
- Classify by coarse kind, not raw errno, so messages stay stable across platforms
- Fixed priority: already exists → missing parent → permission denied → unknown
- Every classified failure is fatal to the command (no retry, no rollback)
"""

import errno
import logging
from enum import Enum
from pathlib import Path
from typing import NoReturn

from geoffrey.domain.constants import ISSUES_URL
from geoffrey.domain.errors import ErrorCodes, GeoffError

logger = logging.getLogger(__name__)

# =============================================================================
# Classification
# =============================================================================


class ErrorKind(str, Enum):
    """Coarse filesystem failure kinds."""
    ALREADY_EXISTS = "already_exists"
    MISSING_PARENT = "missing_parent"
    PERMISSION_DENIED = "permission_denied"
    UNKNOWN = "unknown"


ERROR_CODES = {
    ErrorKind.ALREADY_EXISTS: ErrorCodes.ALREADY_EXISTS,
    ErrorKind.MISSING_PARENT: ErrorCodes.MISSING_PARENT,
    ErrorKind.PERMISSION_DENIED: ErrorCodes.PERMISSION_DENIED,
    ErrorKind.UNKNOWN: ErrorCodes.UNKNOWN_ERROR,
}

# Second half of the missing-parent message; callers without --parents pass their own
CREATE_PARENTS_HINT = (
    "or pass the `--parents` option\n"
    "\n"
    "For example:\n"
    "geoff create --parents test_project"
)


def classify_os_error(exc: OSError) -> ErrorKind:
    """
    Map an OSError to an ErrorKind.

    Args:
        exc: error raised by mkdir / write

    Returns:
        ErrorKind (UNKNOWN when nothing else matches)
    """
    err = getattr(exc, "errno", None)

    if isinstance(exc, FileExistsError) or err == errno.EEXIST:
        return ErrorKind.ALREADY_EXISTS
    if isinstance(exc, FileNotFoundError) or err == errno.ENOENT:
        return ErrorKind.MISSING_PARENT
    if isinstance(exc, PermissionError) or err in {errno.EACCES, errno.EPERM}:
        return ErrorKind.PERMISSION_DENIED
    return ErrorKind.UNKNOWN


# =============================================================================
# Messages
# =============================================================================


def explain(path: Path, kind: ErrorKind, hint: str | None = None) -> tuple[str, str]:
    """
    Build the (message, headline) pair for a failure kind.

    Args:
        path: target that could not be created
        kind: classified failure kind
        hint: how to fix a missing parent (default: CREATE_PARENTS_HINT)

    Returns:
        (full explanation, short headline)
    """
    if kind is ErrorKind.ALREADY_EXISTS:
        return (
            f"{path} already exists, please pick a different name",
            f"{path} exists",
        )

    if kind is ErrorKind.MISSING_PARENT:
        return (
            f"One or more parents of {path} doesn't exist. "
            "Please create the parent directories\n"
            f"{hint or CREATE_PARENTS_HINT}",
            "Parents don't exist",
        )

    if kind is ErrorKind.PERMISSION_DENIED:
        return (
            f"You don't have permission to create {path}. "
            "Please change your permissions or choose a\n"
            "different directory to create this project in",
            "Invalid permissions",
        )

    return (
        "There was an unknown error creating the directory,\n"
        f"if you need help with this you can raise an issue here: {ISSUES_URL}",
        "Unknown error",
    )


def build_error(
    path: Path,
    kind: ErrorKind,
    cause: OSError | None = None,
    hint: str | None = None,
) -> GeoffError:
    """Classified GeoffError for path."""
    message, headline = explain(path, kind, hint)
    context: dict[str, object] = {"path": path}
    if cause is not None:
        context["cause"] = cause
    return GeoffError(ERROR_CODES[kind], message, headline=headline, **context)


def raise_for_create_error(path: Path, exc: OSError, hint: str | None = None) -> NoReturn:
    """
    Classify a failed create and stop the command.

    Args:
        path: target that could not be created
        exc: the underlying OSError
        hint: missing-parent advice for this command (see explain)

    Raises:
        GeoffError: always
    """
    kind = classify_os_error(exc)
    logger.error(f"Failed to create {path}: {kind.value} ({exc})")
    raise build_error(path, kind, cause=exc, hint=hint) from exc
