"""
Error definitions for geoff.

Rules:
- No silent failures: every filesystem failure stops the command
- No retries, no rollback of partially created trees
- One exception type for everything the user should see (GeoffError)
"""

from typing import Any


class GeoffError(Exception):
    """
    User-facing failure of a geoff command.

    headline is the short, stable text (also the exception text);
    message is the full explanation printed to stderr.

    Usage:
        raise GeoffError(
            ErrorCodes.ALREADY_EXISTS,
            "test_project already exists, please pick a different name",
            headline="test_project exists",
            path="test_project",
        ) from e
    """

    def __init__(
        self,
        code: str,
        message: str,
        headline: str | None = None,
        **context: Any,
    ) -> None:
        self.code = code
        self.message = message
        self.headline = headline or message
        self.context = context
        super().__init__(f"[{code}] {self.headline}")

    def to_dict(self) -> dict[str, Any]:
        """For logs / JSON serialization."""
        return {
            "code": self.code,
            "headline": self.headline,
            "message": self.message,
            **{k: str(v) for k, v in self.context.items()},
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants."""

    # === Classified filesystem failures ===
    ALREADY_EXISTS = "ALREADY_EXISTS"
    MISSING_PARENT = "MISSING_PARENT"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    # === Unclassified filesystem failures ===
    CREATE_FAILED = "CREATE_FAILED"  # project subdirectory
    WRITE_FAILED = "WRITE_FAILED"  # root file / metadata.md

    # === Templates ===
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"

    # === Project membership ===
    NOT_MANAGED = "NOT_MANAGED"

    # === Input ===
    CONFLICTING_OPTIONS = "CONFLICTING_OPTIONS"

    # === Configuration ===
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
