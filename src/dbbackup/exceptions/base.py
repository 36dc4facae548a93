"""Base exception classes for dbbackup.

All dbbackup exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for the operator
"""

from typing import Any, Dict, Optional


class DbBackupError(Exception):
    """Base exception for all dbbackup errors.

    Attributes:
        code: Machine-readable error code (e.g., "USAGE_ERROR")
        message: Human-readable error message
        details: Optional additional context
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class UsageError(DbBackupError):
    """Invalid command line usage.

    Raised for missing or invalid flag values, a missing destination
    directory, a non-executable tool path, or an empty database list.
    """

    def __init__(self, message: str, code: str = "USAGE_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(code=code, message=message, details=details)


class ConfigurationError(DbBackupError):
    """Base for configuration and setup errors."""

    pass


class ToolNotFoundError(ConfigurationError):
    """A required external tool could not be located on PATH."""

    def __init__(self, tool: str, details: Optional[Dict[str, Any]] = None):
        self.tool = tool
        super().__init__(
            code="TOOL_NOT_FOUND",
            message=f"Cannot find '{tool}' on PATH; pass its location explicitly",
            details=details,
        )


class BackupError(DbBackupError):
    """A single database backup failed.

    Never escapes a run: the executor converts it into a failed outcome.
    """

    def __init__(self, database: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.database = database
        super().__init__(code="BACKUP_FAILED", message=message, details=details)
