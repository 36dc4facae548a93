"""Backup result types."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class BackupOutcome:
    """Result of backing up one database"""
    database: str
    success: bool
    error: Optional[str] = None
    artifact: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "database": self.database,
            "success": self.success,
            "error": self.error,
            "artifact": str(self.artifact) if self.artifact else None,
        }
