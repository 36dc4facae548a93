"""Environment loader with optional .env support.

Values are merged in this order, later sources winning:
1) .env file (explicit path, or ./.env when present)
2) OS environment variables
3) Explicit overrides

With a prefix, only keys starting with it are kept, so unrelated
variables never reach the configuration layer.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values


class EnvLoader:
    """Load DBBACKUP_* style key/value pairs."""

    def __init__(self, env_file: Optional[Path | str] = None, prefix: Optional[str] = None) -> None:
        self.env_file = Path(env_file) if env_file else None
        self.prefix = prefix

    def _wanted(self, key: str) -> bool:
        return self.prefix is None or key.startswith(self.prefix)

    def load(self, overrides: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        env_path = self.env_file or Path.cwd() / ".env"
        sources = []
        if env_path.is_file():
            sources.append(dotenv_values(env_path))
        sources.append(os.environ)
        if overrides:
            sources.append(overrides)

        data: Dict[str, str] = {}
        for source in sources:
            data.update({k: str(v) for k, v in source.items() if v is not None and self._wanted(k)})
        return data


__all__ = ["EnvLoader"]
