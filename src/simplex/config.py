"""Runtime configuration for the Simplex command line."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LIBRARY_FILE = "patterns.yaml"


@dataclass
class SimplexConfig:
    """Command line configuration.

    Matcher options are per-expression and never come from here.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    library_path: Path = Path(DEFAULT_LIBRARY_FILE)

    @classmethod
    def from_env(cls, base_path: Path | None = None) -> SimplexConfig:
        """Create config from environment variables.

        Resolution order for the pattern library:
        1. SIMPLEX_LIBRARY_PATH env var
        2. Default: {base_path or cwd}/patterns.yaml
        """
        log_level = os.environ.get("SIMPLEX_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

        library_path = os.environ.get("SIMPLEX_LIBRARY_PATH")
        if library_path:
            return cls(log_level=log_level, library_path=Path(library_path))

        base = base_path if base_path is not None else Path.cwd()
        return cls(log_level=log_level, library_path=base / DEFAULT_LIBRARY_FILE)
