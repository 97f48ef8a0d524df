"""
Runtime Settings

Read from environment variables once, at process start.
"""

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_SCHEDULE_PATH = PROJECT_ROOT / "fees.json"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings for the transport entry points."""

    environment: str = "dev"
    port: int = 8080
    log_level: str = "INFO"
    schedule_path: Path = DEFAULT_SCHEDULE_PATH

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            port=int(os.environ.get("PORT", 8080)),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            schedule_path=Path(os.environ.get("FEE_SCHEDULE_PATH", DEFAULT_SCHEDULE_PATH)),
        )
