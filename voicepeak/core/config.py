"""
Wrapper configuration using Pydantic Settings
"""

import os
import shutil
import sys
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_exe_path() -> str:
    """Best guess at where VOICEPEAK is installed on this platform."""
    if sys.platform.startswith("win"):
        return os.path.join(
            os.environ.get("ProgramFiles", r"C:\Program Files"),
            "VOICEPEAK",
            "voicepeak.exe",
        )
    if sys.platform == "darwin":
        return "/Applications/voicepeak.app/Contents/MacOS/voicepeak"
    return shutil.which("voicepeak") or "voicepeak"


class Settings(BaseSettings):
    """Wrapper settings with environment variable support (VOICEPEAK_*)"""

    # Executable Settings
    exe_path: str = default_exe_path()
    timeout: Optional[float] = None  # seconds, None waits forever
    # Decoding of stdout/stderr; set to the console code page (e.g. "cp932") if needed
    output_encoding: str = "utf-8"

    # Speech Defaults
    default_output_path: str = "./output.wav"

    # Logging Settings
    log_level: str = "INFO"
    log_format: str = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept level names in any case.

        Example:
            >>> normalize_log_level("debug")
            'DEBUG'
        """
        return str(v).strip().upper()

    @field_validator("timeout")
    @classmethod
    def non_positive_timeout_disables(cls, v):
        if v is not None and v <= 0:
            return None
        return v

    model_config = SettingsConfigDict(
        env_prefix="VOICEPEAK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
