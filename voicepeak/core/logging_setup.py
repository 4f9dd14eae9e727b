import logging
from typing import Optional

from voicepeak.core.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging from settings; `level` overrides settings.log_level."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format=settings.log_format,
        datefmt=settings.log_date_format,
        force=True,
    )
    logging.getLogger("asyncio").setLevel(logging.WARNING)
