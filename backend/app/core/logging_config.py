import logging
from typing import Optional


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once at startup. Unknown levels fall back to INFO."""
    log_level = (level or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
