import sys
from typing import Optional, TYPE_CHECKING
from loguru import logger
import os

if TYPE_CHECKING:
    from .config import LoggingSettings

def setup_logging(debug_mode: bool = True, log_dir: Optional[str] = "logs",
                  rotation: str = "10 MB", retention: str = "1 week"):
    """
    Configures Loguru logger.

    Pass log_dir=None to log to stderr only.
    """
    # Remove default handler
    logger.remove()

    # Console Handler
    level = "DEBUG" if debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>")

    # File Handler
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        logger.add(os.path.join(log_dir, "app_{time}.log"), rotation=rotation, retention=retention, level="DEBUG")

    logger.info("Logging initialized.")

def configure_logging(settings: 'LoggingSettings'):
    """Apply a LoggingSettings section (see typed_event.config)."""
    setup_logging(
        debug_mode=settings.debug_mode,
        log_dir=settings.log_dir,
        rotation=settings.rotation,
        retention=settings.retention,
    )
