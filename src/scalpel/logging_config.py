import os
import sys
from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)

_logging_configured = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def setup_logging(level=None, suppress_console=None, enable_file_logging=None):
    """
    Configure the global loguru logger once per process.

    Console output goes to stderr unless SCALPEL_MACHINE_MODE is set, so
    JSON on stdout stays parseable. File logging under .scalpel/logs/ is
    opt-in via SCALPEL_FILE_LOGGING=1.

    Args:
        level: Console level. Defaults to SCALPEL_LOG_LEVEL or INFO.
        suppress_console: If None, follow SCALPEL_MACHINE_MODE.
        enable_file_logging: If None, follow SCALPEL_FILE_LOGGING.
    """
    global _logging_configured

    if _logging_configured:
        return
    _logging_configured = True

    logger.remove()

    if level is None:
        level = os.getenv("SCALPEL_LOG_LEVEL", "INFO").upper()
    if suppress_console is None:
        suppress_console = _env_flag("SCALPEL_MACHINE_MODE")
    if enable_file_logging is None:
        enable_file_logging = _env_flag("SCALPEL_FILE_LOGGING")

    if not suppress_console:
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if enable_file_logging:
        from scalpel.paths import get_paths
        paths = get_paths()
        paths.ensure_dirs()

        # Edits are rare events; keep a week of them
        logger.add(
            paths.logs_dir / "scalpel.log",
            level="INFO",
            rotation="5 MB",
            retention="7 days",
            compression="gz",
            catch=True,
        )


def reset_logging():
    """Let the next setup_logging() call reconfigure the handlers."""
    global _logging_configured
    _logging_configured = False


# Configure the logger on import (honours the env vars above)
setup_logging()
