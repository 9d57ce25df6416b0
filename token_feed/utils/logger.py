import sys

from loguru import logger

from config.settings import Settings, settings as default_settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def setup_logger(config: Settings | None = None) -> None:
    """Route token_feed logs to stderr and, if ``log_dir`` is set, to a daily file.

    Replaces any sinks already registered on the loguru logger, so only call
    it when the provider owns the process's logging.
    """
    config = config or default_settings
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=config.log_level.upper(), colorize=True)

    if config.log_dir:
        logger.add(
            f"{config.log_dir.rstrip('/')}/token_feed_{{time:YYYY-MM-DD}}.log",
            rotation="10 MB",
            retention="3 days",
            level="DEBUG",
        )
