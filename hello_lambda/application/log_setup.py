# hello_lambda/application/log_setup.py
import sys
from loguru import logger
from hello_lambda.application.settings import Settings, get_settings
from hello_lambda.application.services.logger_service import LoguruLogger

def setup_logging(settings: Settings | None = None) -> LoguruLogger:
    """Configure Loguru once for the process and hand back a logger to inject."""
    settings = settings or get_settings()

    logger.remove()  # remove default handler(s) to avoid duplicates on warm starts
    if settings.log_json:
        logger.add(
            sys.stdout,
            level=settings.effective_log_level,
            serialize=True,
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stdout,
            level=settings.effective_log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                   "<level>{level: <8}</level> | "
                   "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                   "<level>{message}</level> | {extra}",
            backtrace=False,
            diagnose=False,
        )
    return LoguruLogger()
