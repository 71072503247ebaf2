# logger.py
import logging

FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Call once at process start (CLI or server), e.g.
    configure_logging(settings.log_level)
    """
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=FORMAT)
    # requests' connection pool is chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
