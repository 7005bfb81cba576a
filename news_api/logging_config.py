import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a stream handler on the root logger.

    Unknown level names fall back to INFO.  Calling this more than once is
    harmless because ``basicConfig`` is a no-op when handlers already exist.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger("news_api").setLevel(log_level)
