import logging

from config.settings import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """配置根日志，重复调用时不再追加 handler"""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
