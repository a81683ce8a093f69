import logging
import sys
import traceback
from colorlog import StreamHandler, ColoredFormatter


class LoggerAdapter(logging.LoggerAdapter):
    def __init__(self, logger, extra):
        super().__init__(logger, extra)
        self.logger = logger
        self.extra = extra

    def process(self, msg, kwargs):
        # Keep per-call extras (formatter, class_name) instead of replacing them
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs

    def log(self, level, msg, *args, **kwargs):
        exc_info = kwargs.pop("exc_info", None)
        if exc_info is True:
            exc_info = sys.exc_info()
        if isinstance(exc_info, BaseException):
            exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
        if isinstance(exc_info, tuple) and exc_info[0] is not None:
            # Format exception with full traceback
            msg = f"{msg}\n" + "".join(
                traceback.format_exception(exc_info[0], exc_info[1], exc_info[2])
            )

        formatter = kwargs.get("extra", {}).get("formatter")
        if formatter and self.logger.handlers:
            self.logger.handlers[0].setFormatter(formatter)

        super().log(level, msg, *args, **kwargs)


class_color_map = {
    "registry": {
        "INFO": "light_blue",
        "DEBUG": "cyan",
        "ERROR": "red",
        "WARNING": "yellow",
        "CRITICAL": "red,bg_white",
    },
    "sink": {
        "INFO": "green",
        "DEBUG": "cyan",
        "ERROR": "red",
        "WARNING": "yellow",
        "CRITICAL": "red,bg_white",
    },
}

formatter = ColoredFormatter(
    "%(asctime)s %(log_color)s%(class_name)s:%(levelname)s%(reset)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    reset=True,
    log_colors={
        "DEBUG": "cyan",
        "INFO": "light_blue",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "red,bg_white",
    },
)


def configure_logger(name: str, level: str = "INFO") -> logging.Logger:
    """Return the named logger with a single colored console handler attached."""
    logger = logging.getLogger(name)

    # Level is only applied on first setup so set_level() changes survive
    if not logger.handlers:
        logger.setLevel(getattr(logging, level.upper()))
        handler = StreamHandler()
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Prevent logs from propagating to the root logger
    logger.propagate = False
    return logger
