from typing import Any
from deferred_callbacks.config.logging import (
    LoggerAdapter,
    class_color_map,
    configure_logger,
)
from colorlog import ColoredFormatter
import logging


class Logger:
    def __init__(self, name: str, type: str, level: str = "info"):
        self.name = name
        self.type = type

        # Create a custom logging formatter
        def get_color(type, level):
            color = class_color_map.get(type, {}).get(level, "white")
            return color

        colors = {
            "DEBUG": get_color(self.type, "DEBUG"),
            "INFO": get_color(self.type, "INFO"),
            "WARNING": get_color(self.type, "WARNING"),
            "ERROR": get_color(self.type, "ERROR"),
            "CRITICAL": get_color(self.type, "CRITICAL"),
        }
        self.formatter = ColoredFormatter(
            f"%(asctime)s %(log_color)s%(class_name)s:%(levelname)s%(reset)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors=colors,
            reset=True,
        )

        self._logger = configure_logger(self.name, level)
        self.logger = LoggerAdapter(self._logger, {"class_name": self.name})

    def get_logger(self):
        return self._logger

    def set_level(self, level: str) -> None:
        self._logger.setLevel(getattr(logging, level.upper()))

    def debug(self, message: Any):
        self.logger.debug(
            msg=message, extra={"class_name": self.name, "formatter": self.formatter}
        )

    def error(self, message: Any, exc_info=True):
        self.logger.error(
            msg=message,
            extra={"class_name": self.name, "formatter": self.formatter},
            exc_info=exc_info,
        )

    def warning(self, message: Any, exc_info=None):
        self.logger.warning(
            msg=message,
            extra={"class_name": self.name, "formatter": self.formatter},
            exc_info=exc_info,
        )
