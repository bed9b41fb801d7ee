import logging

from app.components.logger.logger_interface import LoggerInterface

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Logger(LoggerInterface):
    def __init__(self, log_format: str = DEFAULT_LOG_FORMAT, log_level: str = "INFO"):
        self.log_format = log_format
        self.log_level = log_level.upper()

        logging.basicConfig(
            level=self.log_level,
            format=self.log_format,
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def get_logger(self, name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(self.log_level)
        return logger
