import dataclasses
import enum
import logging
import logging.config
import os
import typing

LOG_FORMAT = "[%(levelname)s]%(asctime)s: %(message)s"
VERBOSE_LOG_FORMAT = "[%(levelname)s]%(asctime)s:%(module)s:%(funcName)s:%(lineno)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S%z"

SCREEN_LOG_PATHS = {"-", "/dev/stdout"}


class LogType(enum.Enum):
    Screen = enum.auto()
    File = enum.auto()


@dataclasses.dataclass
class LogPath:
    log_type: LogType
    path: str

    @staticmethod
    def from_string(path: str) -> "LogPath":
        if path in SCREEN_LOG_PATHS:
            return LogPath(log_type=LogType.Screen, path=path)

        return LogPath(log_type=LogType.File, path=path)


class LoggingLevel(enum.Enum):
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    NOTSET = logging.NOTSET

    @staticmethod
    def allowed_types():
        return [level.name for level in LoggingLevel]


def setup_logger(
    log_paths: typing.Tuple[str, ...] = ("/dev/stdout",),
    logging_config_file: typing.Optional[str] = None,
    logging_level: str = LoggingLevel.INFO.name,
):
    """Configures the root logger, either from an ini style `logging_config_file` or with one handler per log path.

    "-" and "/dev/stdout" log to the screen, any other path logs to a file rotated at midnight.
    """

    if not log_paths and not logging_config_file:
        return

    if logging_config_file is not None:
        logging.config.fileConfig(logging_config_file, disable_existing_loggers=True)
        logging.info(f"use logging config file: {logging_config_file}")
        return

    if logging_level not in LoggingLevel.allowed_types():
        raise ValueError(f"unknown logging level {logging_level}, available levels are: {LoggingLevel.allowed_types()}")

    __logging_config([LogPath.from_string(path) for path in log_paths], logging_level)
    logging.info(f"logging to {log_paths}")


def __logging_config(log_paths: typing.List[LogPath], logging_level: str):
    logging.addLevelName(logging.INFO, "INFO")
    logging.addLevelName(logging.WARNING, "WARN")
    logging.addLevelName(logging.ERROR, "EROR")
    logging.addLevelName(logging.DEBUG, "DEBG")
    logging.addLevelName(logging.CRITICAL, "CTIC")

    handlers: typing.Dict[str, typing.Dict] = {}
    for log_path in log_paths:
        if log_path.log_type == LogType.Screen:
            handlers["console"] = __create_stdout_handler(logging_level)
        elif log_path.log_type == LogType.File:
            handlers[log_path.path] = __create_time_rotating_file_handler(logging_level, log_path.path)
        else:
            raise TypeError(f"Unsupported LogPath: {log_path}")

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {"format": LOG_FORMAT, "datefmt": LOG_DATE_FORMAT},
                "verbose": {"format": VERBOSE_LOG_FORMAT, "datefmt": LOG_DATE_FORMAT},
            },
            "handlers": handlers,
            "loggers": {"": {"handlers": list(handlers.keys()), "level": "DEBUG", "propagate": True}},
        }
    )


def __create_stdout_handler(logging_level: str) -> typing.Dict:
    return {
        "class": "logging.StreamHandler",
        "level": logging_level,
        "formatter": "standard",
        "stream": "ext://sys.stdout",
    }


def __create_time_rotating_file_handler(logging_level: str, file_path: str) -> typing.Dict:
    return {
        "class": "logging.handlers.TimedRotatingFileHandler",
        "level": logging_level,
        "formatter": "verbose",
        "filename": os.path.expandvars(os.path.expanduser(file_path)),
        "when": "midnight",
    }
