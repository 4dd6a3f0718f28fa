import logging
import logging.config

from pythonjsonlogger import jsonlogger


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configures the root logger to write diagnostics to stderr."""
    formatter = "json" if json_format else "plain"
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "%(levelname)s %(name)s: %(message)s"
            },
            "json": {
                "()": jsonlogger.JsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": "ext://sys.stderr"
            }
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": level.upper(),
                "propagate": False
            }
        }
    }

    logging.config.dictConfig(logging_config)
