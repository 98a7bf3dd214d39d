"""Logging setup for the job board and the uvicorn server it runs under."""
import logging
import logging.config
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Chatty client libraries; their request-level lines drown out ours
QUIET_LOGGERS = ("pymongo", "httpx", "openai")


def setup_logging(level: str = "INFO") -> None:
    """Send app and server logs to stdout in one format."""
    handlers = ["stdout"]
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": LOG_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "plain",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "jobboard": {"level": level.upper(), "handlers": handlers, "propagate": False},
            "uvicorn": {"level": "INFO", "handlers": handlers, "propagate": False},
            **{name: {"level": "WARNING"} for name in QUIET_LOGGERS},
        },
        "root": {"level": "WARNING", "handlers": handlers},
    })


def get_logger(name: str) -> logging.Logger:
    """Logger under the "jobboard" namespace (module __name__ already is)."""
    if name == "jobboard" or name.startswith("jobboard."):
        return logging.getLogger(name)
    return logging.getLogger(f"jobboard.{name}")
