"""
Logging setup.

Modules log through ``logging.getLogger(__name__)``; this installs the
single console handler they all propagate to.
"""

import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Log to stderr; the ``app`` hierarchy at *level*, everything else at WARNING."""
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {"handlers": ["console"], "level": "WARNING"},
        "loggers": {
            "app": {"level": level.upper()},
        },
    })
