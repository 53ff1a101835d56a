import logging.config


def get_logging_config(level: str) -> dict:
    """Logging settings for the CLI, all records going to stderr."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "{levelname} {asctime} {module} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "verbose",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "ticket_cli": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
            "urllib3": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
        },
    }


def configure_logging(level: str) -> None:
    """Apply the CLI logging settings."""
    logging.config.dictConfig(get_logging_config(level))
