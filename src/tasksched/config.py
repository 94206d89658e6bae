"""
Logging configuration for entrypoints, to be used with `logging.config.dictConfig`.
Library modules only ever obtain loggers, they never configure them
"""

logging_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "default": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "tasksched": {"level": "INFO"},
        "tasksched.low.tracing": {"level": "WARNING"},
    },
    "root": {"handlers": ["default"], "level": "WARNING"},
}

# same as above, but with lifecycle marks emitted
tracing_config = {
    **logging_config,
    "loggers": {
        "tasksched": {"level": "DEBUG"},
    },
}
