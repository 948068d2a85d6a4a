#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import threading

import coloredlogs

LOG_FORMAT = "[%(asctime)s] - [%(name)s] - [%(levelname)s] - [%(message)s]"


class MathLogger:
    """
    Per-class logger registry for SimMath.
    Loggers are named "SimMath.<ClassName>" and shared between instances.
    """

    _loggers = {}
    _lock = threading.RLock()

    @staticmethod
    def getLogger(class_name):
        """Get a logger instance for the given class name."""
        with MathLogger._lock:
            if class_name not in MathLogger._loggers:
                MathLogger._loggers[class_name] = logging.getLogger(
                    f"SimMath.{class_name}"
                )
            return MathLogger._loggers[class_name]


def MATH_LOGGER(cls):
    """Decorator to add logger functionality to a class."""
    cls.logger = MathLogger.getLogger(cls.__name__)

    cls.debug = lambda self, msg, *args, **kwargs: cls.logger.debug(
        msg, *args, **kwargs
    )
    cls.info = lambda self, msg, *args, **kwargs: cls.logger.info(msg, *args, **kwargs)
    cls.warning = lambda self, msg, *args, **kwargs: cls.logger.warning(
        msg, *args, **kwargs
    )
    cls.error = lambda self, msg, *args, **kwargs: cls.logger.error(
        msg, *args, **kwargs
    )
    cls.critical = lambda self, msg, *args, **kwargs: cls.logger.critical(
        msg, *args, **kwargs
    )
    cls.trace = lambda self, msg, *args, **kwargs: cls.logger.debug(
        f"TRACE: {msg}", *args, **kwargs
    )

    return cls


def setupLogging(log_level="INFO"):
    """Install a coloured console handler on the root logger."""
    root_logger = logging.getLogger()

    # Clear handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    coloredlogs.install(level=log_level, logger=root_logger, fmt=LOG_FORMAT)

    # Set 3rd-party logging level to root
    logging.getLogger("numpy").setLevel(logging.WARNING)

    return root_logger
