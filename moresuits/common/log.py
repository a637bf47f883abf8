#!/usr/bin/env python3

"""
This module configures package logging.
"""

import logging
import logging.config
from pathlib import Path


def get_std_logger_conf():
    logger_conf = {
        'version': 1,
        'disable_existing_loggers': False,
        'loggers': {
            'moresuits': {
                'handlers': ['console'],
                'level': 'INFO',
                'propagate': False,
            },
        },
        'formatters': {
            'simple': {
                'format': '%(asctime)s - %(levelname)s [%(module)s]: %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
            'noformat': {
                'format': '%(message)s',
                'datefmt': '',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'noformat',
                'stream': 'ext://sys.stderr',
            },
            'file': {
                'class': 'logging.FileHandler',
                'formatter': 'simple',
                'encoding': 'utf-8',
            },
        },
    }
    return logger_conf


def configure_logging(log_dir=None, verbose=False):
    """Configure the package logger.

    Args:
        log_dir (str): Directory for "log.txt". No file logging when None.
        verbose (bool): Log DEBUG records.

    Returns:
        lgr (logging.Logger): Package logger.
    """
    logger_conf = get_std_logger_conf()
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        logger_conf["handlers"]["file"]["filename"] = f"{log_dir}/log.txt"
        logger_conf["loggers"]["moresuits"]["handlers"].append("file")
    else:
        del logger_conf["handlers"]["file"]
    if verbose:
        logger_conf["loggers"]["moresuits"]["level"] = "DEBUG"
    logging.config.dictConfig(logger_conf)
    lgr = logging.getLogger("moresuits")
    return lgr
