import logging

from nthprime._config import config

cfg = config.get('log', dict())


def level():
    """
    Get default log level
    """
    return {
        'notset': logging.NOTSET,
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warning': logging.WARNING,
        'error': logging.ERROR,
        'critical': logging.CRITICAL
    }[cfg.get('level', 'info')] # yapf: disable
