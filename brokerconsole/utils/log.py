"""The module contains facilities for configuring logging in brokerconsole.

The LOGGING setting is layered over DEFAULT_LOGGING rather than applied
on its own, so the loggers of the console modules, which are created at
import time, are never disabled by a user configuration.
"""

import copy
import logging
import logging.config
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any, Final

DEFAULT_LOGGING: 'Final' = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'console': {
            'format': '{asctime} {levelname} [{name}] {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'console',
            'level': 'INFO',
        },
    },
    'loggers': {
        'brokerconsole': {
            'handlers': ['console'],
            'level': 'INFO',
        },
    },
}

_NAMED_SECTIONS = ('filters', 'formatters', 'handlers', 'loggers')


def merge_logging_settings(logging_settings: 'dict[str, Any] | None') -> dict[str, 'Any']:
    """Return DEFAULT_LOGGING updated with the specified settings.
    The named sections are merged entry by entry, the other keys replace
    the default ones. Existing loggers are always kept enabled.
    """
    config = copy.deepcopy(DEFAULT_LOGGING)
    for key, value in (logging_settings or {}).items():
        if key in _NAMED_SECTIONS:
            config.setdefault(key, {}).update(copy.deepcopy(value))
        else:
            config[key] = copy.deepcopy(value)

    config['disable_existing_loggers'] = False
    return config


def configure_logging(logging_settings: 'dict[str, Any] | None') -> None:
    """Configure logging with the default settings extended by the given ones."""
    logging.config.dictConfig(merge_logging_settings(logging_settings))
