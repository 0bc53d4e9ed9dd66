#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Stderr logging switch** (i.e., process-wide opt-in printing of package
messages to standard error).

Package messages are discarded by default. Setting the
``${STRINGY_LOG_LEVEL}`` environment variable to the name of a logging level
(e.g., ``STRINGY_LOG_LEVEL=debug``) prints all package messages of at least
that level to standard error from the first importation of the
:mod:`stringy.stringy` submodule. Applications may also toggle this output at
runtime by calling the :func:`init` and :func:`deinit` functions.
'''

# ....................{ IMPORTS                            }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid circular import dependencies, avoid importing from *ANY*
# package-specific modules at the top-level -- excluding those explicitly
# known *NOT* to import from this module.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import os
from beartype import beartype
from beartype.typing import Optional
from stringy import metadata
from stringy.exceptions import StringyLogException
from stringy.util.io.log.logenum import LogLevel

# ....................{ GLOBALS                            }....................
_log_conf = None
'''
Singleton stderr logging configuration if enabled *or* ``None`` otherwise.
'''

# ....................{ TESTERS                            }....................
def is_log_conf() -> bool:
    '''
    ``True`` only if package messages are currently printed to standard error.
    '''

    return _log_conf is not None

# ....................{ GETTERS                            }....................
def get_log_conf() -> 'LogConf':
    '''
    Singleton stderr logging configuration.

    Raises
    ----------
    StringyLogException
        If this configuration is disabled.
    '''

    if _log_conf is None:
        raise StringyLogException(
            'Stderr logging disabled (i.e., neither '
            '${{{}}} set nor logconf.init() called).'.format(
                metadata.LOG_LEVEL_ENV_VAR_NAME))

    return _log_conf


@beartype
def get_log_level(level_name: str) -> LogLevel:
    '''
    Logging level with the passed case-insensitive name, ignoring surrounding
    whitespace.

    Raises
    ----------
    StringyLogException
        If no such level exists.
    '''

    try:
        return LogLevel[level_name.strip().upper()]
    except KeyError as exception:
        raise StringyLogException(
            'Logging level "{}" unrecognized (i.e., not one of {}).'.format(
                level_name,
                ', '.join(level.name.lower() for level in LogLevel),
            )) from exception


def get_log_level_env() -> Optional[LogLevel]:
    '''
    Logging level named by the ``${STRINGY_LOG_LEVEL}`` environment variable
    if set to a non-empty value *or* ``None`` otherwise.

    Raises
    ----------
    StringyLogException
        If this variable names no logging level.
    '''

    level_name = os.environ.get(metadata.LOG_LEVEL_ENV_VAR_NAME, '')
    return get_log_level(level_name) if level_name.strip() else None

# ....................{ INITIALIZERS                       }....................
@beartype
def init(level: Optional[LogLevel] = None) -> None:
    '''
    Print all package messages of at least the passed level to standard error.

    If stderr logging is already enabled, this function only changes the
    level of that logging.

    Parameters
    ----------
    level : Optional[LogLevel]
        Minimum level of messages to print. Defaults to ``None``, in which case
        this level is that named by the ``${STRINGY_LOG_LEVEL}`` environment
        variable if set *or* this function reduces to a noop otherwise.

    Raises
    ----------
    StringyLogException
        If no level is passed and that variable names no logging level.
    '''

    # Avoid circular import dependencies.
    from stringy.util.io.log import logs
    from stringy.util.io.log.conf.logconfcls import LogConf

    # Module-scoped variables to be set below.
    global _log_conf

    if level is None:
        level = get_log_level_env()

        # If the environment requests no logging, silently noop.
        if level is None:
            return

    if _log_conf is None:
        _log_conf = LogConf(level)
    else:
        _log_conf.level = level

    logs.log_debug(
        'Printing package messages of level "%s" or higher to stderr.',
        level.name.lower(),
    )


def deinit() -> None:
    '''
    Stop printing package messages to standard error if currently printed *or*
    reduce to a noop otherwise.
    '''

    # Module-scoped variables to be set below.
    global _log_conf

    if _log_conf is None:
        return

    _log_conf.deinit()
    _log_conf = None
