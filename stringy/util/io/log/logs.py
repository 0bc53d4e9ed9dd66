#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level logging facilities.

Logging Hierarchy
----------
Loggers are hierarchically structured according to their ``.``-delimited
names. All messages logged by this package are logged to the **package
logger** (i.e., the logger named ``stringy``), whose messages propagate up to
the root logger of the active Python process.

Since this package is a library rather than an application, the package logger
is assigned a :class:`logging.NullHandler` on importation. Messages logged by
this package are thus silently discarded unless either:

* The calling application configures the root logger (e.g., by calling
  :func:`logging.basicConfig`).
* The ``${STRINGY_LOG_LEVEL}`` environment variable is set *or* the
  :func:`stringy.util.io.log.conf.logconf.init` function is called, printing
  these messages to standard error.
'''

# ....................{ IMPORTS                            }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid circular import dependencies, avoid importing from *ANY*
# package-specific modules at the top-level -- excluding those explicitly
# known *NOT* to import from this module. Since all package-specific modules
# must *ALWAYS* be able to safely import from this module at any level, these
# circularities are best avoided here rather than elsewhere.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import logging
from beartype import beartype
from beartype.typing import Optional
from stringy import metadata
from stringy.util.io.log.logenum import LogLevel

# ....................{ GETTERS                            }....................
@beartype
def get(logger_name: Optional[str] = None) -> logging.Logger:
    '''
    Logger with the passed ``.``-delimited name, defaulting to the name of the
    top-level package (i.e., ``stringy``) implying the **package logger**.

    Parameters
    ----------
    logger_name : Optional[str]
        ``.``-delimited name of the logger to retrieve. By convention, logger
        names are typically that of the calling module (e.g., ``__name__``).
        Defaults to ``None``, in which case the package logger is retrieved.
    '''

    # Default the name of this logger to the name of the package logger.
    if logger_name is None:
        logger_name = metadata.PACKAGE_NAME

    # If this name is the empty string, this function would get the root
    # logger. Since this name being empty typically constitutes an implicit
    # error rather than an attempt to get the root logger, prevent this.
    assert logger_name, 'Logger name empty.'

    # Return this logger.
    return logging.getLogger(logger_name)

# ....................{ LOGGERS ~ level                    }....................
@beartype
def log_levelled(message: str, level: LogLevel, *args, **kwargs) -> None:
    '''
    Log the passed message of the passed logging level (e.g.,
    :attr:`LogLevel.INFO`) with the package logger, formatted with the passed
    ``%``-style positional and keyword arguments.

    Parameters
    ----------
    message : str
        Message to log containing zero or more ``%``-style format specifiers.
    level : LogLevel
        Logging level to log this message with (e.g., :attr:`LogLevel.INFO`).

    All remaining parameters are interpolated into the message according to the
    ``%``-style format specifiers embedded in this message.
    '''

    # The Logger.log() method accepts these parameters in the opposite order.
    get().log(level, message, *args, **kwargs)


@beartype
def log_debug(message: str, *args, **kwargs) -> None:
    '''
    Log the passed debug message with the package logger, formatted with the
    passed ``%``-style positional and keyword arguments.
    '''

    get().debug(message, *args, **kwargs)


@beartype
def log_info(message: str, *args, **kwargs) -> None:
    '''
    Log the passed informational message with the package logger, formatted
    with the passed ``%``-style positional and keyword arguments.
    '''

    get().info(message, *args, **kwargs)


@beartype
def log_warning(message: str, *args, **kwargs) -> None:
    '''
    Log the passed warning message with the package logger, formatted with the
    passed ``%``-style positional and keyword arguments.
    '''

    get().warning(message, *args, **kwargs)


@beartype
def log_error(message: str, *args, **kwargs) -> None:
    '''
    Log the passed error message with the package logger, formatted with the
    passed ``%``-style positional and keyword arguments.
    '''

    get().error(message, *args, **kwargs)

# ....................{ MAIN                               }....................
# Silence the "No handlers could be found" fallback for applications that never
# configure logging, as recommended for all library loggers.
get().addHandler(logging.NullHandler())
