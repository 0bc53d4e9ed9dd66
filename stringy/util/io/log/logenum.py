#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Logging level enumerations.
'''

# ....................{ IMPORTS                            }....................
import enum, logging
from enum import IntEnum

# ....................{ ENUMS                              }....................
@enum.unique
class LogLevel(IntEnum):
    '''
    Enumeration of the **logging levels** package messages are logged at, each
    member equal to the corresponding integer constant of the standard
    :mod:`logging` module.

    Members are ordered from most to least verbose. Since members are integers,
    they are passable wherever the :mod:`logging` module expects a level:
    e.g.,

        >>> import logging
        >>> logging.getLogger('stringy').setLevel(LogLevel.INFO)

    The ``${STRINGY_LOG_LEVEL}`` environment variable names one of these
    members case-insensitively (e.g., ``warning`` for :attr:`WARNING`).
    '''

    DEBUG = logging.DEBUG
    '''
    Level of encoding conversions and configuration changes.
    '''


    INFO = logging.INFO
    '''
    Level of informational messages.
    '''


    WARNING = logging.WARNING
    '''
    Level of recoverable misuse (e.g., reconfiguring logging).
    '''


    ERROR = logging.ERROR
    '''
    Level of errors.
    '''
