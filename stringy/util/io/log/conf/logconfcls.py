#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Stderr logging configuration** (i.e., handler printing package messages to
standard error) class.
'''

# ....................{ IMPORTS                            }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid circular import dependencies, avoid importing from *ANY*
# package-specific modules at the top-level -- excluding those explicitly
# known *NOT* to import from this module.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import logging, sys
from beartype import beartype
from logging import Logger, StreamHandler
from stringy.util.io.log import logs
from stringy.util.io.log.logenum import LogLevel

# ....................{ CLASSES                            }....................
class LogConf(object):
    '''
    Stderr logging configuration, printing all package messages of at least a
    given level to standard error as lines resembling:

        stringy DEBUG: Internal encoding set to "latin-1".

    Instantiating this class attaches a :class:`StreamHandler` to the package
    logger *and* lowers the level of that logger to the same level. Calling
    the :meth:`deinit` method reverses both.

    Attributes
    ----------
    _handler : Optional[StreamHandler]
        Handler printing to standard error if this configuration is active *or*
        ``None`` otherwise.
    _logger : Logger
        Package logger.
    _logger_level_old : int
        Level of the package logger before this configuration was instantiated.
    '''

    # ..................{ INITIALIZERS                       }..................
    @beartype
    def __init__(self, level: LogLevel) -> None:
        '''
        Initialize this configuration.

        Parameters
        ----------
        level : LogLevel
            Minimum level of package messages to be printed.
        '''

        # Initialize the superclass.
        super().__init__()

        self._logger = logs.get()
        self._logger_level_old = self._logger.level

        # Stream to the current standard error rather than the original.
        self._handler = StreamHandler(sys.stderr)
        self._handler.setFormatter(logging.Formatter(
            fmt='{name} {levelname}: {message}',
            style='{',
        ))
        self._logger.addHandler(self._handler)

        # Set this property *AFTER* creating the handler it also sets.
        self.level = level


    def deinit(self) -> None:
        '''
        Detach and close the handler added by :meth:`__init__` and restore the
        prior level of the package logger, reducing to a noop if this method
        was already called.
        '''

        if self._handler is None:
            return

        self._logger.removeHandler(self._handler)
        self._handler.close()
        self._logger.setLevel(self._logger_level_old)
        self._handler = None

    # ..................{ PROPERTIES                         }..................
    @property
    def logger(self) -> Logger:
        '''
        Package logger.
        '''

        return self._logger


    @property
    def handler_stderr(self) -> StreamHandler:
        '''
        Handler printing package messages to standard error.
        '''

        return self._handler


    @property
    def level(self) -> LogLevel:
        '''
        Minimum level of package messages printed to standard error.
        '''

        return LogLevel(self._handler.level)


    @level.setter
    @beartype
    def level(self, level: LogLevel) -> None:
        '''
        Set the minimum level of package messages printed to standard error.

        Since the package logger discards messages below its own level before
        consulting handlers, this method sets both levels.
        '''

        self._handler.setLevel(level)
        self._logger.setLevel(level)
