#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Package-specific exception hierarchy.
'''

# ....................{ IMPORTS                            }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid circular import dependencies, this module may import *ONLY*
# from standard Python modules. All package-specific modules must *ALWAYS* be
# able to safely import from this module at any level.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

from abc import ABCMeta

# ....................{ EXCEPTIONS                         }....................
class StringyException(Exception, metaclass=ABCMeta):
    '''
    Abstract base class of all package-specific exceptions.
    '''

    pass


class StringyLogException(StringyException):
    '''
    Logging-specific exception.
    '''

    pass

# ....................{ EXCEPTIONS ~ text                  }....................
class StringyTextException(StringyException):
    '''
    Abstract base class of all exceptions pertaining to the text of a
    :class:`stringy.stringy.Stringy` instance.

    Attributes
    ----------
    text : str
        Text being operated upon when this exception was raised.
    encoding : str
        Name of the encoding this text was assumed to be encoded with.
    '''

    # ..................{ INITIALIZERS                       }..................
    def __init__(
        self, message: str, text: object = '', encoding: str = 'UTF-8') -> None:

        # Initialize our superclass with this human-readable message.
        super().__init__(message)

        # Classify all remaining parameters.
        self.text = text
        self.encoding = encoding


class StringyArgumentException(StringyTextException, ValueError):
    '''
    **Argument** (i.e., parameter passed to a string operation)-specific
    exception, raised on semantically invalid arguments (e.g., a negative
    repetition count, an unrecognized tie-breaking mode).
    '''

    pass


class StringyEncodingException(StringyTextException):
    '''
    **Encoding** (i.e., conversion between bytes and text)-specific exception,
    raised on unrecognized encoding names, malformed byte sequences, and text
    failing to roundtrip through its target encoding.
    '''

    # ..................{ INITIALIZERS                       }..................
    def __init__(
        self, message: str, text: object = '', encoding: str = 'UTF-8') -> None:

        # Prefix this message by a human-readable label.
        super().__init__(
            'Encoding exception: {}'.format(message), text, encoding)


class StringyFormatException(StringyTextException):
    '''
    **Format** (i.e., sprintf-style templating)-specific exception, raised on
    templates referencing more arguments than were passed or containing
    malformed conversion specifications.
    '''

    pass


class StringyImmutableException(StringyTextException, TypeError):
    '''
    **Immutability** (i.e., attempted mutation of an immutable string)-specific
    exception.
    '''

    pass


class StringyOutOfRangeException(StringyTextException, IndexError):
    '''
    **Range** (i.e., indexation outside the bounds of a string)-specific
    exception.
    '''

    pass
