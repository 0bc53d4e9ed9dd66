#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
High-level **encoding configuration** (i.e., process-wide settings governing
the default encoding of bytes converted to and from strings) functionality.

The **internal encoding** configured here is the encoding assumed of all
bytes passed to :class:`stringy.stringy.Stringy` instances *and* of all bytes
rendered from those instances when no encoding is explicitly passed. This
encoding defaults to the value of the ``${STRINGY_INTERNAL_ENCODING}``
environment variable if set *or* ``UTF-8`` otherwise.
'''

# ....................{ IMPORTS                            }....................
import os
from beartype import beartype
from beartype.typing import Iterator, Optional
from contextlib import contextmanager
from stringy import metadata
from stringy.util.io.log import logs
from stringy.util.type.text import encs

# ....................{ GLOBALS                            }....................
_enc_conf = None
'''
Singleton encoding configuration for the current Python process.
'''

# ....................{ CLASSES                            }....................
class EncodingConf(object):
    '''
    Package-specific encoding configuration.

    Attributes
    ----------
    _internal_encoding : str
        Name of the internal encoding, guaranteed to be a supported text
        encoding.
    '''

    # ..................{ INITIALIZERS                       }..................
    @beartype
    def __init__(self, internal_encoding: Optional[str] = None) -> None:
        '''
        Initialize this encoding configuration.

        Parameters
        ----------
        internal_encoding : Optional[str]
            Name of the internal encoding. Defaults to ``None``, in which case
            this name defaults to the value of the
            ``${STRINGY_INTERNAL_ENCODING}`` environment variable if set *or*
            :data:`stringy.metadata.ENCODING_INTERNAL_DEFAULT` otherwise.

        Raises
        ----------
        StringyEncodingException
            If this encoding is unsupported.
        '''

        # Initialize the superclass.
        super().__init__()

        # If no internal encoding was passed, defer to the environment.
        if internal_encoding is None:
            internal_encoding = os.environ.get(
                metadata.ENCODING_INTERNAL_ENV_VAR_NAME,
                metadata.ENCODING_INTERNAL_DEFAULT,
            )

        # Nullify all instance variables for safety *BEFORE* setting properties.
        self._internal_encoding = None

        # Set this property, implicitly validating this encoding.
        self.internal_encoding = internal_encoding

    # ..................{ PROPERTIES                         }..................
    @property
    def internal_encoding(self) -> str:
        '''
        Name of the internal encoding.
        '''

        return self._internal_encoding


    @internal_encoding.setter
    @beartype
    def internal_encoding(self, internal_encoding: str) -> None:
        '''
        Set the name of the internal encoding.

        Raises
        ----------
        StringyEncodingException
            If this encoding is unsupported.
        '''

        # If this encoding is unsupported, raise an exception.
        encs.die_unless_encoding(internal_encoding)

        # Log this change.
        logs.log_debug('Internal encoding set to "%s".', internal_encoding)

        # Classify this encoding.
        self._internal_encoding = internal_encoding

# ....................{ INITIALIZERS                       }....................
@beartype
def init(internal_encoding: Optional[str] = None) -> None:
    '''
    (Re)initialize the singleton encoding configuration for the active Python
    process with the passed internal encoding.

    Parameters
    ----------
    internal_encoding : Optional[str]
        Name of the internal encoding. Defaults to ``None``. See the
        :meth:`EncodingConf.__init__` method for further details.

    Raises
    ----------
    StringyEncodingException
        If this encoding is unsupported.
    '''

    # Module-scoped variables to be set below.
    global _enc_conf

    # Instantiate this singleton global with the requisite defaults.
    _enc_conf = EncodingConf(internal_encoding)


def deinit() -> None:
    '''
    Nullify the singleton encoding configuration for the active Python process.

    The next call to the :func:`get_enc_conf` function then reinitializes this
    configuration from the environment.
    '''

    # Module-scoped variables to be set below.
    global _enc_conf

    # Nullify this singleton global.
    _enc_conf = None

# ....................{ GETTERS                            }....................
def get_enc_conf() -> EncodingConf:
    '''
    Singleton encoding configuration for the active Python process,
    initialized on the first call to this function if :func:`init` has yet to
    be called.
    '''

    # If no encoding configuration exists, initialize one from the environment.
    if _enc_conf is None:
        init()

    # Return this configuration.
    return _enc_conf


def get_internal_encoding() -> str:
    '''
    Name of the internal encoding.
    '''

    return get_enc_conf().internal_encoding

# ....................{ SETTERS                            }....................
@beartype
def set_internal_encoding(internal_encoding: str) -> None:
    '''
    Set the name of the internal encoding.

    Raises
    ----------
    StringyEncodingException
        If this encoding is unsupported.
    '''

    get_enc_conf().internal_encoding = internal_encoding

# ....................{ CONTEXTS                           }....................
@contextmanager
@beartype
def setting_internal_encoding(internal_encoding: str) -> Iterator[None]:
    '''
    Context manager temporarily setting the internal encoding to the passed
    encoding for the duration of the body of the ``with`` statement containing
    this manager, restoring the prior internal encoding on exiting this body.

    Raises
    ----------
    StringyEncodingException
        If this encoding is unsupported.
    '''

    # Prior internal encoding to be restored.
    internal_encoding_old = get_internal_encoding()

    # Temporarily set this encoding.
    set_internal_encoding(internal_encoding)

    # Yield control to the body of the caller's "with" block, restoring the
    # prior encoding even if that block raises an exception.
    try:
        yield
    finally:
        set_internal_encoding(internal_encoding_old)
