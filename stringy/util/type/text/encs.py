#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **encoding** (i.e., bidirectional conversion between bytes and
Unicode text) facilities.

These facilities wrap the standard :mod:`codecs` registry, restricted to
**text encodings** (i.e., codecs converting between :class:`bytes` and
:class:`str`). Binary transforms also registered with :mod:`codecs` (e.g.,
``base64``, ``rot13``, ``zlib``) are *not* text encodings and are thus
unsupported here.
'''

# ....................{ IMPORTS                            }....................
import codecs
from beartype import beartype
from beartype.typing import FrozenSet
from encodings.aliases import aliases as _ENCODING_ALIASES
from functools import lru_cache
from stringy.exceptions import StringyEncodingException
from stringy.metadata import ENCODING_CANONICAL
from stringy.util.io.log import logs

# ....................{ HINTS                              }....................
BytesLike = bytes | bytearray | memoryview
'''
PEP-compliant type hint matching any **bytes-like object** (i.e., object
supporting the buffer protocol and decodable as text).
'''

# ....................{ CONSTANTS                          }....................
_BINARY_CODEC_NAMES = frozenset((
    'base64',
    'bz2',
    'hex',
    'quopri',
    'rot-13',
    'uu',
    'zlib',
))
'''
Frozen set of the canonical names of all **binary transforms** (i.e., codecs
converting :class:`bytes` to :class:`bytes` or :class:`str` to :class:`str`)
registered by the standard :mod:`encodings` package, as reported by the public
:attr:`codecs.CodecInfo.name` attribute of each.
'''

# ....................{ EXCEPTIONS                         }....................
@beartype
def die_unless_encoding(encoding: str, data: object = '') -> None:
    '''
    Raise an exception unless the passed name is that of a supported text
    encoding.

    Parameters
    ----------
    encoding : str
        Name of the encoding to be validated.
    data : object
        Bytes or text being converted with this encoding, embedded in the
        exception raised by this function for debuggability. Defaults to the
        empty string.

    Raises
    ----------
    StringyEncodingException
        If this encoding is unsupported.

    See Also
    ----------
    :func:`is_encoding`
        Further details.
    '''

    if not is_encoding(encoding):
        raise StringyEncodingException(
            'Encoding "{}" not supported'.format(encoding), data, encoding)


@beartype
def die_unless_canonical(text: str) -> None:
    '''
    Raise an exception unless the passed text is valid under the canonical
    encoding (i.e., UTF-8).

    Python strings are arbitrary sequences of codepoints and may thus contain
    **lone surrogates** (i.e., codepoints in the range ``U+D800``..``U+DFFF``
    *not* paired into a valid UTF-16 surrogate pair), typically produced by
    the ``surrogateescape`` error handler. Lone surrogates are unencodable as
    UTF-8 and hence prohibited.

    Raises
    ----------
    StringyEncodingException
        If this text contains one or more lone surrogates.
    '''

    encode(text, ENCODING_CANONICAL)

# ....................{ TESTERS                            }....................
@beartype
def is_encoding(encoding: str) -> bool:
    '''
    ``True`` only if the passed name (or alias) is that of a supported text
    encoding.

    Names are matched case-insensitively with hyphens and underscores treated
    as equivalent (e.g., ``UTF-8``, ``utf_8``, and ``utf8`` are synonymous).
    '''

    # Attempt to find this codec.
    try:
        codec_info = codecs.lookup(encoding)
    # If no such codec exists, this is *NOT* an encoding.
    except LookupError:
        return False

    # Else, this codec exists. Return true only if this is a text encoding.
    return codec_info.name not in _BINARY_CODEC_NAMES


@beartype
def is_valid(data: BytesLike, encoding: str) -> bool:
    '''
    ``True`` only if the passed bytes are well-formed under the passed encoding.

    Raises
    ----------
    StringyEncodingException
        If this encoding is unsupported.
    '''

    # If this encoding is unsupported, raise an exception.
    die_unless_encoding(encoding, data)

    # Attempt to strictly decode these bytes.
    try:
        bytes(data).decode(encoding, 'strict')
    # If these bytes are malformed, report this.
    except UnicodeDecodeError:
        return False

    # Else, these bytes are well-formed.
    return True

# ....................{ GETTERS                            }....................
@lru_cache(maxsize=None)
def get_encoding_names() -> FrozenSet[str]:
    '''
    Frozen set of the canonical names of all supported text encodings.

    This set is derived from the aliases registered by the standard
    :mod:`encodings` package and is thus a representative rather than
    exhaustive listing, as third-party codecs may register search functions
    accepting arbitrary names. To test an arbitrary name, prefer
    :func:`is_encoding` instead.
    '''

    # Set of these names to be returned.
    encoding_names = set()

    # For each alias and canonical module name known to the standard
    # "encodings" package...
    for encoding in set(_ENCODING_ALIASES.keys()) | set(
        _ENCODING_ALIASES.values()):
        # If this is a text encoding, add its canonical name to this set.
        if is_encoding(encoding):
            encoding_names.add(codecs.lookup(encoding).name)

    # Return this set as a frozen set.
    return frozenset(encoding_names)


@beartype
def get_name_canonical(encoding: str) -> str:
    '''
    Canonical name of the passed text encoding (e.g., ``utf-8`` when passed
    ``UTF8``).

    Raises
    ----------
    StringyEncodingException
        If this encoding is unsupported.
    '''

    # If this encoding is unsupported, raise an exception.
    die_unless_encoding(encoding)

    # Else, return the canonical name of this encoding.
    return codecs.lookup(encoding).name


@beartype
def is_name_equal(encoding_a: str, encoding_b: str) -> bool:
    '''
    ``True`` only if the two passed encoding names signify the same encoding
    (e.g., ``UTF-8`` and ``utf8``).

    Raises
    ----------
    StringyEncodingException
        If either encoding is unsupported.
    '''

    return get_name_canonical(encoding_a) == get_name_canonical(encoding_b)

# ....................{ CONVERTERS                         }....................
@beartype
def decode(data: BytesLike, encoding: str) -> str:
    '''
    Unicode text strictly decoded from the passed bytes under the passed
    encoding.

    Parameters
    ----------
    data : BytesLike
        Bytes to be decoded.
    encoding : str
        Name of the encoding these bytes are encoded with.

    Returns
    ----------
    str
        Text decoded from these bytes.

    Raises
    ----------
    StringyEncodingException
        If either:

        * This encoding is unsupported.
        * These bytes are malformed under this encoding, typically implying
          either a mismatched encoding *or* an encoding attack (i.e., bytes
          crafted to masquerade as text under another encoding).
    '''

    # If this encoding is unsupported, raise an exception.
    die_unless_encoding(encoding, data)

    # Attempt to strictly decode these bytes.
    try:
        return bytes(data).decode(encoding, 'strict')
    # If these bytes are malformed, raise a human-readable exception chained
    # onto the low-level exception.
    except UnicodeDecodeError as exception:
        raise StringyEncodingException(
            'Invalid string ({})'.format(exception.reason),
            data, encoding) from exception


@beartype
def encode(text: str, encoding: str) -> bytes:
    '''
    Bytes strictly encoded from the passed text under the passed encoding.

    Parameters
    ----------
    text : str
        Text to be encoded.
    encoding : str
        Name of the encoding to encode this text with.

    Returns
    ----------
    bytes
        Bytes encoded from this text.

    Raises
    ----------
    StringyEncodingException
        If either:

        * This encoding is unsupported.
        * This text contains one or more codepoints unrepresentable under this
          encoding.
    '''

    # If this encoding is unsupported, raise an exception.
    die_unless_encoding(encoding, text)

    # Attempt to strictly encode this text.
    try:
        return text.encode(encoding, 'strict')
    # If this text is unrepresentable, raise a human-readable exception chained
    # onto the low-level exception.
    except UnicodeEncodeError as exception:
        raise StringyEncodingException(
            'Invalid string ({})'.format(exception.reason),
            text, encoding) from exception


@beartype
def convert(data: BytesLike, from_encoding: str, to_encoding: str) -> bytes:
    '''
    Bytes converted from the passed source encoding to the passed target
    encoding.

    Parameters
    ----------
    data : BytesLike
        Bytes to be converted.
    from_encoding : str
        Name of the encoding these bytes are encoded with.
    to_encoding : str
        Name of the encoding to convert these bytes into.

    Raises
    ----------
    StringyEncodingException
        If either:

        * Either encoding is unsupported.
        * These bytes are malformed under the source encoding.
        * These bytes are unrepresentable under the target encoding.
    '''

    # Log this conversion.
    logs.log_debug(
        'Converting %d bytes from "%s" to "%s"...',
        len(data), from_encoding, to_encoding)

    # Decode these bytes and encode the resulting text.
    return encode(decode(data, from_encoding), to_encoding)
