#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests for the :mod:`stringy.util.type.text.encs` submodule.
'''

# ....................{ IMPORTS                            }....................
import pytest

# ....................{ TESTS ~ testers                    }....................
@pytest.mark.parametrize(('encoding', 'is_encoding'), (
    ('UTF-8', True),
    ('utf8', True),
    ('utf_8', True),
    ('UTF-32', True),
    ('latin-1', True),
    ('Windows-1252', True),
    ('shift_jis', True),
    ('base64', False),
    ('rot13', False),
    ('zlib', False),
    ('base64_codec', False),
    ('bz2', False),
    ('hex', False),
    ('quopri', False),
    ('rot_13', False),
    ('uu_codec', False),
    ('idna', True),
    ('no-such-encoding', False),
))
def test_encs_is_encoding(encoding: str, is_encoding: bool) -> None:
    '''
    Test the :func:`stringy.util.type.text.encs.is_encoding` tester.
    '''

    # Defer heavyweight imports.
    from stringy.util.type.text import encs

    assert encs.is_encoding(encoding) is is_encoding


def test_encs_is_valid() -> None:
    '''
    Test the :func:`stringy.util.type.text.encs.is_valid` tester.
    '''

    # Defer heavyweight imports.
    from stringy.exceptions import StringyEncodingException
    from stringy.util.type.text import encs

    assert encs.is_valid(b'\xc3\xa6', 'UTF-8')
    assert not encs.is_valid(b'\xff', 'UTF-8')
    assert not encs.is_valid(b'abc', 'UTF-32')
    assert encs.is_valid(bytearray(b'\xff'), 'latin-1')

    with pytest.raises(StringyEncodingException):
        encs.is_valid(b'abc', 'no-such-encoding')

# ....................{ TESTS ~ getters                    }....................
def test_encs_get_names() -> None:
    '''
    Test the family of encoding name getters.
    '''

    # Defer heavyweight imports.
    from stringy.exceptions import StringyEncodingException
    from stringy.util.type.text import encs

    encoding_names = encs.get_encoding_names()
    assert 'utf-8' in encoding_names
    assert 'iso8859-1' in encoding_names
    assert 'base64' not in encoding_names
    assert 'hex' not in encoding_names
    assert 'rot-13' not in encoding_names

    assert encs.get_name_canonical('UTF8') == 'utf-8'
    assert encs.is_name_equal('UTF-8', 'utf_8')
    assert encs.is_name_equal('latin-1', 'ISO-8859-1')
    assert not encs.is_name_equal('UTF-8', 'UTF-16')

    with pytest.raises(StringyEncodingException):
        encs.get_name_canonical('no-such-encoding')

# ....................{ TESTS ~ converters                 }....................
def test_encs_decode_encode() -> None:
    '''
    Test the :func:`stringy.util.type.text.encs.decode` and
    :func:`stringy.util.type.text.encs.encode` functions.
    '''

    # Defer heavyweight imports.
    from stringy.exceptions import StringyEncodingException
    from stringy.util.type.text import encs

    assert encs.decode(b'\xc3\xa6', 'UTF-8') == 'æ'
    assert encs.decode(memoryview(b'\xe6'), 'latin-1') == 'æ'
    assert encs.encode('æ', 'UTF-8') == b'\xc3\xa6'
    assert encs.encode('æ', 'latin-1') == b'\xe6'

    with pytest.raises(StringyEncodingException) as exception_info:
        encs.decode(b'\xff', 'UTF-8')
    assert exception_info.value.encoding == 'UTF-8'
    assert exception_info.value.text == b'\xff'
    assert isinstance(exception_info.value.__cause__, UnicodeDecodeError)

    with pytest.raises(StringyEncodingException):
        encs.encode('€', 'latin-1')
    with pytest.raises(StringyEncodingException):
        encs.encode('abc', 'base64')
    with pytest.raises(StringyEncodingException):
        encs.die_unless_canonical('\udcff')

    # Validating valid text reduces to a noop.
    encs.die_unless_canonical('æøå')


def test_encs_convert(caplog) -> None:
    '''
    Test the :func:`stringy.util.type.text.encs.convert` function.
    '''

    # Defer heavyweight imports.
    import logging
    from stringy.exceptions import StringyEncodingException
    from stringy.util.type.text import encs

    caplog.set_level(logging.DEBUG, logger='stringy')

    assert encs.convert(b'\xe6', 'latin-1', 'UTF-8') == b'\xc3\xa6'
    assert 'Converting 1 bytes from "latin-1" to "UTF-8"...' in (
        caplog.messages)

    with pytest.raises(StringyEncodingException):
        encs.convert('€'.encode('UTF-8'), 'UTF-8', 'latin-1')
