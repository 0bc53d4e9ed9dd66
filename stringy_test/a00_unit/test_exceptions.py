#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests for the :mod:`stringy.exceptions` submodule.
'''

# ....................{ IMPORTS                            }....................
import pytest

# ....................{ TESTS                              }....................
def test_exceptions_hierarchy() -> None:
    '''
    Test that all package-specific exceptions subclass both the package root
    exception and the standard exceptions callers conventionally catch.
    '''

    # Defer heavyweight imports.
    from stringy.exceptions import (
        StringyArgumentException,
        StringyEncodingException,
        StringyException,
        StringyFormatException,
        StringyImmutableException,
        StringyLogException,
        StringyOutOfRangeException,
        StringyTextException,
    )

    for exception_type in (
        StringyArgumentException,
        StringyEncodingException,
        StringyFormatException,
        StringyImmutableException,
        StringyOutOfRangeException,
    ):
        assert issubclass(exception_type, StringyTextException)
        assert issubclass(exception_type, StringyException)

    assert issubclass(StringyLogException, StringyException)
    assert issubclass(StringyArgumentException, ValueError)
    assert issubclass(StringyImmutableException, TypeError)
    assert issubclass(StringyOutOfRangeException, IndexError)


def test_exceptions_text() -> None:
    '''
    Test that text-specific exceptions preserve the text and encoding being
    operated upon.
    '''

    # Defer heavyweight imports.
    from stringy.exceptions import (
        StringyEncodingException, StringyOutOfRangeException)

    with pytest.raises(StringyOutOfRangeException) as exception_info:
        raise StringyOutOfRangeException('Index 3 not in range.', 'abc')

    exception = exception_info.value
    assert str(exception) == 'Index 3 not in range.'
    assert exception.text == 'abc'
    assert exception.encoding == 'UTF-8'

    # Encoding exceptions are prefixed by a human-readable label.
    exception = StringyEncodingException(
        'Invalid string (truncated data)', b'\x00', 'UTF-32')
    assert str(exception) == (
        'Encoding exception: Invalid string (truncated data)')
    assert exception.text == b'\x00'
    assert exception.encoding == 'UTF-32'


def test_exceptions_raised() -> None:
    '''
    Test that invalid operations raise catchable standard exceptions.
    '''

    # Defer heavyweight imports.
    from stringy.exceptions import StringyEncodingException
    from stringy.stringy import Stringy

    with pytest.raises(ValueError):
        Stringy('ab').repeat(-2)
    with pytest.raises(IndexError):
        Stringy('ab')[2]
    with pytest.raises(TypeError):
        Stringy('ab')[0] = 'b'

    with pytest.raises(
        StringyEncodingException, match=r'^Encoding exception: Invalid string'):
        Stringy(b'\xff')
