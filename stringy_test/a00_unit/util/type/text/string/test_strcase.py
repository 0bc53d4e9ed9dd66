#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests for the :mod:`stringy.util.type.text.string.strcase` submodule.
'''

# ....................{ IMPORTS                            }....................
import pytest

# ....................{ TESTS                              }....................
@pytest.mark.parametrize(('text', 'studly', 'camel', 'snake'), (
    ('', '', '', ''),
    ('foo', 'Foo', 'foo', 'foo'),
    ('foo bar', 'FooBar', 'fooBar', 'foo_bar'),
    ('foo-bar_baz', 'FooBarBaz', 'fooBarBaz', 'foo-bar_baz'),
    ('FooBar', 'FooBar', 'fooBar', 'foo_bar'),
    ('fooBar baz', 'FooBarBaz', 'fooBarBaz', 'foo_bar_baz'),
    ('Ødd æble', 'ØddÆble', 'øddÆble', 'ødd_æble'),
))
def test_strcase_convert(
    text: str, studly: str, camel: str, snake: str) -> None:
    '''
    Test the family of case conversion functions.
    '''

    # Defer heavyweight imports.
    from stringy.util.type.text.string import strcase

    assert strcase.to_studly_case(text) == studly
    assert strcase.to_camel_case(text) == camel
    assert strcase.to_snake_case(text) == snake


def test_strcase_words() -> None:
    '''
    Test the family of word-specific case functions.
    '''

    # Defer heavyweight imports.
    from stringy.util.type.text.string import strcase

    assert strcase.uppercase_words_first('foo bAR_baz qux') == 'Foo BAR_baz Qux'
    assert strcase.lowercase_words_first('Foo BAR') == 'foo bAR'
    assert strcase.to_title_case('foo bAR') == 'Foo Bar'
    assert strcase.uppercase_char_first('') == ''
    assert strcase.lowercase_char_first('ÆBLE') == 'æBLE'


def test_strcase_uncase() -> None:
    '''
    Test the :func:`stringy.util.type.text.string.strcase.to_uncase` function.
    '''

    # Defer heavyweight imports.
    from stringy.util.type.text.string import strcase

    assert strcase.to_uncase('fooBarBaz') == 'foo bar baz'
    assert strcase.to_uncase('FooBar_baz') == 'foo bar baz'
    assert strcase.to_uncase('foo-bar', '-') == 'foo bar'
    assert strcase.to_uncase('foo_bar', '') == 'foo_bar'
