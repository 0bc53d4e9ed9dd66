#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **string case** (e.g., ``snake_case``, ``camelCase``, ``StudlyCase``)
facilities.

**Words** are maximal runs of Unicode word characters (i.e., ``\\w``) bounded
by non-word characters (e.g., whitespace, dashes, periods).
'''

# ....................{ IMPORTS                            }....................
from beartype import beartype
from stringy.util.type.text import regexes
from stringy.util.type.text.string import strs

# ....................{ CONSTANTS                          }....................
_WORD_REGEX = regexes.compile_regex(r'\b\w+')
'''
Compiled regular expression matching each word.
'''

# ....................{ CASERS ~ char                      }....................
@beartype
def uppercase_char_first(text: str) -> str:
    '''
    Passed string with the first character uppercased, preserving the case of
    all remaining characters.
    '''

    return text[:1].upper() + text[1:]


@beartype
def lowercase_char_first(text: str) -> str:
    '''
    Passed string with the first character lowercased, preserving the case of
    all remaining characters.
    '''

    return text[:1].lower() + text[1:]

# ....................{ CASERS ~ word                      }....................
@beartype
def uppercase_words_first(text: str) -> str:
    '''
    Passed string with the first character of each word uppercased, preserving
    the case of all remaining characters.
    '''

    return regexes.replace_substrs(
        text, _WORD_REGEX, lambda match: uppercase_char_first(match.group(0)))


@beartype
def lowercase_words_first(text: str) -> str:
    '''
    Passed string with the first character of each word lowercased, preserving
    the case of all remaining characters.
    '''

    return regexes.replace_substrs(
        text, _WORD_REGEX, lambda match: lowercase_char_first(match.group(0)))


@beartype
def to_title_case(text: str) -> str:
    '''
    Passed string in Title Case, uppercasing the first character of each word
    and lowercasing all remaining characters.
    '''

    return text.title()

# ....................{ CONVERTERS                         }....................
@beartype
def to_studly_case(text: str) -> str:
    '''
    Passed space-, dash- or underscore-delimited string in ``StudlyCase``.
    '''

    text = text.replace('-', ' ').replace('_', ' ')
    text = uppercase_words_first(strs.normalize_space(text, ' '))
    return text.replace(' ', '')


@beartype
def to_camel_case(text: str) -> str:
    '''
    Passed space-, dash- or underscore-delimited string in ``camelCase``.
    '''

    return lowercase_char_first(to_studly_case(text))


@beartype
def to_snake_case(text: str, delimiter: str = '_') -> str:
    '''
    Passed space-delimited, ``StudlyCase`` or ``camelCase`` string in
    ``snake_case``, delimiting words by the passed delimiter.

    Specifically, this function:

    #. Replaces all runs of whitespace by this delimiter.
    #. Inserts this delimiter before each uppercase character that follows
       another character.
    #. Collapses runs of this delimiter into one delimiter.
    #. Lowercases the result.
    '''

    text = strs.normalize_space(text, delimiter)

    # Characters of this string with delimiters interleaved.
    chars = []
    for char_index, char in enumerate(text):
        if char_index and char.isupper():
            chars.append(delimiter)
        chars.append(char)

    return strs.unrepeat(''.join(chars), delimiter).lower()


@beartype
def to_uncase(text: str, snake_case_delimiter: str = '_') -> str:
    '''
    Passed ``StudlyCase``, ``camelCase`` or ``snake_case`` string as
    space-delimited lowercase words.

    Parameters
    ----------
    text : str
        String to be converted.
    snake_case_delimiter : str
        Delimiter separating ``snake_case`` words in this string. Defaults to
        an underscore.
    '''

    text = to_snake_case(text, ' ')
    if snake_case_delimiter:
        text = text.replace(snake_case_delimiter, ' ')
    return strs.unrepeat(text, ' ')
