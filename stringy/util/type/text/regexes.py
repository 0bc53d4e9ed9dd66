#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **regex** (i.e., Python-compatible regular expression) facilities.

All functions defined by this submodule match in a non-line-oriented manner
with the :data:`re.DOTALL` flag enabled by default, forcing the ``.`` special
character to match newlines as well.
'''

# ....................{ IMPORTS                            }....................
import re
from beartype import beartype
from beartype.typing import (
    Callable,
    Iterable,
    Iterator,
    Match,
    MutableMapping,
    Pattern,
    Union,
)

# ....................{ HINTS                              }....................
RegexTypes = Union[str, Pattern]
'''
PEP-compliant type hint matching either an uncompiled or compiled regular
expression.
'''


CallableOrStrTypes = Union[str, Callable[[Match], str]]
'''
PEP-compliant type hint matching a regex substitution, either a replacement
string *or* a callable passed each match and returning its replacement.
'''

# ....................{ ESCAPERS                           }....................
@beartype
def escape(text: str) -> str:
    '''
    Passed string with all regex-reserved characters escaped, suitable for
    embedding as a literal substring in larger regular expressions.
    '''

    return re.escape(text)


@beartype
def make_alternation(needles: Iterable[str]) -> str:
    '''
    Uncompiled regular expression matching any of the passed literal
    substrings, preferring longer substrings over shorter substrings sharing
    the same prefix.

    Empty substrings are silently ignored. If *all* passed substrings are
    empty, this expression matches nothing.

    Parameters
    ----------
    needles : Iterable[str]
        Literal substrings to be matched.

    Returns
    ----------
    str
        Non-capturing alternation of these substrings escaped and sorted in
        descending order of length.
    '''

    # Non-empty unique substrings sorted longest first, as Python's regex
    # engine accepts the first rather than the longest alternative matched.
    needles_sorted = sorted(
        {needle for needle in needles if needle},
        key=lambda needle: (-len(needle), needle),
    )

    # If no such substrings remain, return a regex matching nothing.
    if not needles_sorted:
        return r'(?!)'

    # Else, return an alternation of these substrings.
    return '(?:{})'.format('|'.join(escape(needle) for needle in needles_sorted))

# ....................{ TESTERS                            }....................
@beartype
def is_match(text: str, regex: RegexTypes, **kwargs) -> bool:
    '''
    ``True`` only if the passed regular expression matches anywhere in the
    passed subject string.

    This function accepts the same optional keyword arguments as the
    :func:`re.search` function.
    '''

    # Sanitize the passed match flags.
    _init_kwargs_flags(regex, kwargs)

    # Match, if you please.
    return re.search(regex, text, **kwargs) is not None

# ....................{ ITERATORS                          }....................
@beartype
def iter_match_offsets(text: str, regex: RegexTypes, **kwargs) -> Iterator[int]:
    '''
    Generator yielding the 0-based character offset of the start of each
    non-overlapping match of the passed regular expression in the passed
    subject string, in ascending order.

    Empty matches are yielded too, implying that a regular expression matching
    the empty string yields every offset of this string including its length.

    This function accepts the same optional keyword arguments as the
    :func:`re.finditer` function.
    '''

    # Sanitize the passed match flags.
    _init_kwargs_flags(regex, kwargs)

    # Yield the start of each match.
    for match in re.finditer(regex, text, **kwargs):
        yield match.start()

# ....................{ REPLACERS                          }....................
@beartype
def replace_substrs(
    text: str,
    regex: RegexTypes,
    replacement: CallableOrStrTypes,
    **kwargs
) -> str:
    '''
    Passed subject string with all substrings matching the passed regular
    expression replaced by the passed substitution.

    Parameters
    ----------
    text : str
        Subject string to replace these substrings of.
    regex : RegexTypes
        Regular expression to be matched. This object should be either of type:
        * :class:`str`, signifying an uncompiled regular expression.
        * :class:`Pattern`, signifying a compiled regular expression object.
    replacement : CallableOrStrTypes
        Substitution to be performed, either a:
        * String.
        * Callable (e.g., function, lambda, method).

    This function accepts the same optional keyword arguments as the
    :func:`re.sub` function.

    Returns
    ----------
    str
        Passed string with all substrings matching this regular expression
        globally replaced with this substitution.

    See Also
    ----------
    https://docs.python.org/3/library/re.html#re.sub
        Further details on regular expressions and keyword arguments.
    '''

    # Sanitize the passed match flags.
    _init_kwargs_flags(regex, kwargs)

    # Substitute, if you please.
    return re.sub(regex, replacement, text, **kwargs)

# ....................{ COMPILERS                          }....................
@beartype
def compile_regex(regex: str, **kwargs) -> Pattern:
    '''
    Compile the passed uncompiled regular expression.

    All remaining keyword parameters are passed as is to the :func:`re.compile`
    function.
    '''

    # Sanitize the passed match flags.
    _init_kwargs_flags(regex, kwargs)

    # Return this regular expression compiled.
    return re.compile(regex, **kwargs)

# ....................{ PRIVATE                            }....................
def _init_kwargs_flags(regex: RegexTypes, kwargs: MutableMapping) -> None:
    '''
    Add the :data:`re.DOTALL` flag to the integer value of the ``flags`` key
    of the passed dictionary (defaulting to zero if currently unset).
    '''

    # If this regular expression is already compiled, reduce to a noop. Why?
    # Because flags *CANNOT* be respecified after the compilation phase.
    if isinstance(regex, re.Pattern):
        return

    # Else, this regular expression is uncompiled. In this case, these flags are
    # safely modifiable as required.
    kwargs['flags'] = kwargs.get('flags', 0) | re.DOTALL
