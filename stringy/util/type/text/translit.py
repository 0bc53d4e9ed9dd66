#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **transliteration** (i.e., lossy conversion of arbitrary Unicode
text into ASCII) facilities.

Transliteration is deferred to the third-party :mod:`unidecode` package, whose
tables map most Latin, Greek, and Cyrillic characters (e.g., ``Ø``, ``æ``,
``ß``) onto ASCII approximations. Unicode normalization alone (e.g., ``NFKD``)
decomposes accented characters but fails to map ligatures and stroked letters
and thus does *not* suffice.
'''

# ....................{ IMPORTS                            }....................
from beartype import beartype
from beartype.typing import Mapping, Optional
from stringy.util.io.log import logs
from unidecode import unidecode

# ....................{ CONSTANTS                          }....................
REPLACEMENTS_DEFAULT = {'€': 'EUR'}
'''
Dictionary mapping from non-ASCII substrings to the ASCII substrings replacing
these substrings *before* transliteration, overriding the mappings provided by
:mod:`unidecode`.
'''

# ....................{ TESTERS                            }....................
@beartype
def is_ascii(text: str) -> bool:
    '''
    ``True`` only if the passed text contains only ASCII characters.
    '''

    return text.isascii()

# ....................{ CONVERTERS                         }....................
@beartype
def to_ascii(
    text: str, replacements: Optional[Mapping[str, str]] = None) -> str:
    '''
    Passed text transliterated into ASCII.

    Characters with no ASCII approximation (e.g., most characters of
    non-Latin scripts lacking a phonetic romanization in :mod:`unidecode`) are
    silently removed, logging each such character at the debug level.

    Parameters
    ----------
    text : str
        Text to be transliterated.
    replacements : Optional[Mapping[str, str]]
        Dictionary mapping from substrings to the substrings replacing these
        substrings *before* transliteration. Defaults to ``None``, in which
        case this defaults to :data:`REPLACEMENTS_DEFAULT`.

    Returns
    ----------
    str
        This text transliterated into ASCII.
    '''

    # If this text is already ASCII, preserve this text as is.
    if text.isascii():
        return text

    # Default these replacements.
    if replacements is None:
        replacements = REPLACEMENTS_DEFAULT

    # Replace these substrings.
    for substr_old, substr_new in replacements.items():
        text = text.replace(substr_old, substr_new)

    # Transliterate this text, preserving characters lacking a mapping.
    text = unidecode(text, errors='preserve')

    # If this text is now ASCII, return this text.
    if text.isascii():
        return text

    # Else, one or more characters lack a mapping. Log and remove them.
    chars_dropped = ''.join(char for char in text if not char.isascii())
    logs.log_debug(
        'Dropping %d non-transliterable characters "%s"...',
        len(chars_dropped), chars_dropped)
    return ''.join(char for char in text if char.isascii())
