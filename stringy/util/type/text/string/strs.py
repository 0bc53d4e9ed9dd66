#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level general-purpose string facilities.

All functions defined by this submodule operate on plain :class:`str` objects
and index these objects by **codepoint** (i.e., Unicode character) rather than
by byte. The :class:`stringy.stringy.Stringy` class wraps these functions.
'''

# ....................{ IMPORTS                            }....................
import base64, secrets
from beartype import beartype
from beartype.typing import Iterable, List, Mapping, Optional
from stringy.exceptions import StringyArgumentException
from stringy.util.type.text import regexes, translit

# ....................{ CONSTANTS                          }....................
TIE_BREAK_TO_IS_LEFT = {
    'left': True,
    'right': False,
}
'''
Dictionary mapping from the name of each supported tie-breaking mode accepted
by the :func:`center` function to ``True`` only if that mode places the odd
padding character (if any) on the right, leaving the content left of center.
'''


SLUG_SEPARATOR_CHARS = frozenset(('-', '_', ':'))
'''
Frozen set of all non-whitespace characters replaced by the word separator
when slugifying strings.
'''

# ....................{ EXCEPTIONS                         }....................
@beartype
def die_if_negative(text: str, number: int, label: str) -> None:
    '''
    Raise an exception if the passed integer is negative.

    Parameters
    ----------
    text : str
        String being operated upon, embedded in this exception.
    number : int
        Integer to be validated.
    label : str
        Human-readable name of this integer, embedded in this exception.

    Raises
    ----------
    StringyArgumentException
        If this integer is negative.
    '''

    if number < 0:
        raise StringyArgumentException(
            '{} {} negative.'.format(label, number), text)


@beartype
def die_if_empty(text: str, substr: str, label: str) -> None:
    '''
    Raise an exception if the passed substring is empty.

    Raises
    ----------
    StringyArgumentException
        If this substring is empty.
    '''

    if not substr:
        raise StringyArgumentException('{} empty.'.format(label), text)

# ....................{ TESTERS                            }....................
@beartype
def is_prefix(text: str, prefix: str) -> bool:
    '''
    ``True`` only if the passed string is prefixed by the passed prefix.

    This comparison is literal (i.e., *not* regex-based) and trivially
    succeeds for the empty prefix.
    '''

    return text[:len(prefix)] == prefix


@beartype
def is_suffix(text: str, suffix: str) -> bool:
    '''
    ``True`` only if the passed string is suffixed by the passed suffix.

    This comparison is literal (i.e., *not* regex-based) and trivially
    succeeds for the empty suffix.
    '''

    # Note that "text[-0:]" is the entire string rather than the empty string.
    return not suffix or text[-len(suffix):] == suffix

# ....................{ GETTERS                            }....................
@beartype
def get_substr_offsets(text: str, substr: str) -> List[int]:
    '''
    List of the 0-based codepoint offsets of all non-overlapping occurrences
    of the passed substring in the passed string, scanned left to right.

    The empty substring occurs at every offset of this string including its
    length.
    '''

    return list(regexes.iter_match_offsets(text, regexes.escape(substr)))


@beartype
def get_substr_index_or_none(
    text: str, substr: str, index: int = 0) -> Optional[int]:
    '''
    0-based codepoint offset of the occurrence with the passed index of the
    passed substring in the passed string if found *or* ``None`` otherwise.

    Parameters
    ----------
    text : str
        String to be searched.
    substr : str
        Substring to search for, matched literally.
    index : int
        0-based index of the occurrence to be returned, where negative indices
        count backward from the last occurrence (e.g., ``-1`` for the last
        occurrence, ``-2`` for the penultimate occurrence). Defaults to 0.

    Returns
    ----------
    Optional[int]
        Either:

        * If this string contains an occurrence with this index, the offset of
          the first codepoint of that occurrence.
        * Else, ``None``.
    '''

    # Offsets of all occurrences of this substring.
    substr_offsets = get_substr_offsets(text, substr)

    # If this index is outside the range of these occurrences, return "None".
    if not -len(substr_offsets) <= index < len(substr_offsets):
        return None

    # Else, return the offset of this occurrence.
    return substr_offsets[index]


@beartype
def get_substr(text: str, start: int, length: Optional[int] = None) -> str:
    '''
    Substring of the passed string starting at the passed codepoint offset and
    spanning at most the passed number of codepoints.

    Parameters
    ----------
    text : str
        String to be sliced.
    start : int
        0-based offset of the first codepoint of this substring. If negative,
        this offset counts backward from the end of this string (clamped to the
        start of this string). If exceeding the length of this string, the
        empty string is returned.
    length : Optional[int]
        Maximum number of codepoints in this substring. If ``None``, this
        substring extends to the end of this string. If negative, this
        substring stops that many codepoints before the end of this string.
        Defaults to ``None``.

    Returns
    ----------
    str
        This substring, or the empty string if this span is empty.
    '''

    # Length of this string.
    text_len = len(text)

    # Resolve the start of this span.
    if start < 0:
        start = max(text_len + start, 0)
    elif start > text_len:
        return ''

    # Resolve the end of this span.
    if length is None:
        stop = text_len
    elif length < 0:
        stop = text_len + length
    else:
        stop = min(start + length, text_len)

    # Return the empty string for spans ending before they begin.
    if stop <= start:
        return ''
    return text[start:stop]


@beartype
def get_before(text: str, substr: str, index: int = 0) -> str:
    '''
    Substring of the passed string preceding the occurrence with the passed
    index of the passed substring if found *or* the empty string otherwise.

    If this substring is empty, this string is returned as is.
    '''

    if not substr:
        return text

    substr_offset = get_substr_index_or_none(text, substr, index)
    if substr_offset is None:
        return ''
    return text[:substr_offset]


@beartype
def get_after(text: str, substr: str, index: int = 0) -> str:
    '''
    Substring of the passed string following the occurrence with the passed
    index of the passed substring if found *or* the empty string otherwise.

    If this substring is empty, this string is returned as is.
    '''

    if not substr:
        return text

    substr_offset = get_substr_index_or_none(text, substr, index)
    if substr_offset is None:
        return ''
    return text[substr_offset + len(substr):]


@beartype
def get_between(text: str, start: str, stop: str, pair_index: int = 0) -> str:
    '''
    Substring of the passed string between the occurrences with the passed
    index of the passed start and stop delimiters.

    Both delimiters are resolved independently by the same index. The empty
    string is returned if either delimiter is absent *or* the stop delimiter
    does not follow the end of the start delimiter.
    '''

    start_offset = get_substr_index_or_none(text, start, pair_index)
    stop_offset = get_substr_index_or_none(text, stop, pair_index)
    if start_offset is None or stop_offset is None:
        return ''

    # Offset of the first codepoint following the start delimiter.
    span_start = start_offset + len(start)
    if stop_offset - span_start <= 0:
        return ''
    return text[span_start:stop_offset]


@beartype
def get_cycle(
    text: str,
    min_chars: int = 1,
    min_cycles: int = 2,
    is_longest_first: bool = True,
) -> str:
    '''
    Repeating unit with which the passed string ends if any *or* the empty
    string otherwise.

    This unit is the substring that:

    * Spans at least ``min_chars`` codepoints.
    * Repeats at least ``min_cycles`` times contiguously.
    * Runs through the end of this string, which may end part-way through one
      additional copy of this unit.

    For example, the string ``"Start Foo Bar Foo Bar Fo"`` ends with the unit
    ``" Foo Bar"`` while the string ``"Start Foo Bar Foo Bar End"`` ends with
    no unit.

    Parameters
    ----------
    text : str
        String to be scanned.
    min_chars : int
        Minimum length of this unit in codepoints. Defaults to 1.
    min_cycles : int
        Minimum number of contiguous complete repetitions. Defaults to 2.
    is_longest_first : bool
        ``True`` only if candidate unit lengths are scanned from longest to
        shortest. For example, the string ``"abababab"`` yields ``"abab"`` if
        ``True`` *or* ``"ab"`` if ``False``. Defaults to ``True``. Within each
        length, candidate offsets are always scanned left to right.

    Raises
    ----------
    StringyArgumentException
        If either ``min_chars`` or ``min_cycles`` is less than 1.
    '''

    if min_chars < 1:
        raise StringyArgumentException(
            'Minimum cycle length {} not positive.'.format(min_chars), text)
    if min_cycles < 1:
        raise StringyArgumentException(
            'Minimum cycle count {} not positive.'.format(min_cycles), text)

    # Length of this string.
    text_len = len(text)

    # Candidate unit lengths in scanning order.
    unit_lens = range(min_chars, text_len + 1)
    if is_longest_first:
        unit_lens = reversed(unit_lens)

    for unit_len in unit_lens:
        for offset in range(0, text_len - unit_len):
            unit = text[offset:offset + unit_len]
            tail = text[offset:]

            # For each possible count of complete repetitions, most first...
            for cycles in range(len(tail) // unit_len, min_cycles - 1, -1):
                # Partial repetition trailing these complete repetitions.
                rest = tail[unit_len * cycles:]

                # If this unit does not continue into this remainder, fewer
                # repetitions only lengthen this remainder. Try the next offset.
                if not unit.startswith(rest):
                    break

                if tail == unit * cycles + rest:
                    return unit

    # Else, no such unit exists.
    return ''

# ....................{ PADDERS                            }....................
@beartype
def pad_left(text: str, total_len: int, padding: str = ' ') -> str:
    '''
    Passed string left-padded to the passed total length by the first
    codepoint of the passed padding.

    Raises
    ----------
    StringyArgumentException
        If this padding is empty.
    '''

    die_if_empty(text, padding, 'Padding')
    return padding[0] * max(total_len - len(text), 0) + text


@beartype
def pad_right(text: str, total_len: int, padding: str = ' ') -> str:
    '''
    Passed string right-padded to the passed total length by the first
    codepoint of the passed padding.

    Raises
    ----------
    StringyArgumentException
        If this padding is empty.
    '''

    die_if_empty(text, padding, 'Padding')
    return text + padding[0] * max(total_len - len(text), 0)


@beartype
def center(
    text: str, total_len: int, padding: str = ' ', tie_break: str = 'left',
) -> str:
    '''
    Passed string padded on both sides to the passed total length by the
    first codepoint of the passed padding.

    Parameters
    ----------
    text : str
        String to be centered.
    total_len : int
        Minimum length of the returned string.
    padding : str
        String whose first codepoint pads this string. Defaults to a space.
    tie_break : str
        If the padding to be added is odd, the side of center this string is
        shifted to. Either:

        * ``left``, adding the odd padding character on the right.
        * ``right``, adding the odd padding character on the left.

        Defaults to ``left``.

    Raises
    ----------
    StringyArgumentException
        If either this padding is empty *or* this tie-breaking mode is
        unrecognized.
    '''

    is_left = TIE_BREAK_TO_IS_LEFT.get(tie_break)
    if is_left is None:
        raise StringyArgumentException(
            'Tie break "{}" not in {}.'.format(
                tie_break, sorted(TIE_BREAK_TO_IS_LEFT)),
            text)

    # Length of this string after left-padding, rounded down (i.e., placing the
    # odd padding character on the right) or up (i.e., on the left).
    left_len = (total_len + len(text) + (0 if is_left else 1)) // 2

    return pad_right(pad_left(text, left_len, padding), total_len, padding)

# ....................{ TRIMMERS                           }....................
@beartype
def trim_left_all(text: str, substrs: Iterable[str]) -> str:
    '''
    Passed string with all leading runs of any of the passed substrings
    removed.
    '''

    substrs = [substr for substr in substrs if substr]
    if not substrs:
        return text

    regex = regexes.make_alternation(substrs)
    return regexes.replace_substrs(text, r'\A' + regex + '+', '')


@beartype
def trim_right_all(text: str, substrs: Iterable[str]) -> str:
    '''
    Passed string with all trailing runs of any of the passed substrings
    removed.
    '''

    substrs = [substr for substr in substrs if substr]
    if not substrs:
        return text

    regex = regexes.make_alternation(substrs)
    return regexes.replace_substrs(text, regex + r'+\Z', '')

# ....................{ REPLACERS                          }....................
@beartype
def replace_many(text: str, replacements: Mapping[str, str]) -> str:
    '''
    Passed string with all occurrences of each key of the passed dictionary
    simultaneously replaced by the corresponding value.

    Longer keys are preferred over shorter keys at the same offset. Replaced
    text is never rescanned, so replacement values containing other keys are
    preserved as is. Empty keys are ignored.
    '''

    # Dictionary of only the non-empty keys of this dictionary.
    replacements = {
        substr_old: substr_new
        for substr_old, substr_new in replacements.items()
        if substr_old
    }

    # If no such keys remain, preserve this string as is.
    if not replacements:
        return text

    return regexes.replace_substrs(
        text,
        regexes.make_alternation(replacements.keys()),
        lambda match: replacements[match.group(0)],
    )


@beartype
def unrepeat(text: str, substr: str) -> str:
    '''
    Passed string with all contiguous runs of the passed substring collapsed
    into a single occurrence.
    '''

    if not substr:
        return text
    return regexes.replace_substrs(
        text, '(?:{})+'.format(regexes.escape(substr)), lambda match: substr)


@beartype
def normalize_space(text: str, separator: str = ' ') -> str:
    '''
    Passed string with all runs of whitespace replaced by the passed
    separator.
    '''

    return regexes.replace_substrs(text, r'\s+', lambda match: separator)

# ....................{ SPLITTERS                          }....................
@beartype
def explode(
    text: str, delimiter: str, limit: Optional[int] = None) -> List[str]:
    '''
    List of the substrings of the passed string delimited by the passed
    delimiter.

    Parameters
    ----------
    text : str
        String to be split.
    delimiter : str
        Non-empty delimiter to split on.
    limit : Optional[int]
        Either:

        * ``None``, splitting on all delimiters. This is the default.
        * A positive integer, returning at most this many substrings, the
          last of which contains the unsplit remainder of this string.
        * Zero, treated as 1.
        * A negative integer, returning all substrings except the last
          ``-limit`` substrings.

    Raises
    ----------
    StringyArgumentException
        If this delimiter is empty.
    '''

    die_if_empty(text, delimiter, 'Delimiter')

    if limit is None:
        return text.split(delimiter)
    elif limit >= 0:
        return text.split(delimiter, max(limit, 1) - 1)

    # Else, this limit is negative.
    return text.split(delimiter)[:limit]

# ....................{ CONVERTERS                         }....................
@beartype
def slugify(
    text: str, separator: str = '-', bad_char_replacement: str = '') -> str:
    '''
    Passed string converted into a URL-friendly **slug** (i.e., lowercase
    ASCII string of alphanumeric words delimited by the passed separator).

    Specifically, this function:

    #. Lowercases this string.
    #. Transliterates this string into ASCII.
    #. Replaces each whitespace, ``-``, ``_`` and ``:`` character with this
       separator, preserving existing occurrences of this separator.
    #. Replaces every other character outside ``[a-z0-9]`` with the passed
       replacement.
    #. Collapses runs of this separator into one separator.

    Leading and trailing separators are preserved.
    '''

    # Lowercase and transliterate this string.
    text = translit.to_ascii(text.lower())

    # Regex matching either an existing separator or a bad character.
    regex = '[^a-z0-9]'
    if separator:
        regex = '({})|'.format(regexes.escape(separator)) + regex

    def _replace_char(match) -> str:
        '''
        Replacement for the passed separator or bad character.
        '''

        # If this is either an existing separator or a separator character,
        # replace this character by this separator.
        char = match.group(0)
        if (
            (separator and match.group(1) is not None) or
            char.isspace() or
            char in SLUG_SEPARATOR_CHARS
        ):
            return separator

        # Else, this character is bad.
        return bad_char_replacement

    text = regexes.replace_substrs(text, regex, _replace_char)

    # Collapse runs of this separator.
    return unrepeat(text, separator)


@beartype
def shorten(
    text: str, max_len: int, break_point: str = '', padding: str = '…',
) -> str:
    '''
    Passed string truncated to the passed maximum length if exceeding that
    length, cut back to the last occurrence of the passed break point and
    suffixed by the passed padding.

    The passed break point is the substring at which truncation is permitted,
    defaulting to the empty string permitting truncation at any codepoint.

    The returned string is never longer than the passed maximum length. If
    that length is less than that of the padding, the returned string is that
    padding truncated to that length (e.g., the empty string for a maximum
    length of 0).

    Raises
    ----------
    StringyArgumentException
        If this maximum length is negative.
    '''

    die_if_negative(text, max_len, 'Maximum length')

    if len(text) <= max_len:
        return text

    # If this padding alone exceeds this length, truncate this padding.
    if len(padding) >= max_len:
        return padding[:max_len]

    # Truncate to make room for this padding.
    text = get_substr(text, 0, max_len - len(padding))

    # Cut back to the last break point, if any.
    if get_substr_index_or_none(text, break_point, -1) is not None:
        text = get_before(text, break_point, -1)

    return text + padding

# ....................{ RANDOMIZERS                        }....................
@beartype
def randomize(length: int) -> str:
    '''
    Cryptographically secure random string of the passed length, drawn from
    the Base64 alphabet excluding the ``/``, ``+`` and ``=`` characters.

    Raises
    ----------
    StringyArgumentException
        If this length is negative.
    '''

    die_if_negative('', length, 'Length')

    # Random characters drawn so far.
    text = ''
    while len(text) < length:
        text += base64.b64encode(secrets.token_bytes(length)).decode(
            'ascii').translate({ord('/'): None, ord('+'): None, ord('='): None})

    return text[:length]
