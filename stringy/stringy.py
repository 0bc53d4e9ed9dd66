#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Immutable string** (i.e., fluent, encoding-safe Unicode text value)
functionality.

The :class:`Stringy` class defined here wraps a Python string guaranteed to be
encodable as UTF-8 and exposes chainable, side effect-free operations, each
returning a new instance. All lengths, offsets and indices are measured in
**codepoints** (i.e., Unicode characters) rather than bytes.

Examples
----------
    >>> from stringy import Stringy
    >>> Stringy('some % Ødd_string-that    needs sluGging').slug()
    Stringy('some-odd-string-that-needs-slugging')
    >>> Stringy('test string of doom').shorten(16, ' ')
    Stringy('test string of…')
    >>> Stringy('foobar').centered(11, '=')
    Stringy('==foobar===')
'''

# ....................{ IMPORTS                            }....................
import html, operator, secrets
from beartype import beartype
from beartype.typing import (
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    TypeVar,
    Union,
)
from html.entities import codepoint2name
from stringy.exceptions import (
    StringyArgumentException,
    StringyEncodingException,
    StringyImmutableException,
    StringyOutOfRangeException,
)
from stringy.metadata import ENCODING_CANONICAL
from stringy.util.io.log.conf import logconf
from stringy.util.type.text import encconf, encs, regexes, sprintf, translit
from stringy.util.type.text.encs import BytesLike
from stringy.util.type.text.string import strcase, strs
from urllib.parse import quote_plus

# ....................{ HINTS                              }....................
StrOrStringy = Union[str, 'Stringy']
'''
PEP-compliant type hint matching either a Python string *or* an immutable
string, accepted wherever an operation accepts a string argument.
'''


StringySource = Union[str, 'Stringy', BytesLike]
'''
PEP-compliant type hint matching any object from which an immutable string is
constructable.
'''


T = TypeVar('T')
'''
PEP-compliant type variable matching the return of a callable mapped over
immutable strings.
'''

# ....................{ CONSTANTS                          }....................
_WORD_REGEX = regexes.compile_regex(r'\w+')
'''
Compiled regular expression matching each word.
'''

# ....................{ CLASSES                            }....................
class Stringy(object):
    '''
    **Immutable string** (i.e., Unicode text value guaranteed to be encodable
    as UTF-8 whose operations return new instances rather than modifying this
    instance).

    Instances compare and hash equal to the Python strings with the same text
    and are thus usable as dictionary keys interchangeably with those strings.

    Attributes
    ----------
    _text : str
        Text of this string, guaranteed to contain no lone surrogates.
    '''

    # ..................{ CLASS VARIABLES                    }..................
    __slots__ = ('_text',)

    # ..................{ INITIALIZERS                       }..................
    @beartype
    def __init__(
        self, source: StringySource = '', encoding: Optional[str] = None,
    ) -> None:
        '''
        Initialize this immutable string.

        Parameters
        ----------
        source : StringySource
            Object to construct this string from. Either:

            * Another immutable string, whose text is copied as is.
            * A bytes-like object, decoded from the passed encoding.
            * A Python string. If an encoding is passed, this string is
              validated to be representable in that encoding.

            Defaults to the empty string.
        encoding : Optional[str]
            Name of the encoding of this source. Defaults to ``None``, in which
            case bytes-like sources are decoded from the internal encoding
            (see :mod:`stringy.util.type.text.encconf`).

        Raises
        ----------
        StringyEncodingException
            If either:

            * This encoding is unsupported.
            * This source is a bytes-like object malformed under this encoding
              (e.g., UTF-8 bytes declared as UTF-32).
            * This source is a Python string unrepresentable under this
              encoding *or* containing lone surrogates.
        '''

        # If this source is an immutable string, copy its prevalidated text.
        if isinstance(source, Stringy):
            text = source._text
        # Else if this source is a Python string...
        elif isinstance(source, str):
            # If an encoding was passed, validate this string against it.
            if encoding is not None:
                encs.encode(source, encoding)

            # If this string is not valid UTF-8, raise an exception.
            encs.die_unless_canonical(source)
            text = source
        # Else, this source is a bytes-like object. Decode these bytes.
        else:
            if encoding is None:
                encoding = encconf.get_internal_encoding()
            text = encs.decode(source, encoding)

            # Some codecs (e.g., "raw_unicode_escape") decode lone surrogates.
            encs.die_unless_canonical(text)

        # Classify this text, circumventing our immutability guard.
        object.__setattr__(self, '_text', text)

    # ..................{ CREATORS                           }..................
    @classmethod
    def create(
        cls, source: StringySource = '', encoding: Optional[str] = None,
    ) -> 'Stringy':
        '''
        Immutable string constructed from the passed source.

        See Also
        ----------
        :meth:`__init__`
            Further details.
        '''

        return cls(source, encoding)


    @classmethod
    @beartype
    def create_many(
        cls,
        sources: Iterable[StringySource],
        encoding: Optional[str] = None,
    ) -> List['Stringy']:
        '''
        List of immutable strings constructed from the passed sources, all
        sharing the passed encoding.
        '''

        return [cls(source, encoding) for source in sources]


    @classmethod
    @beartype
    def map_many(
        cls,
        sources: Iterable[StringySource],
        func: Callable[['Stringy'], T],
    ) -> List[T]:
        '''
        List of the values returned by the passed callable when passed the
        immutable string constructed from each of the passed sources.
        '''

        return [func(stringy) for stringy in cls.create_many(sources)]


    @classmethod
    @beartype
    def random(cls, length: int) -> 'Stringy':
        '''
        Cryptographically secure random string of the passed length, drawn
        from the Base64 alphabet excluding the ``/``, ``+`` and ``=``
        characters.

        Raises
        ----------
        StringyArgumentException
            If this length is negative.
        '''

        return cls._make(strs.randomize(length))


    @classmethod
    def _make(cls, text: str) -> 'Stringy':
        '''
        Immutable string wrapping the passed text *without* validating this
        text, which the caller guarantees to contain no lone surrogates.
        '''

        stringy = object.__new__(cls)
        object.__setattr__(stringy, '_text', text)
        return stringy

    # ..................{ PROPERTIES                         }..................
    @property
    def text(self) -> str:
        '''
        Text of this string as a Python string.
        '''

        return self._text

    # ..................{ RENDERERS                          }..................
    @beartype
    def render(self, encoding: Optional[str] = None) -> bytes:
        '''
        Bytes encoding the text of this string under the passed encoding.

        These bytes are decoded again and compared against this text, guarding
        against codecs silently mangling text on conversion.

        Parameters
        ----------
        encoding : Optional[str]
            Name of the target encoding. Defaults to ``None``, in which case
            this is the internal encoding.

        Raises
        ----------
        StringyEncodingException
            If either:

            * This encoding is unsupported.
            * This text is unrepresentable under this encoding.
            * These bytes fail to decode back into this text.
        '''

        if encoding is None:
            encoding = encconf.get_internal_encoding()

        data = encs.encode(self._text, encoding)

        if encs.decode(data, encoding) != self._text:
            raise StringyEncodingException(
                'Invalid string (text not preserved by "{}" round-trip)'.format(
                    encoding),
                data, encoding)

        return data


    def to_bytes(self) -> bytes:
        '''
        UTF-8-encoded bytes of this string.
        '''

        return encs.encode(self._text, ENCODING_CANONICAL)


    def debug_info(self) -> Dict[str, object]:
        '''
        Dictionary summarizing this string for debugging purposes, mapping
        from ``text`` to the text, ``length`` to the number of codepoints and
        ``size`` to the number of UTF-8-encoded bytes of this string.
        '''

        return {
            'text': self._text,
            'length': self.length(),
            'size': self.size(),
        }

    # ..................{ GETTERS                            }..................
    def length(self) -> int:
        '''
        Number of codepoints in this string.
        '''

        return len(self._text)


    def size(self) -> int:
        '''
        Number of bytes in this string when encoded as UTF-8.
        '''

        return len(self.to_bytes())


    def characters(self) -> List['Stringy']:
        '''
        List of the single-codepoint strings comprising this string.
        '''

        return list(self)


    def words(self) -> List['Stringy']:
        '''
        List of the words (i.e., maximal runs of Unicode word characters) in
        this string.
        '''

        return [self._make(word) for word in _WORD_REGEX.findall(self._text)]

    # ..................{ TESTERS                            }..................
    @beartype
    def is_equal(self, other: StrOrStringy) -> bool:
        '''
        ``True`` only if the text of this string is that of the passed string.
        '''

        return self._text == _get_text(other)


    @beartype
    def is_one_of(self, others: Iterable[StrOrStringy]) -> bool:
        '''
        ``True`` only if the text of this string is that of any of the passed
        strings.
        '''

        return any(self.is_equal(other) for other in others)


    @beartype
    def contains(self, needle: StrOrStringy, index: int = 0) -> bool:
        '''
        ``True`` only if this string contains an occurrence with the passed
        index of the passed needle.

        See Also
        ----------
        :meth:`position_of`
            Further details.
        '''

        return self.position_of(needle, index) is not None


    @beartype
    def starts_with(self, needle: StrOrStringy) -> bool:
        '''
        ``True`` only if this string is prefixed by the passed needle, compared
        literally. All strings are prefixed by the empty string.
        '''

        return strs.is_prefix(self._text, _get_text(needle))


    @beartype
    def ends_with(self, needle: StrOrStringy) -> bool:
        '''
        ``True`` only if this string is suffixed by the passed needle, compared
        literally. All strings are suffixed by the empty string.
        '''

        return strs.is_suffix(self._text, _get_text(needle))

    # ..................{ SEARCHERS                          }..................
    @beartype
    def position_of(
        self, needle: StrOrStringy, index: int = 0) -> Optional[int]:
        '''
        0-based codepoint offset of the occurrence with the passed index of the
        passed needle in this string if any *or* ``None`` otherwise.

        Occurrences are matched literally and without overlap from left to
        right. The empty needle occurs at every offset of this string.

        Parameters
        ----------
        needle : StrOrStringy
            Substring to search for.
        index : int
            0-based index of the occurrence to be found. Negative indices count
            backward from the last occurrence, such that ``-1`` is the last
            occurrence. Defaults to 0.

        Returns
        ----------
        Optional[int]
            Either:

            * If this occurrence exists, the offset of its first codepoint.
            * Else, ``None``.
        '''

        return strs.get_substr_index_or_none(
            self._text, _get_text(needle), index)


    @beartype
    def position_of_last(self, needle: StrOrStringy) -> Optional[int]:
        '''
        0-based codepoint offset of the last occurrence of the passed needle
        in this string if any *or* ``None`` otherwise.
        '''

        return self.position_of(needle, -1)

    # ..................{ SLICERS                            }..................
    @beartype
    def substring(self, start: int, length: Optional[int] = None) -> 'Stringy':
        '''
        Substring of this string starting at the passed codepoint offset and
        spanning at most the passed number of codepoints.

        See Also
        ----------
        :func:`stringy.util.type.text.string.strs.get_substr`
            Further details.
        '''

        return self._make(strs.get_substr(self._text, start, length))


    @beartype
    def limit(self, length: int) -> 'Stringy':
        '''
        This string truncated to at most the passed number of codepoints.
        '''

        return self.substring(0, length)


    @beartype
    def before(self, needle: StrOrStringy, index: int = 0) -> 'Stringy':
        '''
        Substring of this string preceding the occurrence with the passed index
        of the passed needle.

        Returns
        ----------
        Stringy
            Either:

            * If this needle is empty, this string as is.
            * Else if this occurrence exists, the text preceding it.
            * Else, the empty string.
        '''

        return self._make(strs.get_before(self._text, _get_text(needle), index))


    @beartype
    def after(self, needle: StrOrStringy, index: int = 0) -> 'Stringy':
        '''
        Substring of this string following the occurrence with the passed index
        of the passed needle.

        Returns
        ----------
        Stringy
            Either:

            * If this needle is empty, this string as is.
            * Else if this occurrence exists, the text following it.
            * Else, the empty string.
        '''

        return self._make(strs.get_after(self._text, _get_text(needle), index))


    @beartype
    def between(
        self, start: StrOrStringy, stop: StrOrStringy, pair_index: int = 0,
    ) -> 'Stringy':
        '''
        Substring of this string between the occurrences with the passed index
        of the passed start and stop delimiters, resolved independently, *or*
        the empty string if either is absent or they delimit no text.
        '''

        return self._make(strs.get_between(
            self._text, _get_text(start), _get_text(stop), pair_index))


    @beartype
    def remove_after(self, needle: StrOrStringy, index: int = 0) -> 'Stringy':
        '''
        This string with the occurrence with the passed index of the passed
        needle and all following text removed if this occurrence exists *or*
        this string as is otherwise.
        '''

        if not self.contains(needle, index):
            return self
        return self.before(needle, index)


    @beartype
    def remove_before(self, needle: StrOrStringy, index: int = 0) -> 'Stringy':
        '''
        This string with the occurrence with the passed index of the passed
        needle and all preceding text removed if this occurrence exists *or*
        this string as is otherwise.
        '''

        if not self.contains(needle, index):
            return self
        return self.after(needle, index)

    # ..................{ REPEATERS                          }..................
    @beartype
    def repeat(self, times: int) -> 'Stringy':
        '''
        This string repeated the passed number of times.

        Raises
        ----------
        StringyArgumentException
            If this number is negative.
        '''

        strs.die_if_negative(self._text, times, 'Repetition count')
        return self._make(self._text * times)


    @beartype
    def unrepeat(self, substring: StrOrStringy) -> 'Stringy':
        '''
        This string with all contiguous runs of the passed substring collapsed
        into a single occurrence.
        '''

        return self._make(strs.unrepeat(self._text, _get_text(substring)))

    # ..................{ PADDERS                            }..................
    @beartype
    def left_padded(
        self, total_length: int, padding: StrOrStringy = ' ') -> 'Stringy':
        '''
        This string left-padded to the passed total length with the first
        codepoint of the passed padding.

        Raises
        ----------
        StringyArgumentException
            If this padding is empty.
        '''

        return self._make(
            strs.pad_left(self._text, total_length, _get_text(padding)))


    @beartype
    def right_padded(
        self, total_length: int, padding: StrOrStringy = ' ') -> 'Stringy':
        '''
        This string right-padded to the passed total length with the first
        codepoint of the passed padding.

        Raises
        ----------
        StringyArgumentException
            If this padding is empty.
        '''

        return self._make(
            strs.pad_right(self._text, total_length, _get_text(padding)))


    @beartype
    def centered(
        self,
        total_length: int,
        padding: StrOrStringy = ' ',
        tie_break: str = 'left',
    ) -> 'Stringy':
        '''
        This string padded on both sides to the passed total length with the
        first codepoint of the passed padding.

        Parameters
        ----------
        total_length : int
            Minimum length of the returned string.
        padding : StrOrStringy
            String whose first codepoint pads this string. Defaults to a space.
        tie_break : str
            Side of center this string is shifted to when the padding to be
            added is odd. Either ``left`` (the default) or ``right``.

        Raises
        ----------
        StringyArgumentException
            If either this padding is empty *or* this tie-breaking mode is
            neither ``left`` nor ``right``.
        '''

        return self._make(strs.center(
            self._text, total_length, _get_text(padding), tie_break))

    # ..................{ TRIMMERS                           }..................
    @beartype
    def left_trim_all(self, needles: Iterable[StrOrStringy]) -> 'Stringy':
        '''
        This string with all leading runs of any of the passed needles removed.
        '''

        return self._make(strs.trim_left_all(
            self._text, [_get_text(needle) for needle in needles]))


    @beartype
    def right_trim_all(self, needles: Iterable[StrOrStringy]) -> 'Stringy':
        '''
        This string with all trailing runs of any of the passed needles
        removed.
        '''

        return self._make(strs.trim_right_all(
            self._text, [_get_text(needle) for needle in needles]))


    @beartype
    def left_trim(self, needle: StrOrStringy) -> 'Stringy':
        '''
        This string with all leading runs of the passed needle removed.
        '''

        return self.left_trim_all((needle,))


    @beartype
    def right_trim(self, needle: StrOrStringy) -> 'Stringy':
        '''
        This string with all trailing runs of the passed needle removed.
        '''

        return self.right_trim_all((needle,))


    @beartype
    def start_with_single(self, other: StrOrStringy) -> 'Stringy':
        '''
        This string prefixed by exactly one occurrence of the passed string,
        replacing any leading runs of that string.

        Examples
        ----------
            >>> Stringy('//usr/lib').start_with_single('/')
            Stringy('/usr/lib')
        '''

        return self.left_trim(other).prepend(other)


    @beartype
    def end_with_single(self, other: StrOrStringy) -> 'Stringy':
        '''
        This string suffixed by exactly one occurrence of the passed string,
        replacing any trailing runs of that string.
        '''

        return self.right_trim(other).append(other)

    # ..................{ CONCATENATORS                      }..................
    @beartype
    def append(self, other: StrOrStringy) -> 'Stringy':
        '''
        This string suffixed by the passed string.
        '''

        return self._make(self._text + _get_text(other))


    @beartype
    def prepend(self, other: StrOrStringy) -> 'Stringy':
        '''
        This string prefixed by the passed string.
        '''

        return self._make(_get_text(other) + self._text)


    @beartype
    def surround_with(
        self, left: StrOrStringy, right: Optional[StrOrStringy] = None,
    ) -> 'Stringy':
        '''
        This string prefixed by the passed left string and suffixed by the
        passed right string, defaulting to the left string.
        '''

        return self.prepend(left).append(left if right is None else right)


    @beartype
    def glue(self, others: Iterable[StrOrStringy]) -> 'Stringy':
        '''
        Passed strings joined with this string as the delimiter.

        Examples
        ----------
            >>> Stringy(' + ').glue(['this', 'that'])
            Stringy('this + that')
        '''

        return self._make(self._text.join(_get_text(other) for other in others))


    @beartype
    def explode(
        self, delimiter: StrOrStringy, limit: Optional[int] = None,
    ) -> List['Stringy']:
        '''
        List of the substrings of this string delimited by the passed
        delimiter.

        See Also
        ----------
        :func:`stringy.util.type.text.string.strs.explode`
            Further details on limits.
        '''

        return [
            self._make(text)
            for text in strs.explode(self._text, _get_text(delimiter), limit)
        ]

    # ..................{ CASERS                             }..................
    def upper(self) -> 'Stringy':
        return self._make(self._text.upper())


    def lower(self) -> 'Stringy':
        return self._make(self._text.lower())


    def ucfirst(self) -> 'Stringy':
        '''
        This string with the first character uppercased.
        '''

        return self._make(strcase.uppercase_char_first(self._text))


    def lcfirst(self) -> 'Stringy':
        '''
        This string with the first character lowercased.
        '''

        return self._make(strcase.lowercase_char_first(self._text))


    def ucwords(self) -> 'Stringy':
        '''
        This string with the first character of each word uppercased,
        preserving the case of all other characters.
        '''

        return self._make(strcase.uppercase_words_first(self._text))


    def lcwords(self) -> 'Stringy':
        '''
        This string with the first character of each word lowercased,
        preserving the case of all other characters.
        '''

        return self._make(strcase.lowercase_words_first(self._text))


    def title_case(self) -> 'Stringy':
        return self._make(strcase.to_title_case(self._text))


    def studly_case(self) -> 'Stringy':
        return self._make(strcase.to_studly_case(self._text))


    def camel_case(self) -> 'Stringy':
        return self._make(strcase.to_camel_case(self._text))


    @beartype
    def snake_case(self, delimiter: StrOrStringy = '_') -> 'Stringy':
        '''
        This string in ``snake_case``, delimiting words by the passed
        delimiter.
        '''

        return self._make(
            strcase.to_snake_case(self._text, _get_text(delimiter)))


    @beartype
    def uncase(self, snake_case_delimiter: StrOrStringy = '_') -> 'Stringy':
        '''
        This ``StudlyCase``, ``camelCase`` or ``snake_case`` string as
        space-delimited lowercase words.
        '''

        return self._make(
            strcase.to_uncase(self._text, _get_text(snake_case_delimiter)))


    @beartype
    def normalize_space(self, separator: StrOrStringy = ' ') -> 'Stringy':
        '''
        This string with all runs of whitespace replaced by the passed
        separator.
        '''

        return self._make(
            strs.normalize_space(self._text, _get_text(separator)))

    # ..................{ REPLACERS                          }..................
    @beartype
    def replace(
        self, search: StrOrStringy, replacement: StrOrStringy) -> 'Stringy':
        '''
        This string with all occurrences of the passed search string replaced
        literally by the passed replacement. If the search string is empty,
        this string is returned as is.
        '''

        search = _get_text(search)
        if not search:
            return self
        return self._make(self._text.replace(search, _get_text(replacement)))


    @beartype
    def replace_many(
        self, replacements: Mapping[StrOrStringy, StrOrStringy]) -> 'Stringy':
        '''
        This string with all occurrences of each key of the passed dictionary
        simultaneously replaced by the corresponding value.

        Longer keys are preferred, replaced text is never rescanned and empty
        keys are ignored.
        '''

        return self._make(strs.replace_many(self._text, {
            _get_text(search): _get_text(replacement)
            for search, replacement in replacements.items()
        }))


    @beartype
    def remove(self, search: StrOrStringy) -> 'Stringy':
        '''
        This string with all occurrences of the passed string removed.
        '''

        return self.replace(search, '')


    @beartype
    def remove_many(self, searches: Iterable[StrOrStringy]) -> 'Stringy':
        '''
        This string with all occurrences of any of the passed strings removed.
        '''

        return self.replace_many({search: '' for search in searches})

    # ..................{ CONVERTERS                         }..................
    def ascii_safe(self) -> 'Stringy':
        '''
        This string transliterated into ASCII (e.g., ``ü`` to ``u``, ``æ`` to
        ``ae``, ``€`` to ``EUR``), removing characters with no ASCII
        approximation.
        '''

        return self._make(translit.to_ascii(self._text))


    @beartype
    def slug(
        self,
        separator: StrOrStringy = '-',
        bad_char_replacement: StrOrStringy = '',
    ) -> 'Stringy':
        '''
        This string as a URL-friendly **slug** (i.e., lowercase ASCII string of
        alphanumeric words delimited by the passed separator).

        Whitespace, ``-``, ``_`` and ``:`` characters are replaced by this
        separator while all other non-alphanumeric characters are replaced by
        the passed replacement. Runs of this separator are collapsed.

        See Also
        ----------
        :func:`stringy.util.type.text.string.strs.slugify`
            Further details.
        '''

        return self._make(strs.slugify(
            self._text,
            _get_text(separator),
            _get_text(bad_char_replacement),
        ))


    @beartype
    def cycle(
        self,
        min_chars: int = 1,
        min_cycles: int = 2,
        is_longest_first: bool = True,
    ) -> 'Stringy':
        '''
        Repeating unit with which this string ends if any *or* the empty string
        otherwise.

        Examples
        ----------
            >>> Stringy('something foo bar baz foo bar baz foo').cycle()
            Stringy(' foo bar baz')
            >>> Stringy('something foo bar baz foo bar baz else').cycle()
            Stringy('')

        See Also
        ----------
        :func:`stringy.util.type.text.string.strs.get_cycle`
            Further details.
        '''

        return self._make(strs.get_cycle(
            self._text, min_chars, min_cycles, is_longest_first))


    def reverse(self) -> 'Stringy':
        return self._make(self._text[::-1])


    @beartype
    def shorten(
        self,
        max_length: int,
        break_point: StrOrStringy = '',
        padding: StrOrStringy = '…',
    ) -> 'Stringy':
        '''
        This string truncated to the passed maximum length if exceeding that
        length *or* this string as is otherwise.

        Parameters
        ----------
        max_length : int
            Maximum length of the returned string including its padding.
        break_point : StrOrStringy
            Substring at which truncation is permitted. If this substring
            occurs in the truncated text, that text is cut back to before its
            last occurrence. Defaults to the empty string, permitting
            truncation at any codepoint.
        padding : StrOrStringy
            Suffix marking truncation. Defaults to a horizontal ellipsis.
            If the maximum length is less than the length of this padding,
            this padding is itself truncated to the maximum length.

        Raises
        ----------
        StringyArgumentException
            If this maximum length is negative.
        '''

        return self._make(strs.shorten(
            self._text, max_length, _get_text(break_point), _get_text(padding)))


    @beartype
    def transform(self, func: Callable[['Stringy'], StringySource]) -> 'Stringy':
        '''
        Immutable string constructed from the value returned by the passed
        callable when passed this string.
        '''

        return self.create(func(self))

    # ..................{ FORMATTERS                         }..................
    @beartype
    def format(self, args: Sequence[object]) -> 'Stringy':
        '''
        This string as a sprintf-style template formatted with the passed
        arguments.

        Raises
        ----------
        StringyFormatException
            If this template either is malformed *or* references more
            arguments than were passed.

        See Also
        ----------
        :mod:`stringy.util.type.text.sprintf`
            Further details on template syntax.
        '''

        return self.create(sprintf.vsprintf(self._text, args))


    @beartype
    def include_in(
        self, template: StrOrStringy, extra_args: Sequence[object] = (),
    ) -> 'Stringy':
        '''
        Passed sprintf-style template formatted with this string as the first
        argument followed by the passed arguments.

        Examples
        ----------
            >>> Stringy('world').include_in('Hello, %s%s', ['!'])
            Stringy('Hello, world!')
        '''

        return self.create(template).format([self, *extra_args])

    # ..................{ ESCAPERS                           }..................
    def escape_for_regex(self) -> 'Stringy':
        '''
        This string with all regex-reserved characters escaped.
        '''

        return self._make(regexes.escape(self._text))


    def escape_for_html(self) -> 'Stringy':
        '''
        This string with all HTML-reserved characters (i.e., ``&``, ``<``,
        ``>``, ``"`` and ``'``) escaped.
        '''

        return self._make(html.escape(self._text, quote=True))


    def entity_encoded(self) -> 'Stringy':
        '''
        This string with all HTML-reserved and non-ASCII characters converted
        into HTML character references, preferring named references (e.g.,
        ``&eacute;``) to numeric references (e.g., ``&#8364;``).
        '''

        return self._make(''.join(
            char if char.isascii() else _get_entity(char)
            for char in html.escape(self._text, quote=True)
        ))


    @beartype
    def url_encoded(self, encoding: Optional[str] = None) -> 'Stringy':
        '''
        This string encoded as an ``application/x-www-form-urlencoded`` query
        string value, percent-encoding the bytes of this string rendered under
        the passed encoding (defaulting to the internal encoding).
        '''

        return self._make(quote_plus(self.render(encoding)))

    # ..................{ RANDOMIZERS                        }..................
    def random_char(self) -> 'Stringy':
        '''
        Randomly selected character of this string.

        Raises
        ----------
        StringyOutOfRangeException
            If this string is empty.
        '''

        if not self._text:
            raise StringyOutOfRangeException(
                'Random character of empty string undefined.', self._text)

        return self._make(secrets.choice(self._text))

    # ..................{ DUNDERS ~ sequence                 }..................
    def __len__(self) -> int:
        return len(self._text)


    def __iter__(self) -> Iterator['Stringy']:
        for char in self._text:
            yield self._make(char)


    def __contains__(self, needle: StrOrStringy) -> bool:
        return self.contains(needle)


    def __getitem__(self, index) -> 'Stringy':
        '''
        Single-codepoint string at the passed index *or* substring spanned by
        the passed slice of this string.

        Parameters
        ----------
        index : Union[int, float, slice]
            Either a slice *or* the 0-based index of the codepoint to be
            returned, where negative indices count backward from the end of
            this string. Integral floats (e.g., ``1.0``) are accepted.

        Raises
        ----------
        StringyArgumentException
            If this index is non-integral (e.g., ``1.5``, ``'1'``).
        StringyOutOfRangeException
            If this index is outside the bounds of this string.
        '''

        # If this is a slice, return the sliced text.
        if isinstance(index, slice):
            return self._make(self._text[index])

        # Coerce this index into an integer.
        try:
            index = operator.index(index)
        except TypeError:
            if not (isinstance(index, float) and index.is_integer()):
                raise StringyArgumentException(
                    'Index {!r} not integral.'.format(index), self._text)
            index = int(index)

        # If this index is out of range, raise an exception.
        text_len = len(self._text)
        if not -text_len <= index < text_len:
            raise StringyOutOfRangeException(
                'Index {} not in range [{}, {}).'.format(
                    index, -text_len, text_len),
                self._text)

        return self._make(self._text[index])

    # ..................{ DUNDERS ~ immutability             }..................
    def __setitem__(self, index, value) -> None:
        raise StringyImmutableException(
            'Cannot set index {!r} to {!r} of immutable string.'.format(
                index, value),
            self._text)


    def __delitem__(self, index) -> None:
        raise StringyImmutableException(
            'Cannot delete index {!r} of immutable string.'.format(index),
            self._text)


    def __setattr__(self, attr_name, value) -> None:
        raise StringyImmutableException(
            'Cannot set attribute "{}" of immutable string.'.format(attr_name),
            self._text)


    def __delattr__(self, attr_name) -> None:
        raise StringyImmutableException(
            'Cannot delete attribute "{}" of immutable string.'.format(
                attr_name),
            self._text)


    def __copy__(self) -> 'Stringy':
        return self


    def __deepcopy__(self, memo) -> 'Stringy':
        return self


    def __reduce__(self):
        return (_restore, (type(self), self._text))

    # ..................{ DUNDERS ~ operators                }..................
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Stringy):
            return self._text == other._text
        elif isinstance(other, str):
            return self._text == other
        return NotImplemented


    def __hash__(self) -> int:
        return hash(self._text)


    def __add__(self, other: object) -> 'Stringy':
        if not isinstance(other, (str, Stringy)):
            return NotImplemented
        return self.append(other)


    def __radd__(self, other: object) -> 'Stringy':
        if not isinstance(other, (str, Stringy)):
            return NotImplemented
        return self.prepend(other)


    def __mul__(self, times: object) -> 'Stringy':
        if not isinstance(times, int):
            return NotImplemented
        return self.repeat(times)

    __rmul__ = __mul__

    # ..................{ DUNDERS ~ conversion               }..................
    def __str__(self) -> str:
        return self._text


    def __bytes__(self) -> bytes:
        return self.render()


    def __repr__(self) -> str:
        return '{}({!r})'.format(type(self).__name__, self._text)


    def __format__(self, format_spec: str) -> str:
        return format(self._text, format_spec)

# ....................{ PRIVATE ~ getters                  }....................
def _get_text(other: StrOrStringy) -> str:
    '''
    Text of the passed string, validated to be encodable as UTF-8 if this is a
    Python string.

    Raises
    ----------
    StringyEncodingException
        If this is a Python string containing lone surrogates.
    '''

    if isinstance(other, Stringy):
        return other._text

    encs.die_unless_canonical(other)
    return other


def _get_entity(char: str) -> str:
    '''
    HTML character reference encoding the passed character.
    '''

    codepoint = ord(char)
    entity_name = codepoint2name.get(codepoint)
    if entity_name is not None:
        return '&{};'.format(entity_name)
    return '&#{};'.format(codepoint)

# ....................{ PRIVATE ~ restorers                }....................
def _restore(cls: type, text: str) -> Stringy:
    '''
    Immutable string of the passed type wrapping the passed previously
    validated text, reconstructing pickled strings without revalidation.
    '''

    return cls._make(text)

# ....................{ MAIN                               }....................
# Print package messages to stderr if "${STRINGY_LOG_LEVEL}" is set.
logconf.init()
