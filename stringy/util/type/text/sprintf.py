#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **sprintf-style templating** (i.e., interpolation of arguments into
``%``-prefixed conversion specifications embedded in a template string)
facilities.

Syntax
----------
Each conversion specification embedded in a template has the form
``%[argnum$][flags][width][.precision]conversion``, where:

* ``argnum`` is the optional 1-based index of the argument to be converted.
  Specifications omitting this index consume arguments sequentially.
* ``flags`` is any combination of:

  * ``-``, left-justifying the converted argument within its field.
  * ``+``, prefixing non-negative numbers by a ``+`` sign.
  * ``0``, padding with zeroes rather than spaces.
  * `` `` (i.e., a space), padding with spaces (the default).
  * ``'`` followed by any character, padding with that character.

* ``width`` is the optional minimum number of characters to be output.
* ``precision`` is the number of decimal digits output for floating-point
  conversions *or* the maximum number of characters output for ``s``.
* ``conversion`` is one of:

  * ``%``, a literal percent sign consuming no argument.
  * ``b``, ``o``, ``x`` and ``X``, an integer in binary, octal and
    lower- and uppercase hexadecimal respectively.
  * ``c``, the character with the integer codepoint.
  * ``d`` and ``u``, a signed and unsigned decimal integer respectively.
  * ``e`` and ``E``, a float in scientific notation.
  * ``f`` and ``F``, a float in fixed-point notation.
  * ``g`` and ``G``, the shorter of ``e`` and ``f``.
  * ``s``, a string.

Arguments are coerced to the type each conversion requires: numeric
conversions parse the leading number of string arguments (defaulting to zero)
and string conversions stringify ``True`` as ``1`` and both ``False`` and
``None`` as the empty string.
'''

# ....................{ IMPORTS                            }....................
import math, re
from beartype import beartype
from beartype.typing import Sequence
from stringy.exceptions import StringyFormatException

# ....................{ CONSTANTS                          }....................
_SPECIFIER_REGEX = re.compile(
    r"%(?:(?P<argnum>[1-9][0-9]*)\$)?"
    r"(?P<flags>(?:[-+ 0]|'.)*)"
    r"(?P<width>[0-9]+)?"
    r"(?:\.(?P<precision>[0-9]+))?"
    r"(?P<conversion>[bcdeEfFgGosuxX%])",
    re.DOTALL,
)
'''
Compiled regular expression matching one conversion specification.
'''


_NUMBER_PREFIX_REGEX = re.compile(
    r'[ \t\n\r\v\f]*'
    r'([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)')
'''
Compiled regular expression matching the leading number (if any) of a string
argument passed to a numeric conversion.
'''


_EXPONENT_REGEX = re.compile(r'([eE])([+-])0*([0-9])')
'''
Compiled regular expression matching the exponent of a float formatted in
scientific notation, capturing its leading zeroes for removal.
'''


_UNSIGNED_OFFSET = 1 << 64
'''
Offset added to negative integers passed to unsigned conversions, emulating
the two's complement representation of a 64-bit machine word.
'''

# ....................{ FORMATTERS                         }....................
@beartype
def vsprintf(template: str, args: Sequence[object]) -> str:
    '''
    Passed template with all conversion specifications replaced by the passed
    arguments converted as these specifications instruct.

    Parameters
    ----------
    template : str
        Template containing zero or more conversion specifications.
    args : Sequence[object]
        Arguments to be interpolated into this template.

    Returns
    ----------
    str
        This template formatted with these arguments.

    Raises
    ----------
    StringyFormatException
        If either:

        * This template contains a malformed conversion specification (e.g.,
          an unknown conversion *or* a trailing ``%``).
        * This template references more arguments than were passed.
    '''

    # List of all substrings to be concatenated into the formatted string.
    chunks = []

    # 0-based index of the next argument consumed by a specification omitting
    # an explicit argument index.
    arg_index_next = 0

    # 0-based index of the first character of this template to be scanned.
    char_index = 0

    # While this template contains one or more specifications...
    while True:
        # 0-based index of the next specification if any or -1 otherwise.
        specifier_index = template.find('%', char_index)

        # If no specifications remain, append the remainder of this template.
        if specifier_index == -1:
            chunks.append(template[char_index:])
            break

        # Else, a specification remains. Append all text preceding it.
        chunks.append(template[char_index:specifier_index])

        # Match this specification.
        specifier = _SPECIFIER_REGEX.match(template, specifier_index)

        # If this specification is malformed, raise an exception.
        if specifier is None:
            raise StringyFormatException(
                'Could not format string: '
                'malformed conversion specification "{}" at index {}'.format(
                    template[specifier_index:specifier_index + 2],
                    specifier_index,
                ),
                template,
            )

        # Skip past this specification.
        char_index = specifier.end()

        # Character identifying the type of this conversion.
        conversion = specifier.group('conversion')

        # If this is an escaped percent sign, consume no argument.
        if conversion == '%':
            chunks.append('%')
            continue

        # Else, this conversion consumes an argument. Decide which.
        argnum = specifier.group('argnum')
        if argnum is None:
            arg_index = arg_index_next
            arg_index_next += 1
        else:
            arg_index = int(argnum) - 1

        # If too few arguments were passed, raise an exception.
        if arg_index >= len(args):
            raise StringyFormatException(
                'Could not format string: '
                '{} arguments are required, {} given'.format(
                    arg_index + 1, len(args)),
                template,
            )

        # Append this argument converted as this specification instructs.
        chunks.append(_format_arg(
            arg=args[arg_index],
            conversion=conversion,
            flags=specifier.group('flags'),
            width=specifier.group('width'),
            precision=specifier.group('precision'),
        ))

    # Return these substrings concatenated.
    return ''.join(chunks)


def sprintf(template: str, *args) -> str:
    '''
    Passed template formatted with the passed positional arguments.

    See Also
    ----------
    :func:`vsprintf`
        Further details.
    '''

    return vsprintf(template, args)

# ....................{ PRIVATE ~ formatters               }....................
def _format_arg(
    arg: object, conversion: str, flags: str, width, precision) -> str:
    '''
    Passed argument converted as the passed components of a single conversion
    specification instruct.
    '''

    # Parse these flags.
    pad_char = ' '
    is_left = False
    is_signed = False
    flag_index = 0
    while flag_index < len(flags):
        flag = flags[flag_index]
        if flag == "'":
            pad_char = flags[flag_index + 1]
            flag_index += 2
            continue
        elif flag == '-':
            is_left = True
        elif flag == '+':
            is_signed = True
        else:
            pad_char = flag
        flag_index += 1

    # Convert these numeric components.
    width = int(width) if width is not None else 0
    precision = int(precision) if precision is not None else None

    # Convert this argument.
    is_numeric = True
    if conversion == 's':
        is_numeric = False
        body = _to_str(arg)
        if precision is not None:
            body = body[:precision]
    elif conversion == 'c':
        # Character conversions ignore both width and padding. Codepoints
        # outside the Unicode range wrap around.
        return chr(_to_int(arg) % 0x110000)
    elif conversion == 'd':
        number = _to_int(arg)
        body = str(number)
        if is_signed and number >= 0:
            body = '+' + body
    elif conversion == 'u':
        number = _to_int(arg)
        if number < 0:
            number += _UNSIGNED_OFFSET
        body = str(number)
    elif conversion in 'boxX':
        number = _to_int(arg)
        if number < 0:
            number += _UNSIGNED_OFFSET
        body = format(number, conversion)
    else:
        number = _to_float(arg)
        if precision is None:
            precision = 6

        # Python's fixed-point conversion is locale-independent, satisfying
        # both "f" and "F".
        if conversion in 'fF':
            body = '{:.{}f}'.format(number, precision)
        else:
            body = _EXPONENT_REGEX.sub(
                r'\1\2\3', '{:.{}{}}'.format(number, precision, conversion))

        if is_signed and number >= 0:
            body = '+' + body

    # Return this body padded to this width.
    return _pad(
        body=body,
        width=width,
        pad_char=pad_char,
        is_left=is_left,
        is_numeric=is_numeric,
    )


def _pad(
    body: str, width: int, pad_char: str, is_left: bool, is_numeric: bool,
) -> str:
    '''
    Passed converted argument padded to the passed minimum width.
    '''

    # Number of padding characters to be added.
    pad_length = width - len(body)

    # If this body already satisfies this width, preserve it as is.
    if pad_length <= 0:
        return body

    # Padding to be added.
    padding = pad_char * pad_length

    # If left-justifying, pad on the right.
    if is_left:
        return body + padding

    # If zero-padding a signed number, pad between the sign and digits.
    if is_numeric and pad_char == '0' and body[:1] in ('-', '+'):
        return body[0] + padding + body[1:]

    # Else, pad on the left.
    return padding + body

# ....................{ PRIVATE ~ coercers                 }....................
def _to_str(arg: object) -> str:
    '''
    Passed argument coerced to a string.
    '''

    if isinstance(arg, bool):
        return '1' if arg else ''
    elif arg is None:
        return ''
    elif isinstance(arg, float) and arg.is_integer():
        return str(int(arg))

    # Else, defer to the standard stringification (e.g., the text of a
    # "Stringy" instance).
    return str(arg)


def _to_float(arg: object) -> float:
    '''
    Passed argument coerced to a float.
    '''

    if isinstance(arg, (int, float)):
        return float(arg)
    elif arg is None:
        return 0.0

    # Else, parse the leading number of this stringified argument if any.
    number = _NUMBER_PREFIX_REGEX.match(str(arg))
    return float(number.group(1)) if number is not None else 0.0


def _to_int(arg: object) -> int:
    '''
    Passed argument coerced to an integer, truncating floats towards zero.
    '''

    if isinstance(arg, int):
        return int(arg)
    elif isinstance(arg, float):
        return int(arg) if math.isfinite(arg) else 0
    elif arg is None:
        return 0

    # Else, parse the leading number of this stringified argument if any.
    number = _NUMBER_PREFIX_REGEX.match(str(arg))
    if number is None:
        return 0

    # Prefer exact integer parsing, falling back to floats for numbers with
    # fractional parts or exponents.
    try:
        return int(number.group(1))
    except ValueError:
        return _to_int(float(number.group(1)))
