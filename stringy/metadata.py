#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Metadata constants synopsizing high-level package behaviour.

Python Version
----------
For uniformity between this codebase and the ``setup.py`` setuptools script
importing this module, this module also validates the version of the active
Python 3 interpreter. An exception is raised if this version is insufficient.

This package currently requires **Python 3.10**, the first release supporting
``|``-delimited unions of types at runtime as leveraged throughout this
codebase.

Design
----------
Metadata constants defined by this submodule are intentionally *not* imported
from third-party dependencies, permitting their use from the top-level
``setup.py`` script *before* those dependencies have been installed.
'''

# ....................{ IMPORTS                            }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid race conditions during setuptools-based installation, this
# module may import *ONLY* from modules guaranteed to exist at the start of
# installation. This includes all standard Python modules but *NOT* third-party
# dependencies, which if currently uninstalled will only be installed at some
# later time in the installation.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import sys

# ....................{ METADATA                           }....................
NAME = 'Stringy'
'''
Human-readable package name.
'''


LICENSE = '2-clause BSD'
'''
Human-readable name of the license this package is licensed under.
'''

# ....................{ PYTHON ~ version                   }....................
PYTHON_VERSION_MIN = '3.10.0'
'''
Human-readable minimum version of Python required by this package as a
``.``-delimited string.

See Also
----------
"Python Version" section of this submodule's docstring for a detailed
justification of this constant's current value.
'''


PYTHON_VERSION_MINOR_MAX = 13
'''
Maximum minor stable version of this major version of Python currently released
(e.g., ``5`` if Python 3.5 is the most recent stable version of Python 3.x).
'''


def _convert_version_str_to_tuple(version_str: str) -> tuple:
    '''
    Convert the passed human-readable ``.``-delimited version string into a
    machine-readable version tuple of corresponding integers.
    '''
    assert isinstance(version_str, str), (
        '"{}" not a version string.'.format(version_str))

    return tuple(int(version_part) for version_part in version_str.split('.'))


PYTHON_VERSION_MIN_PARTS = _convert_version_str_to_tuple(PYTHON_VERSION_MIN)
'''
Machine-readable minimum version of Python required by this package as a
tuple of integers.
'''


if sys.version_info[:3] < PYTHON_VERSION_MIN_PARTS:
    # Human-readable current version of Python. "sys.version" embeds
    # significantly more than merely a version and is thus inapplicable here.
    PYTHON_VERSION = '.'.join(
        str(version_part) for version_part in sys.version_info[:3])

    # Die ignominiously.
    raise RuntimeError(
        '{} requires at least Python {}, but the active interpreter '
        'is only Python {}. We feel deep sadness for you.'.format(
            NAME, PYTHON_VERSION_MIN, PYTHON_VERSION))

# ....................{ METADATA ~ version                 }....................
VERSION = '1.0.0'
'''
Human-readable package version as a ``.``-delimited string.
'''


VERSION_PARTS = _convert_version_str_to_tuple(VERSION)
'''
Machine-readable package version as a tuple of integers.
'''

# ....................{ METADATA ~ synopsis                }....................
SYNOPSIS = 'Immutable, fluent and encoding-safe Unicode strings.'
'''
Human-readable single-line synopsis of this package.

By PyPI design, this string must *not* span multiple lines or paragraphs.
'''


DESCRIPTION = (
    'Stringy wraps text in an immutable value type exposing chainable, '
    'side-effect-free operations (substring extraction, search, '
    'case conversion, padding, trimming, templating, slugging and '
    'transliteration) while normalizing all text to a single canonical '
    'encoding.'
)
'''
Human-readable multiline description of this package.
'''

# ....................{ METADATA ~ authors                 }....................
AUTHORS = 'Alexis Pietak, Cecil Curry, et al.'
'''
Human-readable list of all principal authors of this package as a
comma-delimited string.
'''

# ....................{ METADATA ~ package                 }....................
PACKAGE_NAME = NAME.lower()
'''
Fully-qualified name of the top-level Python package implementing this
package, doubling as the name of the package-wide logger.
'''


PACKAGE_TEST_NAME = PACKAGE_NAME + '_test'
'''
Fully-qualified name of the top-level Python package exercising this package.
'''

# ....................{ METADATA ~ encoding                }....................
ENCODING_CANONICAL = 'UTF-8'
'''
Name of the **canonical encoding** (i.e., the one encoding all text wrapped by
:class:`stringy.stringy.Stringy` instances is guaranteed to be valid under).
'''


ENCODING_INTERNAL_DEFAULT = ENCODING_CANONICAL
'''
Name of the default **internal encoding** (i.e., the encoding bytes passed to
and returned from :class:`stringy.stringy.Stringy` instances are assumed to be
encoded with when no encoding is explicitly passed).
'''


ENCODING_INTERNAL_ENV_VAR_NAME = 'STRINGY_INTERNAL_ENCODING'
'''
Name of the environment variable overriding
:data:`ENCODING_INTERNAL_DEFAULT` at startup if set.
'''

# ....................{ METADATA ~ logging                 }....................
LOG_LEVEL_ENV_VAR_NAME = 'STRINGY_LOG_LEVEL'
'''
Name of the environment variable whose value (if set) is the case-insensitive
name of the minimum level of package messages printed to standard error
(e.g., ``debug``). If unset, package messages are printed nowhere unless the
calling application configures logging itself.
'''
