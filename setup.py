#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
:mod:`setuptools`-based makefile instrumenting all high-level administration
tasks (e.g., installation, test running) for this package.
'''

# ....................{ KLUDGES                            }....................
# Explicitly register all files and subdirectories of the root directory
# containing this top-level "setup.py" script to be importable modules and
# packages (respectively) for the remainder of this Python process if this
# directory has yet to be registered.
#
# Technically, this should *NOT* be required. The current build frontend
# should guarantee this to be the case. Pragmatically, some build frontends
# (e.g., pip >= 19.0.0 under isolated builds) fail to do so.
def _register_dir() -> None:
    '''
    Explicitly register all files and subdirectories of the directory
    containing this script to be importable modules and packages
    (respectively) for the remainder of this Python process if this directory
    has yet to be registered.
    '''

    # Avoid polluting the module namespace with these imports.
    import os, sys

    # Absolute dirname of this directory.
    setup_dirname = os.path.dirname(os.path.realpath(__file__))

    # If this directory has yet to be registered, do so.
    if setup_dirname not in sys.path:
        sys.path.append(setup_dirname)


# Register this directory.
_register_dir()

# ....................{ IMPORTS                            }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid race conditions during setuptools-based installation, this
# module may import *ONLY* from packages guaranteed to exist at the start of
# installation. This includes all standard Python and package modules but
# *NOT* third-party dependencies, which if currently uninstalled will only be
# installed at some later time in the installation.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import setuptools
from stringy import metadata, metadeps

# ....................{ EXCEPTIONS                         }....................
def _die_unless_setuptools_version_at_least(
    setuptools_version_min: str) -> None:
    '''
    Raise an exception unless the currently installed version of
    :mod:`setuptools` is at least as recent as the passed minimum version.

    Raises
    ----------
    Exception
        If the currently installed version of :mod:`setuptools` is older than
        the passed minimum version.
    '''

    def _get_version_parts(version: str) -> tuple:
        # Leading numeric components of this version (e.g., "(69, 0)" for
        # "69.0.0rc1").
        version_parts = []
        for version_part in version.split('.'):
            if not version_part.isdigit():
                break
            version_parts.append(int(version_part))
        return tuple(version_parts)

    # If the currently installed version of setuptools is older than this
    # minimum version, raise an exception.
    if (
        _get_version_parts(setuptools.__version__) <
        _get_version_parts(setuptools_version_min)
    ):
        raise Exception(
            'setuptools >= {} required by this package, but only '
            'setuptools {} found.'.format(
                setuptools_version_min, setuptools.__version__))


# Validate the currently installed version of setuptools *BEFORE* doing so.
_die_unless_setuptools_version_at_least(metadeps.SETUPTOOLS_VERSION_MIN)

# ....................{ METADATA                           }....................
_KEYWORDS = [
    'encoding',
    'immutable',
    'slug',
    'string',
    'text',
    'unicode',
]
'''
List of all lowercase alphabetic keywords synopsising this package.
'''


_CLASSIFIERS = [
    'Development Status :: 5 - Production/Stable',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: BSD License',
    'Natural Language :: English',
    'Operating System :: OS Independent',
    'Topic :: Software Development :: Libraries :: Python Modules',
    'Topic :: Text Processing',
]
'''
List of all PyPI-specific trove classifier strings synopsizing this package.

See Also
----------
https://pypi.org/classifiers
    Plaintext list of all trove classifier strings recognized by PyPI.
'''


def _sanitize_classifiers(
    classifiers: list,
    python_version_min_parts: tuple,
    python_version_minor_max: int,
) -> list:
    '''
    List of all PyPI-specific trove classifier strings synopsizing this
    package, manufactured by appending classifiers synopsizing this package's
    support for Python minor versions (e.g.,
    ``Programming Language :: Python :: 3.11``) to the passed list.
    '''

    # Major version of Python required by this package.
    python_version_major = python_version_min_parts[0]

    # List of classifiers to return, copied from the passed list for safety.
    classifiers_sane = classifiers[:]

    # For each minor version of Python 3.x supported by this package, formally
    # classify this version as such.
    for python_version_minor in range(
        python_version_min_parts[1], python_version_minor_max + 1):
        classifiers_sane.append(
            'Programming Language :: Python :: {}.{}'.format(
                python_version_major, python_version_minor,))

    # Return this sanitized list of classifiers.
    return classifiers_sane

# ....................{ OPTIONS                            }....................
_SETUP_OPTIONS = {
    'name':             metadata.PACKAGE_NAME,
    'version':          metadata.VERSION,
    'author':           metadata.AUTHORS,
    'maintainer':       metadata.AUTHORS,
    'description':      metadata.SYNOPSIS,
    'long_description': metadata.DESCRIPTION,
    'classifiers': _sanitize_classifiers(
        classifiers=_CLASSIFIERS,
        python_version_min_parts=metadata.PYTHON_VERSION_MIN_PARTS,
        python_version_minor_max=metadata.PYTHON_VERSION_MINOR_MAX,
    ),
    'keywords': _KEYWORDS,
    'license': metadata.LICENSE,
    'python_requires': '>=' + metadata.PYTHON_VERSION_MIN,
    'install_requires': metadeps.get_runtime_mandatory_tuple(),
    'extras_require': {
        'test': metadeps.get_testing_mandatory_tuple(),
    },
    'packages': setuptools.find_packages(exclude=(
        metadata.PACKAGE_TEST_NAME,
        metadata.PACKAGE_TEST_NAME + '.*',
        'build',
    )),
    'include_package_data': True,
    'zip_safe': False,
}
'''
Dictionary passed to the subsequent call to the :func:`setup` function.

This dictionary signifies the set of all package-specific :mod:`setuptools`
options.
'''

# ....................{ SETUP                              }....................
setuptools.setup(**_SETUP_OPTIONS)
