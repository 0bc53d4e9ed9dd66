#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Metadata constants synopsizing high-level package dependencies.

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
# installation.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

# ....................{ LIBS ~ runtime : mandatory          }....................
SETUPTOOLS_VERSION_MIN = '61.0.0'
'''
Minimum version of :mod:`setuptools` required at installation time as a
human-readable ``.``-delimited string.
'''


RUNTIME_MANDATORY = {
    # Runtime type-checking of all public callables, including the standard
    # "beartype.typing" and "beartype.vale" APIs.
    'beartype': '>= 0.16.0',

    # Transliteration of Unicode text into ASCII. Unidecode >= 1.2.0 accepts
    # the "errors" parameter, preserving characters with no mapping.
    'Unidecode': '>= 1.2.0',

    # Pickling of strings into bytes.
    'dill': '>= 0.3.6',

    # Serialization of strings into YAML. The object-oriented "ruamel.yaml" API
    # first introduced in 0.15.0 supplanted the functional PyYAML-compatible
    # API; supporting both isn't worth the maintenance debt.
    'ruamel.yaml': '>= 0.17.0',
}
'''
Dictionary mapping from the :mod:`setuptools`-specific project name of each
mandatory runtime dependency for this package to the suffix of a
:mod:`setuptools`-specific requirements string constraining this dependency.

Each:

* Key is the name of a :mod:`setuptools`-specific project identifying this
  dependency, which may have no relation to the name of that project's
  top-level module or package (e.g., the ``Unidecode`` project's top-level
  package is :mod:`unidecode`).
* Value is either:

  * ``None`` or the empty string, in which case this dependency is
    unconstrained (i.e., any version of this dependency is sufficient).
  * A string of the form ``{comparator} {version}``.
'''

# ....................{ LIBS ~ testing : mandatory         }....................
TESTING_MANDATORY = {
    # pytest >= 7.0.0 is required for the "caplog.set_level()" and
    # "monkeypatch.setenv()" semantics leveraged by our test suite.
    'pytest': '>= 7.0.0',
}
'''
Dictionary mapping from the :mod:`setuptools`-specific project name of each
mandatory testing dependency for this package to the suffix of a
:mod:`setuptools`-specific requirements string constraining this dependency.

See Also
----------
:data:`RUNTIME_MANDATORY`
    Further details on dictionary structure.
'''

# ....................{ GETTERS                            }....................
def get_runtime_mandatory_tuple() -> tuple:
    '''
    Tuple listing the :mod:`setuptools`-specific requirement string containing
    the mandatory name and optional version constraints of each mandatory
    runtime dependency for this package, dynamically converted from the
    :data:`RUNTIME_MANDATORY` dictionary.
    '''

    return _get_requirements_str_from_dict(RUNTIME_MANDATORY)


def get_testing_mandatory_tuple() -> tuple:
    '''
    Tuple listing the :mod:`setuptools`-specific requirement string containing
    the mandatory name and optional version constraints of each mandatory
    testing dependency for this package, dynamically converted from the
    :data:`TESTING_MANDATORY` dictionary.
    '''

    return _get_requirements_str_from_dict(TESTING_MANDATORY)

# ....................{ PRIVATE ~ getters                  }....................
def _get_requirements_str_from_dict(requirements_dict: dict) -> tuple:
    '''
    Tuple of :mod:`setuptools`-specific requirement strings of the form
    ``{project_name} {comparator} {version}`` (or merely ``{project_name}`` for
    unconstrained dependencies) converted from the passed dictionary.
    '''

    return tuple(
        '{} {}'.format(project_name, requirement).strip()
        if requirement else project_name
        for project_name, requirement in requirements_dict.items()
    )
