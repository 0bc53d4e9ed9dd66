#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Top-level package namespace.

For PEP 8 compliance, this namespace exposes a subset of the metadata constants
provided by the :mod:`stringy.metadata` module commonly inspected by external
automation. For convenience, this namespace also exposes the
:class:`stringy.stringy.Stringy` class, imported lazily on first access.
'''

# ....................{ IMPORTS                            }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid race conditions during setuptools-based installation, this
# module may import *ONLY* from modules guaranteed to exist at the start of
# installation. This includes all standard Python and package modules but
# *NOT* third-party dependencies, which if currently uninstalled will only be
# installed at some later time in the installation. Since the "stringy.stringy"
# submodule imports third-party dependencies, that submodule is imported
# lazily by the __getattr__() function below.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

# For PEP 8 compliance, versions constants expected by external automation are
# imported under their PEP 8-mandated names.
from stringy.metadata import VERSION as __version__
from stringy.metadata import VERSION_PARTS as __version_info__

# ....................{ GLOBALS                            }....................
# Document all global variables imported into this namespace above.

__version__
'''
Human-readable package version as a ``.``-delimited string.

For PEP 8 compliance, this specifier has the canonical name ``__version__``
rather than that of a typical global (e.g., ``VERSION_STR``).
'''


__version_info__
'''
Machine-readable package version as a tuple of integers.

For PEP 8 compliance, this specifier has the canonical name ``__version_info__``
rather than that of a typical global (e.g., ``VERSION_PARTS``).
'''


__all__ = ['Stringy', '__version__', '__version_info__']

# ....................{ GETTERS                            }....................
def __getattr__(attr_name: str) -> object:
    '''
    Attribute with the passed name lazily imported into this namespace.

    Raises
    ----------
    AttributeError
        If this name is unrecognized.
    '''

    if attr_name == 'Stringy':
        from stringy.stringy import Stringy
        return Stringy

    raise AttributeError(
        'Module "{}" has no attribute "{}".'.format(__name__, attr_name))
