#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Yet Another Markup Language (YAML) **representer** (i.e., callable serializing
all objects of the same type into well-formatted YAML) and **constructor**
(i.e., callable deserializing well-formatted YAML back into objects of the
same type) functionality.
'''

# ....................{ IMPORTS                            }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To permit YAML implementations to be conditionally imported at
# startup, no implementations (e.g., the top-level "ruamel.yaml" package) are
# importable here.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

from stringy.stringy import Stringy

# ....................{ GLOBALS                            }....................
TAG_STRINGY = '!stringy'
'''
YAML-formatted tag identifying each YAML scalar converted from an immutable
string.
'''

# ....................{ ADDERS                             }....................
def add_representers(representer: object) -> None:
    '''
    Add all **custom representers** (i.e., callables serializing all objects of
    the same type into well-formatted YAML) required by this package to the
    passed :class:`ruamel.yaml.representer.Representer`-like object.

    Motivation
    ----------
    This function ensures that dumping immutable strings to YAML with the
    passed representer stringifies these strings as tagged YAML scalars
    resembling:

        name: !stringy some text

    rather than as arbitrary Python objects, which most YAML implementations
    refuse to serialize.

    Parameters
    ----------
    representer: object
        :class:`ruamel.yaml.representer.Representer`-like object converting
        arbitrary Python objects to YAML-formatted strings. This object *must*
        define an ``add_representer`` callable accepting the type to be
        represented and a callable converting objects of that type to YAML
        strings.
    '''

    representer.add_representer(Stringy, _represent_stringy)


def add_constructors(constructor: object) -> None:
    '''
    Add all **custom constructors** (i.e., callables deserializing
    well-formatted YAML back into objects of the same type) required by this
    package to the passed
    :class:`ruamel.yaml.constructor.Constructor`-like object.

    Parameters
    ----------
    constructor: object
        :class:`ruamel.yaml.constructor.Constructor`-like object converting
        YAML nodes to Python objects. This object *must* define an
        ``add_constructor`` callable accepting a YAML tag and a callable
        converting nodes with that tag to Python objects.
    '''

    constructor.add_constructor(TAG_STRINGY, _construct_stringy)

# ....................{ REPRESENTERS                       }....................
def _represent_stringy(dumper, stringy: Stringy) -> object:
    '''
    Convert the passed immutable string into a YAML scalar node tagged by
    :data:`TAG_STRINGY` whose value is the text of this string.

    Parameters
    ----------
    dumper: ruamel.yaml.representer.Representer
        Object converting arbitrary Python objects to YAML-formatted strings.
    stringy: Stringy
        Immutable string to be converted into a YAML-formatted string.
    '''

    return dumper.represent_scalar(TAG_STRINGY, stringy.text)

# ....................{ CONSTRUCTORS                       }....................
def _construct_stringy(loader, node) -> Stringy:
    '''
    Convert the passed YAML scalar node tagged by :data:`TAG_STRINGY` into an
    immutable string, validating the text of this node.
    '''

    # Coerce "ruamel.yaml"-specific scalar string subclasses preserving
    # quoting styles into builtin strings.
    return Stringy(str(loader.construct_scalar(node)))
