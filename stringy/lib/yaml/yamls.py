#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Yet Another Markup Language (YAML) facilities, serializing and deserializing
immutable strings and containers of immutable strings to and from in-memory
YAML-formatted strings.
'''

# ....................{ IMPORTS                            }....................
from beartype import beartype
from io import StringIO
from ruamel import yaml as ruamel_yaml
from stringy.util.io.log import logs

# ....................{ LOADERS                            }....................
@beartype
def load_str(text: str) -> object:
    '''
    Load (i.e., deserialize) the passed YAML-formatted string into an
    arbitrarily complex object, converting each scalar tagged ``!stringy``
    into an immutable string.

    Parameters
    ----------
    text : str
        YAML-formatted string to be loaded.

    Returns
    ----------
    object
        Object deserialized from this string.
    '''

    # Log this deserialization.
    logs.log_debug('Loading %d characters of YAML...', len(text))

    # Load and return this string.
    return _make_ruamel_parser().load(text)

# ....................{ SAVERS                             }....................
def dump_str(container: object) -> str:
    '''
    Save (i.e., serialize) the passed object into a YAML-formatted string,
    converting each immutable string into a scalar tagged ``!stringy``.

    Parameters
    ----------
    container : object
        Arbitrarily complex object to be saved, typically a dictionary or list
        containing immutable strings.

    Returns
    ----------
    str
        YAML-formatted string serialized from this object.
    '''

    # In-memory text stream to be written to.
    yaml_file = StringIO()

    # Save this container to this stream.
    _make_ruamel_parser().dump(container, yaml_file)

    # Return the contents of this stream.
    return yaml_file.getvalue()

# ....................{ PRIVATE ~ factories                }....................
def _make_ruamel_parser() -> ruamel_yaml.YAML:
    '''
    Safe roundtripping :mod:`ruamel.yaml` parser, where:

    * "Safe" implies this parser ignores all pragmas in YAML strings
      instructing parsers to construct arbitrary Python objects, whose YAML
      syntax is of the form: ``!!python/object:module.name { ... state ... }``.
    * "Roundtripping" implies the object deserialized from a YAML string
      preserves *all* comments and whitespace of that string.
    '''

    # Avoid circular import dependencies.
    from stringy.lib.yaml import yamlrepr

    # Safe roundtripping YAML parser.
    ruamel_parser = ruamel_yaml.YAML(
        # Type of YAML parser to produce. Note that, by design, the
        # "rt" (i.e., roundtripping) parser is *ALWAYS* guaranteed to be safe.
        typ='rt',
    )

    # Permit this parser to roundtrip Unicode characters.
    ruamel_parser.allow_unicode = True

    # Coerce this parser into serializing nested collections as blocks rather
    # than inline "flow".
    ruamel_parser.default_flow_style = False

    # Locally add all representers and constructors required by this package
    # to this parser.
    yamlrepr.add_representers(ruamel_parser.representer)
    yamlrepr.add_constructors(ruamel_parser.constructor)

    # Return this parser.
    return ruamel_parser
