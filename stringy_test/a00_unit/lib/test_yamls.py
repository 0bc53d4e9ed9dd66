#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests for the :mod:`stringy.lib.yaml.yamls` submodule.
'''

# ....................{ TESTS                              }....................
def test_yamls_dump() -> None:
    '''
    Test serializing immutable strings into tagged YAML scalars.
    '''

    # Defer heavyweight imports.
    from stringy.lib.yaml import yamls
    from stringy.lib.yaml.yamlrepr import TAG_STRINGY
    from stringy.stringy import Stringy

    yaml_text = yamls.dump_str({'name': Stringy('æøå'), 'plain': 'text'})

    assert '{} æøå'.format(TAG_STRINGY) in yaml_text
    assert 'plain: text' in yaml_text


def test_yamls_roundtrip() -> None:
    '''
    Test that immutable strings survive serialization into and deserialization
    from YAML.
    '''

    # Defer heavyweight imports.
    from stringy.lib.yaml import yamls
    from stringy.stringy import Stringy

    container = {
        'names': [Stringy('foo'), Stringy('Ødd string')],
        'plain': 'text',
    }
    container_loaded = yamls.load_str(yamls.dump_str(container))

    assert container_loaded['names'] == ['foo', 'Ødd string']
    assert all(
        type(stringy) is Stringy for stringy in container_loaded['names'])
    assert container_loaded['plain'] == 'text'
    assert not isinstance(container_loaded['plain'], Stringy)


def test_yamls_load() -> None:
    '''
    Test deserializing hand-written YAML containing tagged scalars.
    '''

    # Defer heavyweight imports.
    from stringy.lib.yaml import yamls
    from stringy.stringy import Stringy

    container = yamls.load_str(
        '# Comment preserved by roundtripping.\n'
        'greeting: !stringy "Hello, world!"\n'
    )

    assert container['greeting'] == 'Hello, world!'
    assert isinstance(container['greeting'], Stringy)

