import pytest

from jsobjspace.config.config import Config, OptionDescription, BoolOption, \
     ChoiceOption
from jsobjspace.config.jsoption import jsoption_description, get_js_config


def make_description():
    modeoption = ChoiceOption('mode', 'Receiver mode',
                              ['undefined', 'global'], 'undefined')
    dummyoption = BoolOption('dummy', 'dummy', default=False)
    booloption = BoolOption('bool', 'Test boolean option')
    wantundef_option = BoolOption('wantundef', 'Test requires', default=False,
                                  requires=[('space.mode', 'undefined')])
    spacegroup = OptionDescription('space', 'space options',
                                   [modeoption, dummyoption])
    return OptionDescription('js', 'test options',
                             [spacegroup, booloption, wantundef_option])

def test_base_config():
    config = Config(make_description(), bool=False)

    assert config.space.mode == 'undefined'
    config.space.mode = 'global'
    assert config.space.mode == 'global'
    assert not config.bool
    assert not config.wantundef

    with pytest.raises(ValueError):
        config.space.mode = 'foo'
    with pytest.raises(ValueError):
        config.space.foo = 'bar'
    with pytest.raises(ValueError):
        config.bool = 123
    with pytest.raises(ValueError):
        config.space = 'foo'

    # wantundef forces space.mode back to 'undefined'
    config.wantundef = True
    assert config.space.mode == 'undefined'
    with pytest.raises(ValueError):
        config.space.mode = 'global'
    config.space.mode = 'undefined'

def test_overrides_by_path():
    config = Config(make_description(), **{'space.dummy': True})
    assert config.space.dummy
    assert config._value_owners['bool'] == 'default'
    assert config.space._value_owners['dummy'] == 'user'

def test_freeze():
    config = Config(make_description())
    assert config._freeze_()
    with pytest.raises(TypeError):
        config.bool = False
    with pytest.raises(TypeError):
        config.space.mode = 'global'

def test_str():
    conf = Config(make_description())
    conf.space.mode = 'global'
    assert str(conf) == "[js]\n    [space]\n        mode = global\n"


class TestJsOptions:
    def test_defaults(self):
        config = get_js_config()
        assert not config.objspace.strict
        assert config.objspace.default_this == 'undefined'
        assert not config.objspace.trace
        assert str(config) == "[js]\n    [objspace]\n"

    def test_strict_requires_undefined_receiver(self):
        config = get_js_config(**{'objspace.strict': True})
        assert config.objspace.default_this == 'undefined'
        with pytest.raises(ValueError):
            config.objspace.default_this = 'global'
        assert str(config) == ("[js]\n    [objspace]\n"
                               "        strict = True\n"
                               "        default_this = undefined\n")

    def test_sloppy(self):
        config = Config(jsoption_description,
                        **{'objspace.default_this': 'global'})
        assert config.objspace.default_this == 'global'
