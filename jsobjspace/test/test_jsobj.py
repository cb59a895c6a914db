import pytest

from jsobjspace.error import JsTypeError, TypeConflict
from jsobjspace.jsobj import W_Object, W_Function, W_Symbol, DataProperty, \
     AccessorProperty, DescriptorPatch, absent, default_property, to_patch, \
     check_key, same_value, ToBoolean, to_property_key, isnull_or_undefined, \
     w_Undefined, w_Null


def test_undefined_and_null():
    assert not w_Undefined
    assert not w_Null
    assert w_Undefined.type() == 'undefined'
    assert w_Null.type() == 'object'
    assert isnull_or_undefined(w_Undefined)
    assert isnull_or_undefined(w_Null)
    assert not isnull_or_undefined(0)
    assert not isnull_or_undefined('')

def test_check_key():
    sym = W_Symbol('s')
    assert check_key('a') == 'a'
    assert check_key(sym) is sym
    for key in [1, 1.5, None, w_Undefined, ('a',)]:
        with pytest.raises(JsTypeError):
            check_key(key)

def test_symbols_compare_by_identity():
    assert W_Symbol('x') != W_Symbol('x')
    assert repr(W_Symbol('x')) == 'Symbol(x)'

def test_same_value():
    nan = float('nan')
    assert same_value(nan, nan)
    assert not same_value(0.0, -0.0)
    assert same_value(0, 0.0)
    assert same_value('a', 'a')
    assert not same_value(1, True)
    assert not same_value('1', 1)
    assert same_value(w_Undefined, w_Undefined)
    assert not same_value(w_Undefined, w_Null)

def test_to_boolean():
    assert not ToBoolean(float('nan'))
    assert not ToBoolean(0)
    assert not ToBoolean('')
    assert not ToBoolean(w_Undefined)
    assert ToBoolean('0')
    assert ToBoolean(W_Object(0))

def test_to_property_key():
    sym = W_Symbol()
    assert to_property_key('x') == 'x'
    assert to_property_key(sym) is sym
    assert to_property_key(3) == '3'
    assert to_property_key(True) == 'true'
    assert to_property_key(w_Undefined) == 'undefined'
    assert to_property_key(w_Null) == 'null'
    with pytest.raises(JsTypeError):
        to_property_key(W_Object(0))


class TestProperties:
    def test_default_property(self):
        prop = default_property(42)
        assert prop.is_data() and not prop.is_accessor()
        assert prop.value == 42
        assert prop.writable and prop.enumerable and prop.configurable

    def test_fresh_properties_default_to_false(self):
        prop = DataProperty()
        assert prop.value is w_Undefined
        assert not (prop.writable or prop.enumerable or prop.configurable)
        prop = AccessorProperty()
        assert prop.is_accessor()
        assert prop.getter is w_Undefined and prop.setter is w_Undefined

    def test_copy_is_independent(self):
        prop = DataProperty(1, writable=True)
        prop2 = prop.copy()
        prop2.value = 2
        assert prop.value == 1
        assert prop2.writable


class TestDescriptorPatch:
    def test_kinds(self):
        assert DescriptorPatch(value=1).is_data()
        assert DescriptorPatch(writable=False).is_data()
        w_func = W_Function(0, None)
        assert DescriptorPatch(get=w_func).is_accessor()
        assert DescriptorPatch(set=w_Undefined).is_accessor()
        patch = DescriptorPatch(enumerable=True)
        assert patch.is_generic()
        assert DescriptorPatch().is_generic()

    def test_flags_are_coerced(self):
        patch = DescriptorPatch(writable=1, enumerable=0)
        assert patch.writable is True
        assert patch.enumerable is False
        assert patch.configurable is absent
        patch = DescriptorPatch(enumerable=float('nan'), configurable='')
        assert patch.enumerable is False
        assert patch.configurable is False

    def test_data_and_accessor_conflict(self):
        w_func = W_Function(0, None)
        with pytest.raises(TypeConflict):
            DescriptorPatch(value=1, get=w_func)
        with pytest.raises(TypeConflict):
            DescriptorPatch.from_dict({'writable': True, 'set': w_func})

    def test_accessors_must_be_callable(self):
        with pytest.raises(TypeConflict):
            DescriptorPatch(get=W_Object(0))
        with pytest.raises(TypeConflict):
            DescriptorPatch(set=42)

    def test_unknown_field(self):
        with pytest.raises(TypeConflict):
            DescriptorPatch.from_dict({'vaule': 1})

    def test_to_property(self):
        prop = DescriptorPatch(value=5).to_property()
        assert prop.is_data()
        assert prop.value == 5
        assert not (prop.writable or prop.enumerable or prop.configurable)
        w_func = W_Function(0, None)
        prop = DescriptorPatch(get=w_func, enumerable=True).to_property()
        assert prop.is_accessor()
        assert prop.getter is w_func
        assert prop.setter is w_Undefined
        assert prop.enumerable and not prop.configurable

    def test_to_patch(self):
        patch = DescriptorPatch(value=1)
        assert to_patch(patch) is patch
        assert to_patch({'value': 1}).value == 1
        with pytest.raises(TypeConflict):
            to_patch(42)


class TestObjectRecord:
    def test_insertion_order_is_kept_on_replace(self):
        w_obj = W_Object(0)
        w_obj.set_own('b', default_property(1))
        w_obj.set_own('a', default_property(2))
        w_obj.set_own('b', default_property(3))
        assert w_obj.keys() == ['b', 'a']
        assert w_obj.get_own('b').value == 3

    def test_keys_and_enumerability(self):
        w_obj = W_Object(0)
        w_obj.set_own('x', default_property(1))
        w_obj.set_own('hidden', DataProperty(2))
        assert w_obj.keys() == ['x']
        assert w_obj.keys(include_nonenumerable=True) == ['x', 'hidden']
        assert w_obj.is_enumerable_own('x')
        assert not w_obj.is_enumerable_own('hidden')
        assert not w_obj.is_enumerable_own('missing')
        assert w_obj.has_own('hidden')

    def test_keys_mix_strings_and_symbols(self):
        w_obj = W_Object(0)
        sym = W_Symbol('s')
        w_obj.set_own('a', default_property(1))
        w_obj.set_own(sym, default_property(2))
        w_obj.set_own('b', default_property(3))
        w_obj.set_own('hidden', DataProperty(4))
        assert w_obj.keys() == ['a', sym, 'b']
        assert w_obj.keys(include_nonenumerable=True) == ['a', sym, 'b',
                                                          'hidden']
        assert w_obj.string_keys() == ['a', 'b']
        assert w_obj.string_keys(include_nonenumerable=True) == ['a', 'b',
                                                                 'hidden']

    def test_own_property_keys_puts_symbols_last(self):
        w_obj = W_Object(0)
        sym = W_Symbol('s')
        w_obj.set_own(sym, default_property(1))
        w_obj.set_own('a', default_property(2))
        assert w_obj.own_property_keys() == ['a', sym]
        assert w_obj.keys() == [sym, 'a']

    def test_del_own(self):
        w_obj = W_Object(0)
        w_obj.set_own('a', default_property(1))
        w_obj.del_own('a')
        assert w_obj.get_own('a') is None
        assert not w_obj.has_own('a')

    def test_bad_key(self):
        with pytest.raises(JsTypeError):
            W_Object(0).set_own(1, default_property(1))


class TestFunctionRecord:
    def test_kinds(self):
        w_func = W_Function(0, None)
        assert w_func.is_callable()
        assert w_func.is_constructor()
        assert not W_Function(1, None, kind='arrow').is_constructor()
        assert not W_Function(2, None, kind='builtin').is_constructor()
        assert not W_Object(3).is_callable()

    def test_bound_target(self):
        w_target = W_Function(0, None, kind='arrow')
        w_bound = W_Function(1, None, kind='bound', target=w_target)
        w_bound2 = W_Function(2, None, kind='bound', target=w_bound)
        assert w_bound2.get_target() is w_target
        assert not w_bound2.is_constructor()
        assert w_bound2.is_bound()
