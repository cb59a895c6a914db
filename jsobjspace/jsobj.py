# encoding: utf-8
"""
Values, property descriptors and object records of the object space.

Primitive values are plain python values (str, int, float, bool); the two
JavaScript-only primitives are the singletons w_Undefined and w_Null.
Objects are W_Object records, allocated by an ObjectGraph, which owns the
arena they live in.
"""

import math

from jsobjspace.error import JsTypeError, TypeConflict


class W_Root(object):
    def type(self):
        raise NotImplementedError

class W_Undefined(W_Root):
    def __repr__(self):
        return "w_Undefined"

    def __bool__(self):
        return False

    def type(self):
        return 'undefined'

class W_Null(W_Root):
    def __repr__(self):
        return "w_Null"

    def __bool__(self):
        return False

    def type(self):
        return 'object'

w_Undefined = W_Undefined()
w_Null = W_Null()

def isnull_or_undefined(w_value):
    return w_value is w_Undefined or w_value is w_Null


class W_Symbol(W_Root):
    """A property key compared by identity"""
    def __init__(self, description=''):
        self.description = description

    def __repr__(self):
        return "Symbol(%s)" % (self.description,)

    def type(self):
        return 'symbol'


def check_key(key):
    if isinstance(key, (str, W_Symbol)):
        return key
    raise JsTypeError('invalid property key %r' % (key,))

def same_value(x, y):
    """SameValue: like ===, except NaN equals NaN and +0 differs from -0"""
    if isinstance(x, W_Root) or isinstance(y, W_Root):
        return x is y
    if type(x) is bool or type(y) is bool:
        return type(x) is type(y) and x == y
    if isinstance(x, (int, float)) and isinstance(y, (int, float)):
        if isinstance(x, float) and math.isnan(x):
            return isinstance(y, float) and math.isnan(y)
        if x == 0 and y == 0:
            return math.copysign(1.0, x) == math.copysign(1.0, y)
        return x == y
    return type(x) is type(y) and x == y

# ____________________________________________________________
# property descriptors

class Property(object):
    """An own property of an object, either data or accessor"""
    def __init__(self, enumerable=False, configurable=False):
        self.enumerable = enumerable
        self.configurable = configurable

    def is_data(self):
        return False

    def is_accessor(self):
        return False

    def copy(self):
        raise NotImplementedError

class DataProperty(Property):
    def __init__(self, value=w_Undefined, writable=False,
                 enumerable=False, configurable=False):
        Property.__init__(self, enumerable, configurable)
        self.value = value
        self.writable = writable

    def is_data(self):
        return True

    def copy(self):
        return DataProperty(self.value, self.writable,
                            self.enumerable, self.configurable)

    def __repr__(self):
        return "|%r w%de%dc%d|" % (self.value, self.writable,
                                    self.enumerable, self.configurable)

class AccessorProperty(Property):
    def __init__(self, getter=w_Undefined, setter=w_Undefined,
                 enumerable=False, configurable=False):
        Property.__init__(self, enumerable, configurable)
        self.getter = getter
        self.setter = setter

    def is_accessor(self):
        return True

    def copy(self):
        return AccessorProperty(self.getter, self.setter,
                                self.enumerable, self.configurable)

    def __repr__(self):
        return "|get %r set %r e%dc%d|" % (self.getter, self.setter,
                                           self.enumerable, self.configurable)

def default_property(value):
    """the property created by a plain assignment or an object literal"""
    return DataProperty(value, writable=True, enumerable=True,
                        configurable=True)


class Absent(object):
    def __repr__(self):
        return "absent"

    def __bool__(self):
        return False

absent = Absent()

class DescriptorPatch(object):
    """The descriptor argument of defineProperty: every field may be absent."""

    FIELDS = ('value', 'writable', 'get', 'set', 'enumerable', 'configurable')

    def __init__(self, value=absent, writable=absent, get=absent, set=absent,
                 enumerable=absent, configurable=absent):
        self.value = value
        self.get = get
        self.set = set
        for name, flag in [('writable', writable), ('enumerable', enumerable),
                           ('configurable', configurable)]:
            if flag is not absent:
                flag = ToBoolean(flag)
            setattr(self, name, flag)
        if self.is_data() and self.is_accessor():
            raise TypeConflict('a property descriptor cannot both specify '
                               'accessors and a value or writable attribute')
        for name in ('get', 'set'):
            w_func = getattr(self, name)
            if w_func is absent or w_func is w_Undefined:
                continue
            if not isinstance(w_func, W_Function):
                raise TypeConflict('%s must be a function, got %r' %
                                   (name, w_func))

    @classmethod
    def from_dict(cls, d):
        for name in d:
            if name not in cls.FIELDS:
                raise TypeConflict('unknown descriptor field %r' % (name,))
        return cls(**d)

    def has(self, name):
        return getattr(self, name) is not absent

    def is_data(self):
        return self.has('value') or self.has('writable')

    def is_accessor(self):
        return self.has('get') or self.has('set')

    def is_generic(self):
        return not self.is_data() and not self.is_accessor()

    def to_property(self):
        """a fresh property, absent attributes defaulting to false/undefined"""
        enumerable = self.enumerable is True
        configurable = self.configurable is True
        if self.is_accessor():
            return AccessorProperty(self.get or w_Undefined,
                                    self.set or w_Undefined,
                                    enumerable, configurable)
        if self.has('value'):
            value = self.value
        else:
            value = w_Undefined
        return DataProperty(value, self.writable is True,
                            enumerable, configurable)

    def __repr__(self):
        fields = ["%s=%r" % (name, getattr(self, name))
                  for name in self.FIELDS if self.has(name)]
        return "DescriptorPatch(%s)" % (", ".join(fields),)

def to_patch(descriptor):
    if isinstance(descriptor, DescriptorPatch):
        return descriptor
    if isinstance(descriptor, dict):
        return DescriptorPatch.from_dict(descriptor)
    raise TypeConflict('property description must be an object: %r' %
                       (descriptor,))

# ____________________________________________________________
# object records

class W_Object(W_Root):
    """An object record: own properties plus the arena index of the
    prototype.  Only an ObjectGraph creates these."""

    def __init__(self, uid, proto_uid=None, Class='Object'):
        self.uid = uid
        self.proto_uid = proto_uid
        self.Class = Class
        self.extensible = True
        # key --> Property, in insertion order
        self.propdict = {}

    def get_own(self, key):
        return self.propdict.get(key, None)

    def set_own(self, key, prop):
        assert isinstance(prop, Property)
        self.propdict[check_key(key)] = prop

    def del_own(self, key):
        del self.propdict[key]

    def has_own(self, key):
        return key in self.propdict

    def is_enumerable_own(self, key):
        prop = self.propdict.get(key, None)
        return prop is not None and prop.enumerable

    def keys(self, include_nonenumerable=False):
        return [key for key, prop in self.propdict.items()
                if include_nonenumerable or prop.enumerable]

    def string_keys(self, include_nonenumerable=False):
        """what Object.keys, getOwnPropertyNames and for...in see"""
        return [key for key in self.keys(include_nonenumerable)
                if isinstance(key, str)]

    def own_property_keys(self):
        strings = [key for key in self.propdict if isinstance(key, str)]
        symbols = [key for key in self.propdict if isinstance(key, W_Symbol)]
        return strings + symbols

    def is_callable(self):
        return False

    def type(self):
        return 'object'

    def __repr__(self):
        return "<Object class: %s #%d>" % (self.Class, self.uid)

class W_Activation(W_Object):
    """The object used on function calls and scopes to hold variables"""
    def __init__(self, uid):
        W_Object.__init__(self, uid, None, Class='Activation')

class W_Function(W_Object):
    """A callable object.

    body is a python callable body(space, args, this).  Arrow functions carry
    the receiver of their creator in lexical_this; bound functions carry
    target, bound_this and bound_args, all fixed at creation.  Builtin
    functions behave like normal ones but cannot be constructed."""

    def __init__(self, uid, proto_uid, body=None, name='', kind='normal',
                 lexical_this=w_Undefined, target=None,
                 bound_this=w_Undefined, bound_args=()):
        W_Object.__init__(self, uid, proto_uid, Class='Function')
        assert kind in ('normal', 'arrow', 'bound', 'builtin')
        self.body = body
        self.name = name
        self.kind = kind
        self.lexical_this = lexical_this
        self.target = target
        self.bound_this = bound_this
        self.bound_args = tuple(bound_args)

    def is_callable(self):
        return True

    def is_arrow(self):
        return self.kind == 'arrow'

    def is_bound(self):
        return self.kind == 'bound'

    def is_constructor(self):
        if self.kind == 'bound':
            return self.target.is_constructor()
        return self.kind == 'normal'

    def get_target(self):
        """the function whose body eventually runs"""
        w_func = self
        while w_func.kind == 'bound':
            w_func = w_func.target
        return w_func

    def type(self):
        return 'function'

    def __repr__(self):
        return "<Function %s #%d>" % (self.name or 'anonymous', self.uid)

def ToBoolean(w_value):
    if isinstance(w_value, float) and math.isnan(w_value):
        return False
    return bool(w_value)

def to_property_key(w_value):
    """the key a builtin receives as its property-name argument"""
    if isinstance(w_value, (str, W_Symbol)):
        return w_value
    if isinstance(w_value, bool):
        if w_value:
            return 'true'
        return 'false'
    if isinstance(w_value, int):
        return str(w_value)
    if w_value is w_Undefined:
        return 'undefined'
    if w_value is w_Null:
        return 'null'
    raise JsTypeError('cannot use %r as a property key' % (w_value,))
