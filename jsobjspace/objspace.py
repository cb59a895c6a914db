# encoding: utf-8
"""
The object space: one object graph, the engines working on it, and the
intrinsic objects every program starts with.
"""

import math

import py

from jsobjspace.binding import CallSiteBinder, BareCall, MethodCall, \
     ConstructCall, ExplicitCall
from jsobjspace.config.jsoption import get_js_config
from jsobjspace.descriptor import DescriptorMutator, check_object
from jsobjspace.error import JsTypeError
from jsobjspace.iteration import IterationEngine
from jsobjspace.jsobj import W_Object, W_Function, W_Symbol, DataProperty, \
     AccessorProperty, absent, default_property, isnull_or_undefined, \
     to_property_key, w_Null, w_Undefined
from jsobjspace.lookup import Lookup
from jsobjspace.objgraph import ObjectGraph
from jsobjspace.reference import Reference
from jsobjspace.scope import Scope
from jsobjspace.tool.ansi_print import ansi_log

py.log.setconsumer("jsobjspace", None)


def get_arg(args, index):
    if index < len(args):
        return args[index]
    return w_Undefined

def this_object(w_this):
    if not isinstance(w_this, W_Object):
        raise JsTypeError('%r is not an object' % (w_this,))
    return w_this

def to_length(w_value):
    if isinstance(w_value, bool):
        return int(w_value)
    if isinstance(w_value, int):
        return max(w_value, 0)
    if isinstance(w_value, float) and math.isfinite(w_value):
        return max(int(w_value), 0)
    return 0


class ObjSpace(object):
    """Creates an object space"""

    def __init__(self, config=None):
        if config is None:
            config = get_js_config()
        config._freeze_()
        self.config = config
        if config.objspace.trace:
            py.log.setconsumer("jsobjspace", ansi_log)
        else:
            py.log.setconsumer("jsobjspace", None)
        self.graph = ObjectGraph(self)
        self.lookup = Lookup(self)
        self.mutator = DescriptorMutator(self)
        self.binder = CallSiteBinder(self)
        self.iteration = IterationEngine(self)
        self.w_symbol_iterator = W_Symbol('Symbol.iterator')
        self.setup_builtins()

    def put_values(self, w_obj, dictvalues):
        """installs builtin members: writable, configurable, not enumerable"""
        for key, w_value in dictvalues.items():
            w_obj.set_own(key, DataProperty(w_value, writable=True,
                                            configurable=True))

    def put_constant(self, w_obj, key, w_value):
        w_obj.set_own(key, DataProperty(w_value))

    def setup_builtins(self):
        graph = self.graph
        w_ObjPrototype = graph.create(None)
        self.w_ObjectPrototype = w_ObjPrototype

        # Function.prototype is itself callable and answers undefined
        w_FncPrototype = graph.create_function(
            w_ObjPrototype, body=empty_function, kind='builtin')
        self.w_FunctionPrototype = w_FncPrototype
        self.w_ArrayPrototype = graph.create(w_ObjPrototype, Class='Array')
        self.w_Global = w_Global = graph.create(w_ObjPrototype,
                                                Class='global')

        w_Object = self.newbuiltin(object_constructor, 'Object',
                                   constructor=True)
        w_Function = self.newbuiltin(function_constructor, 'Function',
                                     constructor=True)
        w_Array = self.newbuiltin(array_constructor, 'Array',
                                  constructor=True)
        w_Symbol = self.newbuiltin(symbol_function, 'Symbol')
        for w_ctor, w_proto in [(w_Object, w_ObjPrototype),
                                (w_Function, w_FncPrototype),
                                (w_Array, self.w_ArrayPrototype)]:
            self.put_constant(w_ctor, 'prototype', w_proto)
            self.put_values(w_proto, {'constructor': w_ctor})
        self.put_constant(w_Symbol, 'iterator', self.w_symbol_iterator)

        put_values = self.put_values
        newbuiltin = self.newbuiltin

        put_values(w_ObjPrototype, {
            'toString': newbuiltin(object_tostring, 'toString'),
            'valueOf': newbuiltin(object_valueof, 'valueOf'),
            'hasOwnProperty': newbuiltin(has_own_property, 'hasOwnProperty'),
            'isPrototypeOf': newbuiltin(is_prototype_of, 'isPrototypeOf'),
            'propertyIsEnumerable': newbuiltin(property_is_enumerable,
                                               'propertyIsEnumerable'),
        })

        put_values(w_FncPrototype, {
            'toString': newbuiltin(function_tostring, 'toString'),
            'call': newbuiltin(function_call, 'call'),
            'apply': newbuiltin(function_apply, 'apply'),
            'bind': newbuiltin(function_bind, 'bind'),
        })

        w_values = newbuiltin(array_values, 'values')
        put_values(self.w_ArrayPrototype, {
            'values': w_values,
            self.w_symbol_iterator: w_values,
        })

        put_values(w_Object, {
            'keys': newbuiltin(object_keys, 'keys'),
            'getOwnPropertyNames': newbuiltin(object_get_own_property_names,
                                              'getOwnPropertyNames'),
            'getOwnPropertyDescriptor': newbuiltin(
                object_get_own_property_descriptor,
                'getOwnPropertyDescriptor'),
            'create': newbuiltin(object_create, 'create'),
            'getPrototypeOf': newbuiltin(object_get_prototype_of,
                                         'getPrototypeOf'),
            'defineProperty': newbuiltin(object_define_property,
                                         'defineProperty'),
            'defineProperties': newbuiltin(object_define_properties,
                                           'defineProperties'),
            'preventExtensions': newbuiltin(object_prevent_extensions,
                                            'preventExtensions'),
            'seal': newbuiltin(object_seal, 'seal'),
            'freeze': newbuiltin(object_freeze, 'freeze'),
            'isExtensible': newbuiltin(object_is_extensible, 'isExtensible'),
            'isSealed': newbuiltin(object_is_sealed, 'isSealed'),
            'isFrozen': newbuiltin(object_is_frozen, 'isFrozen'),
        })

        put_values(w_Global, {
            'Object': w_Object,
            'Function': w_Function,
            'Array': w_Array,
            'Symbol': w_Symbol,
            'globalThis': w_Global,
        })
        self.put_constant(w_Global, 'undefined', w_Undefined)
        self.w_Object = w_Object
        self.w_Function = w_Function
        self.w_Array = w_Array

    # ____________________________________________________________
    # allocation

    def _name_function(self, w_func, name):
        w_func.set_own('name', DataProperty(name, configurable=True))

    def newbuiltin(self, body, name, constructor=False):
        if constructor:
            kind = 'normal'
        else:
            kind = 'builtin'
        w_func = self.graph.create_function(self.w_FunctionPrototype,
                                            body=body, name=name, kind=kind)
        self._name_function(w_func, name)
        return w_func

    def newobject(self, props=None, accessors=None, proto=absent):
        """An object literal.  props maps keys to values; accessors maps
        keys to {'get': ..., 'set': ...} dicts."""
        if proto is absent:
            proto = self.w_ObjectPrototype
        w_obj = self.graph.create(proto)
        if props:
            for key, w_value in props.items():
                w_obj.set_own(key, default_property(w_value))
        if accessors:
            for key, pair in accessors.items():
                w_obj.set_own(key, AccessorProperty(
                    pair.get('get', w_Undefined), pair.get('set', w_Undefined),
                    enumerable=True, configurable=True))
        return w_obj

    def newfunction(self, body, name='', arrow=False, lexical_this=w_Undefined):
        if arrow:
            return self.graph.create_function(
                self.w_FunctionPrototype, body=body, name=name, kind='arrow',
                lexical_this=lexical_this)
        w_func = self.graph.create_function(self.w_FunctionPrototype,
                                            body=body, name=name)
        w_proto = self.newobject()
        self.put_values(w_proto, {'constructor': w_func})
        w_func.set_own('prototype', DataProperty(w_proto, writable=True))
        self._name_function(w_func, name)
        return w_func

    def newarray(self, items=()):
        w_array = self.graph.create(self.w_ArrayPrototype, Class='Array')
        items = list(items)
        for index, w_item in enumerate(items):
            w_array.set_own(str(index), default_property(w_item))
        w_array.set_own('length', DataProperty(len(items), writable=True))
        return w_array

    def newsymbol(self, description=''):
        return W_Symbol(description)

    def listview(self, w_arraylike):
        """the items of an array-like object, as a python list"""
        length = to_length(self.Get(w_arraylike, 'length'))
        return [self.Get(w_arraylike, str(i)) for i in range(length)]

    # ____________________________________________________________
    # property access

    def Get(self, w_obj, P):
        return self.lookup.Get(w_obj, P)

    def Put(self, w_obj, P, w_value):
        return self.lookup.Put(w_obj, P, w_value)

    def HasProperty(self, w_obj, P):
        return self.lookup.HasProperty(w_obj, P)

    def Delete(self, w_obj, P):
        return self.lookup.Delete(w_obj, P)

    def member(self, w_obj, P):
        return Reference(self, P, w_obj)

    # ____________________________________________________________
    # descriptors

    def define_property(self, w_obj, P, descriptor):
        return self.mutator.define_property(w_obj, P, descriptor)

    def define_properties(self, w_obj, descriptors):
        return self.mutator.define_properties(w_obj, descriptors)

    def prevent_extensions(self, w_obj):
        return self.mutator.prevent_extensions(w_obj)

    def seal(self, w_obj):
        return self.mutator.seal(w_obj)

    def freeze(self, w_obj):
        return self.mutator.freeze(w_obj)

    def is_extensible(self, w_obj):
        return self.mutator.is_extensible(w_obj)

    def is_sealed(self, w_obj):
        return self.mutator.is_sealed(w_obj)

    def is_frozen(self, w_obj):
        return self.mutator.is_frozen(w_obj)

    def get_own_property_descriptor(self, w_obj, P):
        """Object.getOwnPropertyDescriptor: a fresh descriptor object, or
        w_Undefined for a missing key"""
        check_object(w_obj)
        prop = w_obj.get_own(P)
        if prop is None:
            return w_Undefined
        if prop.is_data():
            fields = {'value': prop.value, 'writable': prop.writable}
        else:
            fields = {'get': prop.getter, 'set': prop.setter}
        fields['enumerable'] = prop.enumerable
        fields['configurable'] = prop.configurable
        return self.newobject(fields)

    # ____________________________________________________________
    # the graph

    def create(self, w_proto, properties=None):
        """Object.create"""
        w_obj = self.graph.create(w_proto)
        if properties is not None:
            self.define_properties(w_obj, properties)
        return w_obj

    def prototype_of(self, w_obj):
        return self.graph.prototype_of(w_obj)

    def is_prototype_of(self, w_candidate, w_obj):
        return self.graph.is_prototype_of(w_candidate, w_obj)

    def keys(self, w_obj):
        check_object(w_obj)
        return w_obj.string_keys()

    def get_own_property_names(self, w_obj):
        check_object(w_obj)
        return w_obj.string_keys(include_nonenumerable=True)

    # ____________________________________________________________
    # calls

    def resolve_receiver(self, w_func, callsite):
        return self.binder.resolve_receiver(w_func, callsite)

    def call_function(self, w_func, *args):
        return self.binder.invoke(w_func, BareCall(args))

    def call_method(self, w_obj, name, *args):
        w_method = self.Get(w_obj, name)
        return self.binder.invoke(w_method, MethodCall(w_obj, args))

    def construct(self, w_func, *args):
        return self.binder.invoke(w_func, ConstructCall(args))

    def call_with_this(self, w_func, w_this, args=()):
        return self.binder.invoke(w_func, ExplicitCall(w_this, args))

    def global_scope(self):
        """the outermost scope, whose variables live on the global object"""
        return Scope(self)

    def call_reference(self, ref, *args):
        """the call expression ref(args): the receiver is the base object
        of a property reference, and nothing for a variable"""
        w_func = ref.GetValue()
        if ref.environment:
            callsite = BareCall(args)
        else:
            callsite = MethodCall(ref.GetBase(), args)
        return self.binder.invoke(w_func, callsite)

    def bind(self, w_func, w_this=w_Undefined, args=()):
        return self.binder.bind(w_func, w_this, args)

    # ____________________________________________________________
    # iteration

    def enumerable_keys_in_chain(self, w_obj):
        return self.iteration.enumerable_keys_in_chain(w_obj)

    def custom_iterator(self, w_obj):
        return self.iteration.custom_iterator(w_obj)

    def iterator_step(self, w_iterator):
        return self.iteration.iterator_step(w_iterator)

    def iterate(self, w_obj):
        return self.iteration.iterate(w_obj)

    def is_iterable(self, w_obj):
        return self.iteration.is_iterable(w_obj)

# ____________________________________________________________
# builtin function bodies: body(space, args, this)

def empty_function(space, args, this):
    return w_Undefined

def object_constructor(space, args, this):
    w_value = get_arg(args, 0)
    if isinstance(w_value, W_Object):
        return w_value
    return space.newobject()

def function_constructor(space, args, this):
    raise JsTypeError('Function() needs a parser: there is no source '
                      'code in an object space')

def array_constructor(space, args, this):
    return space.newarray(args)

def symbol_function(space, args, this):
    w_description = get_arg(args, 0)
    if w_description is w_Undefined:
        return space.newsymbol()
    return space.newsymbol(to_property_key(w_description))

def object_tostring(space, args, this):
    if this is w_Undefined:
        return "[object Undefined]"
    if this is w_Null:
        return "[object Null]"
    if isinstance(this, W_Object):
        return "[object %s]" % (this.Class,)
    return "[object %s]" % (type(this).__name__,)

def object_valueof(space, args, this):
    return this

def has_own_property(space, args, this):
    P = to_property_key(get_arg(args, 0))
    return this_object(this).has_own(P)

def property_is_enumerable(space, args, this):
    P = to_property_key(get_arg(args, 0))
    return this_object(this).is_enumerable_own(P)

def is_prototype_of(space, args, this):
    w_value = get_arg(args, 0)
    if not isinstance(w_value, W_Object):
        return False
    return space.is_prototype_of(this_object(this), w_value)

def function_tostring(space, args, this):
    if not isinstance(this, W_Function):
        raise JsTypeError('this is not a function object')
    return "function %s() { [native code] }" % (this.name,)

def function_call(space, args, this):
    space.binder.check_callable(this)
    return space.call_with_this(this, get_arg(args, 0), args[1:])

def function_apply(space, args, this):
    space.binder.check_callable(this)
    w_arraylike = get_arg(args, 1)
    if isnull_or_undefined(w_arraylike):
        callargs = []
    elif isinstance(w_arraylike, W_Object):
        callargs = space.listview(w_arraylike)
    else:
        raise JsTypeError('%r is not an array-like object' % (w_arraylike,))
    return space.call_with_this(this, get_arg(args, 0), callargs)

def function_bind(space, args, this):
    return space.bind(this, get_arg(args, 0), args[1:])

def array_values(space, args, this):
    w_array = this_object(this)
    index = 0

    def iterator_next(space, args, this):
        nonlocal index
        if index is not None:
            if index < to_length(space.Get(w_array, 'length')):
                w_value = space.Get(w_array, str(index))
                index += 1
                return space.newobject({'value': w_value, 'done': False})
            # exhausted iterators stay exhausted
            index = None
        return space.newobject({'value': w_Undefined, 'done': True})

    w_iterator = space.newobject()
    space.put_values(w_iterator, {
        'next': space.newbuiltin(iterator_next, 'next'),
        space.w_symbol_iterator: space.newbuiltin(object_valueof,
                                                  '[Symbol.iterator]'),
    })
    return w_iterator

def object_keys(space, args, this):
    return space.newarray(space.keys(get_arg(args, 0)))

def object_get_own_property_names(space, args, this):
    return space.newarray(space.get_own_property_names(get_arg(args, 0)))

def object_get_own_property_descriptor(space, args, this):
    P = to_property_key(get_arg(args, 1))
    return space.get_own_property_descriptor(get_arg(args, 0), P)

def object_create(space, args, this):
    w_proto = get_arg(args, 0)
    if not (w_proto is w_Null or isinstance(w_proto, W_Object)):
        raise JsTypeError('Object prototype may only be an Object or null: '
                          '%r' % (w_proto,))
    w_obj = space.create(w_proto)
    w_properties = get_arg(args, 1)
    if w_properties is not w_Undefined:
        object_define_properties(space, [w_obj, w_properties], w_Undefined)
    return w_obj

def object_get_prototype_of(space, args, this):
    w_obj = get_arg(args, 0)
    check_object(w_obj)
    w_proto = space.prototype_of(w_obj)
    if w_proto is None:
        return w_Null
    return w_proto

def object_define_property(space, args, this):
    P = to_property_key(get_arg(args, 1))
    return space.define_property(get_arg(args, 0), P, get_arg(args, 2))

def object_define_properties(space, args, this):
    w_properties = get_arg(args, 1)
    check_object(w_properties)
    descriptors = {}
    for P in w_properties.own_property_keys():
        if w_properties.is_enumerable_own(P):
            descriptors[P] = space.Get(w_properties, P)
    return space.define_properties(get_arg(args, 0), descriptors)

def object_prevent_extensions(space, args, this):
    return space.prevent_extensions(get_arg(args, 0))

def object_seal(space, args, this):
    return space.seal(get_arg(args, 0))

def object_freeze(space, args, this):
    return space.freeze(get_arg(args, 0))

def object_is_extensible(space, args, this):
    return space.is_extensible(get_arg(args, 0))

def object_is_sealed(space, args, this):
    return space.is_sealed(get_arg(args, 0))

def object_is_frozen(space, args, this):
    return space.is_frozen(get_arg(args, 0))
