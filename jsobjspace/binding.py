# encoding: utf-8
"""
Call sites and the rules choosing the receiver ('this') of a call.

How a function is invoked is described by a call-site object rather than
by interpreter state:

    f(...)                 BareCall(args)
    obj.f(...)             MethodCall(obj, args)
    new f(...)             ConstructCall(args)
    f.call(obj, ...)       ExplicitCall(obj, args)

The receiver depends on the call site and on the function alone; a function
value does not remember the object it was read from.
"""

import py

from jsobjspace.error import NotCallable
from jsobjspace.jsobj import W_Object, isnull_or_undefined, w_Undefined

log = py.log.Producer("jsobjspace")


class CallSite(object):
    def __init__(self, args=()):
        self.args = list(args)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.args)

class BareCall(CallSite):
    pass

class MethodCall(CallSite):
    "only the last object of a member chain is the receiver: a.b.f() -> a.b"
    def __init__(self, w_receiver, args=()):
        CallSite.__init__(self, args)
        self.w_receiver = w_receiver

    def __repr__(self):
        return "MethodCall(%r, %r)" % (self.w_receiver, self.args)

class ConstructCall(CallSite):
    pass

class ExplicitCall(CallSite):
    "this is for f.call(thisArg, ...) and f.apply(thisArg, [...])"
    def __init__(self, w_this, args=()):
        CallSite.__init__(self, args)
        self.w_this = w_this

    def __repr__(self):
        return "ExplicitCall(%r, %r)" % (self.w_this, self.args)


class CallSiteBinder(object):
    def __init__(self, space):
        self.space = space

    def check_callable(self, w_func):
        if not (isinstance(w_func, W_Object) and w_func.is_callable()):
            raise NotCallable(w_func)

    def resolve_receiver(self, w_func, callsite):
        """Picks the receiver, highest precedence first: arrow functions
        ignore every rule, then new, hard binding, explicit, implicit and
        finally default binding.  A ConstructCall allocates the new object."""
        self.check_callable(w_func)
        w_target = w_func.get_target()
        if w_target.is_arrow():
            if isinstance(callsite, ConstructCall):
                raise NotCallable(w_func, "a constructor")
            return w_target.lexical_this
        if isinstance(callsite, ConstructCall):
            if not w_func.is_constructor():
                raise NotCallable(w_func, "a constructor")
            return self.allocate(w_target)
        if w_func.is_bound():
            return self.default_this(self.innermost_bound(w_func).bound_this)
        if isinstance(callsite, ExplicitCall):
            return self.default_this(callsite.w_this)
        if isinstance(callsite, MethodCall):
            return callsite.w_receiver
        assert isinstance(callsite, BareCall)
        return self.default_this(w_Undefined)

    def innermost_bound(self, w_func):
        # binding a bound function again cannot change its receiver
        while w_func.target.is_bound():
            w_func = w_func.target
        return w_func

    def default_this(self, w_this):
        if isnull_or_undefined(w_this):
            if self.space.config.objspace.default_this == 'global':
                return self.space.w_Global
        return w_this

    def allocate(self, w_target):
        w_proto = self.space.Get(w_target, 'prototype')
        if not isinstance(w_proto, W_Object):
            w_proto = self.space.w_ObjectPrototype
        w_obj = self.space.graph.create(w_proto)
        log.construct("new %r -> %r" % (w_target, w_obj))
        return w_obj

    def invoke(self, w_func, callsite):
        w_this = self.resolve_receiver(w_func, callsite)
        args = list(callsite.args)
        w_target = w_func
        while w_target.is_bound():
            args = list(w_target.bound_args) + args
            w_target = w_target.target
        w_result = w_target.body(self.space, args, w_this)
        if w_result is None:
            w_result = w_Undefined
        if isinstance(callsite, ConstructCall):
            # unless the body returns an object, new returns the new object
            if isinstance(w_result, W_Object):
                return w_result
            return w_this
        return w_result

    def bind(self, w_func, w_this=w_Undefined, args=()):
        self.check_callable(w_func)
        w_bound = self.space.graph.create_function(
            self.space.w_FunctionPrototype, name='bound ' + w_func.name,
            kind='bound', target=w_func, bound_this=w_this, bound_args=args)
        log.bind("%r to %r" % (w_func, w_this))
        return w_bound
