# encoding: utf-8
"""
[[Get]], [[Put]], [[HasProperty]] and [[Delete]] over the object graph.

A missing property is never an error here: Get answers w_Undefined.  Only
identifier resolution (see reference.py) fails for a missing name.
"""

import py

from jsobjspace.error import TypeConflict
from jsobjspace.jsobj import W_Object, check_key, default_property, \
     w_Undefined

log = py.log.Producer("jsobjspace")


class Lookup(object):
    def __init__(self, space):
        self.space = space

    def find_property(self, w_obj, P):
        """returns (holder, property) for the first object of the chain
        having P as an own property, or (None, None)"""
        check_key(P)
        for w_holder in self.space.graph.chain(w_obj):
            prop = w_holder.get_own(P)
            if prop is not None:
                return w_holder, prop
        return None, None

    def Get(self, w_obj, P):
        assert isinstance(w_obj, W_Object)
        w_holder, prop = self.find_property(w_obj, P)
        if prop is None:
            return w_Undefined
        if prop.is_data():
            return prop.value
        if prop.getter is w_Undefined:
            return w_Undefined
        # the receiver is the object the access started from, not the holder
        return self.space.call_with_this(prop.getter, w_obj)

    def Put(self, w_obj, P, w_value):
        """Returns False when the write was rejected.  Rejected writes are
        ignored unless the space is strict."""
        assert isinstance(w_obj, W_Object)
        w_holder, prop = self.find_property(w_obj, P)
        if prop is not None:
            if prop.is_accessor():
                if prop.setter is w_Undefined:
                    return self.reject(w_obj, P, 'it has a getter but no setter')
                self.space.call_with_this(prop.setter, w_obj, [w_value])
                return True
            if not prop.writable:
                return self.reject(w_obj, P, 'it is read-only')
            if w_holder is w_obj:
                prop.value = w_value
                return True
        if not w_obj.extensible:
            return self.reject(w_obj, P, 'the object is not extensible')
        # new own property, possibly shadowing an inherited one
        w_obj.set_own(P, default_property(w_value))
        return True

    def CanPut(self, w_obj, P):
        w_holder, prop = self.find_property(w_obj, P)
        if prop is None:
            return w_obj.extensible
        if prop.is_accessor():
            return prop.setter is not w_Undefined
        if not prop.writable:
            return False
        return w_holder is w_obj or w_obj.extensible

    def HasProperty(self, w_obj, P):
        w_holder, prop = self.find_property(w_obj, P)
        return prop is not None

    def Delete(self, w_obj, P):
        prop = w_obj.get_own(check_key(P))
        if prop is None:
            return True
        if not prop.configurable:
            return self.reject(w_obj, P, 'it is not configurable',
                               action='delete')
        w_obj.del_own(P)
        return True

    def reject(self, w_obj, P, reason, action='write'):
        message = "cannot %s property %r of %r: %s" % (action, P, w_obj, reason)
        log.reject(message)
        if self.space.config.objspace.strict:
            raise TypeConflict(message)
        return False
