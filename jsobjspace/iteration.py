# encoding: utf-8
"""
for...in walks the enumerable string keys of an object and its prototypes;
for...of drives the object's own @@iterator protocol instead.
"""

from jsobjspace.binding import MethodCall
from jsobjspace.error import NotIterable
from jsobjspace.jsobj import W_Object, W_Function, ToBoolean


class IterationEngine(object):
    def __init__(self, space):
        self.space = space

    def enumerable_keys_in_chain(self, w_obj):
        visited = set()
        for w_holder in self.space.graph.chain(w_obj):
            for key in w_holder.string_keys(include_nonenumerable=True):
                if key in visited:
                    continue
                # a non-enumerable key still hides the inherited ones
                visited.add(key)
                if w_holder.is_enumerable_own(key):
                    yield key

    def get_iterator_method(self, w_obj):
        w_method = self.space.Get(w_obj, self.space.w_symbol_iterator)
        if isinstance(w_method, W_Function):
            return w_method
        return None

    def is_iterable(self, w_obj):
        return (isinstance(w_obj, W_Object) and
                self.get_iterator_method(w_obj) is not None)

    def custom_iterator(self, w_obj):
        """Calls obj[Symbol.iterator]() and returns the iterator object"""
        if not isinstance(w_obj, W_Object):
            raise NotIterable(w_obj)
        w_method = self.get_iterator_method(w_obj)
        if w_method is None:
            raise NotIterable(w_obj)
        w_iterator = self.space.binder.invoke(w_method, MethodCall(w_obj))
        if not isinstance(w_iterator, W_Object):
            raise NotIterable(w_obj)
        return w_iterator

    def iterator_step(self, w_iterator):
        w_result = self.space.call_method(w_iterator, 'next')
        if not isinstance(w_result, W_Object):
            raise NotIterable(w_iterator)
        return w_result

    def iterate(self, w_obj):
        w_iterator = self.custom_iterator(w_obj)
        while True:
            w_result = self.iterator_step(w_iterator)
            if ToBoolean(self.space.Get(w_result, 'done')):
                return
            yield self.space.Get(w_result, 'value')
