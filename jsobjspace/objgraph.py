"""
The arena holding every object record of one object space.

Records refer to their prototype by arena index.  A prototype has to be
allocated before any object inheriting from it, and the link is never
changed afterwards, so chains are finite and acyclic by construction.
"""

from jsobjspace.error import JsTypeError
from jsobjspace.jsobj import W_Object, W_Function, W_Activation, w_Null


class ObjectGraph(object):
    def __init__(self, space=None):
        self.space = space
        self.objects_w = []

    def __len__(self):
        return len(self.objects_w)

    def __contains__(self, w_obj):
        return (isinstance(w_obj, W_Object) and
                w_obj.uid < len(self.objects_w) and
                self.objects_w[w_obj.uid] is w_obj)

    def getobject(self, uid):
        return self.objects_w[uid]

    def _proto_uid(self, w_proto):
        if w_proto is None or w_proto is w_Null:
            return None
        if w_proto not in self:
            raise JsTypeError('Object prototype may only be an Object of '
                              'this space or null: %r' % (w_proto,))
        return w_proto.uid

    def _allocate(self, cls, *args, **kwds):
        w_obj = cls(len(self.objects_w), *args, **kwds)
        self.objects_w.append(w_obj)
        return w_obj

    def create(self, w_proto, Class='Object'):
        return self._allocate(W_Object, self._proto_uid(w_proto), Class=Class)

    def create_function(self, w_proto, body=None, name='', kind='normal',
                        **kwds):
        return self._allocate(W_Function, self._proto_uid(w_proto),
                              body=body, name=name, kind=kind, **kwds)

    def create_activation(self):
        return self._allocate(W_Activation)

    def prototype_of(self, w_obj):
        if w_obj.proto_uid is None:
            return None
        return self.objects_w[w_obj.proto_uid]

    def chain(self, w_obj):
        """yields w_obj, then its prototype, and so on up to the root"""
        while w_obj is not None:
            yield w_obj
            w_obj = self.prototype_of(w_obj)

    def is_prototype_of(self, w_candidate, w_obj):
        if not isinstance(w_obj, W_Object):
            return False
        V = self.prototype_of(w_obj)
        while V is not None:
            if V is w_candidate:
                return True
            V = self.prototype_of(V)
        return False
