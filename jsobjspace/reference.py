# encoding: utf-8

from jsobjspace.error import UnresolvedReference


class Reference(object):
    """Reference Type: a base object and a property name.

    A reference without a base comes from an identifier that no scope
    defines; reading it fails, unlike reading a missing property.  An
    environment reference names a variable, so calling through it is a
    plain call whatever object holds the variable."""
    def __init__(self, space, property_name, base=None, environment=False):
        self.space = space
        self.base = base
        self.property_name = property_name
        self.environment = environment

    def GetValue(self):
        if self.base is None:
            raise UnresolvedReference(self.property_name)
        return self.space.Get(self.base, self.property_name)

    def PutValue(self, w_value):
        base = self.base
        if base is None:
            if self.space.config.objspace.strict:
                raise UnresolvedReference(self.property_name)
            base = self.space.w_Global
        self.space.Put(base, self.property_name, w_value)
        return w_value

    def GetBase(self):
        return self.base

    def GetPropertyName(self):
        return self.property_name

    def is_resolvable(self):
        return self.base is not None

    def __repr__(self):
        return "<%r -> %r>" % (self.base, self.property_name)
