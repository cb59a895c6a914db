from jsobjspace.reference import Reference


class Scope(object):
    """A chain of variable objects.  The outermost scope is backed by the
    global object; inner scopes by fresh activation objects."""
    def __init__(self, space, parent=None):
        self.space = space
        self.parent = parent
        if parent is None:
            self.w_variables = space.w_Global
        else:
            self.w_variables = space.graph.create_activation()

    def enter_scope(self):
        return Scope(self.space, self)

    def declare(self, name, w_value):
        self.space.Put(self.w_variables, name, w_value)

    def resolve_identifier(self, identifier):
        scope = self
        while scope is not None:
            if self.space.HasProperty(scope.w_variables, identifier):
                return Reference(self.space, identifier, scope.w_variables,
                                 environment=True)
            scope = scope.parent
        return Reference(self.space, identifier, environment=True)

    def lookup(self, identifier):
        return self.resolve_identifier(identifier).GetValue()

    def assign(self, identifier, w_value):
        return self.resolve_identifier(identifier).PutValue(w_value)
