# some exception classes for the JavaScript object space

class JsBaseExcept(Exception):
    """Base class for the object space exception hierarchy"""

class JsTypeError(JsBaseExcept):
    pass

class TypeConflict(JsTypeError):
    """A property descriptor change that its configurable/writable
    attributes forbid, or a write rejected in strict mode."""

class NotCallable(JsTypeError):
    def __str__(self):
        if len(self.args) > 1:
            return "%r is not %s" % (self.args[0], self.args[1])
        return "%r is not a function" % (self.args[0], )

class NotIterable(JsTypeError):
    def __str__(self):
        return "%r is not iterable" % (self.args[0], )

class UnresolvedReference(JsBaseExcept):
    def __str__(self):
        return "ReferenceError: %s is not defined" % (self.args[0], )
