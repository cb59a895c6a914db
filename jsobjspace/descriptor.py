# encoding: utf-8
"""
defineProperty and the extensible -> sealed -> frozen lattice.
"""

import py

from jsobjspace.error import JsTypeError, TypeConflict
from jsobjspace.jsobj import W_Object, DataProperty, AccessorProperty, \
     DescriptorPatch, check_key, same_value, to_patch

log = py.log.Producer("jsobjspace")

# patch field --> property attribute
FIELD_TO_ATTR = [
    ('value', 'value'),
    ('writable', 'writable'),
    ('get', 'getter'),
    ('set', 'setter'),
    ('enumerable', 'enumerable'),
    ('configurable', 'configurable'),
]


def check_object(w_obj):
    if not isinstance(w_obj, W_Object):
        raise JsTypeError('%r is not an object' % (w_obj,))


class DescriptorMutator(object):
    def __init__(self, space):
        self.space = space

    def define_property(self, w_obj, P, descriptor):
        check_object(w_obj)
        check_key(P)
        patch = self.make_patch(descriptor)
        current = w_obj.get_own(P)
        if current is None:
            if not w_obj.extensible:
                self.space.lookup.reject(w_obj, P,
                                         'the object is not extensible',
                                         action='define')
                return w_obj
            w_obj.set_own(P, patch.to_property())
        else:
            self.validate(w_obj, P, current, patch)
            w_obj.set_own(P, self.apply(current, patch))
        log.define("%r.%r <- %r" % (w_obj, P, patch))
        return w_obj

    def define_properties(self, w_obj, descriptors):
        check_object(w_obj)
        patches = [(check_key(P), self.make_patch(descriptor))
                   for P, descriptor in descriptors.items()]
        for P, patch in patches:
            self.define_property(w_obj, P, patch)
        return w_obj

    def make_patch(self, descriptor):
        """Accepts a DescriptorPatch, a dict, or a descriptor object whose
        own or inherited fields are read as by ToPropertyDescriptor"""
        if isinstance(descriptor, W_Object):
            fields = {}
            for name in DescriptorPatch.FIELDS:
                if self.space.HasProperty(descriptor, name):
                    fields[name] = self.space.Get(descriptor, name)
            return DescriptorPatch.from_dict(fields)
        return to_patch(descriptor)

    def validate(self, w_obj, P, current, patch):
        """Raises TypeConflict if a non-configurable property forbids
        the change described by patch"""
        if current.configurable:
            return
        def fail(reason):
            raise TypeConflict("Cannot redefine property %r of %r: %s" %
                               (P, w_obj, reason))
        if patch.configurable is True:
            fail("it cannot be made configurable again")
        if patch.has('enumerable') and patch.enumerable != current.enumerable:
            fail("its enumerable attribute is fixed")
        if patch.is_generic():
            return
        if patch.is_data() != current.is_data():
            fail("it cannot change between data and accessor")
        if current.is_data():
            if current.writable:
                return
            if patch.writable is True:
                fail("it cannot be made writable again")
            if patch.has('value') and not same_value(patch.value,
                                                     current.value):
                fail("its value is read-only")
        else:
            if patch.has('get') and patch.get is not current.getter:
                fail("its getter is fixed")
            if patch.has('set') and patch.set is not current.setter:
                fail("its setter is fixed")

    def apply(self, current, patch):
        if patch.is_generic() or patch.is_data() == current.is_data():
            prop = current.copy()
        elif patch.is_data():
            prop = DataProperty(enumerable=current.enumerable,
                                configurable=current.configurable)
        else:
            prop = AccessorProperty(enumerable=current.enumerable,
                                    configurable=current.configurable)
        for field, attr in FIELD_TO_ATTR:
            if patch.has(field):
                setattr(prop, attr, getattr(patch, field))
        return prop

    # ____________________________________________________________

    def prevent_extensions(self, w_obj):
        check_object(w_obj)
        if w_obj.extensible:
            log.extensions("%r made non-extensible" % (w_obj,))
        w_obj.extensible = False
        return w_obj

    def seal(self, w_obj):
        self.prevent_extensions(w_obj)
        for prop in w_obj.propdict.values():
            prop.configurable = False
        log.seal("%r" % (w_obj,))
        return w_obj

    def freeze(self, w_obj):
        self.seal(w_obj)
        for prop in w_obj.propdict.values():
            if prop.is_data():
                prop.writable = False
        log.freeze("%r" % (w_obj,))
        return w_obj

    def is_extensible(self, w_obj):
        check_object(w_obj)
        return w_obj.extensible

    def is_sealed(self, w_obj):
        check_object(w_obj)
        if w_obj.extensible:
            return False
        for prop in w_obj.propdict.values():
            if prop.configurable:
                return False
        return True

    def is_frozen(self, w_obj):
        if not self.is_sealed(w_obj):
            return False
        for prop in w_obj.propdict.values():
            if prop.is_data() and prop.writable:
                return False
        return True
