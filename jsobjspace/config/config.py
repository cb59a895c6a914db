"""
Option trees for the object space.

An OptionDescription declares a tree of options; a Config holds one value
per option and remembers who set it: 'default', 'user', or 'required' when
another option's value forced it.  A frozen Config refuses every change.
"""


class Config(object):
    _frozen = False

    def __init__(self, descr, parent=None, **overrides):
        self._descr = descr
        self._parent = parent
        self._values = {}
        self._value_owners = {}
        for child in descr._children:
            if isinstance(child, OptionDescription):
                self._values[child._name] = Config(child, parent=self)
            else:
                self._values[child._name] = child.default
                self._value_owners[child._name] = 'default'
        for path, value in overrides.items():
            subconfig, name = self._get_by_path(path)
            setattr(subconfig, name, value)

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError('unknown option %s' % (name,))

    def __setattr__(self, name, value):
        if name.startswith('_'):
            self.__dict__[name] = value
            return
        if self._get_toplevel()._frozen:
            raise TypeError("trying to change a frozen option object")
        self.setoption(name, value, 'user')

    def setoption(self, name, value, who):
        option = self._get_option(name)
        if self._value_owners[name] == 'required':
            if self._values[name] != value:
                raise ValueError('can not override value %s for option %s' %
                                 (value, name))
            return
        if not option.validate(value):
            raise ValueError('invalid value %s for option %s' % (value, name))
        for path, reqvalue in option.requirements(value):
            subconfig, reqname = self._get_toplevel()._get_by_path(path)
            subconfig.require(reqname, reqvalue)
        self._values[name] = value
        self._value_owners[name] = who

    def require(self, name, value):
        self.setoption(name, value, 'required')

    def _get_option(self, name):
        child = self._descr.getchild(name)
        if child is None:
            raise ValueError('unknown option %s' % (name,))
        if isinstance(child, OptionDescription):
            raise ValueError('%s is an option group, not an option' % (name,))
        return child

    def _get_by_path(self, path):
        """returns tuple (config, name)"""
        steps = path.split('.')
        config = self
        for step in steps[:-1]:
            config = getattr(config, step)
        return config, steps[-1]

    def _get_toplevel(self):
        config = self
        while config._parent is not None:
            config = config._parent
        return config

    def _freeze_(self):
        self._get_toplevel().__dict__['_frozen'] = True
        return True

    def __str__(self):
        lines = ["[%s]" % (self._descr._name,)]
        for child in self._descr._children:
            value = self._values[child._name]
            if isinstance(value, Config):
                lines.extend(["    " + line
                              for line in str(value).splitlines()])
            elif self._value_owners[child._name] != 'default':
                lines.append("    %s = %s" % (child._name, value))
        return "\n".join(lines) + "\n"


class Option(object):
    def __init__(self, name, doc, default=None, requires=None):
        self._name = name
        self.doc = doc
        self.default = default
        # value --> [(path, required value)]
        self._requires = requires or {}

    def validate(self, value):
        raise NotImplementedError('abstract base class')

    def requirements(self, value):
        return self._requires.get(value, [])

class ChoiceOption(Option):
    def __init__(self, name, doc, values, default, requires=None):
        Option.__init__(self, name, doc, default, requires)
        self.values = values

    def validate(self, value):
        return value in self.values

class BoolOption(Option):
    def __init__(self, name, doc, default=True, requires=None):
        if requires is not None:
            requires = {True: requires}
        Option.__init__(self, name, doc, default, requires)

    def validate(self, value):
        return isinstance(value, bool)

class OptionDescription(object):
    def __init__(self, name, doc, children):
        self._name = name
        self.doc = doc
        self._children = children

    def getchild(self, name):
        for child in self._children:
            if child._name == name:
                return child
        return None
