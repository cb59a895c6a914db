from jsobjspace.config.config import OptionDescription, BoolOption, \
     ChoiceOption, Config


jsoption_description = OptionDescription("js", "JavaScript object space options", [
    OptionDescription("objspace", "Object space semantics", [
        BoolOption("strict",
                   "raise TypeConflict for writes the object model rejects "
                   "instead of ignoring them",
                   default=False,
                   requires=[("objspace.default_this", "undefined")]),

        ChoiceOption("default_this",
                     "receiver of a call with no binding rule: 'undefined' "
                     "(conformance) or the global object (sloppy mode)",
                     ["undefined", "global"], "undefined"),

        BoolOption("trace",
                   "print object space events (defines, seals, rejected "
                   "writes, bindings) on stderr",
                   default=False),
    ]),
])


def get_js_config(**overrides):
    return Config(jsoption_description, **overrides)
