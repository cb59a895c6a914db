"""
A color print for the object space log.

Messages come from py.log producers; their keywords pick the color, e.g.
[jsobjspace:reject] in red, [jsobjspace:freeze] in bold blue.
"""

import py


class AnsiLog:
    KW_TO_COLOR = {
        # color supress
        'red': ((31,), True),
        'bold': ((1,), True),
        'WARNING': ((31,), False),
        'ERROR': ((1, 31), False),
        'reject': ((31,), False),
        'define': ((35,), False),
        'extensions': ((34,), False),
        'seal': ((34,), False),
        'freeze': ((1, 34), False),
        'construct': ((32,), False),
        'bind': ((32,), False),
    }

    def __init__(self, kw_to_color={}, file=None):
        self.kw_to_color = self.KW_TO_COLOR.copy()
        self.kw_to_color.update(kw_to_color)
        self.file = file

    def colorize(self, keywords):
        """returns (escape codes, keywords left to display)"""
        esc = []
        shown = []
        for kw in keywords:
            color, supress = self.kw_to_color.get(kw, (None, False))
            if color:
                esc.extend(color)
            if not supress:
                shown.append(kw)
        return tuple(esc), shown

    def __call__(self, msg):
        esc, shown = self.colorize(msg.keywords)
        prefix = "[%s]" % (":".join(shown),)
        for line in msg.content().splitlines():
            py.io.ansi_print("%s %s" % (prefix, line), esc, file=self.file)

ansi_log = AnsiLog()
