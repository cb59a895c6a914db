import py
import pytest


def pytest_addoption(parser):
    group = parser.getgroup("jsobjspace options")
    group.addoption('--jstrace', action="store_true",
           default=False, dest="jstrace",
           help="print object space events while running the tests")

def pytest_report_header(config):
    if config.getoption('jstrace', default=False):
        from jsobjspace.config.jsoption import get_js_config
        return str(get_js_config(**{'objspace.trace': True})).splitlines()

@pytest.fixture(scope='class')
def spaceconfig(request):
    return getattr(request.cls, 'spaceconfig', {})

@pytest.fixture(scope='function')
def space(request, spaceconfig):
    from jsobjspace.config.jsoption import get_js_config
    from jsobjspace.objspace import ObjSpace
    overrides = dict(spaceconfig)
    if request.config.getoption('jstrace', default=False):
        overrides['objspace.trace'] = True
    space = ObjSpace(get_js_config(**overrides))
    yield space
    py.log.setconsumer("jsobjspace", None)
