import pytest

from jsobjspace.error import JsTypeError
from jsobjspace.jsobj import W_Object, w_Null
from jsobjspace.objgraph import ObjectGraph


def test_allocation():
    graph = ObjectGraph()
    w_root = graph.create(None)
    w_obj = graph.create(w_root)
    assert len(graph) == 2
    assert graph.getobject(1) is w_obj
    assert w_obj in graph
    assert graph.prototype_of(w_obj) is w_root
    assert graph.prototype_of(w_root) is None

def test_null_prototype():
    graph = ObjectGraph()
    w_obj = graph.create(w_Null)
    assert graph.prototype_of(w_obj) is None

def test_prototype_must_live_in_the_same_arena():
    graph1 = ObjectGraph()
    graph2 = ObjectGraph()
    w_foreign = graph1.create(None)
    graph2.create(None)
    with pytest.raises(JsTypeError):
        graph2.create(w_foreign)
    with pytest.raises(JsTypeError):
        graph2.create(W_Object(0))
    with pytest.raises(JsTypeError):
        graph2.create(42)

def test_chain():
    graph = ObjectGraph()
    w_a = graph.create(None)
    w_b = graph.create(w_a)
    w_c = graph.create(w_b)
    assert list(graph.chain(w_c)) == [w_c, w_b, w_a]
    assert list(graph.chain(w_a)) == [w_a]

def test_is_prototype_of():
    graph = ObjectGraph()
    w_a = graph.create(None)
    w_b = graph.create(w_a)
    w_c = graph.create(w_b)
    assert graph.is_prototype_of(w_a, w_c)
    assert graph.is_prototype_of(w_b, w_c)
    assert not graph.is_prototype_of(w_c, w_c)
    assert not graph.is_prototype_of(w_c, w_a)
    assert not graph.is_prototype_of(w_a, 'not an object')

def test_specialised_allocators():
    graph = ObjectGraph()
    w_root = graph.create(None)
    w_func = graph.create_function(w_root, body=None, name='f', kind='arrow')
    assert w_func.Class == 'Function'
    assert w_func.is_arrow()
    assert graph.prototype_of(w_func) is w_root
    w_act = graph.create_activation()
    assert w_act.Class == 'Activation'
    assert graph.prototype_of(w_act) is None
    assert w_act in graph
