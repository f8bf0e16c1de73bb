# tests/services/test_category_cycles.py
import pytest
from uuid import uuid4

from catalog_core.schemas.category import CategoryRecord
from catalog_core.services.category_cycles import descendant_ids, would_create_cycle


@pytest.fixture
def chain():
    """A -> B -> C: C's parent is B, B's parent is A; D is a separate root."""
    a = CategoryRecord(id=uuid4(), slug="a", name="A")
    b = CategoryRecord(id=uuid4(), slug="b", name="B", parent_id=a.id)
    c = CategoryRecord(id=uuid4(), slug="c", name="C", parent_id=b.id)
    d = CategoryRecord(id=uuid4(), slug="d", name="D")
    return a, b, c, d


def test_descendant_ids(chain):
    a, b, c, d = chain
    flat = [a, b, c, d]
    assert descendant_ids(a.id, flat) == {b.id, c.id}
    assert descendant_ids(b.id, flat) == {c.id}
    assert descendant_ids(c.id, flat) == set()
    assert descendant_ids(d.id, flat) == set()


def test_descendant_ids_terminates_on_corrupted_cycle():
    x = CategoryRecord(id=uuid4(), slug="x", name="X")
    y = CategoryRecord(id=uuid4(), slug="y", name="Y", parent_id=x.id)
    x = x.model_copy(update={"parent_id": y.id})
    assert descendant_ids(x.id, [x, y]) == {x.id, y.id}


def test_reparenting_under_own_subtree_is_a_cycle(chain):
    a, b, c, d = chain
    flat = [a, b, c, d]
    assert would_create_cycle(a.id, c.id, flat) is True
    assert would_create_cycle(a.id, b.id, flat) is True


def test_self_parenting_is_a_cycle(chain):
    a, b, c, d = chain
    assert would_create_cycle(b.id, b.id, [a, b, c, d]) is True


def test_moving_to_root_is_never_a_cycle(chain):
    a, b, c, d = chain
    assert would_create_cycle(a.id, None, [a, b, c, d]) is False
    assert would_create_cycle(c.id, None, [a, b, c, d]) is False


def test_unrelated_parents_are_allowed(chain):
    a, b, c, d = chain
    flat = [a, b, c, d]
    assert would_create_cycle(c.id, a.id, flat) is False
    assert would_create_cycle(a.id, d.id, flat) is False
    assert would_create_cycle(d.id, c.id, flat) is False
