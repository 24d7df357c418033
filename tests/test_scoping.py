from __future__ import annotations

import pytest

from bhasha_ref.runtime import Scope, ValueType, int_obj, str_obj
from bhasha_ref.tree import Lambda, Lookup, Return, block
from tests.support.harness import NotFound, assign, eval_expr, lit_int, lit_str


def test_update_creates_and_overwrites(scope: Scope) -> None:
    first = scope.update("x", int_obj(1))
    second = scope.update("x", str_obj("one"))

    assert first is second
    assert second.name == "x"
    assert (second.type, second.datum) == (ValueType.STRING, "one")


def test_update_copies_instead_of_aliasing(scope: Scope) -> None:
    source = int_obj(5)
    binding = scope.update("x", source)
    source.datum = 6

    assert binding is not source
    assert binding.datum == 5


def test_lookup_auto_vivifies_nil_binding(scope: Scope) -> None:
    binding = scope.lookup("ghost")

    assert binding.is_nil()
    assert binding.name == "ghost"
    assert "ghost" in scope.names()


def test_resolve_never_creates(scope: Scope) -> None:
    assert scope.resolve("ghost") is None
    assert len(scope) == 0
    assert "ghost" not in scope


def test_lookup_walks_parent_chain(scope: Scope) -> None:
    scope.update("x", int_obj(1))
    inner = scope.child().child("grandchild")

    assert inner.lookup("x") is scope.resolve("x")
    assert len(inner) == 0


def test_lookup_miss_creates_only_in_innermost(scope: Scope) -> None:
    inner = scope.child()
    inner.lookup("ghost")

    assert "ghost" in inner.names()
    assert "ghost" not in scope.names()


def test_update_in_child_shadows_parent(scope: Scope) -> None:
    scope.update("x", int_obj(1))
    inner = scope.child()
    inner.update("x", int_obj(2))

    assert scope.resolve("x").datum == 1
    assert inner.resolve("x").datum == 2


def test_chain_order(scope: Scope) -> None:
    inner = scope.child("a").child("b")

    assert [s.name for s in inner.chain()] == ["b", "a", "root"]


def test_assign_then_lookup_round_trip(scope: Scope) -> None:
    eval_expr(assign("yo yo", lit_str("honey singh")), scope)
    result = eval_expr(Lookup("yo yo"), scope)

    assert (result.type, result.datum) == (ValueType.STRING, "honey singh")
    binding = scope.lookup("yo yo")
    assert (binding.type, binding.datum) == (ValueType.STRING, "honey singh")


def test_lookup_node_sees_enclosing_scope(scope: Scope) -> None:
    scope.update("outer", int_obj(9))
    inner = scope.child()

    assert eval_expr(Lookup("outer"), inner).datum == 9


def test_lookup_node_does_not_vivify(scope: Scope) -> None:
    with pytest.raises(NotFound):
        eval_expr(Lookup("missing"), scope)

    assert scope.resolve("missing") is None


def test_lambda_body_assignment_does_not_reach_caller(scope: Scope) -> None:
    scope.update("x", int_obj(1))
    fn = Lambda({}, block(assign("x", lit_int(2)), Return(Lookup("x"))))

    assert eval_expr(fn, scope).datum == 2
    assert scope.resolve("x").datum == 1
