from __future__ import annotations

import dataclasses

import pytest

from bhasha_ref.tree import (
    BlockExpr,
    Concat,
    If,
    Infix,
    InfixOp,
    Lambda,
    Lookup,
    Return,
    block,
    info,
    is_node,
    node_children,
    pretty,
)
from tests.support.harness import assign, lit_int, lit_str


def test_sequences_are_frozen_into_tuples() -> None:
    parts = [lit_str("a"), lit_int(1)]
    node = Concat(parts)
    parts.append(lit_str("late"))

    assert node.parts == (lit_str("a"), lit_int(1))
    assert isinstance(BlockExpr([lit_int(1)]).body, tuple)


def test_nodes_reject_mutation() -> None:
    node = Lookup("x")

    with pytest.raises(dataclasses.FrozenInstanceError):
        node.name = "y"  # type: ignore[misc]


def test_lambda_params_accept_mapping_and_keep_order() -> None:
    fn = Lambda({"b": lit_int(2), "a": lit_int(1)}, block(Return(Lookup("a"))))

    assert fn.params == (("b", lit_int(2)), ("a", lit_int(1)))


def test_if_fail_branch_defaults_to_empty_block() -> None:
    node = If(Lookup("flag"), block(lit_int(1)))

    assert node.fail == BlockExpr()


@pytest.mark.parametrize(
    "node, expected",
    [
        pytest.param(lit_int(1), "I am a Literal", id="literal"),
        pytest.param(Lookup("x"), "I am a Lookup", id="lookup"),
        pytest.param(assign("x", lit_int(1)), "I am an Assign", id="assign"),
        pytest.param(If(lit_int(1), block()), "I am an If", id="if"),
        pytest.param(Infix(InfixOp.ADD, lit_int(1), lit_int(2)), "I am an Infix", id="infix"),
        pytest.param(object(), "I am not a node (object)", id="not-a-node"),
    ],
)
def test_info(node: object, expected: str) -> None:
    assert info(node) == expected


def test_is_node() -> None:
    assert is_node(Return(lit_int(1)))
    assert not is_node("Return")


def test_node_children_of_lambda_lists_defaults_then_body() -> None:
    body = block(Return(Lookup("a")))
    fn = Lambda({"a": lit_int(1)}, body)

    assert node_children(fn) == [lit_int(1), body]


def test_pretty_renders_indented_tree() -> None:
    tree = block(
        assign("x", Infix(InfixOp.MULTIPLY, lit_int(6), lit_int(7))),
        Return(Concat([lit_str("x="), Lookup("x")])),
    )

    assert pretty(tree) == (
        "BlockExpr\n"
        "  Assign\n"
        "    Literal NIL None as x\n"
        "    Infix *\n"
        "      Literal INT 6\n"
        "      Literal INT 7\n"
        "  Return\n"
        "    Concat\n"
        "      Literal STRING 'x='\n"
        "      Lookup x\n"
    )
