"""Tests for declarative tree pattern matching."""

from typing import Any

from catalog_schema.find_type_constant import type_constant_pattern
from catalog_schema.tree_pattern import PatternStep, TreePattern, lookup


def _getter_property(key: str, body: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "type": "Property",
        "key": {"type": "Identifier", "name": key},
        "value": {
            "type": "ObjectExpression",
            "properties": [
                {
                    "type": "Property",
                    "key": {"type": "Identifier", "name": "get"},
                    "value": {
                        "type": "FunctionExpression",
                        "body": {"type": "BlockStatement", "body": body},
                    },
                }
            ],
        },
    }


def _return(value: Any) -> dict[str, Any]:
    return {"type": "ReturnStatement", "argument": {"type": "Literal", "value": value}}


def _program(*properties: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "Program",
        "body": [
            {
                "type": "ExpressionStatement",
                "expression": {
                    "type": "CallExpression",
                    "callee": {"type": "Identifier", "name": "defineProperties"},
                    "arguments": [
                        {"type": "MemberExpression"},
                        {"type": "ObjectExpression", "properties": list(properties)},
                    ],
                },
            }
        ],
    }


def test_lookup_paths() -> None:
    """Verify dotted path lookup through dicts and list indexes."""
    tree = {"a": [{"b": 1}, {"b": 2}]}
    assert lookup(tree, "a.1.b") == 2
    assert lookup(tree, "") is tree
    missing = lookup(tree, "a.5.b")
    assert missing is lookup(tree, "x")
    assert missing is not None


def test_step_filters_by_kind_and_fields() -> None:
    """Verify that a fan-out step keeps only matching nodes."""
    step = PatternStep("body", kind="Stmt", where={"name": "b"}, each=True)
    node = {"body": [{"type": "Stmt", "name": "a"}, {"type": "Stmt", "name": "b"}, {"type": "X", "name": "b"}]}
    assert list(step.apply(node)) == [{"type": "Stmt", "name": "b"}]


def test_single_step_requires_one_element() -> None:
    """Verify that a single step rejects lists of any other length."""
    step = PatternStep("body", single=True)
    assert list(step.apply({"body": [1]})) == [1]
    assert list(step.apply({"body": [1, 2]})) == []
    assert list(step.apply({"body": []})) == []


def test_pattern_first_and_find_all() -> None:
    """Verify terminal extraction across several matches."""
    pattern = TreePattern(
        steps=(PatternStep("items", each=True, where={"keep": True}),),
        terminal="value",
    )
    tree = {"items": [{"keep": False, "value": 1}, {"keep": True, "value": 2}, {"keep": True, "value": 3}]}
    assert list(pattern.find_all(tree)) == [2, 3]
    assert pattern.first(tree) == 2
    assert pattern.first({"items": []}) is None


def test_type_constant_pattern_matches_literal_getter() -> None:
    """Verify the type pattern finds the returned literal."""
    tree = _program(_getter_property("name", [_return("x")]), _getter_property("type", [_return("wms")]))
    assert type_constant_pattern("type").first(tree) == "wms"
    assert type_constant_pattern("typeName").first(tree) is None


def test_type_constant_pattern_requires_single_return() -> None:
    """Verify that a getter doing more than returning is not a constant."""
    body = [{"type": "ExpressionStatement"}, _return("wms")]
    assert type_constant_pattern("type").first(_program(_getter_property("type", body))) is None


def test_type_constant_pattern_other_helper() -> None:
    """Verify that only the configured helper call is searched."""
    tree = _program(_getter_property("type", [_return("wms")]))
    assert type_constant_pattern("type", helper="Object.defineProperties").first(tree) is None
