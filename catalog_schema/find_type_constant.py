"""Logic for finding the literal type constants of a catalog class."""

from typing import Any

from catalog_schema.tree_pattern import PatternStep, TreePattern


def type_constant_pattern(property_name: str, helper: str = "defineProperties") -> TreePattern:
    """Build the pattern for ``helper(X.prototype, {name: {get: () => 'lit'}})``."""
    return TreePattern(
        steps=(
            PatternStep(
                "body",
                kind="ExpressionStatement",
                where={"expression.type": "CallExpression", "expression.callee.name": helper},
                each=True,
            ),
            PatternStep("expression.arguments.1", kind="ObjectExpression"),
            PatternStep("properties", kind="Property", where={"key.name": property_name}, each=True),
            PatternStep("value.properties", kind="Property", where={"key.name": "get"}, each=True),
            PatternStep("value.body.body", kind="ReturnStatement", single=True),
            PatternStep("argument", kind="Literal"),
        ),
        terminal="value",
    )


def find_type_constant(
    tree: dict[str, Any], property_name: str, helper: str = "defineProperties"
) -> str | None:
    """Return the string literal returned by a property getter, if any."""
    pattern = type_constant_pattern(property_name, helper)
    for value in pattern.find_all(tree):
        if isinstance(value, str):
            return value
    return None
