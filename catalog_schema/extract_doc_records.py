"""Logic for turning documented JavaScript source into DocumentationRecords.

Every ``/** ... */`` comment is attached to the code that starts right after
it. The code decides the default name, kind and owner of the symbol, and
explicit tags (``@alias``, ``@name``, ``@memberof``, ``@class``) override them.
"""

import bisect
import re
from dataclasses import dataclass
from typing import Any

from catalog_schema.doc_record import DocumentationRecord
from catalog_schema.parse_doc_comment import DocComment, parse_doc_comment, split_braced, type_names
from catalog_schema.parse_source import parse_source

IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$.]*$")
FUNCTION_TYPES = {"FunctionExpression", "ArrowFunctionExpression"}
SKIP_KEYS = {"range", "loc", "comments"}
BLOCK_COMMENT_TYPES = {"Block", "BlockComment"}


@dataclass(frozen=True)
class Anchor:
    """A documentable piece of code and what it implies about its symbol."""

    name: str
    kind: str  # member/function
    memberof: str | None
    offset: int


class _AnchorCollector:
    """Walks a plain-dict tree and records anchors by start offset."""

    def __init__(self, helper: str) -> None:
        self.helper = helper
        self.anchors: dict[int, Anchor] = {}

    def _add(self, node: dict[str, Any], name: str | None, kind: str, memberof: str | None) -> None:
        if not name or "range" not in node:
            return
        start = node["range"][0]
        self.anchors.setdefault(start, Anchor(name, kind, memberof, start))

    def visit(self, node: Any, owner: str | None = None) -> None:
        if isinstance(node, list):
            for child in node:
                self.visit(child, owner)
            return
        if not isinstance(node, dict) or "type" not in node:
            return

        handler = getattr(self, f"_visit_{node['type']}", None)
        if handler is not None:
            handler(node, owner)
            return
        if node["type"] in FUNCTION_TYPES:
            # Anonymous callbacks do not define class members.
            self._visit_children(node, None)
            return
        self._visit_children(node, owner)

    def _visit_children(self, node: dict[str, Any], owner: str | None) -> None:
        for key, value in node.items():
            if key not in SKIP_KEYS and isinstance(value, (dict, list)):
                self.visit(value, owner)

    def _visit_FunctionDeclaration(self, node: dict[str, Any], owner: str | None) -> None:
        name = (node.get("id") or {}).get("name")
        self._add(node, name, "function", None)
        self._visit_children(node["body"], name)

    def _visit_VariableDeclaration(self, node: dict[str, Any], owner: str | None) -> None:
        for i, decl in enumerate(node.get("declarations") or []):
            name = (decl.get("id") or {}).get("name")
            init = decl.get("init") or {}
            is_function = init.get("type") in FUNCTION_TYPES
            if i == 0:
                self._add(node, name, "function" if is_function else "member", None)
            if is_function:
                self._visit_children(init, name)
            elif init:
                self.visit(init, owner)

    def _visit_ExpressionStatement(self, node: dict[str, Any], owner: str | None) -> None:
        expr = node.get("expression") or {}
        if expr.get("type") == "AssignmentExpression":
            self._visit_assignment(node, expr, owner)
        elif expr.get("type") == "CallExpression" and self._is_define_properties(expr):
            args = expr.get("arguments") or []
            target = _prototype_owner(args[0]) if args else None
            for arg in args[1:2]:
                if arg.get("type") == "ObjectExpression":
                    self._visit_object(arg, target)
            self.visit(args[2:], owner)
        else:
            self._visit_children(node, owner)

    def _visit_assignment(self, stmt: dict[str, Any], expr: dict[str, Any], owner: str | None) -> None:
        left = expr.get("left") or {}
        right = expr.get("right") or {}
        is_function = right.get("type") in FUNCTION_TYPES
        kind = "function" if is_function else "member"
        name: str | None = None
        memberof: str | None = None
        inner_owner = owner

        if left.get("type") == "Identifier":
            name = left.get("name")
            inner_owner = name
        elif left.get("type") == "MemberExpression" and not left.get("computed"):
            name = (left.get("property") or {}).get("name")
            obj = left.get("object") or {}
            if obj.get("type") == "ThisExpression":
                memberof = owner
            else:
                memberof = _prototype_owner(obj) or obj.get("name")
            inner_owner = memberof

        self._add(stmt, name, kind, memberof)
        if is_function:
            self._visit_children(right, inner_owner)
        else:
            self.visit(right, owner)

    def _visit_ObjectExpression(self, node: dict[str, Any], owner: str | None) -> None:
        self._visit_object(node, None)

    def _visit_object(self, node: dict[str, Any], memberof: str | None) -> None:
        for prop in node.get("properties") or []:
            key = prop.get("key") or {}
            name = key.get("name") or key.get("value")
            value = prop.get("value") or {}
            kind = "function" if value.get("type") in FUNCTION_TYPES else "member"
            self._add(prop, str(name) if name is not None else None, kind, memberof)
            self.visit(value, None)

    def _is_define_properties(self, call: dict[str, Any]) -> bool:
        callee = call.get("callee") or {}
        if callee.get("type") == "Identifier":
            return callee.get("name") == self.helper
        return (callee.get("property") or {}).get("name") == self.helper


def _prototype_owner(node: dict[str, Any]) -> str | None:
    """Return ``X`` for an ``X.prototype`` expression."""
    if node.get("type") != "MemberExpression":
        return None
    if (node.get("property") or {}).get("name") != "prototype":
        return None
    return (node.get("object") or {}).get("name")


def _clean_memberof(text: str) -> str:
    text = text.split()[0] if text.split() else text
    for suffix in (".prototype", "#", "~"):
        if text.endswith(suffix):
            text = text[: -len(suffix)]
    return text


def _explicit_name(doc: DocComment) -> str | None:
    for tag in ("alias", "name"):
        value = (doc.get(tag) or "").split()
        if value and IDENTIFIER_RE.match(value[0]):
            return value[0]
    # ``@class Name`` names the class only when nothing else follows.
    for tag in ("class", "constructor"):
        value = (doc.get(tag) or "").split()
        if len(value) == 1 and IDENTIFIER_RE.match(value[0]):
            return value[0]
    return None


def _kind_of(doc: DocComment, anchor: Anchor | None) -> str:
    if doc.has("class", "constructor"):
        return "class"
    if doc.has("function", "method", "func"):
        return "function"
    if anchor is not None:
        return anchor.kind
    return "member"


def _declared_types(doc: DocComment) -> tuple[str, ...]:
    for tag in ("type", "member", "var"):
        text = doc.get(tag)
        if text:
            expr, _ = split_braced(text)
            if expr:
                return tuple(type_names(expr))
    return ()


def extract_doc_records(
    text: str,
    tree: dict[str, Any] | None = None,
    *,
    define_properties: str = "defineProperties",
) -> list[DocumentationRecord]:
    """Extract one record per documented symbol, in source order."""
    if tree is None:
        tree = parse_source(text)
    collector = _AnchorCollector(define_properties)
    collector.visit(tree.get("body") or [])

    newlines = [i for i, ch in enumerate(text) if ch == "\n"]

    def line_of(offset: int) -> int:
        return bisect.bisect_left(newlines, offset) + 1

    records: list[DocumentationRecord] = []
    aliases: dict[str, str] = {}
    for comment in tree.get("comments") or []:
        value = comment.get("value") or ""
        if comment.get("type") not in BLOCK_COMMENT_TYPES:
            continue
        # Only /** comments document symbols; /*** banners do not.
        if not value.startswith("*") or value.startswith("**"):
            continue
        doc = parse_doc_comment(value)

        end = comment["range"][1]
        pos = end
        while pos < len(text) and text[pos].isspace():
            pos += 1
        anchor = collector.anchors.get(pos)

        kind = _kind_of(doc, anchor)
        name = _explicit_name(doc) or (anchor.name if anchor else None)
        if not name:
            continue

        memberof_tag = doc.get("memberof")
        if memberof_tag:
            memberof: str | None = _clean_memberof(memberof_tag)
        elif kind == "class" or anchor is None:
            memberof = None
        else:
            memberof = anchor.memberof
        if memberof is not None:
            memberof = aliases.get(memberof, memberof)

        if kind == "class" and anchor is not None and anchor.name != name:
            aliases[anchor.name] = name

        description = doc.get("description") or doc.get("desc") or doc.description
        records.append(
            DocumentationRecord(
                name=name,
                kind=kind,
                memberof=memberof,
                line=line_of(anchor.offset if anchor else end),
                declared_types=_declared_types(doc),
                description=description or None,
                custom_tags=doc.custom_tags,
            )
        )
    return records
