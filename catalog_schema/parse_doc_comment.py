"""Logic for splitting a JSDoc block comment into description and tags."""

import re
from dataclasses import dataclass, field

from catalog_schema.errors import UnparseableDocumentation

# Tags understood by JSDoc itself; anything else is a custom tag.
STANDARD_TAGS = frozenset(
    {
        "abstract", "access", "alias", "async", "augments", "author", "borrows",
        "callback", "class", "classdesc", "constant", "const", "constructor",
        "constructs", "copyright", "default", "defaultvalue", "deprecated",
        "desc", "description", "enum", "event", "example", "exports", "extends",
        "external", "file", "fileoverview", "fires", "function", "func",
        "generator", "global", "hideconstructor", "ignore", "implements",
        "inheritdoc", "inner", "instance", "interface", "kind", "lends",
        "license", "listens", "member", "memberof", "method", "mixes", "mixin",
        "module", "name", "namespace", "override", "overview", "package",
        "param", "arg", "argument", "private", "prop", "property", "protected",
        "public", "readonly", "requires", "return", "returns", "see", "since",
        "static", "summary", "this", "throws", "exception", "todo", "tutorial",
        "type", "typedef", "var", "variation", "version", "yields", "yield",
    }
)

TAG_LINE_RE = re.compile(r"^@([A-Za-z][\w-]*)\s?(.*)$")


@dataclass
class DocComment:
    """Parsed content of one ``/** ... */`` comment."""

    description: str
    tags: list[tuple[str, str]] = field(default_factory=list)

    def get(self, name: str) -> str | None:
        """Return the text of the first tag with this name (case-insensitive)."""
        name = name.lower()
        for tag, text in self.tags:
            if tag.lower() == name:
                return text
        return None

    def has(self, *names: str) -> bool:
        """Whether any of the named tags is present."""
        wanted = {n.lower() for n in names}
        return any(tag.lower() in wanted for tag, _ in self.tags)

    @property
    def custom_tags(self) -> dict[str, str]:
        """Non-standard tags, keyed by lower-cased name; the first one wins."""
        out: dict[str, str] = {}
        for tag, text in self.tags:
            key = tag.lower()
            if key not in STANDARD_TAGS:
                out.setdefault(key, text)
        return out


def _strip_decoration(raw: str) -> list[str]:
    """Remove the leading ``*`` column from each comment line."""
    lines = []
    for line in raw.split("\n"):
        line = line.strip()
        if line.startswith("*"):
            line = line[1:]
            if line.startswith(" "):
                line = line[1:]
        lines.append(line.rstrip())
    return lines


def split_braced(text: str) -> tuple[str | None, str]:
    """Split ``{expr} rest`` into ``expr`` and ``rest``, honouring nested braces."""
    text = text.lstrip()
    if not text.startswith("{"):
        return None, text
    depth = 0
    for i, ch in enumerate(text):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[1:i].strip(), text[i + 1 :].strip()
    msg = f"Unbalanced braces in type expression: {text!r}"
    raise UnparseableDocumentation(msg)


def parse_doc_comment(raw: str) -> DocComment:
    """Parse the body of a block comment (the text between ``/*`` and ``*/``)."""
    if not raw.startswith("*"):
        msg = "Not a documentation comment"
        raise UnparseableDocumentation(msg)

    description_lines: list[str] = []
    tags: list[tuple[str, list[str]]] = []
    for line in _strip_decoration(raw[1:]):
        m = TAG_LINE_RE.match(line.lstrip())
        if m:
            tags.append((m.group(1), [m.group(2)]))
        elif tags:
            tags[-1][1].append(line)
        else:
            description_lines.append(line)

    parsed = [(name, "\n".join(body).strip()) for name, body in tags]
    for name, text in parsed:
        if name.lower() in {"type", "member", "param", "returns", "return", "property"}:
            split_braced(text)

    description = "\n".join(description_lines).strip()
    return DocComment(description=description, tags=parsed)


def _split_alternatives(expr: str) -> list[str]:
    """Split a type expression on ``|`` outside of brackets."""
    parts: list[str] = []
    depth = 0
    current = ""
    for ch in expr:
        if ch in "<({[":
            depth += 1
        elif ch in ">)}]":
            depth -= 1
        if ch == "|" and depth == 0:
            parts.append(current)
            current = ""
        else:
            current += ch
    parts.append(current)
    return parts


def _normalize_type_name(name: str) -> str:
    name = name.strip().lstrip("?!").rstrip("=").strip()
    if name.startswith("..."):
        name = name[3:]
    while name.endswith("[]"):
        name = f"Array.<{name[:-2]}>"
    return name


def type_names(expr: str) -> list[str]:
    """Turn a JSDoc type expression into its list of alternative type names."""
    expr = expr.strip()
    if expr.startswith("(") and expr.endswith(")"):
        expr = expr[1:-1]
    return [n for n in (_normalize_type_name(p) for p in _split_alternatives(expr)) if n]
