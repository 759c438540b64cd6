"""Logic for rewriting JSDoc inline links to plain text."""

import re

MEMBER_LINK_RE = re.compile(r"\{@link ([^|}#]+)#([^}]*)\}", re.IGNORECASE)  # {@link Foo#bar}
LINK_RE = re.compile(r"\{@link ([^|}]+\|)?([^}]+)\}", re.IGNORECASE)  # {@link Foo|text}


def rewrite_links(text: str | None) -> str | None:
    """Rewrite ``{@link ...}`` tags into readable, possessive text."""
    if text is None:
        return None
    text = MEMBER_LINK_RE.sub(r"\1's \2", text)
    return LINK_RE.sub(r"\2", text)
