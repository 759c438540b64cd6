"""Logic for normalizing boilerplate in member documentation text."""

import re

OBSERVABLE_RE = re.compile(r"\s*This property is observable\.")


def normalize_description(text: str) -> str:
    """Turn accessor boilerplate into a plain description."""
    text = re.sub(r"^Gets or sets the", "The", text)
    text = re.sub(r"^Gets or sets a", "A", text)
    return OBSERVABLE_RE.sub("", text, count=1)
