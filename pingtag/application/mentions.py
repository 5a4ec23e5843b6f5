"""Extraction of ``#tag`` mentions from free text."""

import re

# Latin and Cyrillic letters, digits and underscores
TAG_MENTION_PATTERN = re.compile(r"#([A-Za-zА-Яа-яЁё0-9_]+)")


def extract_tag_names(text: str) -> list[str]:
    """Return every ``#tag`` name in ``text`` in order of appearance.

    Repeated mentions are kept; ``"#a #a"`` yields ``["a", "a"]``.
    """
    return TAG_MENTION_PATTERN.findall(text)
