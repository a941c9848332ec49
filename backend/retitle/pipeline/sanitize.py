"""
Retitle — Title sanitizer.

The title ends up in folder and file names (TIFF headers included), so
everything the host's replacement regex matches is removed.
"""

from __future__ import annotations

import re


def sanitize_title(raw: str, replacement_regex: str, regex_check: bool = True) -> str:
    """
    Strip surrounding whitespace, then remove every match of ``replacement_regex``.

    With ``regex_check`` off only the whitespace strip is applied.
    An empty result is returned as is.
    """
    title = raw.strip()
    if not regex_check:
        return title

    pattern = re.compile(replacement_regex)
    # repeat until stable: removing one match can join two halves of another
    while True:
        cleaned = pattern.sub("", title).strip()
        if cleaned == title:
            return cleaned
        title = cleaned
