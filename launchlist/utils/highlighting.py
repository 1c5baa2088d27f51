"""Search match highlighting for launch names."""

import re

import gi

gi.require_version("GLib", "2.0")
from gi.repository import GLib


def highlight_text(text: str, query: str) -> str:
    """
    Return Pango markup for ``text`` with every case-insensitive
    occurrence of ``query`` highlighted.

    The query is matched as one literal substring, the same way the
    search filters launches by name.
    """
    if not text:
        return ""

    query = query.strip() if query else ""
    if not query:
        return GLib.markup_escape_text(text)

    parts = []
    last = 0
    for match in re.finditer(re.escape(query), text, flags=re.IGNORECASE):
        parts.append(GLib.markup_escape_text(text[last:match.start()]))
        parts.append(
            f'<span background="yellow" foreground="black">'
            f"{GLib.markup_escape_text(match.group(0))}</span>"
        )
        last = match.end()
    parts.append(GLib.markup_escape_text(text[last:]))
    return "".join(parts)
