"""HTML boundary for ingredient text.

User-supplied fragments (food and unit names, notes) may carry a little
inline markup. Everything is parsed with BeautifulSoup and re-serialized:
only ``ALLOWED_TAGS`` survive, and they survive without attributes.
"""
import re
from itertools import groupby
from operator import itemgetter

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString
from bs4.dammit import EntitySubstitution

ALLOWED_TAGS = ("b", "q", "i", "strong", "sup")

# dropped together with their content
DROP_CONTENT = {
    "script", "style", "template", "iframe", "frame", "frameset", "object", "embed",
    "noscript", "noembed", "noframes", "xmp", "textarea", "select", "title", "svg", "math", "head",
}

# a "<" or "&" that could be read as markup, also at the end of a text run
RE_MARKUP_LT = re.compile(r"<(?=[A-Za-z/!?]|\Z)")
RE_MARKUP_AMP = re.compile(r"&(?=[A-Za-z0-9#]|\Z)")


def _escape_data(txt: str) -> str:
    txt = RE_MARKUP_AMP.sub("&amp;", txt)
    return RE_MARKUP_LT.sub("&lt;", txt)


def _collect(node, pieces):
    """Flatten into (is_markup, text) pieces, dropping and unwrapping as we go."""
    for child in node.children:
        if isinstance(child, Tag):
            name = (child.name or "").lower()
            if name in DROP_CONTENT:
                continue
            if name in ALLOWED_TAGS:
                pieces.append((True, f"<{name}>"))
                _collect(child, pieces)
                pieces.append((True, f"</{name}>"))
            else:
                _collect(child, pieces)
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            # comments, doctypes, CDATA and PIs are preformatted strings
            pieces.append((False, str(child)))


def _serialize(node) -> str:
    pieces = []
    _collect(node, pieces)
    out = []
    # text either side of a removed tag is one run once re-parsed
    for is_markup, group in groupby(pieces, key=itemgetter(0)):
        txt = "".join(p for _, p in group)
        out.append(txt if is_markup else _escape_data(txt))
    return "".join(out)


def sanitize_fragment(raw) -> str:
    if not raw:
        return ""
    soup = BeautifulSoup(str(raw), "html.parser")
    return _serialize(soup)


def escape_text(value) -> str:
    return EntitySubstitution.substitute_xml(str(value or ""))


def escape_attribute(value) -> str:
    """Escaped and quoted, ready to follow ``name=``."""
    return EntitySubstitution.substitute_xml(str(value or ""), make_quoted_attribute=True)
