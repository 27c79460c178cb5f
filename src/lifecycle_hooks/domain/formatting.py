"""
Diagnostic formatting helpers.

Hook failure messages are consumed by tooling that expects the node agent's
historical text, which was produced with Go fmt verbs. These helpers render
the handful of verbs used there.
"""

from typing import Iterable, Union

_SIMPLE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def quote(value: Union[str, bytes]) -> str:
    """
    Render value the way Go's %q verb renders a string.

    Printable characters are kept, control characters become \\xNN and other
    non-printable characters \\uNNNN or \\UNNNNNNNN. Bytes are taken as UTF-8
    and any byte that is not part of a valid sequence becomes \\xNN.
    """
    raw = isinstance(value, bytes)
    if raw:
        # Invalid bytes decode to U+DC80..U+DCFF and are escaped back below.
        value = value.decode("utf-8", errors="surrogateescape")

    out = ['"']
    for ch in value:
        escaped = _SIMPLE_ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
            continue
        code = ord(ch)
        if ch == " " or (ch.isprintable() and not 0xD800 <= code <= 0xDFFF):
            out.append(ch)
        elif code < 0x20 or code == 0x7F:
            out.append(f"\\x{code:02x}")
        elif raw and 0xDC80 <= code <= 0xDCFF:
            out.append(f"\\x{code - 0xDC00:02x}")
        elif 0xD800 <= code <= 0xDFFF:
            # Lone surrogates are not valid runes.
            out.append("\\ufffd")
        elif code < 0x10000:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


def format_string_list(values: Iterable[str]) -> str:
    """Render a list of strings the way Go's %s verb renders a []string."""
    return "[" + " ".join(values) + "]"
