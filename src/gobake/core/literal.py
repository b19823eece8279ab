"""Go string literal formatter.

Every byte becomes a ``\\xHH`` escape (lowercase hex), so arbitrary binary
payloads (NUL, invalid UTF-8, ...) survive byte-for-byte. Long payloads are
split into chunks joined with ``+``:

    "" +
    	"\\x00\\x01..." +
    	"\\x10\\x11..."

The leading ``"" +`` keeps every data chunk on its own line at the same
indentation.
"""

from __future__ import annotations

_HEXTABLE = "0123456789abcdef"

DEFAULT_WRAP = 16


def escape_bytes(b: bytes) -> str:
    """Return the ``\\xHH`` escape sequence of ``b`` (no quotes)."""
    out: list[str] = []
    for x in b:
        out.append("\\x")
        out.append(_HEXTABLE[x >> 4])
        out.append(_HEXTABLE[x & 0x0F])
    return "".join(out)


def format_value(b: bytes, wrap: int = DEFAULT_WRAP, indent: int = 1, typ: str = "") -> str:
    """Format ``b`` as a Go string expression, newline-terminated.

    wrap:   bytes per chunk; ``<= 0`` disables wrapping.
    indent: tab count in front of each chunk line.
    typ:    optional conversion wrapping the whole expression, e.g. ``[]byte``.
            ``"string"`` is the identity alias and never wraps.
    """
    if typ == "string":
        typ = ""
    data = bytes(b)

    if not data:
        if not typ:
            return '""\n'
        return f'{typ}("")\n'

    parts: list[str] = []
    if typ:
        parts.append(typ + "(")

    if wrap > 0 and len(data) > wrap:
        pad = "\t" * max(0, indent)
        chunks = [
            pad + '"' + escape_bytes(data[i : i + wrap]) + '"'
            for i in range(0, len(data), wrap)
        ]
        parts.append('"" +\n')
        parts.append(" +\n".join(chunks))
    else:
        parts.append('"' + escape_bytes(data) + '"')

    if typ:
        parts.append(")")
    parts.append("\n")
    return "".join(parts)
