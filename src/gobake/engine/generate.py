"""Source generation: header + package clause + imports + declaration.

``generate()`` is pure: given the same inputs it returns byte-identical text.
It never touches the filesystem; reading the input and writing the result
live in gobake.files.
"""

from __future__ import annotations

from collections.abc import Sequence

from gobake.core.codec_base import Compressor
from gobake.core.codec_gzip import CodecGzip
from gobake.core.codec_raw import CodecRaw
from gobake.core.codec_zstd import CodecZstd
from gobake.core.literal import DEFAULT_WRAP
from gobake.core.naming import decl_name
from gobake.decls.base import Declaration
from gobake.decls.const import DeclConst
from gobake.decls.func import DeclFunc
from gobake.decls.var import DeclVar
from gobake.errors import UsageError
from gobake.go_package import DEFAULT_PACKAGE

TOOL_NAME = "gobake"


def make_declaration(decl_id: str | None) -> Declaration:
    """Unknown or empty ids fall back to the func shape."""
    d = (decl_id or "").strip()
    if d == "const":
        return DeclConst()
    if d == "var":
        return DeclVar()
    return DeclFunc()


def make_compressor(codec_id: str | None, level: int | None = None) -> Compressor:
    """Unknown or empty ids fall back to no compression.

    A level with no compression selected raises ValueError.
    """
    c = (codec_id or "").strip()
    if c == "gzip":
        return CodecGzip() if level is None else CodecGzip(level=int(level))
    if c == "zstd":
        return CodecZstd() if level is None else CodecZstd(level=int(level))
    if level is not None:
        raise ValueError(f"compression level {level} requires gzip or zstd compression")
    return CodecRaw()


def collect_imports(
    decl: Declaration, compress: Compressor, extra_import: str | None = None
) -> list[str]:
    """Exactly the imports the rendered declaration references, sorted."""
    imports = set(decl.imports())
    if decl.uses_decoder:
        imports.update(compress.imports())
    if extra_import:
        imports.add(extra_import)
    return sorted(imports)


_GO_ESCAPES = {
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


def go_quote(s: str) -> str:
    """Quote ``s`` as a Go interpreted string literal (strconv.Quote rules)."""
    out: list[str] = ['"']
    for ch in s:
        esc = _GO_ESCAPES.get(ch)
        if esc is not None:
            out.append(esc)
        elif ch.isprintable():
            out.append(ch)
        elif ord(ch) < 0x80:
            out.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(f"\\U{ord(ch):08x}")
    out.append('"')
    return "".join(out)


def render_header(args: Sequence[str], package: str, imports: Sequence[str]) -> str:
    parts: list[str] = [f'// File generated by "{TOOL_NAME}']
    for a in args:
        parts.append(" " + a)
    parts.append('"\n// DO NOT EDIT!\n\npackage ')
    parts.append(package)
    parts.append("\n\n")
    if imports:
        parts.append("import (\n")
        for imp in imports:
            parts.append(f"\t{go_quote(imp)}\n")
        parts.append(")\n\n")
    return "".join(parts)


def generate(
    value: bytes,
    *,
    name: str,
    typ: str = "string",
    compress: str | Compressor | None = None,
    decl: str | Declaration | None = None,
    export: bool = False,
    extra_import: str | None = None,
    package: str | None = None,
    args: Sequence[str] = (),
    checked: bool = False,
    wrap: int = DEFAULT_WRAP,
) -> str:
    """Return the complete generated Go source for ``value``.

    name:    raw identifier; sanitized here (see decl_name)
    typ:     literal conversion, only kept by the var shape
    args:    invocation arguments echoed in the header comment
    """
    declaration = decl if isinstance(decl, Declaration) else make_declaration(decl)
    compressor = compress if isinstance(compress, Compressor) else make_compressor(compress)

    ident = decl_name(name, export)
    if not ident:
        raise UsageError(f"cannot derive a Go identifier from name {name!r} (no letters)")

    if not declaration.honors_type:
        typ = ""

    imports = collect_imports(declaration, compressor, extra_import)
    header = render_header(args, package or DEFAULT_PACKAGE, imports)
    body = declaration.format_declare(
        bytes(value), ident, typ, compressor, wrap=int(wrap), checked=bool(checked)
    )
    return header + body
