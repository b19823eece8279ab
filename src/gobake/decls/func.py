from __future__ import annotations

from dataclasses import dataclass

from gobake.core.codec_base import Compressor
from gobake.core.literal import format_value
from gobake.decls.base import Declaration


@dataclass(frozen=True)
class DeclFunc(Declaration):
    """
    Accessor function returning a fresh reader over the literal:

        func NAME() io.ReadCloser {
        	const a = "..."
        	return ...
        }

    checked=True switches the signature to ``(io.ReadCloser, error)`` and the
    decoder reports construction errors instead of dropping them.
    """

    id: str = "func"
    uses_decoder: bool = True

    def imports(self) -> tuple[str, ...]:
        return ("io",)

    def format_declare(
        self,
        value: bytes,
        name: str,
        typ: str,
        compress: Compressor,
        *,
        wrap: int = 16,
        checked: bool = False,
    ) -> str:
        result = "(io.ReadCloser, error)" if checked else "io.ReadCloser"
        return (
            f"func {name}() {result} {{\n\tconst a = "
            + format_value(compress.encode(value), wrap, 2, typ)
            + "\t"
            + compress.func_decoder("a", checked=checked)
            + "\n}\n"
        )
