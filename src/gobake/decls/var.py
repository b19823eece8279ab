from __future__ import annotations

from dataclasses import dataclass

from gobake.core.codec_base import Compressor
from gobake.core.literal import format_value
from gobake.decls.base import Declaration


@dataclass(frozen=True)
class DeclVar(Declaration):
    """``var NAME = T("...")``: the only shape that keeps ``--type``."""

    id: str = "var"
    honors_type: bool = True

    def imports(self) -> tuple[str, ...]:
        return ()

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
        return f"var {name} = " + format_value(compress.encode(value), wrap, 1, typ)
