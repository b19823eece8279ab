from __future__ import annotations

import gzip
import zlib

from gobake.core.codec_base import Compressor
from gobake.errors import CompressionError


class CodecGzip(Compressor):
    """gzip byte codec (no external deps).

    The gzip header carries mtime=0, so the same payload always yields the
    same literal.
    """

    codec_id: str = "gzip"

    def __init__(self, level: int = 6):
        if not (0 <= level <= 9):
            raise ValueError(f"gzip level must be 0..9, got {level}")
        self.level = level

    def encode(self, data: bytes) -> bytes:
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError("data must be bytes")
        try:
            return gzip.compress(bytes(data), compresslevel=self.level, mtime=0)
        except (OSError, zlib.error) as e:
            raise CompressionError(f"write gzip: {e}") from e

    def decode(self, data: bytes) -> bytes:
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError("data must be bytes")
        return gzip.decompress(bytes(data))

    def imports(self) -> tuple[str, ...]:
        return ("compress/gzip", "strings")

    def func_decoder(self, var: str, checked: bool = False) -> str:
        open_reader = f"gzip.NewReader(strings.NewReader({var}))"
        if checked:
            return (
                f"gr, err := {open_reader}\n"
                "\tif err != nil {\n"
                "\t\treturn nil, err\n"
                "\t}\n"
                "\treturn gr, nil"
            )
        return f"gr, _ := {open_reader}\n\treturn gr"
