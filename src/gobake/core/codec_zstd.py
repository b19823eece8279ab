from __future__ import annotations

from dataclasses import dataclass

import zstandard as zstd

from gobake.core.codec_base import Compressor
from gobake.errors import CompressionError

# Go side: github.com/klauspost/compress/zstd (the stdlib has no zstd reader).
GO_ZSTD_IMPORT = "github.com/klauspost/compress/zstd"


@dataclass
class CodecZstd(Compressor):
    """
    zstd byte codec.

    The frame keeps the content size so the generated Go decoder can size its
    buffers; no checksum is written.
    """

    level: int = 3
    codec_id: str = "zstd"

    def __post_init__(self) -> None:
        if not (1 <= int(self.level) <= 22):
            raise ValueError(f"zstd level must be 1..22, got {self.level}")

    def encode(self, data: bytes) -> bytes:
        c = zstd.ZstdCompressor(level=int(self.level), write_checksum=False)
        try:
            return c.compress(bytes(data))
        except zstd.ZstdError as e:
            raise CompressionError(f"write zstd: {e}") from e

    def decode(self, data: bytes) -> bytes:
        d = zstd.ZstdDecompressor()
        return d.decompress(bytes(data))

    def imports(self) -> tuple[str, ...]:
        return (GO_ZSTD_IMPORT, "strings")

    def func_decoder(self, var: str, checked: bool = False) -> str:
        open_reader = f"zstd.NewReader(strings.NewReader({var}))"
        if checked:
            return (
                f"zr, err := {open_reader}\n"
                "\tif err != nil {\n"
                "\t\treturn nil, err\n"
                "\t}\n"
                "\treturn zr.IOReadCloser(), nil"
            )
        return f"zr, _ := {open_reader}\n\treturn zr.IOReadCloser()"
