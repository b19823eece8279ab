from __future__ import annotations

from gobake.core.codec_base import Compressor


class CodecRaw(Compressor):
    """
    Codec identity: the literal holds the payload as-is.
    """

    codec_id: str = "none"

    def encode(self, data: bytes) -> bytes:
        return bytes(data)

    def decode(self, data: bytes) -> bytes:
        return bytes(data)

    def imports(self) -> tuple[str, ...]:
        return ("io/ioutil", "strings")

    def func_decoder(self, var: str, checked: bool = False) -> str:
        reader = f"ioutil.NopCloser(strings.NewReader({var}))"
        if checked:
            return f"return {reader}, nil"
        return f"return {reader}"
