from __future__ import annotations

from abc import ABC, abstractmethod


class Compressor(ABC):
    """
    Byte transform applied before the literal is formatted.

    Each compressor brings two halves:
      - encode/decode: the transform itself (decode mirrors what the generated
        Go code does at run time)
      - imports/func_decoder: the Go statements (and their imports) that turn
        the in-memory literal back into an io.ReadCloser inside the func shape
    """

    codec_id: str

    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        raise NotImplementedError

    @abstractmethod
    def decode(self, data: bytes) -> bytes:
        raise NotImplementedError

    @abstractmethod
    def imports(self) -> tuple[str, ...]:
        """Go import paths referenced by func_decoder()."""
        raise NotImplementedError

    @abstractmethod
    def func_decoder(self, var: str, checked: bool = False) -> str:
        """Return the accessor body reading from the constant named ``var``.

        checked=False: body of ``func() io.ReadCloser``; construction errors
                       are discarded.
        checked=True:  body of ``func() (io.ReadCloser, error)``.
        Lines after the first are indented with one tab.
        """
        raise NotImplementedError
