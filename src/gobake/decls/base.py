from __future__ import annotations

from abc import ABC, abstractmethod

from gobake.core.codec_base import Compressor


class Declaration(ABC):
    """
    Top-level Go form wrapping the formatted literal.

    honors_type: whether a ``--type`` conversion survives; shapes that do not
                 honor it receive an empty type from the orchestrator.
    uses_decoder: whether the rendered code calls the compressor's decoder
                  (and therefore needs the compressor's imports).
    """

    id: str
    honors_type: bool = False
    uses_decoder: bool = False

    @abstractmethod
    def imports(self) -> tuple[str, ...]:
        """Go import paths referenced by the declaration itself."""
        raise NotImplementedError

    @abstractmethod
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
        raise NotImplementedError
