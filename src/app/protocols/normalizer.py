"""Protocolos de normalização inbound."""

from __future__ import annotations

from typing import Any, Protocol


class PayloadNormalizerProtocol(Protocol):
    """Contrato mínimo para converter payload JSON em texto legível."""

    def __call__(self, payload: Any) -> str: ...
