"""Normalizers — conversão de payloads externos para texto/modelos internos.

Estrutura:
- shopee/: normalizer dos pushes da Shopee Open Platform
"""

from .shopee import MISSING_VALUE, normalize_payload

__all__ = [
    "MISSING_VALUE",
    "normalize_payload",
]
