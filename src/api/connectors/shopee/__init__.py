"""Conector Shopee - adapter de borda para pushes da Shopee Open Platform.

Responsabilidades:
- Canonical string e assinatura HMAC-SHA256
- Leitura do request bruto do webhook
"""

from .signature import (
    build_canonical_input,
    compute_push_signature,
    verify,
    verify_push_signature,
)

__all__ = [
    "build_canonical_input",
    "compute_push_signature",
    "verify",
    "verify_push_signature",
]
