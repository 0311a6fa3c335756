"""Normalizer Shopee — payload do push para texto de notificação."""

from .normalizer import MISSING_VALUE, normalize_payload

__all__ = ["MISSING_VALUE", "normalize_payload"]
