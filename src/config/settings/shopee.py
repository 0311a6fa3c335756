"""Settings específicas da Shopee.

Credenciais do app na Shopee Open Platform usadas para validar pushes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Tag de projeto gravada em cada notificação
DEFAULT_PROJECT_TAG: str = "Shopee"


@dataclass(frozen=True)
class ShopeeSettings:
    """Configurações do canal Shopee.

    Attributes:
        partner_key: Chave compartilhada para validação HMAC dos pushes
        shop_id: ID da loja (apenas para logs de startup)
        project_tag: Tag de projeto gravada nas notificações
    """

    partner_key: str = ""
    shop_id: str = ""
    project_tag: str = DEFAULT_PROJECT_TAG

    def validate(self) -> list[str]:
        """Valida configurações mínimas da Shopee.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.partner_key:
            errors.append("SHOPEE_PARTNER_KEY não configurado")

        if not self.project_tag:
            errors.append("SHOPEE_PROJECT_TAG não pode ser vazio")

        return errors


def _load_from_env() -> ShopeeSettings:
    """Carrega ShopeeSettings a partir de variáveis de ambiente."""
    return ShopeeSettings(
        partner_key=os.getenv("SHOPEE_PARTNER_KEY", ""),
        shop_id=os.getenv("SHOPEE_SHOP_ID", ""),
        project_tag=os.getenv("SHOPEE_PROJECT_TAG", DEFAULT_PROJECT_TAG),
    )


@lru_cache(maxsize=1)
def get_shopee_settings() -> ShopeeSettings:
    """Retorna instância cacheada de ShopeeSettings."""
    return _load_from_env()
