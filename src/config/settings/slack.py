"""Settings do Slack (incoming webhook de destino)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do envio ao Slack.

    Attributes:
        webhook_url: URL do incoming webhook
        request_timeout_seconds: Timeout do POST ao Slack
    """

    webhook_url: str = ""
    request_timeout_seconds: float = 5.0

    @property
    def is_configured(self) -> bool:
        return bool(self.webhook_url)

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.webhook_url:
            errors.append("SLACK_WEBHOOK_URL não configurado")
        elif not self.webhook_url.startswith(("https://", "http://")):
            errors.append("SLACK_WEBHOOK_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SlackSettings:
    return SlackSettings(
        webhook_url=os.getenv("SLACK_WEBHOOK_URL", ""),
        request_timeout_seconds=float(os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "5")),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings."""
    return _load_from_env()
