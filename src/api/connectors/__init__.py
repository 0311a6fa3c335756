"""Connectors — adapters de borda para APIs externas.

Estrutura:
- shopee/: pushes da Shopee Open Platform (assinatura, leitura do request)
- slack/: incoming webhook do Slack

Cada integração tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
