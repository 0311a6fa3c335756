"""API — camada de borda e adapters de canais.

Responsabilidades:
- Receber pushes da Shopee e validar a assinatura
- Normalizar payloads para texto de notificação
- Enviar mensagens ao Slack
- Expor a listagem de notificações ao painel

Subpastas:
- connectors/: adapters HTTP por canal (shopee, slack)
- normalizers/: conversão de payloads externos em texto
- routes/: endpoints HTTP (webhook, listagem, health, fallback)

NÃO PODE conter: orquestração de use cases nem acesso direto a stores.
"""
