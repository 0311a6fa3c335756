"""Conector Slack - envio de mensagens via incoming webhook."""

from .webhook_client import DEFAULT_TIMEOUT_SECONDS, SlackWebhookForwarder

__all__ = ["DEFAULT_TIMEOUT_SECONDS", "SlackWebhookForwarder"]
