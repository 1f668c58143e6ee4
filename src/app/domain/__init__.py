"""Dominio — modelos compartilhados entre connectors e servicos."""

from app.domain.contact import Contact, ContactFeed, parse_feed_timestamp

__all__ = ["Contact", "ContactFeed", "parse_feed_timestamp"]
