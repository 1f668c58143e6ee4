"""Normalizer Flickr: envelope REST (frob e token de autenticação)."""

from .extractor import extract_frob, extract_token, parse_envelope

__all__ = ["extract_frob", "extract_token", "parse_envelope"]
