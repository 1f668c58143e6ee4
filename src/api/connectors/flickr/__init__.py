"""Connector Flickr (frob + chamadas assinadas com api_sig)."""

from .client import FlickrAuthClient

__all__ = ["FlickrAuthClient"]
