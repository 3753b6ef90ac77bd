"""
Web interface module for the background image catalog.

Provides the Flask app serving ``/config.json`` and the catalog images.
"""

from .app import create_app, main
from .router import CatalogRouter, decode_request_path

__all__ = ["create_app", "main", "CatalogRouter", "decode_request_path"]
