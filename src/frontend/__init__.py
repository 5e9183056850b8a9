"""Outer surfaces (HTTP service and CLI) over shakesearch.Engine."""
from __future__ import annotations
from .web import create_app

__all__ = ["create_app"]
