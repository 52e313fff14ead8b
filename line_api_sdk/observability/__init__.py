"""Observability layer (structured logging)."""

from .logging import ApiLogger

__all__ = ["ApiLogger"]
