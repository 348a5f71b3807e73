"""API route modules."""

from . import recovery, trends, training

__all__ = ["recovery", "trends", "training"]
