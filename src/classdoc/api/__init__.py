"""HTTP API for class documentation extraction."""

from classdoc.api.app import create_app

__all__ = ["create_app"]
