"""Renderers for documentation models."""

from classdoc.rendering.markup import render_markup

__all__ = ["render_markup"]
