"""Documentation extraction for JSDoc-annotated JavaScript classes."""

__version__ = "0.1.0"

from classdoc.extraction import ClassDocExtractor, extract  # noqa: E402

__all__ = ["ClassDocExtractor", "__version__", "extract"]
