"""FastAPI dependency injection."""

from typing import Annotated

from fastapi import Depends

from classdoc.config import Settings, get_settings
from classdoc.extraction import ClassDocExtractor


def get_extractor() -> ClassDocExtractor:
    """
    Dependency for ClassDocExtractor.

    A new extractor per request, so concurrent requests never share a
    tree-sitter parser.
    """
    return ClassDocExtractor(enable_recovery=get_settings().enable_recovery)


# Type aliases for injected dependencies
Extractor = Annotated[ClassDocExtractor, Depends(get_extractor)]
AppSettings = Annotated[Settings, Depends(get_settings)]
