"""Documentation extraction endpoints."""

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from classdoc.api.dependencies import AppSettings, Extractor
from classdoc.api.schemas import DocumentationResponse, ErrorResponse, ExtractRequest
from classdoc.core import DocumentationModel
from classdoc.logging import get_logger
from classdoc.rendering import render_markup

logger = get_logger(__name__)

router = APIRouter(tags=["extraction"])


def _run_extraction(
    request: ExtractRequest,
    extractor: Extractor,
    settings: AppSettings,
) -> DocumentationModel:
    size = len(request.source_text.encode("utf-8"))
    if size > settings.max_source_bytes:
        logger.warning(
            "source_too_large",
            source_path=request.source_path,
            size=size,
            limit=settings.max_source_bytes,
        )
        raise HTTPException(
            status_code=413,
            detail=f"Source is {size} bytes; limit is {settings.max_source_bytes}",
        )
    return extractor.extract(request.source_text, request.source_path)


@router.post(
    "/extract",
    response_model=DocumentationResponse,
    responses={413: {"model": ErrorResponse}},
)
def extract_documentation(
    request: ExtractRequest,
    extractor: Extractor,
    settings: AppSettings,
) -> DocumentationResponse:
    """
    Extract the documentation model for one class.

    Always succeeds for any source text within the size limit; parse
    problems are reported in `diagnostics` and `tier`.
    """
    model = _run_extraction(request, extractor, settings)
    return DocumentationResponse.model_validate(model)


@router.post(
    "/render",
    response_class=HTMLResponse,
    responses={413: {"model": ErrorResponse}},
)
def render_documentation(
    request: ExtractRequest,
    extractor: Extractor,
    settings: AppSettings,
) -> HTMLResponse:
    """Extract documentation and render it as class documentation markup."""
    model = _run_extraction(request, extractor, settings)
    return HTMLResponse(content=render_markup(model))
