"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field


# ============== Request Schemas ==============


class ExtractRequest(BaseModel):
    """Request to extract documentation from one class source."""

    source_text: str = Field(
        ...,
        description="Raw JavaScript source containing a single class",
        examples=["/** @classdesc Does X */ class Foo { bar(x) {} }"],
    )
    source_path: str = Field(
        "",
        description="Label for the source, copied into class_info.source_path",
        examples=["source/library/resources/files/SvResourceFile.js"],
    )


# ============== Response Schemas ==============


class ParameterResponse(BaseModel):
    """Documented method parameter."""

    name: str
    type: str
    description: str = ""

    model_config = {"from_attributes": True}


class ReturnResponse(BaseModel):
    """Documented return value."""

    type: str
    description: str | None = None

    model_config = {"from_attributes": True}


class ClassInfoResponse(BaseModel):
    """Class metadata."""

    class_name: str
    extends_name: str
    source_path: str
    description: str

    model_config = {"from_attributes": True}


class MethodResponse(BaseModel):
    """Documentation for one method."""

    name: str
    signature: str
    access: str
    is_async: bool
    is_static: bool
    parameters: list[ParameterResponse]
    description: str
    returns: ReturnResponse | None = None
    throws: str | None = None
    example: str | None = None
    deprecated: str | None = None
    since: str | None = None
    category: str
    start_line: int
    end_line: int
    source_text: str
    kind: str

    model_config = {"from_attributes": True}


class PropertyResponse(BaseModel):
    """Documentation for one @member property."""

    name: str
    type: str
    description: str
    category: str
    default: str | None = None

    model_config = {"from_attributes": True}


class DiagnosticResponse(BaseModel):
    """Structured warning or error produced during extraction."""

    level: str
    event: str
    message: str
    fields: dict[str, str | int | bool] = {}

    model_config = {"from_attributes": True}


class DocumentationResponse(BaseModel):
    """Complete documentation model for a class."""

    class_info: ClassInfoResponse
    methods: list[MethodResponse]
    properties_by_category: dict[str, list[PropertyResponse]]
    methods_by_category: dict[str, list[MethodResponse]]
    tier: str
    diagnostics: list[DiagnosticResponse]
    has_errors: bool

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    recovery_enabled: bool


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str
