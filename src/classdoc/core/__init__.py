"""Core domain layer - pure Python business logic."""

from classdoc.core.models import (
    UNCATEGORIZED,
    UNDOCUMENTED,
    UNKNOWN_CLASS,
    Access,
    ClassInfo,
    CommentBlock,
    CommentKind,
    Diagnostic,
    DiagnosticLevel,
    DocumentationModel,
    MemberKind,
    MethodRecord,
    Parameter,
    ParseTier,
    PropertyRecord,
    ReturnInfo,
)

__all__ = [
    "UNCATEGORIZED",
    "UNDOCUMENTED",
    "UNKNOWN_CLASS",
    "Access",
    "ClassInfo",
    "CommentBlock",
    "CommentKind",
    "Diagnostic",
    "DiagnosticLevel",
    "DocumentationModel",
    "MemberKind",
    "MethodRecord",
    "Parameter",
    "ParseTier",
    "PropertyRecord",
    "ReturnInfo",
]
