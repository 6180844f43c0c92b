"""Last-resort regex extraction for sources no tree can be built from."""

import re

from classdoc.core import (
    UNKNOWN_CLASS,
    ClassInfo,
    MemberKind,
    MethodRecord,
    Parameter,
)
from classdoc.extraction.context import ExtractionContext
from classdoc.extraction.records import build_signature, derive_access

FALLBACK_CLASS_DESCRIPTION = (
    "Unable to fully parse the class due to syntax errors. Fallback parsing applied."
)
FALLBACK_METHOD_DESCRIPTION = "Method extracted during fallback parsing."
FALLBACK_PARAM_DESCRIPTION = "Parameter extracted during fallback parsing."
FALLBACK_PARAM_TYPE = "unknown"

_CLASS_NAME = re.compile(r"class\s+(\w+)")
_METHOD_SIGNATURE = re.compile(r"(static\s+)?(\w+)\s*\(([^)]*)\)\s*\{")

# Control-flow statements share the `name (...) {` shape.
_NOT_METHOD_NAMES = frozenset({"if", "for", "while", "switch", "catch", "with", "function"})


def extract_class_info(source_code: str, source_path: str, ctx: ExtractionContext) -> ClassInfo:
    """Class name from the first `class Name`, else "Unknown"."""
    match = _CLASS_NAME.search(source_code)
    if match:
        class_name = match.group(1)
        ctx.info("fallback_class_found", f"Found class name {class_name}", class_name=class_name)
    else:
        class_name = UNKNOWN_CLASS
        ctx.warn("fallback_class_not_found", "Could not determine class name")
    return ClassInfo(
        class_name=class_name,
        extends_name="",
        source_path=source_path,
        description=FALLBACK_CLASS_DESCRIPTION,
    )


def extract_methods(source_code: str) -> list[MethodRecord]:
    """
    Every `[static] name(params) {` occurrence, in source order,
    skipping control-flow statements.

    Comments are never associated here: descriptions are fixed strings
    and parameter types are "unknown".
    """
    methods: list[MethodRecord] = []
    for match in _METHOD_SIGNATURE.finditer(source_code):
        is_static = bool(match.group(1))
        name = match.group(2)
        if name in _NOT_METHOD_NAMES:
            continue
        raw_params = match.group(3)
        parameter_names = [p.strip() for p in raw_params.split(",") if p.strip()]
        line = source_code.count("\n", 0, match.start(2)) + 1

        methods.append(
            MethodRecord(
                name=name,
                signature=build_signature(name, parameter_names),
                access=derive_access(name, is_static, name == "constructor" and not is_static),
                is_static=is_static,
                parameters=tuple(
                    Parameter(
                        name=param,
                        type=FALLBACK_PARAM_TYPE,
                        description=FALLBACK_PARAM_DESCRIPTION,
                    )
                    for param in parameter_names
                ),
                description=FALLBACK_METHOD_DESCRIPTION,
                start_line=line,
                end_line=line,
                source_text=match.group(0).strip(),
                kind=MemberKind.FALLBACK,
            )
        )
    return methods
