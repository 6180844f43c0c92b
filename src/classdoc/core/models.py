"""Core domain models - pure Python dataclasses with no framework dependencies."""

from dataclasses import dataclass, field
from enum import StrEnum

UNDOCUMENTED = "Undocumented"
UNCATEGORIZED = "Uncategorized"
UNKNOWN_CLASS = "Unknown"


class CommentKind(StrEnum):
    """Kinds of comment trivia produced by the tree builder."""

    BLOCK = "block"  # /* ... */ and /** ... */
    LINE = "line"  # // ...


class Access(StrEnum):
    """Access level of a documented method, in derivation priority order."""

    CONSTRUCTOR = "constructor"
    STATIC = "static"
    PRIVATE = "private"  # Leading underscore (or #private) naming convention
    PUBLIC = "public"


class MemberKind(StrEnum):
    """Declaration kinds that produce method records."""

    METHOD_DEFINITION = "method_definition"
    FUNCTION_PROPERTY = "function_property"  # Object pair or class field holding a function
    FALLBACK = "fallback"  # Regex match from the last-resort tier


class ParseTier(StrEnum):
    """Which extraction tier produced a documentation model."""

    PARSED = "parsed"
    RECOVERED = "recovered"
    FALLBACK = "fallback"


class DiagnosticLevel(StrEnum):
    """Severity of a diagnostic record."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A structured warning or error raised while extracting documentation."""

    level: DiagnosticLevel
    event: str  # e.g., "unknown_tag", "tree_build_failed"
    message: str
    fields: dict[str, str | int | bool] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class CommentBlock:
    """
    A comment collected while building the syntax tree.

    `text` excludes the comment delimiters, so a JSDoc comment's text
    starts with the extra asterisk. Offsets are byte offsets.
    """

    kind: CommentKind
    text: str
    start_offset: int
    end_offset: int

    def __post_init__(self) -> None:
        if self.end_offset < self.start_offset:
            raise ValueError("end_offset must be >= start_offset")

    @property
    def is_doc_comment(self) -> bool:
        """True for JSDoc-style comments (`/** ... */`)."""
        return self.kind == CommentKind.BLOCK and self.text.strip().startswith("*")


@dataclass(frozen=True, slots=True)
class Parameter:
    """A documented method parameter."""

    name: str
    type: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class ReturnInfo:
    """Documented return value of a method."""

    type: str
    description: str | None = None


@dataclass(frozen=True, slots=True)
class ClassInfo:
    """Metadata about the documented class."""

    class_name: str
    extends_name: str
    source_path: str
    description: str = UNDOCUMENTED

    def __post_init__(self) -> None:
        if not self.description:
            raise ValueError("ClassInfo description cannot be empty")


@dataclass(frozen=True, slots=True)
class MethodRecord:
    """
    Documentation for one method-like member of the class.

    Immutable once built; `signature` is the name plus declared
    parameter names, e.g. "load(path, options)".
    """

    name: str
    signature: str
    access: Access
    is_async: bool = False
    is_static: bool = False
    parameters: tuple[Parameter, ...] = ()
    description: str = UNDOCUMENTED
    returns: ReturnInfo | None = None
    throws: str | None = None
    example: str | None = None
    deprecated: str | None = None
    since: str | None = None
    category: str = UNCATEGORIZED
    # Position information (1-indexed, like most editors)
    start_line: int = 1
    end_line: int = 1
    source_text: str = ""
    kind: MemberKind = MemberKind.METHOD_DEFINITION

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("MethodRecord name cannot be empty")
        if not self.category:
            raise ValueError("MethodRecord category cannot be empty")
        if self.start_line < 1:
            raise ValueError("start_line must be >= 1")
        if self.end_line < self.start_line:
            raise ValueError("end_line must be >= start_line")


@dataclass(frozen=True, slots=True)
class PropertyRecord:
    """Documentation for a property declared through an `@member` comment."""

    name: str
    type: str
    description: str = UNDOCUMENTED
    category: str = UNCATEGORIZED
    default: str | None = None


@dataclass(frozen=True, slots=True)
class DocumentationModel:
    """
    Result of extracting documentation from one class source.

    Owns every record it holds; nothing is shared between models.
    """

    class_info: ClassInfo
    methods: tuple[MethodRecord, ...] = ()
    properties_by_category: dict[str, tuple[PropertyRecord, ...]] = field(default_factory=dict)
    methods_by_category: dict[str, tuple[MethodRecord, ...]] = field(default_factory=dict)
    tier: ParseTier = ParseTier.PARSED
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def class_methods(self) -> tuple[MethodRecord, ...]:
        """Static methods, in declaration order."""
        return tuple(m for m in self.methods if m.is_static)

    @property
    def instance_methods(self) -> tuple[MethodRecord, ...]:
        """Non-static methods, in declaration order."""
        return tuple(m for m in self.methods if not m.is_static)

    @property
    def has_errors(self) -> bool:
        return any(d.level == DiagnosticLevel.ERROR for d in self.diagnostics)

    @property
    def method_count(self) -> int:
        return len(self.methods)
