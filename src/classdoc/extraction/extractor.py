"""Extraction pipeline: parse, associate, build records, categorize."""

from classdoc.config import get_settings
from classdoc.core import (
    ClassInfo,
    DocumentationModel,
    MethodRecord,
    ParseTier,
    PropertyRecord,
)
from classdoc.extraction import fallback
from classdoc.extraction.categorize import group_by_category, scan_properties
from classdoc.extraction.context import ExtractionContext
from classdoc.extraction.records import RecordBuilder
from classdoc.extraction.tree import ParsedTree, TreeBuilder, Unparseable
from classdoc.extraction.visitor import find_class, find_members
from classdoc.logging import get_logger

logger = get_logger(__name__)


class ClassDocExtractor:
    """
    Extracts a DocumentationModel from the source of one JavaScript class.

    Tries, in order: a full tree-sitter parse, a re-parse of the class
    re-synthesized from a wrapped class expression, and a regex-only
    pass. `extract` never raises; problems are reported as diagnostics
    on the returned model.

    One extractor owns one tree-sitter parser. Use separate extractors
    for concurrent extractions.
    """

    def __init__(self, enable_recovery: bool | None = None) -> None:
        if enable_recovery is None:
            enable_recovery = get_settings().enable_recovery
        self._tree_builder = TreeBuilder(enable_recovery=enable_recovery)

    def extract(self, source_code: str, source_path: str) -> DocumentationModel:
        """
        Extract documentation from class source text.

        Args:
            source_code: The raw JavaScript source containing one class.
            source_path: Opaque label carried into ClassInfo.source_path.

        Returns:
            DocumentationModel for the class, possibly a minimal one.
        """
        ctx = ExtractionContext(source_path)
        logger.debug("extraction_started", source_path=source_path, size=len(source_code))

        try:
            result = self._tree_builder.build(source_code, ctx)
        except Exception as e:
            ctx.error("tree_builder_crashed", str(e))
            result = Unparseable(reason=str(e))

        match result:
            case ParsedTree():
                model = self._from_tree(result, source_code, source_path, ctx)
            case Unparseable():
                model = None

        if model is None:
            model = self._fallback(source_code, source_path, ctx)

        logger.info(
            "extraction_completed",
            source_path=source_path,
            tier=model.tier.value,
            class_name=model.class_info.class_name,
            methods=model.method_count,
            properties=sum(len(p) for p in model.properties_by_category.values()),
            diagnostics=len(model.diagnostics),
        )
        return model

    def _from_tree(
        self,
        parsed: ParsedTree,
        source_code: str,
        source_path: str,
        ctx: ExtractionContext,
    ) -> DocumentationModel | None:
        """Build the model from a parsed tree; None sends the run to the regex tier."""
        try:
            builder = RecordBuilder(parsed, source_path, ctx)
            class_info = builder.build_class_info(find_class(parsed.root, parsed.source_bytes))

            methods: list[MethodRecord] = []
            for member in find_members(parsed.root, parsed.source_bytes):
                try:
                    methods.append(builder.build_method(member, class_info))
                except Exception as e:
                    ctx.error(
                        "member_processing_failed",
                        f"Error parsing method {member.name}: {e}",
                        member=member.name,
                        kind=member.kind.value,
                    )

            properties = scan_properties(source_code, ctx)
        except Exception as e:
            ctx.error("tree_processing_failed", str(e), tier=parsed.tier.value)
            return None

        return self._assemble(class_info, methods, properties, parsed.tier, ctx)

    def _fallback(
        self,
        source_code: str,
        source_path: str,
        ctx: ExtractionContext,
    ) -> DocumentationModel:
        """Regex-only extraction. Always returns a model."""
        ctx.info("fallback_parsing", "Entering fallback parsing mode")
        class_info = fallback.extract_class_info(source_code, source_path, ctx)
        methods = fallback.extract_methods(source_code)
        properties = scan_properties(source_code, ctx)
        return self._assemble(class_info, methods, properties, ParseTier.FALLBACK, ctx)

    def _assemble(
        self,
        class_info: ClassInfo,
        methods: list[MethodRecord],
        properties: list[PropertyRecord],
        tier: ParseTier,
        ctx: ExtractionContext,
    ) -> DocumentationModel:
        return DocumentationModel(
            class_info=class_info,
            methods=tuple(methods),
            properties_by_category=group_by_category(properties),
            methods_by_category=group_by_category(methods),
            tier=tier,
            diagnostics=tuple(ctx.diagnostics),
        )


def extract(source_code: str, source_path: str) -> DocumentationModel:
    """Extract documentation with a fresh extractor."""
    return ClassDocExtractor().extract(source_code, source_path)
