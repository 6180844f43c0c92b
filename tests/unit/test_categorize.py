"""Tests for property scanning and category grouping."""

from classdoc.core import UNCATEGORIZED, UNDOCUMENTED, Access, MethodRecord
from classdoc.extraction.categorize import group_by_category, scan_properties
from classdoc.extraction.context import ExtractionContext


def _record(name: str, category: str = UNCATEGORIZED) -> MethodRecord:
    return MethodRecord(name=name, signature=f"{name}()", access=Access.PUBLIC, category=category)


class TestScanProperties:
    """Tests for scan_properties."""

    def test_member_comments_become_properties(self):
        code = """
/**
 * @member {String} name - Display name
 * @category Identity
 * @default "anon"
 */
/**
 * Not a property.
 */
"""
        properties = scan_properties(code, ExtractionContext("x.js"))

        assert len(properties) == 1
        prop = properties[0]
        assert prop.name == "name"
        assert prop.type == "String"
        assert prop.description == "Display name"
        assert prop.category == "Identity"
        assert prop.default == '"anon"'

    def test_description_priority(self):
        code = """
/**
 * @member {Number} a - from member
 * @description from tag
 */
/**
 * Free text wins over nothing.
 * @member {Number} b
 */
/** @member {Number} c */
"""
        a, b, c = scan_properties(code, ExtractionContext("x.js"))

        assert a.description == "from tag"
        assert b.description == "Free text wins over nothing."
        assert c.description == UNDOCUMENTED
        assert c.category == UNCATEGORIZED
        assert c.default is None

    def test_works_on_unparseable_text(self):
        code = "/** @member {Object} data - Raw data */ class {{{"
        properties = scan_properties(code, ExtractionContext("x.js"))

        assert [p.name for p in properties] == ["data"]

    def test_unknown_tags_on_properties_are_reported(self):
        ctx = ExtractionContext("x.js")
        scan_properties("/** @member {String} s\n * @readonly */", ctx)

        assert [d.event for d in ctx.diagnostics] == ["unknown_tag"]


class TestGroupByCategory:
    """Tests for group_by_category."""

    def test_first_seen_order(self):
        records = [
            _record("a", "Loading"),
            _record("b"),
            _record("c", "Loading"),
            _record("d", "Factory"),
        ]

        groups = group_by_category(records)

        assert list(groups) == ["Loading", UNCATEGORIZED, "Factory"]
        assert [r.name for r in groups["Loading"]] == ["a", "c"]

    def test_empty(self):
        assert group_by_category([]) == {}
