"""Tests for the JSDoc tag grammar."""

from classdoc.extraction.escaping import escape_markup, escape_prose
from classdoc.extraction.tags import ParamEntry, parse_tags, split_type


class TestParseTags:
    """Tests for parse_tags."""

    def test_param_with_dash(self):
        entries = parse_tags("* @param {Type} name - text")

        assert entries.params == (ParamEntry(name="name", type="Type", description="text"),)

    def test_params_keep_order(self):
        entries = parse_tags(
            """*
             * @param {String} first - The first
             * @param {Number} second The second
             """
        )

        assert [p.name for p in entries.params] == ["first", "second"]
        assert entries.params[1].description == "The second"

    def test_param_leading_hyphen_stripped_from_name(self):
        entries = parse_tags("* @param {String} -name the value")

        assert entries.params[0].name == "name"

    def test_param_without_name(self):
        entries = parse_tags("* @param {String}")

        assert entries.params[0].name == "unnamed"
        assert entries.params[0].type == "String"

    def test_param_without_braces_has_empty_type(self):
        entries = parse_tags("* @param value the value")

        assert entries.params[0] == ParamEntry(name="value", type="", description="the value")

    def test_param_type_with_spaces_is_escaped(self):
        entries = parse_tags("* @param {Array<string> | null} items - The items")

        assert entries.params[0].type == "Array&lt;string&gt; | null"
        assert entries.params[0].name == "items"

    def test_free_text_before_tags(self):
        entries = parse_tags(
            """*
             * Loads the resource.
             * Second line.
             *
             * @since 1.2
             """
        )

        assert entries.text == "Loads the resource.\nSecond line."
        assert entries.since == "1.2"
        assert entries.resolved_description == "Loads the resource.\nSecond line."

    def test_description_tag_wins_over_text(self):
        entries = parse_tags("*\n * Untagged\n * @description Tagged\n")

        assert entries.resolved_description == "Tagged"

    def test_returns(self):
        entries = parse_tags("* @returns {Promise<String>} The loaded data")

        assert entries.returns is not None
        assert entries.returns.type == "Promise&lt;String&gt;"
        assert entries.returns.description == "The loaded data"

    def test_return_alias(self):
        entries = parse_tags("* @return {Boolean}")

        assert entries.returns is not None
        assert entries.returns.type == "Boolean"
        assert entries.returns.description is None

    def test_empty_returns_is_dropped(self):
        entries = parse_tags("* @returns")

        assert entries.returns is None

    def test_throws_is_escaped(self):
        entries = parse_tags("* @throws Error when a < b")

        assert entries.throws == "Error when a &lt; b"

    def test_verbatim_tags(self):
        entries = parse_tags(
            """*
             * @class Renamed
             * @extends Base
             * @classdesc Does X
             * @category Loading
             * @default 42
             * @deprecated Use load()
             """
        )

        assert entries.class_name == "Renamed"
        assert entries.extends == "Base"
        assert entries.classdesc == "Does X"
        assert entries.category == "Loading"
        assert entries.default == "42"
        assert entries.deprecated == "Use load()"

    def test_multiline_example(self):
        entries = parse_tags(
            """*
             * @example
             * loader.load()
             * loader.reset()
             """
        )

        assert entries.example == "loader.load()\nloader.reset()"

    def test_member(self):
        entries = parse_tags("* @member {String} path - Path from index entry")

        assert entries.member is not None
        assert entries.member.name == "path"
        assert entries.member.type == "String"
        assert entries.member.description == "Path from index entry"

    def test_member_name_falls_back_to_type_name(self):
        entries = parse_tags("*\n * @type {Number} count\n * @member {Number}\n")

        assert entries.type is not None
        assert entries.type.name == "count"
        assert entries.member is not None
        assert entries.member.name == "count"

    def test_unknown_tag_is_recorded_not_raised(self):
        entries = parse_tags("* @module library.files\n * @since 3")

        assert entries.unknown_tags == ("module",)
        assert entries.since == "3"

    def test_empty_comment(self):
        entries = parse_tags("")

        assert entries.text == ""
        assert entries.params == ()
        assert entries.returns is None


class TestSplitType:
    """Tests for braced type splitting."""

    def test_nested_braces(self):
        assert split_type("{{a: string}} rest of it") == ("{a: string}", "rest of it")

    def test_no_type(self):
        assert split_type("name description") == ("", "name description")

    def test_unterminated(self):
        assert split_type("{String name") == ("String", "name")


class TestEscaping:
    """Tests for markup escaping."""

    def test_escape_markup(self):
        assert escape_markup("""<a href="x">&'</a>""") == (
            "&lt;a href=&quot;x&quot;&gt;&amp;&#039;&lt;/a&gt;"
        )

    def test_escape_none(self):
        assert escape_markup(None) == ""

    def test_escape_prose_code_and_tabs(self):
        assert escape_prose("Use ```a < b``` here\tnow") == (
            "Use <code>a &lt; b</code> here&#9;now"
        )
