"""Serialize a DocumentationModel into the class documentation markup."""

from collections.abc import Iterable

from classdoc.core import (
    UNCATEGORIZED,
    UNDOCUMENTED,
    DocumentationModel,
    MethodRecord,
    PropertyRecord,
)
from classdoc.extraction.categorize import group_by_category
from classdoc.extraction.escaping import escape_markup


def render_markup(model: DocumentationModel) -> str:
    """
    Render the full `<class>` document.

    Static methods go under <classMethods>, the rest under
    <instanceMethods>; both sections and <properties> are grouped by
    category. Empty sections are omitted.
    """
    info = model.class_info
    path = escape_markup(info.source_path)
    parts = [
        "<class>\n",
        "<classInfo>\n",
        f"<className>{escape_markup(info.class_name)}</className>\n",
        f"<extends>{escape_markup(info.extends_name)}</extends>\n",
        f'<filePath><a href="{path}">{path}</a></filePath>\n',
        # Descriptions are escaped when the model is built
        f"<description>{info.description}</description>\n",
        "</classInfo>\n",
        _section("properties", model.properties_by_category, _render_property),
        _section("classMethods", group_by_category(model.class_methods), _render_method),
        _section("instanceMethods", group_by_category(model.instance_methods), _render_method),
        "</class>\n",
    ]
    return "".join(parts)


def _section(name: str, groups: dict[str, tuple], render_item) -> str:
    categories = [
        _render_category(category, items, render_item)
        for category, items in groups.items()
        if items
    ]
    if not categories:
        return ""
    return f"<{name}>\n{''.join(categories)}</{name}>\n"


def _render_category(category: str, items: Iterable, render_item) -> str:
    xml = "<category>\n"
    if category != UNCATEGORIZED:
        xml += f"<name>{escape_markup(category)}</name>\n"
    xml += "".join(render_item(item) for item in items)
    xml += "</category>\n"
    return xml


def _render_method(method: MethodRecord) -> str:
    async_attr = ' async="true"' if method.is_async else ""
    xml = "<method>\n"
    xml += f'  <name class="collapsible">{escape_markup(method.name)}</name>\n'
    xml += (
        f'  <fullMethodName class="collapsible"{async_attr}>'
        f"{escape_markup(method.signature)}</fullMethodName>\n"
    )
    xml += '  <div class="collapsible-content">\n'
    xml += "    <methodinfo>\n"
    xml += '      <div class="method-info-content">\n'
    xml += f"      <lineNumberStart>{method.start_line}</lineNumberStart>\n"
    xml += f"      <lineNumberEnd>{method.end_line}</lineNumberEnd>\n"

    if method.parameters:
        xml += "  <params>\n"
        for param in method.parameters:
            xml += "    <param>\n"
            xml += f"      <paramname>{escape_markup(param.name)}</paramname>\n"
            xml += f"      <paramtype>{param.type}</paramtype>\n"
            if param.description:
                xml += f"      <description>{param.description}</description>\n"
            xml += "    </param>\n"
        xml += "  </params>\n"

    if method.description:
        xml += f"  <description>{method.description}</description>\n"
    elif method.returns is None:
        xml += f"  <description>{UNDOCUMENTED}</description>\n"

    if method.returns is not None:
        xml += "  <returns>\n"
        xml += f"    <returntype>{method.returns.type}</returntype>\n"
        if method.returns.description:
            xml += f"    <description>{method.returns.description}</description>\n"
        xml += "  </returns>\n"

    xml += f"  <isAsync>{_bool(method.is_async)}</isAsync>\n"
    xml += f"  <access>{method.access.value}</access>\n"
    xml += f"  <isStatic>{_bool(method.is_static)}</isStatic>\n"
    for tag, value in (
        ("example", method.example),
        ("deprecated", method.deprecated),
        ("since", method.since),
    ):
        if value:
            xml += f"  <{tag}>{escape_markup(value)}</{tag}>\n"
    if method.throws:
        xml += f"  <throws>{method.throws}</throws>\n"
    xml += f"  <category>{escape_markup(method.category)}</category>\n"

    xml += '      <div class="source-wrapper">\n'
    xml += '        <div class="source-toggle collapsible">source</div>\n'
    xml += (
        '        <methodsource class="collapsible-content">'
        f"{escape_markup(method.source_text)}</methodsource>\n"
    )
    xml += "      </div>\n"
    xml += "      </div>\n"
    xml += "    </methodinfo>\n"
    xml += "  </div>\n"
    xml += "</method>\n"
    return xml


def _render_property(prop: PropertyRecord) -> str:
    xml = "<property>\n"
    xml += f"  <propertyname>{escape_markup(prop.name)}</propertyname>\n"
    xml += f"  <propertytype>{prop.type}</propertytype>\n"
    xml += f"  <description>{prop.description}</description>\n"
    xml += f"  <category>{escape_markup(prop.category)}</category>\n"
    if prop.default is not None:
        xml += f"  <default>{escape_markup(prop.default)}</default>\n"
    xml += "</property>\n"
    return xml


def _bool(value: bool) -> str:
    return "true" if value else "false"
