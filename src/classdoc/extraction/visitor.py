"""Declaration visitor: locates the class node and its member declarations."""

from dataclasses import dataclass

from tree_sitter import Node

from classdoc.core import MemberKind
from classdoc.extraction.tree import iter_nodes, node_text

CLASS_NODE_TYPES = frozenset({"class_declaration", "class"})
FUNCTION_VALUE_TYPES = frozenset({
    "function",  # Older grammars name function expressions "function"
    "function_expression",
    "generator_function",
    "arrow_function",
})


@dataclass(frozen=True, slots=True)
class ClassDeclaration:
    """The primary class node and what its syntax says about it."""

    node: Node
    name: str
    extends_name: str

    @property
    def start_offset(self) -> int:
        return self.node.start_byte


@dataclass(frozen=True, slots=True)
class MemberDeclaration:
    """
    A method-like member found in the tree.

    `function_node` is the node that owns the parameter list: the
    method_definition itself, or the function value of a property.
    """

    kind: MemberKind
    node: Node
    function_node: Node
    name: str
    parameter_names: tuple[str, ...]
    is_static: bool
    is_async: bool
    is_constructor: bool

    @property
    def start_offset(self) -> int:
        return self.node.start_byte

    @property
    def start_row(self) -> int:
        return self.node.start_point[0]

    @property
    def end_row(self) -> int:
        return self.node.end_point[0]


def find_class(root: Node, source_bytes: bytes) -> ClassDeclaration | None:
    """Return the first class declaration or class expression in document order."""
    for node in iter_nodes(root):
        # The `class` keyword token shares its type with class expressions
        if node.type in CLASS_NODE_TYPES and node.is_named:
            return _class_declaration(node, source_bytes)
    return None


def find_members(root: Node, source_bytes: bytes) -> list[MemberDeclaration]:
    """Collect method definitions and function-valued properties in document order."""
    members: list[MemberDeclaration] = []
    for node in iter_nodes(root):
        if not node.is_named:
            continue
        match node.type:
            case "method_definition":
                members.append(_method_definition(node, source_bytes))
            case "pair":
                member = _function_property(node, "key", source_bytes)
                if member:
                    members.append(member)
            case "field_definition":
                member = _function_property(node, "property", source_bytes)
                if member:
                    members.append(member)
    return members


def _class_declaration(node: Node, source_bytes: bytes) -> ClassDeclaration:
    name_node = node.child_by_field_name("name")
    extends_name = ""
    for child in node.children:
        if child.type == "class_heritage":
            heritage = [c for c in child.named_children if c.type != "comment"]
            if heritage:
                extends_name = node_text(heritage[0], source_bytes)
            break
    return ClassDeclaration(
        node=node,
        name=node_text(name_node, source_bytes) if name_node else "",
        extends_name=extends_name,
    )


def _method_definition(node: Node, source_bytes: bytes) -> MemberDeclaration:
    name = _member_name(node.child_by_field_name("name"), source_bytes)
    is_static = _has_keyword(node, "static")
    return MemberDeclaration(
        kind=MemberKind.METHOD_DEFINITION,
        node=node,
        function_node=node,
        name=name,
        parameter_names=_parameter_names(node, source_bytes),
        is_static=is_static,
        is_async=_has_keyword(node, "async"),
        is_constructor=name == "constructor" and not is_static,
    )


def _function_property(node: Node, key_field: str, source_bytes: bytes) -> MemberDeclaration | None:
    """Build a member for `key: function () {}` or `field = () => {}`; None for other values."""
    value = node.child_by_field_name("value")
    if value is None or value.type not in FUNCTION_VALUE_TYPES:
        return None
    return MemberDeclaration(
        kind=MemberKind.FUNCTION_PROPERTY,
        node=node,
        function_node=value,
        name=_member_name(node.child_by_field_name(key_field), source_bytes),
        parameter_names=_parameter_names(value, source_bytes),
        is_static=_has_keyword(node, "static"),
        is_async=_has_keyword(value, "async"),
        is_constructor=False,
    )


def _member_name(name_node: Node | None, source_bytes: bytes) -> str:
    if name_node is None:
        return "anonymous"
    name = node_text(name_node, source_bytes)
    if name_node.type == "string":
        name = name[1:-1]
    return name or "anonymous"


def _has_keyword(node: Node, keyword: str) -> bool:
    return any(child.type == keyword for child in node.children)


def _parameter_names(function_node: Node, source_bytes: bytes) -> tuple[str, ...]:
    """Names of the formal parameters; types are never taken from declarations."""
    single = function_node.child_by_field_name("parameter")
    if single is not None:
        # Arrow function with one unparenthesized parameter: x => x * 2
        return (node_text(single, source_bytes),)

    params_node = function_node.child_by_field_name("parameters")
    if params_node is None:
        return ()

    names: list[str] = []
    for child in params_node.named_children:
        match child.type:
            case "comment":
                continue
            case "assignment_pattern":
                left = child.child_by_field_name("left")
                names.append(node_text(left or child, source_bytes))
            case _:
                names.append(node_text(child, source_bytes))
    return tuple(names)
