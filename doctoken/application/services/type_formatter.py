"""Service for rendering type expression trees as linked token streams."""

import logging
from typing import Dict, List, Optional, Set, Tuple, Type, get_args

from doctoken.application.interfaces.ilink_resolver import ILinkResolver
from doctoken.application.services.exceptions import (
    MissingExternLinkError,
    UnsupportedTypeError,
)
from doctoken.domain.models.comment import Comment, Token
from doctoken.domain.models.types import (
    EnumElementType,
    FunctionType,
    InstanceType,
    NamedType,
    NonNullableType,
    NoObjectType,
    NoType,
    NullableType,
    PrimitiveKind,
    PrimitiveType,
    RecordType,
    TemplatizedType,
    TemplateType,
    TypeNode,
    UnionType,
    is_null,
    is_nullable,
    is_unknown,
    is_void,
)

# Primitives documented by an external reference rather than the registry.
NATIVE_KINDS = frozenset(
    [
        PrimitiveKind.BOOLEAN,
        PrimitiveKind.NUMBER,
        PrimitiveKind.STRING,
        PrimitiveKind.NULL,
        PrimitiveKind.VOID,
    ]
)

_COMPOSITE_TYPES = (
    FunctionType,
    UnionType,
    RecordType,
    TemplatizedType,
    NullableType,
    NonNullableType,
)


class _TypeRenderer:
    """Renders a single type expression as the compiler resolved it.

    Plain text accumulates in a buffer that is flushed as a literal token
    whenever a link is emitted, so linked and unlinked runs keep their order.
    """

    def __init__(self, resolver: ILinkResolver, logger: logging.Logger):
        self.resolver = resolver
        self.logger = logger
        self.tokens: List[Token] = []
        self.current_text = ""
        # Composite nodes on the current visit path, by identity.
        self.path: Set[int] = set()

    def render(self, node: TypeNode) -> Comment:
        self.visit(node)
        self.flush()
        return Comment(self.tokens)

    def flush(self) -> None:
        if self.current_text:
            self.tokens.append(Token(text=self.current_text, is_literal=True))
            self.current_text = ""

    def append_text(self, text: str) -> None:
        self.current_text += text

    def append_link(self, text: str, href: str) -> None:
        self.flush()
        self.tokens.append(Token(text=text, href=href))

    def append_name(self, name: str) -> None:
        href = self.resolver.resolve(name) or self.resolver.resolve_external(name)
        if href:
            self.append_link(name, href)
        else:
            self.append_text(name)

    def append_native_type(self, name: str) -> None:
        href = self.resolver.resolve_external(name)
        if href is None:
            raise MissingExternLinkError(f"No extern link for native type {name}")
        self.append_link(name, href)

    def visit(self, node: TypeNode) -> None:
        handler = _HANDLERS.get(type(node))
        if handler is None:
            raise UnsupportedTypeError(f"Unexpected node in type expression: {node!r}")

        if not isinstance(node, _COMPOSITE_TYPES):
            getattr(self, handler)(node)
            return

        key = id(node)
        if key in self.path:
            self.logger.debug(f"Recursive reference to {type(node).__name__}")
            self.append_text("?")
            return
        self.path.add(key)
        try:
            getattr(self, handler)(node)
        finally:
            self.path.discard(key)

    def visit_primitive(self, node: PrimitiveType) -> None:
        if node.kind in NATIVE_KINDS:
            self.append_native_type(node.name)
        else:
            self.append_text(node.name)

    def visit_named(self, node: NamedType) -> None:
        href = self.resolver.resolve(node.name)
        if href:
            self.append_link(node.name, href)
        else:
            self.append_text(node.name)

    def visit_instance(self, node: InstanceType) -> None:
        self.append_name(node.name)

    def visit_enum_element(self, node: EnumElementType) -> None:
        self.visit(node.primitive)

    def visit_nullable(self, node: NullableType) -> None:
        if not is_nullable(node.type):
            self.append_text("?")
        self.visit(node.type)

    def visit_non_nullable(self, node: NonNullableType) -> None:
        # Resolved object types are non-null unless marked otherwise.
        self.visit(node.type)

    def visit_function(self, node: FunctionType) -> None:
        if node.reference_name == "Function":
            self.append_text("Function")
            return

        self.append_text("function(")

        context = None
        if node.is_constructor and node.this_type is not None:
            context = "new: "
        elif node.this_type is not None and not is_unknown(node.this_type):
            context = "this: "
        if context is not None:
            self.append_text(context)
            self.visit(node.this_type)
            if node.parameters:
                self.append_text(", ")

        for i, parameter in enumerate(node.parameters):
            if i:
                self.append_text(", ")
            if parameter.variadic:
                self.append_text("...")
            if isinstance(parameter.type, UnionType):
                self.visit_union(parameter.type, filter_void=parameter.optional)
            else:
                self.visit(parameter.type)
            if parameter.optional:
                self.append_text("=")

        self.append_text(")")

        if node.return_type is not None:
            self.append_text(": ")
            self.visit(node.return_type)

    def visit_record(self, node: RecordType) -> None:
        self.append_text("{")
        for i, record_field in enumerate(node.fields):
            if i:
                self.append_text(", ")
            self.append_text(f"{self.field_name(record_field.name)}: ")
            if record_field.type is None:
                self.append_text("?")
            else:
                self.visit(record_field.type)
        self.append_text("}")

    def field_name(self, name: str) -> str:
        return name

    def flatten_union(
        self, node: UnionType, seen: Set[int]
    ) -> Tuple[List[TypeNode], bool]:
        """Collect the alternates of nested unions and ``?T`` alternates.

        Returns:
            The flattened alternates and whether any of them is nullable
        """
        alternates: List[TypeNode] = []
        nullable = False
        for alternate in node.alternates:
            if isinstance(alternate, NullableType):
                nullable = True
                alternate = alternate.type
            if isinstance(alternate, UnionType) and id(alternate) not in seen:
                seen.add(id(alternate))
                nested, nested_nullable = self.flatten_union(alternate, seen)
                seen.discard(id(alternate))
                alternates.extend(nested)
                nullable = nullable or nested_nullable
            else:
                nullable = nullable or is_nullable(alternate)
                alternates.append(alternate)
        return alternates, nullable

    def visit_union(self, node: UnionType, filter_void: bool = False) -> None:
        flattened, nullable = self.flatten_union(node, self.path | {id(node)})
        alternates = [
            alternate
            for alternate in flattened
            if not is_null(alternate) and not (filter_void and is_void(alternate))
        ]
        if len(alternates) != len(flattened):
            self.logger.debug(
                f"Simplified union of {len(flattened)} alternates to {len(alternates)}"
            )
        if not alternates:
            alternates = flattened

        if nullable:
            self.append_text("?")

        if len(alternates) == 1:
            self.visit(alternates[0])
            return

        self.append_text("(")
        for i, alternate in enumerate(alternates):
            if i:
                self.append_text("|")
            self.visit(alternate)
        self.append_text(")")

    def visit_templatized(self, node: TemplatizedType) -> None:
        self.visit(node.base)
        self.append_text("<")
        for i, argument in enumerate(node.arguments):
            if i:
                self.append_text(", ")
            self.visit(argument)
        self.append_text(">")

    def visit_template(self, node: TemplateType) -> None:
        self.append_text(node.name)

    def visit_placeholder(self, node: TypeNode) -> None:
        raise UnsupportedTypeError(
            f"{type(node).__name__} cannot appear in a type expression"
        )


class _DeclaredTypeRenderer(_TypeRenderer):
    """Renders a type expression the way its author wrote it.

    Nothing is simplified: ``!`` and ``?`` markers are kept, unions are
    always parenthesized and every name is offered to the resolver.
    """

    def visit_primitive(self, node: PrimitiveType) -> None:
        if node.kind is PrimitiveKind.VOID:
            self.append_text("void")
        elif node.kind in NATIVE_KINDS:
            self.append_name(node.name)
        else:
            self.append_text(node.name)

    def visit_named(self, node: NamedType) -> None:
        self.append_name(node.name)

    def visit_enum_element(self, node: EnumElementType) -> None:
        self.append_name(node.name)

    def visit_template(self, node: TemplateType) -> None:
        self.append_name(node.name)

    def visit_nullable(self, node: NullableType) -> None:
        self.append_text("?")
        self.visit(node.type)

    def visit_non_nullable(self, node: NonNullableType) -> None:
        self.append_text("!")
        self.visit(node.type)

    def visit_function(self, node: FunctionType) -> None:
        if node.reference_name == "Function":
            self.append_name("Function")
            return

        self.append_text("function(")
        first = True
        if node.this_type is not None:
            self.append_text("new: " if node.is_constructor else "this: ")
            self.visit(node.this_type)
            first = False

        for parameter in node.parameters:
            if not first:
                self.append_text(", ")
            first = False
            if parameter.variadic:
                self.append_text("...")
            self.visit(parameter.type)
            if parameter.optional:
                self.append_text("=")
        self.append_text(")")

        if node.return_type is not None:
            self.append_text(": ")
            self.visit(node.return_type)

    def field_name(self, name: str) -> str:
        if len(name) >= 2 and name[0] in "'\"":
            return name[1:-1]
        return name

    def visit_union(self, node: UnionType, filter_void: bool = False) -> None:
        self.append_text("(")
        for i, alternate in enumerate(node.alternates):
            if i:
                self.append_text("|")
            self.visit(alternate)
        self.append_text(")")


# Handler method names; both renderers dispatch through the same table.
_HANDLERS: Dict[Type, str] = {
    PrimitiveType: "visit_primitive",
    NamedType: "visit_named",
    InstanceType: "visit_instance",
    EnumElementType: "visit_enum_element",
    FunctionType: "visit_function",
    UnionType: "visit_union",
    RecordType: "visit_record",
    TemplatizedType: "visit_templatized",
    TemplateType: "visit_template",
    NullableType: "visit_nullable",
    NonNullableType: "visit_non_nullable",
    NoType: "visit_placeholder",
    NoObjectType: "visit_placeholder",
}

_UNHANDLED = set(get_args(TypeNode)) ^ set(_HANDLERS)
if _UNHANDLED:
    raise TypeError(
        "Type node handlers out of sync: "
        + ", ".join(sorted(cls.__name__ for cls in _UNHANDLED))
    )


class TypeExpressionFormatter:
    """
    A service that renders TypeNode trees as Comments.

    ``format`` renders the type as the compiler resolved it, simplifying
    unions. ``format_declared`` renders it as written in the source.
    Named types are linked through the resolver; native primitives are
    linked through the resolver's external references.
    """

    def __init__(self, resolver: ILinkResolver):
        """Initialize the formatter.

        Args:
            resolver: Resolver used for named and native types
        """
        self.resolver = resolver
        self.logger = logging.getLogger(__name__)

    def format(self, node: Optional[TypeNode]) -> Comment:
        """Render a resolved type expression.

        Args:
            node: Root of the type expression, or None

        Returns:
            The rendered tokens; empty for None

        Raises:
            UnsupportedTypeError: If the tree holds an internal placeholder
                type or an object that is not a type node
            MissingExternLinkError: If the resolver has no external reference
                for a native primitive
        """
        if node is None:
            return Comment.empty()
        return _TypeRenderer(self.resolver, self.logger).render(node)

    def format_declared(self, node: Optional[TypeNode]) -> Comment:
        """Render a type expression with the author's declared syntax.

        Missing external references are not an error here; unlinked names
        render as plain text.

        Raises:
            UnsupportedTypeError: If the tree holds an internal placeholder
                type or an object that is not a type node
        """
        if node is None:
            return Comment.empty()
        return _DeclaredTypeRenderer(self.resolver, self.logger).render(node)


def format_type(node: Optional[TypeNode], resolver: ILinkResolver) -> Comment:
    """Render a type expression with a one-off TypeExpressionFormatter."""
    return TypeExpressionFormatter(resolver).format(node)


def format_declared_type(node: Optional[TypeNode], resolver: ILinkResolver) -> Comment:
    """Render a declared type expression with a one-off TypeExpressionFormatter."""
    return TypeExpressionFormatter(resolver).format_declared(node)
