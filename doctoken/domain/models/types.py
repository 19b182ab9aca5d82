"""Type expression tree consumed by the type formatter.

Every node is a frozen dataclass. The tree is built by the caller and is
only ever read here; sequences are normalized to tuples on construction.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Set, Tuple, Union


class PrimitiveKind(Enum):
    """
    Enumeration of the primitive types.

    - BOOLEAN, NUMBER, STRING: the value primitives.
    - NULL: the null type.
    - VOID: the undefined type.
    - ALL: the universal type, written ``*``.
    - UNKNOWN: the unknown type, written ``?``.
    """

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    NULL = "null"
    VOID = "undefined"
    ALL = "*"
    UNKNOWN = "?"


@dataclass(frozen=True)
class PrimitiveType:
    kind: PrimitiveKind

    @property
    def name(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class NamedType:
    """A reference to a type by name that the compiler did not resolve."""

    name: str


@dataclass(frozen=True)
class InstanceType:
    """An instance of a known constructor, e.g. ``goog.Foo`` or ``Date``."""

    name: str


@dataclass(frozen=True)
class EnumElementType:
    """A value of an enum; rendered as the enum's underlying primitive."""

    name: str
    primitive: PrimitiveType


@dataclass(frozen=True)
class Parameter:
    type: "TypeNode"
    optional: bool = False
    variadic: bool = False


@dataclass(frozen=True)
class FunctionType:
    """A function signature.

    ``this_type`` is the receiver (``this:``) or, for constructors, the
    constructed type (``new:``). ``reference_name`` is only set for named
    function types such as the bare ``Function`` supertype.
    """

    parameters: Tuple[Parameter, ...] = ()
    return_type: Optional["TypeNode"] = None
    this_type: Optional["TypeNode"] = None
    is_constructor: bool = False
    reference_name: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))


@dataclass(frozen=True)
class UnionType:
    alternates: Tuple["TypeNode", ...]

    def __post_init__(self):
        object.__setattr__(self, "alternates", tuple(self.alternates))


@dataclass(frozen=True)
class RecordField:
    """A record property; a missing type renders as unknown."""

    name: str
    type: Optional["TypeNode"] = None


@dataclass(frozen=True)
class RecordType:
    fields: Tuple[RecordField, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))


@dataclass(frozen=True)
class TemplatizedType:
    """A generic type applied to arguments, e.g. ``Array<string>``."""

    base: "TypeNode"
    arguments: Tuple["TypeNode", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "arguments", tuple(self.arguments))


@dataclass(frozen=True)
class TemplateType:
    """A type variable such as ``T``."""

    name: str


@dataclass(frozen=True)
class NullableType:
    """An explicitly nullable type, written ``?T``."""

    type: "TypeNode"


@dataclass(frozen=True)
class NonNullableType:
    """An explicitly non-null type, written ``!T``."""

    type: "TypeNode"


@dataclass(frozen=True)
class NoType:
    """Internal bottom type. Never valid in an author-supplied expression."""


@dataclass(frozen=True)
class NoObjectType:
    """Internal bottom object type. Never valid in an author-supplied expression."""


TypeNode = Union[
    PrimitiveType,
    NamedType,
    InstanceType,
    EnumElementType,
    FunctionType,
    UnionType,
    RecordType,
    TemplatizedType,
    TemplateType,
    NullableType,
    NonNullableType,
    NoType,
    NoObjectType,
]

BOOLEAN_TYPE = PrimitiveType(PrimitiveKind.BOOLEAN)
NUMBER_TYPE = PrimitiveType(PrimitiveKind.NUMBER)
STRING_TYPE = PrimitiveType(PrimitiveKind.STRING)
NULL_TYPE = PrimitiveType(PrimitiveKind.NULL)
VOID_TYPE = PrimitiveType(PrimitiveKind.VOID)
ALL_TYPE = PrimitiveType(PrimitiveKind.ALL)
UNKNOWN_TYPE = PrimitiveType(PrimitiveKind.UNKNOWN)

_NULLABLE_KINDS = frozenset(
    [PrimitiveKind.NULL, PrimitiveKind.ALL, PrimitiveKind.UNKNOWN]
)


def is_null(node: TypeNode) -> bool:
    return isinstance(node, PrimitiveType) and node.kind is PrimitiveKind.NULL


def is_void(node: TypeNode) -> bool:
    return isinstance(node, PrimitiveType) and node.kind is PrimitiveKind.VOID


def is_unknown(node: TypeNode) -> bool:
    return isinstance(node, PrimitiveType) and node.kind is PrimitiveKind.UNKNOWN


def is_nullable(node: TypeNode) -> bool:
    """Whether ``null`` is assignable to the type.

    True for the null, universal and unknown types, for ``?T``, and for any
    union with a nullable alternate. ``!T`` is never nullable.
    """
    return _is_nullable(node, set())


def _is_nullable(node: TypeNode, seen: Set[int]) -> bool:
    if isinstance(node, PrimitiveType):
        return node.kind in _NULLABLE_KINDS
    if isinstance(node, NullableType):
        return True
    if isinstance(node, UnionType):
        if id(node) in seen:
            return False
        seen.add(id(node))
        return any(_is_nullable(alternate, seen) for alternate in node.alternates)
    return False
