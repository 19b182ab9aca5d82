"""
Domain models package.
"""

from .comment import Comment, LinkInfo, Token
from .types import (
    ALL_TYPE,
    BOOLEAN_TYPE,
    NULL_TYPE,
    NUMBER_TYPE,
    STRING_TYPE,
    UNKNOWN_TYPE,
    VOID_TYPE,
    EnumElementType,
    FunctionType,
    InstanceType,
    NamedType,
    NonNullableType,
    NoObjectType,
    NoType,
    NullableType,
    Parameter,
    PrimitiveKind,
    PrimitiveType,
    RecordField,
    RecordType,
    TemplateType,
    TemplatizedType,
    TypeNode,
    UnionType,
)

__all__ = [
    "Comment",
    "LinkInfo",
    "Token",
    "ALL_TYPE",
    "BOOLEAN_TYPE",
    "NULL_TYPE",
    "NUMBER_TYPE",
    "STRING_TYPE",
    "UNKNOWN_TYPE",
    "VOID_TYPE",
    "EnumElementType",
    "FunctionType",
    "InstanceType",
    "NamedType",
    "NonNullableType",
    "NoObjectType",
    "NoType",
    "NullableType",
    "Parameter",
    "PrimitiveKind",
    "PrimitiveType",
    "RecordField",
    "RecordType",
    "TemplateType",
    "TemplatizedType",
    "TypeNode",
    "UnionType",
]
