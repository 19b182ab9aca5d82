from doctoken.domain.models import (
    ALL_TYPE,
    NULL_TYPE,
    NUMBER_TYPE,
    STRING_TYPE,
    UNKNOWN_TYPE,
    VOID_TYPE,
    FunctionType,
    NamedType,
    NonNullableType,
    NullableType,
    Parameter,
    PrimitiveKind,
    RecordField,
    RecordType,
    TemplatizedType,
    UnionType,
)
from doctoken.domain.models.types import is_null, is_nullable, is_unknown, is_void


def test_primitive_names():
    assert STRING_TYPE.name == "string"
    assert VOID_TYPE.name == "undefined"
    assert ALL_TYPE.name == "*"
    assert UNKNOWN_TYPE.name == "?"
    assert NULL_TYPE.kind is PrimitiveKind.NULL


def test_sequences_are_normalized_to_tuples():
    union = UnionType([STRING_TYPE, NUMBER_TYPE])
    assert union.alternates == (STRING_TYPE, NUMBER_TYPE)

    func = FunctionType(parameters=[Parameter(STRING_TYPE)])
    assert isinstance(func.parameters, tuple)

    record = RecordType([RecordField("a", STRING_TYPE)])
    assert isinstance(record.fields, tuple)

    generic = TemplatizedType(NamedType("Array"), [STRING_TYPE])
    assert generic.arguments == (STRING_TYPE,)


def test_nodes_compare_by_value():
    assert UnionType([STRING_TYPE, NULL_TYPE]) == UnionType((STRING_TYPE, NULL_TYPE))
    assert NamedType("a.B") != NamedType("a.C")


def test_predicates():
    assert is_null(NULL_TYPE)
    assert not is_null(VOID_TYPE)
    assert is_void(VOID_TYPE)
    assert is_unknown(UNKNOWN_TYPE)
    assert not is_unknown(NamedType("?"))


def test_nullability():
    assert is_nullable(NULL_TYPE)
    assert is_nullable(ALL_TYPE)
    assert is_nullable(UNKNOWN_TYPE)
    assert not is_nullable(STRING_TYPE)
    assert not is_nullable(VOID_TYPE)
    assert not is_nullable(NamedType("goog.Foo"))
    assert is_nullable(UnionType([STRING_TYPE, NULL_TYPE]))
    assert not is_nullable(UnionType([STRING_TYPE, VOID_TYPE]))


def test_nullability_modifiers():
    assert is_nullable(NullableType(STRING_TYPE))
    assert not is_nullable(NonNullableType(NamedType("goog.Foo")))
    assert is_nullable(UnionType([STRING_TYPE, NullableType(NUMBER_TYPE)]))


def test_nullability_of_recursive_union():
    union = UnionType([STRING_TYPE])
    object.__setattr__(union, "alternates", (STRING_TYPE, union))
    assert not is_nullable(union)
    object.__setattr__(union, "alternates", (union, NULL_TYPE))
    assert is_nullable(union)
