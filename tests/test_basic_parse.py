import pytest

from tinyts.basic_parse import ParseError, parse
from tinyts.basic_term import Add, Bool, Call, Const, Func, If, Integer, Seq, Var
from tinyts.basic_token import LexError
from tinyts.basic_types import BooleanType, IntegerType, Param


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("true", Bool(True)),
        ("false", Bool(False)),
        ("0", Integer(0)),
        ("x", Var("x")),
        (
            "(x: number) => x",
            Func((Param("x", IntegerType()),), Var("x")),
        ),
        (
            "(y: number, z: boolean) => y",
            Func((Param("y", IntegerType()), Param("z", BooleanType())), Var("y")),
        ),
        ("f()", Call(Var("f"), ())),
    ],
)
def test_primary_expr(source, expected):
    assert parse(source) == expected


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("1 + 2", Add(Integer(1), Integer(2))),
        ("3 + 4 + 5", Add(Integer(3), Add(Integer(4), Integer(5)))),
    ],
)
def test_binary(source, expected):
    assert parse(source) == expected


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("true ? 6 : 7", If(Bool(True), Integer(6), Integer(7))),
        (
            "true ? true ? 8 : 9 : 10",
            If(Bool(True), If(Bool(True), Integer(8), Integer(9)), Integer(10)),
        ),
        (
            "true ? 11 : true ? 12 : 13",
            If(Bool(True), Integer(11), If(Bool(True), Integer(12), Integer(13))),
        ),
    ],
)
def test_ternary(source, expected):
    assert parse(source) == expected


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("const y = 1; 2", Const("y", Integer(1), Integer(2))),
        ("const z = 3; 4;", Const("z", Integer(3), Integer(4))),
        ("const aa = 5 + 6; aa;", Const("aa", Add(Integer(5), Integer(6)), Var("aa"))),
        (
            "const ab = true ? 7 : 8; ab;",
            Const("ab", If(Bool(True), Integer(7), Integer(8)), Var("ab")),
        ),
    ],
)
def test_const(source, expected):
    assert parse(source) == expected


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("1; 2;", Seq(Integer(1), Integer(2))),
        ("3; 4; 5;", Seq(Integer(3), Seq(Integer(4), Integer(5)))),
        ("6; 7", Seq(Integer(6), Integer(7))),
    ],
)
def test_seq(source, expected):
    assert parse(source) == expected


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("0;", Integer(0)),
        ("const x = 1; x; 2", Const("x", Integer(1), Seq(Var("x"), Integer(2)))),
    ],
)
def test_term(source, expected):
    assert parse(source) == expected


def test_function_without_params():
    assert parse("() => 1") == Func((), Integer(1))


def test_function_with_trailing_comma():
    assert parse("(x: number,) => x") == Func((Param("x", IntegerType()),), Var("x"))


def test_function_body_is_ternary():
    assert parse("(b: boolean) => b ? 1 : 2") == Func(
        (Param("b", BooleanType()),), If(Var("b"), Integer(1), Integer(2))
    )


def test_call_in_sum():
    assert parse("f() + 1") == Add(Call(Var("f"), ()), Integer(1))


@pytest.mark.parametrize(
    "source",
    [
        "",
        "   ",
        "1 2",
        "const y = 1;",
        "const = 1; 2",
        "const y 1; 2",
        "const y = 1 2",
        "f(1)",
        "(x) => x",
        "(x: number) x",
        "(x: number",
        "1 : 2",
        "true ? 1",
        "+ 1",
        ";",
        "1 +",
        ")",
    ],
)
def test_malformed_input_raises(source):
    with pytest.raises(ParseError):
        parse(source)


def test_unknown_parameter_type_raises():
    with pytest.raises(ParseError, match="string"):
        parse("(x: string) => x")


def test_parse_error_carries_token():
    with pytest.raises(ParseError) as info:
        parse("1 2")
    assert info.value.token is not None
    assert info.value.token.start == 2


def test_unknown_character_raises_lex_error():
    with pytest.raises(LexError):
        parse("1 @ 2")


def test_integer_out_of_range_raises_lex_error():
    with pytest.raises(LexError):
        parse("256")