import dataclasses

import pytest

from tinyts.basic_types import BooleanType, FuncType, IntegerType, Param, Type


def test_primitive_types_compare_by_kind():
    assert BooleanType() == BooleanType()
    assert IntegerType() == IntegerType()
    assert (BooleanType() == IntegerType()) is False
    assert isinstance(BooleanType(), Type)


def test_primitive_type_names():
    assert str(IntegerType()) == "number"
    assert str(BooleanType()) == "boolean"


def test_func_type_params_become_tuple():
    x = Param("x", IntegerType())
    y = Param("y", BooleanType())
    func = FuncType([x, y], IntegerType())
    assert func.params == (x, y)
    assert func == FuncType((x, y), IntegerType())


def test_func_type_is_hashable_and_equal_by_structure():
    a = FuncType([Param("x", IntegerType())], BooleanType())
    b = FuncType([Param("x", IntegerType())], BooleanType())
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_func_type_differs_by_param_name():
    a = FuncType([Param("x", IntegerType())], IntegerType())
    b = FuncType([Param("y", IntegerType())], IntegerType())
    assert (a == b) is False


def test_func_type_str():
    func = FuncType([Param("x", IntegerType()), Param("y", BooleanType())], IntegerType())
    assert str(func) == "(x: number, y: boolean) => number"


def test_nested_func_type_str_contains_inner():
    inner = FuncType([], BooleanType())
    outer = FuncType([Param("f", inner)], inner)
    assert str(outer) == f"(f: {inner}) => {inner}"


def test_param_rejects_non_type():
    with pytest.raises(TypeError):
        Param("x", "number")


def test_func_type_rejects_bad_parts():
    with pytest.raises(TypeError):
        FuncType(["x"], IntegerType())
    with pytest.raises(TypeError):
        FuncType([], "number")


def test_types_are_immutable():
    param = Param("x", IntegerType())
    with pytest.raises(dataclasses.FrozenInstanceError):
        param.name = "y"
    func = FuncType([param], IntegerType())
    with pytest.raises(dataclasses.FrozenInstanceError):
        func.ret_type = BooleanType()