import dataclasses

import pytest

from tinyts.arith_term import Add, Bool, If, Integer, Term


def test_structural_equality():
    a = If(Bool(True), Add(Integer(1), Integer(2)), Integer(3))
    b = If(Bool(True), Add(Integer(1), Integer(2)), Integer(3))
    assert a == b
    assert hash(a) == hash(b)


def test_different_trees_are_unequal():
    assert (Bool(True) == Bool(False)) is False
    assert (Add(Integer(1), Integer(2)) == Add(Integer(2), Integer(1))) is False


def test_all_terms_share_base():
    terms = [Bool(False), Integer(0), Add(Integer(0), Integer(0)),
             If(Bool(True), Integer(0), Integer(0))]
    assert all(isinstance(t, Term) for t in terms)
    assert len(set(terms)) == len(terms)
    assert terms[2].left == Integer(0)
    assert terms[3].cond == Bool(True)


def test_integer_range_limits():
    assert Integer(0).value == 0
    assert Integer(255).value == 255
    with pytest.raises(ValueError):
        Integer(256)
    with pytest.raises(ValueError):
        Integer(-1)


def test_integer_rejects_bool():
    with pytest.raises(TypeError):
        Integer(True)


def test_terms_are_immutable():
    term = Add(Integer(1), Integer(2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        term.left = Integer(3)
    assert term.left == Integer(1)


def test_fields_are_kept():
    term = If(Bool(False), Integer(6), Integer(7))
    assert term.cond == Bool(False)
    assert term.thn == Integer(6)
    assert term.els == Integer(7)