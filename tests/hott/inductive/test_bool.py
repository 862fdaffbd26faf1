from hott.inductive.bool import (
    BoolType,
    FalseCtor,
    False_,
    TrueCtor,
    True_,
    bool_code,
    equiv_negb,
    false_ne_true,
    isequiv_negb,
    not_,
    not_term,
    true_ne_false,
)
from hott.inductive.eq import Id
from hott.inductive.equiv import Equiv, IsEquiv, equiv_inverse_fun
from hott.inductive.unit_empty import EmptyType, UnitType
from hott.kernel.ast import App, Univ
from hott.kernel.hoas import arrow


def test_constructors_inhabit_bool() -> None:
    FalseCtor.type_check(BoolType())
    TrueCtor.type_check(BoolType())


def test_not_flips_constructors() -> None:
    not_term().type_check(arrow(BoolType(), BoolType()))
    assert not_(True_()).normalize() == False_()
    assert not_(False_()).normalize() == True_()


def test_not_is_involutive_on_constructors() -> None:
    for b in (False_(), True_()):
        assert not_(not_(b)).normalize() == b


def test_negation_is_an_equivalence() -> None:
    B = BoolType()
    isequiv_negb().type_check(IsEquiv(B, B, not_term()))
    equiv_negb().type_check(Equiv(B, B))


def test_inverse_of_negation_is_negation() -> None:
    B = BoolType()
    inv = equiv_inverse_fun(B, B, equiv_negb())

    assert App(inv, True_()).normalize() == False_()
    assert App(inv, False_()).normalize() == True_()


def test_code_sends_constructors_to_unit_and_empty() -> None:
    bool_code().type_check(arrow(BoolType(), Univ(0)))
    assert App(bool_code(), True_()).normalize() == UnitType()
    assert App(bool_code(), False_()).normalize() == EmptyType()


def test_constructors_are_disjoint() -> None:
    B = BoolType()
    true_ne_false().type_check(arrow(Id(B, True_(), False_()), EmptyType()))
    false_ne_true().type_check(arrow(Id(B, False_(), True_()), EmptyType()))
