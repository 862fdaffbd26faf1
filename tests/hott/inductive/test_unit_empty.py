from hott.inductive.eq import Id, Refl
from hott.inductive.hlevel import Contr, center, is_hlevel
from hott.inductive.nat import NatType, Zero, numeral
from hott.inductive.unit_empty import (
    EmptyElim,
    EmptyType,
    UnitElim,
    UnitType,
    UnitValue,
    contr_unit,
    unit_is_hprop,
)
from hott.kernel.ast import Lam, Pi, Var


def test_unit_has_canonical_inhabitant() -> None:
    UnitValue().type_check(UnitType())


def test_unit_elim_dependent_motive() -> None:
    motive = Lam(UnitType(), Id(UnitType(), Var(0), Var(0)))
    term = UnitElim(motive, Refl(UnitType(), UnitValue()), UnitValue())
    expected = Id(UnitType(), UnitValue(), UnitValue())

    term.type_check(expected)
    assert term.infer_type().type_equal(expected)


def test_empty_elim_ex_falso() -> None:
    motive = Lam(EmptyType(), NatType())
    term = Lam(EmptyType(), EmptyElim(motive, Var(0)))

    term.type_check(Pi(EmptyType(), NatType()))


def test_unit_is_contractible() -> None:
    contr_unit().type_check(Contr(UnitType()))
    contr_unit().type_check(is_hlevel(Zero(), UnitType()))
    assert center(UnitType(), contr_unit()).normalize() == UnitValue()


def test_unit_is_a_proposition() -> None:
    unit_is_hprop().type_check(is_hlevel(numeral(1), UnitType()))
