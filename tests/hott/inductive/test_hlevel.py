from hott.inductive.eq import Id, Refl
from hott.inductive.hlevel import (
    BuildContrCtor,
    Contr,
    contr,
    is_hlevel,
    is_hlevel_fn,
)
from hott.inductive.nat import NatType, Zero, numeral
from hott.inductive.unit_empty import UnitType, UnitValue, contr_unit
from hott.kernel.ast import App, Pi, Univ
from hott.kernel.env import check_globals
from hott.kernel.hoas import arrow


def test_contr_constructor_is_well_formed() -> None:
    BuildContrCtor.infer_type().expect_universe()


def test_tower_typing() -> None:
    assert check_globals(["is_hlevel"]) == ["is_hlevel"]
    is_hlevel_fn().type_check(arrow(NatType(), arrow(Univ(0), Univ(0))))
    is_hlevel(numeral(2), UnitType()).type_check(Univ(0))


def test_level_zero_is_contractibility() -> None:
    assert is_hlevel(Zero(), UnitType()).whnf() == Contr(UnitType())


def test_successor_level_quantifies_over_paths() -> None:
    assert isinstance(is_hlevel(numeral(1), UnitType()).whnf(), Pi)


def test_contraction_computes() -> None:
    U = UnitType()
    c = App(contr(U, contr_unit()), UnitValue())

    c.type_check(Id(U, UnitValue(), UnitValue()))
    assert c.normalize() == Refl(U, UnitValue())
