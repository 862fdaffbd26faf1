from hott.inductive.bool import BoolType, False_, True_
from hott.inductive.eq import Refl
from hott.inductive.equiv import (
    BuildEquivCtor,
    BuildIsEquivCtor,
    Equiv,
    IsEquiv,
    eisretr,
    equiv_fun,
    equiv_idmap,
    equiv_inv,
    equiv_isequiv,
    idmap,
    isequiv_idmap,
)
from hott.kernel.ast import App


def test_record_constructors_are_well_formed() -> None:
    BuildIsEquivCtor.infer_type().expect_universe()
    BuildEquivCtor.infer_type().expect_universe()


def test_identity_is_an_equivalence() -> None:
    B = BoolType()
    isequiv_idmap(B).type_check(IsEquiv(B, B, idmap(B)))
    equiv_idmap(B).type_check(Equiv(B, B))


def test_projections_compute_on_identity_bundle() -> None:
    B = BoolType()
    e = isequiv_idmap(B)

    assert App(equiv_inv(B, B, idmap(B), e), True_()).normalize() == True_()
    assert App(eisretr(B, B, idmap(B), e), False_()).normalize() == Refl(
        B, False_()
    )


def test_equiv_projections() -> None:
    B = BoolType()
    e = equiv_idmap(B)

    assert App(equiv_fun(B, B, e), True_()).normalize() == True_()
    equiv_isequiv(B, B, e).type_check(IsEquiv(B, B, equiv_fun(B, B, e)))
