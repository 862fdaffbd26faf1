import pytest

from hott.inductive.bool import BoolType, False_, True_
from hott.inductive.nat import NatType, Zero
from hott.inductive.prod import (
    Pair,
    PairCtor,
    ProdElim,
    ProdType,
    fst,
    fst_fn,
    prod_rect,
    snd,
    snd_fn,
)
from hott.kernel.ast import App, Univ
from hott.kernel.hoas import arrow, lam, lams


def test_pair_constructor_type_is_well_formed() -> None:
    PairCtor.infer_type().expect_universe()
    ProdType(BoolType(), NatType()).type_check(Univ(0))


def test_pair_typing() -> None:
    Pair(BoolType(), NatType(), True_(), Zero()).type_check(
        ProdType(BoolType(), NatType())
    )


def test_pair_component_mismatch_rejected() -> None:
    with pytest.raises(TypeError):
        Pair(BoolType(), NatType(), Zero(), True_()).type_check(
            ProdType(BoolType(), NatType())
        )


def test_projections_compute() -> None:
    B, N = BoolType(), NatType()
    z = Pair(B, N, True_(), Zero())

    fst(B, N, z).type_check(B)
    snd(B, N, z).type_check(N)
    assert fst(B, N, z).normalize() == True_()
    assert snd(B, N, z).normalize() == Zero()
    assert App(fst_fn(B, N), z).normalize() == True_()
    assert App(snd_fn(B, N), z).normalize() == Zero()


def test_projection_functions_typing() -> None:
    B, N = BoolType(), NatType()
    fst_fn(B, N).type_check(arrow(ProdType(B, N), B))
    snd_fn(B, N).type_check(arrow(ProdType(B, N), N))


def test_swap_by_elimination() -> None:
    B = BoolType()
    P = ProdType(B, B)
    swap = lam(
        P,
        lambda z: ProdElim(
            lam(P, lambda w: P), lams(B, B, body=lambda a, b: Pair(B, B, b, a)), z
        ),
    )

    swap.type_check(arrow(P, P))
    assert App(swap, Pair(B, B, False_(), True_())).normalize() == Pair(
        B, B, True_(), False_()
    )


def test_prod_rect_is_dependent_elimination() -> None:
    B = BoolType()
    P = ProdType(B, B)
    motive = lam(P, lambda z: B)
    f = lams(B, B, body=lambda a, b: b)

    prod_rect(motive, f, Pair(B, B, False_(), True_())).type_check(B)
    assert prod_rect(motive, f, Pair(B, B, False_(), True_())).normalize() == True_()
