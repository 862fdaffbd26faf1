import pytest

from hott.inductive.bool import BoolType, False_, True_, not_term
from hott.inductive.eq import (
    Id,
    IdElim,
    Refl,
    ReflCtor,
    ap,
    ap011,
    concat,
    inverse,
    transport,
)
from hott.inductive.nat import NatType, Succ, Zero
from hott.kernel.hoas import lam, lams, pis


def test_refl_constructor_type_is_well_formed() -> None:
    ReflCtor.infer_type().expect_universe()


def test_refl_inhabits_diagonal() -> None:
    Refl(NatType(), Zero()).type_check(Id(NatType(), Zero(), Zero()))


def test_refl_rejected_off_diagonal() -> None:
    B = BoolType()
    with pytest.raises(TypeError):
        Refl(B, True_()).type_check(Id(B, True_(), False_()))


def test_j_computes_on_refl() -> None:
    nat = NatType()
    motive = lams(nat, lambda y: Id(nat, Zero(), y), body=lambda y, p: nat)
    term = IdElim(motive, Succ(Zero()), Refl(nat, Zero()))

    term.type_check(nat)
    assert term.whnf() == Succ(Zero())


def test_transport_along_refl_is_identity() -> None:
    B = BoolType()
    P = lam(B, lambda b: NatType())
    term = transport(B, P, True_(), Refl(B, True_()), Zero())

    term.type_check(NatType())
    assert term.normalize() == Zero()


def test_ap_on_refl() -> None:
    B = BoolType()
    term = ap(B, B, not_term(), True_(), Refl(B, True_()))

    term.type_check(Id(B, False_(), False_()))
    assert term.normalize() == Refl(B, False_())


def test_concat_typing() -> None:
    nat = NatType()
    binders = (
        nat,
        nat,
        nat,
        lambda x, y, z: Id(nat, x, y),
        lambda x, y, z, p: Id(nat, y, z),
    )
    term = lams(*binders, body=lambda x, y, z, p, q: concat(nat, x, y, p, q))
    expected = pis(*binders, body=lambda x, y, z, p, q: Id(nat, x, z))

    term.type_check(expected)


def test_concat_with_refl_on_the_right_is_definitional() -> None:
    nat = NatType()
    term = lams(
        nat,
        nat,
        lambda x, y: Id(nat, x, y),
        body=lambda x, y, p: concat(nat, x, y, p, Refl(nat, y)),
    )

    assert term.normalize() == lams(
        nat, nat, lambda x, y: Id(nat, x, y), body=lambda x, y, p: p
    )


def test_inverse_typing_and_computation() -> None:
    nat = NatType()
    term = lams(
        nat,
        nat,
        lambda x, y: Id(nat, x, y),
        body=lambda x, y, p: inverse(nat, x, p),
    )
    expected = pis(
        nat, nat, lambda x, y: Id(nat, x, y), body=lambda x, y, p: Id(nat, y, x)
    )

    term.type_check(expected)
    assert inverse(nat, Zero(), Refl(nat, Zero())).normalize() == Refl(nat, Zero())


def test_ap011_typing() -> None:
    B = BoolType()
    nat = NatType()
    f = lams(B, nat, body=lambda b, n: n)
    term = lams(
        B,
        B,
        nat,
        nat,
        lambda x, x2, y, y2: Id(B, x, x2),
        lambda x, x2, y, y2, p: Id(nat, y, y2),
        body=lambda x, x2, y, y2, p, q: ap011(B, nat, nat, f, x, y, y2, p, q),
    )
    expected = pis(
        B,
        B,
        nat,
        nat,
        lambda x, x2, y, y2: Id(B, x, x2),
        lambda x, x2, y, y2, p: Id(nat, y, y2),
        body=lambda x, x2, y, y2, p, q: Id(nat, y, y2),
    )

    term.type_check(expected)
