"""Natural numbers, used to index the h-level tower."""

from __future__ import annotations

from hott.kernel.ast import App, Term
from hott.kernel.hoas import lam
from hott.kernel.ind import Elim, Ctor, Ind
from hott.kernel.tel import Telescope

Nat = Ind(name="Nat", level=0)
ZeroCtor = Ctor(name="Zero", inductive=Nat)
SuccCtor = Ctor(name="Succ", inductive=Nat, field_schemas=Telescope.of(Nat))
object.__setattr__(Nat, "constructors", (ZeroCtor, SuccCtor))


def NatType() -> Ind:
    return Nat


def Zero() -> Term:
    return ZeroCtor


def Succ(n: Term) -> Term:
    return App(SuccCtor, n)


def NatElim(P: Term, base: Term, step: Term, n: Term) -> Elim:
    return Elim(
        inductive=Nat,
        motive=P,
        cases=(base, step),
        scrutinee=n,
    )


def NatRec(A: Term, base: Term, step: Term, n: Term) -> Term:
    return NatElim(
        P=lam(NatType(), lambda _: A),
        base=base,
        step=step,
        n=n,
    )


def numeral(value: int) -> Term:
    """Return the canonical term representing the natural number ``value``."""

    if value < 0:
        raise ValueError("Numerals must be non-negative")
    term: Term = Zero()
    for _ in range(value):
        term = Succ(term)
    return term
