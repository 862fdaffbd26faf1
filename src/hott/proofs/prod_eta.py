"""Eta for pairs: every ``z : A * B`` is the pair of its projections."""

from __future__ import annotations

from hott.inductive.eq import Id, Refl
from hott.inductive.prod import Pair, ProdElim, ProdType, fst, snd
from hott.kernel.ast import App, Term, Univ
from hott.kernel.hoas import arrow, define, lam, lams

U = Univ(0)


def _eta_statement(A: Term, B: Term, z: Term) -> Term:
    return Id(ProdType(A, B), Pair(A, B, fst(A, B, z), snd(A, B, z)), z)


@define("eta_prod", U, U, lambda A, B: ProdType(A, B), statement=_eta_statement)
def eta_prod(A: Term, B: Term, z: Term) -> Term:
    """``Id (A * B) (fst z, snd z) z``, by destructing ``z``."""

    P = ProdType(A, B)
    return ProdElim(
        lam(P, lambda w: _eta_statement(A, B, w)),
        lams(A, B, body=lambda a, b: Refl(P, Pair(A, B, a, b))),
        z,
    )


@define(
    "unpack_prod",
    U,
    U,
    lambda A, B: arrow(ProdType(A, B), U),
    lambda A, B, P: ProdType(A, B),
    lambda A, B, P, u: App(P, Pair(A, B, fst(A, B, u), snd(A, B, u))),
    statement=lambda A, B, P, u, s: App(P, u),
)
def unpack_prod(A: Term, B: Term, P: Term, u: Term, s: Term) -> Term:
    """Turn ``s : P (fst u, snd u)`` into ``P u``."""

    AB = ProdType(A, B)
    motive = lam(
        AB,
        lambda w: arrow(App(P, Pair(A, B, fst(A, B, w), snd(A, B, w))), App(P, w)),
    )
    case = lams(A, B, body=lambda a, b: lam(App(P, Pair(A, B, a, b)), lambda x: x))
    return App(ProdElim(motive, case, u), s)
