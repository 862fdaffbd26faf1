"""The non-dependent pair type ``A * B``."""

from __future__ import annotations

from hott.kernel.ast import Term, Univ, Var
from hott.kernel.hoas import lam, lams
from hott.kernel.ind import Elim, Ctor, Ind
from hott.kernel.tel import mk_app, Telescope

ProdInd = Ind(
    name="Prod",
    param_types=Telescope.of(Univ(0), Univ(0)),
    level=0,
)
PairCtor = Ctor(
    name="pair",
    inductive=ProdInd,
    # Context (A, B) for the first field and (A, B, a) for the second.
    field_schemas=Telescope.of(Var(1), Var(1)),
)
object.__setattr__(ProdInd, "constructors", (PairCtor,))


def ProdType(A: Term, B: Term) -> Term:
    return mk_app(ProdInd, A, B)


def Pair(A: Term, B: Term, a: Term, b: Term) -> Term:
    return mk_app(PairCtor, A, B, a, b)


def ProdElim(motive: Term, case: Term, scrutinee: Term) -> Elim:
    """Eliminate a pair; ``case`` receives both components."""

    return Elim(inductive=ProdInd, motive=motive, cases=(case,), scrutinee=scrutinee)


def fst(A: Term, B: Term, z: Term) -> Term:
    return ProdElim(
        lam(ProdType(A, B), lambda w: A),
        lams(A, B, body=lambda a, b: a),
        z,
    )


def snd(A: Term, B: Term, z: Term) -> Term:
    return ProdElim(
        lam(ProdType(A, B), lambda w: B),
        lams(A, B, body=lambda a, b: b),
        z,
    )


def fst_fn(A: Term, B: Term) -> Term:
    return lam(ProdType(A, B), lambda z: fst(A, B, z))


def snd_fn(A: Term, B: Term) -> Term:
    return lam(ProdType(A, B), lambda z: snd(A, B, z))


def prod_rect(P: Term, f: Term, z: Term) -> Term:
    """Dependent elimination: ``f : Π a b. P (a, b)`` extended to all of ``A * B``."""

    return ProdElim(P, f, z)
