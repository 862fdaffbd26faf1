"""Identity type and the path combinators built from based path induction."""

from __future__ import annotations

from hott.kernel.ast import App, Term, Univ, Var
from hott.kernel.hoas import lam, lams
from hott.kernel.ind import Elim, Ctor, Ind
from hott.kernel.tel import mk_app, Spine, Telescope

IdType = Ind(
    name="Id",
    param_types=Telescope.of(Univ(0), Var(0)),
    index_types=Telescope.of(Var(1)),
    level=0,
)
ReflCtor = Ctor(
    name="Refl",
    inductive=IdType,
    result_indices=Spine.of(Var(0)),
)
object.__setattr__(IdType, "constructors", (ReflCtor,))


def Id(ty: Term, lhs: Term, rhs: Term) -> Term:
    """Identity type over ``ty`` relating ``lhs`` and ``rhs``."""

    return mk_app(IdType, ty, lhs, rhs)


def Refl(ty: Term, t: Term) -> Term:
    """Canonical inhabitant ``Id ty t t``."""

    return mk_app(ReflCtor, ty, t)


def IdElim(P: Term, d: Term, p: Term) -> Elim:
    """Based path induction (J).

    For ``p : Id A x y`` the motive has type ``Π y' : A. Id A x y' -> Type``
    and ``d`` inhabits ``P x (Refl A x)``.
    """

    return Elim(inductive=IdType, motive=P, cases=(d,), scrutinee=p)


def transport(A: Term, P: Term, x: Term, p: Term, u: Term) -> Term:
    """Move ``u : P x`` along ``p : Id A x y`` to ``P y``."""

    motive = lams(A, lambda y: Id(A, x, y), body=lambda y, q: App(P, y))
    return IdElim(motive, u, p)


def ap(A: Term, B: Term, f: Term, x: Term, p: Term) -> Term:
    """Non-dependent congruence: ``Id A x y`` to ``Id B (f x) (f y)``."""

    motive = lams(
        A,
        lambda y: Id(A, x, y),
        body=lambda y, q: Id(B, App(f, x), App(f, y)),
    )
    return IdElim(motive, Refl(B, App(f, x)), p)


def concat(A: Term, x: Term, y: Term, p: Term, q: Term) -> Term:
    """Path composition ``p @ q`` for ``p : Id A x y`` and ``q : Id A y z``.

    Induction is on ``q``, so ``p @ Refl`` reduces to ``p``.
    """

    motive = lams(A, lambda z: Id(A, y, z), body=lambda z, r: Id(A, x, z))
    return IdElim(motive, p, q)


def inverse(A: Term, x: Term, p: Term) -> Term:
    """Reverse ``p : Id A x y`` into ``Id A y x``."""

    motive = lams(A, lambda y: Id(A, x, y), body=lambda y, q: Id(A, y, x))
    return IdElim(motive, Refl(A, x), p)


def ap011(
    A: Term,
    B: Term,
    C: Term,
    f: Term,
    x: Term,
    y: Term,
    y2: Term,
    p: Term,
    q: Term,
) -> Term:
    """Congruence of a two-argument ``f : A -> B -> C`` in both arguments."""

    motive = lams(
        A,
        lambda x3: Id(A, x, x3),
        body=lambda x3, r: Id(C, mk_app(f, x, y), mk_app(f, x3, y2)),
    )
    d = ap(B, C, lam(B, lambda v: mk_app(f, x, v)), y, q)
    return IdElim(motive, d, p)
