"""Contractibility and the h-level tower.

``is_hlevel 0 X`` is ``Contr X``; ``is_hlevel (n+1) X`` asks that every
identity type ``Id X x y`` sits at level ``n``.
"""

from __future__ import annotations

from hott.inductive.eq import Id
from hott.inductive.nat import NatElim, NatType
from hott.kernel.ast import App, Term, Univ
from hott.kernel.env import Const
from hott.kernel.hoas import arrow, close, define, fresh, lam, lams, pi, pis
from hott.kernel.ind import Ctor, Ind, project
from hott.kernel.tel import mk_app, Telescope


def _contr_ind() -> tuple[Ind, Ctor]:
    X, c = fresh("X"), fresh("c")
    ind = Ind(name="Contr", param_types=Telescope.of(Univ(0)), level=0)
    fields = Telescope.of(
        close(X, X),
        close(pi(X, lambda x: Id(X, c, x)), X, c),
    )
    ctor = Ctor(name="BuildContr", inductive=ind, field_schemas=fields)
    object.__setattr__(ind, "constructors", (ctor,))
    return ind, ctor


ContrInd, BuildContrCtor = _contr_ind()


def Contr(X: Term) -> Term:
    return mk_app(ContrInd, X)


def BuildContr(X: Term, center: Term, contr: Term) -> Term:
    return mk_app(BuildContrCtor, X, center, contr)


def center(X: Term, c: Term) -> Term:
    return project(BuildContrCtor, (X,), lam(Contr(X), lambda c2: X), 0, c)


def contr(X: Term, c: Term) -> Term:
    """The contraction ``Π x. Id X (center c) x``."""

    motive = lam(Contr(X), lambda c2: pi(X, lambda x: Id(X, center(X, c2), x)))
    return project(BuildContrCtor, (X,), motive, 1, c)


@define("is_hlevel", NatType(), Univ(0), statement=lambda n, X: Univ(0))
def is_hlevel(n: Term, X: Term) -> Term:
    """Recursion on the level: ``Contr X`` at zero, paths one level down after."""

    U = Univ(0)
    tower = NatElim(
        lam(NatType(), lambda k: arrow(U, U)),
        lam(U, lambda Y: Contr(Y)),
        lams(
            NatType(),
            arrow(U, U),
            U,
            body=lambda k, ih, Y: pis(
                Y, lambda y: Y, body=lambda y, y2: App(ih, Id(Y, y, y2))
            ),
        ),
        n,
    )
    return App(tower, X)


def is_hlevel_fn() -> Term:
    """``Nat -> Type -> Type``."""

    return Const("is_hlevel")
