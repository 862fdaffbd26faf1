"""Half-adjoint equivalences as records.

``IsEquiv X Y f`` bundles an inverse ``g`` with the round trips
``r : Π y. f (g y) = y`` and ``s : Π x. g (f x) = x`` plus the triangle law
``Π x. r (f x) = ap f (s x)``. ``Equiv X Y`` pairs a function with such a
bundle.
"""

from __future__ import annotations

from hott.inductive.eq import Id, Refl, ap
from hott.kernel.ast import App, Term, Univ
from hott.kernel.hoas import arrow, close, fresh, lam, pi
from hott.kernel.ind import Ctor, Ind, project
from hott.kernel.tel import mk_app, Telescope


def retr_statement(Y: Term, f: Term, g: Term, y: Term) -> Term:
    return Id(Y, App(f, App(g, y)), y)


def sect_statement(X: Term, f: Term, g: Term, x: Term) -> Term:
    return Id(X, App(g, App(f, x)), x)


def adj_statement(
    X: Term, Y: Term, f: Term, g: Term, r: Term, s: Term, x: Term
) -> Term:
    """Triangle law at ``x``: ``r (f x) = ap f (s x)``."""

    fx = App(f, x)
    return Id(
        Id(Y, App(f, App(g, fx)), fx),
        App(r, fx),
        ap(X, Y, f, App(g, fx), App(s, x)),
    )


def _is_equiv_ind() -> tuple[Ind, Ctor]:
    X, Y, f = fresh("X"), fresh("Y"), fresh("f")
    g, r, s = fresh("g"), fresh("r"), fresh("s")
    ind = Ind(
        name="IsEquiv",
        param_types=Telescope.of(Univ(0), Univ(0), close(arrow(X, Y), X, Y)),
        level=0,
    )
    fields = Telescope.of(
        close(arrow(Y, X), X, Y, f),
        close(pi(Y, lambda y: retr_statement(Y, f, g, y)), X, Y, f, g),
        close(pi(X, lambda x: sect_statement(X, f, g, x)), X, Y, f, g, r),
        close(
            pi(X, lambda x: adj_statement(X, Y, f, g, r, s, x)), X, Y, f, g, r, s
        ),
    )
    ctor = Ctor(name="BuildIsEquiv", inductive=ind, field_schemas=fields)
    object.__setattr__(ind, "constructors", (ctor,))
    return ind, ctor


IsEquivInd, BuildIsEquivCtor = _is_equiv_ind()


def _equiv_ind() -> tuple[Ind, Ctor]:
    X, Y, f = fresh("X"), fresh("Y"), fresh("f")
    ind = Ind(name="Equiv", param_types=Telescope.of(Univ(0), Univ(0)), level=0)
    fields = Telescope.of(
        close(arrow(X, Y), X, Y),
        close(IsEquiv(X, Y, f), X, Y, f),
    )
    ctor = Ctor(name="BuildEquiv", inductive=ind, field_schemas=fields)
    object.__setattr__(ind, "constructors", (ctor,))
    return ind, ctor


def IsEquiv(X: Term, Y: Term, f: Term) -> Term:
    return mk_app(IsEquivInd, X, Y, f)


def BuildIsEquiv(
    X: Term, Y: Term, f: Term, g: Term, r: Term, s: Term, adj: Term
) -> Term:
    return mk_app(BuildIsEquivCtor, X, Y, f, g, r, s, adj)


def equiv_inv(X: Term, Y: Term, f: Term, e: Term) -> Term:
    motive = lam(IsEquiv(X, Y, f), lambda e2: arrow(Y, X))
    return project(BuildIsEquivCtor, (X, Y, f), motive, 0, e)


def eisretr(X: Term, Y: Term, f: Term, e: Term) -> Term:
    motive = lam(
        IsEquiv(X, Y, f),
        lambda e2: pi(Y, lambda y: retr_statement(Y, f, equiv_inv(X, Y, f, e2), y)),
    )
    return project(BuildIsEquivCtor, (X, Y, f), motive, 1, e)


def eissect(X: Term, Y: Term, f: Term, e: Term) -> Term:
    motive = lam(
        IsEquiv(X, Y, f),
        lambda e2: pi(X, lambda x: sect_statement(X, f, equiv_inv(X, Y, f, e2), x)),
    )
    return project(BuildIsEquivCtor, (X, Y, f), motive, 2, e)


def eisadj(X: Term, Y: Term, f: Term, e: Term) -> Term:
    motive = lam(
        IsEquiv(X, Y, f),
        lambda e2: pi(
            X,
            lambda x: adj_statement(
                X,
                Y,
                f,
                equiv_inv(X, Y, f, e2),
                eisretr(X, Y, f, e2),
                eissect(X, Y, f, e2),
                x,
            ),
        ),
    )
    return project(BuildIsEquivCtor, (X, Y, f), motive, 3, e)


EquivInd, BuildEquivCtor = _equiv_ind()


def Equiv(X: Term, Y: Term) -> Term:
    return mk_app(EquivInd, X, Y)


def BuildEquiv(X: Term, Y: Term, f: Term, e: Term) -> Term:
    return mk_app(BuildEquivCtor, X, Y, f, e)


def equiv_fun(X: Term, Y: Term, e: Term) -> Term:
    motive = lam(Equiv(X, Y), lambda e2: arrow(X, Y))
    return project(BuildEquivCtor, (X, Y), motive, 0, e)


def equiv_isequiv(X: Term, Y: Term, e: Term) -> Term:
    motive = lam(Equiv(X, Y), lambda e2: IsEquiv(X, Y, equiv_fun(X, Y, e2)))
    return project(BuildEquivCtor, (X, Y), motive, 1, e)


def equiv_inverse_fun(X: Term, Y: Term, e: Term) -> Term:
    """The inverse function ``Y -> X`` of an ``Equiv X Y``."""

    return equiv_inv(X, Y, equiv_fun(X, Y, e), equiv_isequiv(X, Y, e))


def idmap(A: Term) -> Term:
    return lam(A, lambda x: x)


def isequiv_idmap(A: Term) -> Term:
    return BuildIsEquiv(
        A,
        A,
        idmap(A),
        idmap(A),
        lam(A, lambda y: Refl(A, y)),
        lam(A, lambda x: Refl(A, x)),
        lam(A, lambda x: Refl(Id(A, x, x), Refl(A, x))),
    )


def equiv_idmap(A: Term) -> Term:
    return BuildEquiv(A, A, idmap(A), isequiv_idmap(A))
