"""The universal property of pairs: dependent elimination is an equivalence."""

from __future__ import annotations

from hott.axioms import (
    adjointify_type,
    funext_type,
    isequiv_adjointify,
    path_forall,
    path_forall2,
)
from hott.inductive.eq import Id, Refl
from hott.inductive.equiv import BuildEquiv, Equiv, IsEquiv
from hott.inductive.prod import Pair, ProdElim, ProdType, prod_rect
from hott.kernel.ast import App, Term, Univ
from hott.kernel.hoas import arrow, define, lam, lams, pi, pis
from hott.kernel.tel import mk_app

U = Univ(0)

# funext, adjointify, A B : Type, P : A * B -> Type
_BINDERS = (
    funext_type(),
    adjointify_type(),
    U,
    U,
    lambda funext, adjointify, A, B: arrow(ProdType(A, B), U),
)


def curried_type(A: Term, B: Term, P: Term) -> Term:
    """``Π a b. P (a, b)``."""

    return pis(A, B, body=lambda a, b: App(P, Pair(A, B, a, b)))


def sections_type(A: Term, B: Term, P: Term) -> Term:
    """``Π z : A * B. P z``."""

    return pi(ProdType(A, B), lambda z: App(P, z))


def prod_rect_fn(A: Term, B: Term, P: Term) -> Term:
    return lam(
        curried_type(A, B, P),
        lambda f: lam(ProdType(A, B), lambda z: prod_rect(P, f, z)),
    )


def uncurry_sections_fn(A: Term, B: Term, P: Term) -> Term:
    return lam(
        sections_type(A, B, P),
        lambda f: lams(A, B, body=lambda a, b: App(f, Pair(A, B, a, b))),
    )


@define(
    "isequiv_prod_rect",
    *_BINDERS,
    statement=lambda funext, adjointify, A, B, P: IsEquiv(
        curried_type(A, B, P), sections_type(A, B, P), prod_rect_fn(A, B, P)
    ),
)
def isequiv_prod_rect(
    funext: Term, adjointify: Term, A: Term, B: Term, P: Term
) -> Term:
    """``prod_rect : (Π a b. P (a, b)) -> Π z. P z`` is an equivalence.

    The inverse restricts a section to pairs. Both round trips hold pointwise
    by reflexivity; ``funext`` turns them into paths between functions, and
    ``adjointify`` supplies the triangle law.
    """

    AB = ProdType(A, B)
    X = curried_type(A, B, P)
    Y = sections_type(A, B, P)
    h = prod_rect_fn(A, B, P)
    k = uncurry_sections_fn(A, B, P)

    def retr_at(f: Term) -> Term:
        hkf = App(h, App(k, f))
        homotopy = lam(
            AB,
            lambda z: ProdElim(
                lam(AB, lambda w: Id(App(P, w), App(hkf, w), App(f, w))),
                lams(
                    A,
                    B,
                    body=lambda a, b: Refl(
                        App(P, Pair(A, B, a, b)), App(f, Pair(A, B, a, b))
                    ),
                ),
                z,
            ),
        )
        return path_forall(funext, AB, P, hkf, f, homotopy)

    def sect_at(f: Term) -> Term:
        C = lams(A, B, body=lambda a, b: App(P, Pair(A, B, a, b)))
        homotopy = lams(
            A, B, body=lambda a, b: Refl(App(P, Pair(A, B, a, b)), mk_app(f, a, b))
        )
        return path_forall2(funext, A, B, C, App(k, App(h, f)), f, homotopy)

    return isequiv_adjointify(adjointify, X, Y, h, k, lam(Y, retr_at), lam(X, sect_at))


@define(
    "equiv_prod_rect",
    *_BINDERS,
    statement=lambda funext, adjointify, A, B, P: Equiv(
        curried_type(A, B, P), sections_type(A, B, P)
    ),
)
def equiv_prod_rect(
    funext: Term, adjointify: Term, A: Term, B: Term, P: Term
) -> Term:
    return BuildEquiv(
        curried_type(A, B, P),
        sections_type(A, B, P),
        prod_rect_fn(A, B, P),
        isequiv_prod_rect(funext, adjointify, A, B, P),
    )
