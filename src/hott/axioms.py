"""Facts the pair-type proofs rely on but do not prove.

Each fact is a global declaration with a type and no value, so it never
reduces. Proofs that need one take it as an explicit argument, so the
dependency shows up in their signature and any inhabitant of the same type
can be supplied instead.
"""

from __future__ import annotations

from hott.inductive.eq import Id
from hott.inductive.equiv import Equiv, IsEquiv
from hott.inductive.hlevel import is_hlevel
from hott.inductive.nat import NatType
from hott.kernel.ast import App, Term, Univ
from hott.kernel.env import GLOBALS, Const, GlobalDecl
from hott.kernel.hoas import arrow, lam, pi, pis
from hott.kernel.tel import mk_app


def funext_type() -> Term:
    """``Π X (Y : X -> Type) (f g : Π x. Y x). (Π x. f x = g x) -> f = g``."""

    U = Univ(0)

    def dep(X: Term, Y: Term) -> Term:
        return pi(X, lambda x: App(Y, x))

    return pis(
        U,
        lambda X: arrow(X, U),
        lambda X, Y: dep(X, Y),
        lambda X, Y, f: dep(X, Y),
        body=lambda X, Y, f, g: arrow(
            pi(X, lambda x: Id(App(Y, x), App(f, x), App(g, x))),
            Id(dep(X, Y), f, g),
        ),
    )


def adjointify_type() -> Term:
    """A quasi-inverse ``g`` with both round trips yields ``IsEquiv X Y f``."""

    U = Univ(0)
    return pis(
        U,
        U,
        lambda X, Y: arrow(X, Y),
        lambda X, Y, f: arrow(Y, X),
        lambda X, Y, f, g: pi(Y, lambda y: Id(Y, App(f, App(g, y)), y)),
        lambda X, Y, f, g, r: pi(X, lambda x: Id(X, App(g, App(f, x)), x)),
        body=lambda X, Y, f, g, r, s: IsEquiv(X, Y, f),
    )


def hlevel_equiv_type() -> Term:
    """H-levels are invariant under equivalence."""

    U = Univ(0)
    return pis(
        NatType(),
        U,
        U,
        body=lambda n, X, Y: arrow(
            Equiv(X, Y), arrow(is_hlevel(n, X), is_hlevel(n, Y))
        ),
    )


_FUNEXT = GLOBALS.declare("funext", lambda: GlobalDecl(funext_type()))
_ADJOINTIFY = GLOBALS.declare(
    "isequiv_adjointify", lambda: GlobalDecl(adjointify_type())
)
_HLEVEL_EQUIV = GLOBALS.declare("hlevel_equiv", lambda: GlobalDecl(hlevel_equiv_type()))


def funext_axiom() -> Const:
    return _FUNEXT


def adjointify_axiom() -> Const:
    return _ADJOINTIFY


def hlevel_equiv_axiom() -> Const:
    return _HLEVEL_EQUIV


def path_forall(funext: Term, X: Term, Y: Term, f: Term, g: Term, h: Term) -> Term:
    """``f = g`` in ``Π x : X. Y x`` from a pointwise homotopy ``h``."""

    return mk_app(funext, X, Y, f, g, h)


def path_forall2(
    funext: Term, A: Term, B: Term, C: Term, f: Term, g: Term, h: Term
) -> Term:
    """``f = g`` in ``Π a b. C a b`` from ``h : Π a b. f a b = g a b``."""

    inner = lam(
        A,
        lambda a: path_forall(
            funext,
            B,
            lam(B, lambda b: mk_app(C, a, b)),
            App(f, a),
            App(g, a),
            lam(B, lambda b: mk_app(h, a, b)),
        ),
    )
    return path_forall(
        funext, A, lam(A, lambda a: pi(B, lambda b: mk_app(C, a, b))), f, g, inner
    )


def isequiv_adjointify(
    adjointify: Term, X: Term, Y: Term, f: Term, g: Term, r: Term, s: Term
) -> Term:
    return mk_app(adjointify, X, Y, f, g, r, s)
