"""Booleans, negation as a self-equivalence, and disjointness of the constructors."""

from __future__ import annotations

from hott.inductive.eq import Id, Refl, inverse, transport
from hott.inductive.equiv import BuildEquiv, BuildIsEquiv, adj_statement
from hott.inductive.unit_empty import EmptyType, UnitType, UnitValue
from hott.kernel.ast import App, Term, Univ
from hott.kernel.hoas import lam
from hott.kernel.ind import Elim, Ctor, Ind

Bool = Ind(name="Bool", level=0)
FalseCtor = Ctor(name="False", inductive=Bool)
TrueCtor = Ctor(name="True", inductive=Bool)
object.__setattr__(Bool, "constructors", (FalseCtor, TrueCtor))


def BoolType() -> Ind:
    return Bool


def False_() -> Term:
    return FalseCtor


def True_() -> Term:
    return TrueCtor


def BoolRec(motive: Term, false_case: Term, true_case: Term, scrutinee: Term) -> Elim:
    """Eliminate Bool by providing branches for ``False`` and ``True``."""

    return Elim(
        inductive=Bool,
        motive=motive,
        cases=(false_case, true_case),
        scrutinee=scrutinee,
    )


def not_term() -> Term:
    """Boolean negation."""

    return lam(
        BoolType(),
        lambda b: BoolRec(lam(BoolType(), lambda c: BoolType()), True_(), False_(), b),
    )


def not_(b: Term) -> Term:
    return App(not_term(), b)


def _involutive() -> Term:
    """``Π b. not (not b) = b``, usable both as section and retraction."""

    n = not_term()
    return lam(
        BoolType(),
        lambda b: BoolRec(
            lam(BoolType(), lambda c: Id(BoolType(), App(n, App(n, c)), c)),
            Refl(BoolType(), False_()),
            Refl(BoolType(), True_()),
            b,
        ),
    )


def isequiv_negb() -> Term:
    B = BoolType()
    n = not_term()
    r = _involutive()
    s = _involutive()
    adj = lam(
        B,
        lambda b: BoolRec(
            lam(B, lambda c: adj_statement(B, B, n, n, r, s, c)),
            Refl(Id(B, True_(), True_()), Refl(B, True_())),
            Refl(Id(B, False_(), False_()), Refl(B, False_())),
            b,
        ),
    )
    return BuildIsEquiv(B, B, n, n, r, s, adj)


def equiv_negb() -> Term:
    return BuildEquiv(BoolType(), BoolType(), not_term(), isequiv_negb())


def bool_code() -> Term:
    """``Bool -> Type`` sending ``True`` to ``Unit`` and ``False`` to ``Empty``."""

    return lam(
        BoolType(),
        lambda b: BoolRec(
            lam(BoolType(), lambda c: Univ(0)), EmptyType(), UnitType(), b
        ),
    )


def true_ne_false() -> Term:
    """``Id Bool True False -> Empty``."""

    return lam(
        Id(BoolType(), True_(), False_()),
        lambda p: transport(BoolType(), bool_code(), True_(), p, UnitValue()),
    )


def false_ne_true() -> Term:
    """``Id Bool False True -> Empty``."""

    return lam(
        Id(BoolType(), False_(), True_()),
        lambda p: App(true_ne_false(), inverse(BoolType(), False_(), p)),
    )
