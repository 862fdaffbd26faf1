"""Unit and Empty inductive types."""

from __future__ import annotations

from hott.inductive.eq import Id, IdElim, Refl
from hott.inductive.hlevel import BuildContr
from hott.kernel.ast import Term
from hott.kernel.hoas import lam, lams
from hott.kernel.ind import Elim, Ctor, Ind

# Unit has a single inhabitant.
Unit = Ind(name="Unit", level=0)
UnitCtor = Ctor(name="tt", inductive=Unit)
object.__setattr__(Unit, "constructors", (UnitCtor,))


def UnitType() -> Ind:
    return Unit


def UnitValue() -> Term:
    return UnitCtor


def UnitElim(motive: Term, case: Term, scrutinee: Term) -> Elim:
    """Eliminate Unit by providing the single branch for ``tt``."""

    return Elim(inductive=Unit, motive=motive, cases=(case,), scrutinee=scrutinee)


# Empty has no constructors.
Empty = Ind(name="Empty", level=0)
object.__setattr__(Empty, "constructors", ())


def EmptyType() -> Ind:
    return Empty


def EmptyElim(motive: Term, scrutinee: Term) -> Elim:
    """Ex falso eliminator for Empty."""

    return Elim(inductive=Empty, motive=motive, cases=(), scrutinee=scrutinee)


def contr_unit() -> Term:
    """``Contr Unit`` centred at ``tt``."""

    return BuildContr(
        Unit,
        UnitCtor,
        lam(
            Unit,
            lambda x: UnitElim(
                lam(Unit, lambda y: Id(Unit, UnitCtor, y)), Refl(Unit, UnitCtor), x
            ),
        ),
    )


def _unit_path(x: Term, y: Term) -> Term:
    """The canonical ``Id Unit x y``, by cases on both sides."""

    return UnitElim(
        lam(Unit, lambda x2: Id(Unit, x2, y)),
        UnitElim(
            lam(Unit, lambda y2: Id(Unit, UnitCtor, y2)), Refl(Unit, UnitCtor), y
        ),
        x,
    )


def unit_is_hprop() -> Term:
    """``is_hlevel 1 Unit``: every identity type of Unit is contractible."""

    def contraction(x: Term, y: Term) -> Term:
        refl_case = UnitElim(
            lam(
                Unit,
                lambda x2: Id(Id(Unit, x2, x2), _unit_path(x2, x2), Refl(Unit, x2)),
            ),
            Refl(Id(Unit, UnitCtor, UnitCtor), Refl(Unit, UnitCtor)),
            x,
        )
        motive = lams(
            Unit,
            lambda y2: Id(Unit, x, y2),
            body=lambda y2, p: Id(Id(Unit, x, y2), _unit_path(x, y2), p),
        )
        return lam(Id(Unit, x, y), lambda p: IdElim(motive, refl_case, p))

    return lams(
        Unit,
        Unit,
        body=lambda x, y: BuildContr(
            Id(Unit, x, y), _unit_path(x, y), contraction(x, y)
        ),
    )
