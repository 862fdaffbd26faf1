"""Higher-order builders that turn Python callbacks into de Bruijn binders.

A callback receives fresh ``Name`` placeholders for its bound variables; the
builder then abstracts each placeholder back into a ``Var``. Binder names are
read from the callback's parameter list, so ``lam(A, lambda x: ...)`` prints
its variable as ``x`` while debugging.
"""

from __future__ import annotations

import functools
import inspect
import itertools
from typing import Callable, TypeAlias

from hott.kernel.ast import Lam, Name, Pi, Term
from hott.kernel.env import GLOBALS, GlobalDecl
from hott.kernel.tel import mk_app

BinderSpec: TypeAlias = Term | Callable[..., Term]

_uids = itertools.count()


def fresh(hint: str = "x") -> Name:
    return Name(next(_uids), hint)


def _hints(func: Callable[..., Term], count: int) -> list[str]:
    params = list(inspect.signature(func).parameters)
    if len(params) != count:
        raise TypeError(
            f"Binder callback takes {len(params)} arguments, expected {count}"
        )
    return params


def _bind(
    ctor: type[Lam] | type[Pi],
    binders: tuple[BinderSpec, ...],
    body: Callable[..., Term],
) -> Term:
    names = [fresh(hint) for hint in _hints(body, len(binders))]
    tys = [
        binder(*names[:i]) if callable(binder) else binder
        for i, binder in enumerate(binders)
    ]
    result = body(*names)
    for name, ty in zip(reversed(names), reversed(tys)):
        result = ctor(ty, result.shift(1).abstract(name))
    return result


def lam(ty: Term, body: Callable[[Name], Term]) -> Term:
    return _bind(Lam, (ty,), body)


def pi(ty: Term, body: Callable[[Name], Term]) -> Term:
    return _bind(Pi, (ty,), body)


def lams(*binders: BinderSpec, body: Callable[..., Term]) -> Term:
    """Nest lambdas over ``binders``, outermost first.

    A binder is either a type or a callable receiving the names bound before
    it. ``body`` receives one name per binder.

    Example:
        lams(Univ(0), lambda A: A, body=lambda A, x: x)  # \\A : Type. \\x : A. x
    """
    return _bind(Lam, binders, body)


def pis(*binders: BinderSpec, body: Callable[..., Term]) -> Term:
    """Nest Pi types over ``binders``; see ``lams``."""
    return _bind(Pi, binders, body)


def arrow(dom: Term, cod: Term) -> Term:
    """Non-dependent function type ``dom -> cod``."""
    return Pi(dom, cod.shift(1))


def close(term: Term, *names: Name) -> Term:
    """Abstract ``names`` so that the last one becomes ``Var(0)``.

    Used for constructor schemas, which live in the context of the inductive's
    parameters and the earlier fields.
    """
    for i, name in enumerate(reversed(names)):
        term = term.abstract(name, i)
    return term


def define(
    name: str, *binders: BinderSpec, statement: Callable[..., Term]
) -> Callable[[Callable[..., Term]], Callable[..., Term]]:
    """Declare the decorated builder as the global definition ``name``.

    The definition has type ``pis(*binders, body=statement)`` and value
    ``lams(*binders, body=builder)``, both built on first lookup. The
    decorated function returns the constant applied to its arguments, so
    other proofs mention it by name instead of inlining its proof term.

    Example:
        @define("twice", U, lambda A: arrow(A, A), lambda A, f: A,
                statement=lambda A, f, x: A)
        def twice(A, f, x):
            return App(f, App(f, x))
    """

    def wrap(builder: Callable[..., Term]) -> Callable[..., Term]:
        const = GLOBALS.declare(
            name,
            lambda: GlobalDecl(
                pis(*binders, body=statement), lams(*binders, body=builder)
            ),
        )

        @functools.wraps(builder)
        def apply(*args: Term) -> Term:
            return mk_app(const, *args)

        return apply

    return wrap
