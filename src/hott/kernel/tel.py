"""Argument spines, binder telescopes and helpers for building nested terms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import overload, Self, Sequence, Callable, TypeVar

from hott.kernel.ast import Term, App, Lam, Pi, Var


T = TypeVar("T")


@dataclass(frozen=True)
class SeqBase(Sequence[T]):
    _data: tuple[T, ...] = ()

    @classmethod
    def of(cls: type[Self], *items: T) -> Self:
        return cls(items)

    @classmethod
    def empty(cls) -> Self:
        return cls.of()

    def __len__(self) -> int:
        return len(self._data)

    @overload
    def __getitem__(self, i: int) -> T: ...
    @overload
    def __getitem__(self, s: slice) -> Self: ...

    def __getitem__(self, idx: int | slice) -> T | Self:
        if isinstance(idx, slice):
            return self.of(*self._data[idx])
        return self._data[idx]

    def __add__(self, other: Sequence[T]) -> Self:
        return self.of(*self._data, *other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._data)!r})"

    def _map(self, f: Callable[[T], T]) -> Self:
        return self.of(*(f(x) for x in self._data))

    def _mapi(self, f: Callable[[int, T], T]) -> Self:
        return self.of(*(f(i, x) for i, x in enumerate(self._data)))


class Spine(SeqBase[Term]):
    """Arguments of an application, outermost first."""

    @staticmethod
    def vars(count: int, offset: int = 0) -> Spine:
        return Spine(tuple(Var(i) for i in reversed(range(offset, offset + count))))

    def instantiate(self, actuals: Spine, depth_above: int = 0) -> Self:
        return self._map(lambda t: t.instantiate(actuals, depth_above).whnf())

    def shift(self, i: int) -> Self:
        return self._map(lambda e: e.shift(i))


class Telescope(SeqBase[Term]):
    """Binder types where each entry is scoped over the ones before it."""

    def instantiate(self, actuals: Spine, depth_above: int = 0) -> Self:
        return self._mapi(lambda i, t: t.instantiate(actuals, depth_above + i).whnf())


def mk_app(fn: Term, *args: Term | Spine) -> Term:
    """Apply ``args`` to ``fn`` left-associatively.

    Constructors and inductive type heads are stored unapplied; callers often
    need to thread parameters, indices, and payloads in order.

    Returns:
        The left-associated application ``(((fn arg0) arg1) ...)``.
    """
    result: Term = fn
    for arg in args:
        if isinstance(arg, Spine):
            result = mk_app(result, *arg)
        else:
            result = App(result, arg)
    return result


def mk_lams(*param_tys: Term | Telescope, body: Term) -> Term:
    """Build a right-nested lambda chain over ``param_tys`` ending in ``body``.

    The first element of ``param_tys`` binds outermost and the last binds
    closest to ``body``. Each type is read in the scope of the binders
    before it, as in a telescope.
    """
    fn: Term = body
    for param_ty in reversed(param_tys):
        if isinstance(param_ty, Telescope):
            fn = mk_lams(*param_ty, body=fn)
        else:
            fn = Lam(param_ty, fn)
    return fn


def mk_pis(*param_tys: Term | Telescope, return_ty: Term) -> Term:
    """Build a right-nested Pi chain over ``param_tys`` ending in ``return_ty``."""
    pi: Term = return_ty
    for param_ty in reversed(param_tys):
        if isinstance(param_ty, Telescope):
            pi = mk_pis(*param_ty, return_ty=pi)
        else:
            pi = Pi(param_ty, pi)
    return pi


def decompose_app(term: Term) -> tuple[Term, Spine]:
    """Split an application into its head and argument spine.

    This is the inverse of ``mk_app`` and is used by eliminator matching.
    Non-application terms return themselves with an empty spine.
    """
    args: list[Term] = []
    while isinstance(term, App):
        args.append(term.arg)
        term = term.func
    return term, Spine.of(*reversed(args))
