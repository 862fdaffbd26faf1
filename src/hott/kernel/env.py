from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from typing import ClassVar, overload

from hott.kernel.ast import Term


@dataclass(frozen=True)
class Binder:
    """Single context entry containing the type of a bound variable."""

    ty: Term
    name: str | None = None

    @overload
    @staticmethod
    def of(entry: Binder) -> Binder: ...

    @overload
    @staticmethod
    def of(entry: Term, name: str | None = None) -> Binder: ...

    @staticmethod
    def of(entry: Binder | Term, name: str | None = None) -> Binder:
        """Coerce an entry or term into a ``Binder``."""

        if isinstance(entry, Binder):
            assert name is None
            return entry
        return Binder(entry, name)


@dataclass(frozen=True)
class GlobalDecl:
    """A named constant: its type and, unless postulated, its value."""

    ty: Term
    value: Term | None = None
    reducible: bool = True


class Globals(Mapping[str, GlobalDecl]):
    """
    Registry of global declarations.

    Declarations are registered with a builder and built on first lookup, so a
    definition may mention constants that are declared later.
    """

    def __init__(self) -> None:
        self._builders: dict[str, Callable[[], GlobalDecl]] = {}
        self._decls: dict[str, GlobalDecl] = {}

    def declare(self, name: str, build: Callable[[], GlobalDecl]) -> Const:
        if name in self._builders:
            raise ValueError(f"Duplicate global {name}")
        self._builders[name] = build
        return Const(name)

    def __getitem__(self, name: str) -> GlobalDecl:
        decl = self._decls.get(name)
        if decl is None:
            decl = self._decls[name] = self._builders[name]()
        return decl

    def __contains__(self, name: object) -> bool:
        return name in self._builders

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._builders))

    def __len__(self) -> int:
        return len(self._builders)


GLOBALS = Globals()


@dataclass(frozen=True)
class Env:
    """
    De Bruijn typing context.

    Notes:
        - Binder types are scoped in the tail of the context.
        - Index 0 is the innermost binder.
    """

    binders: tuple[Binder, ...] = ()
    globals: Mapping[str, GlobalDecl] = field(
        default_factory=lambda: GLOBALS, compare=False, repr=False
    )

    def push_binder(self, ty: Term, name: str | None = None) -> Env:
        """Push a new binder at de Bruijn index 0."""
        binders = (Binder.of(ty, name),) + self.binders
        return replace(self, binders=binders)

    def local_type(self, k: int) -> Term:
        """
        Return the type of Var(k) in this environment in *current scope*.

        Stored entry types are scoped in tail, and we shift on lookup by k + 1.
        """
        if k < 0 or k >= len(self.binders):
            raise IndexError(f"Unbound variable {k}")
        return self.binders[k].ty.shift(k + 1)

    @staticmethod
    def of(*env: Binder | Term) -> Env:
        return Env(tuple(Binder.of(entry) for entry in env))


@dataclass(frozen=True)
class Const(Term):
    """Reference to a global declaration, unfolded on demand."""

    name: str
    is_terminal: ClassVar[bool] = True

    def _infer_type(self, env: Env) -> Term:
        return env.globals[self.name].ty

    def _whnf_step(self, env: Env) -> Term:
        decl = env.globals[self.name]
        if decl.value is None or not decl.reducible:
            return self
        return decl.value


def global_refs(term: Term) -> set[str]:
    """Names of the constants mentioned in ``term``, without unfolding them."""

    found: set[str] = set()

    def visit(t: Term, _meta: object) -> Term:
        if isinstance(t, Const):
            found.add(t.name)
            return t
        return t._replace_terms(visit)

    visit(term, None)
    return found


def check_globals(
    names: Iterable[str], env: Env | None = None, checked: set[str] | None = None
) -> list[str]:
    """Check the named declarations and, before each, the ones it mentions.

    ``checked`` holds names already accepted and is updated in place, so each
    declaration is checked once per run. Returns the names checked by this
    call, dependencies first.
    """
    env = env or Env()
    checked = set() if checked is None else checked
    active: set[str] = set()
    order: list[str] = []

    def visit(name: str) -> None:
        if name in checked:
            return
        if name in active:
            raise TypeError(f"Global {name} refers to itself")
        active.add(name)
        decl = env.globals[name]
        deps = global_refs(decl.ty)
        if decl.value is not None:
            deps |= global_refs(decl.value)
        for dep in sorted(deps):
            visit(dep)
        decl.ty.expect_universe(env)
        if decl.value is not None:
            decl.value.type_check(decl.ty, env)
        active.discard(name)
        checked.add(name)
        order.append(name)

    for name in names:
        visit(name)
    return order
