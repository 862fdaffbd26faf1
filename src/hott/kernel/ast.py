"""Object-oriented abstract syntax tree nodes for the proof kernel."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace, Field
from functools import cache
from typing import TYPE_CHECKING, Any, Callable, ClassVar

if TYPE_CHECKING:
    from hott.kernel.env import Env
    from hott.kernel.tel import Spine


def _map_term_values(value: Any, f: Callable[[Term], Term]) -> Any:
    if isinstance(value, Term):
        return f(value)
    if isinstance(value, tuple):
        return tuple(_map_term_values(v, f) for v in value)
    return value


def _values_equal(lhs: Any, rhs: Any, env: Env) -> bool:
    if isinstance(lhs, Term) and isinstance(rhs, Term):
        return lhs._type_equal(rhs, env)
    if isinstance(lhs, tuple) and isinstance(rhs, tuple):
        return len(lhs) == len(rhs) and all(
            _values_equal(a, b, env) for a, b in zip(lhs, rhs)
        )
    return lhs == rhs


def _same_global_spine(lhs: Term, rhs: Term, env: Env) -> bool:
    """Both sides apply the same constant to convertible arguments."""
    from hott.kernel.env import Const
    from hott.kernel.tel import decompose_app

    lhead, largs = decompose_app(lhs)
    rhead, rargs = decompose_app(rhs)
    return (
        isinstance(lhead, Const)
        and lhead == rhead
        and len(largs) == len(rargs)
        and all(a._type_equal(b, env) for a, b in zip(largs, rargs))
    )


@dataclass(frozen=True, kw_only=True)
class TermFieldMeta:
    binder_count: int = 0
    unchecked: bool = False


def meta(f: Field) -> TermFieldMeta:
    return f.metadata.get("") or TermFieldMeta()


@dataclass(frozen=True)
class Term:
    """Base class for all kernel terms."""

    is_terminal: ClassVar[bool] = False

    @classmethod
    @cache
    def _reducible_fields(cls) -> tuple[Field, ...]:
        return () if cls.is_terminal else fields(cls)

    @classmethod
    @cache
    def _checkable_fields(cls) -> tuple[Field, ...]:
        return tuple(f for f in fields(cls) if not meta(f).unchecked)

    def _map_field(
        self, f: Field, mapper: Callable[[Term, TermFieldMeta], Term]
    ) -> Any:
        value = getattr(self, f.name)
        return _map_term_values(value, lambda t: mapper(t, meta(f)))

    def _replace_terms(self, mapper: Callable[[Term, TermFieldMeta], Term]) -> Term:
        updates = {f.name: self._map_field(f, mapper) for f in self._reducible_fields()}
        # noinspection PyArgumentList
        return replace(self, **updates) if updates else self

    def shift(self, by: int, cutoff: int = 0) -> Term:
        """Shift free variables in the term."""
        return self._replace_terms(lambda t, m: t.shift(by, cutoff + m.binder_count))

    def subst(self, sub: Term, j: int = 0) -> Term:
        """Substitute ``sub`` for ``Var(j)`` inside the term."""
        return self._replace_terms(
            lambda t, m: t.subst(sub.shift(m.binder_count), j + m.binder_count)
        )

    def abstract(self, name: Name, depth: int = 0) -> Term:
        """Replace the placeholder ``name`` by the variable bound ``depth`` binders up."""
        return self._replace_terms(
            lambda t, m: t.abstract(name, depth + m.binder_count)
        )

    def instantiate(self, actuals: Spine, depth_above: int = 0) -> Term:
        """
        Substitute ``actuals`` for the outer binder block of ``self``.

        Self is assumed written under (actuals)(...) where ``depth_above`` is the number
        of binders *below* the actuals block that remain in scope at substitution time.
        For each actual, eliminate at de Bruijn index:
            index = depth_above + len(actuals) - i - 1
        using the project's convention:
            schema = schema.subst(actual.shift(index), index)
        """
        t = self
        k = len(actuals)
        for i, a in enumerate(actuals):
            index = depth_above + k - i - 1
            t = t.subst(a.shift(index), index)
        return t

    # --- Reduction ------------------------------------------------------------
    def _whnf_step(self, env: Env) -> Term:
        return self

    def whnf(self, env: Env | None = None) -> Term:
        """Weak head normal form."""
        from hott.kernel.env import Env

        env = env or Env()
        term = self
        while True:
            reduced = term._whnf_step(env)
            if reduced is term or reduced == term:
                return term
            term = reduced

    def normalize(self) -> Term:
        """Fully normalize the term."""
        head = self.whnf()
        return head._replace_terms(lambda t, _m: t.normalize())

    # --- Typing ---------------------------------------------------------------
    def infer_type(self, env: Env | None = None) -> Term:
        from hott.kernel.env import Env

        return self._infer_type(env or Env())

    def _infer_type(self, env: Env) -> Term:
        raise TypeError(f"Unexpected term in infer_type:\n  term = {self!r}")

    def type_check(self, ty: Term, env: Env | None = None) -> None:
        from hott.kernel.env import Env

        env = env or Env()
        self._type_check(ty.whnf(env), env)

    def _type_check(self, expected_ty: Term, env: Env) -> None:
        self._check_against_inferred(expected_ty, env)

    def expect_universe(self, env: Env | None = None) -> int:
        ty = self.infer_type(env).whnf(env)
        if not isinstance(ty, Univ):
            raise TypeError(
                "Expected a universe:\n" f"  term = {self}\n" f"  inferred = {ty}"
            )
        return ty.level

    def _type_equal(self, other: Term, env: Env) -> bool:
        if self == other:
            return True
        if _same_global_spine(self, other, env):
            return True
        self_whnf = self.whnf(env)
        other_whnf = other.whnf(env)
        if self_whnf == other_whnf:
            return True
        if type(self_whnf) is not type(other_whnf):
            return False
        return all(
            _values_equal(getattr(self_whnf, f.name), getattr(other_whnf, f.name), env)
            for f in type(self_whnf)._checkable_fields()
        )

    def type_equal(self, other: Term, env: Env | None = None) -> bool:
        from hott.kernel.env import Env

        env = env or Env()
        return self._type_equal(other, env)

    def _check_against_inferred(self, expected_ty: Term, env: Env) -> None:
        inferred_ty = self.infer_type(env)
        if not expected_ty._type_equal(inferred_ty, env):
            raise TypeError(
                f"{type(self).__name__} type mismatch:\n"
                f"  term = {self}\n"
                f"  expected = {expected_ty}\n"
                f"  inferred = {inferred_ty}"
            )

    # --- Display --------------------------------------------------------------
    def __str__(self) -> str:
        # Deferred import avoids cycles when pretty-printing dataclass reprs.
        from hott.kernel.pretty import pretty

        return pretty(self)


@dataclass(frozen=True)
class Var(Term):
    """De Bruijn variable pointing to the binder at ``k``."""

    k: int
    is_terminal: ClassVar[bool] = True

    def __post_init__(self) -> None:
        if self.k < 0:
            raise ValueError("De Bruijn indices must be non-negative")

    # De Bruijn ---------------------------------------------------------------
    def shift(self, by: int, cutoff: int = 0) -> Term:
        return Var(self.k + by if self.k >= cutoff else self.k)

    def subst(self, sub: Term, j: int = 0) -> Term:
        if self.k == j:
            return sub
        if self.k > j:
            return Var(self.k - 1)
        return self

    # Typing -------------------------------------------------------------------
    def _infer_type(self, env: Env) -> Term:
        return env.local_type(self.k)

    def _type_check(self, expected_ty: Term, env: Env) -> None:
        found_ty = self._infer_type(env)
        if not found_ty._type_equal(expected_ty, env):
            raise TypeError(
                "Variable type mismatch:\n"
                f"  term = {self}\n"
                f"  expected = {expected_ty}\n"
                f"  found = {found_ty}"
            )


@dataclass(frozen=True)
class Name(Term):
    """Named placeholder used while building terms; never reaches the checker."""

    uid: int
    hint: str = field(default="x", compare=False)
    is_terminal: ClassVar[bool] = True

    def abstract(self, name: Name, depth: int = 0) -> Term:
        return Var(depth) if self == name else self

    def _infer_type(self, env: Env) -> Term:
        raise TypeError(f"Unbound placeholder {self.hint}#{self.uid}")


@dataclass(frozen=True)
class Lam(Term):
    """Dependent lambda term with an argument type and body."""

    arg_ty: Term
    body: Term = field(metadata={"": TermFieldMeta(binder_count=1)})

    # Typing -------------------------------------------------------------------
    def _infer_type(self, env: Env) -> Term:
        body_ty = self.body.infer_type(env.push_binder(self.arg_ty))
        return Pi(self.arg_ty, body_ty)

    def _type_check(self, expected_ty: Term, env: Env) -> None:
        if not isinstance(expected_ty, Pi):
            raise TypeError(
                "Lambda expected to have Pi type:\n"
                f"  term = {self}\n"
                f"  expected = {expected_ty}"
            )
        if not self.arg_ty._type_equal(expected_ty.arg_ty, env):
            raise TypeError(
                "Lambda domain mismatch:\n"
                f"  term = {self}\n"
                f"  expected domain = {expected_ty.arg_ty}\n"
                f"  found domain = {self.arg_ty}"
            )
        self.body.type_check(expected_ty.return_ty, env.push_binder(self.arg_ty))


@dataclass(frozen=True)
class Pi(Term):
    """Dependent function type (Pi-type)."""

    arg_ty: Term
    return_ty: Term = field(metadata={"": TermFieldMeta(binder_count=1)})

    # Typing -------------------------------------------------------------------
    def _infer_type(self, env: Env) -> Term:
        arg_level = self.arg_ty.expect_universe(env)
        body_level = self.return_ty.expect_universe(env.push_binder(self.arg_ty))
        return Univ(max(arg_level, body_level))


@dataclass(frozen=True)
class App(Term):
    """Function application."""

    func: Term
    arg: Term

    # Reduction ----------------------------------------------------------------
    def _whnf_step(self, env: Env) -> Term:
        f_whnf = self.func.whnf(env)
        if isinstance(f_whnf, Lam):
            return f_whnf.body.subst(self.arg)
        if f_whnf is self.func:
            return self
        return App(f_whnf, self.arg)

    # Typing -------------------------------------------------------------------
    def _function_type(self, env: Env) -> Pi:
        f_ty = self.func.infer_type(env).whnf(env)
        if not isinstance(f_ty, Pi):
            raise TypeError(
                "Application of non-function:\n"
                f"  term = {self}\n"
                f"  function = {self.func}\n"
                f"  inferred f_ty = {f_ty}"
            )
        return f_ty

    def _infer_type(self, env: Env) -> Term:
        f_ty = self._function_type(env)
        self.arg.type_check(f_ty.arg_ty, env)
        return f_ty.return_ty.subst(self.arg)

    def _type_check(self, expected_ty: Term, env: Env) -> None:
        inferred_ty = self._infer_type(env)
        if not expected_ty._type_equal(inferred_ty, env):
            raise TypeError(
                "Application result type mismatch:\n"
                f"  term = {self}\n"
                f"  expected = {expected_ty}\n"
                f"  inferred = {inferred_ty}"
            )


@dataclass(frozen=True)
class Univ(Term):
    """A universe ``Type(level)``."""

    level: int = 0
    is_terminal: ClassVar[bool] = True

    def __post_init__(self) -> None:
        if self.level < 0:
            raise ValueError("Universe level must be non-negative")

    # Typing -------------------------------------------------------------------
    def _infer_type(self, env: Env) -> Term:
        return Univ(self.level + 1)

    def _type_check(self, expected_ty: Term, env: Env) -> None:
        if not isinstance(expected_ty, Univ):
            raise TypeError(
                "Universe type mismatch:\n"
                f"  term = {self}\n"
                f"  expected = {expected_ty}"
            )
        if expected_ty.level <= self.level:
            raise TypeError(
                "Universe level mismatch:\n"
                f"  term = {self}\n"
                f"  expected = {expected_ty}"
            )
