"""The exported pair-type lemmas as closed, checkable declarations.

Each ``Lemma`` abstracts a builder from ``hott.proofs`` over its arguments
and pairs it with an independently written statement. Checking a lemma asks
the kernel to accept the global definitions the proof mentions, then the
closed proof term at the closed statement.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from functools import cached_property
from typing import Callable, Iterable

from hott.axioms import adjointify_axiom, funext_axiom, hlevel_equiv_axiom
from hott.inductive.eq import Id, ap, transport
from hott.inductive.equiv import Equiv, IsEquiv, idmap
from hott.inductive.hlevel import Contr, is_hlevel
from hott.inductive.nat import NatType
from hott.inductive.prod import Pair, ProdType, fst, fst_fn, snd, snd_fn
from hott.kernel.ast import App, Term, Univ
from hott.kernel.env import check_globals, global_refs
from hott.kernel.hoas import BinderSpec, arrow, lam, lams, pis
from hott.proofs.prod_eta import eta_prod, unpack_prod
from hott.proofs.prod_functor import (
    ap_functor_prod,
    equiv_functor_prod,
    functor_prod,
    functor_prod_compose,
    functor_prod_fn,
    functor_prod_idmap,
    isequiv_functor_prod,
    transport_prod,
)
from hott.proofs.prod_hlevel import contr_prod, hlevel_prod
from hott.proofs.prod_paths import (
    ap_fst_path_prod,
    ap_snd_path_prod,
    equiv_path_prod,
    eta_path_prod,
    isequiv_path_prod,
    isequiv_path_prod_type,
    path_prod,
    path_prod_prime,
    path_prod_uncurried,
    paths_pair_type,
)
from hott.proofs.prod_universal import (
    curried_type,
    isequiv_prod_rect,
    prod_rect_fn,
    sections_type,
)

logger = logging.getLogger(__name__)

RECURSION_FLOOR = 10_000

U = Univ(0)


@dataclass(frozen=True)
class Lemma:
    name: str
    binders: tuple[BinderSpec, ...]
    statement: Callable[..., Term]
    proof: Callable[..., Term]

    @cached_property
    def ty(self) -> Term:
        return pis(*self.binders, body=self.statement)

    @cached_property
    def term(self) -> Term:
        return lams(*self.binders, body=self.proof)

    def check(self, checked: set[str] | None = None) -> None:
        """Raise ``TypeError`` unless ``term`` inhabits ``ty``.

        The global definitions the proof mentions are checked first, skipping
        those already in ``checked``.
        """
        self.ty.expect_universe()
        check_globals(sorted(global_refs(self.term)), checked=checked)
        self.term.type_check(self.ty)


def _pair_paths(A: Term, B: Term, z: Term, z2: Term) -> tuple[Term, Term]:
    return Id(A, fst(A, B, z), fst(A, B, z2)), Id(B, snd(A, B, z), snd(A, B, z2))


def _two_pairs(*head: BinderSpec) -> tuple[BinderSpec, ...]:
    """``A B : Type``, ``z z2 : A * B``, then ``head`` (which see A B z z2)."""
    return (
        U,
        U,
        lambda A, B: ProdType(A, B),
        lambda A, B, z: ProdType(A, B),
        *head,
    )


_component_paths = (
    lambda A, B, z, z2: _pair_paths(A, B, z, z2)[0],
    lambda A, B, z, z2, p: _pair_paths(A, B, z, z2)[1],
)


def _ap_fst_statement(A, B, z, z2, p, q):
    fz, fz2 = fst(A, B, z), fst(A, B, z2)
    path = path_prod(A, B, z, z2, p, q)
    return Id(Id(A, fz, fz2), ap(ProdType(A, B), A, fst_fn(A, B), z, path), p)


def _ap_snd_statement(A, B, z, z2, p, q):
    sz, sz2 = snd(A, B, z), snd(A, B, z2)
    path = path_prod(A, B, z, z2, p, q)
    return Id(Id(B, sz, sz2), ap(ProdType(A, B), B, snd_fn(A, B), z, path), q)


def _eta_path_prod_statement(A, B, z, z2, r):
    P = ProdType(A, B)
    p = ap(P, A, fst_fn(A, B), z, r)
    q = ap(P, B, snd_fn(A, B), z, r)
    return Id(Id(P, z, z2), path_prod(A, B, z, z2, p, q), r)


def _transport_prod_statement(I, P, Q, a, a2, p, z):
    Pa, Qa = App(P, a), App(Q, a)
    Pa2, Qa2 = App(P, a2), App(Q, a2)
    family = lam(I, lambda c: ProdType(App(P, c), App(Q, c)))
    return Id(
        ProdType(Pa2, Qa2),
        transport(I, family, a, p, z),
        Pair(
            Pa2,
            Qa2,
            transport(I, P, a, p, fst(Pa, Qa, z)),
            transport(I, Q, a, p, snd(Pa, Qa, z)),
        ),
    )


def _functor_prod_compose_statement(A, A2, A3, B, B2, B3, f, f2, g, g2, z):
    f2f = lam(A, lambda x: App(f2, App(f, x)))
    g2g = lam(B, lambda y: App(g2, App(g, y)))
    once = functor_prod(A, A2, B, B2, f, g, z)
    return Id(
        ProdType(A3, B3),
        functor_prod(A, A3, B, B3, f2f, g2g, z),
        functor_prod(A2, A3, B2, B3, f2, g2, once),
    )


def _ap_functor_prod_statement(A, A2, B, B2, f, g, z, z2, p, q):
    P2 = ProdType(A2, B2)
    F = functor_prod_fn(A, A2, B, B2, f, g)
    Fz, Fz2 = App(F, z), App(F, z2)
    return Id(
        Id(P2, Fz, Fz2),
        ap(ProdType(A, B), P2, F, z, path_prod(A, B, z, z2, p, q)),
        path_prod(
            A2,
            B2,
            Fz,
            Fz2,
            ap(A, A2, f, fst(A, B, z), p),
            ap(B, B2, g, snd(A, B, z), q),
        ),
    )


# A, A2, B, B2 : Type
_four_types = (U, U, U, U)


def _lemmas() -> dict[str, Lemma]:
    lemmas = [
        Lemma(
            "eta_prod",
            (U, U, lambda A, B: ProdType(A, B)),
            lambda A, B, z: Id(
                ProdType(A, B), Pair(A, B, fst(A, B, z), snd(A, B, z)), z
            ),
            eta_prod,
        ),
        Lemma(
            "unpack_prod",
            (
                U,
                U,
                lambda A, B: arrow(ProdType(A, B), U),
                lambda A, B, P: ProdType(A, B),
                lambda A, B, P, u: App(P, Pair(A, B, fst(A, B, u), snd(A, B, u))),
            ),
            lambda A, B, P, u, s: App(P, u),
            unpack_prod,
        ),
        Lemma(
            "path_prod",
            _two_pairs(*_component_paths),
            lambda A, B, z, z2, p, q: Id(ProdType(A, B), z, z2),
            path_prod,
        ),
        Lemma(
            "path_prod'",
            (
                U,
                U,
                lambda A, B: A,
                lambda A, B, a: A,
                lambda A, B, a, a2: B,
                lambda A, B, a, a2, b: B,
                lambda A, B, a, a2, b, b2: Id(A, a, a2),
                lambda A, B, a, a2, b, b2, p: Id(B, b, b2),
            ),
            lambda A, B, a, a2, b, b2, p, q: Id(
                ProdType(A, B), Pair(A, B, a, b), Pair(A, B, a2, b2)
            ),
            path_prod_prime,
        ),
        Lemma(
            "path_prod_uncurried",
            _two_pairs(lambda A, B, z, z2: paths_pair_type(A, B, z, z2)),
            lambda A, B, z, z2, pq: Id(ProdType(A, B), z, z2),
            path_prod_uncurried,
        ),
        Lemma(
            "ap_fst_path_prod",
            _two_pairs(*_component_paths),
            _ap_fst_statement,
            ap_fst_path_prod,
        ),
        Lemma(
            "ap_snd_path_prod",
            _two_pairs(*_component_paths),
            _ap_snd_statement,
            ap_snd_path_prod,
        ),
        Lemma(
            "eta_path_prod",
            _two_pairs(lambda A, B, z, z2: Id(ProdType(A, B), z, z2)),
            _eta_path_prod_statement,
            eta_path_prod,
        ),
        Lemma(
            "isequiv_path_prod",
            _two_pairs(),
            isequiv_path_prod_type,
            isequiv_path_prod,
        ),
        Lemma(
            "equiv_path_prod",
            _two_pairs(),
            lambda A, B, z, z2: Equiv(
                paths_pair_type(A, B, z, z2), Id(ProdType(A, B), z, z2)
            ),
            equiv_path_prod,
        ),
        Lemma(
            "transport_prod",
            (
                U,
                lambda I: arrow(I, U),
                lambda I, P: arrow(I, U),
                lambda I, P, Q: I,
                lambda I, P, Q, a: I,
                lambda I, P, Q, a, a2: Id(I, a, a2),
                lambda I, P, Q, a, a2, p: ProdType(App(P, a), App(Q, a)),
            ),
            _transport_prod_statement,
            lambda I, P, Q, a, a2, p, z: transport_prod(I, P, Q, a, p, z),
        ),
        Lemma(
            "functor_prod",
            (
                *_four_types,
                lambda A, A2, B, B2: arrow(A, A2),
                lambda A, A2, B, B2, f: arrow(B, B2),
                lambda A, A2, B, B2, f, g: ProdType(A, B),
            ),
            lambda A, A2, B, B2, f, g, z: ProdType(A2, B2),
            functor_prod,
        ),
        Lemma(
            "functor_prod_idmap",
            (U, U, lambda A, B: ProdType(A, B)),
            lambda A, B, z: Id(
                ProdType(A, B), functor_prod(A, A, B, B, idmap(A), idmap(B), z), z
            ),
            functor_prod_idmap,
        ),
        Lemma(
            "functor_prod_compose",
            (
                U,
                U,
                U,
                U,
                U,
                U,
                lambda A, A2, A3, B, B2, B3: arrow(A, A2),
                lambda A, A2, A3, B, B2, B3, f: arrow(A2, A3),
                lambda A, A2, A3, B, B2, B3, f, f2: arrow(B, B2),
                lambda A, A2, A3, B, B2, B3, f, f2, g: arrow(B2, B3),
                lambda A, A2, A3, B, B2, B3, f, f2, g, g2: ProdType(A, B),
            ),
            _functor_prod_compose_statement,
            lambda A, A2, A3, B, B2, B3, f, f2, g, g2, z: functor_prod_compose(
                A, A3, B, B3, f, f2, g, g2, z
            ),
        ),
        Lemma(
            "ap_functor_prod",
            (
                *_four_types,
                lambda A, A2, B, B2: arrow(A, A2),
                lambda A, A2, B, B2, f: arrow(B, B2),
                lambda A, A2, B, B2, f, g: ProdType(A, B),
                lambda A, A2, B, B2, f, g, z: ProdType(A, B),
                lambda A, A2, B, B2, f, g, z, z2: _pair_paths(A, B, z, z2)[0],
                lambda A, A2, B, B2, f, g, z, z2, p: _pair_paths(A, B, z, z2)[1],
            ),
            _ap_functor_prod_statement,
            ap_functor_prod,
        ),
        Lemma(
            "isequiv_functor_prod",
            (
                *_four_types,
                lambda A, A2, B, B2: arrow(A, A2),
                lambda A, A2, B, B2, f: IsEquiv(A, A2, f),
                lambda A, A2, B, B2, f, ef: arrow(B, B2),
                lambda A, A2, B, B2, f, ef, g: IsEquiv(B, B2, g),
            ),
            lambda A, A2, B, B2, f, ef, g, eg: IsEquiv(
                ProdType(A, B),
                ProdType(A2, B2),
                functor_prod_fn(A, A2, B, B2, f, g),
            ),
            isequiv_functor_prod,
        ),
        Lemma(
            "equiv_functor_prod",
            (
                *_four_types,
                lambda A, A2, B, B2: Equiv(A, A2),
                lambda A, A2, B, B2, e1: Equiv(B, B2),
            ),
            lambda A, A2, B, B2, e1, e2: Equiv(ProdType(A, B), ProdType(A2, B2)),
            equiv_functor_prod,
        ),
        Lemma(
            "isequiv_prod_rect",
            (U, U, lambda A, B: arrow(ProdType(A, B), U)),
            lambda A, B, P: IsEquiv(
                curried_type(A, B, P), sections_type(A, B, P), prod_rect_fn(A, B, P)
            ),
            lambda A, B, P: isequiv_prod_rect(
                funext_axiom(), adjointify_axiom(), A, B, P
            ),
        ),
        Lemma(
            "contr_prod",
            (U, U, lambda A, B: Contr(A), lambda A, B, cA: Contr(B)),
            lambda A, B, cA, cB: Contr(ProdType(A, B)),
            contr_prod,
        ),
        Lemma(
            "hlevel_prod",
            (
                NatType(),
                U,
                U,
                lambda n, A, B: is_hlevel(n, A),
                lambda n, A, B, hA: is_hlevel(n, B),
            ),
            lambda n, A, B, hA, hB: is_hlevel(n, ProdType(A, B)),
            lambda n, A, B, hA, hB: hlevel_prod(hlevel_equiv_axiom(), n, A, B, hA, hB),
        ),
    ]
    return {lemma.name: lemma for lemma in lemmas}


LEMMAS: dict[str, Lemma] = _lemmas()


def check_library(names: Iterable[str] | None = None) -> list[str]:
    """Type-check the selected lemmas (all of them by default), in order.

    Returns the names checked. An unknown name raises ``KeyError`` before any
    checking starts; the first rejected proof raises the kernel's ``TypeError``.
    """
    selected = list(LEMMAS) if names is None else list(names)
    unknown = [name for name in selected if name not in LEMMAS]
    if unknown:
        raise KeyError(f"Unknown lemmas: {', '.join(unknown)}")

    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(limit, RECURSION_FLOOR))
    checked: set[str] = set()
    try:
        for name in selected:
            logger.debug("Checking %s", name)
            LEMMAS[name].check(checked)
    finally:
        sys.setrecursionlimit(limit)
    logger.info("Checked %d lemmas", len(selected))
    return selected
