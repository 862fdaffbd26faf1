"""Paths between pairs are pairs of paths.

``path_prod`` builds an identity proof between two pairs from component
proofs; ``ap fst`` and ``ap snd`` take it apart again. The two directions are
mutually inverse, which makes ``Id (A * B) z z'`` equivalent to
``Id A (fst z) (fst z') * Id B (snd z) (snd z')``.

Most statements here are proved with ``prod_path_ind``: destruct both pairs,
then both component paths, and what is left holds by reflexivity. Each proof
is a global definition, so the larger ones mention the smaller ones by name.
"""

from __future__ import annotations

from typing import Callable, TypeAlias

from hott.inductive.eq import Id, IdElim, Refl, ap
from hott.inductive.equiv import (
    BuildEquiv,
    BuildIsEquiv,
    Equiv,
    IsEquiv,
    adj_statement,
    retr_statement,
    sect_statement,
)
from hott.inductive.prod import (
    Pair,
    ProdElim,
    ProdType,
    fst,
    fst_fn,
    snd,
    snd_fn,
)
from hott.kernel.ast import App, Name, Term, Univ
from hott.kernel.hoas import BinderSpec, arrow, define, lam, lams, pi, pis
from hott.kernel.tel import mk_app

Goal: TypeAlias = Callable[[Term, Term, Term, Term], Term]

U = Univ(0)


def _fst_path(A: Term, B: Term, z: Term, z2: Term) -> Term:
    return Id(A, fst(A, B, z), fst(A, B, z2))


def _snd_path(A: Term, B: Term, z: Term, z2: Term) -> Term:
    return Id(B, snd(A, B, z), snd(A, B, z2))


def _two_pairs(*rest: BinderSpec) -> tuple[BinderSpec, ...]:
    # A B : Type, z z2 : A * B
    return (
        U,
        U,
        lambda A, B: ProdType(A, B),
        lambda A, B, z: ProdType(A, B),
        *rest,
    )


_COMPONENT_PATHS = _two_pairs(
    _fst_path, lambda A, B, z, z2, p: _snd_path(A, B, z, z2)
)


def _goal_family(A: Term, B: Term) -> Term:
    P = ProdType(A, B)
    return pis(
        P,
        P,
        lambda z, z2: _fst_path(A, B, z, z2),
        lambda z, z2, p: _snd_path(A, B, z, z2),
        body=lambda z, z2, p, q: U,
    )


def _refl_case_type(A: Term, B: Term, G: Term) -> Term:
    return pis(
        A,
        B,
        body=lambda a, b: mk_app(
            G, Pair(A, B, a, b), Pair(A, B, a, b), Refl(A, a), Refl(B, b)
        ),
    )


@define(
    "prod_path_rect",
    U,
    U,
    _goal_family,
    _refl_case_type,
    lambda A, B, G, d: ProdType(A, B),
    lambda A, B, G, d, z: ProdType(A, B),
    lambda A, B, G, d, z, z2: _fst_path(A, B, z, z2),
    lambda A, B, G, d, z, z2, p: _snd_path(A, B, z, z2),
    statement=lambda A, B, G, d, z, z2, p, q: mk_app(G, z, z2, p, q),
)
def prod_path_rect(
    A: Term, B: Term, G: Term, d: Term, z: Term, z2: Term, p: Term, q: Term
) -> Term:
    """Induction on a pair of component paths, for a goal family ``G``."""

    P = ProdType(A, B)

    def pair(a: Term, b: Term) -> Term:
        return Pair(A, B, a, b)

    def inner_case(a: Name, b: Name) -> Term:
        def after_p(a2: Name, b2: Name, p2: Name, q2: Name) -> Term:
            on_q = lam(
                Id(B, b, b2),
                lambda q3: IdElim(
                    lams(
                        B,
                        lambda y: Id(B, b, y),
                        body=lambda y, q4: mk_app(
                            G, pair(a, b), pair(a, y), Refl(A, a), q4
                        ),
                    ),
                    mk_app(d, a, b),
                    q3,
                ),
            )
            on_p = IdElim(
                lams(
                    A,
                    lambda x: Id(A, a, x),
                    body=lambda x, p3: pi(
                        Id(B, b, b2),
                        lambda q3: mk_app(G, pair(a, b), pair(x, b2), p3, q3),
                    ),
                ),
                on_q,
                p2,
            )
            return App(on_p, q2)

        motive = lam(
            P,
            lambda w: pis(
                Id(A, a, fst(A, B, w)),
                lambda p2: Id(B, b, snd(A, B, w)),
                body=lambda p2, q2: mk_app(G, pair(a, b), w, p2, q2),
            ),
        )
        case = lams(
            A,
            B,
            lambda a2, b2: Id(A, a, a2),
            lambda a2, b2, p2: Id(B, b, b2),
            body=after_p,
        )
        return lam(P, lambda w2: ProdElim(motive, case, w2))

    motive = lam(
        P,
        lambda w: pis(
            P,
            lambda w2: _fst_path(A, B, w, w2),
            lambda w2, p2: _snd_path(A, B, w, w2),
            body=lambda w2, p2, q2: mk_app(G, w, w2, p2, q2),
        ),
    )
    return mk_app(ProdElim(motive, lams(A, B, body=inner_case), z), z2, p, q)


def prod_path_ind(
    A: Term,
    B: Term,
    goal: Goal,
    refl_case: Callable[[Name, Name], Term],
    z: Term,
    z2: Term,
    p: Term,
    q: Term,
) -> Term:
    """Prove ``goal(z, z2, p, q)`` for ``p : fst z = fst z2`` and ``q : snd z = snd z2``.

    ``refl_case(a, b)`` must inhabit ``goal((a, b), (a, b), Refl a, Refl b)``,
    and every goal must be a small type.
    """

    P = ProdType(A, B)
    G = lams(
        P,
        P,
        lambda w, w2: _fst_path(A, B, w, w2),
        lambda w, w2, p2: _snd_path(A, B, w, w2),
        body=goal,
    )
    return prod_path_rect(A, B, G, lams(A, B, body=refl_case), z, z2, p, q)


@define(
    "path_prod",
    *_COMPONENT_PATHS,
    statement=lambda A, B, z, z2, p, q: Id(ProdType(A, B), z, z2),
)
def path_prod(A: Term, B: Term, z: Term, z2: Term, p: Term, q: Term) -> Term:
    """``Id (A * B) z z2`` from ``p : fst z = fst z2`` and ``q : snd z = snd z2``."""

    P = ProdType(A, B)
    return prod_path_ind(
        A,
        B,
        lambda w, w2, p2, q2: Id(P, w, w2),
        lambda a, b: Refl(P, Pair(A, B, a, b)),
        z,
        z2,
        p,
        q,
    )


def path_prod_prime(
    A: Term, B: Term, a: Term, a2: Term, b: Term, b2: Term, p: Term, q: Term
) -> Term:
    """``Id (A * B) (a, b) (a2, b2)`` from ``p : a = a2`` and ``q : b = b2``."""

    return path_prod(A, B, Pair(A, B, a, b), Pair(A, B, a2, b2), p, q)


def paths_pair_type(A: Term, B: Term, z: Term, z2: Term) -> Term:
    """``Id A (fst z) (fst z2) * Id B (snd z) (snd z2)``."""

    return ProdType(_fst_path(A, B, z, z2), _snd_path(A, B, z, z2))


@define(
    "path_prod_uncurried",
    *_two_pairs(paths_pair_type),
    statement=lambda A, B, z, z2, pq: Id(ProdType(A, B), z, z2),
)
def path_prod_uncurried(A: Term, B: Term, z: Term, z2: Term, pq: Term) -> Term:
    PA, PB = _fst_path(A, B, z, z2), _snd_path(A, B, z, z2)
    return ProdElim(
        lam(ProdType(PA, PB), lambda w: Id(ProdType(A, B), z, z2)),
        lams(PA, PB, body=lambda p, q: path_prod(A, B, z, z2, p, q)),
        pq,
    )


def _ap_fst_statement(A: Term, B: Term, z: Term, z2: Term, p: Term, q: Term) -> Term:
    return Id(
        _fst_path(A, B, z, z2),
        ap(ProdType(A, B), A, fst_fn(A, B), z, path_prod(A, B, z, z2, p, q)),
        p,
    )


def _ap_snd_statement(A: Term, B: Term, z: Term, z2: Term, p: Term, q: Term) -> Term:
    return Id(
        _snd_path(A, B, z, z2),
        ap(ProdType(A, B), B, snd_fn(A, B), z, path_prod(A, B, z, z2, p, q)),
        q,
    )


@define("ap_fst_path_prod", *_COMPONENT_PATHS, statement=_ap_fst_statement)
def ap_fst_path_prod(A: Term, B: Term, z: Term, z2: Term, p: Term, q: Term) -> Term:
    """``ap fst (path_prod z z2 p q) = p``."""

    return prod_path_ind(
        A,
        B,
        lambda w, w2, p2, q2: _ap_fst_statement(A, B, w, w2, p2, q2),
        lambda a, b: Refl(Id(A, a, a), Refl(A, a)),
        z,
        z2,
        p,
        q,
    )


@define("ap_snd_path_prod", *_COMPONENT_PATHS, statement=_ap_snd_statement)
def ap_snd_path_prod(A: Term, B: Term, z: Term, z2: Term, p: Term, q: Term) -> Term:
    """``ap snd (path_prod z z2 p q) = q``."""

    return prod_path_ind(
        A,
        B,
        lambda w, w2, p2, q2: _ap_snd_statement(A, B, w, w2, p2, q2),
        lambda a, b: Refl(Id(B, b, b), Refl(B, b)),
        z,
        z2,
        p,
        q,
    )


def _split(A: Term, B: Term, z: Term, r: Term) -> tuple[Term, Term]:
    P = ProdType(A, B)
    return ap(P, A, fst_fn(A, B), z, r), ap(P, B, snd_fn(A, B), z, r)


def _eta_path_statement(A: Term, B: Term, z: Term, z2: Term, r: Term) -> Term:
    P = ProdType(A, B)
    return Id(Id(P, z, z2), path_prod(A, B, z, z2, *_split(A, B, z, r)), r)


@define(
    "eta_path_prod",
    *_two_pairs(lambda A, B, z, z2: Id(ProdType(A, B), z, z2)),
    statement=_eta_path_statement,
)
def eta_path_prod(A: Term, B: Term, z: Term, z2: Term, r: Term) -> Term:
    """``path_prod z z2 (ap fst r) (ap snd r) = r``, by induction on ``r``."""

    P = ProdType(A, B)
    on_refl = ProdElim(
        lam(P, lambda w: _eta_path_statement(A, B, w, w, Refl(P, w))),
        lams(
            A,
            B,
            body=lambda a, b: Refl(
                Id(P, Pair(A, B, a, b), Pair(A, B, a, b)), Refl(P, Pair(A, B, a, b))
            ),
        ),
        z,
    )
    motive = lams(
        P,
        lambda w2: Id(P, z, w2),
        body=lambda w2, r2: _eta_path_statement(A, B, z, w2, r2),
    )
    return IdElim(motive, on_refl, r)


@define(
    "path_prod_uncurried_fn",
    *_two_pairs(),
    statement=lambda A, B, z, z2: arrow(
        paths_pair_type(A, B, z, z2), Id(ProdType(A, B), z, z2)
    ),
)
def path_prod_uncurried_fn(A: Term, B: Term, z: Term, z2: Term) -> Term:
    return lam(
        paths_pair_type(A, B, z, z2),
        lambda pq: path_prod_uncurried(A, B, z, z2, pq),
    )


@define(
    "path_prod_inverse_fn",
    *_two_pairs(),
    statement=lambda A, B, z, z2: arrow(
        Id(ProdType(A, B), z, z2), paths_pair_type(A, B, z, z2)
    ),
)
def path_prod_inverse_fn(A: Term, B: Term, z: Term, z2: Term) -> Term:
    """``r |-> (ap fst r, ap snd r)``."""

    PA, PB = _fst_path(A, B, z, z2), _snd_path(A, B, z, z2)
    return lam(
        Id(ProdType(A, B), z, z2), lambda r: Pair(PA, PB, *_split(A, B, z, r))
    )


def _pq(A: Term, B: Term, z: Term, z2: Term, p: Term, q: Term) -> Term:
    return Pair(_fst_path(A, B, z, z2), _snd_path(A, B, z, z2), p, q)


def _retr_type(A: Term, B: Term, z: Term, z2: Term) -> Term:
    Y = Id(ProdType(A, B), z, z2)
    return pi(
        Y,
        lambda r: retr_statement(
            Y,
            path_prod_uncurried_fn(A, B, z, z2),
            path_prod_inverse_fn(A, B, z, z2),
            r,
        ),
    )


def _sect_at(A: Term, B: Term, z: Term, z2: Term, pq: Term) -> Term:
    return sect_statement(
        paths_pair_type(A, B, z, z2),
        path_prod_uncurried_fn(A, B, z, z2),
        path_prod_inverse_fn(A, B, z, z2),
        pq,
    )


def _adj_at(A: Term, B: Term, z: Term, z2: Term, pq: Term) -> Term:
    return adj_statement(
        paths_pair_type(A, B, z, z2),
        Id(ProdType(A, B), z, z2),
        path_prod_uncurried_fn(A, B, z, z2),
        path_prod_inverse_fn(A, B, z, z2),
        eisretr_path_prod(A, B, z, z2),
        eissect_path_prod(A, B, z, z2),
        pq,
    )


@define("eisretr_path_prod", *_two_pairs(), statement=_retr_type)
def eisretr_path_prod(A: Term, B: Term, z: Term, z2: Term) -> Term:
    return lam(Id(ProdType(A, B), z, z2), lambda r: eta_path_prod(A, B, z, z2, r))


def _by_pair_induction(
    at: Callable[[Term, Term, Term, Term, Term], Term],
    refl_case: Callable[[Term, Term, Name, Name], Term],
) -> Callable[[Term, Term, Term, Term], Term]:
    """Prove ``Π pq. at(z, z2, pq)`` by splitting ``pq`` and using ``prod_path_ind``."""

    def proof(A: Term, B: Term, z: Term, z2: Term) -> Term:
        PQ = paths_pair_type(A, B, z, z2)
        return lam(
            PQ,
            lambda pq: ProdElim(
                lam(PQ, lambda w: at(A, B, z, z2, w)),
                lams(
                    _fst_path(A, B, z, z2),
                    _snd_path(A, B, z, z2),
                    body=lambda p, q: prod_path_ind(
                        A,
                        B,
                        lambda w, w2, p2, q2: at(A, B, w, w2, _pq(A, B, w, w2, p2, q2)),
                        lambda a, b: refl_case(A, B, a, b),
                        z,
                        z2,
                        p,
                        q,
                    ),
                ),
                pq,
            ),
        )

    return proof


def _sect_refl(A: Term, B: Term, a: Name, b: Name) -> Term:
    ab = Pair(A, B, a, b)
    return Refl(
        paths_pair_type(A, B, ab, ab), _pq(A, B, ab, ab, Refl(A, a), Refl(B, b))
    )


def _adj_refl(A: Term, B: Term, a: Name, b: Name) -> Term:
    P = ProdType(A, B)
    ab = Pair(A, B, a, b)
    rho = Refl(P, ab)
    return Refl(Id(Id(P, ab, ab), rho, rho), Refl(Id(P, ab, ab), rho))


eissect_path_prod = define(
    "eissect_path_prod",
    *_two_pairs(),
    statement=lambda A, B, z, z2: pi(
        paths_pair_type(A, B, z, z2), lambda pq: _sect_at(A, B, z, z2, pq)
    ),
)(_by_pair_induction(_sect_at, _sect_refl))

eisadj_path_prod = define(
    "eisadj_path_prod",
    *_two_pairs(),
    statement=lambda A, B, z, z2: pi(
        paths_pair_type(A, B, z, z2), lambda pq: _adj_at(A, B, z, z2, pq)
    ),
)(_by_pair_induction(_adj_at, _adj_refl))


def isequiv_path_prod_type(A: Term, B: Term, z: Term, z2: Term) -> Term:
    return IsEquiv(
        paths_pair_type(A, B, z, z2),
        Id(ProdType(A, B), z, z2),
        path_prod_uncurried_fn(A, B, z, z2),
    )


@define("isequiv_path_prod", *_two_pairs(), statement=isequiv_path_prod_type)
def isequiv_path_prod(A: Term, B: Term, z: Term, z2: Term) -> Term:
    """``path_prod_uncurried`` is an equivalence, with inverse ``(ap fst, ap snd)``."""

    return BuildIsEquiv(
        paths_pair_type(A, B, z, z2),
        Id(ProdType(A, B), z, z2),
        path_prod_uncurried_fn(A, B, z, z2),
        path_prod_inverse_fn(A, B, z, z2),
        eisretr_path_prod(A, B, z, z2),
        eissect_path_prod(A, B, z, z2),
        eisadj_path_prod(A, B, z, z2),
    )


@define(
    "equiv_path_prod",
    *_two_pairs(),
    statement=lambda A, B, z, z2: Equiv(
        paths_pair_type(A, B, z, z2), Id(ProdType(A, B), z, z2)
    ),
)
def equiv_path_prod(A: Term, B: Term, z: Term, z2: Term) -> Term:
    return BuildEquiv(
        paths_pair_type(A, B, z, z2),
        Id(ProdType(A, B), z, z2),
        path_prod_uncurried_fn(A, B, z, z2),
        isequiv_path_prod(A, B, z, z2),
    )
