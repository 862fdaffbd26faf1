"""H-levels are closed under binary products."""

from __future__ import annotations

from hott.axioms import hlevel_equiv_type
from hott.inductive.eq import Id
from hott.inductive.hlevel import BuildContr, Contr, center, contr, is_hlevel
from hott.inductive.nat import NatElim, NatType, Succ, Zero
from hott.inductive.prod import Pair, ProdType, fst, snd
from hott.kernel.ast import App, Term, Univ
from hott.kernel.hoas import arrow, define, lam, lams, pis
from hott.kernel.tel import mk_app
from hott.proofs.prod_paths import equiv_path_prod, path_prod, paths_pair_type

U = Univ(0)


@define(
    "contr_prod",
    U,
    U,
    lambda A, B: Contr(A),
    lambda A, B, cA: Contr(B),
    statement=lambda A, B, cA, cB: Contr(ProdType(A, B)),
)
def contr_prod(A: Term, B: Term, cA: Term, cB: Term) -> Term:
    """``Contr (A * B)`` centred at the pair of centres."""

    P = ProdType(A, B)
    c = Pair(A, B, center(A, cA), center(B, cB))
    return BuildContr(
        P,
        c,
        lam(
            P,
            lambda z: path_prod(
                A,
                B,
                c,
                z,
                App(contr(A, cA), fst(A, B, z)),
                App(contr(B, cB), snd(A, B, z)),
            ),
        ),
    )


def hlevel_prod_statement(n: Term) -> Term:
    """``Π A B. is_hlevel n A -> is_hlevel n B -> is_hlevel n (A * B)``."""

    return pis(
        U,
        U,
        body=lambda A, B: arrow(
            is_hlevel(n, A), arrow(is_hlevel(n, B), is_hlevel(n, ProdType(A, B)))
        ),
    )


@define(
    "hlevel_prod",
    hlevel_equiv_type(),
    NatType(),
    U,
    U,
    lambda he, n, A, B: is_hlevel(n, A),
    lambda he, n, A, B, hA: is_hlevel(n, B),
    statement=lambda he, n, A, B, hA, hB: is_hlevel(n, ProdType(A, B)),
)
def hlevel_prod(
    hlevel_equiv: Term, n: Term, A: Term, B: Term, hA: Term, hB: Term
) -> Term:
    """``is_hlevel n (A * B)`` from ``hA : is_hlevel n A`` and ``hB : is_hlevel n B``.

    Induction on the level. Level zero is ``contr_prod``. At ``n + 1`` the
    paths of ``A * B`` are equivalent to pairs of paths, which sit at level
    ``n`` by the induction hypothesis; ``hlevel_equiv`` (see
    ``hott.axioms.hlevel_equiv_type``) carries the level across.
    """

    base = lams(
        U,
        U,
        lambda A2, B2: is_hlevel(Zero(), A2),
        lambda A2, B2, hA2: is_hlevel(Zero(), B2),
        body=contr_prod,
    )

    def step_body(
        k: Term, ih: Term, X: Term, Y: Term, hX: Term, hY: Term
    ) -> Term:
        P = ProdType(X, Y)

        def at(z: Term, z2: Term) -> Term:
            fz, fz2 = fst(X, Y, z), fst(X, Y, z2)
            sz, sz2 = snd(X, Y, z), snd(X, Y, z2)
            components = mk_app(
                ih,
                Id(X, fz, fz2),
                Id(Y, sz, sz2),
                mk_app(hX, fz, fz2),
                mk_app(hY, sz, sz2),
            )
            return mk_app(
                hlevel_equiv,
                k,
                paths_pair_type(X, Y, z, z2),
                Id(P, z, z2),
                equiv_path_prod(X, Y, z, z2),
                components,
            )

        return lams(P, P, body=at)

    step = lams(
        NatType(),
        lambda k: hlevel_prod_statement(k),
        U,
        U,
        lambda k, ih, X, Y: is_hlevel(Succ(k), X),
        lambda k, ih, X, Y, hX: is_hlevel(Succ(k), Y),
        body=step_body,
    )
    tower = NatElim(lam(NatType(), hlevel_prod_statement), base, step, n)
    return mk_app(tower, A, B, hA, hB)
