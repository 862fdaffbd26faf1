"""Transport over pair-valued families and the functorial action on pairs."""

from __future__ import annotations

from hott.inductive.eq import Id, IdElim, Refl, ap, ap011, concat, inverse, transport
from hott.inductive.equiv import (
    BuildEquiv,
    BuildIsEquiv,
    Equiv,
    IsEquiv,
    adj_statement,
    eisadj,
    eisretr,
    eissect,
    equiv_fun,
    equiv_inv,
    equiv_isequiv,
)
from hott.inductive.prod import Pair, ProdElim, ProdType, fst, snd
from hott.kernel.ast import App, Name, Term, Univ
from hott.kernel.hoas import BinderSpec, arrow, define, lam, lams, pi
from hott.kernel.tel import mk_app
from hott.proofs.prod_eta import eta_prod
from hott.proofs.prod_paths import path_prod, path_prod_prime, prod_path_ind

U = Univ(0)


def transport_prod(
    I: Term, P: Term, Q: Term, a: Term, p: Term, z: Term
) -> Term:
    """Transport in ``λc. P c * Q c`` along ``p : a = a'`` acts componentwise.

    Result type::

        Id (P a' * Q a') (transport _ p z) (transport P p (fst z), transport Q p (snd z))
    """

    def family(c: Term) -> Term:
        return ProdType(App(P, c), App(Q, c))

    R = lam(I, family)

    def statement(y: Term, p2: Term, w: Term) -> Term:
        Pa, Qa = App(P, a), App(Q, a)
        return Id(
            family(y),
            transport(I, R, a, p2, w),
            Pair(
                App(P, y),
                App(Q, y),
                transport(I, P, a, p2, fst(Pa, Qa, w)),
                transport(I, Q, a, p2, snd(Pa, Qa, w)),
            ),
        )

    on_refl = ProdElim(
        lam(family(a), lambda w: statement(a, Refl(I, a), w)),
        lams(
            App(P, a),
            App(Q, a),
            body=lambda u, v: Refl(family(a), Pair(App(P, a), App(Q, a), u, v)),
        ),
        z,
    )
    motive = lams(I, lambda y: Id(I, a, y), body=lambda y, p2: statement(y, p2, z))
    return IdElim(motive, on_refl, p)


def functor_prod(
    A: Term, A2: Term, B: Term, B2: Term, f: Term, g: Term, z: Term
) -> Term:
    """``(f (fst z), g (snd z))``."""

    return Pair(A2, B2, App(f, fst(A, B, z)), App(g, snd(A, B, z)))


# A, A2, B, B2 : Type
_FOUR_TYPES: tuple[BinderSpec, ...] = (U, U, U, U)

_TWO_MAPS = (
    *_FOUR_TYPES,
    lambda A, A2, B, B2: arrow(A, A2),
    lambda A, A2, B, B2, f: arrow(B, B2),
)

_TWO_EQUIVALENCES = (
    *_FOUR_TYPES,
    lambda A, A2, B, B2: arrow(A, A2),
    lambda A, A2, B, B2, f: IsEquiv(A, A2, f),
    lambda A, A2, B, B2, f, ef: arrow(B, B2),
    lambda A, A2, B, B2, f, ef, g: IsEquiv(B, B2, g),
)


@define(
    "functor_prod_fn",
    *_TWO_MAPS,
    statement=lambda A, A2, B, B2, f, g: arrow(ProdType(A, B), ProdType(A2, B2)),
)
def functor_prod_fn(A: Term, A2: Term, B: Term, B2: Term, f: Term, g: Term) -> Term:
    return lam(ProdType(A, B), lambda z: functor_prod(A, A2, B, B2, f, g, z))


def functor_prod_idmap(A: Term, B: Term, z: Term) -> Term:
    """``functor_prod id id z = z``; the identity maps vanish by beta."""

    return eta_prod(A, B, z)


def functor_prod_compose(
    A: Term,
    A3: Term,
    B: Term,
    B3: Term,
    f: Term,
    f2: Term,
    g: Term,
    g2: Term,
    z: Term,
) -> Term:
    """``functor_prod (f2 . f) (g2 . g) z = functor_prod f2 g2 (functor_prod f g z)``.

    Both sides compute to the same pair, so this is reflexivity.
    """

    f2f = lam(A, lambda x: App(f2, App(f, x)))
    g2g = lam(B, lambda y: App(g2, App(g, y)))
    return Refl(ProdType(A3, B3), functor_prod(A, A3, B, B3, f2f, g2g, z))


def _naturality(
    A: Term,
    A2: Term,
    B: Term,
    B2: Term,
    f: Term,
    g: Term,
    z: Term,
    z2: Term,
    p: Term,
    q: Term,
) -> Term:
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


@define(
    "ap_functor_prod",
    *_TWO_MAPS,
    lambda A, A2, B, B2, f, g: ProdType(A, B),
    lambda A, A2, B, B2, f, g, z: ProdType(A, B),
    lambda A, A2, B, B2, f, g, z, z2: Id(A, fst(A, B, z), fst(A, B, z2)),
    lambda A, A2, B, B2, f, g, z, z2, p: Id(B, snd(A, B, z), snd(A, B, z2)),
    statement=_naturality,
)
def ap_functor_prod(
    A: Term,
    A2: Term,
    B: Term,
    B2: Term,
    f: Term,
    g: Term,
    z: Term,
    z2: Term,
    p: Term,
    q: Term,
) -> Term:
    """Naturality square::

        ap (functor_prod f g) (path_prod z z2 p q)
          = path_prod (F z) (F z2) (ap f p) (ap g q)
    """

    P2 = ProdType(A2, B2)
    F = functor_prod_fn(A, A2, B, B2, f, g)

    def goal(w: Term, w2: Term, p2: Term, q2: Term) -> Term:
        return _naturality(A, A2, B, B2, f, g, w, w2, p2, q2)

    def refl_case(a: Name, b: Name) -> Term:
        Fab = App(F, Pair(A, B, a, b))
        return Refl(Id(P2, Fab, Fab), Refl(P2, Fab))

    return prod_path_ind(A, B, goal, refl_case, z, z2, p, q)


def _inverse_map(
    A: Term, A2: Term, B: Term, B2: Term, f: Term, ef: Term, g: Term, eg: Term
) -> Term:
    return functor_prod_fn(
        A2, A, B2, B, equiv_inv(A, A2, f, ef), equiv_inv(B, B2, g, eg)
    )


def _round_trip(
    X: Term, Y: Term, h: Term, k: Term, h_path: Term, k_path: Term, w: Term
) -> Term:
    # h_path : Π x. h x = x and k_path : Π y. k y = y
    PX = ProdType(X, Y)
    x, y = fst(X, Y, w), snd(X, Y, w)
    hx, ky = App(h, x), App(k, y)
    return concat(
        PX,
        Pair(X, Y, hx, ky),
        Pair(X, Y, x, y),
        path_prod_prime(X, Y, hx, x, ky, y, App(h_path, x), App(k_path, y)),
        eta_prod(X, Y, w),
    )


def _compose(X: Term, h: Term, k: Term) -> Term:
    return lam(X, lambda x: App(h, App(k, x)))


@define(
    "eisretr_functor_prod",
    *_TWO_EQUIVALENCES,
    statement=lambda A, A2, B, B2, f, ef, g, eg: pi(
        ProdType(A2, B2),
        lambda w: Id(
            ProdType(A2, B2),
            App(
                functor_prod_fn(A, A2, B, B2, f, g),
                App(_inverse_map(A, A2, B, B2, f, ef, g, eg), w),
            ),
            w,
        ),
    ),
)
def eisretr_functor_prod(
    A: Term, A2: Term, B: Term, B2: Term, f: Term, ef: Term, g: Term, eg: Term
) -> Term:
    f_fi = _compose(A2, f, equiv_inv(A, A2, f, ef))
    g_gi = _compose(B2, g, equiv_inv(B, B2, g, eg))
    rf, rg = eisretr(A, A2, f, ef), eisretr(B, B2, g, eg)
    return lam(
        ProdType(A2, B2), lambda w: _round_trip(A2, B2, f_fi, g_gi, rf, rg, w)
    )


@define(
    "eissect_functor_prod",
    *_TWO_EQUIVALENCES,
    statement=lambda A, A2, B, B2, f, ef, g, eg: pi(
        ProdType(A, B),
        lambda w: Id(
            ProdType(A, B),
            App(
                _inverse_map(A, A2, B, B2, f, ef, g, eg),
                App(functor_prod_fn(A, A2, B, B2, f, g), w),
            ),
            w,
        ),
    ),
)
def eissect_functor_prod(
    A: Term, A2: Term, B: Term, B2: Term, f: Term, ef: Term, g: Term, eg: Term
) -> Term:
    fi_f = _compose(A, equiv_inv(A, A2, f, ef), f)
    gi_g = _compose(B, equiv_inv(B, B2, g, eg), g)
    sf, sg = eissect(A, A2, f, ef), eissect(B, B2, g, eg)
    return lam(ProdType(A, B), lambda w: _round_trip(A, B, fi_f, gi_g, sf, sg, w))


def _adj_at(
    A: Term,
    A2: Term,
    B: Term,
    B2: Term,
    f: Term,
    ef: Term,
    g: Term,
    eg: Term,
    w: Term,
) -> Term:
    return adj_statement(
        ProdType(A, B),
        ProdType(A2, B2),
        functor_prod_fn(A, A2, B, B2, f, g),
        _inverse_map(A, A2, B, B2, f, ef, g, eg),
        eisretr_functor_prod(A, A2, B, B2, f, ef, g, eg),
        eissect_functor_prod(A, A2, B, B2, f, ef, g, eg),
        w,
    )


@define(
    "eisadj_functor_prod",
    *_TWO_EQUIVALENCES,
    statement=lambda A, A2, B, B2, f, ef, g, eg: pi(
        ProdType(A, B), lambda w: _adj_at(A, A2, B, B2, f, ef, g, eg, w)
    ),
)
def eisadj_functor_prod(
    A: Term, A2: Term, B: Term, B2: Term, f: Term, ef: Term, g: Term, eg: Term
) -> Term:
    """Triangle law, by destructing the pair.

    On a pair the eta step of both round trips is reflexivity, so the law
    reduces to the component triangle laws glued by the naturality square.
    """

    P = ProdType(A, B)
    P2 = ProdType(A2, B2)
    fi = equiv_inv(A, A2, f, ef)
    gi = equiv_inv(B, B2, g, eg)
    rf, rg = eisretr(A, A2, f, ef), eisretr(B, B2, g, eg)
    sf, sg = eissect(A, A2, f, ef), eissect(B, B2, g, eg)
    F = functor_prod_fn(A, A2, B, B2, f, g)

    def adj_case(a: Name, b: Name) -> Term:
        fa, gb = App(f, a), App(g, b)
        fia, gib = App(fi, fa), App(gi, gb)
        ffia, ggib = App(f, fia), App(g, gib)
        IdA2 = Id(A2, ffia, fa)
        IdB2 = Id(B2, ggib, gb)
        C = Id(P2, Pair(A2, B2, ffia, ggib), Pair(A2, B2, fa, gb))
        h = lams(
            IdA2,
            IdB2,
            body=lambda p, q: path_prod_prime(A2, B2, ffia, fa, ggib, gb, p, q),
        )
        # path_prod' (rf (f a)) (rg (g b)) = path_prod' (ap f (sf a)) (ap g (sg b))
        triangles = ap011(
            IdA2,
            IdB2,
            C,
            h,
            App(rf, fa),
            App(rg, gb),
            ap(B, B2, g, gib, App(sg, b)),
            App(eisadj(A, A2, f, ef), a),
            App(eisadj(B, B2, g, eg), b),
        )
        z_back = Pair(A, B, fia, gib)
        z_ab = Pair(A, B, a, b)
        naturality = ap_functor_prod(
            A, A2, B, B2, f, g, z_back, z_ab, App(sf, a), App(sg, b)
        )
        back = path_prod(A, B, z_back, z_ab, App(sf, a), App(sg, b))
        lhs = ap(P, P2, F, z_back, back)
        return concat(
            C,
            mk_app(h, App(rf, fa), App(rg, gb)),
            mk_app(h, ap(A, A2, f, fia, App(sf, a)), ap(B, B2, g, gib, App(sg, b))),
            triangles,
            inverse(C, lhs, naturality),
        )

    return lam(
        P,
        lambda z: ProdElim(
            lam(P, lambda w: _adj_at(A, A2, B, B2, f, ef, g, eg, w)),
            lams(A, B, body=adj_case),
            z,
        ),
    )


@define(
    "isequiv_functor_prod",
    *_TWO_EQUIVALENCES,
    statement=lambda A, A2, B, B2, f, ef, g, eg: IsEquiv(
        ProdType(A, B), ProdType(A2, B2), functor_prod_fn(A, A2, B, B2, f, g)
    ),
)
def isequiv_functor_prod(
    A: Term,
    A2: Term,
    B: Term,
    B2: Term,
    f: Term,
    ef: Term,
    g: Term,
    eg: Term,
) -> Term:
    """``functor_prod f g`` is an equivalence with inverse ``functor_prod f^-1 g^-1``.

    ``ef`` and ``eg`` are ``IsEquiv`` bundles for ``f`` and ``g``. Both round
    trips are ``path_prod'`` of the componentwise round trips followed by
    ``eta_prod``.
    """

    args = (A, A2, B, B2, f, ef, g, eg)
    return BuildIsEquiv(
        ProdType(A, B),
        ProdType(A2, B2),
        functor_prod_fn(A, A2, B, B2, f, g),
        _inverse_map(*args),
        eisretr_functor_prod(*args),
        eissect_functor_prod(*args),
        eisadj_functor_prod(*args),
    )


@define(
    "equiv_functor_prod",
    *_FOUR_TYPES,
    lambda A, A2, B, B2: Equiv(A, A2),
    lambda A, A2, B, B2, e1: Equiv(B, B2),
    statement=lambda A, A2, B, B2, e1, e2: Equiv(ProdType(A, B), ProdType(A2, B2)),
)
def equiv_functor_prod(
    A: Term, A2: Term, B: Term, B2: Term, e1: Term, e2: Term
) -> Term:
    """Lift ``e1 : Equiv A A2`` and ``e2 : Equiv B B2`` to ``Equiv (A * B) (A2 * B2)``."""

    f = equiv_fun(A, A2, e1)
    g = equiv_fun(B, B2, e2)
    return BuildEquiv(
        ProdType(A, B),
        ProdType(A2, B2),
        functor_prod_fn(A, A2, B, B2, f, g),
        isequiv_functor_prod(
            A,
            A2,
            B,
            B2,
            f,
            equiv_isequiv(A, A2, e1),
            g,
            equiv_isequiv(B, B2, e2),
        ),
    )
