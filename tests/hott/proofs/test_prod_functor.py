from itertools import product

from hott.inductive.bool import (
    BoolType,
    False_,
    True_,
    equiv_negb,
    isequiv_negb,
    not_term,
)
from hott.inductive.eq import Id, Refl, transport
from hott.inductive.equiv import (
    Equiv,
    IsEquiv,
    eisretr,
    eissect,
    equiv_fun,
    equiv_idmap,
    equiv_inverse_fun,
    idmap,
)
from hott.inductive.nat import NatType, Succ, Zero
from hott.inductive.prod import Pair, ProdType
from hott.kernel.ast import App, Var
from hott.kernel.env import Env, check_globals
from hott.kernel.hoas import lam
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

B = BoolType()
BB = ProdType(B, B)
N = NatType()


def _pairs():
    for a, b in product((False_(), True_()), repeat=2):
        yield Pair(B, B, a, b)


def test_functor_prod_applies_componentwise() -> None:
    n = not_term()
    succ = lam(N, lambda k: Succ(k))
    z = Pair(B, N, True_(), Zero())
    term = functor_prod(B, B, N, N, n, succ, z)

    term.type_check(ProdType(B, N))
    assert term.normalize() == Pair(B, N, False_(), Succ(Zero()))


def test_negation_round_trip_is_identity_on_all_pairs() -> None:
    n = not_term()
    F = functor_prod_fn(B, B, B, B, n, n)

    for z in _pairs():
        assert App(F, App(F, z)).normalize() == z


def test_functor_prod_idmap() -> None:
    env = Env.of(BB)
    z = Var(0)
    term = functor_prod_idmap(B, B, z)

    term.type_check(Id(BB, functor_prod(B, B, B, B, idmap(B), idmap(B), z), z), env)


def test_functor_prod_compose_is_reflexivity() -> None:
    n = not_term()
    succ = lam(N, lambda k: Succ(k))
    to_nat = lam(B, lambda b: Zero())
    env = Env.of(BB)
    z = Var(0)
    once = functor_prod(B, B, B, N, n, to_nat, z)
    twice = functor_prod(B, B, N, N, n, succ, once)
    composite = functor_prod(
        B,
        B,
        B,
        N,
        lam(B, lambda b: App(n, App(n, b))),
        lam(B, lambda b: App(succ, App(to_nat, b))),
        z,
    )
    term = functor_prod_compose(B, B, B, N, n, n, to_nat, succ, z)

    term.type_check(Id(ProdType(B, N), composite, twice), env)


def test_transport_prod_along_reflexivity() -> None:
    P = lam(B, lambda b: B)
    Q = lam(B, lambda b: N)
    z = Pair(B, N, True_(), Zero())
    family = lam(B, lambda c: ProdType(App(P, c), App(Q, c)))
    p = Refl(B, False_())
    term = transport_prod(B, P, Q, False_(), p, z)
    expected = Id(
        ProdType(B, N),
        transport(B, family, False_(), p, z),
        Pair(
            B,
            N,
            transport(B, P, False_(), p, True_()),
            transport(B, Q, False_(), p, Zero()),
        ),
    )

    term.type_check(expected)
    assert term.normalize() == Refl(ProdType(B, N), z)


def test_ap_functor_prod_on_reflexivity() -> None:
    n = not_term()
    z = Pair(B, B, False_(), True_())
    p, q = Refl(B, False_()), Refl(B, True_())
    term = ap_functor_prod(B, B, B, B, n, n, z, z, p, q)
    image = Pair(B, B, True_(), False_())

    term.infer_type()
    assert term.normalize() == Refl(Id(BB, image, image), Refl(BB, image))


def test_negation_on_both_sides_is_an_equivalence() -> None:
    n = not_term()
    F = functor_prod_fn(B, B, B, B, n, n)
    e = isequiv_functor_prod(B, B, B, B, n, isequiv_negb(), n, isequiv_negb())

    e.type_check(IsEquiv(BB, BB, F))
    for z in _pairs():
        assert App(eisretr(BB, BB, F, e), z).normalize() == Refl(BB, z)
        assert App(eissect(BB, BB, F, e), z).normalize() == Refl(BB, z)


def test_equiv_functor_prod_bundles() -> None:
    e = equiv_functor_prod(B, B, B, B, equiv_negb(), equiv_idmap(B))

    e.type_check(Equiv(BB, BB))
    z = Pair(B, B, False_(), False_())
    assert App(equiv_fun(BB, BB, e), z).normalize() == Pair(B, B, True_(), False_())
    assert App(equiv_inverse_fun(BB, BB, e), z).normalize() == Pair(
        B, B, True_(), False_()
    )


def test_functor_equivalence_definitions_check() -> None:
    checked = check_globals(["equiv_functor_prod"])

    assert checked[-2:] == ["isequiv_functor_prod", "equiv_functor_prod"]
    assert "ap_functor_prod" in checked
