from hott.axioms import adjointify_axiom, funext_axiom
from hott.inductive.bool import BoolType, False_, True_, not_term
from hott.inductive.equiv import Equiv, IsEquiv, equiv_inverse_fun
from hott.inductive.prod import Pair, ProdType
from hott.kernel.ast import App
from hott.kernel.env import check_globals
from hott.kernel.hoas import arrow, lam, lams
from hott.kernel.tel import mk_app
from hott.proofs.prod_universal import (
    curried_type,
    equiv_prod_rect,
    isequiv_prod_rect,
    prod_rect_fn,
    sections_type,
    uncurry_sections_fn,
)

B = BoolType()
BB = ProdType(B, B)
P = lam(BB, lambda z: B)


def test_prod_rect_fn_typing() -> None:
    X, Y = curried_type(B, B, P), sections_type(B, B, P)

    prod_rect_fn(B, B, P).type_check(arrow(X, Y))
    uncurry_sections_fn(B, B, P).type_check(arrow(Y, X))


def test_prod_rect_then_restrict_is_identity() -> None:
    first = lams(B, B, body=lambda a, b: a)
    section = App(prod_rect_fn(B, B, P), first)
    back = App(uncurry_sections_fn(B, B, P), section)

    assert App(section, Pair(B, B, True_(), False_())).normalize() == True_()
    assert mk_app(back, False_(), True_()).normalize() == False_()


def test_prod_rect_is_an_equivalence() -> None:
    term = isequiv_prod_rect(funext_axiom(), adjointify_axiom(), B, B, P)

    term.type_check(
        IsEquiv(curried_type(B, B, P), sections_type(B, B, P), prod_rect_fn(B, B, P))
    )


def test_equiv_prod_rect_inverse_uncurries() -> None:
    e = equiv_prod_rect(funext_axiom(), adjointify_axiom(), B, B, P)
    X, Y = curried_type(B, B, P), sections_type(B, B, P)
    constant = lam(BB, lambda z: App(not_term(), True_()))

    e.type_check(Equiv(X, Y))
    uncurried = App(equiv_inverse_fun(X, Y, e), constant)
    uncurried.type_check(X)


def test_universal_property_definitions_check() -> None:
    assert check_globals(["equiv_prod_rect"])[-2:] == [
        "isequiv_prod_rect",
        "equiv_prod_rect",
    ]
