from hott.axioms import funext_axiom
from hott.inductive.bool import BoolType, False_, True_
from hott.inductive.nat import NatType, Succ, Zero
from hott.inductive.prod import Pair, ProdType, fst
from hott.kernel.ast import Lam, Pi, Univ, Var
from hott.kernel.hoas import arrow, fresh, lam, pi
from hott.kernel.pretty import pretty


def test_atoms() -> None:
    assert pretty(NatType()) == "Nat"
    assert pretty(Succ(Zero())) == "Succ Zero"
    assert pretty(Univ(0)) == "Type"
    assert pretty(Univ(2)) == "Type2"
    assert pretty(funext_axiom()) == "funext"


def test_binders() -> None:
    nat = NatType()
    assert pretty(lam(nat, lambda x: x)) == "\\x : Nat. x"
    assert pretty(arrow(nat, nat)) == "Nat -> Nat"
    assert pretty(pi(Univ(0), lambda A: A)) == "Pi x : Type. x"
    assert pretty(Lam(nat, Lam(nat, Var(1)))) == "\\x : Nat. \\x1 : Nat. x"


def test_pairs_and_eliminators() -> None:
    B = BoolType()
    pair = Pair(B, B, False_(), True_())

    assert pretty(ProdType(B, B)) == "Prod Bool Bool"
    assert pretty(pair) == "pair Bool Bool False True"
    assert pretty(fst(B, B, pair)).startswith("elim Prod ")


def test_placeholders_show_hint() -> None:
    assert pretty(fresh("a")).startswith("?a")


def test_str_uses_pretty_printer() -> None:
    assert str(Pi(NatType(), NatType())) == "Nat -> Nat"
