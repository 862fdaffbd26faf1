import pytest

from hott.inductive.nat import NatRec, NatType, Succ, SuccCtor, Zero, numeral
from hott.kernel.hoas import lams


def test_constructor_types() -> None:
    Zero().type_check(NatType())
    SuccCtor.infer_type().expect_universe()


def test_numerals() -> None:
    assert numeral(0) == Zero()
    assert numeral(2) == Succ(Succ(Zero()))
    numeral(3).type_check(NatType())
    with pytest.raises(ValueError):
        numeral(-1)


def test_recursion_computes() -> None:
    nat = NatType()

    def double(n):
        step = lams(nat, nat, body=lambda k, ih: Succ(Succ(ih)))
        return NatRec(nat, Zero(), step, n)

    double(numeral(2)).type_check(nat)
    assert double(numeral(2)).normalize() == numeral(4)
