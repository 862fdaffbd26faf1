from types import MappingProxyType

import pytest

from hott.inductive.bool import BoolRec, BoolType, False_, True_
from hott.inductive.nat import NatType, Succ, Zero
from hott.kernel.ast import App, Lam, Pi, Univ, Var
from hott.kernel.env import Const, Env, GlobalDecl, check_globals
from hott.kernel.hoas import fresh, lam
from hott.kernel.ind import Elim


def test_identity_function_checks_against_pi() -> None:
    term = Lam(NatType(), Var(0))
    expected = Pi(NatType(), NatType())

    term.type_check(expected)
    assert term.infer_type().type_equal(expected)


def test_polymorphic_identity() -> None:
    U = Univ(0)
    term = Lam(U, Lam(Var(0), Var(0)))

    term.type_check(Pi(U, Pi(Var(0), Var(1))))


def test_universe_cumulativity_in_checking_mode() -> None:
    assert Univ(0).infer_type() == Univ(1)
    Univ(0).type_check(Univ(2))
    with pytest.raises(TypeError):
        Univ(1).type_check(Univ(1))


def test_negative_indices_and_levels_rejected() -> None:
    with pytest.raises(ValueError):
        Var(-1)
    with pytest.raises(ValueError):
        Univ(-1)


def test_unbound_variable_raises_index_error() -> None:
    with pytest.raises(IndexError):
        Var(0).infer_type()


def test_variable_type_comes_from_env() -> None:
    env = Env.of(NatType(), BoolType())

    assert Var(0).infer_type(env) == NatType()
    assert Var(1).infer_type(env) == BoolType()


def test_placeholder_cannot_be_type_checked() -> None:
    with pytest.raises(TypeError):
        fresh("x").infer_type()


def test_application_of_non_function_rejected() -> None:
    with pytest.raises(TypeError):
        App(Zero(), Zero()).infer_type()


def test_application_argument_mismatch_rejected() -> None:
    f = Lam(NatType(), Var(0))
    with pytest.raises(TypeError):
        App(f, True_()).infer_type()


def test_beta_reduction() -> None:
    f = lam(NatType(), lambda n: Succ(n))

    assert App(f, Zero()).whnf() == Succ(Zero())


def test_elim_case_count_checked() -> None:
    motive = lam(BoolType(), lambda b: NatType())
    elim = Elim(
        inductive=BoolType(), motive=motive, cases=(Zero(),), scrutinee=True_()
    )
    with pytest.raises(TypeError):
        elim.infer_type()


def test_iota_picks_constructor_branch() -> None:
    motive = lam(BoolType(), lambda b: NatType())

    assert BoolRec(motive, Zero(), Succ(Zero()), False_()).whnf() == Zero()
    assert BoolRec(motive, Zero(), Succ(Zero()), True_()).whnf() == Succ(Zero())


def test_stuck_elim_is_its_own_whnf() -> None:
    motive = lam(BoolType(), lambda b: NatType())
    env = Env.of(BoolType())
    stuck = BoolRec(motive, Zero(), Succ(Zero()), Var(0))

    assert stuck.whnf(env) == stuck
    stuck.type_check(NatType(), env)


def _env_with(**decls: GlobalDecl) -> Env:
    return Env(globals=MappingProxyType(decls))


def test_postulate_has_declared_type_and_does_not_reduce() -> None:
    env = _env_with(nat_choice=GlobalDecl(NatType()))
    c = Const("nat_choice")

    assert c.infer_type(env) == NatType()
    assert c.whnf(env) == c
    c.type_check(NatType(), env)
    with pytest.raises(TypeError):
        c.type_check(BoolType(), env)


def test_definition_unfolds_on_demand() -> None:
    env = _env_with(
        one=GlobalDecl(NatType(), Succ(Zero())),
        two=GlobalDecl(NatType(), Succ(Const("one"))),
        opaque=GlobalDecl(NatType(), Zero(), reducible=False),
    )

    assert Const("one").whnf(env) == Succ(Zero())
    assert Const("two").whnf(env) == Succ(Const("one"))
    assert Const("opaque").whnf(env) == Const("opaque")
    assert Const("two").type_equal(Succ(Succ(Zero())), env)


def test_same_constant_is_compared_by_arguments_before_unfolding() -> None:
    nat = NatType()
    # Unfolding ``f`` would look up ``missing`` and fail.
    env = _env_with(f=GlobalDecl(Pi(nat, nat), Const("missing")))
    f = Const("f")
    lhs = App(f, Succ(Zero()))
    rhs = App(f, App(lam(nat, lambda n: Succ(n)), Zero()))

    assert lhs.type_equal(rhs, env)
    with pytest.raises(KeyError):
        lhs.type_equal(App(f, Zero()), env)


def test_check_globals_checks_dependencies_first() -> None:
    env = _env_with(
        one=GlobalDecl(NatType(), Succ(Zero())),
        two=GlobalDecl(NatType(), Succ(Const("one"))),
    )
    checked: set[str] = set()

    assert check_globals(["two"], env, checked) == ["one", "two"]
    assert check_globals(["one", "two"], env, checked) == []
    assert checked == {"one", "two"}


def test_check_globals_rejects_bad_definitions() -> None:
    wrong = _env_with(bad=GlobalDecl(BoolType(), Zero()))
    looping = _env_with(loop=GlobalDecl(NatType(), Succ(Const("loop"))))

    with pytest.raises(TypeError):
        check_globals(["bad"], wrong)
    with pytest.raises(TypeError):
        check_globals(["loop"], looping)
