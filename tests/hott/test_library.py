import logging
import sys
import time

import pytest

from hott.inductive.bool import BoolType, False_, True_
from hott.inductive.eq import Refl
from hott.inductive.prod import Pair, ProdType
from hott.kernel.ast import Univ
from hott.kernel.tel import mk_app
from hott.library import LEMMAS, RECURSION_FLOOR, Lemma, check_library

EXPORTED = [
    "eta_prod",
    "unpack_prod",
    "path_prod",
    "path_prod'",
    "path_prod_uncurried",
    "ap_fst_path_prod",
    "ap_snd_path_prod",
    "eta_path_prod",
    "isequiv_path_prod",
    "equiv_path_prod",
    "transport_prod",
    "functor_prod",
    "functor_prod_idmap",
    "functor_prod_compose",
    "ap_functor_prod",
    "isequiv_functor_prod",
    "equiv_functor_prod",
    "isequiv_prod_rect",
    "contr_prod",
    "hlevel_prod",
]


def test_every_operation_is_exported() -> None:
    assert list(LEMMAS) == EXPORTED


@pytest.mark.parametrize("name", EXPORTED)
def test_lemma_checks(name: str) -> None:
    LEMMAS[name].check()


def test_closed_lemma_computes_on_concrete_arguments() -> None:
    B = BoolType()
    z = Pair(B, B, False_(), True_())
    applied = mk_app(LEMMAS["eta_prod"].term, B, B, z)

    assert applied.normalize() == Refl(ProdType(B, B), z)


def test_wrong_statement_is_rejected() -> None:
    lemma = Lemma(
        "bad_eta",
        (Univ(0), Univ(0), lambda A, B: ProdType(A, B)),
        lambda A, B, z: ProdType(B, A),
        lambda A, B, z: z,
    )
    with pytest.raises(TypeError):
        lemma.check()


def test_check_library_selection_and_logging(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="hott.library"):
        checked = check_library(["eta_prod", "path_prod"])

    assert checked == ["eta_prod", "path_prod"]
    assert "Checking path_prod" in caplog.text
    assert "Checked 2 lemmas" in caplog.text


def test_check_library_unknown_name() -> None:
    with pytest.raises(KeyError):
        check_library(["eta_prod", "no_such_lemma"])


def test_check_library_restores_recursion_limit() -> None:
    limit = sys.getrecursionlimit()
    lowered = RECURSION_FLOOR // 2
    sys.setrecursionlimit(lowered)
    try:
        check_library(["eta_prod"])
        assert sys.getrecursionlimit() == lowered
    finally:
        sys.setrecursionlimit(limit)


def test_whole_library_checks_in_bounded_time() -> None:
    start = time.perf_counter()
    checked = check_library()

    assert checked == EXPORTED
    assert time.perf_counter() - start < 120
