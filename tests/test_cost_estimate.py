import dataclasses

import pytest

from stark_sdk.cost_estimate import (
    FriOpenInputCostEstimate,
    FriQueryCostEstimate,
    FriVerifierCostEstimate,
    MmcsVerifyBatchCostEstimate,
    VerifierCostParameters,
)
from stark_sdk.fri_params import FriParameters, FAST_TEST_ENV_VAR


@pytest.fixture
def params(monkeypatch):
    monkeypatch.delenv(FAST_TEST_ENV_VAR, raising=False)
    return FriParameters.standard_with_100_bits_conjectured_security(2)


def test_from_dim_keeps_dimensions():
    est = MmcsVerifyBatchCostEstimate.from_dim(11, 20)
    assert (est.num_f_to_hash, est.num_compress) == (11, 20)


def test_mmcs_add():
    total = MmcsVerifyBatchCostEstimate.from_dim(1, 2) + MmcsVerifyBatchCostEstimate.from_dim(3, 4)
    assert total == MmcsVerifyBatchCostEstimate.from_dim(4, 6)


def test_open_input_mmcs_is_unscaled(params):
    est = FriOpenInputCostEstimate.estimate(9, 12, 2, params)
    assert est.mmcs == MmcsVerifyBatchCostEstimate.from_dim(9, 12)


def test_open_input_scales_linearly(params):
    one = FriOpenInputCostEstimate.estimate(9, 12, 1, params)
    two = FriOpenInputCostEstimate.estimate(9, 12, 2, params)
    assert two.num_ro_eval == 2 * one.num_ro_eval
    doubled = dataclasses.replace(params, num_queries=2 * params.num_queries)
    assert FriOpenInputCostEstimate.estimate(9, 12, 1, doubled).num_ro_eval == 2 * one.num_ro_eval


def test_open_input_single_query_value():
    single = FriParameters(log_blowup=1, log_final_poly_len=0, num_queries=1, proof_of_work_bits=0)
    assert FriOpenInputCostEstimate.estimate(3, 5, 2, single).num_ro_eval == 6


def test_open_input_add(params):
    a = FriOpenInputCostEstimate.estimate(2, 4, 1, params)
    b = FriOpenInputCostEstimate.estimate(3, 4, 1, params)
    c = a + b
    assert c.num_ro_eval == a.num_ro_eval + b.num_ro_eval
    assert c.mmcs == a.mmcs + b.mmcs


def test_query_scales_with_queries(params):
    one = FriQueryCostEstimate.estimate(10, params)
    doubled = dataclasses.replace(params, num_queries=2 * params.num_queries)
    two = FriQueryCostEstimate.estimate(10, doubled)
    assert two.num_fri_folds == 2 * one.num_fri_folds
    assert two.mmcs.num_f_to_hash == 2 * one.mmcs.num_f_to_hash
    assert two.mmcs.num_compress == 2 * one.mmcs.num_compress


def test_query_zero_height(params):
    est = FriQueryCostEstimate.estimate(0, params)
    assert est.num_fri_folds == 0
    assert est.mmcs == MmcsVerifyBatchCostEstimate(0, 0)


def test_query_single_query_value():
    single = FriParameters(log_blowup=1, log_final_poly_len=0, num_queries=1, proof_of_work_bits=0)
    est = FriQueryCostEstimate.estimate(4, single)
    assert est.mmcs.num_compress == 8
    assert est.num_fri_folds == 4


def test_verifier_sums_rounds(params):
    cost = VerifierCostParameters(
        num_main_columns=30, num_perm_columns=8, log_max_height=16, quotient_degree=2
    )
    total = FriVerifierCostEstimate.estimate(cost, params, 4)
    expected_open = (
        FriOpenInputCostEstimate.estimate(30, 16, 2, params)
        + FriOpenInputCostEstimate.estimate(8, 16, 2, params)
        + FriOpenInputCostEstimate.estimate(8, 16, 1, params)
    )
    query = FriQueryCostEstimate.estimate(16, params)
    assert total.open_input == expected_open
    assert total.query == query + query + query


def test_verifier_ext_degree_only_affects_quotient(params):
    cost = VerifierCostParameters(
        num_main_columns=5, num_perm_columns=0, log_max_height=8, quotient_degree=0
    )
    a = FriVerifierCostEstimate.estimate(cost, params, 4)
    b = FriVerifierCostEstimate.estimate(cost, params, 2)
    assert a == b