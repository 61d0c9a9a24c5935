"""Verifier cost estimation."""

from __future__ import annotations

from dataclasses import dataclass

from .fri_params import FriParameters


@dataclass(frozen=True)
class VerifierCostParameters:
    """Properties of a multi-trace circuit needed to estimate verifier cost."""

    num_main_columns: int
    num_perm_columns: int
    log_max_height: int
    quotient_degree: int


@dataclass(frozen=True)
class MmcsVerifyBatchCostEstimate:
    """Cost of MMCS batch verification: leaf hashing plus 2-to-1 compressions.

    Hashing cost is counted in field elements to hash; matrices of different
    heights are not distinguished.
    """

    num_f_to_hash: int
    num_compress: int

    @staticmethod
    def from_dim(width: int, max_log_height_lde: int) -> MmcsVerifyBatchCostEstimate:
        """Cost for ``width`` base columns in an MMCS of height ``2**max_log_height_lde``."""
        return MmcsVerifyBatchCostEstimate(num_f_to_hash=width, num_compress=max_log_height_lde)

    def __add__(self, other: MmcsVerifyBatchCostEstimate) -> MmcsVerifyBatchCostEstimate:
        return MmcsVerifyBatchCostEstimate(
            num_f_to_hash=self.num_f_to_hash + other.num_f_to_hash,
            num_compress=self.num_compress + other.num_compress,
        )


@dataclass(frozen=True)
class FriOpenInputCostEstimate:
    """Cost of opening inputs: MMCS checks plus reduced-opening evaluations."""

    mmcs: MmcsVerifyBatchCostEstimate
    num_ro_eval: int

    @staticmethod
    def estimate(
        width: int, max_log_height: int, num_points: int, fri_params: FriParameters
    ) -> FriOpenInputCostEstimate:
        """``max_log_height`` is the trace height before blowup."""
        num_ro_eval = width * num_points * fri_params.num_queries
        return FriOpenInputCostEstimate(
            mmcs=MmcsVerifyBatchCostEstimate.from_dim(width, max_log_height),
            num_ro_eval=num_ro_eval,
        )

    def __add__(self, other: FriOpenInputCostEstimate) -> FriOpenInputCostEstimate:
        return FriOpenInputCostEstimate(
            mmcs=self.mmcs + other.mmcs,
            num_ro_eval=self.num_ro_eval + other.num_ro_eval,
        )


@dataclass(frozen=True)
class FriQueryCostEstimate:
    """Cost of FRI queries: MMCS checks plus single fold evaluations."""

    mmcs: MmcsVerifyBatchCostEstimate
    num_fri_folds: int

    @staticmethod
    def estimate(max_log_height: int, fri_params: FriParameters) -> FriQueryCostEstimate:
        """``max_log_height`` is the trace height before blowup."""
        queries = fri_params.num_queries
        per_query_compress = max_log_height * (max_log_height + fri_params.log_blowup - 1) // 2
        return FriQueryCostEstimate(
            mmcs=MmcsVerifyBatchCostEstimate(
                num_f_to_hash=2 * max_log_height * queries,
                num_compress=per_query_compress * queries,
            ),
            num_fri_folds=max_log_height * queries,
        )

    def __add__(self, other: FriQueryCostEstimate) -> FriQueryCostEstimate:
        return FriQueryCostEstimate(
            mmcs=self.mmcs + other.mmcs,
            num_fri_folds=self.num_fri_folds + other.num_fri_folds,
        )


@dataclass(frozen=True)
class FriVerifierCostEstimate:
    """Total FRI verifier cost; constraint evaluation is not counted."""

    open_input: FriOpenInputCostEstimate
    query: FriQueryCostEstimate

    @staticmethod
    def estimate(
        params: VerifierCostParameters, fri_params: FriParameters, ext_degree: int
    ) -> FriVerifierCostEstimate:
        """Sum the main, permutation and quotient rounds; the preprocessed round is ignored."""
        height = params.log_max_height
        rounds = [
            (params.num_main_columns, 2),  # opened at zeta and omega * zeta
            (params.num_perm_columns, 2),
            (params.quotient_degree * ext_degree, 1),  # opened at zeta only
        ]
        open_inputs = [
            FriOpenInputCostEstimate.estimate(width, height, points, fri_params)
            for width, points in rounds
        ]
        queries = [FriQueryCostEstimate.estimate(height, fri_params) for _ in rounds]
        open_input = open_inputs[0]
        for item in open_inputs[1:]:
            open_input = open_input + item
        query = queries[0]
        for item in queries[1:]:
            query = query + item
        return FriVerifierCostEstimate(open_input=open_input, query=query)