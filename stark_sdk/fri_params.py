"""FRI protocol parameters and the standard presets."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_logger = logging.getLogger(__name__)

FAST_TEST_ENV_VAR = "STARK_FAST_TEST"

# log_blowup -> (num_queries, proof_of_work_bits)
_STANDARD_PRESETS: dict[int, tuple[int, int]] = {
    1: (100, 16),
    2: (42, 16),
    3: (28, 16),
    4: (21, 16),
}


@dataclass(frozen=True)
class FriParameters:
    """Parameters of the FRI low-degree test."""

    log_blowup: int
    log_final_poly_len: int
    num_queries: int
    proof_of_work_bits: int

    def get_conjectured_security_bits(self, challenge_field_bits: int) -> int:
        """Conjectured bits of security (ethSTARK, section 5.10.1, eq. 19)."""
        fri_query_security_bits = self.num_queries * self.log_blowup + self.proof_of_work_bits
        return min(challenge_field_bits, fri_query_security_bits)

    @staticmethod
    def standard_fast() -> FriParameters:
        """Standard parameters with the smallest blowup."""
        return standard_fri_params_with_100_bits_conjectured_security(1)

    @staticmethod
    def standard_with_100_bits_conjectured_security(log_blowup: int) -> FriParameters:
        """Standard parameters for the given blowup with 100 bits of security."""
        return standard_fri_params_with_100_bits_conjectured_security(log_blowup)

    def max_constraint_degree(self) -> int:
        """Largest constraint degree these parameters support."""
        return (1 << self.log_blowup) + 1


def standard_fri_params_with_100_bits_conjectured_security(log_blowup: int) -> FriParameters:
    """Pre-defined parameters with 100 bits of conjectured security.

    Assumes the challenge field has more than 100 bits. When the fast-test
    environment variable is set to ``1`` a minimal, insecure preset is returned.
    """
    if os.environ.get(FAST_TEST_ENV_VAR) == "1":
        return FriParameters(
            log_blowup=log_blowup,
            log_final_poly_len=0,
            num_queries=2,
            proof_of_work_bits=0,
        )
    try:
        num_queries, proof_of_work_bits = _STANDARD_PRESETS[log_blowup]
    except KeyError:
        raise ValueError(
            f"No standard FRI params defined for log blowup {log_blowup}"
        ) from None
    params = FriParameters(
        log_blowup=log_blowup,
        log_final_poly_len=0,
        num_queries=num_queries,
        proof_of_work_bits=proof_of_work_bits,
    )
    if params.get_conjectured_security_bits(100) < 100:
        raise AssertionError("standard FRI parameters fall short of 100 bits of security")
    _logger.info(
        "FRI parameters | log_blowup: %-2d | num_queries: %-2d | proof_of_work_bits: %-2d",
        log_blowup,
        params.num_queries,
        params.proof_of_work_bits,
    )
    return params