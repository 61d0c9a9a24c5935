# stark_sdk

Helpers for working with STARK proof-system configurations over FRI. It has
no dependencies outside the standard library.

## Modules

- `stark_sdk.fri_params`: the frozen dataclass `FriParameters`
  (`log_blowup`, `log_final_poly_len`, `num_queries`, `proof_of_work_bits`)
  with `get_conjectured_security_bits`, `max_constraint_degree`,
  `standard_fast()` and `standard_with_100_bits_conjectured_security(log_blowup)`,
  and the function `standard_fri_params_with_100_bits_conjectured_security`.
  Presets exist for `log_blowup` 1 to 4; any other value raises `ValueError`.
  If the environment variable `STARK_FAST_TEST` is `1`, the presets are
  replaced by a minimal, insecure one (2 queries, no proof of work) meant
  only for tests.
- `stark_sdk.cost_estimate`: verifier cost estimates. `VerifierCostParameters`
  describes a circuit; `FriVerifierCostEstimate.estimate(params, fri_params, ext_degree)`
  sums the main, permutation and quotient rounds out of
  `FriOpenInputCostEstimate`, `FriQueryCostEstimate` and
  `MmcsVerifyBatchCostEstimate`, which can be added together with `+`.
- `stark_sdk.instrument`: `Instrumented`, a wrapper around any object with a
  `permute`, `compress` or `hash_iter` method that records input lengths per
  input type in `input_lens_by_type`; recording can be switched off with
  `is_on`. Also the records `HashStatistics` and `StarkHashStatistics`.
- `stark_sdk.config`: the `EngineType` enum and logging set-up.
  `setup_tracing()` and `setup_tracing_with_log_level(level)` add a handler
  to the root logger (once), keeping loggers whose names start with `p3_` at
  WARNING. A filter such as `info,p3_=warn` in the environment variable
  `STARK_SDK_LOG` takes precedence.
- `stark_sdk.utils`: `RowMajorMatrix`, `ProofInputForTest` (with
  `sort_chips`, tallest trace first), seeded generators
  (`create_seeded_rng`, `create_seeded_rng_with_seed`),
  `generate_random_matrix` and `to_field_vec`. Field elements are plain
  integers modulo the BabyBear prime `BABY_BEAR_MODULUS`.
- `stark_sdk.fib_air`: `FibonacciAir`, whose `check_constraints(trace, public_values)`
  returns the list of violated constraints, `generate_trace_rows(a, b, n)`,
  `FibonacciChip`, `FibonacciCols` and the `AirProofInput` record.
- `stark_sdk.dummy_interaction`: `DummyInteractionAir`, which turns each
  trace row into an `Interaction` (send or receive, see `InteractionType`) on
  a bus, optionally with its fields in a separate cached partition, and
  `DummyInteractionChip`, which pads loaded `DummyInteractionData` to a
  power-of-two height.
- `stark_sdk.bench`: `MetricsRecorder` (gauges and counters),
  `serialize_metric_snapshot`, and `run_with_metric_collection(output_path_envar, f)`,
  which calls `f` with a fresh recorder and, if the named environment
  variable holds a path, writes the snapshot there as pretty JSON.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from stark_sdk.fri_params import FriParameters
from stark_sdk.cost_estimate import FriVerifierCostEstimate, VerifierCostParameters

fri = FriParameters.standard_with_100_bits_conjectured_security(2)
print(fri.num_queries, fri.max_constraint_degree())  # 42 5

params = VerifierCostParameters(
    num_main_columns=10,
    num_perm_columns=8,
    log_max_height=20,
    quotient_degree=2,
)
cost = FriVerifierCostEstimate.estimate(params, fri, 4)
print(cost.query.num_fri_folds)
```

```python
from stark_sdk.fib_air import FibonacciChip

chip = FibonacciChip(0, 1, 8)
proof_input = chip.generate_air_proof_input()
print(proof_input.public_values)  # [0, 1, 21]
print(chip.air().check_constraints(proof_input.common_main, proof_input.public_values))  # []
```

## What it does not do

The package does not generate or verify proofs. It has no proving engine,
no polynomial commitments, no Merkle trees and no hash or permutation
implementations (Poseidon2, Keccak, Blake3); `Instrumented` only wraps such
objects when you supply them. The AIRs here check their constraints and
list their interactions directly on a trace, without a prover.