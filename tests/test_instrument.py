import copy

from stark_sdk.fri_params import FriParameters
from stark_sdk.instrument import HashStatistics, Instrumented, StarkHashStatistics


class ReversePerm:
    def permute(self, state):
        return list(reversed(state))


class SumCompress:
    def compress(self, inputs):
        return sum(inputs)


class LenHash:
    def __init__(self):
        self.seen = []

    def hash_iter(self, items):
        items = list(items)
        self.seen.append(items)
        return [len(items)]


def _all_lens(instr):
    return [n for lens in instr.input_lens_by_type.values() for n in lens]


def test_permute_counts_and_delegates():
    instr = Instrumented(ReversePerm())
    out = [instr.permute([1, 2, 3]) for _ in range(3)]
    assert out[0] == [3, 2, 1]
    assert len(instr.input_lens_by_type) == 1
    assert _all_lens(instr) == [1, 1, 1]


def test_permute_distinguishes_widths():
    instr = Instrumented(ReversePerm())
    instr.permute([1, 2])
    instr.permute([1, 2, 3])
    assert len(instr.input_lens_by_type) == 2


def test_off_records_nothing():
    instr = Instrumented(ReversePerm())
    instr.is_on = False
    assert instr.permute([5, 6]) == [6, 5]
    assert instr.input_lens_by_type == {}


def test_compress_counts_arity():
    instr = Instrumented(SumCompress())
    assert instr.compress([4, 9]) == 13
    assert _all_lens(instr) == [2]


def test_hash_iter_counts_items():
    inner = LenHash()
    instr = Instrumented(inner)
    result = instr.hash_iter(x for x in range(5))
    assert result == [5]
    assert inner.seen == [[0, 1, 2, 3, 4]]
    assert _all_lens(instr) == [5]


def test_hash_iter_off_passes_through():
    inner = LenHash()
    instr = Instrumented(inner)
    instr.is_on = False
    assert instr.hash_iter(iter([1, 2])) == [2]
    assert instr.input_lens_by_type == {}


def test_copy_shares_counter():
    instr = Instrumented(ReversePerm())
    other = copy.copy(instr)
    other.permute([1])
    assert _all_lens(instr) == [1]


def test_statistics_hold_values():
    params = FriParameters.standard_fast()
    stats = StarkHashStatistics(
        name="perm", stats=HashStatistics(permutations=7), fri_params=params, custom={"w": 1}
    )
    assert stats.stats.permutations == 7
    assert stats.fri_params == params
    assert stats.custom == {"w": 1}