"""
Tests for the algorithm runners.

Critical: every log must sort its input, end in exactly one Done, and be
reproducible byte for byte.
"""

import random

import pytest

from sortme.core.errors import UnknownAlgorithmError
from sortme.core.events import (
    Compare,
    Done,
    MarkRangeSorted,
    MarkSorted,
    Pivot,
    Swap,
    Write,
)
from sortme.replay import verify_log
from sortme.runners import available_algorithms, generate_log, get_runner, register_runner
from sortme.runners import registry
from sortme.runners.base import AlgorithmRunner

ALGORITHMS = ["bubble", "selection", "insertion", "merge", "quick"]

FIXED_INPUTS = [
    [],
    [7],
    [2, 1],
    [1, 2, 3, 4],
    [4, 3, 2, 1],
    [3, 3, 3],
    [5, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5],
    [10.5, -2, 3.25, 0, 10.5],
]


def _random_inputs(count=40, seed=1234):
    rng = random.Random(seed)
    return [[rng.randint(1, 20) for _ in range(rng.randint(0, 25))] for _ in range(count)]


ALL_INPUTS = FIXED_INPUTS + _random_inputs()


def test_all_five_algorithms_registered():
    for name in ALGORITHMS:
        assert name in available_algorithms()
        assert get_runner(name).name == name


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_every_log_sorts_its_input(algorithm):
    """Applying the whole log must yield sorted(input) with full coverage."""
    for values in ALL_INPUTS:
        log = generate_log(algorithm, values)
        result = verify_log(values, log)
        assert list(result.snapshot.values) == sorted(values)
        assert result.applied == len(log)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_log_ends_with_exactly_one_done(algorithm):
    for values in ALL_INPUTS:
        log = generate_log(algorithm, values)
        assert isinstance(log.events[-1], Done)
        assert sum(1 for ev in log if isinstance(ev, Done)) == 1


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_trivial_inputs_produce_only_done(algorithm):
    assert generate_log(algorithm, []).events == (Done(),)
    assert generate_log(algorithm, [42]).events == (Done(),)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_log_generation_is_idempotent(algorithm):
    """Same input through the same runner must give an identical log."""
    values = [9, 4, 7, 1, 8, 2, 2, 6]
    first = generate_log(algorithm, values)
    second = generate_log(algorithm, list(values))

    assert first.events == second.events
    assert first.digest() == second.digest()


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_runner_does_not_mutate_input(algorithm):
    values = [5, 2, 8, 1, 9]
    generate_log(algorithm, values)
    assert values == [5, 2, 8, 1, 9]


def test_bubble_sorted_input_exits_after_one_pass():
    log = generate_log("bubble", [1, 2, 3, 4])
    assert log.events == (
        Compare(0, 1),
        Compare(1, 2),
        Compare(2, 3),
        MarkSorted(3),
        MarkRangeSorted(0, 2),
        Done(),
    )


def test_bubble_full_run_marks_first_index():
    log = generate_log("bubble", [2, 1])
    assert log.events == (Compare(0, 1), Swap(0, 1), MarkSorted(1), MarkSorted(0), Done())


def test_selection_scans_from_slot():
    log = generate_log("selection", [5, 3, 1])
    assert log.events == (
        Compare(0, 1),
        Compare(0, 2),
        Swap(0, 2),
        MarkSorted(0),
        Compare(1, 2),
        MarkSorted(1),
        MarkSorted(2),
        Done(),
    )


def test_selection_skips_swap_when_minimum_in_place():
    log = generate_log("selection", [1, 2, 3, 4])
    counts = log.counts()
    assert counts["compare"] == 6
    assert "swap" not in counts


def test_insertion_shifts_with_writes():
    log = generate_log("insertion", [3, 1, 2])
    assert log.events == (
        MarkSorted(0),
        Compare(0, 1),
        Write(1, 3),
        Write(0, 1),
        MarkRangeSorted(0, 1),
        Compare(1, 2),
        Write(2, 3),
        Compare(0, 2),
        Write(1, 2),
        MarkRangeSorted(0, 2),
        Done(),
    )
    assert not any(isinstance(ev, Swap) for ev in log)


def test_merge_prefers_left_on_ties():
    log = generate_log("merge", [2, 1, 2])
    assert log.events == (
        Compare(0, 1),
        Write(0, 1),
        Write(1, 2),
        MarkRangeSorted(0, 1),
        Compare(0, 2),
        Write(0, 1),
        Compare(1, 2),
        Write(1, 2),
        Write(2, 2),
        MarkRangeSorted(0, 2),
        Done(),
    )


def test_quick_pivot_is_last_element():
    log = generate_log("quick", [3, 1, 2])
    assert log.events == (
        Pivot(2),
        Compare(0, 2),
        Compare(1, 2),
        Swap(0, 1),
        Swap(1, 2),
        MarkSorted(1),
        MarkSorted(0),
        MarkSorted(2),
        Done(),
    )


def test_quick_every_partition_announces_its_pivot_first():
    log = generate_log("quick", [6, 2, 9, 4, 4, 1, 7])
    events = list(log)
    for pos, ev in enumerate(events):
        if isinstance(ev, Compare):
            pivots = [e for e in events[:pos] if isinstance(e, Pivot)]
            assert pivots and pivots[-1].i == ev.j


def test_unknown_algorithm_raises():
    with pytest.raises(UnknownAlgorithmError):
        generate_log("bogo", [3, 2, 1])


def test_register_custom_runner(monkeypatch):
    """New algorithms plug in by registering a runner, nothing else."""
    monkeypatch.setattr(registry, "_RUNNERS", dict(registry._RUNNERS))

    class ReverseCheckRunner(AlgorithmRunner):
        name = "exchange"

        def simulate(self, rec):
            n = len(rec.a)
            for i in range(n):
                for j in range(i + 1, n):
                    rec.compare(i, j)
                    if rec.a[j] < rec.a[i]:
                        rec.swap(i, j)
                rec.mark_sorted(i)

    register_runner(ReverseCheckRunner())
    values = [4, 1, 3, 2]
    log = generate_log("exchange", values)

    assert log.algorithm == "exchange"
    assert list(verify_log(values, log).snapshot.values) == [1, 2, 3, 4]


def test_register_runner_requires_name():
    class Nameless(AlgorithmRunner):
        def simulate(self, rec):
            pass

    with pytest.raises(ValueError):
        register_runner(Nameless())
