"""Smoke tests for the experiment framework."""

import pytest

from experiments import (
    POLICY_CONFIGS,
    InstanceConfig,
    build_problem,
    get_instance_configs,
    run_configuration,
    run_single_instance,
)
from experiments.benchmark import AggregatedResult, best_variant_per_config


def test_single_instance_never_worse_than_baseline():
    r = run_single_instance(15, 0.5, seed=1, max_iterations=5, time_budget_s=None)
    assert r.config == (15, 0.5)
    assert r.iterations == 5
    assert r.strategy_cost <= r.baseline_cost + 1e-9
    assert r.improvement_pct >= 0.0


@pytest.mark.parametrize("variant", sorted(POLICY_CONFIGS))
def test_every_variant_runs(variant):
    agg = run_configuration(InstanceConfig(10, 1.0), variant, n_seeds=2, max_iterations=3)
    assert agg.n_seeds == 2
    assert agg.variant == variant
    assert agg.strategy_mean <= agg.baseline_mean + 1e-9


def test_best_variant_per_config():
    def agg(variant, mean):
        return AggregatedResult((10, 1.0), variant, 1, 5.0, mean, 0.0, 0.0, 0.0)

    best = best_variant_per_config([agg("greedy", 4.0), agg("explore", 3.5)])
    assert best == {(10, 1.0): "explore"}


def test_instance_configs_and_builder():
    seeds = list(get_instance_configs(n_seeds=2))
    assert seeds[0] == (20, 1.0, 0)
    assert len(seeds) % 2 == 0

    p = build_problem(8, 1.0, seed=0)
    assert p.num_cities == 8
