"""Test the problem-level entry point solve_problem()."""

import pytest

from visit_routing import (
    ConfigurationError,
    ILSConfig,
    Problem,
    evaluate,
    get_tour_cost,
    solve_problem,
)


def test_solve_problem_returns_valid_tour():
    """solve_problem(problem) returns a permutation with a consistent cost."""
    p = Problem(15, density=0.5, seed=42)
    result = solve_problem(p, config=ILSConfig(max_iterations=10), rng_seed=1)

    assert sorted(result.best_tour) == list(range(15))
    assert result.best_cost == pytest.approx(evaluate(result.best_tour, p.distance_matrix()))


def test_solve_problem_improves_on_starting_tour():
    p = Problem(25, seed=3)
    matrix = p.distance_matrix()
    baseline = evaluate(list(range(25)), matrix)

    result = solve_problem(p, config=ILSConfig(max_iterations=20), initial="identity")
    assert result.best_cost <= baseline + 1e-9


@pytest.mark.parametrize("initial", ["identity", "random", "nearest"])
def test_initial_tour_kinds(initial):
    p = Problem(10, seed=0)
    result = solve_problem(p, config=ILSConfig(max_iterations=5), initial=initial, rng_seed=2)
    assert sorted(result.best_tour) == list(range(10))


def test_rng_seed_seeds_the_search():
    p = Problem(12, seed=5)
    result = solve_problem(p, config=ILSConfig(max_iterations=3), rng_seed=17)
    assert result.seed == 17


def test_parallel_workers():
    p = Problem(12, seed=9)
    result = solve_problem(
        p,
        config=ILSConfig(max_iterations=5, seed=4),
        workers=3,
        use_processes=False,
    )
    assert result.worker_id in (0, 1, 2)
    assert sorted(result.best_tour) == list(range(12))


def test_get_tour_cost():
    p = Problem(10, seed=1)
    cost = get_tour_cost(p, config=ILSConfig(max_iterations=5, seed=0))
    assert cost > 0


def test_unknown_initial_kind_rejected():
    with pytest.raises(ConfigurationError):
        solve_problem(Problem(5, seed=0), initial="spiral")


def test_zero_workers_rejected():
    with pytest.raises(ConfigurationError):
        solve_problem(Problem(5, seed=0), workers=0)
