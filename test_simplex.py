# test_simplex.py

import pytest
import numpy as np
import sys
import os

# Add the directory containing linear_program.py to the Python path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from linear_program import (
    LinearProgram,
    LinearProgramSolutionError,
    ObjectiveType,
    INFEASIBLE,
    UNBOUNDED,
)
from utils import (
    basic_variables,
    convert_to_fraction,
    create_example_2d,
    create_example_3d,
    extract_solution,
    objective_value,
    solve_lp_scipy,
)


def build_program(objective_type, coefficients, constraints, restrictions=None):
    """Helper to build a program from plain lists of (type, value, coefficients)."""
    program = LinearProgram(objective_type)
    if restrictions is None:
        restrictions = ["non-negative"] * len(coefficients)
    for coefficient, restriction in zip(coefficients, restrictions):
        program.add_variable(coefficient, [], restriction)
    for constraint_type, value, row in constraints:
        program.add_constraint(constraint_type, value, row)
    return program


def optimal_value(program, objective_type):
    """The solved program holds the maximize form; convert back to the original sense."""
    if objective_type is ObjectiveType.MINIMIZE:
        return -program.constant
    return program.constant


# --- Two-phase scenarios ---

def test_simple_maximize():
    # Maximize: z = 2x + 3y
    # Subject to:
    #   x + y <= 4
    #   x, y >= 0
    # Optimal: x=0, y=4, z = 12
    program = build_program("maximize", [2, 3], [("<=", 4, [1, 1])])
    result = program.solve_simplex()

    assert result == frozenset({0, 2})
    assert program.n == 3
    assert program.m == 1
    assert program.is_standard_form and program.is_simplex_form
    assert basic_variables(program, result) == {0: 1}
    assert np.allclose(extract_solution(program, result), [0, 4, 0])
    assert program.constant == pytest.approx(12)


def test_simple_le_problem_2d():
    """Test a standard 2D minimization problem with <= constraints."""
    # Minimize: z = -3x1 - 5x2  (From utils.create_example_2d)
    # Subject to:
    #   x1 <= 4
    #   2x2 <= 12
    #   3x1 + 2x2 <= 18
    #   x1, x2 >= 0
    # Optimal: x1=2, x2=6, z = -36
    program = create_example_2d()
    original = program.get_snapshot()
    result = program.solve_simplex()

    assert result == frozenset({3, 4})
    x = extract_solution(program, result)
    assert np.allclose(x, [2, 6, 2, 0, 0])
    assert program.constant == pytest.approx(36)
    assert objective_value(program, result, original.coefficients) == pytest.approx(-36)


def test_example_3d_matches_scipy():
    program = create_example_3d()
    scipy_x, scipy_z = solve_lp_scipy(program)

    result = program.solve_simplex()
    assert isinstance(result, frozenset)

    x = extract_solution(program, result)[:3]
    assert optimal_value(program, ObjectiveType.MINIMIZE) == pytest.approx(scipy_z, abs=1e-6)
    assert np.allclose(x, scipy_x, atol=1e-6)


def test_equality_constraints():
    # Minimize: z = 2x1 + 3x2
    # Subject to:
    #   x1 + x2 = 5
    #   2x1 - x2 = 1
    # Optimal: x1=2, x2=3, z = 13
    program = build_program("minimize", [2, 3], [("=", 5, [1, 1]), ("=", 1, [2, -1])])
    result = program.solve_simplex()

    assert result == frozenset()
    assert np.allclose(extract_solution(program, result), [2, 3])
    assert program.constant == pytest.approx(-13)


def test_greater_equal_constraint():
    # Minimize: z = x
    # Subject to: x >= 2
    program = build_program("minimize", [1], [(">=", 2, [1])])
    result = program.solve_simplex()

    assert result == frozenset({1})
    assert np.allclose(extract_solution(program, result), [2, 0])
    assert program.constant == pytest.approx(-2)


def test_redundant_constraint_is_removed():
    # Maximize: z = x
    # Subject to:
    #   x + y = 2
    #   2x + 2y = 4  (twice the first row)
    program = build_program("maximize", [1, 0], [("=", 2, [1, 1]), ("=", 4, [2, 2])])
    result = program.solve_simplex()

    assert result == frozenset({1})
    assert program.m == 1
    assert program.n == 2
    assert np.allclose(extract_solution(program, result), [2, 0])
    assert program.constant == pytest.approx(2)


def test_artificial_variable_pivoted_out():
    # Maximize: z = x + y
    # Subject to:
    #   x + y = 1
    #   2x + y = 2
    # The artificial of row 2 ends phase 1 basic at 0 and is replaced by y
    program = build_program("maximize", [1, 1], [("=", 1, [1, 1]), ("=", 2, [2, 1])])
    result = program.solve_simplex()

    assert result == frozenset()
    assert program.m == 2
    assert np.allclose(extract_solution(program, result), [1, 0])
    assert program.constant == pytest.approx(1)


def test_free_variable():
    # Maximize: z = x, x unrestricted
    # Subject to: x <= 3
    program = build_program("maximize", [1], [("<=", 3, [1])], ["unrestricted"])
    result = program.solve_simplex()

    assert result == frozenset({1, 2})
    x = extract_solution(program, result)
    # x = x+ - x-
    assert x[0] - x[2] == pytest.approx(3)
    assert program.constant == pytest.approx(3)


def test_objective_constant_is_carried():
    program = build_program("maximize", [2, 3], [("<=", 4, [1, 1])])
    program.constant = 5
    program.solve_simplex()
    assert program.constant == pytest.approx(17)


def test_infeasible_problem():
    # x <= 1 and x >= 2
    program = build_program("maximize", [1], [("<=", 1, [1]), (">=", 2, [1])])
    assert program.solve_simplex() == INFEASIBLE

    with pytest.raises(ValueError, match="Problem is infeasible"):
        solve_lp_scipy(build_program("maximize", [1], [("<=", 1, [1]), (">=", 2, [1])]))


def test_infeasible_equalities():
    program = build_program("minimize", [1, 1], [("=", 1, [1, 1]), ("=", 3, [1, 1])])
    assert program.solve_simplex() == INFEASIBLE


def test_unbounded_problem():
    # Maximize x, x >= 0 only
    program = build_program("maximize", [1], [])
    assert program.solve_simplex() == UNBOUNDED


def test_unbounded_with_unrelated_constraint():
    # Maximize x subject to y <= 1
    program = build_program("maximize", [1, 0], [("<=", 1, [0, 1])])
    assert program.solve_simplex() == UNBOUNDED


def test_empty_program():
    program = LinearProgram("maximize")
    assert program.solve_simplex() == frozenset()
    assert program.constant == 0.0


def test_resolving_a_solved_program():
    program = build_program("maximize", [2, 3], [("<=", 4, [1, 1])])
    first = program.solve_simplex()
    second = program.solve_simplex()
    assert first == second
    assert program.constant == pytest.approx(12)


def test_basic_variables_requires_a_basis():
    program = build_program("maximize", [1, 1], [("=", 1, [2, 2])])
    with pytest.raises(LinearProgramSolutionError, match="No basis variable found for constraint"):
        basic_variables(program, set())


# --- Cross-checks against SciPy ---

@pytest.mark.parametrize("trial", range(5))
def test_random_maximize_problems(trial):
    """Random bounded problems: Maximize c^T x subject to A x <= b."""
    np.random.seed(42 + trial)
    m, n = np.random.randint(2, 5), np.random.randint(2, 5)
    A = np.random.rand(m, n) + 0.1
    b = A.sum(axis=1) + 1
    c = np.random.rand(n) + 0.1

    program = build_program("maximize", c, [("<=", b[i], A[i]) for i in range(m)])
    copy = LinearProgram.deserialize(program.serialize())
    _, scipy_z = solve_lp_scipy(program)

    result = program.solve_simplex()
    assert isinstance(result, frozenset)
    assert program.constant == pytest.approx(scipy_z, abs=1e-6)

    x = extract_solution(program, result)[:n]
    assert np.all(A @ x <= b + 1e-8)
    assert np.all(x >= -1e-10)

    copy.standardize()
    copy.solve_simplex()
    assert copy.constant == pytest.approx(program.constant, abs=1e-9)


@pytest.mark.parametrize("trial", range(5))
def test_random_minimize_problems(trial):
    """Random bounded problems: Minimize c^T x subject to A x >= b, c > 0."""
    np.random.seed(42 + trial)
    m, n = np.random.randint(2, 5), np.random.randint(2, 5)
    A = np.random.rand(m, n) + 0.1
    b = A.sum(axis=1) + 1
    c = np.random.rand(n) + 0.1

    program = build_program("minimize", c, [(">=", b[i], A[i]) for i in range(m)])
    _, scipy_z = solve_lp_scipy(program)

    result = program.solve_simplex()
    assert isinstance(result, frozenset)
    assert optimal_value(program, ObjectiveType.MINIMIZE) == pytest.approx(scipy_z, abs=1e-6)

    x = extract_solution(program, result)[:n]
    assert np.all(A @ x >= b - 1e-8)


@pytest.mark.parametrize("trial", range(3))
def test_standardization_preserves_optimum(trial):
    np.random.seed(100 + trial)
    m, n = 3, 3
    A = np.random.rand(m, n) + 0.1
    # x = (1, 1, 1) is feasible
    b = A.sum(axis=1)
    c = np.random.rand(n) + 0.1

    program = build_program("minimize", c, [(">=", b[0], A[0]), ("<=", 2 * b[1], A[1]), ("=", b[2], A[2])])
    _, original_z = solve_lp_scipy(program)

    program.standardize()
    _, standard_z = solve_lp_scipy(program)

    assert standard_z == pytest.approx(-original_z, abs=1e-6)


# --- Formatting helpers ---

@pytest.mark.parametrize("value, expected", [
    (0.5, "1/2"),
    (1 / 3, "1/3"),
    (-2.0, "-2"),
    (0.0, "0"),
])
def test_convert_to_fraction(value, expected):
    assert convert_to_fraction(value) == expected


def test_convert_to_fraction_fallbacks():
    assert convert_to_fraction(1 / 3, force_float=True) == "0.333"
    assert convert_to_fraction("abc") == "abc"
