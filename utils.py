# utils.py
import numpy as np
from scipy.optimize import linprog

from linear_program import (
    LinearProgram,
    ObjectiveType,
    ConstraintType,
    RestrictionType,
)


def basic_variables(program, zero_variables):
    """Map every constraint row to its basic variable."""
    return program.basic_variables(zero_variables)


def extract_solution(program, zero_variables):
    """Values of all current variables: basic ones read their row's right-hand side, the rest are 0."""
    x = np.zeros(program.n)
    for row, variable in basic_variables(program, zero_variables).items():
        x[variable] = program.constraints[row].value
    return x


def objective_value(program, zero_variables, coefficients, constant=0.0):
    x = extract_solution(program, zero_variables)
    coefficients = np.asarray(coefficients, dtype=float)
    return float(coefficients @ x[:len(coefficients)]) + constant


def solve_lp_scipy(program):
    """
    Solve a LinearProgram (in any form) with SciPy's linprog:
    Optimize c^T x + constant
    Subject to A x (=, <=, >=) b, with the program's variable restrictions

    Returns (x, objective value in the program's own sense).
    """
    c = np.asarray(program.coefficients, dtype=float)
    sign = -1.0 if program.objective_type is ObjectiveType.MAXIMIZE else 1.0

    A_ub, b_ub, A_eq, b_eq = [], [], [], []
    for constraint in program.constraints:
        row = np.asarray(constraint.coefficients, dtype=float)
        if constraint.type is ConstraintType.EQUAL:
            A_eq.append(row)
            b_eq.append(constraint.value)
        elif constraint.type is ConstraintType.LESS_EQUAL:
            A_ub.append(row)
            b_ub.append(constraint.value)
        else:
            A_ub.append(-row)
            b_ub.append(-constraint.value)

    bounds = [
        (0, None) if restriction is RestrictionType.NON_NEGATIVE else (None, None)
        for restriction in program.restrictions
    ]

    result = linprog(
        sign * c,
        A_ub=np.array(A_ub) if A_ub else None,
        b_ub=np.array(b_ub) if b_ub else None,
        A_eq=np.array(A_eq) if A_eq else None,
        b_eq=np.array(b_eq) if b_eq else None,
        bounds=bounds,
        method='highs',
    )

    if result.success:
        return result.x, sign * result.fun + program.constant
    else:
        error_messages = {
            2: "Problem is infeasible",
            3: "Problem is unbounded"
        }
        msg = error_messages.get(result.status, f"SciPy linprog failed: {result.message} (Status: {result.status})")
        raise ValueError(msg)


def convert_to_fraction(value, fraction_digits=3, force_float=False):
    """
    Convert a decimal value to a fraction string or formatted float.

    Args:
        value: The numerical value to convert.
        fraction_digits: Max digits for numerator/denominator or float precision.
        force_float: If True, always return formatted float.

    Returns:
        Formatted string representation.
    """
    try:
        float_value = float(value)
        if force_float:
            return f"{float_value:.{fraction_digits}f}"

        frac = LinearProgram._limit_fraction(float_value, fraction_digits)
        if abs(float(frac) - float_value) > 10 ** -fraction_digits:
            return f"{float_value:.{fraction_digits}f}"
        return str(frac)

    except (ValueError, TypeError, OverflowError):
        return str(value)  # Return original if conversion fails


def create_example_3d():
    """Create a simple example 3D LP problem (Minimize)"""
    program = LinearProgram("minimize")
    for coefficient in [-2, -3, -4]:
        program.add_variable(coefficient, [], "non-negative")
    program.add_constraint("<=", 6, [1, 1, 1])
    program.add_constraint("<=", 4, [2, 1, 0])
    program.add_constraint("<=", 7, [0, 1, 3])
    return program


def create_example_2d():
    """Create a simple example 2D LP problem (Minimize)"""
    # Minimize: z = -3x1 - 5x2
    # Subject to:
    #   x1 <= 4
    #   2x2 <= 12  (x2 <= 6)
    #   3x1 + 2x2 <= 18
    #   x1, x2 >= 0
    # Optimal: x1=2, x2=6, z = -36
    program = LinearProgram("minimize")
    program.add_variable(-3, [], "non-negative")
    program.add_variable(-5, [], "non-negative")
    program.add_constraint("<=", 4, [1, 0])
    program.add_constraint("<=", 12, [0, 2])
    program.add_constraint("<=", 18, [3, 2])
    return program
