import json
import logging
import warnings
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

import numpy as np
from tabulate import tabulate

logger = logging.getLogger(__name__)

# Absolute tolerance for sign tests and unit-column detection
TOLERANCE = 1e-10

UNBOUNDED = "unbounded"
INFEASIBLE = "infeasible"


# --- Types ---

class ObjectiveType(str, Enum):
    MINIMIZE = "minimize"
    MAXIMIZE = "maximize"


class ConstraintType(str, Enum):
    EQUAL = "="
    LESS_EQUAL = "<="
    GREATER_EQUAL = ">="


class RestrictionType(str, Enum):
    NON_NEGATIVE = "non-negative"
    UNRESTRICTED = "unrestricted"


def is_objective_type(value):
    return value in {member.value for member in ObjectiveType}


def is_constraint_type(value):
    return value in {member.value for member in ConstraintType}


def is_restriction_type(value):
    return value in {member.value for member in RestrictionType}


@dataclass
class Constraint:
    """A single constraint row: ``coefficients · x  (type)  value``."""
    type: ConstraintType
    value: float
    coefficients: list


def _frozen_copy(array):
    copy = np.array(array, dtype=float)
    copy.setflags(write=False)
    return copy


@dataclass(frozen=True)
class LinearProgramSnapshot:
    """
    Deep, read-only copy of the complete state of a LinearProgram.

    The arrays are copies flagged as non-writeable, so a held snapshot never
    observes later mutation of the program it was taken from.
    """
    objective_type: ObjectiveType
    coefficients: np.ndarray
    constant: float
    restrictions: tuple
    constraint_types: tuple
    values: np.ndarray
    matrix: np.ndarray
    is_standard_form: bool
    is_simplex_form: bool
    tolerance: float = TOLERANCE

    @property
    def n(self):
        return len(self.coefficients)

    @property
    def m(self):
        return len(self.values)


# --- Errors ---

class LinearProgramError(Exception):
    """Base class for linear program errors."""
    pass


class LinearProgramSizeError(LinearProgramError):
    """Raised when a dimension does not match the shape of the program."""
    pass


class LinearProgramSolutionError(LinearProgramError):
    """Raised when the simplex bookkeeping reaches an inconsistent state."""
    pass


class LinearProgramDeserializationError(LinearProgramError):
    """Raised when persisted data does not describe a valid program."""

    def __init__(self, message, data, parsed_data):
        super().__init__(message)
        self.data = data
        self.parsed_data = parsed_data


def _is_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # JSON integers are unbounded; the program stores floats
    try:
        float(value)
    except OverflowError:
        return False
    return True


def _as_list(array):
    # Adding 0.0 turns -0.0 into 0.0 so equal programs serialize identically
    return (np.asarray(array, dtype=float) + 0.0).tolist()


def _as_float(value):
    return float(value) + 0.0


# --- Program ---

class LinearProgram:
    def __init__(self, objective_type, tolerance=TOLERANCE):
        """
        Create an empty program:
        Optimize  c^T x + constant
        Subject to  A x (=, <=, >=) b

        :param objective_type: "minimize" or "maximize"
        :param tolerance: absolute tolerance used by the simplex sign and unit-column tests
        """
        self._objective_type = ObjectiveType(objective_type)
        self._tolerance = float(tolerance)
        self._c = np.zeros(0)
        self._constant = 0.0
        self._restrictions = []
        self._types = []
        self._b = np.zeros(0)
        self._A = np.zeros((0, 0))
        self._is_standard_form = False
        self._is_simplex_form = False

    def __repr__(self):
        return f"LinearProgram({self._objective_type.value}, n={self.n}, m={self.m})"

    # --- Accessors ---

    @property
    def objective_type(self):
        return self._objective_type

    @property
    def n(self):
        """Number of variables."""
        return len(self._c)

    @property
    def m(self):
        """Number of constraints."""
        return len(self._b)

    @property
    def tolerance(self):
        return self._tolerance

    @property
    def coefficients(self):
        return self._c.tolist()

    @property
    def restrictions(self):
        return list(self._restrictions)

    @property
    def constraints(self):
        return [
            Constraint(constraint_type, float(value), row.tolist())
            for constraint_type, value, row in zip(self._types, self._b, self._A)
        ]

    @property
    def constant(self):
        return self._constant

    @constant.setter
    def constant(self, value):
        self._constant = float(value)

    @property
    def is_standard_form(self):
        return self._is_standard_form

    @property
    def is_simplex_form(self):
        return self._is_simplex_form

    # --- Mutation ---

    def add_variable(self, coefficient, constraint_coefficients, restriction):
        """
        Append a variable.

        :param coefficient: objective coefficient of the new variable
        :param constraint_coefficients: its coefficient in each existing constraint (length m)
        :param restriction: "non-negative" or "unrestricted"
        """
        restriction = RestrictionType(restriction)
        column = np.asarray(constraint_coefficients, dtype=float).reshape(-1)

        if len(column) != self.m:
            raise LinearProgramSizeError(
                f"Cannot add variable with {len(column)} constraints to program with {self.m} constraints"
            )

        # Standard form survives only non-negative variables
        self._is_standard_form = self._is_standard_form and restriction is RestrictionType.NON_NEGATIVE
        self._is_simplex_form = False

        self._c = np.append(self._c, float(coefficient))
        self._restrictions.append(restriction)
        self._A = np.hstack((self._A, column.reshape(-1, 1)))

    def add_constraint(self, constraint_type, value, coefficients):
        """
        Append a constraint.

        :param constraint_type: "=", "<=" or ">="
        :param value: right-hand side
        :param coefficients: coefficient of every existing variable (length n)
        """
        constraint_type = ConstraintType(constraint_type)
        row = np.asarray(coefficients, dtype=float).reshape(-1)

        if len(row) != self.n:
            raise LinearProgramSizeError(
                f"Cannot add constraint with {len(row)} variables to program with {self.n} variables"
            )

        # Standard form survives only equalities
        self._is_standard_form = self._is_standard_form and constraint_type is ConstraintType.EQUAL
        self._is_simplex_form = False

        self._types.append(constraint_type)
        self._b = np.append(self._b, float(value))
        self._A = np.vstack((self._A, row.reshape(1, -1)))

    # --- Snapshots ---

    def get_snapshot(self):
        """Return a deep copy of the current state."""
        return LinearProgramSnapshot(
            objective_type=self._objective_type,
            coefficients=_frozen_copy(self._c),
            constant=self._constant,
            restrictions=tuple(self._restrictions),
            constraint_types=tuple(self._types),
            values=_frozen_copy(self._b),
            matrix=_frozen_copy(self._A.reshape(self.m, self.n)),
            is_standard_form=self._is_standard_form,
            is_simplex_form=self._is_simplex_form,
            tolerance=self._tolerance,
        )

    def apply_snapshot(self, snapshot):
        """Restore the state held by ``snapshot``. The snapshot itself stays untouched."""
        self._objective_type = ObjectiveType(snapshot.objective_type)
        self._c = np.array(snapshot.coefficients, dtype=float)
        self._constant = float(snapshot.constant)
        self._restrictions = list(snapshot.restrictions)
        self._types = list(snapshot.constraint_types)
        self._b = np.array(snapshot.values, dtype=float)
        self._A = np.array(snapshot.matrix, dtype=float).reshape(len(self._b), len(self._c))
        self._is_standard_form = snapshot.is_standard_form
        self._is_simplex_form = snapshot.is_simplex_form
        self._tolerance = snapshot.tolerance

    @classmethod
    def from_snapshot(cls, snapshot):
        program = cls(snapshot.objective_type, tolerance=snapshot.tolerance)
        program.apply_snapshot(snapshot)
        return program

    @contextmanager
    def preserved_state(self):
        """Context manager restoring the current state on exit, including on error."""
        snapshot = self.get_snapshot()
        try:
            yield snapshot
        finally:
            self.apply_snapshot(snapshot)

    def without_changes(self, action):
        """Run ``action()`` and return its result, then restore the prior state."""
        with self.preserved_state():
            return action()

    # --- Standard form ---

    def standardize(self):
        """
        Convert the program in place to standard form: maximize, equality
        constraints only, every variable non-negative. No-op when already
        in standard form.
        """
        if self._is_standard_form:
            return

        # minimize f  <=>  maximize -f
        if self._objective_type is ObjectiveType.MINIMIZE:
            self._objective_type = ObjectiveType.MAXIMIZE
            self._c = -self._c
            self._constant = -self._constant

        # Inequalities become equalities with a slack variable
        for i in range(self.m):
            if self._types[i] is ConstraintType.GREATER_EQUAL:
                self._types[i] = ConstraintType.LESS_EQUAL
                self._b[i] = -self._b[i]
                self._A[i, :] = -self._A[i, :]

            if self._types[i] is ConstraintType.LESS_EQUAL:
                self._types[i] = ConstraintType.EQUAL
                slack = np.zeros(self.m)
                slack[i] = 1.0
                self.add_variable(0.0, slack, RestrictionType.NON_NEGATIVE)

        # Free variables: x = x+ - x-
        for j in range(self.n):
            if self._restrictions[j] is RestrictionType.NON_NEGATIVE:
                continue

            negative_column = -self._A[:, j]
            self._restrictions[j] = RestrictionType.NON_NEGATIVE
            self.add_variable(-self._c[j], negative_column, RestrictionType.NON_NEGATIVE)

        self._is_standard_form = True
        self._is_simplex_form = False

    def format_to_intermediate_simplex(self, absolute_weights=True):
        """
        Prepare phase 1: make every right-hand side non-negative, replace the
        objective by the auxiliary one and append one artificial variable per
        constraint, so that ``A x + I x_a = b`` has the artificials as its
        initial basis.

        The auxiliary objective is ``-sum(b) + sum_i |a_ij| x_j``. With
        ``absolute_weights=False`` the column weights are ``sum_i a_ij``,
        which is the classical ``maximize -sum(x_a)`` objective.
        """
        if self._is_simplex_form:
            return

        self.standardize()

        negative = self._b < 0
        self._b[negative] = -self._b[negative]
        self._A[negative, :] = -self._A[negative, :]

        weights = np.abs(self._A) if absolute_weights else self._A
        self._constant = -float(self._b.sum())
        self._c = weights.sum(axis=0).reshape(-1)

        for i in range(self.m):
            artificial = np.zeros(self.m)
            artificial[i] = 1.0
            self.add_variable(0.0, artificial, RestrictionType.NON_NEGATIVE)

        self._is_simplex_form = True

    # --- Simplex ---

    def pivot(self, constraint_index, variable_index):
        """
        Gauss-Jordan step making column ``variable_index`` (s) the unit vector
        at row ``constraint_index`` (r). ``a_rs`` must be nonzero.
        """
        if not 0 <= constraint_index < self.m:
            raise LinearProgramSizeError(
                f"Constraint at index {constraint_index} is undefined in program with {self.m} constraints"
            )
        if not 0 <= variable_index < self.n:
            raise LinearProgramSizeError(
                f"Variable at index {variable_index} is undefined in program with {self.n} variables"
            )

        r, s = constraint_index, variable_index
        snapshot = self.get_snapshot()
        A, b, c = snapshot.matrix, snapshot.values, snapshot.coefficients

        a_rs = A[r, s]
        if abs(a_rs) < self._tolerance:
            warnings.warn(
                f"Small pivot element {a_rs:.2e} at ({r}, {s}) may cause numerical instability.",
                UserWarning,
            )

        c_s = c[s]
        b_r = b[r]

        self._constant = snapshot.constant + (c_s * b_r) / a_rs
        self._c = c - (A[r, :] * c_s) / a_rs

        self._b = b - (A[:, s] * b_r) / a_rs
        self._b[r] = b_r / a_rs

        self._A = A - np.outer(A[:, s], A[r, :]) / a_rs
        self._A[r, :] = A[r, :] / a_rs

        # Clean up numerical residue in the pivot column
        self._A[:, s] = 0.0
        self._A[r, s] = 1.0
        self._c[s] = 0.0

    def solve_simplex_from(self, zero_variables):
        """
        Run the simplex search from the basis whose non-basic variables are
        ``zero_variables``, pivoting with Bland's rule until no objective
        coefficient is positive.

        :return: frozenset of the non-basic variable indices at the optimum,
                 or UNBOUNDED
        """
        if not self._is_simplex_form:
            raise LinearProgramSolutionError("Program is not in simplex form")

        zero_variables = set(zero_variables)

        while True:
            entering = self._entering_variable()
            if entering is None:
                return frozenset(zero_variables)

            leaving_row = self._leaving_row(entering)
            if leaving_row is None:
                return UNBOUNDED

            leaving = self._leaving_variable(leaving_row, zero_variables)

            if entering not in zero_variables:
                raise LinearProgramSolutionError("Pivot column is not zero variable")

            self.pivot(leaving_row, entering)
            zero_variables.remove(entering)
            zero_variables.add(leaving)

            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Pivot on row %d: x%d enters, x%d leaves\n%s",
                    leaving_row, entering + 1, leaving + 1, self.format_tableau(),
                )

    def _entering_variable(self):
        """Bland's rule: lowest index with a positive objective coefficient."""
        candidates = np.flatnonzero(self._c > self._tolerance)
        return int(candidates[0]) if len(candidates) > 0 else None

    def _leaving_row(self, entering):
        """Minimum ratio test; the first row wins ties."""
        column = self._A[:, entering]
        best_row = None
        best_ratio = np.inf

        for i in range(self.m):
            if column[i] <= self._tolerance:
                continue

            value = self._b[i]
            if value > -self._tolerance:
                value = max(value, 0.0)

            ratio = value / column[i]
            if ratio < best_ratio:
                best_ratio = ratio
                best_row = i

        return best_row

    def _unit_columns(self, row):
        """Indices of the columns equal to the unit vector at ``row``."""
        target = np.zeros((self.m, 1))
        target[row, 0] = 1.0
        matches = np.all(np.isclose(self._A, target, rtol=0.0, atol=self._tolerance), axis=0)
        return [int(j) for j in np.flatnonzero(matches)]

    def basic_variables(self, zero_variables):
        """
        Map every constraint row to its basic variable: the first column
        outside ``zero_variables`` that is the unit vector at that row.
        """
        zero_variables = set(zero_variables)
        basis = {}
        for i in range(self.m):
            columns = [j for j in self._unit_columns(i) if j not in zero_variables]
            if not columns:
                raise LinearProgramSolutionError("No basis variable found for constraint")
            basis[i] = columns[0]
        return basis

    def _basis_row(self, variable_index):
        """Row in which the basic variable ``variable_index`` has its 1."""
        column = self._A[:, variable_index]
        rows = np.flatnonzero(np.isclose(column, 1.0, rtol=0.0, atol=self._tolerance))
        for row in rows:
            if variable_index in self._unit_columns(int(row)):
                return int(row)
        raise LinearProgramSolutionError("Non zero variable is not a basic variable")

    def _leaving_variable(self, row, zero_variables):
        candidates = [j for j in self._unit_columns(row) if j not in zero_variables]

        if len(candidates) == 0:
            raise LinearProgramSolutionError("No leaving variable found")
        if len(candidates) > 1:
            raise LinearProgramSolutionError("Multiple leaving variables found")

        return candidates[0]

    def solve_simplex(self):
        """
        Two-phase simplex. Destructive: on success the program holds the
        optimal tableau, whose ``constant`` is the optimal value of the
        standardized (maximize) objective.

        :return: frozenset of the non-basic variable indices (all others are
                 basic, their values are the right-hand sides of their rows),
                 UNBOUNDED or INFEASIBLE
        """
        self.standardize()
        # Phase 1 always starts from the standardized tableau
        self._is_simplex_form = False
        standard_form = self.get_snapshot()

        zero_variables, original_count = self._phase_one(absolute_weights=True)

        if isinstance(zero_variables, str):
            logger.info(
                "Phase 1 with absolute column weights ended %s; retrying with signed weights",
                zero_variables,
            )
            self.apply_snapshot(standard_form)
            zero_variables, original_count = self._phase_one(absolute_weights=False)

            if isinstance(zero_variables, str):
                return zero_variables

        zero_variables = self._drive_out_artificials(zero_variables, original_count)
        self._restore_objective(standard_form, zero_variables)

        logger.info("Phase 2 starts with %d constraints and %d variables", self.m, self.n)
        return self.solve_simplex_from(zero_variables)

    def _phase_one(self, absolute_weights):
        """
        Format and search the auxiliary program.

        :return: (zero variables or sentinel, number of non-artificial variables)
        """
        original_count = self.n
        self.format_to_intermediate_simplex(absolute_weights=absolute_weights)

        result = self.solve_simplex_from(range(original_count))
        if result == UNBOUNDED:
            return UNBOUNDED, original_count

        intermediate_objective = self._constant + float(
            sum(self._c[j] for j in range(self.n) if j not in result)
        )
        logger.info("Phase 1 objective: %g", intermediate_objective)

        if intermediate_objective < -self._tolerance:
            return INFEASIBLE, original_count

        for j in range(original_count, self.n):
            if j not in result and self._b[self._basis_row(j)] > self._tolerance:
                logger.info("Artificial variable x%d is still positive after phase 1", j + 1)
                return INFEASIBLE, original_count

        return result, original_count

    def _drive_out_artificials(self, zero_variables, original_count):
        """
        Pivot basic artificials out of the basis, drop the redundant rows
        they cannot leave and strip every artificial column.
        """
        zero_variables = set(zero_variables)
        redundant_rows = set()

        for j in range(original_count, self.n):
            if j in zero_variables:
                continue

            row = self._basis_row(j)
            candidates = np.flatnonzero(np.abs(self._A[row, :original_count]) > self._tolerance)

            if len(candidates) == 0:
                redundant_rows.add(row)
                continue

            entering = int(candidates[0])
            if entering not in zero_variables:
                raise LinearProgramSolutionError("Pivot variable is not a zero variable")

            self.pivot(row, entering)
            zero_variables.remove(entering)
            zero_variables.add(j)

        if redundant_rows:
            logger.info("Removing %d redundant constraints", len(redundant_rows))

        for row in sorted(redundant_rows, reverse=True):
            del self._types[row]
            self._b = np.delete(self._b, row)
            self._A = np.delete(self._A, row, axis=0)

        self._c = self._c[:original_count].copy()
        self._restrictions = self._restrictions[:original_count]
        self._A = self._A[:, :original_count].copy()

        return {j for j in zero_variables if j < original_count}

    def _restore_objective(self, standard_form, zero_variables):
        """Express the standardized objective in terms of the current basis."""
        basis_by_row = self.basic_variables(zero_variables)
        basis = [basis_by_row[i] for i in range(self.m)]

        original_c = np.asarray(standard_form.coefficients, dtype=float)
        basis_c = original_c[np.asarray(basis, dtype=int)]

        reduced_costs = original_c - basis_c @ self._A.reshape(self.m, self.n)
        reduced_costs[np.asarray(basis, dtype=int)] = 0.0

        self._c = reduced_costs
        self._constant = standard_form.constant + float(basis_c @ self._b)
        self._is_standard_form = True
        self._is_simplex_form = True

    # --- Display ---

    @staticmethod
    def _limit_fraction(value, fraction_digits=3):
        """Limit the number of digits in a fraction's numerator and denominator."""
        if value is None or abs(float(value)) < 1e-10:
            return Fraction(0)

        frac = Fraction(value) if not isinstance(value, Fraction) else value
        max_value = 10 ** fraction_digits - 1

        if abs(frac.numerator) > max_value or abs(frac.denominator) > max_value:
            return Fraction(float(frac)).limit_denominator(max_value)
        return frac

    def format_tableau(self, use_fractions=False, fraction_digits=3):
        """Render the objective row and the constraint rows as a table."""
        def cell(value):
            if use_fractions:
                return str(self._limit_fraction(float(value), fraction_digits))
            return float(value)

        headers = [""] + [f"x{j + 1}" for j in range(self.n)] + ["", "RHS"]
        rows = [["z"] + [cell(v) for v in self._c] + ["", cell(self._constant)]]
        for i in range(self.m):
            rows.append(
                [f"R{i + 1}"] + [cell(v) for v in self._A[i]] + [self._types[i].value, cell(self._b[i])]
            )

        return tabulate(rows, headers=headers, floatfmt=".4f")

    # --- Persistence ---

    def serialize(self):
        data = {
            "objectiveType": self._objective_type.value,
            "coefficients": _as_list(self._c),
            "restrictions": [restriction.value for restriction in self._restrictions],
            "constraints": [
                {
                    "type": constraint_type.value,
                    "value": _as_float(value),
                    "coefficients": _as_list(row),
                }
                for constraint_type, value, row in zip(self._types, self._b, self._A)
            ],
            "constant": _as_float(self._constant),
        }

        return json.dumps(data, indent=2)

    @classmethod
    def deserialize(cls, data, tolerance=TOLERANCE):
        """
        Build a program from its serialized form. Every structural problem
        raises LinearProgramDeserializationError carrying the raw text and
        whatever was parsed.
        """
        def fail(message, parsed):
            return LinearProgramDeserializationError(message, data, parsed)

        try:
            parsed = json.loads(data)
        except (TypeError, ValueError) as e:
            raise fail("Data is not valid JSON", None) from e

        if parsed is None:
            raise fail("Data is null", parsed)
        if not isinstance(parsed, dict):
            raise fail("Data is not an object", parsed)

        for field, label in [
            ("objectiveType", "objective type"),
            ("coefficients", "coefficients"),
            ("restrictions", "restrictions"),
            ("constraints", "constraints"),
            ("constant", "constant"),
        ]:
            if field not in parsed:
                raise fail(f"Missing {label}", parsed)

        objective_type = parsed["objectiveType"]
        if not isinstance(objective_type, str):
            raise fail("Objective type is not a string", parsed)
        if not is_objective_type(objective_type):
            raise fail("Invalid objective type", parsed)

        coefficients = parsed["coefficients"]
        if not isinstance(coefficients, list):
            raise fail("Coefficients is not an array", parsed)
        if not all(_is_number(c) for c in coefficients):
            raise fail("Some coefficients are not numbers", parsed)

        restrictions = parsed["restrictions"]
        if not isinstance(restrictions, list):
            raise fail("Restrictions is not an array", parsed)
        if not all(isinstance(r, str) for r in restrictions):
            raise fail("Some restrictions are not strings", parsed)
        if not all(is_restriction_type(r) for r in restrictions):
            raise fail("Some restrictions are not valid", parsed)
        if len(coefficients) != len(restrictions):
            raise fail("Coefficients and restrictions have different lengths", parsed)

        raw_constraints = parsed["constraints"]
        if not isinstance(raw_constraints, list):
            raise fail("Constraints is not an array", parsed)

        constraints = []
        for i, constraint in enumerate(raw_constraints):
            if constraint is None:
                raise fail(f"Constraint at index {i} is null", parsed)
            if not isinstance(constraint, dict):
                raise fail(f"Constraint at index {i} is not an object", parsed)

            if "type" not in constraint:
                raise fail(f"Missing type in constraint at index {i}", parsed)
            if not isinstance(constraint["type"], str):
                raise fail(f"Type in constraint at index {i} is not a string", parsed)
            if not is_constraint_type(constraint["type"]):
                raise fail(f"Invalid type in constraint at index {i}", parsed)

            if "value" not in constraint:
                raise fail(f"Missing value in constraint at index {i}", parsed)
            if not _is_number(constraint["value"]):
                raise fail(f"Value in constraint at index {i} is not a number", parsed)

            if "coefficients" not in constraint:
                raise fail(f"Missing coefficients in constraint at index {i}", parsed)
            if not isinstance(constraint["coefficients"], list):
                raise fail(f"Coefficients in constraint at index {i} is not an array", parsed)
            if not all(_is_number(c) for c in constraint["coefficients"]):
                raise fail(f"Some coefficients in constraint at index {i} are not numbers", parsed)
            if len(constraint["coefficients"]) != len(coefficients):
                raise fail(f"Constraint at index {i} has different number of coefficients", parsed)

            constraints.append(
                Constraint(ConstraintType(constraint["type"]), constraint["value"], constraint["coefficients"])
            )

        if not _is_number(parsed["constant"]):
            raise fail("Constant is not a number", parsed)

        program = cls(objective_type, tolerance=tolerance)
        for coefficient, restriction in zip(coefficients, restrictions):
            program.add_variable(coefficient, [], restriction)
        for constraint in constraints:
            program.add_constraint(constraint.type, constraint.value, constraint.coefficients)
        program.constant = parsed["constant"]

        return program


# Example Usage
if __name__ == "__main__":
    """
    Example problem:

        Maximize:    z = 2x + 3y

        Subject to:
            x + y  ≤ 4
            x, y ≥ 0
    """
    logging.basicConfig(level=logging.INFO)

    program = LinearProgram("maximize")
    program.add_variable(2, [], "non-negative")
    program.add_variable(3, [], "non-negative")
    program.add_constraint("<=", 4, [1, 1])

    result = program.solve_simplex()
    print(f"Non-basic variables: {result}")
    print(program.format_tableau())
    print(f"Optimal value: {program.constant}")
