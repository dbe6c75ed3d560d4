"""
A pocket calculator for Complex numbers supporting '+' and '-'.

The calculator shows a single value at a time. Its state is:

    total     — running total (None until the first operator key)
    operation — pending Operation (None until the first operator key)
    value     — currently displayed value (None after every operator key)

State flow:
    EMPTY   --apply_operation(op)-->  PENDING   (value moved into total)
    PENDING --apply_operation(op)-->  PENDING   (total folded with value using
                                                 the *previous* operation, then
                                                 op is armed)
    PENDING --compute_result()---->   EMPTY     (fold once more, result shown)
    any     --reset()------------->   EMPTY     (everything cleared)

Folding with an empty display is refused with InvalidStateError rather than
combining the total with a missing operand.
"""

from __future__ import annotations

import logging
from enum import Enum

from coursework.algebra.complex import Complex
from coursework.errors import InvalidStateError

logger = logging.getLogger(__name__)


class Operation(Enum):
    PLUS = '+'
    MINUS = '-'

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, left: Complex, right: Complex) -> Complex:
        """Combine two operands with this operation.

        Examples:
            >>> Operation.MINUS.apply(Complex(5, 1), Complex(2, 1))
            Complex(real=3.0, imaginary=0.0)
        """
        if self is Operation.PLUS:
            return left.plus(right)
        return left.minus(right)


def _to_operation(op: Operation | str) -> Operation:
    if isinstance(op, Operation):
        return op
    try:
        return Operation(op)
    except ValueError:
        raise ValueError(f"Unknown operation {op!r}; expected one of '+', '-'.") from None


class Calculator:
    """Single-display accumulator with pending-operation semantics.

    Examples:
        >>> calc = Calculator()
        >>> calc.value = Complex(3, 0)
        >>> calc.apply_operation(Operation.PLUS)
        >>> calc.value = Complex(4, 0)
        >>> calc.compute_result()
        >>> str(calc.value)
        '7 + i0'
    """

    OPERATION_PLUS = Operation.PLUS
    OPERATION_MINUS = Operation.MINUS

    def __init__(self) -> None:
        self._total: Complex | None = None
        self._operation: Operation | None = None
        self.value: Complex | None = None

    @property
    def operation(self) -> Operation | None:
        return self._operation

    def set_value(self, value: Complex) -> None:
        self.value = value

    def apply_operation(self, op: Operation | str) -> None:
        """Fold the displayed value into the running total and arm `op`.

        The fold uses the operation that was pending *before* this call.
        The first operator key only moves the displayed value into the total.

        Raises:
            InvalidStateError: If no value is displayed.
            ValueError: If `op` is not a known operation symbol.
        """
        new_op = _to_operation(op)
        self._fold()
        self._operation = new_op
        logger.debug("Armed %s, running total %s", new_op.symbol, self._total)

    def compute_result(self) -> None:
        """Perform the pending operation and show the result.

        After this call the displayed value holds the result and no
        operation is pending, so the result can start a new chain.

        Raises:
            InvalidStateError: If no value is displayed.
        """
        if self._operation is None:
            if self.value is None:
                raise InvalidStateError("Nothing to compute: no value has been entered.")
            return
        self._fold()
        self.value = self._total
        self._total = None
        self._operation = None
        logger.debug("Result %s", self.value)

    def reset(self) -> None:
        self._total = None
        self._operation = None
        self.value = None
        logger.debug("Calculator reset")

    def _fold(self) -> None:
        if self.value is None:
            raise InvalidStateError(
                "Cannot apply an operation: no value has been entered since the last one."
            )
        if self._total is None:
            self._total = self.value
        else:
            # _operation is always set once _total is
            self._total = self._operation.apply(self._total, self.value)  # type: ignore[union-attr]
        self.value = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calculator):
            return NotImplemented
        return (
            self._total == other._total
            and self._operation == other._operation
            and self.value == other.value
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        value_str = str(self.value) if self.value is not None else ''
        op_str = self._operation.symbol if self._operation is not None else ''
        return value_str + op_str

    def __repr__(self) -> str:
        return (
            f"Calculator(total={self._total!r}, operation={self._operation!r}, "
            f"value={self.value!r})"
        )
