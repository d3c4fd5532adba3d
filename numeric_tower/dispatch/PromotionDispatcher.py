import logging
from contextlib import ExitStack
from typing import Any, Iterable

from ..classifier import OperandClassifier, Kind, INTEGER_KINDS, NUMERIC_KINDS
from ..errors import TypeMismatch, RangeError
from ..floating import ArbitraryFloat, IArbitraryFloat
from ..integer.abstract.IArbitraryInteger import IArbitraryInteger
from ..mpc import MPC, Cell
from ..mutation import MutationStrategy
from ..rational import ArbitraryRational, IArbitraryRational
from .Operation import Operation, FusedOperation, CELL_PRIMITIVES, FUSED_PRIMITIVES
from .abstract.IPromotionDispatcher import IPromotionDispatcher

logger = logging.getLogger(__name__)


class PromotionDispatcher(IPromotionDispatcher):
    """Implementation of the integer promotion lattice."""

    @staticmethod
    def binary_op(operation: Operation, receiver: IArbitraryInteger, arg: Any) -> Any:
        kind = OperandClassifier.classify(arg)
        logger.debug("%s with %s operand", operation.value, kind.name)

        if kind is Kind.ARBITRARY_RATIONAL:
            return PromotionDispatcher._with_rational(operation, receiver, arg)
        if kind is Kind.ARBITRARY_FLOAT:
            return PromotionDispatcher._with_float(operation, receiver, arg)
        if kind is Kind.NATIVE_BIG and operation is Operation.ADD:
            # The converted operand's cell is the result cell
            rop = MPC.init_set(arg)
            MPC.add(rop, rop, receiver.get_cell())
            return receiver.from_cell(rop)
        if kind in INTEGER_KINDS:
            source = receiver.get_cell()
            return MutationStrategy.allocate(
                receiver,
                lambda rop: PromotionDispatcher._apply(operation, rop, source, kind, arg),
            )
        raise PromotionDispatcher._mismatch(operation.value, arg, NUMERIC_KINDS)

    @staticmethod
    def binary_op_inplace(operation: Operation, receiver: IArbitraryInteger, arg: Any) -> None:
        kind = OperandClassifier.classify(arg)
        logger.debug("%s_inplace with %s operand", operation.value, kind.name)

        if kind not in INTEGER_KINDS:
            raise PromotionDispatcher._mismatch(f"{operation.value}_inplace", arg, INTEGER_KINDS)
        MutationStrategy.mutate(
            receiver, lambda rop: PromotionDispatcher._apply(operation, rop, rop, kind, arg)
        )

    @staticmethod
    def fused_inplace(
        operation: FusedOperation, receiver: IArbitraryInteger, b: Any, c: Any
    ) -> None:
        name = f"{operation.value}_inplace"
        cell_primitive, native_primitive = FUSED_PRIMITIVES[operation]

        b_kind = OperandClassifier.classify(b)
        if b_kind not in INTEGER_KINDS:
            raise PromotionDispatcher._mismatch(name, b, INTEGER_KINDS)

        with ExitStack() as scope:
            if b_kind is Kind.ARBITRARY_INT:
                b_cell = b.get_cell()
            else:
                b_cell = scope.enter_context(MPC.temporary(b))

            c_kind = OperandClassifier.classify(c)
            logger.debug("%s with %s and %s operands", name, b_kind.name, c_kind.name)

            if c_kind is Kind.ARBITRARY_INT:
                c_cell = c.get_cell()
                MutationStrategy.mutate(receiver, lambda rop: cell_primitive(rop, b_cell, c_cell))
            elif c_kind is Kind.NATIVE_BIG:
                c_cell = scope.enter_context(MPC.temporary(c))
                MutationStrategy.mutate(receiver, lambda rop: cell_primitive(rop, b_cell, c_cell))
            elif c_kind is Kind.NATIVE_SMALL:
                if c < 0:
                    logger.debug("%s rejected negative native multiplicand %d", name, c)
                    raise RangeError(name, c, f"native multiplicand must be non-negative, got {c}")
                MutationStrategy.mutate(receiver, lambda rop: native_primitive(rop, b_cell, c))
            else:
                raise PromotionDispatcher._mismatch(name, c, INTEGER_KINDS)

    # Private Methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _apply(operation: Operation, rop: Cell, source: Cell, kind: Kind, arg: Any) -> None:
        """Run the integer-kind primitive for operation into rop."""
        if kind is Kind.ARBITRARY_INT:
            CELL_PRIMITIVES[operation](rop, source, arg.get_cell())
        elif kind is Kind.NATIVE_SMALL:
            PromotionDispatcher._apply_native_small(operation, rop, source, arg)
        else:
            with MPC.temporary(arg) as converted:
                CELL_PRIMITIVES[operation](rop, source, converted)

    @staticmethod
    def _apply_native_small(operation: Operation, rop: Cell, source: Cell, arg: int) -> None:
        if operation is Operation.MULTIPLY:
            MPC.mul_si(rop, source, arg)
        elif operation is Operation.ADD:
            if arg >= 0:
                MPC.add_ui(rop, source, arg)
            else:
                MPC.sub_ui(rop, source, -arg)
        else:
            if arg >= 0:
                MPC.sub_ui(rop, source, arg)
            else:
                MPC.add_ui(rop, source, -arg)

    @staticmethod
    def _with_rational(
        operation: Operation, receiver: IArbitraryInteger, arg: IArbitraryRational
    ) -> IArbitraryRational:
        if operation is Operation.ADD:
            return arg.add(receiver)
        if operation is Operation.MULTIPLY:
            return arg.multiply(receiver)

        # receiver - n/d == (receiver*d - n)/d, already in lowest terms
        numerator = MPC.init()
        denominator = MPC.init_set(arg.get_denominator())
        MPC.mul(numerator, receiver.get_cell(), arg.get_denominator_cell())
        MPC.sub(numerator, numerator, arg.get_numerator_cell())
        return ArbitraryRational.from_cells(numerator, denominator)

    @staticmethod
    def _with_float(
        operation: Operation, receiver: IArbitraryInteger, arg: IArbitraryFloat
    ) -> IArbitraryFloat:
        if operation is Operation.ADD:
            return arg.add(receiver)
        if operation is Operation.MULTIPLY:
            return arg.multiply(receiver)
        return ArbitraryFloat.from_integer(receiver, arg.get_precision()).subtract_float(arg)

    @staticmethod
    def _mismatch(operation: str, operand: Any, accepted: Iterable[Kind]) -> TypeMismatch:
        error = TypeMismatch(operation, operand, accepted)
        logger.debug("rejected operand: %s", error)
        return error
