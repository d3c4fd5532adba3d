from typing import Optional, Tuple

from ..integer.abstract.IArbitraryInteger import IArbitraryInteger
from ..mpc import MPC
from .abstract.IMutationStrategy import IMutationStrategy, Primitive, PairPrimitive


class MutationStrategy(IMutationStrategy):
    """Implementation of the allocating and in-place call forms over MPC cells."""

    @staticmethod
    def allocate(receiver: IArbitraryInteger, primitive: Primitive) -> IArbitraryInteger:
        rop = MPC.init()
        try:
            primitive(rop)
        except Exception:
            MPC.clear(rop)
            raise
        return receiver.from_cell(rop)

    @staticmethod
    def allocate_pair(
        receiver: IArbitraryInteger, primitive: PairPrimitive
    ) -> Tuple[IArbitraryInteger, IArbitraryInteger]:
        rop1 = MPC.init()
        rop2 = MPC.init()
        try:
            primitive(rop1, rop2)
        except Exception:
            MPC.clear(rop1)
            MPC.clear(rop2)
            raise
        return receiver.from_cell(rop1), receiver.from_cell(rop2)

    @staticmethod
    def mutate(receiver: IArbitraryInteger, primitive: Primitive) -> None:
        primitive(receiver.get_cell())

    @staticmethod
    def unary(
        receiver: IArbitraryInteger, primitive: PairPrimitive, in_place: bool
    ) -> Optional[IArbitraryInteger]:
        source = receiver.get_cell()
        if in_place:
            MutationStrategy.mutate(receiver, lambda rop: primitive(rop, source))
            return None
        return MutationStrategy.allocate(receiver, lambda rop: primitive(rop, source))
