from enum import Enum

from ..mpc import MPC


class Operation(Enum):
    """Binary operations routed through the promotion dispatcher."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"


class FusedOperation(Enum):
    """Fused multiply operations accumulating into the receiver."""

    ADDMUL = "addmul"
    SUBMUL = "submul"


# Two-cell primitive for each operation
CELL_PRIMITIVES = {
    Operation.ADD: MPC.add,
    Operation.SUBTRACT: MPC.sub,
    Operation.MULTIPLY: MPC.mul,
}

# (cell primitive, unsigned native primitive) for each fused operation
FUSED_PRIMITIVES = {
    FusedOperation.ADDMUL: (MPC.addmul, MPC.addmul_ui),
    FusedOperation.SUBMUL: (MPC.submul, MPC.submul_ui),
}
