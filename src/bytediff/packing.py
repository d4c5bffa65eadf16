from typing import Iterable, Optional
from .utils import (
    AllocationError, Diff, EditScript, OpType, Operation, PackedDiff, PackedScript,
    make_delete, make_insert, make_packed_delete, make_packed_insert, operations_of
)
from .myers import diff


class RunAccumulator:
    """The single pending run while packing: a delete run or an insert run."""

    def __init__(self, op: OpType, start_pos: int):
        self.op = op
        self.start_pos = start_pos
        self.length = 0
        self.chars = bytearray()

    def extends(self, action: Operation) -> bool:
        return action.op == self.op and action.pos == self.start_pos + self.length

    def add(self, action: Operation):
        if action.op == OpType.INSERT:
            self.chars.append(action.char)
        self.length += 1

    def flush(self):
        if self.op == OpType.INSERT:
            return make_packed_insert(self.start_pos, self.chars)
        return make_packed_delete(self.start_pos, self.length)


class Packer:
    def __init__(self, operations: Iterable[Operation]):
        self.operations = operations_of(operations)

    def compute(self) -> PackedScript:
        packed: PackedScript = []
        run: Optional[RunAccumulator] = None
        for action in self.operations:
            if action.op not in (OpType.INSERT, OpType.DELETE):
                raise ValueError(f"Unknown operation: {action!r}")
            if run is None or not run.extends(action):
                if run is not None:
                    packed.append(run.flush())
                run = RunAccumulator(action.op, action.pos)
            run.add(action)
        if run is not None:
            packed.append(run.flush())
        return packed


def pack(operations) -> PackedDiff:
    try:
        return PackedDiff(Packer(operations).compute())
    except MemoryError as e:
        raise AllocationError("out of memory packing script") from e


def unpack(packed_operations) -> Diff:
    try:
        script: EditScript = []
        for action in operations_of(packed_operations):
            if action.op == OpType.DELETE:
                script.extend(make_delete(action.start_pos + i) for i in range(action.length))
            elif action.op == OpType.INSERT:
                script.extend(make_insert(action.start_pos + i, char)
                              for i, char in enumerate(action.chars))
            else:
                raise ValueError(f"Unknown operation: {action!r}")
        return Diff(script)
    except MemoryError as e:
        raise AllocationError("out of memory unpacking script") from e


def packed_diff(original: bytes, modified: bytes) -> PackedDiff:
    with diff(original, modified) as script:
        return pack(script)


def packed_apply(original: bytes, packed_operations) -> bytes:
    try:
        buffer = bytearray(original)
        offset = 0
        for action in operations_of(packed_operations):
            if action.op == OpType.DELETE:
                index = action.start_pos + offset
                if action.length < 0 or not 0 <= index <= len(buffer) - action.length:
                    raise ValueError(f"{action!r} out of range for buffer of {len(buffer)} bytes")
                for _ in range(action.length):
                    del buffer[index]
                    offset -= 1
            elif action.op == OpType.INSERT:
                if not 0 <= action.start_pos <= len(buffer):
                    raise ValueError(f"{action!r} out of range for buffer of {len(buffer)} bytes")
                buffer[action.start_pos:action.start_pos] = action.chars
                offset += len(action.chars)
            else:
                raise ValueError(f"Unknown operation: {action!r}")
        return bytes(buffer)
    except MemoryError as e:
        raise AllocationError(f"out of memory applying packed script to {len(original)} bytes") from e
