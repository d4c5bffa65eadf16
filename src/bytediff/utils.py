from typing import List, Tuple, NamedTuple, Optional, Iterable, Iterator, Union
from enum import Enum
from dataclasses import dataclass, field


class OpType(str, Enum):
    INSERT = 'insert'
    DELETE = 'delete'


class AllocationError(MemoryError):
    """The host could not provide a buffer while building or applying a script."""


class DiffInvariantError(RuntimeError):
    """The search or backtrack reached a state the algorithm rules out."""


class Operation(NamedTuple):
    op: OpType
    pos: int
    char: Optional[int] = None

    def __repr__(self) -> str:
        if self.op == OpType.INSERT:
            return f"Insert({self.pos}, {bytes([self.char])!r})"
        return f"Delete({self.pos})"


class PackedOperation(NamedTuple):
    op: OpType
    start_pos: int
    length: int
    chars: bytes = b''

    def __repr__(self) -> str:
        if self.op == OpType.INSERT:
            return f"PackedInsert({self.start_pos}, {self.chars!r})"
        return f"PackedDelete({self.start_pos}, {self.length})"


EditScript = List[Operation]
PackedScript = List[PackedOperation]


class _OwnedScript:
    """Owns an operation list until released; usable as a context manager."""

    operations: list

    def release(self):
        self.operations = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    def __len__(self) -> int:
        return len(self.operations)

    def __iter__(self) -> Iterator:
        return iter(self.operations)

    def __getitem__(self, index):
        return self.operations[index]


@dataclass
class Diff(_OwnedScript):
    operations: EditScript = field(default_factory=list)

    @property
    def distance(self) -> int:
        return len(self.operations)


@dataclass
class PackedDiff(_OwnedScript):
    operations: PackedScript = field(default_factory=list)

    @property
    def distance(self) -> int:
        return sum(op.length for op in self.operations)


def make_insert(pos: int, char: int) -> Operation:
    return Operation(OpType.INSERT, pos, char)


def make_delete(pos: int) -> Operation:
    return Operation(OpType.DELETE, pos)


def make_packed_insert(start_pos: int, chars: bytes) -> PackedOperation:
    chars = bytes(chars)
    return PackedOperation(OpType.INSERT, start_pos, len(chars), chars)


def make_packed_delete(start_pos: int, length: int) -> PackedOperation:
    return PackedOperation(OpType.DELETE, start_pos, length)


def operations_of(script: Union[_OwnedScript, Iterable]) -> list:
    if isinstance(script, _OwnedScript):
        return script.operations
    return list(script)


def script_to_tuples(script: Iterable[Operation]) -> List[Tuple]:
    result = []
    for action in operations_of(script):
        if action.op == OpType.INSERT:
            result.append((action.op.value, action.pos, action.char))
        else:
            result.append((action.op.value, action.pos))
    return result


def tuples_to_script(tuples: Iterable[Tuple]) -> EditScript:
    result = []
    for item in tuples:
        op = OpType(item[0])
        if op == OpType.INSERT:
            result.append(make_insert(item[1], item[2]))
        else:
            result.append(make_delete(item[1]))
    return result


def count_operations(script) -> dict:
    """Count inserted and deleted bytes; packed runs count once per byte."""
    counts = {
        'inserts': 0,
        'deletes': 0,
        'total': 0
    }
    for action in operations_of(script):
        size = action.length if isinstance(action, PackedOperation) else 1
        if action.op == OpType.INSERT:
            counts['inserts'] += size
        elif action.op == OpType.DELETE:
            counts['deletes'] += size
    counts['total'] = counts['inserts'] + counts['deletes']
    return counts
