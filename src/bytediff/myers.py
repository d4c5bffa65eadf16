from typing import List, Optional, Tuple
from .utils import (
    AllocationError, Diff, DiffInvariantError, EditScript, OpType,
    make_delete, make_insert, operations_of
)

UNREACHED = -1


class MyersDiff:
    def __init__(self, original: bytes, modified: bytes):
        self.original = bytes(original)
        self.modified = bytes(modified)
        self.n = len(self.original)
        self.m = len(self.modified)
        self._trace: List[List[int]] = []
        self._edit_distance: Optional[int] = None

    def compute(self) -> Diff:
        try:
            self._edit_distance, self._trace = self._find_path()
            return Diff(self._trace_path())
        except MemoryError as e:
            raise AllocationError(f"out of memory diffing {self.n} and {self.m} bytes") from e
        finally:
            self._trace = []

    def _find_path(self) -> Tuple[int, List[List[int]]]:
        n, m = self.n, self.m
        a, b = self.original, self.modified
        max_d = n + m
        # the k=1 seed slot must exist even when both inputs are empty
        v = [UNREACHED] * max(2 * max_d + 1, 2)
        v[max_d + 1] = 0
        trace: List[List[int]] = []
        for d in range(max_d + 1):
            trace.append(v.copy())
            for k in range(-d, d + 1, 2):
                i = k + max_d
                if k == -d or (k != d and v[i - 1] < v[i + 1]):
                    x = v[i + 1]
                else:
                    x = v[i - 1] + 1
                y = x - k
                while x < n and y < m and a[x] == b[y]:
                    x += 1
                    y += 1
                v[i] = x
                if x >= n and y >= m:
                    return d, trace
        raise DiffInvariantError(f"no path to ({n}, {m}) within {max_d} edits")

    def _trace_path(self) -> EditScript:
        x, y = self.n, self.m
        max_d = self.n + self.m
        script_reversed: EditScript = []
        for d in range(self._edit_distance, 0, -1):
            v = self._trace[d]
            k = x - y
            i = k + max_d
            if k == -d or (k != d and v[i - 1] < v[i + 1]):
                prev_k = k + 1
            else:
                prev_k = k - 1
            prev_x = v[prev_k + max_d]
            prev_y = prev_x - prev_k
            while x > prev_x and y > prev_y:
                x -= 1
                y -= 1
            if y == prev_y and x > prev_x:
                x -= 1
                script_reversed.append(make_delete(x))
            elif x == prev_x and y > prev_y:
                y -= 1
                script_reversed.append(make_insert(y, self.modified[y]))
            else:
                raise DiffInvariantError(
                    f"backtrack stuck at ({x}, {y}) from ({prev_x}, {prev_y}) at depth {d}")
        script_reversed.reverse()
        return script_reversed

    def get_edit_distance(self) -> int:
        if self._edit_distance is None:
            try:
                self._edit_distance, _ = self._find_path()
            except MemoryError as e:
                raise AllocationError(f"out of memory diffing {self.n} and {self.m} bytes") from e
        return self._edit_distance


def diff(original: bytes, modified: bytes) -> Diff:
    differ = MyersDiff(original, modified)
    return differ.compute()


def apply(original: bytes, script) -> bytes:
    try:
        buffer = bytearray(original)
        offset = 0
        for action in operations_of(script):
            if action.op == OpType.DELETE:
                index = action.pos + offset
                if not 0 <= index < len(buffer):
                    raise ValueError(f"{action!r} out of range for buffer of {len(buffer)} bytes")
                del buffer[index]
                offset -= 1
            elif action.op == OpType.INSERT:
                if not 0 <= action.pos <= len(buffer):
                    raise ValueError(f"{action!r} out of range for buffer of {len(buffer)} bytes")
                buffer.insert(action.pos, action.char)
                offset += 1
            else:
                raise ValueError(f"Unknown operation: {action!r}")
        return bytes(buffer)
    except MemoryError as e:
        raise AllocationError(f"out of memory applying script to {len(original)} bytes") from e


def edit_distance(original: bytes, modified: bytes) -> int:
    differ = MyersDiff(original, modified)
    return differ.get_edit_distance()


def lcs_length(original: bytes, modified: bytes) -> int:
    d = edit_distance(original, modified)
    return (len(original) + len(modified) - d) // 2


def similarity_ratio(original: bytes, modified: bytes) -> float:
    if not original and not modified:
        return 1.0
    lcs = lcs_length(original, modified)
    total = len(original) + len(modified)
    return (2.0 * lcs) / total if total > 0 else 1.0
