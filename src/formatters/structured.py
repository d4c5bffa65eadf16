import json

from formatters.base import BaseFormatter, FormatterFactory
from bytediff.utils import OpType, PackedOperation, count_operations


class JSONFormatter(BaseFormatter):
    def _format_impl(self, operations: list, file1: str, file2: str):
        result = {"file1": file1, "file2": file2, "packed": self.packed, "operations": []}
        for a in operations:
            if isinstance(a, PackedOperation):
                entry = {"type": a.op.value, "start": a.start_pos, "length": a.length}
                if a.op == OpType.INSERT:
                    entry["chars"] = list(a.chars)
            else:
                entry = {"type": a.op.value, "pos": a.pos}
                if a.op == OpType.INSERT:
                    entry["char"] = a.char
            result["operations"].append(entry)
        counts = count_operations(operations)
        result["stats"] = {"insertions": counts["inserts"], "deletions": counts["deletes"],
                           "distance": counts["total"]}
        self._write(json.dumps(result, indent=2))


FormatterFactory.register("json", JSONFormatter)
