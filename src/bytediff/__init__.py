from bytediff.utils import (
    OpType, Operation, PackedOperation, EditScript, PackedScript, Diff, PackedDiff,
    AllocationError, DiffInvariantError,
    make_insert, make_delete, make_packed_insert, make_packed_delete,
    script_to_tuples, tuples_to_script, count_operations
)
from bytediff.myers import MyersDiff, diff, apply, edit_distance, lcs_length, similarity_ratio
from bytediff.packing import Packer, pack, unpack, packed_diff, packed_apply


__version__ = "1.0.0"

__all__ = [
    "OpType", "Operation", "PackedOperation", "EditScript", "PackedScript",
    "Diff", "PackedDiff", "AllocationError", "DiffInvariantError",
    "make_insert", "make_delete", "make_packed_insert", "make_packed_delete",
    "script_to_tuples", "tuples_to_script", "count_operations",
    "MyersDiff", "diff", "apply", "edit_distance", "lcs_length", "similarity_ratio",
    "Packer", "pack", "unpack", "packed_diff", "packed_apply",
]
