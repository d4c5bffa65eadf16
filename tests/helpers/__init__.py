from helpers.naive_diff import (
    NaiveLCS,
    lcs,
    lcs_length,
    edit_distance,
)


__all__ = [
    "NaiveLCS",
    "lcs",
    "lcs_length",
    "edit_distance",
]
