"""
Character diff: collapse the shared prefix and suffix of two strings around a
single differing span.

Not a minimal edit script. It answers "what changed between these shared
edges", which is all an edit report or a near-miss suggestion needs.
"""

from scalpel.schemas import CharDiff


def character_diff(old: str, new: str) -> CharDiff:
    """
    Compare two strings by common prefix and common suffix.

    The suffix scan stops before reaching characters already claimed by the
    prefix in either string, so the two edges never overlap.

    Args:
        old: Original text
        new: Replacement text

    Returns:
        CharDiff with the shared edges, the differing spans and a rendering
        of the form ``prefix{-removed-}{+added+}suffix``
    """
    shortest = min(len(old), len(new))

    prefix_len = 0
    while prefix_len < shortest and old[prefix_len] == new[prefix_len]:
        prefix_len += 1

    suffix_len = 0
    while (
        suffix_len < shortest - prefix_len
        and old[len(old) - 1 - suffix_len] == new[len(new) - 1 - suffix_len]
    ):
        suffix_len += 1

    prefix = old[:prefix_len]
    suffix = old[len(old) - suffix_len:]
    removed = old[prefix_len:len(old) - suffix_len]
    added = new[prefix_len:len(new) - suffix_len]

    return CharDiff(
        common_prefix=prefix,
        common_suffix=suffix,
        common_prefix_length=prefix_len,
        common_suffix_length=suffix_len,
        removed_span=removed,
        added_span=added,
        change_magnitude=max(len(removed), len(added)),
        rendered=f"{prefix}{{-{removed}-}}{{+{added}+}}{suffix}",
    )
