"""
Line diff: classify added/removed lines with a two-cursor walk and group them
into unified-diff hunks.

The walk resolves a mismatch with a bounded lookahead instead of computing an
LCS, so its output on ambiguous inputs is fixed by the rule in
``_prefer_removal``. Callers assert on entry order; keep the rule stable.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from scalpel.schemas import DiffHunk, LineChangeKind, LineDiffEntry, UnifiedDiff

# How far ahead (in lines) the current old line may reappear in the new
# lines and still be reported as removed.
LOOKAHEAD_WINDOW = 3

DEFAULT_CONTEXT_LINES = 3

EQUAL = "equal"
ADD = "add"
REMOVE = "remove"


@dataclass(frozen=True)
class _Op:
    tag: str
    old_index: int  # 0-based cursor into old lines when the op was emitted
    new_index: int  # 0-based cursor into new lines when the op was emitted
    content: str


def _find_from(lines: Sequence[str], value: str, start: int) -> Optional[int]:
    """Offset of the first occurrence of value in lines[start:], or None."""
    for offset in range(len(lines) - start):
        if lines[start + offset] == value:
            return offset
    return None


def _prefer_removal(new_hit: Optional[int], old_hit: Optional[int]) -> bool:
    """
    Decide a mismatch between old[i] and new[j].

    new_hit: distance to the next occurrence of new[j] in old[i+1:]
    old_hit: distance to the next occurrence of old[i] in new[j+1:]

    old[i] is removed when it reappears within the window, or when neither
    line reappears at all. A new[j] that reappears in old while old[i] does
    not is an addition.
    """
    if new_hit is not None and old_hit is None:
        return False
    return old_hit is None or old_hit < LOOKAHEAD_WINDOW


def _walk(old_lines: Sequence[str], new_lines: Sequence[str]) -> List[_Op]:
    ops: List[_Op] = []
    i = 0
    j = 0
    while i < len(old_lines) or j < len(new_lines):
        if i >= len(old_lines):
            ops.append(_Op(ADD, i, j, new_lines[j]))
            j += 1
        elif j >= len(new_lines):
            ops.append(_Op(REMOVE, i, j, old_lines[i]))
            i += 1
        elif old_lines[i] == new_lines[j]:
            ops.append(_Op(EQUAL, i, j, old_lines[i]))
            i += 1
            j += 1
        else:
            new_hit = _find_from(old_lines, new_lines[j], i + 1)
            old_hit = _find_from(new_lines, old_lines[i], j + 1)
            if _prefer_removal(new_hit, old_hit):
                ops.append(_Op(REMOVE, i, j, old_lines[i]))
                i += 1
            else:
                ops.append(_Op(ADD, i, j, new_lines[j]))
                j += 1
    return ops


def diff_lines(old_lines: Sequence[str], new_lines: Sequence[str]) -> List[LineDiffEntry]:
    """
    Produce ordered Add/Remove entries for two line sequences.

    Removed lines are numbered in the old sequence, added lines in the new
    one (both 1-indexed).
    """
    entries = []
    for op in _walk(old_lines, new_lines):
        if op.tag == REMOVE:
            entries.append(LineDiffEntry(
                kind=LineChangeKind.REMOVE,
                line_number=op.old_index + 1,
                content=op.content,
            ))
        elif op.tag == ADD:
            entries.append(LineDiffEntry(
                kind=LineChangeKind.ADD,
                line_number=op.new_index + 1,
                content=op.content,
            ))
    return entries


def line_diff(old_text: str, new_text: str) -> List[LineDiffEntry]:
    """Line diff of two texts split on newlines."""
    return diff_lines(old_text.split("\n"), new_text.split("\n"))


def _group_changes(ops: List[_Op], context_lines: int) -> List[Tuple[int, int]]:
    """
    Group change op indices into (first, last) runs.

    Two changes share a hunk when the equal lines between them fit in the
    trailing context of the first plus the leading context of the second.
    """
    changes = [k for k, op in enumerate(ops) if op.tag != EQUAL]
    if not changes:
        return []

    groups = []
    first = last = changes[0]
    for k in changes[1:]:
        if k - last - 1 <= 2 * context_lines:
            last = k
        else:
            groups.append((first, last))
            first = last = k
    groups.append((first, last))
    return groups


def _build_hunk(ops: List[_Op]) -> DiffHunk:
    old_count = sum(1 for op in ops if op.tag != ADD)
    new_count = sum(1 for op in ops if op.tag != REMOVE)

    # An empty side points at the line before the change, as diff(1) does
    old_start = ops[0].old_index + 1 if old_count else ops[0].old_index
    new_start = ops[0].new_index + 1 if new_count else ops[0].new_index

    prefixes = {EQUAL: " ", REMOVE: "-", ADD: "+"}
    return DiffHunk(
        old_start=old_start,
        old_count=old_count,
        new_start=new_start,
        new_count=new_count,
        lines=[prefixes[op.tag] + op.content for op in ops],
    )


def unified_diff(
    old_text: str,
    new_text: str,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    from_file: Optional[str] = None,
    to_file: Optional[str] = None,
) -> UnifiedDiff:
    """
    Group the line diff of two texts into hunks with surrounding context.

    Args:
        old_text: Original text
        new_text: Modified text
        context_lines: Unchanged lines to show before and after each change
        from_file: Optional label for the "---" header
        to_file: Optional label for the "+++" header

    Returns:
        UnifiedDiff (no hunks when the texts are identical)
    """
    ops = _walk(old_text.split("\n"), new_text.split("\n"))
    hunks = []
    for first, last in _group_changes(ops, context_lines):
        start = max(0, first - context_lines)
        end = min(len(ops), last + context_lines + 1)
        hunks.append(_build_hunk(ops[start:end]))

    return UnifiedDiff(from_file=from_file, to_file=to_file, hunks=hunks)
