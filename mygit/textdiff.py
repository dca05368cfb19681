"""Line diffs for ``diff`` and conflict files for ``merge``, both built on an LCS."""

from __future__ import annotations

from collections import deque
from typing import Sequence

CONTEXT_LINES = 4

_SAME, _ADD, _DEL = "same", "add", "del"


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines that keep their newline; a last partial line counts."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def lcs_matrix(old: Sequence[str], new: Sequence[str]) -> list[list[int]]:
    """The table of longest-common-subsequence lengths of every pair of prefixes."""
    table = [[0] * (len(new) + 1) for _ in range(len(old) + 1)]
    for i, old_line in enumerate(old, 1):
        row, above = table[i], table[i - 1]
        for j, new_line in enumerate(new, 1):
            if old_line == new_line:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])
    return table


def _edit_script(old: Sequence[str], new: Sequence[str]):
    """Operations turning ``old`` into ``new``, in file order."""
    table = lcs_matrix(old, new)
    m, n = len(old), len(new)
    ops = []
    while m > 0 or n > 0:
        if m > 0 and n > 0 and old[m - 1] == new[n - 1]:
            ops.append((_SAME, m, old[m - 1]))
            m -= 1
            n -= 1
        elif n > 0 and (m == 0 or table[m][n - 1] >= table[m - 1][n]):
            ops.append((_ADD, n, new[n - 1]))
            n -= 1
        else:
            ops.append((_DEL, m, old[m - 1]))
            m -= 1
    ops.reverse()
    return ops


def diff_lines(old: Sequence[str], new: Sequence[str]) -> str:
    """Coloured changed lines with up to four lines of context around each change."""
    parts: list[str] = []
    previous: deque[str] = deque(maxlen=CONTEXT_LINES)
    remaining = 0
    for kind, number, line in _edit_script(old, new):
        if kind == _SAME:
            if remaining == 0:
                previous.append(line)
            else:
                parts.append(f"\033[0m\t\t{line}\033[0m")
                remaining -= 1
            continue
        parts.extend(f"\033[0m\t\t{context}\033[0m" for context in previous)
        previous.clear()
        remaining = CONTEXT_LINES
        colour, sign = ("\033[1;32m", "+") if kind == _ADD else ("\033[1;31m", "-")
        parts.append(f"\033[1;33m[{number}]\t{colour}{sign}\t{line}\033[0m")
    return "".join(parts)


def merge_lines(branch: str, current: Sequence[str], incoming: Sequence[str]) -> str:
    """File contents with conflict markers around lines that differ.

    ``current`` and ``incoming`` are line lists (see ``split_lines``) of HEAD's
    version and of ``branch``'s version.
    """
    parts: list[str] = []
    state = ""
    pending = False
    for kind, _, line in _edit_script(current, incoming):
        if kind == _SAME:
            state = ""
            if pending:
                parts.append("==========\n")
                pending = False
        elif kind == _ADD:
            pending = True
            if state != "add":
                parts.append(f"<<<<<<<<<< [{branch}]\n")
                state = "add"
        else:
            pending = True
            if state != "rm":
                parts.append("<<<<<<<<<< [HEAD]\n")
                state = "rm"
        parts.append(line)
    if pending:
        parts.append("==========\n")
    return "".join(parts)


def mark_lines(text: str, plus: bool) -> str:
    """Prefix every line with its number and a coloured ``+`` or ``-``."""
    marker = "\033[1;32m\t+\t" if plus else "\033[1;31m\t-\t"
    body = "".join(
        f"\033[1;33m[{number}]{marker}{line}"
        for number, line in enumerate(split_lines(text), 1)
    )
    return body + "\033[0m"