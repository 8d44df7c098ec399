"""Render trees as compact Unicode art.

Each node takes one line. A node with children is drawn with ``┬``, a leaf
with ``─``, and every non-root line starts with the guides of its ancestors:

```
┬1
└┬5
 ├─2
 ├─3
 └─4
```
"""

from __future__ import annotations
from typing import Iterable
from treecodec.tree.tree_types import Branch, Tree


def _render_tree(self: Tree) -> list[str]:
    """Render a single tree, one line per node in preorder."""
    lines: list[str] = []
    # (node, guide prefix for the node's own line, prefix inherited by its children)
    stack: list[tuple[Tree, str, str]] = [(self, "", "")]
    while stack:
        node, head, indent = stack.pop()
        glyph = "┬" if isinstance(node, Branch) else "─"
        lines.append(f"{head}{glyph}{node.value}")
        if not isinstance(node, Branch):
            continue
        last = len(node.forest) - 1
        for i in range(last, -1, -1):
            child = node.forest[i]
            if i == last:
                stack.append((child, indent + "└", indent + " "))
            else:
                stack.append((child, indent + "├", indent + "│"))
    return lines


def draw_tree(self: Tree) -> str:
    """Draw a tree as newline-separated Unicode lines, no trailing newline."""
    return "\n".join(_render_tree(self))


def print_forest(trees: Iterable[Tree]) -> str:
    """Render several trees as a fenced Markdown code block.

    Args:
        trees: The trees to draw, in order.

    Returns:
        A single string containing a fenced code block with one tree per
        paragraph, separated by a blank line.
    """
    body = "\n\n".join(draw_tree(t) for t in trees)
    return f"```\n{body}\n```"
