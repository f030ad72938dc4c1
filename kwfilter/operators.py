from dataclasses import dataclass, replace

from .entry import PRECEDENCE_TERM

PRECEDENCE_AND = 1
PRECEDENCE_OR = 0


class Binary:
    pass


@dataclass(frozen=True)
class Not:
    operand: object

    precedence = PRECEDENCE_TERM

    def __str__(self):
        return render(self)


@dataclass(frozen=True)
class Group:
    """A parenthesized sub-expression; never rotated by `normalize`."""

    operand: object

    precedence = PRECEDENCE_TERM

    def __str__(self):
        return render(self)


@dataclass(frozen=True)
class And(Binary):
    left: object
    right: object

    precedence = PRECEDENCE_AND
    symbol = " & "

    def __str__(self):
        return render(self)


@dataclass(frozen=True)
class Or(Binary):
    left: object
    right: object

    precedence = PRECEDENCE_OR
    symbol = " | "

    def __str__(self):
        return render(self)


def render(node):
    """Render an expression tree as text that parses back to the same tree.

    Walks an explicit stack so that chains of any length can be rendered.
    """
    parts = []
    stack = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Not):
            stack.append(item.operand)
            stack.append("!")
        elif isinstance(item, Group):
            stack.extend((")", item.operand, "("))
        elif isinstance(item, Binary):
            stack.extend((item.right, item.symbol, item.left))
        else:
            parts.append(str(item))
    return "".join(parts)


def normalize(node):
    """Restore AND-over-OR binding on a freshly built binary node.

    Binary nodes are built strictly left to right, so in `a | b & c` the AND
    first receives `a | b` as its left operand. When a node binds tighter than
    its binary left operand, the node takes over that operand's right child
    and is hung, normalized again, as the operand's new right child.
    """
    left = node.left
    if node.precedence > left.precedence and isinstance(left, Binary):
        lowered = replace(node, left=left.right)
        return replace(left, right=normalize(lowered))
    return node
