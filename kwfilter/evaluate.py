from .entry import Literal, MatchAllOf, MatchAnyOf
from .operators import And, Group, Not, Or


def _leaf(node, keywords):
    if isinstance(node, Literal):
        return node.keyword in keywords
    if isinstance(node, MatchAllOf):
        return node.keys.issubset(keywords)
    if isinstance(node, MatchAnyOf):
        return not node.keys.isdisjoint(keywords)
    raise TypeError(f"not a keyword predicate: {node!r}")


def evaluate(node, keywords):
    """Return whether the keyword set `keywords` satisfies `node`.

    `keywords` must already be folded the same way the predicate was built
    (lower-cased, and transliterated when accents are ignored).

    The tree is walked with an explicit stack, so arbitrarily long chains
    evaluate without recursion. AND and OR short-circuit.
    """
    # (node, stage) pairs: stage 0 visits a node, stage 1 resumes it once the
    # result of its first operand is on top of `results`.
    stack = [(node, 0)]
    results = []
    while stack:
        node, stage = stack.pop()
        if isinstance(node, (Not, Group)):
            if stage == 0:
                stack.append((node, 1))
                stack.append((node.operand, 0))
            elif isinstance(node, Not):
                results.append(not results.pop())
        elif isinstance(node, (And, Or)):
            if stage == 0:
                stack.append((node, 1))
                stack.append((node.left, 0))
            else:
                left = results.pop()
                if left == isinstance(node, Or):
                    results.append(left)
                else:
                    stack.append((node.right, 0))
        else:
            results.append(_leaf(node, keywords))
    return results.pop()
