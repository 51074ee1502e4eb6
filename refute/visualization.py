"""
Visualization and reporting utilities.
"""

from .core.proof import Refutation


def print_report(refutation: Refutation):
    """The three-line summary: clause set, query, outcome."""
    print(f"Initial: {' '.join(refutation.initial)}")
    print(f"Check: {refutation.query}")
    print(f"Result: {refutation.proved}")


def _quote(label: str) -> str:
    return label.replace('"', '\\"')


def export_dot(refutation: Refutation, path="refutation.dot"):
    """Export the derivation as a DOT file for Graphviz visualization."""
    with open(path, "w") as f:
        f.write("digraph refutation {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=box, style=rounded];\n")
        # step 1 joins two inputs; every later step joins an input (or the
        # negated query) with the previous step's node
        previous = None
        for s in refutation.steps:
            node = _quote(f"{s.step}: {s.result}")
            color = "lightcoral" if s.result == "[]" else "lightblue"
            f.write(f'  "{node}" [fillcolor={color}, style=filled];\n')
            right = previous if previous is not None else _quote(s.right)
            for parent in (_quote(s.left), right):
                f.write(f'  "{parent}" -> "{node}";\n')
            previous = node
        f.write("}\n")
    print(f"Graph exported to {path}")
