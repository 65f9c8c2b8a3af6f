"""
Binary Tree Demo -- Insertion, the three removal cases, degeneration under
sorted input, and a randomized insert/remove workload.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_tree import BinaryTree
from tree_layout import compute_layout
from tree_traversal import count_nodes, pre_order

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

SAMPLE_VALUES = [5, 3, 8, 1, 4, 7, 9]
HEIGHT_SIZES = [8, 16, 32, 64, 128, 256, 512]
WORKLOAD_STEPS = 400
WORKLOAD_KEY_RANGE = 60


def build_tree(values):
    tree = BinaryTree()
    for v in values:
        tree.insert(v)
    return tree


def draw_tree(ax, tree, title, highlight=None):
    """Draw nodes at (in-order rank, -depth); highlight is a set of values."""
    layout = compute_layout(tree.root)
    highlight = highlight or set()

    for parent, child in layout.edges:
        xs = layout.positions[[parent, child], 0]
        ys = layout.positions[[parent, child], 1]
        ax.plot(xs, ys, color=COLORS["dark"], linewidth=1.2, zorder=1)

    for (x, y), value in zip(layout.positions, layout.values):
        color = COLORS["orange"] if value in highlight else COLORS["blue"]
        ax.scatter([x], [y], s=700, color=color, edgecolors=COLORS["dark"], zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", fontsize=11,
                color="white", fontweight="bold", zorder=3)

    ax.set_title(title)
    ax.set_xlim(-1, max(len(layout), 1))
    ax.set_ylim(-max(layout.depth, 1), 0.7)
    ax.axis("off")


# ---------------------------------------------------------------------------
# Example 1: Building a tree
# ---------------------------------------------------------------------------
def example_1_build_and_search():
    """Insert the sample values and probe membership."""
    print("=" * 60)
    print("Example 1: Building a Tree and Searching It")
    print("=" * 60)

    tree = build_tree(SAMPLE_VALUES)
    print(f"\n  Inserted:  {SAMPLE_VALUES}")
    print(f"  In-order:  {list(tree)}")
    print(f"  Pre-order: {pre_order(tree.root)}")
    print(f"  Count: {tree.count}, height: {tree.height()}")
    for probe in [4, 6]:
        print(f"  contains({probe}) -> {tree.contains(probe)}")

    fig, ax = plt.subplots(figsize=(8, 5))
    draw_tree(ax, tree, f"Tree built from {SAMPLE_VALUES}", highlight={4})
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_build.png", dpi=150)
    plt.close(fig)

    return fig


# ---------------------------------------------------------------------------
# Example 2: The three removal cases
# ---------------------------------------------------------------------------
def example_2_removal_cases():
    """Before/after pictures for each way a removed node is replaced."""
    print("\n" + "=" * 60)
    print("Example 2: Removal Cases")
    print("=" * 60)

    cases = [
        ("No right child (leaf)", [50, 30, 70, 20, 40], 20),
        ("No right child (left subtree)", [50, 30, 70, 20, 10], 30),
        ("Right child has no left child", [50, 30, 70, 80, 20], 50),
        ("Leftmost successor", SAMPLE_VALUES, 5),
    ]

    fig, axes = plt.subplots(len(cases), 2, figsize=(11, 3.2 * len(cases)))
    for row, (name, values, target) in enumerate(cases):
        tree = build_tree(values)
        draw_tree(axes[row, 0], tree, f"{name}: before remove({target})", highlight={target})

        removed = tree.remove(target)
        root_value = tree.root.value if tree.root is not None else None
        print(f"\n  {name}")
        print(f"    remove({target}) -> {removed}")
        print(f"    in-order:  {list(tree)}")
        print(f"    new root:  {root_value}, valid: {tree.is_valid()}")

        draw_tree(axes[row, 1], tree, f"after (root = {root_value})")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_removal_cases.png", dpi=150)
    plt.close(fig)

    return fig


# ---------------------------------------------------------------------------
# Example 3: Height under sorted vs shuffled insertion
# ---------------------------------------------------------------------------
def example_3_degeneration():
    """Without rebalancing, sorted input produces a chain of height n."""
    print("\n" + "=" * 60)
    print("Example 3: Height for Sorted vs Shuffled Input")
    print("=" * 60)

    sorted_heights = []
    shuffled_heights = []
    for n in HEIGHT_SIZES:
        sorted_heights.append(build_tree(range(n)).height())
        shuffled = np.random.permutation(n).tolist()
        shuffled_heights.append(build_tree(shuffled).height())
        print(f"  n = {n:4d}   sorted height = {sorted_heights[-1]:4d}   "
              f"shuffled height = {shuffled_heights[-1]:3d}")

    sizes = np.asarray(HEIGHT_SIZES)
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, sorted_heights, "o-", color=COLORS["red"], label="Sorted insertion")
    ax.plot(sizes, shuffled_heights, "s-", color=COLORS["green"], label="Shuffled insertion")
    ax.plot(sizes, np.log2(sizes) + 1, "--", color=COLORS["purple"], label="log2(n) + 1")
    ax.set_xscale("log", base=2)
    ax.set_yscale("log", base=2)
    ax.set_xlabel("Number of values (n)")
    ax.set_ylabel("Tree height")
    ax.set_title("Unbalanced Tree Height")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_degeneration.png", dpi=150)
    plt.close(fig)

    return fig


# ---------------------------------------------------------------------------
# Example 4: Randomized workload with invariant checks
# ---------------------------------------------------------------------------
def example_4_random_workload():
    """Mix inserts and removes; verify ordering, ownership and count each step."""
    print("\n" + "=" * 60)
    print("Example 4: Randomized Insert/Remove Workload")
    print("=" * 60)

    np.random.seed(SEED)
    tree = BinaryTree()
    mirror = []
    counts = []
    heights = []
    failed_removes = 0

    for _ in range(WORKLOAD_STEPS):
        value = int(np.random.randint(WORKLOAD_KEY_RANGE))
        if np.random.rand() < 0.55:
            tree.insert(value)
            mirror.append(value)
        elif tree.remove(value):
            mirror.remove(value)
        else:
            failed_removes += 1

        assert tree.is_valid()
        assert count_nodes(tree.root) == tree.count == len(mirror)
        assert list(tree) == sorted(mirror)
        counts.append(tree.count)
        heights.append(tree.height())

    print(f"\n  Steps: {WORKLOAD_STEPS}, key range: [0, {WORKLOAD_KEY_RANGE})")
    print(f"  Final count: {tree.count}, final height: {tree.height()}")
    print(f"  Removes of absent values: {failed_removes}")
    print("  Invariants held after every step.")

    steps = np.arange(1, WORKLOAD_STEPS + 1)
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(steps, counts, color=COLORS["blue"], label="Count")
    ax.plot(steps, heights, color=COLORS["orange"], label="Height")
    ax.set_xlabel("Step")
    ax.set_ylabel("Nodes")
    ax.set_title("Count and Height During a Random Workload")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_random_workload.png", dpi=150)
    plt.close(fig)

    return fig


def generate_pdf_report():
    """Combine the saved visualizations into a single PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Binary Search Tree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Insertion, Search and Structural Removal", fontsize=24, ha="center")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")
        summary_text = """
Values smaller than a node go left; equal or greater values go right.
No rebalancing is performed.

Removal replaces the node with:
  - its left child, when it has no right child
  - its right child, when that child has no left child
    (the right child adopts the removed node's left subtree)
  - the leftmost node of its right subtree otherwise
    (detached from its parent first, then given both children)

Checked after every step of the random workload:
  - in-order traversal is sorted
  - no node is reachable twice
  - count equals the number of reachable nodes
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for img_path in sorted(VIZ_DIR.glob("*.png")):
            img = plt.imread(img_path)
            fig = plt.figure(figsize=(11, 8.5))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")
            fig.text(0.5, 0.97, img_path.stem.replace("_", " ").title(),
                     fontsize=14, ha="center", fontweight="bold")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Saved: {pdf_path}")


def main():
    print("Binary Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_build_and_search()
    example_2_removal_cases()
    example_3_degeneration()
    example_4_random_workload()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
