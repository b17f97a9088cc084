"""
Binary Heap Demo -- Sift-up traces, heapsort comparison counts, timing against
the builtin sort, and custom orderings.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
import operator
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import BinaryHeap

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
    "steel": "steelblue",
    "coral": "coral",
    "teal": "#1abc9c",
    "dark": "#2c3e50",
}

TRACE_VALUES = [4, 9, 2, 7, 11, 1, 8, 3]
SORT_SIZES = [16, 64, 256, 1024, 4096]
TIMING_SIZES = [1000, 2000, 5000, 10000, 20000]


class CountingLess:
    """Wraps operator.lt and counts how many comparisons were made."""

    def __init__(self):
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return a < b


def _draw_tree(ax, data, title):
    """Draw the implicit tree of a heap array with level-based layout."""
    ax.axis("off")
    ax.set_title(title, fontsize=10, fontweight="bold")
    if not data:
        return
    depth = int(np.floor(np.log2(len(data)))) + 1
    positions = {}
    for i in range(len(data)):
        level = int(np.floor(np.log2(i + 1)))
        slot = i + 1 - 2 ** level
        x = (slot + 0.5) / 2 ** level
        y = 1.0 - level / max(depth, 1)
        positions[i] = (x, y)
    for i in range(1, len(data)):
        px, py = positions[(i - 1) // 2]
        cx, cy = positions[i]
        ax.plot([px, cx], [py, cy], color=COLORS["dark"], linewidth=1, zorder=1)
    for i, value in enumerate(data):
        x, y = positions[i]
        color = COLORS["red"] if i == 0 else COLORS["blue"]
        ax.scatter([x], [y], s=600, color=color, edgecolor="white", zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", color="white",
                fontsize=10, fontweight="bold", zorder=3)
    ax.set_xlim(0, 1)
    ax.set_ylim(-0.15, 1.15)


# ---------------------------------------------------------------------------
# Example 1: Insert Trace
# ---------------------------------------------------------------------------
def example_1_insert_trace():
    """Show how each insertion bubbles up and how the array layout evolves."""
    print("=" * 60)
    print("Example 1: Insert Trace")
    print("=" * 60)

    heap = BinaryHeap()
    snapshots = []
    swaps = []
    for value in TRACE_VALUES:
        before = list(heap._data)
        heap.insert(value)
        after = list(heap._data)
        # positions that changed, minus the appended slot
        moved = sum(1 for a, b in zip(before, after) if a != b)
        swaps.append(moved)
        snapshots.append(after)
        print(f"  insert {value:>3} -> {str(heap):<24} swaps={moved}  valid={heap.verify_heap()}")

    assert heap.verify_heap(), "Heap invariant violated during inserts"
    print(f"\n  Final max: {heap.max()}")

    fig, axes = plt.subplots(2, 3, figsize=(18, 11))
    picks = [0, 2, 4, 5, 7]
    for ax, k in zip(axes.flat, picks):
        _draw_tree(ax, snapshots[k], f"After inserting {TRACE_VALUES[k]}\n{snapshots[k]}")

    axes[1, 2].bar(range(len(TRACE_VALUES)), swaps, color=COLORS["orange"], edgecolor="white")
    axes[1, 2].set_xticks(range(len(TRACE_VALUES)))
    axes[1, 2].set_xticklabels([str(v) for v in TRACE_VALUES])
    axes[1, 2].set_xlabel("Inserted value")
    axes[1, 2].set_ylabel("Sift-up swaps")
    axes[1, 2].set_title("Sift-up Work per Insert\nBounded by tree height",
                         fontsize=10, fontweight="bold")
    axes[1, 2].grid(True, alpha=0.3, axis="y")

    fig.suptitle("Building a Max-Heap One Insert at a Time", fontsize=14, fontweight="bold", y=1.0)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_insert_trace.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_insert_trace.png")


# ---------------------------------------------------------------------------
# Example 2: Heapsort Comparison Counts
# ---------------------------------------------------------------------------
def example_2_comparison_counts():
    """Count comparator calls for build + heapsort against n log2 n."""
    print("\n" + "=" * 60)
    print("Example 2: Heapsort Comparison Counts")
    print("=" * 60)

    build_counts = []
    sort_counts = []
    print(f"  {'n':>8} {'build':>10} {'sort':>10} {'n log2 n':>12} {'ratio':>8}")
    print(f"  {'-'*52}")
    for n in SORT_SIZES:
        values = np.random.randint(0, 10 * n, size=n).tolist()
        less = CountingLess()
        heap = BinaryHeap(values, less=less)
        build = less.calls
        result = heap.sort()
        assert result == sorted(values), "Heapsort produced a wrong order"
        sort = less.calls - build
        bound = n * np.log2(n)
        build_counts.append(build)
        sort_counts.append(sort)
        print(f"  {n:>8} {build:>10} {sort:>10} {bound:>12.0f} {sort / bound:>8.2f}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5.5))
    ns = np.array(SORT_SIZES)
    axes[0].loglog(ns, build_counts, "o-", color=COLORS["blue"], linewidth=2, label="Build (inserts)")
    axes[0].loglog(ns, sort_counts, "s-", color=COLORS["green"], linewidth=2, label="Heapsort")
    axes[0].loglog(ns, ns * np.log2(ns), "--", color=COLORS["dark"], label="n log2 n")
    axes[0].set_xlabel("n")
    axes[0].set_ylabel("Comparisons")
    axes[0].set_title("Comparator Calls vs n\nBoth phases track n log n",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3, which="both")

    ratios = np.array(sort_counts) / (ns * np.log2(ns))
    axes[1].bar(range(len(ns)), ratios, color=COLORS["purple"], edgecolor="white")
    axes[1].set_xticks(range(len(ns)))
    axes[1].set_xticklabels([str(n) for n in SORT_SIZES])
    axes[1].set_xlabel("n")
    axes[1].set_ylabel("sort comparisons / (n log2 n)")
    axes[1].set_title("Normalized Heapsort Cost\nRoughly constant ratio",
                      fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3, axis="y")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_comparison_counts.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_comparison_counts.png")


# ---------------------------------------------------------------------------
# Example 3: Timing Benchmark
# ---------------------------------------------------------------------------
def example_3_timing_benchmark(n_runs=3):
    """Wall-clock heap build + sort against the builtin sorted()."""
    print("\n" + "=" * 60)
    print("Example 3: Timing Benchmark")
    print("=" * 60)

    heap_times = []
    builtin_times = []
    print(f"  {'n':>8} {'heap (ms)':>12} {'sorted (ms)':>12} {'slowdown':>10}")
    print(f"  {'-'*46}")
    for n in TIMING_SIZES:
        values = np.random.randint(0, 10 * n, size=n).tolist()
        runs_heap = []
        runs_builtin = []
        for _ in range(n_runs):
            t0 = time.perf_counter()
            BinaryHeap(values).sort()
            runs_heap.append(time.perf_counter() - t0)

            t0 = time.perf_counter()
            sorted(values)
            runs_builtin.append(time.perf_counter() - t0)
        t_heap = float(np.median(runs_heap)) * 1000
        t_builtin = float(np.median(runs_builtin)) * 1000
        heap_times.append(t_heap)
        builtin_times.append(t_builtin)
        print(f"  {n:>8} {t_heap:>12.2f} {t_builtin:>12.3f} {t_heap / t_builtin:>9.0f}x")

    fig, ax = plt.subplots(figsize=(9, 5.5))
    ax.plot(TIMING_SIZES, heap_times, "o-", color=COLORS["red"], linewidth=2,
            markersize=6, label="BinaryHeap build + sort")
    ax.plot(TIMING_SIZES, builtin_times, "s-", color=COLORS["green"], linewidth=2,
            markersize=6, label="sorted()")
    ax.set_yscale("log")
    ax.set_xlabel("n")
    ax.set_ylabel(f"Median time over {n_runs} runs (ms)")
    ax.set_title("Pure-Python Heapsort vs Builtin Timsort", fontsize=10, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3, which="both")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_timing_benchmark.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_timing_benchmark.png")


# ---------------------------------------------------------------------------
# Example 4: Custom Orderings
# ---------------------------------------------------------------------------
def example_4_custom_ordering():
    """Inverted comparator as a min-heap, and records ordered by priority."""
    print("\n" + "=" * 60)
    print("Example 4: Custom Orderings")
    print("=" * 60)

    values = np.random.randint(0, 100, size=10).tolist()
    max_heap = BinaryHeap(values)
    min_heap = BinaryHeap(values, less=operator.gt)
    max_order = list(max_heap)
    min_order = list(min_heap)
    print(f"  values:           {values}")
    print(f"  default order:    {max_order}")
    print(f"  inverted order:   {min_order}")
    assert min_order == sorted(values)

    tasks = [("write docs", 2), ("fix outage", 9), ("review PR", 5),
             ("refactor", 3), ("deploy", 7)]
    queue = BinaryHeap(tasks, less=lambda a, b: a[1] < b[1])
    served = []
    while queue:
        served.append(queue.extract_max())
    print("\n  Task queue served by priority:")
    for name, priority in served:
        print(f"    [{priority}] {name}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5.5))
    x = np.arange(len(values))
    axes[0].bar(x - 0.2, max_order, 0.4, color=COLORS["red"], edgecolor="white", label="operator.lt")
    axes[0].bar(x + 0.2, min_order, 0.4, color=COLORS["teal"], edgecolor="white", label="operator.gt")
    axes[0].set_xlabel("Extraction step")
    axes[0].set_ylabel("Value extracted")
    axes[0].set_title("Extraction Order by Comparator\nInverting less gives a min-heap",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3, axis="y")

    axes[1].barh([name for name, _ in served][::-1], [p for _, p in served][::-1],
                 color=COLORS["steel"], edgecolor="white")
    axes[1].set_xlabel("Priority")
    axes[1].set_title("Task Queue Served Highest Priority First",
                      fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3, axis="x")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_custom_ordering.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/04_custom_ordering.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Gather a title page and every visualization into one PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Binary Max-Heap", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "A Priority Queue in a Flat List",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "A binary heap stores a complete binary tree in breadth-first order:\n"
            "node i has children 2i+1 and 2i+2 and parent (i-1)//2. Insert appends\n"
            "and sifts up, extract swaps the root with the tail and sifts down,\n"
            "and heapsort repeatedly moves the root behind a shrinking limit.\n\n"
            "This demo covers:\n"
            "  1. Insert trace: sift-up swaps and the implicit tree\n"
            "  2. Comparator calls for build and heapsort vs n log2 n\n"
            "  3. Wall-clock timing against the builtin sorted()\n"
            "  4. Custom orderings: min-heap and priority records\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.30, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_insert_trace.png": "Example 1: Insert Trace",
            "02_comparison_counts.png": "Example 2: Heapsort Comparison Counts",
            "03_timing_benchmark.png": "Example 3: Timing Benchmark",
            "04_custom_ordering.png": "Example 4: Custom Orderings",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Binary Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_insert_trace()
    example_2_comparison_counts()
    example_3_timing_benchmark()
    example_4_custom_ordering()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
