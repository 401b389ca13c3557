"""
Stack & Queue Demo -- Walkthrough of the four structures, ordering-law checks,
per-operation latency, and amortized cost of the two cross-implementations.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import logging
import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from stackqueue import Queue, QueueFromStacks, Stack, StackFromQueues

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

STRUCTURE_COLORS = {
    "Stack": COLORS["blue"],
    "Queue": COLORS["green"],
    "QueueFromStacks": COLORS["orange"],
    "StackFromQueues": COLORS["red"],
}

LAW_STEPS = 5000
LATENCY_SIZE = 2000
AMORTIZED_SIZES = [250, 500, 1000, 2000, 4000]


# ---------------------------------------------------------------------------
# Example 1: Walkthrough
# ---------------------------------------------------------------------------
def example_1_walkthrough():
    """Push 8, 6, 3 and enqueue 8, 6, 3, 9, printing peek before every removal."""
    print("=" * 60)
    print("Example 1: Walkthrough")
    print("=" * 60)

    for cls in (Stack, StackFromQueues):
        s = cls()
        for value in (8, 6, 3):
            s.push(value)
        print(f"\n  {cls.__name__}: pushed 8, 6, 3 -> {s!r}")
        while True:
            top = s.peek()
            print(f"    peek = {top}")
            if top is None:
                break
            s.pop()
            print(f"    pop  -> size {s.size()}")

    for cls in (Queue, QueueFromStacks):
        q = cls()
        for value in (8, 6, 3, 9):
            q.enqueue(value)
        print(f"\n  {cls.__name__}: enqueued 8, 6, 3, 9 -> {q!r}")
        while True:
            head = q.peek()
            print(f"    peek = {head}")
            if head is None:
                break
            q.dequeue()
            print(f"    dequeue -> size {q.size()}")


# ---------------------------------------------------------------------------
# Example 2: Ordering laws on random workloads
# ---------------------------------------------------------------------------
def _run_lifo(s, ops):
    model = []
    mismatches = 0
    for step, op in enumerate(ops):
        if op == 0:
            s.push(step)
            model.append(step)
        elif op == 1:
            mismatches += s.pop() != (model.pop() if model else None)
        else:
            mismatches += s.peek() != (model[-1] if model else None)
        mismatches += s.size() != len(model)
    return mismatches


def _run_fifo(q, ops):
    model = []
    head = 0
    mismatches = 0
    for step, op in enumerate(ops):
        if op == 0:
            q.enqueue(step)
            model.append(step)
        elif op == 1:
            expected = model[head] if head < len(model) else None
            if expected is not None:
                head += 1
            mismatches += q.dequeue() != expected
        else:
            mismatches += q.peek() != (model[head] if head < len(model) else None)
        mismatches += q.size() != len(model) - head
    return mismatches


def example_2_ordering_laws():
    """Drive every structure with the same random operations as a list model."""
    print("\n" + "=" * 60)
    print("Example 2: Ordering Laws")
    print("=" * 60)

    ops = np.random.choice(3, size=LAW_STEPS, p=[0.45, 0.35, 0.20])
    results = {
        "Stack": _run_lifo(Stack(), ops),
        "StackFromQueues": _run_lifo(StackFromQueues(), ops),
        "Queue": _run_fifo(Queue(), ops),
        "QueueFromStacks": _run_fifo(QueueFromStacks(), ops),
    }

    print(f"\n  Random operations: {LAW_STEPS} (push/enqueue 45%, pop/dequeue 35%, peek 20%)")
    print(f"  {'Structure':>18} {'Mismatches':>12}")
    print(f"  {'-'*32}")
    for name, mismatches in results.items():
        print(f"  {name:>18} {mismatches:>12}")

    all_ok = all(m == 0 for m in results.values())
    print(f"\n  All structures agree with their list model: {all_ok}")
    return all_ok


# ---------------------------------------------------------------------------
# Example 3: Per-operation latency
# ---------------------------------------------------------------------------
def _time_each(fn, count):
    times = np.empty(count)
    for i in range(count):
        t0 = time.perf_counter()
        fn()
        times[i] = time.perf_counter() - t0
    return times * 1e6


def example_3_removal_latency():
    """Time every removal after filling each structure with LATENCY_SIZE elements."""
    print("\n" + "=" * 60)
    print("Example 3: Removal Latency")
    print("=" * 60)

    latencies = {}
    for cls, insert, remove in (
        (Stack, "push", "pop"),
        (Queue, "enqueue", "dequeue"),
        (QueueFromStacks, "enqueue", "dequeue"),
        (StackFromQueues, "push", "pop"),
    ):
        structure = cls()
        for i in range(LATENCY_SIZE):
            getattr(structure, insert)(i)
        latencies[cls.__name__] = _time_each(getattr(structure, remove), LATENCY_SIZE)

    print(f"\n  Elements: {LATENCY_SIZE}")
    print(f"  {'Structure':>18} {'First (us)':>12} {'Median (us)':>12} {'Max (us)':>10}")
    print(f"  {'-'*56}")
    for name, t in latencies.items():
        print(f"  {name:>18} {t[0]:>12.2f} {np.median(t):>12.3f} {t.max():>10.2f}")

    fig, axes = plt.subplots(1, 2, figsize=(15, 5.5))
    for name, t in latencies.items():
        axes[0].plot(t, color=STRUCTURE_COLORS[name], linewidth=1, label=name)
    axes[0].set_yscale("log")
    axes[0].set_xlabel("Removal index")
    axes[0].set_ylabel("Latency (us, log scale)")
    axes[0].set_title("Latency of Each Removal\nOne reversal spike vs. a rotation on every pop",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    names = list(latencies)
    medians = [np.median(latencies[n]) for n in names]
    axes[1].bar(range(len(names)), medians, color=[STRUCTURE_COLORS[n] for n in names],
                edgecolor="white")
    axes[1].set_xticks(range(len(names)))
    axes[1].set_xticklabels(names, fontsize=9)
    axes[1].set_yscale("log")
    axes[1].set_ylabel("Median latency (us, log scale)")
    axes[1].set_title("Median Removal Latency", fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3, axis="y")

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "01_removal_latency.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    return latencies


# ---------------------------------------------------------------------------
# Example 4: Amortized cost
# ---------------------------------------------------------------------------
def _mixed_workload(structure, insert, remove, n):
    ops = np.random.choice(2, size=2 * n, p=[0.6, 0.4])
    add = getattr(structure, insert)
    take = getattr(structure, remove)
    t0 = time.perf_counter()
    for step, op in enumerate(ops):
        if op == 0:
            add(step)
        else:
            take()
    return time.perf_counter() - t0


def example_4_amortized_cost():
    """Total time of a mixed workload as n grows: linear for O(1) amortized ops."""
    print("\n" + "=" * 60)
    print("Example 4: Amortized Cost")
    print("=" * 60)

    totals = {name: [] for name in STRUCTURE_COLORS}
    for n in AMORTIZED_SIZES:
        for cls, insert, remove in (
            (Stack, "push", "pop"),
            (Queue, "enqueue", "dequeue"),
            (QueueFromStacks, "enqueue", "dequeue"),
            (StackFromQueues, "push", "pop"),
        ):
            np.random.seed(SEED + n)
            totals[cls.__name__].append(_mixed_workload(cls(), insert, remove, n) * 1000)

    print(f"\n  {'n':>6}" + "".join(f" {name:>17}" for name in totals))
    print(f"  {'-'*78}")
    for i, n in enumerate(AMORTIZED_SIZES):
        print(f"  {n:>6}" + "".join(f" {totals[name][i]:>15.2f}ms" for name in totals))

    fig, axes = plt.subplots(1, 2, figsize=(15, 5.5))
    for name, t in totals.items():
        axes[0].plot(AMORTIZED_SIZES, t, "o-", color=STRUCTURE_COLORS[name],
                     linewidth=2, markersize=5, label=name)
        per_op = [t[i] * 1000 / (2 * n) for i, n in enumerate(AMORTIZED_SIZES)]
        axes[1].plot(AMORTIZED_SIZES, per_op, "o-", color=STRUCTURE_COLORS[name],
                     linewidth=2, markersize=5, label=name)
    axes[0].set_xlabel("n")
    axes[0].set_ylabel("Total time for 2n operations (ms)")
    axes[0].set_title("Total Workload Time", fontsize=10, fontweight="bold")
    axes[1].set_xlabel("n")
    axes[1].set_ylabel("Time per operation (us)")
    axes[1].set_yscale("log")
    axes[1].set_title("Amortized Time per Operation\nFlat for O(1) amortized, rising for O(n)",
                      fontsize=10, fontweight="bold")
    for ax in axes:
        ax.legend(fontsize=9)
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "02_amortized_cost.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    return totals


def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Stacks & Queues", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Deferring Reversal Work Until It Is Needed",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Queue keeps two lists and reverses the incoming one only when the\n"
            "outgoing one is empty. QueueFromStacks applies the same idea to two\n"
            "stacks: every element is transferred at most once, so dequeue is\n"
            "amortized O(1). StackFromQueues has no such shortcut and rotates\n"
            "n - 1 elements on every pop and peek.\n\n"
            "This demo covers:\n"
            "  1. Walkthrough of all four structures\n"
            "  2. Ordering laws against a list model\n"
            "  3. Latency of each removal\n"
            "  4. Amortized cost over mixed workloads\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            img = plt.imread(str(viz_file))
            fig, ax = plt.subplots(figsize=(11, 8.5))
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved to {report_path}")


def main():
    logging.basicConfig(level=logging.WARNING)
    print("Stack & Queue Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_walkthrough()
    example_2_ordering_laws()
    example_3_removal_latency()
    example_4_amortized_cost()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
