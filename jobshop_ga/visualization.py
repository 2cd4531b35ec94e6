import os
from typing import List, Optional, Sequence

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from jobshop_ga.algorithms.base import GenerationStats  # noqa: E402
from jobshop_ga.models import Schedule  # noqa: E402


def _ensure_dir(path: str):
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


def plot_gantt(
    schedule: Schedule,
    save_path: str,
    algo_name: str = "ga",
    show_legend: Optional[bool] = None,
) -> str:
    """Render a Gantt chart of a simulated schedule and save it as PNG.

    One row per machine, one bar per operation labelled ``J<job>.<task>``,
    colored by job. The legend is dropped automatically for many jobs
    unless forced.

    Returns:
        The path the chart was written to.
    """
    machines = sorted({row.machine for row in schedule.operations})
    jobs = sorted({row.job for row in schedule.operations})
    m = (max(machines) + 1) if machines else 1

    fig, ax = plt.subplots(
        figsize=(min(10 + schedule.cmax * 0.05, 18), min(0.5 * m + 2, 16)),
        constrained_layout=True,
    )
    cmap = plt.get_cmap("tab20")
    colors = {job: cmap((job - 1) % 20) for job in jobs}
    for row in schedule.operations:
        ax.barh(
            row.machine,
            row.duration,
            left=row.start,
            height=0.8,
            color=colors[row.job],
            alpha=0.85,
            edgecolor="black",
            linewidth=0.6,
        )
        ax.text(
            row.start + row.duration / 2,
            row.machine,
            f"J{row.job}.{row.task_index}",
            ha="center",
            va="center",
            fontsize=7,
        )
    ax.set_xlabel("Time", fontsize=12)
    ax.set_ylabel("Machine", fontsize=12)
    ax.set_title(f"{algo_name.upper()} Gantt Chart - Cmax = {schedule.cmax}", fontsize=14)
    ax.set_yticks(range(m))
    ax.set_yticklabels([f"M{i}" for i in range(m)])
    ax.grid(True, alpha=0.25, axis="x", linestyle="--", linewidth=0.7)
    ax.set_ylim(-0.5, m - 0.5)

    if show_legend is None:
        show_legend = len(jobs) <= 40
    if show_legend:
        legend_elements = [
            plt.Rectangle(
                (0, 0), 1, 1, facecolor=colors[j], alpha=0.85, edgecolor="black", label=f"Job {j}"
            )
            for j in jobs
        ]
        ax.legend(
            handles=legend_elements,
            bbox_to_anchor=(1.02, 1),
            loc="upper left",
            borderaxespad=0.0,
            fontsize=8,
            frameon=False,
        )

    _ensure_dir(os.path.dirname(save_path))
    fig.savefig(save_path, dpi=180)
    plt.close(fig)
    return save_path


def plot_generation_progress(
    history: Sequence[GenerationStats],
    save_path: str,
    title: str = "GA progress",
) -> str:
    """Plot mean and best fitness per generation."""
    generations: List[int] = [s.generation for s in history]
    fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
    ax.plot(generations, [s.mean for s in history], label="Mean fitness", linewidth=2)
    ax.plot(
        generations,
        [s.best for s in history],
        label="Best fitness",
        linewidth=2,
        marker="o",
        markersize=4,
        markerfacecolor="white",
    )
    ax.set_xlabel("Generation", fontsize=12)
    ax.set_ylabel("Makespan", fontsize=12)
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.7)
    ax.legend(loc="upper right", frameon=False)
    _ensure_dir(os.path.dirname(save_path))
    fig.savefig(save_path, dpi=150)
    plt.close(fig)
    return save_path
