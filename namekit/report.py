#!/usr/bin/env python3
"""
Confusion Report
================
Text report, JSON export and a Rich console summary for ranked clusters.

The text layout is stable so reports from different runs can be diffed.
"""

import json
import logging
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from pathlib import Path
from typing import Optional, Sequence, Union

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from namekit.models import ConfusionCluster
from namekit.settings import get_setting, require_setting, resolve_path

logger = logging.getLogger(__name__)

TITLE_RULE = "=" * 35


def to_fixed(value: float, digits: int) -> str:
    """
    Fixed-point string, rounding halves away from zero on the exact float value.

    Magnitudes of 1e21 and up are written in exponent form ("1e+30"), and
    non-finite values as "Infinity", "-Infinity" or "NaN".
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= 1e21:
        return repr(value)

    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + digits + 2)
        return str(exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))


def render_cluster(index: int, cluster: ConfusionCluster) -> str:
    lines = [
        f"Cluster #{index} (Score: {to_fixed(cluster.confusion_score, 2)})",
        f"Phonetic Code: {cluster.code_display}",
        f"Avg Value: {to_fixed(cluster.avg_value, 0)} | "
        f"Avg Complexity: {to_fixed(cluster.avg_complexity, 2)}",
        f"Names ({cluster.size}): {', '.join(cluster.names)}",
        "",
        "Confusion Factors:",
        f"- Group Size: {cluster.size} names",
        f"- High Complexity: {cluster.high_complexity_count} difficult names",
        f"- Value Spread: {cluster.min_value} to {cluster.max_value}",
        f"- Orthographic Diversity: {to_fixed(cluster.orthographic_diversity, 2)}",
        "",
    ]
    return "\n".join(lines) + "\n"


def render_report(clusters: Sequence[ConfusionCluster]) -> str:
    report = f"Phonetic Confusion Analysis ({len(clusters)} clusters)\n"
    report += f"{TITLE_RULE}\n\n"
    for idx, cluster in enumerate(clusters, 1):
        report += render_cluster(idx, cluster)
    return report


def write_report(clusters: Sequence[ConfusionCluster],
                 path: Optional[Union[str, Path]] = None) -> Path:
    """Render and write the report; returns the path written."""
    if path is None:
        path = resolve_path(require_setting("report.output_path"), base=Path.cwd())
    path = Path(path)
    encoding = get_setting("report.encoding", "utf-8")
    path.write_text(render_report(clusters), encoding=encoding)
    logger.info(f"Wrote report for {len(clusters)} clusters to {path}")
    return path


def clusters_to_json(clusters: Sequence[ConfusionCluster], indent: int = 2) -> str:
    return json.dumps(
        {
            "cluster_count": len(clusters),
            "clusters": [
                dict(rank=idx, **cluster.to_dict())
                for idx, cluster in enumerate(clusters, 1)
            ],
        },
        indent=indent,
        ensure_ascii=False,
    )


def print_summary(clusters: Sequence[ConfusionCluster],
                  console: Optional[Console] = None,
                  top: Optional[int] = None):
    """Print the highest-ranked clusters as a table."""
    console = console or Console()
    if top is None:
        top = get_setting("report.console_top", 20)

    if not clusters:
        console.print("[dim]No confusion clusters found.[/dim]")
        return

    table = Table(title="Phonetic Confusion Clusters", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Score", justify="right", style="bold")
    table.add_column("Code", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Avg Value", justify="right")
    table.add_column("Complexity", justify="right")
    table.add_column("Names")

    for idx, cluster in enumerate(clusters[:top], 1):
        score_style = "red" if cluster.confusion_score >= 0.7 else "yellow" if cluster.confusion_score >= 0.5 else "green"
        table.add_row(
            str(idx),
            f"[{score_style}]{to_fixed(cluster.confusion_score, 2)}[/{score_style}]",
            escape(cluster.code_display),
            str(cluster.size),
            to_fixed(cluster.avg_value, 0),
            to_fixed(cluster.avg_complexity, 2),
            escape(", ".join(cluster.names)),
        )

    console.print(table)
    if len(clusters) > top:
        console.print(f"[dim]... {len(clusters) - top} more clusters in the report[/dim]")
