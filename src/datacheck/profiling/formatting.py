"""Profile export to JSON and Markdown."""

from __future__ import annotations

from typing import Any

from datacheck.profiling.models import ColumnProfile, DatasetProfile


def to_json(profile: DatasetProfile, indent: int | None = 2) -> str:
    return profile.model_dump_json(indent=indent)


def _fmt(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.4g}"
    return str(value)


def _details(column: ColumnProfile) -> str:
    parts = [f"nulls={column.null_count}", f"unique={column.unique_count}"]
    if column.min is not None or column.max is not None:
        parts.append(f"range=[{_fmt(column.min)}, {_fmt(column.max)}]")
    if column.mean is not None:
        parts.append(f"mean={_fmt(column.mean)}")
    if column.stdev is not None:
        parts.append(f"stdev={_fmt(column.stdev)}")
    if column.outliers is not None and column.outliers.outlier_count:
        parts.append(f"outliers={column.outliers.outlier_count}")
    return ", ".join(parts)


def to_markdown(profile: DatasetProfile) -> str:
    """Render a profile as a Markdown report."""
    lines = [
        "# Data Profile",
        "",
        f"**Generated**: {profile.profiled_at.isoformat()}",
        "",
        "## Summary",
        "",
        f"- **Row Count**: {profile.row_count}",
        f"- **Column Count**: {profile.column_count}",
        f"- **Quality Score**: {round(profile.quality_score, 4)}",
        "",
        "## Columns",
        "",
    ]

    if profile.columns:
        lines.append("| Column | Type | Details |")
        lines.append("|--------|------|---------|")
        for name, column in profile.columns.items():
            lines.append(f"| {name} | {column.inferred_type.value} | {_details(column)} |")
    else:
        lines.append("No columns.")

    lines.extend(["", "## Missing Values", ""])
    missing = {name: count for name, count in profile.missing_values.items() if count}
    if missing:
        lines.extend(f"- **{name}**: {count}" for name, count in missing.items())
    else:
        lines.append("No missing values.")

    if profile.correlation_matrix:
        names = list(profile.correlation_matrix)
        lines.extend(["", "## Correlations", ""])
        lines.append("| | " + " | ".join(names) + " |")
        lines.append("|---" * (len(names) + 1) + "|")
        for a in names:
            row = [_fmt(profile.correlation_matrix[a].get(b)) for b in names]
            lines.append(f"| {a} | " + " | ".join(row) + " |")

    return "\n".join(lines) + "\n"
