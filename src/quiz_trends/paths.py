from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from quiz_trends.config import TableFormat

SUMMARY_FILE_NAME = "summary.json"


@dataclass(frozen=True)
class OutputPaths:
    """Locations of the tables, charts and summary written by a run."""

    root: Path
    tables: Path
    figures: Path
    summary: Path

    def table(self, name: str, fmt: TableFormat) -> Path:
        return self.tables / f"{name}.{fmt}"

    def figure(self, name: str, fmt: str) -> Path:
        suffix = fmt.strip().lstrip(".") or "png"
        return self.figures / f"{name}.{suffix}"

    @property
    def summary_file(self) -> Path:
        return self.summary / SUMMARY_FILE_NAME


def build_output_paths(out_dir: Path) -> OutputPaths:
    paths = OutputPaths(
        root=out_dir,
        tables=out_dir / "tables",
        figures=out_dir / "figures",
        summary=out_dir / "summary",
    )
    for path in (paths.root, paths.tables, paths.figures, paths.summary):
        path.mkdir(parents=True, exist_ok=True)
    return paths
