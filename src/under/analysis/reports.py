"""치환 계획 리포트 저장 모듈.

산출물:
    - .under/reports/target_frequency.parquet
    - .under/reports/rename_map.csv
"""

from __future__ import annotations

import csv
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from under.renaming.planner import ReplacementPlan
from under.utils.logging_config import get_logger

logger = get_logger(__name__)


def write_frequency_parquet(plan: ReplacementPlan, output_path: Path) -> None:
    """치환 대상 단어 빈도를 parquet로 저장한다."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    table = pa.Table.from_pydict(
        {
            "word": [entry.original for entry in plan.entries],
            "frequency": [entry.frequency for entry in plan.entries],
        }
    )
    pq.write_table(table, output_path)
    logger.info("📄 단어 빈도 저장: %s", output_path)


def write_rename_map_csv(plan: ReplacementPlan, output_path: Path) -> None:
    """rename_map.csv 를 저장한다."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = ["rank", "original", "replacement", "frequency", "saved_chars"]

    with output_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        for rank, entry in enumerate(plan.entries, 1):
            replacement = entry.replacement or ""
            writer.writerow(
                {
                    "rank": rank,
                    "original": entry.original,
                    "replacement": replacement,
                    "frequency": entry.frequency,
                    "saved_chars": (len(entry.original) - len(replacement)) * entry.frequency,
                }
            )
    logger.info("📄 치환 매핑 저장: %s", output_path)
