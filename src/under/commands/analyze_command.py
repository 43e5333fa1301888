"""치환 계획 분석 커맨드.

파일을 수정하지 않고 치환 계획만 세워, 단어 빈도와 치환 매핑을
표로 출력하고 리포트 파일로 저장한다.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from under.config import resolve_rename_config
from under.constants import DEFAULT_CONFIG_FILE, RENAME_MAP_FILE, TARGET_FREQUENCY_FILE
from under.corpus.files import expand_file_specs
from under.parser import CliHelpFormatter, add_rename_arguments, positive_int
from under.pipeline import run_rename

from .base import Command, SubparsersLike
from .rename_command import create_top_words_table

logger = logging.getLogger(__name__)


class AnalyzeCommand(Command):
    """치환 계획 분석 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        filespecs: 파일 이름 또는 재귀 검색 패턴 목록
        letters: 명시적 글자 그룹 문자열 (None 이면 자동 계산)
        config_path: YAML 설정 파일 경로
        output_frequency: 단어 빈도 parquet 출력 경로 (None 이면 저장하지 않음)
        output_map: 치환 매핑 CSV 출력 경로 (None 이면 저장하지 않음)
        top: 표시할 최다 빈도 단어 수
        progress: 진행바 표시 여부
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        parser = subparsers.add_parser(
            "analyze", help="파일을 수정하지 않고 치환 계획만 분석", formatter_class=CliHelpFormatter
        )
        add_rename_arguments(parser)
        parser.add_argument(
            "--output-frequency",
            type=Path,
            nargs="?",
            const=TARGET_FREQUENCY_FILE,
            default=None,
            help=f"단어 빈도 parquet 출력 경로 (값 생략 시 {TARGET_FREQUENCY_FILE})",
        )
        parser.add_argument(
            "--output-map",
            type=Path,
            nargs="?",
            const=RENAME_MAP_FILE,
            default=None,
            help=f"치환 매핑 CSV 출력 경로 (값 생략 시 {RENAME_MAP_FILE})",
        )
        parser.add_argument("--top", type=positive_int, default=10, help="표시할 최다 빈도 단어 수")

    @classmethod
    def from_args(cls, console: Console, args: argparse.Namespace) -> AnalyzeCommand:
        return cls(
            console,
            args.filespecs,
            args.letters,
            args.config,
            args.output_frequency,
            args.output_map,
            args.top,
            not args.no_progress,
        )

    def __init__(
        self,
        console: Console,
        filespecs: list[str],
        letters: str | None = None,
        config_path: Path | None = None,
        output_frequency: Path | None = None,
        output_map: Path | None = None,
        top: int = 10,
        progress: bool = True,
    ) -> None:
        self.console = console
        self.filespecs = filespecs
        self.letters = letters
        self.config_path = config_path
        self.output_frequency = output_frequency
        self.output_map = output_map
        self.top = top
        self.progress = progress

    def execute(self) -> dict[str, Any]:
        """치환 계획을 분석한다.

        Returns:
            분석 결과 딕셔너리 (files, unique_words, target_words, letters,
            replacements, saved_chars 및 저장한 리포트 경로)
        """
        from under.analysis.reports import write_frequency_parquet, write_rename_map_csv

        config = resolve_rename_config(self.config_path, self.letters, DEFAULT_CONFIG_FILE)
        paths = expand_file_specs(self.filespecs)
        if not paths:
            raise FileNotFoundError("대상 파일을 찾을 수 없습니다.")
        logger.info("🧪 분석 모드: 파일을 수정하지 않습니다.")

        with self.console.status("치환 계획 수립 중..."):
            result = run_rename(
                paths,
                letter_groups=config.letter_groups,
                reserved_words=config.reserved_words,
                write=False,
                progress=self.progress,
            )

        saved_chars = sum(
            (len(entry.original) - len(entry.replacement or "")) * entry.frequency
            for entry in result.plan.entries
        )

        summary = Table(title="✨ 치환 계획 분석 결과", show_header=True, title_style="bold green")
        summary.add_column("항목", style="bold cyan", width=20)
        summary.add_column("값", style="yellow", justify="right")
        summary.add_row("대상 파일", f"{len(result.buffers):,}개")
        summary.add_row("고유 단어", f"{result.unique_words:,}개")
        summary.add_row("치환 대상 단어", f"{result.target_words:,}개")
        summary.add_row("검사한 후보 식별자", f"{result.plan.identifiers_tried:,}개")
        summary.add_row("치환 예정 위치", f"{result.total_replacements:,}곳")
        summary.add_row("절약 문자 수", f"{saved_chars:,}자")

        self.console.print()
        self.console.print(summary)
        if result.plan.entries:
            self.console.print()
            self.console.print(create_top_words_table(result, self.top))
        self.console.print()

        output: dict[str, Any] = {
            "files": len(result.buffers),
            "unique_words": result.unique_words,
            "target_words": result.target_words,
            "letters": result.letters,
            "replacements": result.total_replacements,
            "saved_chars": saved_chars,
        }

        if self.output_frequency is not None:
            write_frequency_parquet(result.plan, self.output_frequency)
            output["frequency_path"] = self.output_frequency
        if self.output_map is not None:
            write_rename_map_csv(result.plan, self.output_map)
            output["map_path"] = self.output_map

        return output

    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드 이름 "analyze"
        """
        return "analyze"
