"""식별자 치환 커맨드.

파일 집합에서 밑줄(_)로 끝나는 단어를 찾아 짧은 식별자로 치환하고,
모든 파일을 BOM 이 붙은 UTF-8 로 다시 쓴다.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from under.config import resolve_rename_config
from under.constants import DEFAULT_CONFIG_FILE, TOP_WORDS_SHOWN
from under.corpus.files import expand_file_specs
from under.parser import CliHelpFormatter, add_rename_arguments
from under.pipeline import RenameResult, run_rename

from .base import Command, SubparsersLike

logger = logging.getLogger(__name__)


def create_top_words_table(result: RenameResult, limit: int) -> Table:
    """가장 빈번한 치환 대상 단어 테이블을 만든다."""
    table = Table(title=f"🏆 최다 빈도 단어 (상위 {limit}개)", show_header=True, border_style="dim")
    table.add_column("빈도", style="yellow", width=10, justify="right")
    table.add_column("원래 단어", style="red")
    table.add_column("→", style="dim", width=3, justify="center")
    table.add_column("치환 식별자", style="green")

    for entry in result.plan.most_frequent(limit):
        table.add_row(f"{entry.frequency:,}", entry.original, "→", entry.replacement or "")
    return table


class RenameCommand(Command):
    """식별자 치환 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        filespecs: 파일 이름 또는 재귀 검색 패턴 목록
        letters: 명시적 글자 그룹 문자열 (None 이면 자동 계산)
        config_path: YAML 설정 파일 경로
        progress: 진행바 표시 여부
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        parser = subparsers.add_parser(
            "rename",
            help="식별자를 치환하고 파일을 덮어씀",
            formatter_class=CliHelpFormatter,
            epilog="예시:\n  under rename '*.js' '*.css' '*.cshtml'\n  under rename 'scripts/*.js' -l aA,jJ,mM",
        )
        add_rename_arguments(parser)

    @classmethod
    def from_args(cls, console: Console, args: argparse.Namespace) -> RenameCommand:
        return cls(console, args.filespecs, args.letters, args.config, not args.no_progress)

    def __init__(
        self,
        console: Console,
        filespecs: list[str],
        letters: str | None = None,
        config_path: Path | None = None,
        progress: bool = True,
    ) -> None:
        self.console = console
        self.filespecs = filespecs
        self.letters = letters
        self.config_path = config_path
        self.progress = progress

    def execute(self) -> dict[str, Any]:
        """식별자 치환을 실행한다.

        Returns:
            실행 결과 딕셔너리 (files, unique_words, target_words, letters, replacements)

        Raises:
            FileNotFoundError: 대상 파일이나 설정 파일이 없는 경우
            ConfigurationError: 알파벳을 구성할 수 없는 경우
        """
        config = resolve_rename_config(self.config_path, self.letters, DEFAULT_CONFIG_FILE)
        paths = expand_file_specs(self.filespecs)
        if not paths:
            raise FileNotFoundError("대상 파일을 찾을 수 없습니다.")

        result = run_rename(
            paths,
            letter_groups=config.letter_groups,
            reserved_words=config.reserved_words,
            write=True,
            progress=self.progress,
        )
        logger.info("✅ %d곳을 치환하여 파일 %d개에 저장했습니다.", result.total_replacements, len(result.buffers))

        if result.plan.entries:
            self.console.print()
            self.console.print(create_top_words_table(result, TOP_WORDS_SHOWN))
        self.console.print()

        return {
            "files": len(result.buffers),
            "unique_words": result.unique_words,
            "target_words": result.target_words,
            "letters": result.letters,
            "replacements": result.total_replacements,
        }

    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드 이름 "rename"
        """
        return "rename"
