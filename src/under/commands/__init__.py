"""CLI 커맨드 모듈.

각 서브커맨드를 실행하는 커맨드 클래스들을 제공한다.
모든 커맨드는 Command 인터페이스를 구현하며, CLI에서 서브커맨드로 호출된다.
"""

from .analyze_command import AnalyzeCommand
from .base import Command
from .rename_command import RenameCommand

__all__ = [
    "Command",
    "RenameCommand",
    "AnalyzeCommand",
]
