"""Under 예외 정의."""

from __future__ import annotations


class UnderError(Exception):
    """Under 파이프라인 예외의 기반 클래스."""


class ConfigurationError(UnderError, ValueError):
    """알파벳 또는 설정 파일이 유효하지 않을 때 발생한다.

    식별자 생성에 도달 가능한 위치의 문자 집합이 비어 있는 경우
    (빈 명시 그룹, 코퍼스에 사용 가능한 글자가 없는 자동 알파벳 등)가 대표적이다.
    파일을 수정하기 전에 발생하여 실행을 중단시킨다.
    """
