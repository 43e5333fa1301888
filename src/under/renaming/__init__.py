"""식별자 생성, 치환 계획, 단어 치환 모듈.

빈도가 높은 단어부터 충돌 없는 짧은 식별자를 배정하고,
긴 단어부터 온전한 단어 단위로 모든 파일에 적용한다.
"""

from __future__ import annotations

from .identifiers import identifier_at, iter_identifiers
from .planner import ReplacementEntry, ReplacementPlan, plan_replacements
from .substitution import SubstitutionStats, apply_replacements, substitution_order

__all__ = [
    "ReplacementEntry",
    "ReplacementPlan",
    "SubstitutionStats",
    "apply_replacements",
    "identifier_at",
    "iter_identifiers",
    "plan_replacements",
    "substitution_order",
]
