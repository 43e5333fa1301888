"""중앙화된 경로 및 상수 관리

이 모듈은 프로젝트 전체에서 사용되는 산출물 경로와 고정 상수를 중앙에서 관리한다.
모든 하드코딩된 경로는 이 모듈의 상수를 참조해야 한다.
"""

from __future__ import annotations

from pathlib import Path

# ====================================================================
# 📁 루트 디렉토리
# ====================================================================

UNDER_HOME = Path(".under")

# ====================================================================
# 📝 로그 경로
# ====================================================================

LOGS_DIR = UNDER_HOME / "logs"

# ====================================================================
# 📈 분석 산출물 경로
# ====================================================================

REPORTS_DIR = UNDER_HOME / "reports"

TARGET_FREQUENCY_FILE = REPORTS_DIR / "target_frequency.parquet"
RENAME_MAP_FILE = REPORTS_DIR / "rename_map.csv"

# ====================================================================
# ⚙️ 설정 파일 경로
# ====================================================================

DEFAULT_CONFIG_FILE = Path("under.yaml")

# ====================================================================
# 🔤 단어/알파벳 규칙
# ====================================================================

# 단어 토큰으로 인정되는 문자
WORD_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_$"

# 파일 내용을 하나의 코퍼스로 이을 때 사용하는 중립 구분자
CORPUS_SEPARATOR = " "

# 자동 알파벳은 전체 글자 빈도의 4/5 를 차지하는 글자로 구성한다
BEST_LETTER_RATIO = (4, 5)

# 실행 결과에 표시할 최다 빈도 단어 수
TOP_WORDS_SHOWN = 5

# ====================================================================
# 🚫 예약어
# ====================================================================

# https://developer.mozilla.org/en/JavaScript/Reference/Reserved_Words
RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "break", "case", "catch", "continue", "default", "delete", "do", "else",
        "finally", "for", "function", "if", "in", "instanceof", "new", "return",
        "switch", "this", "throw", "try", "typeof", "var", "void", "while", "with",
        "abstract", "boolean", "byte", "char", "class", "const", "debugger",
        "double", "enum", "export", "extends", "final", "float", "goto",
        "implements", "import", "int", "interface", "long", "native", "package",
        "private", "protected", "public", "short", "static", "super",
        "synchronized", "throws", "transient", "volatile",
    }
)
