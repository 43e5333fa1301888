"""Under 식별자 난독화 패키지.

여러 텍스트 파일에 걸쳐 밑줄(_)로 끝나는 단어를 찾아, 충돌하지 않는 짧은
식별자로 일관되게 치환한다. 단어 분류, 알파벳 구성, 식별자 생성,
순서 안전 치환의 4단계 파이프라인을 제공한다.
"""

__version__ = "0.1.0"
