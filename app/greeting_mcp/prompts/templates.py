"""
Code review prompt template.

The template is plain string construction; the same inputs always
produce the same text.
"""

from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from greeting_mcp.utils import get_logger

logger = get_logger(__name__)

CODE_REVIEW_NAME = "code_review"
CODE_REVIEW_DESCRIPTION = "코드를 입력받아 섬세한 코드 리뷰를 수행합니다"

REVIEW_CHECKLIST = """다음 관점에서 섬세하고 전문적인 코드 리뷰를 수행해주세요:

## 1. 코드 품질 및 가독성
- 변수명, 함수명이 명확하고 의미가 잘 전달되는가?
- 코드 구조가 이해하기 쉽고 논리적인가?
- 불필요하게 복잡한 부분은 없는가?
- 주석이 필요한 부분에 적절히 작성되어 있는가?

## 2. 성능 최적화
- 비효율적인 알고리즘이나 데이터 구조 사용은 없는가?
- 불필요한 연산이나 반복문은 없는가?
- 메모리 사용이 효율적인가?
- 시간 복잡도와 공간 복잡도를 개선할 여지는 없는가?

## 3. 보안 이슈
- 잠재적인 보안 취약점은 없는가?
- 입력 값 검증이 제대로 이루어지는가?
- 민감한 정보가 노출될 위험은 없는가?
- SQL 인젝션, XSS 등의 공격에 취약하지 않은가?

## 4. 버그 및 에러 처리
- 잠재적인 버그나 엣지 케이스는 없는가?
- 에러 처리가 적절히 구현되어 있는가?
- Null/Undefined 처리가 안전한가?
- 예외 상황에 대한 대응이 충분한가?

## 5. 베스트 프랙티스 및 디자인 패턴
- 해당 언어나 프레임워크의 베스트 프랙티스를 따르고 있는가?
- SOLID 원칙, DRY 원칙 등을 준수하는가?
- 적절한 디자인 패턴이 적용되었는가?
- 코드의 재사용성과 확장성은 어떤가?

## 6. 테스트 가능성
- 코드가 테스트하기 쉬운 구조인가?
- 의존성 주입이나 모킹이 가능한가?
- 단위 테스트 작성이 용이한가?

## 7. 유지보수성
- 향후 수정이나 기능 추가가 용이한가?
- 코드의 결합도가 적절한가?
- 책임이 명확히 분리되어 있는가?

## 8. 구체적인 개선 제안
- 위의 검토 사항들을 바탕으로 구체적인 개선 코드를 제시해주세요
- 개선 전후를 비교하여 설명해주세요
- 우선순위를 매겨 중요한 개선사항부터 제시해주세요

각 항목에 대해 문제점이 있다면 구체적으로 지적하고, 좋은 부분도 함께 언급해주세요.
개선이 필요한 부분은 반드시 개선된 코드 예시와 함께 설명해주세요."""


def build_code_review_prompt(
    code: str,
    language: Optional[str] = None,
    context: Optional[str] = None,
) -> str:
    """
    Build the code review request text.

    Args:
        code: Code to review
        language: Programming language, also used as the code fence tag
        context: What the code is for

    Returns:
        Markdown prompt text
    """
    language_info = f"**프로그래밍 언어**: {language}" if language else ""
    context_info = f"\n\n**코드 맥락**: {context}" if context else ""

    return (
        "# 코드 리뷰 요청\n"
        "\n"
        f"{language_info}{context_info}\n"
        "\n"
        "## 리뷰할 코드:\n"
        f"```{language or ''}\n"
        f"{code}\n"
        "```\n"
        "\n"
        "---\n"
        "\n"
        f"{REVIEW_CHECKLIST}"
    )


def register_prompts(mcp: FastMCP) -> None:
    """
    Register prompt templates with the MCP server.

    Args:
        mcp: FastMCP server instance
    """

    @mcp.prompt(
        name=CODE_REVIEW_NAME,
        description="사용자의 코드를 입력받아 섬세하고 전문적인 코드 리뷰를 수행하는 프롬프트를 생성합니다",
    )
    def code_review(
        code: Annotated[str, Field(description="리뷰할 코드")],
        language: Annotated[
            Optional[str],
            Field(description="코드의 프로그래밍 언어 (예: TypeScript, Python, Java 등)"),
        ] = None,
        context: Annotated[
            Optional[str],
            Field(description="코드의 맥락이나 목적에 대한 추가 설명"),
        ] = None,
    ) -> str:
        """Create a detailed code review request for the given code."""
        return build_code_review_prompt(code, language, context)

    logger.debug(f"Registered prompt {CODE_REVIEW_NAME}")
