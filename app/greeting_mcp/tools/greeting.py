# tools/greeting.py

from enum import Enum
from types import MappingProxyType
from typing import Annotated

from pydantic import Field

from greeting_mcp.tools.base import tool_boundary
from greeting_mcp.tools.types import ToolOutcome

DESCRIPTION = "사용자의 이름과 언어를 입력받아 해당 언어로 인사합니다"


class Language(str, Enum):
    """Supported greeting languages."""

    KOREAN = "korean"
    ENGLISH = "english"
    JAPANESE = "japanese"
    CHINESE = "chinese"
    SPANISH = "spanish"
    FRENCH = "french"


GREETINGS = MappingProxyType({
    Language.KOREAN: "안녕하세요, {name}님!",
    Language.ENGLISH: "Hello, {name}!",
    Language.JAPANESE: "こんにちは、{name}さん！",
    Language.CHINESE: "你好，{name}！",
    Language.SPANISH: "¡Hola, {name}!",
    Language.FRENCH: "Bonjour, {name}!",
})

SUPPORTED_LANGUAGES = [language.value for language in Language]


@tool_boundary()
async def greeting(
    name: Annotated[str, Field(min_length=1, description="인사할 사람의 이름")],
    language: Annotated[
        Language,
        Field(description="인사할 언어 (korean, english, japanese, chinese, spanish, french)"),
    ],
) -> ToolOutcome:
    """Greet someone by name in the requested language."""
    template = GREETINGS[Language(language)]
    return ToolOutcome.ok(template.format(name=name))
