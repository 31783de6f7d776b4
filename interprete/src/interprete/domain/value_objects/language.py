"""
Language descriptors and the catalog of supported languages.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Language:
    """A language the chat client may translate to or from."""

    code: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code, "name": self.name}


SUPPORTED_LANGUAGES: Tuple[Language, ...] = (
    Language("en", "English"),
    Language("es", "Spanish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("it", "Italian"),
    Language("pt", "Portuguese"),
    Language("ru", "Russian"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
    Language("zh", "Chinese"),
    Language("ar", "Arabic"),
    Language("hi", "Hindi"),
    Language("nl", "Dutch"),
    Language("pl", "Polish"),
    Language("tr", "Turkish"),
)

_BY_CODE: Dict[str, Language] = {lang.code: lang for lang in SUPPORTED_LANGUAGES}


def find_language(code: str) -> Optional[Language]:
    return _BY_CODE.get(code)


def language_name(code: str) -> str:
    """Display name for a code; unknown codes are returned unchanged."""
    language = find_language(code)
    return language.name if language else code


def languages_payload() -> List[Dict[str, str]]:
    """Catalog in wire form (list of {code, name})."""
    return [lang.to_dict() for lang in SUPPORTED_LANGUAGES]
