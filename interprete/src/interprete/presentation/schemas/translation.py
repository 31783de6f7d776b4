"""
Schemas for translation and language endpoints.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LanguageResponse(BaseModel):
    """One supported language."""

    code: str = Field(..., description="Language code (e.g. 'es')")
    name: str = Field(..., description="Display name (e.g. 'Spanish')")


class TranslateRequest(BaseModel):
    """
    Request body for POST /api/translate.

    text and targetLanguage are optional at the schema level so that a
    missing or non-string value is answered with the API's own 400 error
    body. A null or non-string sourceLanguage falls back to "auto".
    """

    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = Field(None, description="Text to translate")
    target_language: Optional[str] = Field(
        None, alias="targetLanguage", description="Target language code"
    )
    source_language: str = Field(
        "auto", alias="sourceLanguage", description="Source code or 'auto'"
    )

    @field_validator("text", "target_language", mode="before")
    @classmethod
    def drop_non_string(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None

    @field_validator("source_language", mode="before")
    @classmethod
    def default_source_language(cls, v: Any) -> str:
        return v if isinstance(v, str) and v else "auto"

    def is_complete(self) -> bool:
        return bool(self.text) and bool(self.target_language)


class TranslateResponse(BaseModel):
    """Successful translation."""

    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(..., alias="translatedText")


class ErrorResponse(BaseModel):
    """Error body shared by translation endpoints."""

    error: str
