"""
Translation and language catalog API routes.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from interprete.di.container import Container
from interprete.domain.exceptions import (
    TranslationError,
    TranslationNotConfiguredError,
)
from interprete.domain.value_objects import languages_payload
from interprete.presentation.api.dependencies import get_container
from interprete.presentation.schemas import (
    ErrorResponse,
    LanguageResponse,
    TranslateRequest,
    TranslateResponse,
)

router = APIRouter(prefix="/api", tags=["translation"])

MISSING_FIELDS_MESSAGE = "Text and targetLanguage are required"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.get("/languages", response_model=List[LanguageResponse])
def list_languages():
    """Supported languages as a list of {code, name}."""
    return languages_payload()


@router.post(
    "/translate",
    response_model=TranslateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def translate(
    request: TranslateRequest,
    container: Container = Depends(get_container),
):
    """
    Translate text into targetLanguage.

    Returns:
        200 {"translatedText": ...}; quota exhaustion also answers 200
        with the original text
        400 when text or targetLanguage is missing
        500 when no provider is configured or the provider fails
    """
    if not request.is_complete():
        return _error(status.HTTP_400_BAD_REQUEST, MISSING_FIELDS_MESSAGE)

    reporter = container.reporter
    use_case = container.get_translate_use_case()
    container.increment_stat("translations_requested")

    try:
        if not use_case.is_configured:
            raise TranslationNotConfiguredError()
        translated = await use_case.execute(
            request.text,
            request.target_language,
            request.source_language,
        )
    except TranslationNotConfiguredError as e:
        container.increment_stat("translations_failed")
        reporter.warning(str(e), context="TranslateAPI")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except TranslationError as e:
        container.increment_stat("translations_failed")
        reporter.error(f"Translation error: {e}", context="TranslateAPI")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    return TranslateResponse(translated_text=translated).model_dump(by_alias=True)
