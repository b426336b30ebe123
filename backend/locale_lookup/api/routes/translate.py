from fastapi import APIRouter, Depends, Header

from ...i18n import Translator
from ...schemas.translate import LocalesOut, TranslationOut
from ..deps import get_locale, get_translator

router = APIRouter()


@router.get('/locales', response_model=LocalesOut)
def list_locales(translator: Translator = Depends(get_translator)):
    return LocalesOut(
        default_locale=translator.default_locale, locales=translator.locales
    )


@router.get('/translate/default/{key}', response_model=TranslationOut)
def translate_default(key: str, translator: Translator = Depends(get_translator)):
    value, found = translator.translate_by_default_locale(key)
    return TranslationOut(
        key=key, locale=translator.default_locale, value=value, found=found
    )


@router.get('/translate/{key}', response_model=TranslationOut)
def translate_key(
    key: str,
    accept_language: str = Header(default=''),
    locale: str = Depends(get_locale),
    translator: Translator = Depends(get_translator),
):
    # A miss is reported through `found`, not as an HTTP error.
    value, found = translator.translate(accept_language, key)
    return TranslationOut(key=key, locale=locale, value=value, found=found)
