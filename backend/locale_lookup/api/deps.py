from fastapi import Request

from ..i18n import Translator


def get_translator(request: Request) -> Translator:
    return request.app.state.translator


def get_locale(request: Request) -> str:
    translator = get_translator(request)
    return getattr(request.state, 'locale', translator.default_locale)
