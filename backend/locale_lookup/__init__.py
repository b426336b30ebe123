from .core.errors import (
    DictionaryLoadError,
    LocaleDirectoryNotFoundError,
    TranslatorError,
)
from .i18n import Translator

__all__ = [
    'DictionaryLoadError',
    'LocaleDirectoryNotFoundError',
    'Translator',
    'TranslatorError',
]
