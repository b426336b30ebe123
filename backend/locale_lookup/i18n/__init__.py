from .loader import load_dictionaries, load_dictionary, locale_from_path, parse_line
from .matcher import match_locale, parse_accept_language
from .translator import Translator
from .walker import walk_files

__all__ = [
    'Translator',
    'load_dictionaries',
    'load_dictionary',
    'locale_from_path',
    'match_locale',
    'parse_accept_language',
    'parse_line',
    'walk_files',
]
