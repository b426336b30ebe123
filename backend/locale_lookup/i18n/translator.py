import logging
import sys
from pathlib import Path
from typing import Mapping, TextIO

from ..core.errors import LocaleDirectoryNotFoundError
from .loader import FileErrorCallback, load_dictionaries
from .matcher import match_locale
from .walker import walk_files

logger = logging.getLogger(__name__)


class Translator:
    """Resolves translation keys against dictionaries loaded from a directory.

    Dictionaries are read once, at construction, from every ``<name>.<locale>``
    file under ``dir_path``. The instance is read-only afterwards and can be
    shared between request handlers.
    """

    def __init__(
        self,
        dir_path: str | Path,
        default_locale: str,
        on_file_error: FileErrorCallback | None = None,
    ):
        path = Path(dir_path).resolve()
        if not path.exists():
            raise LocaleDirectoryNotFoundError(path)
        self._dir_path = path
        self._default_locale = default_locale.lower()
        self._dictionaries = load_dictionaries(
            walk_files(path), on_file_error=on_file_error
        )
        logger.info(
            'Loaded %d locale(s) from %s: %s',
            len(self._dictionaries),
            path,
            ', '.join(sorted(self._dictionaries)) or '-',
        )

    @property
    def dir_path(self) -> Path:
        return self._dir_path

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def dictionaries(self) -> Mapping[str, Mapping[str, str]]:
        return self._dictionaries

    @property
    def locales(self) -> list[str]:
        return sorted(self._dictionaries)

    def resolve_locale(self, header: str) -> str:
        return match_locale(header, self._dictionaries) or self._default_locale

    def translate(self, header: str, key: str) -> tuple[str, bool]:
        locale = match_locale(header, self._dictionaries)
        if locale is None:
            return self.translate_by_default_locale(key)
        return self._lookup(locale, key)

    def translate_by_default_locale(self, key: str) -> tuple[str, bool]:
        return self._lookup(self._default_locale, key)

    def _lookup(self, locale: str, key: str) -> tuple[str, bool]:
        dictionary = self._dictionaries.get(locale)
        if dictionary is None:
            logger.debug('no dictionary loaded for locale %r', locale)
            return '', False
        if key not in dictionary:
            return '', False
        return dictionary[key], True

    def dump_loaded_dictionaries(self, stream: TextIO | None = None) -> None:
        out = stream if stream is not None else sys.stderr
        for locale, dictionary in self._dictionaries.items():
            print('----- DEBUG -----', file=out)
            print(f'----- lang [{locale}] -----', file=out)
            for key, value in dictionary.items():
                print(f'[{key}] : [{value}]', file=out)
