import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

logger = logging.getLogger(__name__)

# Key stops at the first '=', the value keeps any further '='.
LINE_PATTERN = re.compile(r'([^=]+)=(.+)')

FileErrorCallback = Callable[[Path, OSError], None]


def locale_from_path(path: Path) -> str | None:
    _, dot, ext = Path(path).name.rpartition('.')
    if not dot or not ext:
        return None
    return ext.lower()


def parse_line(line: str) -> tuple[str, str] | None:
    match = LINE_PATTERN.fullmatch(line.rstrip('\n'))
    if match is None:
        return None
    return match.group(1), match.group(2)


def load_dictionary(path: Path) -> dict[str, str]:
    entries: dict[str, str] = {}
    with open(path, encoding='utf-8', errors='replace') as fh:
        for line in fh:
            pair = parse_line(line)
            if pair is None:
                logger.debug('[%s]:[%s] skip this line', path, line.rstrip('\n'))
                continue
            key, value = pair
            entries[key] = value
    return entries


def load_dictionaries(
    paths: Iterable[Path], on_file_error: FileErrorCallback | None = None
) -> Mapping[str, Mapping[str, str]]:
    """Build the locale -> dictionary set from translation files.

    The locale is the file extension, so ``messages.en`` feeds ``en``. When
    several files share a locale the last one processed replaces the earlier
    dictionary outright; nothing is merged. Files that cannot be opened are
    skipped, and ``on_file_error`` is told about them when given.
    """
    paths = list(paths)
    if not paths:
        logger.warning('translation files not found (ex. messages.en)')

    dictionaries: dict[str, Mapping[str, str]] = {}
    for path in paths:
        locale = locale_from_path(path)
        if locale is None:
            logger.warning('[%s]: undefined file extension, skip this file', path)
            continue
        try:
            entries = load_dictionary(path)
        except OSError as exc:
            if on_file_error is not None:
                on_file_error(path, exc)
            continue
        dictionaries[locale] = MappingProxyType(entries)

    return MappingProxyType(dictionaries)
