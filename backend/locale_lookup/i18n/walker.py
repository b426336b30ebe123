from pathlib import Path

from ..core.errors import DictionaryLoadError


def walk_files(directory: Path) -> list[Path]:
    """Return every regular file below ``directory``, sorted by name per directory.

    A directory that cannot be listed aborts the whole walk.
    """
    directory = Path(directory)
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise DictionaryLoadError(directory, exc.strerror or str(exc)) from exc

    paths: list[Path] = []
    for entry in entries:
        if entry.is_dir():
            paths.extend(walk_files(entry))
            continue
        if entry.is_file():
            paths.append(entry)
    return paths
