import pytest
from fastapi.testclient import TestClient

from locale_lookup.core.config import settings
from locale_lookup.i18n import Translator
from locale_lookup.main import app


def write_locale_file(path, *lines):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(''.join(f'{line}\n' for line in lines), encoding='utf-8')
    return path


@pytest.fixture()
def locales_dir(tmp_path):
    root = tmp_path / 'locales'
    write_locale_file(root / 'messages.en', 'HELLO=hey, %s', 'BYE=bye')
    write_locale_file(
        root / 'messages.da', 'HELLO=hej, %s', 'BYE=farvel',
        'ERROR_INTERNAL=Der opstod en intern fejl.',
    )
    write_locale_file(root / 'nested' / 'messages.ja', 'HELLO=こんにちは、%s')
    return root


@pytest.fixture()
def translator(locales_dir):
    return Translator(locales_dir, 'en')


@pytest.fixture()
def client(locales_dir, monkeypatch):
    monkeypatch.setattr(settings, 'LOCALES_DIR', str(locales_dir))
    monkeypatch.setattr(settings, 'DEFAULT_LOCALE', 'en')
    monkeypatch.setattr(settings, 'DUMP_DICTIONARIES', False)
    with TestClient(app) as c:
        yield c
