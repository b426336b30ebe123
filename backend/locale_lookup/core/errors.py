class TranslatorError(Exception):
    """Base class for errors raised while building a Translator."""


class LocaleDirectoryNotFoundError(TranslatorError, FileNotFoundError):
    """The configured locales directory does not exist."""

    def __init__(self, path):
        super().__init__(f'locales directory not found: {path}')
        self.path = path


class DictionaryLoadError(TranslatorError, OSError):
    """A directory under the locales root could not be listed."""

    def __init__(self, path, reason: str):
        super().__init__(f'cannot list {path}: {reason}')
        self.path = path
