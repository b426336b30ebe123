from pydantic import BaseModel


class TranslationOut(BaseModel):
    key: str
    locale: str
    value: str
    found: bool


class LocalesOut(BaseModel):
    default_locale: str
    locales: list[str]
