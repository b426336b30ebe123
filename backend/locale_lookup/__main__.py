import uvicorn

from .core.config import settings
from .core.logging import setup_logging


def main():
    setup_logging(settings.LOG_LEVEL)
    uvicorn.run(
        'locale_lookup.main:app',
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == '__main__':
    main()
