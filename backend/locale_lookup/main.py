import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.routes import translate
from .core.config import settings
from .i18n import Translator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Dictionaries are loaded once; a bad LOCALES_DIR fails startup.
    translator = Translator(settings.LOCALES_DIR, settings.DEFAULT_LOCALE)
    if settings.DUMP_DICTIONARIES:
        translator.dump_loaded_dictionaries()
    app.state.translator = translator
    yield


app = FastAPI(title='Locale Lookup', lifespan=lifespan)

# Routers
app.include_router(translate.router, tags=['translate'])


@app.middleware('http')
async def add_locale_header(request: Request, call_next):
    translator: Translator = request.app.state.translator
    locale = translator.resolve_locale(request.headers.get('Accept-Language', ''))
    request.state.locale = locale
    response = await call_next(request)
    response.headers['Content-Language'] = locale
    return response


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception('Unhandled error on %s', request.url.path)
    translator: Translator = request.app.state.translator
    msg, found = translator.translate(
        request.headers.get('Accept-Language', ''), 'ERROR_INTERNAL'
    )
    if not found:
        msg = 'Internal Server Error'
    return JSONResponse(status_code=500, content={'detail': msg})


@app.get('/health', tags=['meta'])
async def health():
    return {'status': 'ok'}
