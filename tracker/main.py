import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from tracker.core import config
from tracker.core.errors import TrackerError
from tracker.database import create_schema
from tracker.routes import assignment_routes, auth_routes, envelope, exam_routes, subject_routes
from tracker.schemas.common import format_validation_errors

app = FastAPI(title='Assignment Tracker API', version=config.APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    try:
        create_schema()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')


@app.exception_handler(TrackerError)
async def handle_tracker_error(request: Request, exc: TrackerError):
    return envelope.failure(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return envelope.failure(format_validation_errors(exc.errors()), status.HTTP_400_BAD_REQUEST)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    return envelope.failure(str(exc.detail), exc.status_code)


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception('Unhandled error on %s %s', request.method, request.url.path)
    return envelope.failure('Something went wrong!', status.HTTP_500_INTERNAL_SERVER_ERROR)


@app.get('/')
def root():
    return {'message': 'Welcome to Assignment Tracker API', 'version': config.APP_VERSION}


app.include_router(auth_routes.router, prefix=f'{config.API_PREFIX}/auth')
app.include_router(subject_routes.router, prefix=f'{config.API_PREFIX}/subjects')
app.include_router(assignment_routes.router, prefix=f'{config.API_PREFIX}/assignments')
app.include_router(exam_routes.router, prefix=f'{config.API_PREFIX}/exams')
