import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import Settings
from .errors import AnalysisError, InterpretationError, MissingInput, UploadTooLarge
from .replicate import InferenceClient, ReplicateClient
from .schemas import AnalysisResult
from .service import analyze_resume

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome to the Resume Analysis API"


def get_inference_client(request: Request) -> InferenceClient:
    return request.app.state.inference_client


def create_app(
    settings: Optional[Settings] = None,
    inference_client: Optional[InferenceClient] = None,
) -> FastAPI:
    """Build the API.

    When no ``inference_client`` is given, a ``ReplicateClient`` is created
    on startup from ``settings`` and closed on shutdown.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = None
        if getattr(app.state, "inference_client", None) is None:
            owned = ReplicateClient.from_settings(settings)
            app.state.inference_client = owned
        try:
            yield
        finally:
            if owned is not None:
                await owned.aclose()
                app.state.inference_client = None

    app = FastAPI(title="Resume Analyzer", lifespan=lifespan)
    app.state.settings = settings
    app.state.inference_client = inference_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Exception handlers
    # -----------------------------------------------------------------------

    @app.exception_handler(AnalysisError)
    async def analysis_error_handler(request: Request, exc: AnalysisError):
        """Return the public message only; the detail stays in the logs."""
        if exc.status_code >= 500 and not isinstance(exc, InterpretationError):
            logger.error("Error analyzing resume: %s", exc, exc_info=exc.__cause__)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.public_message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # The only request input is the `resume` file; anything else sent
        # in its place counts as no file.
        logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
        return await analysis_error_handler(request, MissingInput(str(exc)))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"error": AnalysisError.public_message},
        )

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------

    @app.get("/", response_class=PlainTextResponse)
    async def index():
        return WELCOME_TEXT

    @app.post("/analyze", response_model=AnalysisResult)
    async def analyze(
        resume: Optional[UploadFile] = File(None),
        client: InferenceClient = Depends(get_inference_client),
    ):
        if resume is None:
            raise MissingInput("Request has no 'resume' file")

        pdf_bytes = await resume.read()

        if not pdf_bytes:
            raise MissingInput("Uploaded 'resume' file is empty")

        if len(pdf_bytes) > settings.max_upload_bytes:
            raise UploadTooLarge(settings.max_upload_mb)

        logger.info(
            "Analyzing %s (%d bytes)", resume.filename or "<unnamed>", len(pdf_bytes)
        )

        try:
            return await analyze_resume(pdf_bytes, client)
        except AnalysisError:
            raise
        except Exception as exc:
            raise AnalysisError(f"Unexpected error: {exc}") from exc

    return app


app = create_app()


def run() -> None:
    settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Backend running on http://localhost:%d", settings.port)

    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
