"""FastAPI application factory."""

import logging
from urllib.parse import quote

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response

from diet_planner.api.form import router as form_router
from diet_planner.api.models import DietPlanRequest
from diet_planner.app_logging import configure_logging
from diet_planner.containers import AppContainer
from diet_planner.domain.errors import MissingFieldsError
from diet_planner.services.plans import (
    GENERATION_FAILED_MESSAGE,
    REQUIRED_FIELDS_MESSAGE,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Diet Plan Generator")
    app.state.container = container

    app.include_router(form_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/diet-plans")
    async def create_diet_plan(payload: DietPlanRequest, request: Request) -> Response:
        """Render the posted form snapshot and return it as a download."""
        state_container: AppContainer = request.app.state.container
        plan = payload.to_domain(state_container.settings.default_trainer_name)
        try:
            generated = await state_container.diet_plan_service.generate(plan)
        except MissingFieldsError as exc:
            logger.info(
                "Rejected diet plan with missing fields",
                extra={"missing_fields": exc.missing_fields},
            )
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={
                    "detail": REQUIRED_FIELDS_MESSAGE,
                    "missing_fields": exc.missing_fields,
                },
            )
        except Exception as exc:
            logger.exception("Failed to generate diet plan")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": _format_generation_error(
                        state_container, exc, GENERATION_FAILED_MESSAGE
                    )
                },
            )
        return Response(
            content=generated.content,
            media_type="application/pdf",
            headers={"Content-Disposition": _content_disposition(generated.file_name)},
        )

    return app


def _format_generation_error(
    state_container: AppContainer, exc: Exception, fallback: str
) -> str:
    """Return a user-facing error message with local debug info."""
    if state_container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{fallback} (debug: {detail})"
    return fallback


def _content_disposition(file_name: str) -> str:
    """Build an attachment header that survives non-ASCII client names."""
    ascii_name = file_name.encode("ascii", "replace").decode("ascii").replace('"', "")
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(file_name)}"
