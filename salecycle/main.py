from fastapi import FastAPI, Request
from salecycle.api.routes import api_router, health
from salecycle.core.config import SaleCycleConfig, settings
from salecycle.core.logging import configure_logging
from salecycle.core.request_context import resolve_session_id, session_id_var

SESSION_HEADER = "X-Session-Id"

def create_app(config: SaleCycleConfig | None = None) -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="SaleCycle Tag API",
        version="0.1.0",
        openapi_url="/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # Built once; read-only for the life of the process
    app.state.salecycle_config = config or SaleCycleConfig.from_settings(
        settings, session_resolver=resolve_session_id
    )

    @app.middleware("http")
    async def bind_session_id(request: Request, call_next):
        session_id = request.cookies.get(settings.SALECYCLE_SESSION_COOKIE) or request.headers.get(SESSION_HEADER)
        token = session_id_var.set(session_id)
        try:
            return await call_next(request)
        finally:
            session_id_var.reset(token)

    app.include_router(health.router)
    app.include_router(api_router, prefix="/api/v1")
    return app

app = create_app()
