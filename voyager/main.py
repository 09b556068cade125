import time
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from voyager.api.routes.voyager import register_voyager
from voyager.api.services.models import VoyagerConfig
from voyager.api.services.settings import get_config
import structlog

logger = structlog.get_logger()


def create_app(config: Optional[VoyagerConfig] = None) -> FastAPI:
    app = FastAPI(title="GraphQL Voyager")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Performance middleware
    @app.middleware("http")
    async def add_process_time_header(request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = (time.perf_counter() - start_time) * 1000
        response.headers["X-Process-Time"] = str(int(process_time))
        logger.info("request", path=str(request.url.path), method=request.method, ms=int(process_time))
        return response

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    register_voyager(app, config or get_config())
    return app


app = create_app()


# Uvicorn entrypoint: uvicorn voyager.main:app --reload
