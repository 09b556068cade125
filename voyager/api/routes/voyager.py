from typing import Any, Mapping, Optional, Union
from fastapi import APIRouter, FastAPI
from fastapi.responses import HTMLResponse
import structlog
from ..services.models import VoyagerConfig
from ..services.renderer import VoyagerRenderer

logger = structlog.get_logger()

ConfigInput = Union[VoyagerConfig, Mapping[str, Any], None]


def _coerce_config(config: ConfigInput, options: Mapping[str, Any]) -> VoyagerConfig:
    if isinstance(config, VoyagerConfig):
        if options:
            raise TypeError("pass either a VoyagerConfig or keyword options, not both")
        return config
    return VoyagerConfig.model_validate({**(config or {}), **options})


def make_voyager_handler(config: VoyagerConfig):
    """Return a GET endpoint serving the Voyager page for ``config``.

    The request itself is never inspected; the page only depends on the
    configuration captured here.
    """
    renderer = VoyagerRenderer(config)

    async def voyager_page() -> HTMLResponse:
        return HTMLResponse(renderer.render())

    return voyager_page


def register_voyager(app: Union[FastAPI, APIRouter], config: ConfigInput = None, **options: Any) -> None:
    cfg = _coerce_config(config, options)
    app.add_api_route(
        cfg.path,
        make_voyager_handler(cfg),
        methods=["GET"],
        response_class=HTMLResponse,
        include_in_schema=False,
        name="voyager",
    )
    logger.info("voyager.registered", path=cfg.path, mode=cfg.mode)


def create_voyager_router(config: ConfigInput = None, **options: Any) -> APIRouter:
    router = APIRouter()
    register_voyager(router, config, **options)
    return router
