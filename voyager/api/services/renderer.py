from pathlib import Path
from typing import Any, Dict
from jinja2 import Environment, FileSystemLoader, select_autoescape
import structlog
from .introspection import build_introspection
from .models import InlineIntrospection, VoyagerConfig

logger = structlog.get_logger()

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

JSON_CONTENT_TYPE = {"Content-Type": "application/json"}


def merge_headers(extra: Dict[str, str]) -> Dict[str, str]:
    # Header names are case-insensitive; a configured content type replaces ours
    if any(key.lower() == "content-type" for key in extra):
        return dict(extra)
    return {**JSON_CONTENT_TYPE, **extra}


class VoyagerRenderer:
    """Renders the Voyager HTML page for one fixed configuration.

    Every value embedded in the page script goes through Jinja's ``tojson``
    filter, which escapes ``<``, ``>``, ``&`` and ``'`` so user data can never
    close the surrounding ``<script>`` tag. The output is not cached: each
    call rebuilds the page from the configuration.
    """

    def __init__(self, config: VoyagerConfig):
        self.config = config
        self._env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Keep insertion order so display options come out as given
        self._env.policies["json.dumps_kwargs"] = {"sort_keys": False}
        self._template = self._env.get_template("voyager.html")

    def _script_context(self) -> Dict[str, Any]:
        source = self.config.graphql
        if isinstance(source, InlineIntrospection):
            return {"introspection": {"data": build_introspection(source.graphql_schema)}}
        return {
            "url": source.url,
            "headers": merge_headers(source.headers),
            "credentials": source.credentials,
        }

    def render(self) -> str:
        html = self._template.render(
            title=self.config.title,
            cdn=self.config.cdn,
            mode=self.config.mode,
            init_options=self.config.voyager.to_init_options(),
            **self._script_context(),
        )
        logger.debug("voyager.render", path=self.config.path, mode=self.config.mode, bytes=len(html))
        return html


def render_voyager(config: VoyagerConfig) -> str:
    return VoyagerRenderer(config).render()
