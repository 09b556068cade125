import os
from pathlib import Path
from typing import Any, Dict, Optional, Union
import structlog
import yaml
from .models import VoyagerConfig

logger = structlog.get_logger()

DEFAULT_CONFIG_FILE = "voyager.yml"


def _read_yaml(cfg_path: Path) -> Dict[str, Any]:
    if cfg_path.exists():
        with open(cfg_path, "r") as f:
            cfg = yaml.safe_load(f) or {}
        if not isinstance(cfg, dict):
            raise ValueError(f"{cfg_path}: top level must be a mapping, got {type(cfg).__name__}")
        return cfg
    return {}


def load_config(path: Optional[Union[str, Path]] = None) -> VoyagerConfig:
    """Build a VoyagerConfig from YAML plus environment overrides.

    ``graphql.schema_file`` names an SDL file (relative to the config file)
    to serve as the inline schema. ``VOYAGER_PATH`` overrides the mount path
    and ``VOYAGER_GRAPHQL_URL`` switches to remote introspection against that
    URL. A missing file yields the defaults.
    """
    cfg_path = Path(path or os.getenv("VOYAGER_CONFIG", DEFAULT_CONFIG_FILE))
    cfg = _read_yaml(cfg_path)

    graphql = cfg.get("graphql") or {}
    if not isinstance(graphql, dict):
        raise ValueError(f"{cfg_path}: graphql section must be a mapping")
    graphql = dict(graphql)
    schema_file = graphql.pop("schema_file", None)
    if schema_file:
        sdl_path = Path(schema_file)
        if not sdl_path.is_absolute():
            sdl_path = cfg_path.parent / sdl_path
        graphql["schema"] = sdl_path.read_text(encoding="utf-8")

    # Env overrides
    mount_path = os.getenv("VOYAGER_PATH")
    if mount_path:
        cfg["path"] = mount_path
    graphql_url = os.getenv("VOYAGER_GRAPHQL_URL")
    if graphql_url:
        graphql.pop("schema", None)
        graphql["url"] = graphql_url

    if graphql:
        cfg["graphql"] = graphql
    else:
        cfg.pop("graphql", None)

    config = VoyagerConfig.model_validate(cfg)
    logger.info("voyager.config_loaded", source=str(cfg_path), found=cfg_path.exists(), mode=config.mode)
    return config


_config: Optional[VoyagerConfig] = None


def get_config() -> VoyagerConfig:
    global _config
    if _config is None:
        _config = load_config()
    return _config
