from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Union
from graphql import GraphQLError, GraphQLSchema, build_schema
from pydantic import BaseModel, ConfigDict, Discriminator, Field, RootModel, Tag, field_validator, model_validator
from .headers import normalize_headers


def _camel_case(key: str) -> str:
    if not isinstance(key, str) or "_" not in key.strip("_"):
        return key
    head, *rest = key.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _camel_keys(options: Mapping[str, Any]) -> Dict[str, Any]:
    return {_camel_case(key): value for key, value in options.items()}


class VoyagerOptions(RootModel[Dict[str, Any]]):
    """Options handed to ``GraphQLVoyager.init`` in the browser
    (``displayOptions``, ``hideDocs``, ``hideSettings``, ...).

    Values and key order are kept exactly as given. Only snake_case keys are
    rewritten to camelCase, at the top level and inside ``displayOptions``.
    """

    model_config = ConfigDict(frozen=True)

    root: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def camel_case_keys(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        options = _camel_keys(value)
        display = options.get("displayOptions")
        if isinstance(display, Mapping):
            options["displayOptions"] = _camel_keys(display)
        return options

    def to_init_options(self) -> Dict[str, Any]:
        return dict(self.root)


class InlineIntrospection(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True, frozen=True)

    graphql_schema: GraphQLSchema = Field(..., alias="schema")

    @field_validator("graphql_schema", mode="before")
    @classmethod
    def build_from_sdl(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return build_schema(value)
            except (GraphQLError, TypeError) as e:
                raise ValueError(f"invalid schema SDL: {e}") from e
        return value


class RemoteIntrospection(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    credentials: Optional[Literal["same-origin", "include", "omit"]] = None

    @field_validator("headers", mode="before")
    @classmethod
    def normalize(cls, value: Any) -> Dict[str, str]:
        return normalize_headers(value)


def _introspection_kind(value: Any) -> str:
    if isinstance(value, Mapping):
        return "inline" if "schema" in value else "remote"
    return "inline" if isinstance(value, InlineIntrospection) else "remote"


IntrospectionSource = Annotated[
    Union[
        Annotated[InlineIntrospection, Tag("inline")],
        Annotated[RemoteIntrospection, Tag("remote")],
    ],
    Discriminator(_introspection_kind),
]


class CdnOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = "https://cdn.jsdelivr.net/npm"
    react_version: str = "18"
    voyager_version: Optional[str] = None

    @property
    def voyager_package(self) -> str:
        if self.voyager_version:
            return f"graphql-voyager@{self.voyager_version}"
        return "graphql-voyager"

    @property
    def react_js(self) -> str:
        return f"{self.base_url}/react@{self.react_version}/umd/react.production.min.js"

    @property
    def react_dom_js(self) -> str:
        return f"{self.base_url}/react-dom@{self.react_version}/umd/react-dom.production.min.js"

    @property
    def voyager_css(self) -> str:
        return f"{self.base_url}/{self.voyager_package}/dist/voyager.css"

    @property
    def voyager_js(self) -> str:
        return f"{self.base_url}/{self.voyager_package}/dist/voyager.min.js"


class VoyagerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str = Field("/voyager", description="Mount path of the Voyager page")
    graphql: IntrospectionSource = Field(default_factory=lambda: RemoteIntrospection(url="/graphql"))
    voyager: VoyagerOptions = Field(default_factory=VoyagerOptions)
    title: str = "GraphQL Voyager"
    cdn: CdnOptions = Field(default_factory=CdnOptions)

    @field_validator("path")
    @classmethod
    def check_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("path must start with '/'")
        return value

    @property
    def mode(self) -> str:
        return "inline" if isinstance(self.graphql, InlineIntrospection) else "remote"
