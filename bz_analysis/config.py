"""Configuration for the Bugzilla analysis run."""

import os

from pydantic import BaseModel, Field

from .analysis.graph import ROOT_ALIAS
from .bugzilla_client.client import DEFAULT_BASE_URL
from .bugzilla_client.query import BugQuery

DEFAULT_PRODUCT = "Core"
DEFAULT_COMPONENT = "Graphics: WebRender"
DEFAULT_RANK_FIELD = "cf_rank"


class AnalysisConfig(BaseModel):
    """Where to fetch bugs from and how to recognise the root tracker."""

    base_url: str = Field(DEFAULT_BASE_URL, description="Bugzilla instance root URL")
    product: str = Field(DEFAULT_PRODUCT, description="Bugzilla product to query")
    component: str | None = Field(
        DEFAULT_COMPONENT, description="Component to query, None for the whole product"
    )
    root_alias: str = Field(ROOT_ALIAS, description="Alias of the root tracker bug")
    rank_field: str | None = Field(
        DEFAULT_RANK_FIELD, description="Bug field holding the project rank"
    )
    api_key: str | None = Field(None, description="Bugzilla API key")
    timeout: float = Field(60.0, description="HTTP timeout in seconds")

    @classmethod
    def from_env(cls, **overrides: object) -> "AnalysisConfig":
        """Load configuration from environment variables.

        Explicit overrides win over the environment; overrides set to None
        are ignored so unset CLI options fall through to the environment.
        """
        values: dict[str, object] = {}
        env_map = {
            "base_url": "BUGZILLA_URL",
            "product": "BUGZILLA_PRODUCT",
            "component": "BUGZILLA_COMPONENT",
            "root_alias": "BUGZILLA_ROOT_ALIAS",
            "rank_field": "BUGZILLA_RANK_FIELD",
            "api_key": "BUGZILLA_API_KEY",
            "timeout": "BUGZILLA_TIMEOUT",
        }
        for field, env_var in env_map.items():
            value = os.getenv(env_var)
            if value is not None:
                values[field] = value

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)

    def to_query(self) -> BugQuery:
        """Query selecting the open bugs of the configured product/component."""
        return BugQuery(
            product=self.product,
            component=self.component or None,
            rank_field=self.rank_field or None,
        )
