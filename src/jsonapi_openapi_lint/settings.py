from typing import Annotated

from pydantic import AfterValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jsonapi_openapi_lint.plumbing.definitions import DEFAULT_DEFINITIONS_PREFIX


def validate_definitions_prefix(v: str) -> str:
    if not v.startswith("#/"):
        raise ValueError(f"Must be a local pointer prefix starting with '#/', got: {v!r}")
    return v


DefinitionsPrefix = Annotated[str, AfterValidator(validate_definitions_prefix)]


class ResolverSettings(BaseSettings):
    """Options for $ref resolution, overridable via JSONAPI_LINT_* environment variables."""

    definitions_prefix: DefinitionsPrefix = Field(default=DEFAULT_DEFINITIONS_PREFIX, description="Pointer prefix of the shared definitions area")
    prune_definitions: bool = Field(default=True, description="Delete inlined shared definitions from the root document while resolving")
    merge_siblings: bool = Field(default=False, description="Deep-merge keys next to $ref into the referenced value")

    model_config = SettingsConfigDict(env_prefix="JSONAPI_LINT_")
