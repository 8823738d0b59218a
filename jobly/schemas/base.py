"""
Shared Schema Configuration

Public API fields are camelCase; Python attributes stay snake_case.
"""

from typing import Annotated
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing to and accepting camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def public_dict(self, exclude_unset: bool = False) -> dict:
        """Dump with public (camelCase) keys, as stored in the field registries."""
        return self.model_dump(by_alias=True, exclude_unset=exclude_unset)


class RequestModel(CamelModel):
    """Base model for request bodies; unknown fields are rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )


def validate_url(value: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("must be an http(s) URL")
    return value


UrlStr = Annotated[str, AfterValidator(validate_url)]
