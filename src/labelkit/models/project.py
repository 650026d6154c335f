"""Pydantic models for projects, connections and security tokens.

Documents written by the labeling tool use camelCase keys. Models expose
snake_case attributes and accept either form; dump with ``by_alias=True``
to get the stored form back.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from labelkit.constants import ENCRYPTED_OPTIONS_KEY


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SecurityToken(_CamelModel):
    """Named key material used to decrypt project secrets."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Unique token name")
    key: str = Field(..., repr=False, description="Base64 encoded 32-byte secret key")


class Connection(_CamelModel):
    """Storage connection descriptor."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    name: str
    provider_type: str = Field(..., description="Storage provider, e.g. 'azureBlobStorage'")
    provider_options: dict[str, Any] = Field(default_factory=dict)
    description: str | None = None

    @property
    def is_encrypted(self) -> bool:
        return ENCRYPTED_OPTIONS_KEY in self.provider_options


class Tag(_CamelModel):
    model_config = ConfigDict(extra="allow")

    name: str
    color: str
    type: str | None = None
    format: str | None = None


class ProjectReference(_CamelModel):
    """Lightweight pointer to a previously opened project.

    Entries of the recent projects list may carry the whole stored project;
    only the fields needed to locate and decrypt it are kept.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    security_token_name: str = Field(..., alias="securityToken", min_length=1)
    source_connection: Connection


class ProjectDefinition(_CamelModel):
    """Canonical project document.

    Keys this model does not know about are kept so a loaded project can be
    written back without losing data.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    version: str | None = None
    security_token_name: str = Field(..., alias="securityToken")
    description: str | None = None
    source_connection: Connection
    api_uri_base: str | None = None
    api_key: str | None = Field(default=None, repr=False)
    folder_path: str | None = None
    tags: list[Tag] = Field(default_factory=list)
    last_visited_asset_id: str | None = None

