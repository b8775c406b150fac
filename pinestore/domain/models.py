from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogEntity(BaseModel):
    """
    Base class for every normalized Pinestore entity.
    Entities are immutable and serialize to camelCase with model_dump(by_alias=True).
    Values are taken as decoded from JSON; strict mode leaves them uncoerced.
    """
    model_config = ConfigDict(frozen=True, strict=True, alias_generator=to_camel, populate_by_name=True)


class Project(CatalogEntity):
    """A published catalog entry."""

    id: int = Field(..., ge=0, description="Numeric project id")
    date_added: int
    date_updated: int
    date_release: int
    date_publish: int
    owner_discord: str = Field(..., description="Discord id of the owning user")
    owner_name: str
    name: str
    install_command: str
    download_url: Optional[str] = None
    target_file: str
    tags: List[str] = Field(default_factory=list)
    repository: str
    description_short: str
    description: str
    description_markdown: str
    has_thumbnail: bool
    hide_thumbnail: bool
    media_count: int
    keywords: List[str] = Field(default_factory=list)
    downloads: int
    downloads_recent: int
    views: int
    views_recent: int
    likes: int
    visible: bool


class Comment(CatalogEntity):
    """
    A remark on a project. reply_id points at another comment of the same
    project and is not checked client-side.
    """

    id: int = Field(..., ge=0)
    project_id: int = Field(..., ge=0)
    reply_id: Optional[int] = Field(None, ge=0)
    user_discord: str
    user_name: str
    number: int
    body: str


class Changelog(CatalogEntity):
    project_id: int = Field(..., ge=0)
    number: int
    body: str


class UserConnection(CatalogEntity):
    """External identity link shown on a user profile."""

    id: str
    display: str
    link: str


class User(CatalogEntity):
    discord_id: str = Field(..., description="Primary key of the account")
    joined_on: int
    name: str
    about: str
    about_markdown: Optional[str] = None
    # Display order from the service is kept.
    connections: List[UserConnection] = Field(default_factory=list)
