"""
Wire record shapes returned by the Pinestore API.
Field names match the service's JSON exactly.
"""
from typing import List, Optional, TypedDict


class ProjectDTO(TypedDict):
    id: int
    date_added: int
    date_updated: int
    date_release: int
    date_publish: int
    owner_discord: str
    owner_name: str
    name: str
    install_command: str
    download_url: Optional[str]
    target_file: str
    tags: List[str]
    repository: str
    description_short: str
    description: str
    description_markdown: str
    has_thumbnail: bool
    hide_thumbnail: bool
    media_count: int
    keywords: List[str]
    downloads: int
    downloads_recent: int
    views: int
    views_recent: int
    likes: int
    visible: bool


class CommentDTO(TypedDict):
    id: int
    project_id: int
    reply_id: Optional[int]
    user_discord: str
    user_name: str
    number: int
    body: str


class ChangelogDTO(TypedDict):
    project_id: int
    number: int
    body: str


class UserConnectionDTO(TypedDict):
    id: str
    display: str
    link: str


class UserDTO(TypedDict):
    discord_id: str
    joined_on: int
    name: str
    about: str
    about_markdown: Optional[str]
    connections: List[UserConnectionDTO]
