"""
Registry of the Pinestore API routes.

Each operation is tagged by an Operation member and described by an ApiRoute:
the HTTP method, a builder for the relative path and the transform that turns
the decoded JSON into domain entities.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Generic, List, Mapping, Optional, TypeVar
from urllib.parse import quote

from pinestore.domain.models import Changelog, Comment, Project, User
from pinestore.infrastructure.acl import PinestoreTranslator

ResultT = TypeVar("ResultT")

# Characters left alone by JavaScript's encodeURIComponent, which the service expects.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: str) -> str:
    """Percent-encodes a free-text query value ("a b" -> "a%20b")."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


class Operation(str, Enum):
    FETCH_PROJECT = "fetch_project"
    FETCH_COMMENTS = "fetch_comments"
    FETCH_CHANGELOG = "fetch_changelog"
    FETCH_CHANGELOGS = "fetch_changelogs"
    FETCH_PROJECTS = "fetch_projects"
    SEARCH_PROJECTS = "search_projects"
    FETCH_PROJECT_BY_NAME = "fetch_project_by_name"
    FETCH_USER = "fetch_user"
    FETCH_USER_PROJECTS = "fetch_user_projects"


@dataclass(frozen=True)
class ApiRoute(Generic[ResultT]):
    operation: Operation
    method: str
    url: Callable[..., str]
    transform: Optional[Callable[[Any], ResultT]] = None


FETCH_PROJECT: ApiRoute[Project] = ApiRoute(
    operation=Operation.FETCH_PROJECT,
    method="GET",
    url=lambda project_id: f"/api/projects/{project_id}",
    transform=PinestoreTranslator.project_to_domain,
)

FETCH_COMMENTS: ApiRoute[List[Comment]] = ApiRoute(
    operation=Operation.FETCH_COMMENTS,
    method="GET",
    url=lambda project_id: f"/api/projects/{project_id}/comments",
    transform=PinestoreTranslator.many(PinestoreTranslator.comment_to_domain),
)

# Single changelog entry; FETCH_CHANGELOGS lists all of them.
FETCH_CHANGELOG: ApiRoute[Changelog] = ApiRoute(
    operation=Operation.FETCH_CHANGELOG,
    method="GET",
    url=lambda project_id: f"/api/projects/{project_id}/changelog",
    transform=PinestoreTranslator.changelog_to_domain,
)

FETCH_CHANGELOGS: ApiRoute[List[Changelog]] = ApiRoute(
    operation=Operation.FETCH_CHANGELOGS,
    method="GET",
    url=lambda project_id: f"/api/projects/{project_id}/changelogs",
    transform=PinestoreTranslator.many(PinestoreTranslator.changelog_to_domain),
)

FETCH_PROJECTS: ApiRoute[List[Project]] = ApiRoute(
    operation=Operation.FETCH_PROJECTS,
    method="GET",
    url=lambda: "/api/projects",
    transform=PinestoreTranslator.many(PinestoreTranslator.project_to_domain),
)

SEARCH_PROJECTS: ApiRoute[List[Project]] = ApiRoute(
    operation=Operation.SEARCH_PROJECTS,
    method="GET",
    url=lambda query: f"/api/projects/search?q={encode_component(query)}",
    transform=PinestoreTranslator.many(PinestoreTranslator.project_to_domain),
)

FETCH_PROJECT_BY_NAME: ApiRoute[Project] = ApiRoute(
    operation=Operation.FETCH_PROJECT_BY_NAME,
    method="GET",
    url=lambda name: f"/api/projects/named/?name={encode_component(name)}",
    transform=PinestoreTranslator.project_to_domain,
)

FETCH_USER: ApiRoute[User] = ApiRoute(
    operation=Operation.FETCH_USER,
    method="GET",
    url=lambda discord_id: f"/api/users/{discord_id}",
    transform=PinestoreTranslator.user_to_domain,
)

FETCH_USER_PROJECTS: ApiRoute[List[Project]] = ApiRoute(
    operation=Operation.FETCH_USER_PROJECTS,
    method="GET",
    url=lambda discord_id: f"/api/users/{discord_id}/projects",
    transform=PinestoreTranslator.many(PinestoreTranslator.project_to_domain),
)

ROUTES: Mapping[Operation, ApiRoute] = MappingProxyType({
    route.operation: route
    for route in (
        FETCH_PROJECT,
        FETCH_COMMENTS,
        FETCH_CHANGELOG,
        FETCH_CHANGELOGS,
        FETCH_PROJECTS,
        SEARCH_PROJECTS,
        FETCH_PROJECT_BY_NAME,
        FETCH_USER,
        FETCH_USER_PROJECTS,
    )
})
