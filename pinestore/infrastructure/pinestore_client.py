import logging
from typing import Any, List, Optional, TypeVar

import aiohttp

from pinestore.domain.exceptions import RequestFailure
from pinestore.domain.models import Changelog, Comment, Project, User
from pinestore.infrastructure import routes
from pinestore.infrastructure.config import ClientConfig
from pinestore.infrastructure.routes import ApiRoute

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")


class PinestoreClient:
    """
    Client for the Pinestore catalog API.
    Every public method issues exactly one GET request and returns normalized entities.

    Without a session, each call opens and closes its own aiohttp session.
    Using the client as an async context manager shares one session across calls.
    """

    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[aiohttp.ClientSession] = None):
        self.config = config or ClientConfig()
        self._session = session
        self._owns_session = False

    async def __aenter__(self) -> "PinestoreClient":
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
            self._owns_session = False
        return False

    def build_url(self, route: ApiRoute, *args: Any) -> str:
        return self.config.base_url + route.url(*args)

    async def request(self, route: ApiRoute[ResultT], *args: Any) -> ResultT:
        """
        Executes a single route against the configured origin.

        Args:
            route (ApiRoute): The registry entry to call.
            *args: Arguments for the route's URL builder.

        Returns:
            The route's transform applied to the decoded JSON, or the JSON itself
            when the route declares no transform.

        Raises:
            RequestFailure: If the API answers with a non-2xx status.
        """
        url = self.build_url(route, *args)

        if self._session is not None:
            return await self._execute(self._session, route, url)

        async with aiohttp.ClientSession() as session:
            return await self._execute(session, route, url)

    async def _execute(self, session: aiohttp.ClientSession, route: ApiRoute[ResultT], url: str) -> ResultT:
        logger.debug(f"{route.method} {url}")

        async with session.request(route.method, url, headers=dict(self.config.headers)) as response:
            if not 200 <= response.status < 300:
                error_body = await response.text()
                logger.warning(f"Pinestore request to {url} returned status {response.status}.")
                raise RequestFailure(url=url, status=response.status, body=error_body)

            # The service does not always label its JSON, so skip aiohttp's content-type check.
            data = await response.json(content_type=None)

        if route.transform is not None:
            return route.transform(data)
        return data

    async def fetch_project(self, project_id: int) -> Project:
        return await self.request(routes.FETCH_PROJECT, project_id)

    async def fetch_comments(self, project_id: int) -> List[Comment]:
        return await self.request(routes.FETCH_COMMENTS, project_id)

    async def fetch_changelog(self, project_id: int) -> Changelog:
        return await self.request(routes.FETCH_CHANGELOG, project_id)

    async def fetch_changelogs(self, project_id: int) -> List[Changelog]:
        return await self.request(routes.FETCH_CHANGELOGS, project_id)

    async def fetch_projects(self) -> List[Project]:
        return await self.request(routes.FETCH_PROJECTS)

    async def search_projects(self, query: str) -> List[Project]:
        return await self.request(routes.SEARCH_PROJECTS, query)

    async def fetch_project_by_name(self, name: str) -> Project:
        return await self.request(routes.FETCH_PROJECT_BY_NAME, name)

    async def fetch_user(self, discord_id: str) -> User:
        return await self.request(routes.FETCH_USER, discord_id)

    async def fetch_user_projects(self, discord_id: str) -> List[Project]:
        return await self.request(routes.FETCH_USER_PROJECTS, discord_id)
