import asyncio
import logging
from typing import Any, Awaitable, List

from pydantic import BaseModel, ConfigDict

from pinestore.domain.models import Changelog, Comment, Project, User
from pinestore.infrastructure.pinestore_client import PinestoreClient

logger = logging.getLogger(__name__)


class ProjectOverview(BaseModel):
    model_config = ConfigDict(frozen=True)

    project: Project
    comments: List[Comment]
    changelogs: List[Changelog]


class UserProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: User
    projects: List[Project]


class CatalogService:
    """
    Service that combines several independent catalog calls into one view.
    The calls run concurrently. Every call is awaited before the first failure
    is re-raised, so no request outlives the method.
    """

    def __init__(self, client: PinestoreClient):
        self.client = client

    @staticmethod
    async def _gather_all(*calls: Awaitable[Any]) -> List[Any]:
        results = await asyncio.gather(*calls, return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                logger.error(f"Catalog call failed: {result}")
                raise result
        return results

    async def project_overview(self, project_id: int) -> ProjectOverview:
        """Fetches a project together with its comments and changelogs."""
        project, comments, changelogs = await self._gather_all(
            self.client.fetch_project(project_id),
            self.client.fetch_comments(project_id),
            self.client.fetch_changelogs(project_id),
        )
        logger.info(
            f"Loaded project {project.id} '{project.name}' "
            f"with {len(comments)} comments and {len(changelogs)} changelogs."
        )
        return ProjectOverview(project=project, comments=comments, changelogs=changelogs)

    async def user_profile(self, discord_id: str) -> UserProfile:
        user, projects = await self._gather_all(
            self.client.fetch_user(discord_id),
            self.client.fetch_user_projects(discord_id),
        )
        logger.info(f"Loaded user {user.discord_id} with {len(projects)} projects.")
        return UserProfile(user=user, projects=projects)
