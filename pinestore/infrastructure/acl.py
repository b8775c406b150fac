from typing import Any, Callable, List, TypeVar

from pinestore.domain.models import Changelog, Comment, Project, User, UserConnection
from pinestore.infrastructure.dto import ChangelogDTO, CommentDTO, ProjectDTO, UserConnectionDTO, UserDTO

T = TypeVar("T")


class PinestoreTranslator:
    """
    Anti-corruption layer that translates raw Pinestore JSON records into domain entities.

    Records are read by key without defaults: a record missing a field raises
    KeyError, a wrongly typed value raises pydantic's ValidationError.
    """

    @staticmethod
    def project_to_domain(raw: ProjectDTO) -> Project:
        """
        Transforms a raw project record into a Project.

        Args:
            raw (ProjectDTO): The decoded JSON object from the API.

        Returns:
            Project: The normalized project.
        """
        return Project(
            id=raw['id'],
            date_added=raw['date_added'],
            date_updated=raw['date_updated'],
            date_release=raw['date_release'],
            date_publish=raw['date_publish'],
            owner_discord=raw['owner_discord'],
            owner_name=raw['owner_name'],
            name=raw['name'],
            install_command=raw['install_command'],
            download_url=raw['download_url'],
            target_file=raw['target_file'],
            tags=list(raw['tags']),
            repository=raw['repository'],
            description_short=raw['description_short'],
            description=raw['description'],
            description_markdown=raw['description_markdown'],
            has_thumbnail=raw['has_thumbnail'],
            hide_thumbnail=raw['hide_thumbnail'],
            media_count=raw['media_count'],
            keywords=list(raw['keywords']),
            downloads=raw['downloads'],
            downloads_recent=raw['downloads_recent'],
            views=raw['views'],
            views_recent=raw['views_recent'],
            likes=raw['likes'],
            visible=raw['visible'],
        )

    @staticmethod
    def comment_to_domain(raw: CommentDTO) -> Comment:
        return Comment(
            id=raw['id'],
            project_id=raw['project_id'],
            reply_id=raw['reply_id'],
            user_discord=raw['user_discord'],
            user_name=raw['user_name'],
            number=raw['number'],
            body=raw['body'],
        )

    @staticmethod
    def changelog_to_domain(raw: ChangelogDTO) -> Changelog:
        return Changelog(
            project_id=raw['project_id'],
            number=raw['number'],
            body=raw['body'],
        )

    @staticmethod
    def user_connection_to_domain(raw: UserConnectionDTO) -> UserConnection:
        return UserConnection(id=raw['id'], display=raw['display'], link=raw['link'])

    @staticmethod
    def user_to_domain(raw: UserDTO) -> User:
        """
        Transforms a raw user record into a User, converting each connection in wire order.
        """
        return User(
            discord_id=raw['discord_id'],
            joined_on=raw['joined_on'],
            name=raw['name'],
            about=raw['about'],
            about_markdown=raw['about_markdown'],
            connections=[
                PinestoreTranslator.user_connection_to_domain(connection)
                for connection in raw['connections']
            ],
        )

    @staticmethod
    def many(convert: Callable[[Any], T]) -> Callable[[List[Any]], List[T]]:
        """Lifts a single-record conversion over a JSON array."""
        def convert_all(raw_records: List[Any]) -> List[T]:
            return [convert(raw) for raw in raw_records]
        return convert_all
