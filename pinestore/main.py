import asyncio
import os
import sys
import logging
from dotenv import load_dotenv

from pinestore.infrastructure.config import ClientConfig, DEFAULT_BASE_URL
from pinestore.infrastructure.pinestore_client import PinestoreClient
from pinestore.application.catalog_service import CatalogService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)

async def main():
    # Load environment variables from .env file
    load_dotenv()

    base_url = os.getenv("PINESTORE_BASE_URL", DEFAULT_BASE_URL)
    project_id = os.getenv("PINESTORE_PROJECT_ID")

    if not project_id or not project_id.isdigit():
        logger.error("PINESTORE_PROJECT_ID must be set to a numeric project id.")
        sys.exit(1)

    config = ClientConfig(base_url=base_url)

    try:
        async with PinestoreClient(config=config) as client:
            overview = await CatalogService(client).project_overview(int(project_id))
    except Exception as e:
        logger.exception(f"Failed to load project {project_id}: {e}")
        sys.exit(1)

    project = overview.project
    logger.info(f"{project.name} by {project.owner_name}: {project.description_short}")
    logger.info(f"Install: {project.install_command}")
    logger.info(f"Downloads: {project.downloads}, views: {project.views}, likes: {project.likes}")
    for changelog in overview.changelogs:
        logger.info(f"Changelog #{changelog.number}: {changelog.body}")

if __name__ == "__main__":
    asyncio.run(main())
