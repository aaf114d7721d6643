"""
Publish

Uploads an exported add-in package to the configured add-in catalog.
"""

from pathlib import Path
from typing import Any, Optional

import httpx

from office_sideload.config import Config, ConfigManager, get_publish_url
from office_sideload.utils import Logger

logger = Logger("publish")


async def publish(
    archive_path: str | Path,
    *,
    config: Optional[Config] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> dict[str, Any]:
    """
    Publish an add-in package.
    
    Args:
        archive_path: Zip produced by export_metadata_package
        config: Settings to use (default: ConfigManager's current config)
        client: HTTP client to reuse; one is created (and closed) if omitted
    
    Returns:
        The JSON body returned by the catalog ({} if empty)
    
    Raises:
        ValueError: no publish URL is configured
        httpx.HTTPStatusError: the catalog rejected the package
    """
    config = config or ConfigManager.get_instance().get()
    publish_url = config.publish_url.rstrip("/") if config.can_publish else get_publish_url()
    
    archive_path = Path(archive_path)
    url = f"{publish_url}/addins"
    headers = {"Accept": "application/json"}
    if config.publish_token:
        headers["Authorization"] = f"Bearer {config.publish_token}"
    
    logger.info(f"Publishing {archive_path.name} to {url}")
    
    files = {"file": (archive_path.name, archive_path.read_bytes(), "application/zip")}
    if client is not None:
        response = await client.post(url, files=files, headers=headers)
    else:
        async with httpx.AsyncClient(timeout=config.publish_timeout) as owned_client:
            response = await owned_client.post(url, files=files, headers=headers)
    
    response.raise_for_status()
    logger.info(f"Published {archive_path.name} ({response.status_code})")
    
    if not response.content:
        return {}
    return response.json()
