"""
Metadata Package Export

Builds the zip archive that is handed to the publisher for JSON manifests:
the manifest itself (as manifest.json) plus the icons it references.
"""

import zipfile
from pathlib import Path
from typing import Optional

from office_sideload.errors import ExpectedError
from office_sideload.manifest.reader import read_manifest_file
from office_sideload.utils import Logger

logger = Logger("manifest-export")


async def export_metadata_package(
    manifest_path: str | Path,
    output_path: Optional[str | Path] = None,
) -> Path:
    """
    Export a JSON manifest and its icons to a zip archive.
    
    Args:
        manifest_path: Path to the JSON manifest
        output_path: Where to write the archive (default: manifest.zip beside the manifest)
    
    Returns:
        Path to the archive
    """
    manifest_path = Path(manifest_path)
    manifest = await read_manifest_file(manifest_path)
    
    output = Path(output_path) if output_path else manifest_path.parent / "manifest.zip"
    
    icon_files = []
    for icon in manifest.icons:
        icon_path = manifest_path.parent / icon
        if not icon_path.is_file():
            raise ExpectedError(f"The icon file referenced by the manifest was not found: {icon_path}")
        icon_files.append((icon_path, icon))
    
    output.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(output, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.write(manifest_path, "manifest.json")
        for icon_path, arcname in icon_files:
            archive.write(icon_path, Path(arcname).as_posix())
    
    logger.info(f"Exported {manifest_path} to {output}")
    return output
