"""
Add-in Registration

Registers, lists and unregisters sideloaded add-ins. The sideload
directories are the only state: an add-in is registered for an app when its
manifest (or a hard link to it named <id>.<manifest file name>) sits in
that app's sideload directory.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, Sequence

from office_sideload.errors import ExpectedError, RegistrationError, RegistrationErrorKind
from office_sideload.manifest.apps import (
    OfficeApp,
    get_office_app_name,
    get_office_apps,
    get_office_apps_for_manifest_hosts,
)
from office_sideload.manifest.export import export_metadata_package
from office_sideload.manifest.reader import is_json_manifest, is_xml_manifest, read_manifest_file
from office_sideload.publish import publish
from office_sideload.sideload.directories import (
    DirectoryLister,
    LocalDirectoryLister,
    get_sideload_directory,
    list_sideload_files,
)
from office_sideload.utils import Logger

logger = Logger("sideload-registration")

Exporter = Callable[[Path], Awaitable[Path]]
Publisher = Callable[[Path], Awaitable[Any]]

NO_HOSTS_MESSAGE = "The manifest file doesn't specify any hosts for the Office Add-in."
NO_ID_MESSAGE = "The manifest file doesn't contain the id of the Office Add-in."


@dataclass
class RegisteredAddin:
    """An add-in found in a sideload directory."""
    id: str
    manifest_path: str


def get_sideload_file_name(manifest_id: str, manifest_path: str | Path) -> str:
    """Name of the link created for a manifest: <id>.<manifest file name>."""
    return f"{manifest_id}.{Path(manifest_path).name}"


async def get_registered_addins(lister: Optional[DirectoryLister] = None) -> list[RegisteredAddin]:
    """
    List the add-ins registered for every Office app.

    Symlinks are resolved to the file they point to. A manifest that fails
    to parse raises ManifestError.
    """
    lister = lister or LocalDirectoryLister()
    registered_addins: list[RegisteredAddin] = []

    for app in get_office_apps():
        sideload_directory = get_sideload_directory(app)

        if sideload_directory is None or not lister.exists(sideload_directory):
            continue

        for file_name in list_sideload_files(sideload_directory, lister):
            manifest_path = os.path.realpath(sideload_directory / file_name)
            manifest = await read_manifest_file(manifest_path)
            registered_addins.append(RegisteredAddin(manifest.id or "", manifest_path))

    return registered_addins


async def register_addin(
    manifest_path: str | Path,
    office_apps: Optional[Sequence[OfficeApp]] = None,
    *,
    exporter: Optional[Exporter] = None,
    publisher: Optional[Publisher] = None,
) -> Any:
    """
    Register an add-in.

    XML manifests are hard-linked into the sideload directory of each app.
    JSON manifests are exported to a package and published instead.

    Args:
        manifest_path: Path to the manifest
        office_apps: Apps to register for (default: the hosts the manifest declares)
        exporter: Builds the package for a JSON manifest (default: export_metadata_package)
        publisher: Publishes that package (default: publish)

    Returns:
        The publisher's result for JSON manifests, otherwise None

    Raises:
        RegistrationError: for any failure; `kind` tells which stage failed
    """
    manifest_path = Path(manifest_path)
    kind = RegistrationErrorKind.INPUT

    try:
        manifest = await read_manifest_file(manifest_path)

        if office_apps is None:
            office_apps = get_office_apps_for_manifest_hosts(manifest.hosts)

            if not office_apps:
                raise ExpectedError(NO_HOSTS_MESSAGE)

        if not manifest.id:
            raise ExpectedError(NO_ID_MESSAGE)

        if is_json_manifest(manifest_path):
            kind = RegistrationErrorKind.PUBLISH
            package_path = await (exporter or export_metadata_package)(manifest_path)
            return await (publisher or publish)(package_path)

        if is_xml_manifest(manifest_path):
            kind = RegistrationErrorKind.LINK
            for app in office_apps:
                _link_manifest(manifest_path, manifest.id, app)
        else:
            logger.warning(f"Not registering {manifest_path}: manifest must be a .xml or .json file")
    except Exception as err:
        raise RegistrationError(kind, err) from err

    return None


def _link_manifest(manifest_path: Path, manifest_id: str, app: OfficeApp) -> None:
    sideload_directory = get_sideload_directory(app)

    if sideload_directory is None:
        logger.debug(f"{get_office_app_name(app)} has no sideload directory, skipping")
        return

    # include manifest id in sideload filename
    sideload_path = sideload_directory / get_sideload_file_name(manifest_id, manifest_path)

    sideload_directory.mkdir(parents=True, exist_ok=True)
    # a different file under the same name makes os.link raise FileExistsError
    if os.path.exists(sideload_path) and os.path.samefile(manifest_path, sideload_path):
        logger.debug(f"Already registered for {get_office_app_name(app)}: {sideload_path}")
        return

    os.link(manifest_path, sideload_path)
    logger.info(f"Registered for {get_office_app_name(app)}: {sideload_path}")


async def unregister_addin(
    manifest_path: str | Path,
    lister: Optional[DirectoryLister] = None,
) -> list[str]:
    """
    Unregister an add-in from every Office app.

    A registered file matches when its name is the manifest's file name or
    <id>.<manifest file name>.

    Returns:
        Paths of the files that were removed
    """
    manifest = await read_manifest_file(manifest_path)

    if not manifest.id:
        raise ExpectedError(NO_ID_MESSAGE)

    manifest_file_name = Path(manifest_path).name
    sideload_file_name = get_sideload_file_name(manifest.id, manifest_path)
    removed: list[str] = []

    for registered_addin in await get_registered_addins(lister):
        registered_file_name = Path(registered_addin.manifest_path).name
        if registered_file_name in (manifest_file_name, sideload_file_name):
            os.unlink(registered_addin.manifest_path)
            logger.info(f"Unregistered {registered_addin.manifest_path}")
            removed.append(registered_addin.manifest_path)

    return removed


async def unregister_all_addins(lister: Optional[DirectoryLister] = None) -> list[str]:
    """Unregister every sideloaded add-in. Returns the removed paths."""
    removed: list[str] = []

    for registered_addin in await get_registered_addins(lister):
        os.unlink(registered_addin.manifest_path)
        logger.info(f"Unregistered {registered_addin.manifest_path}")
        removed.append(registered_addin.manifest_path)

    return removed
