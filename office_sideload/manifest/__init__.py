"""
Manifest Module
Office apps, manifest reading and package export.
"""

from .apps import (
    OfficeApp,
    get_office_apps,
    get_office_app_name,
    get_office_app_for_manifest_host,
    get_office_apps_for_manifest_hosts,
    parse_office_apps,
)
from .reader import AddinManifest, read_manifest_file
from .export import export_metadata_package

__all__ = [
    "OfficeApp",
    "get_office_apps",
    "get_office_app_name",
    "get_office_app_for_manifest_host",
    "get_office_apps_for_manifest_hosts",
    "parse_office_apps",
    "AddinManifest",
    "read_manifest_file",
    "export_metadata_package",
]
