"""
Manifest Reader

Reads the fields of an Office Add-in manifest that registration needs.
Supports both the XML add-in manifest and the JSON unified manifest.
Nothing here validates the manifest against its schema.
"""

import json
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from office_sideload.errors import ManifestError


@dataclass
class AddinManifest:
    """The parts of a manifest used for sideloading."""
    path: Path
    manifest_type: str  # "xml" or "json"
    id: Optional[str] = None
    version: Optional[str] = None
    provider_name: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
    default_locale: Optional[str] = None
    hosts: list[str] = field(default_factory=list)
    icons: list[str] = field(default_factory=list)  # JSON only, relative to the manifest


def is_json_manifest(manifest_path: str | Path) -> bool:
    return str(manifest_path).lower().endswith(".json")


def is_xml_manifest(manifest_path: str | Path) -> bool:
    return str(manifest_path).lower().endswith(".xml")


async def read_manifest_file(manifest_path: str | Path) -> AddinManifest:
    """
    Read and parse a manifest file.
    
    Files ending in .json are read as a unified manifest, anything else as
    an XML add-in manifest.
    
    Raises:
        ManifestError: the file can't be read or its content can't be parsed
    """
    path = Path(manifest_path)
    
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ManifestError(f"Unable to read the manifest file: {path}.\n{e}") from e
    
    try:
        if is_json_manifest(path):
            return _parse_json_manifest(path, content)
        return _parse_xml_manifest(path, content)
    except (ET.ParseError, ValueError, TypeError, AttributeError) as e:
        raise ManifestError(f"Unable to parse the manifest file: {path}.\n{e}") from e


def _local_name(tag: str) -> str:
    """Strip the {namespace} prefix ElementTree puts on tags."""
    return tag.split("}", 1)[-1]


def _find_child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    child = _find_child(element, name)
    if child is not None and child.text and child.text.strip():
        return child.text.strip()
    return None


def _child_default_value(element: ET.Element, name: str) -> Optional[str]:
    child = _find_child(element, name)
    if child is not None:
        return child.get("DefaultValue")
    return None


def _parse_xml_manifest(path: Path, content: bytes) -> AddinManifest:
    root = ET.fromstring(content)
    
    if _local_name(root.tag) != "OfficeApp":
        raise ValueError(f"Root element must be <OfficeApp>, found <{_local_name(root.tag)}>")
    
    hosts: list[str] = []
    hosts_elem = _find_child(root, "Hosts")
    if hosts_elem is not None:
        for host in hosts_elem:
            if _local_name(host.tag) == "Host" and host.get("Name"):
                hosts.append(host.get("Name"))
    
    return AddinManifest(
        path=path,
        manifest_type="xml",
        id=_child_text(root, "Id"),
        version=_child_text(root, "Version"),
        provider_name=_child_text(root, "ProviderName"),
        display_name=_child_default_value(root, "DisplayName"),
        description=_child_default_value(root, "Description"),
        default_locale=_child_text(root, "DefaultLocale"),
        hosts=hosts,
    )


def _short(value: Any) -> Optional[str]:
    """Unified manifest strings are either plain or {"short": ..., "full": ...}."""
    if isinstance(value, dict):
        return value.get("short")
    return value


def _parse_json_manifest(path: Path, content: bytes) -> AddinManifest:
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError("Manifest must be a JSON object")
    
    hosts: list[str] = []
    for extension in data.get("extensions") or []:
        scopes = (extension.get("requirements") or {}).get("scopes") or []
        for scope in scopes:
            if scope not in hosts:
                hosts.append(scope)
    
    icons_data = data.get("icons") or {}
    icons = [icons_data[key] for key in ("color", "outline") if icons_data.get(key)]
    
    return AddinManifest(
        path=path,
        manifest_type="json",
        id=data.get("id"),
        version=data.get("version"),
        provider_name=(data.get("developer") or {}).get("name"),
        display_name=_short(data.get("name")),
        description=_short(data.get("description")),
        default_locale=(data.get("localizationInfo") or {}).get("defaultLanguageTag"),
        hosts=hosts,
        icons=icons,
    )
