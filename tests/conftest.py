"""
Shared pytest fixtures for Office Sideload tests

Every test gets its own home directory (OFFICE_SIDELOAD_HOME) so the
sideload folders live under tmp_path and never touch the real user's.
"""

import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from office_sideload.config import ConfigManager
from office_sideload.manifest.apps import OfficeApp
from office_sideload.sideload.directories import get_sideload_directory


# ============================================================================
# Manifest builders
# ============================================================================

XML_MANIFEST_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<OfficeApp xmlns="http://schemas.microsoft.com/office/appforoffice/1.1"
           xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
           xsi:type="TaskPaneApp">
  {id_element}
  <Version>1.0.0.0</Version>
  <ProviderName>Contoso</ProviderName>
  <DefaultLocale>en-US</DefaultLocale>
  <DisplayName DefaultValue="Widget"/>
  <Description DefaultValue="A widget add-in"/>
  {hosts_element}
</OfficeApp>
"""


def build_xml_manifest(manifest_id: Optional[str] = "abc123", hosts: Optional[List[str]] = None) -> str:
    """Build XML manifest content. hosts=None means no <Hosts> element."""
    id_element = f"<Id>{manifest_id}</Id>" if manifest_id else ""
    if hosts is None:
        hosts_element = ""
    else:
        inner = "".join(f'<Host Name="{h}"/>' for h in hosts)
        hosts_element = f"<Hosts>{inner}</Hosts>"
    return XML_MANIFEST_TEMPLATE.format(id_element=id_element, hosts_element=hosts_element)


def build_json_manifest(
    manifest_id: Optional[str] = "4a1b2c3d-0000-4000-8000-000000000001",
    scopes: Optional[List[str]] = None,
    icons: Optional[Dict[str, str]] = None,
) -> dict:
    """Build a unified (JSON) manifest dict."""
    data: dict = {
        "$schema": "https://developer.microsoft.com/json-schemas/teams/vDevPreview/MicrosoftTeams.schema.json",
        "manifestVersion": "devPreview",
        "version": "1.0.0",
        "name": {"short": "Widget", "full": "Widget add-in"},
        "description": {"short": "A widget", "full": "A widget add-in"},
        "developer": {"name": "Contoso"},
        "localizationInfo": {"defaultLanguageTag": "en-us"},
        "extensions": [{"requirements": {"scopes": scopes if scopes is not None else ["mail"]}}],
    }
    if manifest_id:
        data["id"] = manifest_id
    if icons is not None:
        data["icons"] = icons
    return data


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def home_dir(tmp_path, monkeypatch) -> Path:
    """Isolated home directory for the sideload folders."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("OFFICE_SIDELOAD_HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the ConfigManager singleton between tests."""
    ConfigManager._instance = None
    yield
    ConfigManager._instance = None


@pytest.fixture
def source_dir(tmp_path) -> Path:
    """Directory holding the source manifests (outside the home directory)."""
    path = tmp_path / "src"
    path.mkdir()
    return path


@pytest.fixture
def write_xml_manifest(source_dir):
    """Factory: write an XML manifest and return its path."""
    def _write(
        file_name: str = "widget.xml",
        manifest_id: Optional[str] = "abc123",
        hosts: Optional[List[str]] = None,
        directory: Optional[Path] = None,
    ) -> Path:
        path = (directory or source_dir) / file_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(build_xml_manifest(manifest_id, hosts if hosts is not None else ["Workbook"]))
        return path
    return _write


@pytest.fixture
def write_json_manifest(source_dir):
    """Factory: write a JSON manifest and return its path."""
    def _write(file_name: str = "manifest.json", **kwargs) -> Path:
        path = source_dir / file_name
        path.write_text(json.dumps(build_json_manifest(**kwargs), indent=2))
        return path
    return _write


@pytest.fixture
def sideload_dir(home_dir):
    """Factory: sideload directory for an app, created on request."""
    def _dir(app: OfficeApp, create: bool = False) -> Path:
        path = get_sideload_directory(app, home_dir)
        if create:
            path.mkdir(parents=True, exist_ok=True)
        return path
    return _dir
