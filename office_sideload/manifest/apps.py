"""
Office Apps

The host applications an add-in can target, and the mapping from the host
names used inside manifests.
"""

from enum import Enum
from typing import Iterable, Optional

from office_sideload.errors import ExpectedError


class OfficeApp(Enum):
    EXCEL = "excel"
    ONENOTE = "onenote"
    OUTLOOK = "outlook"
    POWERPOINT = "powerpoint"
    PROJECT = "project"
    WORD = "word"


_APP_NAMES = {
    OfficeApp.EXCEL: "Excel",
    OfficeApp.ONENOTE: "OneNote",
    OfficeApp.OUTLOOK: "Outlook",
    OfficeApp.POWERPOINT: "PowerPoint",
    OfficeApp.PROJECT: "Project",
    OfficeApp.WORD: "Word",
}

# XML manifests use <Host Name="...">, JSON manifests use requirement scopes
_MANIFEST_HOSTS = {
    "document": OfficeApp.WORD,
    "mailbox": OfficeApp.OUTLOOK,
    "mail": OfficeApp.OUTLOOK,
    "notebook": OfficeApp.ONENOTE,
    "presentation": OfficeApp.POWERPOINT,
    "project": OfficeApp.PROJECT,
    "workbook": OfficeApp.EXCEL,
}


def get_office_apps() -> list[OfficeApp]:
    """All known Office apps, in declaration order."""
    return list(OfficeApp)


def get_office_app_name(app: OfficeApp) -> str:
    return _APP_NAMES[app]


def get_office_app_for_manifest_host(host: str) -> Optional[OfficeApp]:
    """Map a manifest host name to an Office app (None if unknown)."""
    return _MANIFEST_HOSTS.get(host.strip().lower())


def get_office_apps_for_manifest_hosts(hosts: Optional[Iterable[str]]) -> list[OfficeApp]:
    """Map manifest host names to Office apps, dropping unknowns and duplicates."""
    apps: list[OfficeApp] = []
    for host in hosts or []:
        app = get_office_app_for_manifest_host(host)
        if app is not None and app not in apps:
            apps.append(app)
    return apps


def parse_office_apps(text: str) -> list[OfficeApp]:
    """
    Parse a comma separated list of app names, e.g. "excel,word".
    
    "all" selects every app. Raises ExpectedError for an unknown name.
    """
    if text.strip().lower() == "all":
        return get_office_apps()
    
    apps: list[OfficeApp] = []
    for part in text.split(","):
        name = part.strip().lower()
        if not name:
            continue
        try:
            app = OfficeApp(name)
        except ValueError:
            valid = ", ".join(a.value for a in OfficeApp)
            raise ExpectedError(f"Office app '{part.strip()}' is not valid. Use one of: {valid}, all") from None
        if app not in apps:
            apps.append(app)
    return apps
