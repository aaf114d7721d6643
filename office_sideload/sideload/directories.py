"""
Sideload Directories

Where each Office app for Mac looks for sideloaded manifests, and how those
folders are listed.
"""

import os
import re
from pathlib import Path
from typing import Optional, Protocol

from office_sideload.config import ConfigManager
from office_sideload.manifest.apps import OfficeApp


# Relative to the user's home directory
_SIDELOAD_DIRECTORIES = {
    OfficeApp.EXCEL: "Library/Containers/com.microsoft.Excel/Data/Documents/wef",
    OfficeApp.POWERPOINT: "Library/Containers/com.microsoft.Powerpoint/Data/Documents/wef",
    OfficeApp.WORD: "Library/Containers/com.microsoft.Word/Data/Documents/wef",
}

# OS and editor artifacts that can show up in any folder
_JUNK_PATTERNS = [
    r"^npm-debug\.log$",
    r"^\..*\.swp$",
    r"^\.DS_Store$",
    r"^\.AppleDouble$",
    r"^\.LSOverride$",
    r"^Icon\r$",
    r"^\._.*",
    r"^\.Spotlight-V100(?:$|/)",
    r"\.Trashes",
    r"^__MACOSX$",
    r"~$",
    r"^Thumbs\.db$",
    r"^ehthumbs\.db$",
    r"^[Dd]esktop\.ini$",
    r"@eaDir$",
]
_JUNK_REGEX = re.compile("|".join(f"(?:{p})" for p in _JUNK_PATTERNS))


def get_sideload_directory(app: OfficeApp, home: Optional[Path] = None) -> Optional[Path]:
    """
    Get the sideload directory for an Office app.
    
    Returns None for apps that have no sideload directory on Mac.
    """
    relative = _SIDELOAD_DIRECTORIES.get(app)
    if relative is None:
        return None
    return (home or ConfigManager.get_instance().get().home_dir) / relative


def is_junk(file_name: str) -> bool:
    return bool(_JUNK_REGEX.search(file_name))


def not_junk(file_name: str) -> bool:
    return not is_junk(file_name)


class DirectoryLister(Protocol):
    """Filesystem access needed to scan sideload directories."""
    
    def exists(self, directory: Path) -> bool: ...
    
    def listdir(self, directory: Path) -> list[str]: ...


class LocalDirectoryLister:
    """DirectoryLister backed by the local filesystem."""
    
    def exists(self, directory: Path) -> bool:
        return directory.exists()
    
    def listdir(self, directory: Path) -> list[str]:
        return os.listdir(directory)


def list_sideload_files(directory: Path, lister: Optional[DirectoryLister] = None) -> list[str]:
    """List the entry names in a sideload directory, minus junk files."""
    lister = lister or LocalDirectoryLister()
    return [name for name in lister.listdir(directory) if not_junk(name)]
