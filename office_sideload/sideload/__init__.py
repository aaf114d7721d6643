"""
Sideload Module
Registering add-in manifests in the Office apps' sideload folders.
"""

from .directories import (
    DirectoryLister,
    LocalDirectoryLister,
    get_sideload_directory,
    is_junk,
    not_junk,
    list_sideload_files,
)
from .registration import (
    RegisteredAddin,
    get_registered_addins,
    register_addin,
    unregister_addin,
    unregister_all_addins,
)

__all__ = [
    "DirectoryLister",
    "LocalDirectoryLister",
    "get_sideload_directory",
    "is_junk",
    "not_junk",
    "list_sideload_files",
    "RegisteredAddin",
    "get_registered_addins",
    "register_addin",
    "unregister_addin",
    "unregister_all_addins",
]
