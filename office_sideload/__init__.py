"""
Office Sideload
Registers Office Add-in manifests with the desktop Office apps on macOS.
"""

__version__ = "0.1.0"
__package_name__ = "office-sideload"
