#!/usr/bin/env python3
"""
Office Sideload CLI Entry Point

Handles:
- Listing the add-ins sideloaded for Excel, PowerPoint and Word on Mac
- Registering an add-in manifest
- Unregistering one add-in, or all of them
"""

import argparse
import asyncio
import os
import sys

from office_sideload import __version__, __package_name__
from office_sideload.errors import ExpectedError, RegistrationError


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


async def list_command(args) -> int:
    from office_sideload.sideload import get_registered_addins

    registered_addins = await get_registered_addins()
    if not registered_addins:
        print("No add-ins are registered.")
        return 0

    for addin in registered_addins:
        print(f"{addin.id or '(no id)'} {addin.manifest_path}")
    return 0


async def register_command(args) -> int:
    from office_sideload.manifest import parse_office_apps
    from office_sideload.manifest.reader import is_json_manifest, is_xml_manifest
    from office_sideload.sideload import register_addin

    if not (is_json_manifest(args.manifest) or is_xml_manifest(args.manifest)):
        print(f"Not registered: {args.manifest} must be a .xml or .json manifest", file=sys.stderr)
        return 1

    office_apps = parse_office_apps(args.apps) if args.apps else None
    await register_addin(args.manifest, office_apps)

    if is_json_manifest(args.manifest):
        print(f"✓ Published {args.manifest}")
    else:
        print(f"✓ Registered {args.manifest}")
    return 0


async def unregister_command(args) -> int:
    from office_sideload.sideload import unregister_addin

    removed = await unregister_addin(args.manifest)
    for path in removed:
        print(f"  ✓ Removed {path}")
    print(f"✓ Unregistered {args.manifest} ({len(removed)} file(s) removed)")
    return 0


async def unregister_all_command(args) -> int:
    from office_sideload.sideload import unregister_all_addins

    removed = await unregister_all_addins()
    for path in removed:
        print(f"  ✓ Removed {path}")
    print(f"✓ Unregistered all add-ins ({len(removed)} file(s) removed)")
    return 0


async def main_async(args) -> int:
    """Load configuration, then run the selected command."""
    from office_sideload.config import ConfigManager

    try:
        await ConfigManager.get_instance().load()
        return await args.handler(args)
    except (ExpectedError, RegistrationError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="office-sideload",
        description="Sideload Office Add-ins for Excel, PowerPoint and Word on Mac",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  office-sideload list
  office-sideload register manifest.xml
  office-sideload register manifest.xml --apps excel,word
  office-sideload unregister manifest.xml
  office-sideload unregister-all
"""
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to stderr"
    )

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List registered add-ins")
    list_parser.set_defaults(handler=list_command)

    register_parser = subparsers.add_parser("register", help="Register an add-in manifest")
    register_parser.add_argument("manifest", help="Path to the manifest (.xml or .json)")
    register_parser.add_argument(
        "--apps", "-a",
        help="Comma separated Office apps (excel, powerpoint, word) or 'all' (default: hosts in the manifest)"
    )
    register_parser.set_defaults(handler=register_command)

    unregister_parser = subparsers.add_parser("unregister", help="Unregister an add-in manifest")
    unregister_parser.add_argument("manifest", help="Path to the manifest")
    unregister_parser.set_defaults(handler=unregister_command)

    unregister_all_parser = subparsers.add_parser("unregister-all", help="Unregister all add-ins")
    unregister_all_parser.set_defaults(handler=unregister_all_command)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print_version()
        sys.exit(0)

    if not args.command:
        parser.print_help()
        sys.exit(2)

    if args.verbose:
        os.environ["LOG_LEVEL"] = "DEBUG"

    sys.exit(asyncio.run(main_async(args)))


if __name__ == "__main__":
    main()
