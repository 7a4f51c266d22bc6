"""Command-line interface for aptwire.

Usage:
    aptwire apply [--dry-run]
    aptwire clean
    aptwire javac-args
    aptwire eclipse [--clean] [--dry-run]
    aptwire idea [--dry-run]
    aptwire patch-compiler-xml <file> [--output-dir D] [--test-output-dir T]
                                      [--section NAME] [--dry-run]
"""

import argparse
import logging
import sys
from pathlib import Path

from aptwire import __version__
from aptwire.cli.apply import cmd_apply, cmd_clean
from aptwire.cli.eclipse import cmd_eclipse
from aptwire.cli.idea import cmd_idea, cmd_patch_compiler_xml
from aptwire.cli.java import cmd_javac_args
from aptwire.config import DEFAULT_IDEA_OUTPUT_DIR, DEFAULT_IDEA_TEST_OUTPUT_DIR
from aptwire.errors import AptwireError
from aptwire.idea import COMPILER_CONFIGURATION
from aptwire.paths import config_path, project_root


def _resolve_project_dir(args: argparse.Namespace) -> Path:
    """Resolve project dir from args or environment."""
    raw = getattr(args, "project_dir", None)
    if raw:
        return Path(raw).expanduser().resolve()
    return project_root().resolve()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aptwire",
        description="Wire annotation-processor paths into javac, Eclipse and IntelliJ IDEA",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--project-dir", default=None,
        help="Project root (default: $APTWIRE_PROJECT_DIR or cwd)",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to processors.yaml (default: <project>/processors.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every file touched",
    )
    sub = parser.add_subparsers(dest="command")

    ap = sub.add_parser("apply", help="Run every enabled wiring step")
    ap.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    cl = sub.add_parser("clean", help="Delete generated IDE files")
    cl.add_argument(
        "--dry-run", action="store_true",
        help="Report deletions without deleting",
    )

    sub.add_parser("javac-args", help="Print javac args, one per line")

    ecl = sub.add_parser("eclipse", help="Eclipse APT wiring only")
    ecl.add_argument(
        "--clean", action="store_true",
        help="Delete .factorypath and APT prefs instead",
    )
    ecl.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    idea = sub.add_parser("idea", help="IntelliJ IDEA wiring only")
    idea.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    pcx = sub.add_parser(
        "patch-compiler-xml",
        help="Install the annotationProcessing profile into one project file",
    )
    pcx.add_argument("file", help="compiler.xml or .ipr file")
    pcx.add_argument("--output-dir", default=DEFAULT_IDEA_OUTPUT_DIR)
    pcx.add_argument("--test-output-dir", default=DEFAULT_IDEA_TEST_OUTPUT_DIR)
    pcx.add_argument(
        "--section", default=COMPILER_CONFIGURATION,
        help="Component name to patch",
    )
    pcx.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    args.project_dir = _resolve_project_dir(args)
    if not args.config:
        args.config = str(config_path(args.project_dir))

    dispatch = {
        "apply": cmd_apply,
        "clean": cmd_clean,
        "javac-args": cmd_javac_args,
        "eclipse": cmd_eclipse,
        "idea": cmd_idea,
        "patch-compiler-xml": cmd_patch_compiler_xml,
    }

    try:
        return dispatch[args.command](args)
    except AptwireError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
