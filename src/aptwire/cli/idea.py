"""IntelliJ IDEA CLI commands."""

import argparse
import sys
from pathlib import Path

from aptwire.cli.apply import _print_summary


def cmd_idea(args: argparse.Namespace) -> int:
    from aptwire.config import load_config
    from aptwire.idea.sync import sync_idea
    from aptwire.pipeline import make_bucket

    config = load_config(args.config)
    result = sync_idea(
        args.project_dir, config, make_bucket(args.project_dir, config), dry_run=args.dry_run,
    )
    _print_summary("IntelliJ Sync Results", result)
    return 1 if result["errors"] else 0


def cmd_patch_compiler_xml(args: argparse.Namespace) -> int:
    from aptwire.idea.compiler_xml import patch_file

    path = Path(args.file)
    if not path.is_file():
        print(f"ERROR: {path} does not exist", file=sys.stderr)
        return 1

    action = patch_file(
        path,
        args.output_dir,
        args.test_output_dir,
        section_name=args.section,
        dry_run=args.dry_run,
    )
    print(f"  {path}: {action}")
    if args.dry_run:
        print("\n[DRY RUN] No files were modified.")
    return 0
