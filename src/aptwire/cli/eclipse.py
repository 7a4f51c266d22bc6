"""Eclipse CLI commands."""

import argparse

from aptwire.cli.apply import _print_summary


def cmd_eclipse(args: argparse.Namespace) -> int:
    from aptwire.config import load_config
    from aptwire.eclipse.sync import clean_eclipse, sync_eclipse
    from aptwire.pipeline import make_bucket

    config = load_config(args.config)
    if args.clean:
        result = clean_eclipse(args.project_dir, config, dry_run=args.dry_run)
        _print_summary("Eclipse Clean Results", result)
        return 0

    result = sync_eclipse(
        args.project_dir, config, make_bucket(args.project_dir, config), dry_run=args.dry_run,
    )
    _print_summary("Eclipse Sync Results", result)
    return 0
