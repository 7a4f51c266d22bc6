"""Pipeline CLI commands."""

import argparse


def _print_summary(title: str, result: dict) -> None:
    print(title)
    print("─" * 40)
    for action in ("created", "updated", "unchanged", "deleted", "missing"):
        if action in result:
            print(f"  {action.capitalize() + ':':<11}{len(result[action])}")
    if result.get("skipped"):
        print(f"  Skipped:   {', '.join(result['skipped'])}")
    if result.get("errors"):
        print(f"  Errors:    {len(result['errors'])}")
        for e in result["errors"]:
            where = ": ".join(x for x in (e.get("step"), e.get("path")) if x)
            print(f"    - {where}: {e['error']}")
    if result.get("dry_run"):
        print("\n[DRY RUN] No files were modified.")


def cmd_apply(args: argparse.Namespace) -> int:
    from aptwire.config import load_config
    from aptwire.pipeline import apply

    config = load_config(args.config)
    result = apply(args.project_dir, config, dry_run=args.dry_run)
    _print_summary("Processor Wiring Results", result)
    return 1 if result["errors"] else 0


def cmd_clean(args: argparse.Namespace) -> int:
    from aptwire.config import load_config
    from aptwire.pipeline import clean

    config = load_config(args.config)
    result = clean(args.project_dir, config, dry_run=args.dry_run)
    _print_summary("Clean Results", result)
    return 0
