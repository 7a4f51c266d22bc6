"""javac CLI commands."""

import argparse


def cmd_javac_args(args: argparse.Namespace) -> int:
    from aptwire.config import load_config
    from aptwire.java.compile import processor_path_args
    from aptwire.pipeline import make_bucket

    config = load_config(args.config)
    bucket = make_bucket(args.project_dir, config)
    for arg in processor_path_args(bucket, config.java.compiler_args):
        print(arg)
    return 0
