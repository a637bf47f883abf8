#!/usr/bin/env python3

"""
Command line entry point for skin export.
"""

import argparse
import logging
import sys
from pathlib import Path

from moresuits.baseline import load_baseline
from moresuits.common import error
from moresuits.common.log import configure_logging
from moresuits.exportconfig import get_export_config
from moresuits.exportconfig import load_export_config
from moresuits.export import Exporter
from moresuits.material import JsonMaterial


logger = logging.getLogger(__name__)


def get_parser():
    parser = argparse.ArgumentParser(
        prog="moresuits",
        description="Export a material to a More Suits skin JSON and textures.",
    )
    parser.add_argument(
        "material",
        type=Path,
        help="Material descriptor JSON",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        required=True,
        help="Export directory",
    )
    parser.add_argument(
        "-b", "--baseline",
        type=Path,
        default=None,
        help="Base material JSON, entries equal to it are not exported",
    )
    parser.add_argument(
        "-n", "--name",
        default=None,
        help="Name of the generated skin",
    )
    parser.add_argument(
        "-p", "--price",
        type=int,
        default=None,
        help="Price of the suit in-game, 0 or less to omit",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Export config JSON",
    )
    parser.add_argument(
        "--asset-root",
        type=Path,
        default=None,
        help="Directory texture paths are relative to",
    )
    parser.add_argument(
        "--ignore",
        nargs="+",
        metavar="PROPERTY",
        default=None,
        help="Shader properties never exported",
    )
    parser.add_argument(
        "--no-ignore",
        action="store_true",
        help="Export every shader property",
    )
    parser.add_argument(
        "--no-main-texture",
        action="store_true",
        help="Do not copy the main texture",
    )
    parser.add_argument(
        "--flat",
        action="store_true",
        help="Write the JSON and property textures directly to the export directory",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Also write log.txt to this directory",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def get_config(args):
    """Build the export config: defaults, then config file, then flags."""
    if args.config:
        config = load_export_config(args.config)
    else:
        config = get_export_config()
    if args.name is not None:
        config["skin_name"] = args.name
    if args.price is not None:
        config["price"] = args.price
    if args.ignore is not None:
        config["ignore_list"] = list(args.ignore)
    if args.no_ignore:
        config["ignore_list"] = []
    if args.no_main_texture:
        config["export_main_texture"] = False
    if args.flat:
        config["advanced_dir"] = ""
    return config


def main(argv=None):
    args = get_parser().parse_args(argv)
    configure_logging(log_dir=args.log_dir, verbose=args.verbose)
    logger.debug(f"args: {vars(args)}")
    try:
        config = get_config(args)
        material = JsonMaterial(args.material, asset_root=args.asset_root)
        baseline = load_baseline(args.baseline)
        Exporter(
            material,
            args.output,
            baseline=baseline,
            export_config=config,
        ).export()
    except error.MoreSuitsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
