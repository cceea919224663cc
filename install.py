#!/usr/bin/env python3
# filename: install.py
# -*- coding: utf-8 -*-
"""
Entry point for the macOS provisioner.
"""

import argparse
import logging
import sys
from typing import List, Optional

from common.core_utils import DETAILED_LOG_FORMAT, setup_logging
from installer.config_loader import load_app_settings
from installer.main_installer import run_provisioning

EXIT_INTERRUPTED = 130


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Provision a macOS machine from a declarative YAML list.",
        epilog="Example: python3 ./install.py -c config.yaml -v",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="PATH",
        help="Desired-state YAML document (default: config.yaml).",
    )
    parser.add_argument(
        "--profile",
        metavar="PATH",
        help="Shell profile to update (default: ~/.zprofile).",
    )
    parser.add_argument(
        "--homebrew-prefix",
        metavar="PATH",
        help="Homebrew installation prefix (default: /opt/homebrew).",
    )
    parser.add_argument(
        "--keep-alive-interval",
        type=float,
        metavar="SECONDS",
        help="Seconds between sudo credential refreshes (default: 60).",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between steps.",
    )
    parser.add_argument(
        "--log-file", metavar="PATH", help="Also append log output to PATH."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    return parser.parse_args(args)


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the macOS provisioner."""
    parsed_args = parse_args(args)
    app_settings = load_app_settings(parsed_args)

    setup_logging(
        log_level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        log_file=parsed_args.log_file,
        log_format_str=DETAILED_LOG_FORMAT if parsed_args.verbose else None,
        log_prefix=app_settings.log_prefix,
    )
    logger = logging.getLogger("macdeploy")

    try:
        return run_provisioning(app_settings, logger)
    except KeyboardInterrupt:
        logger.warning("Provisioning interrupted by user.")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
