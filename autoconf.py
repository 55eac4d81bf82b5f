#!/usr/bin/env python3
"""paqet-autoconf - Client Configuration Generator.

Main entry point: discovers the active network identity and writes
a paqet client configuration file.
"""

import argparse
import sys
import traceback
from pathlib import Path

import yaml

import config
from config import ExitCode
from display import print_discovery_start, print_profile, print_saved
from export import write_config
from logging_config import get_logger, setup_logging
from models import ClientDefaults
from network import DiscoveryError
from orchestrator import collect_client_config
from utils import sanitize_for_log


def parse_arguments() -> argparse.Namespace:
    """Parse command-line arguments.

    All flags are optional; running without flags discovers the network
    and writes auto_client.yaml in the working directory.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        description="Generate a paqet client configuration from the active network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  paqet-autoconf                          # Write {config.OUTPUT_FILENAME}
  paqet-autoconf -v                       # Verbose output
  paqet-autoconf --server 1.2.3.4:8443 --key SECRET
  paqet-autoconf --output client.yaml     # Custom output file

Exit codes:
  0 - Success
  1 - General error (discovery or write failed)
  4 - Invalid arguments
        """,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--output",
        type=Path,
        default=Path(config.OUTPUT_FILENAME),
        metavar="PATH",
        help=f"Configuration file to write (default: {config.OUTPUT_FILENAME})",
    )

    parser.add_argument(
        "--server",
        default=config.DEFAULT_SERVER_ADDR,
        metavar="ADDR",
        help="Remote server address (host:port)",
    )

    parser.add_argument(
        "--key",
        default=config.DEFAULT_KCP_KEY,
        metavar="KEY",
        help="KCP shared secret key",
    )

    parser.add_argument(
        "--socks5-listen",
        default=config.DEFAULT_SOCKS5_LISTEN,
        metavar="ADDR",
        help=f"Local SOCKS5 listener (default: {config.DEFAULT_SOCKS5_LISTEN})",
    )

    args = parser.parse_args()

    for name in ("server", "key", "socks5_listen"):
        if not getattr(args, name).strip():
            print(f"Error: --{name.replace('_', '-')} must not be empty", file=sys.stderr)
            sys.exit(ExitCode.INVALID_ARGUMENTS)

    return args


def build_defaults(args: argparse.Namespace) -> ClientDefaults:
    """Build static client settings from config constants and overrides."""
    return ClientDefaults(
        server_addr=args.server,
        kcp_key=args.key,
        socks5_listen=args.socks5_listen,
    )


def main() -> None:
    """Main execution flow.

    Exit codes:
        0: Success
        1: General error
        4: Invalid arguments
    """
    args = parse_arguments()

    setup_logging(
        verbose=args.verbose,
        log_file=args.log_file,
        use_colors=True,
    )

    logger = get_logger(__name__)

    try:
        print_discovery_start()
        client_config = collect_client_config(build_defaults(args))
        print_profile(client_config)

        output_path = write_config(client_config, args.output)
        logger.info("Wrote %s", sanitize_for_log(str(output_path)))
        print_saved(output_path)

        sys.exit(ExitCode.SUCCESS)

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        sys.exit(ExitCode.GENERAL_ERROR)
    except DiscoveryError as e:
        logger.error("Network discovery failed: %s", sanitize_for_log(str(e)))
        sys.exit(ExitCode.GENERAL_ERROR)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Error during execution: %s", sanitize_for_log(str(e)))
        if args.verbose:
            traceback.print_exc()
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
