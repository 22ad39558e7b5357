"""
Command-line interface for the host telemetry simulator.

Emits one synthetic sample per second to a JSON Lines file and to stdout
until interrupted. Diagnostics are logged to stderr.
"""

import argparse
import logging
import sys

from . import __version__
from .config import load_config
from .errors import ConfigError, SimulatorError
from .logging_config import setup_logging
from .runner import run_simulation

logger = logging.getLogger("hostsim")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hostsim",
        description="Synthetic host resource telemetry as JSON Lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Emit samples to ./data.json and stdout until Ctrl-C
  hostsim

  # Append to an existing log instead of truncating it
  hostsim --output /var/log/hostsim.jsonl --append

  # Ten samples with percentage fields bounded to [0, 100]
  hostsim --count 10 --clamp
        """,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config file (default: $HOSTSIM_CONFIG if set)",
    )
    parser.add_argument(
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Output JSON Lines file (default: data.json)",
    )
    parser.add_argument(
        "--append",
        action="store_true",
        default=None,
        help="Append to an existing output file instead of truncating it",
    )
    parser.add_argument(
        "--clamp",
        action="store_true",
        default=None,
        help="Bound percentage fields to [0, 100] and network to >= 0",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Stop after this many samples (default: run until interrupted)",
    )
    parser.add_argument(
        "--metrics-file",
        dest="metrics_path",
        type=str,
        default=None,
        help="Write the simulator's own OTEL counters to this JSON Lines file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Diagnostic log level on stderr (default: INFO)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.count is not None and args.count < 1:
        parser.error("--count must be a positive integer")

    try:
        config = load_config(args.config).with_overrides(
            output_path=args.output_path,
            append=args.append,
            clamp=args.clamp,
            metrics_path=args.metrics_path,
            log_level=args.log_level,
        )
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging("hostsim", level=config.log_level)
    logger.info(
        "Starting host telemetry simulation (output=%s, append=%s, clamp=%s)",
        config.output_path,
        config.append,
        config.clamp,
    )

    try:
        emitted = run_simulation(config, max_iterations=args.count)
    except KeyboardInterrupt:
        logger.info("Simulation interrupted")
        sys.exit(0)
    except SimulatorError as e:
        logger.error("Fatal: %s", e)
        sys.exit(1)

    logger.info("Generated %d samples", emitted)


if __name__ == "__main__":
    main()
