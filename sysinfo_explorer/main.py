"""
sysinfo-explorer - Main Entry Point.

Either explores the installed hardware and appends a text report to a
file, or prints live system statistics for a number of iterations.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.config import Config, get_default_config_path
from .core.errors import (
    CounterUnavailableError,
    InvalidArgumentError,
    ProviderError,
    SamplingError,
)
from .core.logging_setup import setup_logging
from .collectors.explorer import explore_system
from .collectors.wmi_provider import WMIQueryProvider
from .stats.counters import COUNTERS, PdhCounterSource
from .stats.sampler import LiveSampler, run_stats


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = -1

# -e given without FILE
CONFIGURED_REPORT = object()


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors instead of exiting."""

    def error(self, message):
        self.print_usage(sys.stderr)
        raise InvalidArgumentError(message)


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = _ArgumentParser(
        prog="sysinfo-explorer",
        description="Windows hardware inventory and live system statistics",
    )

    mode = parser.add_mutually_exclusive_group(required=True)

    mode.add_argument(
        "-e", "--explore",
        nargs="?",
        const=CONFIGURED_REPORT,
        metavar="FILE",
        help="Run hardware explorer and log information to output file "
             "(default: report.output_filename from the configuration)"
    )

    mode.add_argument(
        "-s", "--stats",
        metavar="ITERATIONS",
        help="Get system statistics, one sample per second"
    )

    mode.add_argument(
        "-l", "--list-counters",
        nargs="?",
        const="",
        metavar="CATEGORY",
        help="List performance counter categories, or the counters of one category"
    )

    mode.add_argument(
        "--generate-config",
        action="store_true",
        help="Generate a sample configuration file"
    )

    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Path to configuration file (YAML)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser.parse_args(argv)


def parse_iterations(text: str) -> int:
    """Validate the stats iteration count."""
    try:
        iterations = int(text)
    except (TypeError, ValueError):
        raise InvalidArgumentError("Invalid number of iterations (>0)")
    if iterations <= 0:
        raise InvalidArgumentError("Invalid number of iterations (>0)")
    return iterations


def resolve_report_filename(explore_arg, config: Config) -> str:
    """Report file named on the command line, else the configured one."""
    if explore_arg is CONFIGURED_REPORT:
        filename = config.report.output_filename or ""
    else:
        filename = explore_arg
    filename = filename.strip()
    if not filename:
        raise InvalidArgumentError("the output file name is empty")
    return filename


def explore(output_filename: str, config: Config) -> int:
    """Run the hardware explorer and append its report to ``output_filename``."""
    print("Running the hardware explorer instance... (This may take few minutes)")

    try:
        inventory = explore_system(output_filename, config)
    except ProviderError as e:
        logger.error(f"Hardware explorer unavailable: {e}")
        return EXIT_FAILURE

    print(f"Report written to {output_filename}: {inventory.record_count} records")
    if inventory.errors:
        print(f"Errors: {len(inventory.errors)}")
        for err in inventory.errors:
            print(f"  - {err}")
    return EXIT_OK


def stats(iterations_text: str, config: Config) -> int:
    """Print live statistics ``iterations_text`` times."""
    print("Running the quick statistics instance...")

    try:
        iterations = parse_iterations(iterations_text)
    except InvalidArgumentError as e:
        print(e)
        return EXIT_USAGE

    try:
        counters = PdhCounterSource()
    except CounterUnavailableError as e:
        logger.error(f"Live statistics unavailable: {e}")
        return EXIT_FAILURE

    try:
        counters.open_counters(COUNTERS)
    except CounterUnavailableError as e:
        logger.error(f"Live statistics unavailable: {e}")
        counters.close()
        return EXIT_FAILURE

    try:
        provider = WMIQueryProvider(config.wmi.namespace)
    except ProviderError as e:
        logger.warning(f"{e}; memory usage will read 0%")
        provider = None

    sampler = LiveSampler.from_provider(counters, provider)
    try:
        run_stats(sampler, iterations)
    except SamplingError as e:
        print(f"Exception: {e}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        counters.close()

    return EXIT_OK


def list_counters(category: str) -> int:
    """List counter categories, or the counters and instances of ``category``."""
    try:
        counters = PdhCounterSource()
    except CounterUnavailableError as e:
        logger.error(f"Performance counters unavailable: {e}")
        return EXIT_FAILURE

    try:
        if not category:
            for name in counters.list_categories():
                print(f"Category name: {name}")
            return EXIT_OK

        names, instances = counters.list_counters(category)
        print(f"Category Name: {category}")
        if not instances:
            for name in names:
                print(f"     Counter Name: {name}")
        for instance in instances:
            print(f"  Instance Name: {instance}")
            for name in names:
                print(f"     Counter Name: {name}")
    except CounterUnavailableError as e:
        print(f"Exception: {e}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        counters.close()

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    try:
        args = parse_args(argv)
    except InvalidArgumentError as e:
        print(f"The input arguments are invalid: {e}", file=sys.stderr)
        return EXIT_USAGE

    # Generate sample config if requested
    if args.generate_config:
        config = Config()
        config_path = args.config or "config/config.yaml"
        Path(config_path).parent.mkdir(parents=True, exist_ok=True)
        config.to_yaml(config_path)
        print(f"Generated sample configuration: {config_path}")
        return EXIT_OK

    # Load configuration
    config_path = args.config or get_default_config_path()
    config = Config.from_yaml(config_path)
    setup_logging(config.logging, args.verbose)
    logger.debug(f"Loaded configuration from {config_path}")

    if args.explore is not None:
        try:
            output_filename = resolve_report_filename(args.explore, config)
        except InvalidArgumentError as e:
            print(f"The input arguments are invalid: {e}", file=sys.stderr)
            return EXIT_USAGE
        return explore(output_filename, config)
    if args.stats is not None:
        return stats(args.stats.strip(), config)
    return list_counters(args.list_counters)


def run():
    """Entry point for the application."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    run()
