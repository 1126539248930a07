"""
movconvert: batch video converter.

Converts every source file in the input directory (default ./mov, *.mov) to
the target format in the output directory (default ./mp4, *.mp4) with ffmpeg,
one file at a time, with a live progress bar.
"""

import logging
import sys
from pathlib import Path

from colorama import init, Fore, Style

from core import Config, setup_logging
from core.batch import BatchConverter, display_summary
from core.discovery import discover_jobs
from core.encoder import EncoderConfig
from core.errors import DiscoveryError, EncoderNotFound
from utils.cli_runtime import ask_yes_no, build_arg_parser, configure_windows_console_utf8
from utils.error_messages import format_discovery_error, format_encoder_not_found
from utils.progress import ProgressTracker
from utils.system_check import SystemCheck

__version__ = "1.0.0"

DEFAULT_CONFIG_PATH = Path('config_files/config.json')


def load_config(args) -> Config:
    """Load config.json (if present) and apply command-line overrides."""
    config_path = Path(args.config) if args.config else DEFAULT_CONFIG_PATH
    config = Config(config_path if config_path.exists() else None)
    if args.input_dir:
        config.set('input_dir', args.input_dir)
    if args.output_dir:
        config.set('output_dir', args.output_dir)
    return config


def run(args) -> int:
    """Check preconditions, then convert every discovered file."""
    try:
        config = load_config(args)
    except Exception as e:
        print(Fore.RED + f"Error loading config: {e}" + Style.RESET_ALL)
        return 1

    try:
        setup_logging(config.log_folder, config.max_log_files, context=config.describe())
    except OSError as e:
        print(Fore.RED + f"Error setting up logging: {e}" + Style.RESET_ALL)
        return 1

    # Preconditions: both must hold before any job runs
    system_check = SystemCheck(config.encoder_name)
    try:
        encoder_path = system_check.resolve_encoder()
    except EncoderNotFound as e:
        system_check.display_tool_status(None)
        print(Fore.RED + format_encoder_not_found(e) + Style.RESET_ALL)
        logging.error(str(e))
        return 1
    system_check.display_tool_status(encoder_path)

    try:
        jobs = discover_jobs(config.input_dir, config.output_dir,
                             config.source_extension, config.target_extension)
    except DiscoveryError as e:
        print(Fore.RED + format_discovery_error(e) + Style.RESET_ALL)
        logging.error(str(e))
        return 1

    kind = config.source_extension.lstrip('.').upper()
    print(f"Found {Fore.CYAN}{len(jobs)}{Style.RESET_ALL} {kind} files to process")

    delete_sources = args.delete
    if args.prompt and jobs:
        delete_sources = ask_yes_no("Delete source files after successful conversion?")
    logging.info(f"Delete sources after success: {delete_sources}")

    progress = ProgressTracker(tick_interval=config.tick_interval)
    converter = BatchConverter(EncoderConfig(executable=encoder_path), progress,
                               delete_sources=delete_sources)
    try:
        summary = converter.run(jobs)
    finally:
        progress.close()

    display_summary(summary)
    logging.info(f"movconvert completed: total={summary.total} succeeded={summary.succeeded} "
                 f"failed={summary.failed}")
    return 0


def main(argv=None) -> int:
    """Main entry point. Returns the process exit code."""
    init()  # Initialize colorama
    configure_windows_console_utf8()

    args = build_arg_parser(__version__).parse_args(argv)
    try:
        return run(args)
    except KeyboardInterrupt:
        print(Fore.YELLOW + "\n\nOperation interrupted by user" + Style.RESET_ALL)
        logging.info("User interrupted operation")
        return 130


if __name__ == '__main__':
    sys.exit(main())
