"""CLI/runtime bootstrap helpers for movconvert."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Any, Callable, Optional

from colorama import Fore, Style


def configure_windows_console_utf8() -> None:
    """Best-effort UTF-8 console setup for Windows terminals."""
    if sys.platform != "win32":
        return

    try:
        if hasattr(sys.stdout, "reconfigure"):
            stdout: Any = sys.stdout
            stderr: Any = sys.stderr
            stdout.reconfigure(encoding="utf-8")
            stderr.reconfigure(encoding="utf-8")
        os.system("chcp 65001 >nul 2>&1")
    except (OSError, ValueError):
        # Terminal-dependent setup; safe fallback is default encoding.
        pass


def build_arg_parser(version: str) -> argparse.ArgumentParser:
    """Create the movconvert CLI parser."""
    parser = argparse.ArgumentParser(
        description="Batch-convert video files with ffmpeg.",
        epilog="Examples:\n"
        "  movconvert              (convert ./mov/*.mov into ./mp4)\n"
        "  movconvert --delete     (remove each .mov after it converts)\n"
        "  movconvert --prompt     (ask before deciding)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    delete_group = parser.add_mutually_exclusive_group()
    delete_group.add_argument("--delete", "-d", action="store_true",
                              help="Delete source files after a successful conversion")
    delete_group.add_argument("--prompt", "-p", action="store_true",
                              help="Ask whether to delete source files after a successful conversion")
    parser.add_argument("--config", "-c", help="Path to config.json file")
    parser.add_argument("--input-dir", help="Directory to read source files from (overrides config)")
    parser.add_argument("--output-dir", help="Directory to write converted files to (overrides config)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {version}")
    return parser


def ask_yes_no(prompt: str, input_func: Optional[Callable[[str], str]] = None) -> bool:
    """
    Ask a yes/no question; anything but y/yes counts as no.

    Args:
        prompt: Question text
        input_func: Input source (default: builtin input)

    Returns:
        True if the user answered yes
    """
    try:
        answer = (input_func or input)(f"{Fore.YELLOW}{prompt} [y/N]: {Style.RESET_ALL}")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")
