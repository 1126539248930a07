"""
Encoder availability checks for movconvert.
Finds the encoder on PATH or at the bundled location next to the app.
"""

import logging
import shutil
import sys
from pathlib import Path
from typing import Optional

from colorama import Fore, Style

from core.errors import EncoderNotFound


class SystemCheck:
    """Locates the external encoder binary."""

    BUNDLED_DIR = Path('bin') / 'ffmpeg'

    def __init__(self, encoder_name: str = 'ffmpeg', base_dir: Optional[Path] = None):
        """
        Args:
            encoder_name: Binary name looked up on PATH
            base_dir: Directory the bundled path is relative to (default: cwd)
        """
        self.encoder_name = encoder_name
        self.base_dir = Path(base_dir) if base_dir else Path('.')

    def bundled_path(self) -> Path:
        """Platform-specific location of the bundled encoder."""
        suffix = '.exe' if sys.platform == 'win32' else ''
        return self.base_dir / self.BUNDLED_DIR / f"{self.encoder_name}{suffix}"

    def resolve_encoder(self) -> str:
        """
        Find the encoder executable.

        Returns:
            Path to the encoder, PATH lookup first, then the bundled copy

        Raises:
            EncoderNotFound: If neither location has it
        """
        found = shutil.which(self.encoder_name)
        if found:
            logging.info(f"Using {self.encoder_name} from PATH: {found}")
            return found

        bundled = self.bundled_path()
        if bundled.is_file():
            logging.info(f"Using bundled {self.encoder_name}: {bundled}")
            return str(bundled)

        raise EncoderNotFound(self.encoder_name, [
            f"system PATH ({self.encoder_name})",
            str(bundled),
        ])

    def display_tool_status(self, path: Optional[str]):
        """Print a one-line encoder status."""
        if path:
            print(f"{Fore.GREEN}{self.encoder_name}: OK{Style.RESET_ALL} {Style.DIM}({path}){Style.RESET_ALL}")
        else:
            print(f"{Fore.RED}{self.encoder_name}: MISSING{Style.RESET_ALL}")
