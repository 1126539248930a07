"""
Configuration management for movconvert.
Loads and validates configuration settings.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from utils.error_messages import format_error


class Config:
    """Manages application configuration."""

    # Default configuration values
    DEFAULT_CONFIG = {
        'input_dir': 'mov',
        'output_dir': 'mp4',
        'source_extension': '.mov',
        'target_extension': '.mp4',
        'encoder_name': 'ffmpeg',
        'tick_interval_ms': 100,
        'max_log_files': 5,
        'log_folder': 'logs'
    }

    def __init__(self, config_path: Path = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to config.json file. If None, uses defaults.
        """
        self.config = self.DEFAULT_CONFIG.copy()

        if config_path and config_path.exists():
            self.load_config(config_path)

    def load_config(self, config_path: Path):
        """Merge a JSON config file over the defaults; keep defaults if it is unusable."""
        try:
            with open(config_path, 'r') as f:
                user_config = json.load(f)
        except json.JSONDecodeError as e:
            self._reject(config_path, "Invalid JSON in config file",
                         f"{e.msg} (Line: {e.lineno}, Column: {e.colno})")
            return
        except OSError as e:
            self._reject(config_path, "Could not read config file", str(e))
            return

        if not isinstance(user_config, dict):
            self._reject(config_path, "Config file must contain a JSON object",
                         f"got {type(user_config).__name__}")
            return

        is_valid, errors = self._validate_config(user_config)
        if not is_valid:
            self._reject(config_path, "Configuration validation failed", "\n\n".join(errors))
            return

        self.config.update(user_config)

    @staticmethod
    def _reject(config_path: Path, reason: str, details: str):
        print()
        print(format_error(
            what_failed="Config file ignored",
            reason=reason,
            action="Fix the file and run again; using default configuration for now",
            location=config_path.absolute(),
            details=details
        ))

    def describe(self) -> Dict[str, Any]:
        """Settings that shape a run, for the log header."""
        return {
            'input': f"{self.input_dir}/*{self.source_extension}",
            'output': f"{self.output_dir}/*{self.target_extension}",
            'encoder': self.encoder_name,
            'tick_interval_ms': self.config['tick_interval_ms'],
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self.config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self.config[key] = value

    def _validate_config(self, config: Dict[str, Any]) -> Tuple[bool, List[str]]:
        """
        Validate configuration dictionary.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        errors = []

        # Validate numeric ranges
        numeric_fields = {
            'tick_interval_ms': (10, 5000, "Spinner tick interval", 100),
            'max_log_files': (1, 100, "Maximum log files", 5),
        }

        for field, (min_val, max_val, display_name, example) in numeric_fields.items():
            if field in config:
                value = config[field]
                if not isinstance(value, int) or isinstance(value, bool):
                    errors.append(
                        f"ERROR: Invalid config value\n"
                        f"  Field: {field}\n"
                        f"  Value: {repr(value)} ({type(value).__name__})\n"
                        f"  Expected: number (integer)\n"
                        f"  Example: {example}\n"
                        f"  Valid range: {min_val} to {max_val}"
                    )
                elif value < min_val or value > max_val:
                    errors.append(
                        f"ERROR: Invalid config value\n"
                        f"  Field: {field}\n"
                        f"  Value: {value}\n"
                        f"  Expected: number between {min_val} and {max_val}\n"
                        f"  Example: {example}"
                    )

        # Extensions must be strings starting with a dot
        extension_fields = {
            'source_extension': '.mov',
            'target_extension': '.mp4',
        }

        for field, example in extension_fields.items():
            if field in config:
                value = config[field]
                if not isinstance(value, str):
                    errors.append(
                        f"ERROR: Invalid config value\n"
                        f"  Field: {field}\n"
                        f"  Value: {repr(value)} ({type(value).__name__})\n"
                        f"  Expected: string\n"
                        f"  Example: {example}"
                    )
                elif not value.startswith('.') or len(value) < 2:
                    errors.append(
                        f"ERROR: Invalid config value\n"
                        f"  Field: {field}\n"
                        f"  Problem: Extensions must start with '.'\n"
                        f"  Example: {example} (note the dot)"
                    )

        # Validate string fields
        for field in ('input_dir', 'output_dir', 'encoder_name', 'log_folder'):
            if field in config:
                if not isinstance(config[field], str) or not config[field]:
                    errors.append(f"{field} must be a non-empty string, got {repr(config[field])}")

        return (len(errors) == 0, errors)

    @property
    def input_dir(self) -> Path:
        """Get directory scanned for source files."""
        return Path(self.config['input_dir'])

    @property
    def output_dir(self) -> Path:
        """Get directory converted files are written to."""
        return Path(self.config['output_dir'])

    @property
    def source_extension(self) -> str:
        return self.config['source_extension']

    @property
    def target_extension(self) -> str:
        return self.config['target_extension']

    @property
    def encoder_name(self) -> str:
        return self.config['encoder_name']

    @property
    def tick_interval(self) -> float:
        """Get spinner tick interval in seconds."""
        return self.config['tick_interval_ms'] / 1000.0

    @property
    def max_log_files(self) -> int:
        """Get maximum number of log files to keep."""
        return self.config['max_log_files']

    @property
    def log_folder(self) -> str:
        """Get log folder path."""
        return self.config['log_folder']
