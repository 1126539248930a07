"""
movconvert Core Module
Handles file discovery, encoder invocation and the batch loop.
"""

from .config import Config
from .logger import setup_logging
from .models import BatchSummary, ConversionJob, ConversionOutcome, Failure, Success
from .errors import ConverterError, DiscoveryError, EncoderNotFound

__all__ = [
    'Config',
    'setup_logging',
    'BatchSummary',
    'ConversionJob',
    'ConversionOutcome',
    'Success',
    'Failure',
    'ConverterError',
    'DiscoveryError',
    'EncoderNotFound',
]
