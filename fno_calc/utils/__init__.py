"""Utility module"""
from .logger import Logger, setup_logging
from .helpers import charges_to_frame, format_inr

__all__ = ['Logger', 'setup_logging', 'charges_to_frame', 'format_inr']
