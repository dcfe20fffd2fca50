"""
F&O trade net-profit calculator
"""
from . import application
from . import domain
from . import exceptions

__all__ = [
    'application',
    'domain',
    'exceptions',
]
