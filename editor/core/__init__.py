"""
Grid Hull - Editor Core Module

Editor constants.
"""

from . import constants

__all__ = ['constants']
