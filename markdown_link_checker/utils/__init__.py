"""
Utilities for the Markdown Link Checker.
"""

from markdown_link_checker.utils.logging import StructuredFormatter, reset_logger, setup_logger

__all__ = ['StructuredFormatter', 'reset_logger', 'setup_logger']
