"""
Markdown Link Checker.

Finds the http(s) links in a Markdown document and checks that each one
answers with a successful status.
"""

__version__ = "1.0.0"
