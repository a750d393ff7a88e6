"""
prettyimports: organize the leading imports of JavaScript and TypeScript files.
"""

__version__ = "0.1.0"
