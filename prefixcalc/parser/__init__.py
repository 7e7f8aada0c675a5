"""Parser package for prefix arithmetic expressions.

The parsing routines live in :mod:`prefixcalc.parser.atoms` and operate on
a :class:`Parser` instance, which is exposed at the package level together
with the :func:`parse` convenience function.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from .parser import Parser, parse

__all__ = ["Parser", "parse"]
