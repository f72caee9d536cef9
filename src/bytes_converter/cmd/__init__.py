"""Command line interface modules.

This package provides the command-line tools for:
- Formatting byte counts into human-readable strings
- Parsing human-readable strings into byte counts
- Listing the supported units

The commands are thin wrappers over the library functions in
``bytes_converter.core``.
"""
