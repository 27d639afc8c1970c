#!/usr/bin/env python3
"""
pascal-check CLI - Entry point for the Pascal subset checker.

This module allows running the checker as:
    python -m pascal_checker program.pas
    pascal-check program.pas  (when installed via pip)
"""

from pascal_checker.cli import main

if __name__ == "__main__":
    main()
