#!/usr/bin/env python3
"""
decaf-check CLI - Entry point for the Decaf semantic analyzer.

This module allows running the analyzer as:
    python -m decaf_compiler program.decaf
    decaf-check program.decaf  (when installed via pip)
"""

from decaf_compiler.cli import main

if __name__ == "__main__":
    main()
