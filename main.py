#!/usr/bin/env python3
"""
cmddispatch demo CLI.

This is a convenience wrapper for running the demo from the project root.
For installed packages, use the cmddispatch command instead.
"""

from cmddispatch.__main__ import main

if __name__ == "__main__":
    main()
