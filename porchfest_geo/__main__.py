#!/usr/bin/env python3
"""
Enable execution of the porchfest_geo package as a module.

This allows running the package with: python -m porchfest_geo
"""

from .cli.main import main

if __name__ == "__main__":
    main()
