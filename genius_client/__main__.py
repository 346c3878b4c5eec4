#!/usr/bin/env python3
"""
Enable execution of the genius_client package as a module.

This allows running the package with: python -m genius_client
"""

from .cli.main import main

if __name__ == "__main__":
    main()
