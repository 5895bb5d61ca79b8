"""
Server entry point.

Allows running as: python -m ghost_mcp
"""

from .server import main

if __name__ == "__main__":
    main()
