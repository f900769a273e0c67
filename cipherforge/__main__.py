"""
Cipher Forge Entry Point
=========================

Allows running the Cipher Forge via: python -m cipherforge
"""

from cipherforge.cli import main

if __name__ == "__main__":
    main()
