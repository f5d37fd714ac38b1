"""
TeaCodec Entry Point
=====================

Allows running the CLI via: python -m teacodec
"""

from teacodec.cli import main

if __name__ == "__main__":
    main()
