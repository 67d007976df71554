#!/usr/bin/env python3
"""
Entry point for a frozen (PyInstaller) build of the command line client.
"""

import os
import sys


def main():
    # Change to executable directory so adwords.json next to it is found
    if getattr(sys, "frozen", False):
        os.chdir(os.path.dirname(sys.executable))

    from adwords.main import main as client_main

    sys.exit(client_main())


if __name__ == "__main__":
    main()
