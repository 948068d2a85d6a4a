#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
SimMath Main Entry Point
------------------------
When run as `simmath` or `python -m simmath`, runs a script with the
SimMath environment injected or opens an interactive shell.
"""

from simmath.cli import main

if __name__ == "__main__":
    main()
