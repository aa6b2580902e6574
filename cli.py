#!/usr/bin/env python3
"""Run the rmb CLI from a source checkout: py cli.py convert 1234.56"""

from rmb.cli import app


if __name__ == '__main__':
    app()
