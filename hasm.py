#!/usr/bin/env python3
"""
Hack Assembler entry point.

Usage: python hasm.py input.asm output.hack [-s] [--verbose]
"""

from hasm.assembler import main

if __name__ == '__main__':
    main()
