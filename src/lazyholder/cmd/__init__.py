from __future__ import annotations

"""
lazyholder Commands

Runs the singleton variants and races threads against each initialization strategy.
"""

from .holders import cmd

def main():
    cmd()

if __name__ == '__main__':
    main()
