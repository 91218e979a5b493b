"""Command-line interface modules for thermvisc batch execution.

This package contains the core execution logic, making scripts/ optional.
"""

from thermvisc.cli.run_thermvisc import run_batch, main

__all__ = ['run_batch', 'main']
