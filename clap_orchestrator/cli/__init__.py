"""
CLI module for CLAP Orchestrator.

This module provides the command-line interface, including the main entry
point installed as the ``clap`` console script.
"""

from .commands import main

__all__ = ["main"]
