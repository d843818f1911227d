"""Domain layer — pure helpers with no I/O beyond their inputs.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
