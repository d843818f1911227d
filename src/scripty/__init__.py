"""scripty — helper facade for automation scripts.

Status logging, environment accessors, command execution wrappers with
error propagation, and random identifiers.
"""

__version__ = "1.0.0"
