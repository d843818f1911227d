"""Service layer — helper operations returning HelperResult.

Services may import from domain, config, and output.
They must never import from commands or call ``sys.exit``.
"""
