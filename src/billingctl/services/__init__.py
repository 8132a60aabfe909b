"""Service layer — command routing, processing, and dry-run validation.

Services may import from domain, serialization, handlers, and plugins.
They must never import from commands or output.
"""
