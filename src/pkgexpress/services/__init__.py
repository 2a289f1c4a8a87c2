"""Service layer: the quote flow and its ServiceResult summary.

Services may import from the domain layer.
They must never import from the CLI, output, or config.
"""
