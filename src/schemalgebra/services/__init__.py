"""Service layer — algebra operations returning ServiceResult.

Services may import from domain, algebra, and config layers.
They must never import from commands or output.
"""
