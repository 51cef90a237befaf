"""Service layer — composes clock, localizer and compilers into ServiceResults.

Services may import from domain, config and infrastructure.
They must never import from commands or output.
"""
