"""Infrastructure layer — clock sources, timezone database, clip storage.

Infrastructure may import from domain (infrastructure -> domain), never
from services, commands, or output.
"""
