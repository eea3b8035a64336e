"""
Endpoint modules for the API.

Each module defines a FastAPI ``router`` for one domain; ``api.router``
mounts them under their URL prefixes.
"""
