"""
API package containing the HTTP routes.

``router`` aggregates the domain routers defined in ``endpoints``;
``deps`` provides the FastAPI dependencies shared between them.
"""
