"""
API package containing the HTTP routes.

``router`` aggregates the domain routers and ``errors`` renders every
failure as a plain text response.
"""
