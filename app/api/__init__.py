"""
API layer for the social backend.

Exposes the HTTP endpoints (status, auth, posts) at the root path; routers
live in the v1 package.
"""
