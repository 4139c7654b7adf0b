"""
API package containing versioned routes.

A version subpackage (e.g. ``v1``) exposes a function building its
top‑level router, which includes all of its entity endpoints.
"""
