"""
API package containing the route table.

``router.py`` exposes a top‑level ``router`` that includes the
domain‑specific routers found in ``endpoints``.
"""
