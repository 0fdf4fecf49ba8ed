"""
Pydantic schema definitions for API payloads.

Request bodies, the ``User`` record and the response envelopes that
wrap every successful reply.
"""
