"""
Pydantic schema definitions for API payloads.

Schemas describe the wire shape of request and response bodies and
are kept separate from the store so that the API representation can
change independently of how records are held in memory.
"""
