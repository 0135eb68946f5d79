"""
Pydantic schema definitions for API payloads.

Request bodies are parsed into these models and records are
serialised from them, so the JSON codec lives entirely here.
"""
