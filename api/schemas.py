"""Request bodies and wire shapes for the HTTP API.

Field names are camelCase on the wire to match the frontend.
"""
from typing import Optional

from pydantic import BaseModel


class SimplifyRequest(BaseModel):
    text: Optional[str] = None
    language: Optional[str] = None
    targetAudience: Optional[str] = None
    outputFormat: Optional[str] = None


class DictionaryEntryIn(BaseModel):
    originalTerm: Optional[str] = None
    simplifiedTerm: Optional[str] = None


def entry_out(entry: dict) -> dict:
    return {
        "_id": str(entry["id"]),
        "originalTerm": entry["original_term"],
        "simplifiedTerm": entry["simplified_term"],
    }
