"""
Query parameter helpers shared by the entity routers.
"""

from typing import Optional

from fastapi import HTTPException, status


def clean_term(term: Optional[str]) -> Optional[str]:
    """Trim a search term; blank terms become ``None``."""
    if term is None:
        return None
    return term.strip() or None


def require_term(term: Optional[str]) -> str:
    """Return the trimmed search term or reject the request with 400."""
    cleaned = clean_term(term)
    if cleaned is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Search term is required")
    return cleaned
