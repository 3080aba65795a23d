"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from uniflow.domain.model import SetupTokenRecord, UserProfile
from uniflow.domain.value import AccountId, SetupTokenId


def row_to_profile(row: Dict[str, Any]) -> UserProfile:
    """Convert database row to UserProfile domain model.

    Args:
        row: Database row as dict

    Returns:
        UserProfile domain model
    """
    return UserProfile(
        id=AccountId(row["id"]),
        display_name=row.get("display_name"),
        email=row.get("email"),
        photo_url=row.get("photo_url"),
        university=row.get("university"),
        major=row.get("major"),
        graduation_year=row.get("graduation_year"),
        bio=row.get("bio"),
        extensions=row.get("extensions") or {},
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_fields_to_columns(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a partial ProfileFields mapping to column values.

    A null ``extensions`` clears the map; the column itself is never null.
    """
    columns = dict(fields)
    if "extensions" in columns and columns["extensions"] is None:
        columns["extensions"] = {}
    return columns


def row_to_setup_token(row: Dict[str, Any]) -> SetupTokenRecord:
    """Convert database row to SetupTokenRecord domain model."""
    return SetupTokenRecord(
        id=SetupTokenId(row["id"]),
        email=row["email"],
        token_hash=row["token_hash"],
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        consumed_at=row.get("consumed_at"),
    )


def setup_token_to_dict(record: SetupTokenRecord) -> Dict[str, Any]:
    """Convert SetupTokenRecord domain model to database dict."""
    return record.model_dump()
