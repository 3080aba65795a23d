"""Strongly typed identifiers for UniFlow domain entities."""

from typing import NewType
from uuid import UUID

# Identity provider account id (Firebase uid); also the profile key
AccountId = NewType("AccountId", str)
SetupTokenId = NewType("SetupTokenId", UUID)
