from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from hirematch.models import ValidationError, normalize_whitespace


class UserRole(str, Enum):
    CANDIDATE = "candidate"
    EMPLOYER = "employer"


class EntityKind(str, Enum):
    JOBS = "jobs"
    CANDIDATES = "candidates"
    APPLICATIONS = "applications"


@dataclass(frozen=True)
class SessionContext:
    """
    Who is searching. Passed explicitly to the search layer; the identity
    provider that produced it stays outside this package.
    """
    user_id: str
    role: UserRole

    def __post_init__(self) -> None:
        object.__setattr__(self, "user_id", normalize_whitespace(self.user_id))
        if not self.user_id:
            raise ValidationError("user_id must not be empty")
        try:
            object.__setattr__(self, "role", UserRole(self.role))
        except ValueError:
            raise ValidationError(f"Unknown role: {self.role!r}") from None

    def searchable_kind(self) -> EntityKind:
        # Candidates browse the job board; employers browse candidates.
        return EntityKind.JOBS if self.role is UserRole.CANDIDATE else EntityKind.CANDIDATES

    def browsable_kinds(self) -> Tuple[EntityKind, ...]:
        """Candidates also review their own applications."""
        if self.role is UserRole.CANDIDATE:
            return (EntityKind.JOBS, EntityKind.APPLICATIONS)
        return (EntityKind.CANDIDATES,)

    def to_dict(self) -> Dict[str, Any]:
        return {"user_id": self.user_id, "role": self.role.value}
