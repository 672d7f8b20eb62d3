"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling
  the core to I/O libraries.
- Aliases keep Python names idiomatic while the wire format matches what
  consumers of the upstream-style envelope expect (`_id`, `realName`, ...).

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class ProfileSummary(BaseModel):
    """A username the upstream confirmed to exist.

    Only built from a non-null `matchedUser`; never a placeholder.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(
        ...,
        alias="_id",
        min_length=1,
        description="Stable hex identifier derived from the username.",
    )
    username: str = Field(
        ...,
        min_length=1,
        description="Username as resolved by the upstream.",
    )
    real_name: str = Field(
        default="",
        alias="realName",
        description="Public real name, empty when missing.",
    )
    avatar_url: str = Field(
        default="",
        alias="userAvatar",
        description="Avatar URL, empty when missing.",
    )
    ranking: int = Field(
        default=0,
        description="Global contest ranking (0 when unknown).",
    )
    reputation: int = Field(
        default=0,
        description="Community reputation (0 when unknown).",
    )


class SearchResult(BaseModel):
    """Aggregate of one keyword search.

    `users` holds no two entries with the same `username`, in completion order.
    """

    keyword: str = Field(..., description="Keyword as entered by the caller.")
    candidates: int = Field(
        default=0,
        ge=0,
        description="Number of candidate usernames dispatched upstream.",
    )
    users: list[ProfileSummary] = Field(default_factory=list)

    def envelope(self) -> dict[str, Any]:
        """Fixed outer shape consumed by the front end."""

        return {
            "data": {
                "userSearchList": [user.model_dump(by_alias=True) for user in self.users],
            }
        }


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class SubmissionCount(_CamelModel):
    difficulty: str = Field(..., description="All, Easy, Medium or Hard.")
    count: int = 0
    submissions: int = 0


class SubmitStats(_CamelModel):
    ac_submission_num: list[SubmissionCount] = Field(default_factory=list)
    total_submission_num: list[SubmissionCount] = Field(default_factory=list)


class ProfileDetails(_CamelModel):
    ranking: int | None = None
    user_avatar: str | None = None
    real_name: str | None = None
    reputation: int | None = None
    websites: list[str] | None = None
    country_name: str | None = None
    skill_tags: list[str] | None = None
    company: str | None = None
    school: str | None = None
    star_rating: float | None = None
    about_me: str | None = None
    solution_count: int | None = None
    post_view_count: int | None = None


class FullProfile(_CamelModel):
    """Read model over the wide profile query, for terminal rendering only.

    The API relays the upstream body as-is; this model never feeds back
    into a response.
    """

    username: str
    profile: ProfileDetails = Field(default_factory=ProfileDetails)
    submit_stats: SubmitStats | None = None

    @classmethod
    def from_response(cls, body: str) -> FullProfile | None:
        """Parse a raw GraphQL body; `None` when the user was not matched."""

        root = json.loads(body)
        data = root.get("data") if isinstance(root, dict) else None
        matched = data.get("matchedUser") if isinstance(data, dict) else None
        if not isinstance(matched, dict):
            return None
        return cls.model_validate(matched)
