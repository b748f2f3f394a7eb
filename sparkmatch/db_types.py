"""Domain records and result helpers shared by the database layer and its callers.

A database result is either a value or a :class:`DbError`. Operations that
succeed without producing a value return ``None``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, TypeVar, Union

__all__ = [
    "DbErrc",
    "DbError",
    "DbResult",
    "db_ok",
    "db_value",
    "db_error",
    "RegisteredUser",
    "LoginResult",
    "UserSummary",
    "UserProfile",
    "UserListResult",
    "UpdateFields",
    "QuestionnaireAnswer",
    "QuestionnaireSubmission",
    "CompatibilityScore",
    "Event",
    "EventParticipant",
    "EventRegistration",
    "CreateEventInput",
    "AlgorithmRunRecord",
    "PersistRunInput",
    "Match",
    "Message",
    "MessagePage",
]

T = TypeVar("T")


class DbErrc(enum.Enum):
    """Error categories reported by the database layer."""

    OK = enum.auto()
    NOT_FOUND = enum.auto()  # HTTP 404
    CONFLICT = enum.auto()  # HTTP 409, e.g. duplicate email
    UNAUTHORIZED = enum.auto()  # HTTP 401, bad credentials
    INVALID_INPUT = enum.auto()  # HTTP 400, constraint the caller can fix
    INTERNAL_ERROR = enum.auto()  # HTTP 500


@dataclass
class DbError:
    """An error code with a message meant for server logs."""

    code: DbErrc
    message: str


DbResult = Union[T, DbError]


def db_ok(result: DbResult[T]) -> bool:
    """Return True if ``result`` holds a value rather than a :class:`DbError`."""
    return not isinstance(result, DbError)


def db_value(result: DbResult[T]) -> T:
    """Return the value held by ``result``; raise ValueError if it is an error."""
    if isinstance(result, DbError):
        raise ValueError(f"result holds an error: {result.code.name}: {result.message}")
    return result


def db_error(result: DbResult[T]) -> DbError:
    """Return the error held by ``result``; raise ValueError if it is a value."""
    if not isinstance(result, DbError):
        raise ValueError("result holds a value, not an error")
    return result


# ── Users ─────────────────────────────────────────────────────────────────────


@dataclass
class RegisteredUser:
    id: int
    alias: str


@dataclass
class LoginResult:
    user_id: int
    alias: str
    role: str


@dataclass
class UserSummary:
    id: int
    alias: str
    gender: str
    registered_at: str
    has_completed_questionnaire: bool


@dataclass
class UserProfile:
    id: int
    alias: str
    gender: str
    age: int
    bio: Optional[str] = None
    # Raw PostgreSQL TEXT[] literal such as "{hiking,jazz}".
    interests: Optional[str] = None
    has_completed_questionnaire: bool = False


@dataclass
class UserListResult:
    users: list[UserSummary] = field(default_factory=list)
    page: int = 1
    limit: int = 0


@dataclass
class UpdateFields:
    """Fields to change on a user; ``None`` leaves a field untouched."""

    alias: Optional[str] = None
    bio: Optional[str] = None
    age: Optional[int] = None
    interests: Optional[list[str]] = None


# ── Questionnaire ─────────────────────────────────────────────────────────────


@dataclass
class QuestionnaireAnswer:
    question_id: int
    answer: str


@dataclass
class QuestionnaireSubmission:
    submission_id: int
    user_id: int
    submitted_at: str


# ── Compatibility ─────────────────────────────────────────────────────────────


@dataclass
class CompatibilityScore:
    man_id: int
    woman_id: int
    score: int


# ── Events ────────────────────────────────────────────────────────────────────


@dataclass
class Event:
    id: int
    name: str
    description: Optional[str]
    event_date: str
    max_participants: int
    registered_count: int
    status: str
    default_algorithm: str


@dataclass
class EventParticipant:
    user_id: int
    alias: str
    registered_at: str


@dataclass
class EventRegistration:
    event_id: int
    user_id: int
    registered_at: str


@dataclass
class CreateEventInput:
    name: str
    description: Optional[str]
    event_date: str
    max_participants: int
    algorithm_type: str
    threshold_override: Optional[int]
    created_by: int


# ── Algorithm runs ────────────────────────────────────────────────────────────


@dataclass
class AlgorithmRunRecord:
    id: int
    event_id: int
    algorithm: str
    results_json: str
    total_score: int
    matched_count: int
    avg_score: float
    ran_at: str


@dataclass
class PersistRunInput:
    event_id: int
    algorithm: str
    threshold: Optional[int]
    results_json: str
    total_score: int
    matched_count: int
    avg_score: float


# ── Matches and messages ──────────────────────────────────────────────────────


@dataclass
class Match:
    id: int
    event_id: int
    man_id: int
    man_alias: str
    woman_id: int
    woman_alias: str
    score: int
    status: str
    accepted_by_man: bool
    accepted_by_woman: bool
    created_at: str


@dataclass
class Message:
    id: int
    match_id: int
    sender_id: int
    text: str
    sent_at: str


@dataclass
class MessagePage:
    messages: list[Message] = field(default_factory=list)
    has_more: bool = False