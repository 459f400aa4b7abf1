"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from deliberate.domain.model import ProCon, Question, Solution, Vote
from deliberate.domain.value import (
    Email,
    Polarity,
    ProConId,
    QuestionId,
    SolutionId,
    UserId,
    VoteValue,
)


def _uuid(value: Any) -> UUID:
    # asyncpg returns UUID objects, other drivers may hand back strings
    return UUID(value) if isinstance(value, str) else value


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        tags=list(row.get("tags") or []),
        owner_id=UserId(_uuid(row["owner_id"])),
        allowed_emails=[Email(email) for email in row.get("allowed_emails") or []],
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Emails are flattened to plain strings by ``model_dump``.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return question.model_dump()


def row_to_solution(row: Dict[str, Any]) -> Solution:
    """Convert database row to Solution domain model."""
    return Solution(
        id=SolutionId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def solution_to_dict(solution: Solution) -> Dict[str, Any]:
    """Convert Solution domain model to database dict."""
    return solution.model_dump()


def row_to_procon(row: Dict[str, Any]) -> ProCon:
    """Convert database row to ProCon domain model."""
    return ProCon(
        id=ProConId(_uuid(row["id"])),
        solution_id=SolutionId(_uuid(row["solution_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        polarity=Polarity(row["polarity"]),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def procon_to_dict(procon: ProCon) -> Dict[str, Any]:
    """Convert ProCon domain model to database dict.

    Args:
        procon: ProCon domain model

    Returns:
        Dict suitable for database insertion
    """
    data = procon.model_dump()
    data["polarity"] = procon.polarity.value
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        user_id=UserId(_uuid(row["user_id"])),
        procon_id=ProConId(_uuid(row["procon_id"])),
        value=VoteValue(row["value"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["value"] = int(vote.value)
    return data
