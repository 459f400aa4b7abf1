"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from deliberate.domain.model import Question
from deliberate.domain.repository import QuestionRepository
from deliberate.domain.value import Email, QuestionId
from deliberate.persistence.mappers import question_to_dict, row_to_question
from deliberate.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def find_all(self) -> List[Question]:
        """Find every question, newest first."""
        stmt = select(questions_table).order_by(
            questions_table.c.created_at.desc(), questions_table.c.id.desc()
        )
        result = await self.session.execute(stmt)
        return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def find_visible_to(self, email: Email) -> List[Question]:
        """Find active questions listing an email, newest first."""
        stmt = (
            select(questions_table)
            .where(
                questions_table.c.is_active.is_(True),
                questions_table.c.allowed_emails.any(email.root),
            )
            .order_by(
                questions_table.c.created_at.desc(), questions_table.c.id.desc()
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def save(self, question: Question) -> Question:
        """Save a question (create or full overwrite)."""
        with logfire.span("question_repository.save", question_id=str(question.id)):
            existing = await self.find_by_id(question.id)
            question_dict = question_to_dict(question)

            if existing:
                logfire.info("Updating existing question", question_id=str(question.id))
                stmt = (
                    update(questions_table)
                    .where(questions_table.c.id == question.id)
                    .values(**question_dict)
                )
            else:
                logfire.info("Inserting new question", question_id=str(question.id))
                stmt = insert(questions_table).values(**question_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question; the FK cascade removes anything left beneath it."""
        stmt = delete(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
