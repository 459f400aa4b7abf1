"""Question service: the facade used by the application layer.

Question lifecycle: created active -> deactivated (hidden from non-admins).
Deletion is a separate admin operation that removes the question together
with its solutions, pros/cons and their votes.
"""

from typing import Sequence
from uuid import uuid4

import logfire

from deliberate.config import ContentSettings
from deliberate.domain.error import NotFoundError, ValidationError
from deliberate.domain.model import (
    Principal,
    ProConView,
    Question,
    QuestionView,
    SolutionView,
    VoteResult,
    VoteState,
)
from deliberate.domain.model.common import utcnow
from deliberate.domain.repository import QuestionRepository
from deliberate.domain.value import (
    Email,
    Polarity,
    ProConId,
    QuestionId,
    SolutionId,
    UserId,
)

from .access_gate import AccessGate
from .base import Service
from .solution_aggregator import SolutionAggregator
from .votable_store import VotableStore
from .vote_ledger import VoteLedger


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        votable_store: VotableStore,
        vote_ledger: VoteLedger,
        solution_aggregator: SolutionAggregator,
        access_gate: AccessGate,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            votable_store: Votable store for solutions and pros/cons
            vote_ledger: Vote ledger
            solution_aggregator: Read-side aggregator
            access_gate: Access gate
            content_settings: Length bounds for content
        """
        self.question_repository = question_repository
        self.votable_store = votable_store
        self.vote_ledger = vote_ledger
        self.solution_aggregator = solution_aggregator
        self.access_gate = access_gate
        self.content_settings = content_settings

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_question_view(
        self, principal: Principal, question_id: QuestionId
    ) -> QuestionView:
        """Get a question with its solutions, pros/cons and vote state.

        Raises:
            NotFoundError: Question missing, or inactive for a non-admin
            AccessDeniedError: Question active but principal not listed
        """
        return await self.solution_aggregator.get_question_view(principal, question_id)

    async def list_questions(self, principal: Principal) -> list[Question]:
        """List the questions a principal may open, newest first.

        Admins see every question. Others see active questions listing them.
        """
        with logfire.span("question_service.list_questions", user_id=str(principal.id)):
            if principal.is_admin:
                questions = await self.question_repository.find_all()
            else:
                questions = await self.question_repository.find_visible_to(
                    principal.email
                )
            # The repository query already filters; the gate stays authoritative
            visible = [q for q in questions if self.access_gate.can_read(principal, q)]
            logfire.info(
                "Questions listed", user_id=str(principal.id), count=len(visible)
            )
            return visible

    async def participant_counts(
        self, questions: Sequence[Question]
    ) -> dict[QuestionId, int]:
        """Count the distinct people who took part in each question.

        A participant authored a solution or a pro/con under the question,
        or holds a vote on one of its pros/cons. Inactive solutions count:
        the contributions happened even if they are hidden now.

        Args:
            questions: Questions the caller is already allowed to see

        Returns:
            Mapping of every given question ID to its participant count
        """
        if not questions:
            return {}

        question_ids = [q.id for q in questions]
        participants: dict[QuestionId, set[UserId]] = {
            question_id: set() for question_id in question_ids
        }

        with logfire.span(
            "question_service.participant_counts", count=len(question_ids)
        ):
            # Three batch reads regardless of how many questions are listed
            solutions = await self.votable_store.list_solutions_for_questions(
                question_ids
            )
            question_of: dict[SolutionId, QuestionId] = {}
            for solution in solutions:
                question_of[solution.id] = solution.question_id
                participants[solution.question_id].add(solution.author_id)

            procons = await self.votable_store.list_procons(list(question_of))
            for procon in procons:
                participants[question_of[procon.solution_id]].add(procon.author_id)

            voters = await self.vote_ledger.voters([p.id for p in procons])
            for procon in procons:
                participants[question_of[procon.solution_id]].update(
                    voters.get(procon.id, set())
                )

            return {
                question_id: len(users) for question_id, users in participants.items()
            }

    # ------------------------------------------------------------------
    # Question lifecycle (admin only)
    # ------------------------------------------------------------------

    async def create_question(
        self,
        principal: Principal,
        title: str,
        description: str,
        tags: Sequence[str],
        allowed_emails: Sequence[str],
        is_active: bool = True,
    ) -> Question:
        """Create a question.

        Raises:
            NotAdminError: Principal is not an admin
            ValidationError: Invalid title, description, tags or emails
        """
        self.access_gate.require_admin(principal, "create questions")

        with logfire.span("question_service.create_question", user_id=str(principal.id)):
            now = utcnow()
            question = Question(
                id=QuestionId(uuid4()),
                title=self._require_text(
                    "title", title, self.content_settings.question_title_max_length
                ),
                description=self._require_text(
                    "description",
                    description,
                    self.content_settings.question_description_max_length,
                ),
                tags=self._clean_tags(tags),
                owner_id=principal.id,
                allowed_emails=self._parse_emails(allowed_emails),
                is_active=is_active,
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created",
                question_id=str(saved.id),
                allowed=len(saved.allowed_emails),
            )
            return saved

    async def update_question(
        self,
        principal: Principal,
        question_id: QuestionId,
        title: str,
        description: str,
        tags: Sequence[str],
        allowed_emails: Sequence[str],
        is_active: bool,
    ) -> Question:
        """Overwrite a question's metadata.

        Every field is replaced by the supplied value; nothing is merged.

        Raises:
            NotAdminError: Principal is not an admin
            ValidationError: Invalid title, description, tags or emails
            NotFoundError: Question does not exist
        """
        self.access_gate.require_admin(principal, "update questions")

        with logfire.span(
            "question_service.update_question", question_id=str(question_id)
        ):
            clean_title = self._require_text(
                "title", title, self.content_settings.question_title_max_length
            )
            clean_description = self._require_text(
                "description",
                description,
                self.content_settings.question_description_max_length,
            )
            clean_tags = self._clean_tags(tags)
            emails = self._parse_emails(allowed_emails)

            existing = await self._get_existing(question_id)

            # Domain models are immutable
            updated = existing.model_copy(
                update={
                    "title": clean_title,
                    "description": clean_description,
                    "tags": clean_tags,
                    "allowed_emails": emails,
                    "is_active": is_active,
                    "updated_at": utcnow(),
                }
            )
            saved = await self.question_repository.save(updated)
            logfire.info(
                "Question updated",
                question_id=str(question_id),
                is_active=saved.is_active,
                allowed=len(saved.allowed_emails),
            )
            return saved

    async def deactivate_question(
        self, principal: Principal, question_id: QuestionId
    ) -> Question:
        """Hide a question from everyone but admins.

        Raises:
            NotAdminError: Principal is not an admin
            NotFoundError: Question does not exist
        """
        self.access_gate.require_admin(principal, "deactivate questions")

        with logfire.span(
            "question_service.deactivate_question", question_id=str(question_id)
        ):
            existing = await self._get_existing(question_id)
            if not existing.is_active:
                logfire.info("Question already inactive", question_id=str(question_id))
                return existing

            updated = existing.model_copy(
                update={"is_active": False, "updated_at": utcnow()}
            )
            saved = await self.question_repository.save(updated)
            logfire.info("Question deactivated", question_id=str(question_id))
            return saved

    async def delete_question(
        self, principal: Principal, question_id: QuestionId
    ) -> None:
        """Delete a question with its solutions, pros/cons and votes.

        Raises:
            NotAdminError: Principal is not an admin
            NotFoundError: Question does not exist
        """
        self.access_gate.require_admin(principal, "delete questions")

        with logfire.span(
            "question_service.delete_question", question_id=str(question_id)
        ):
            await self._get_existing(question_id)

            procon_ids = await self.votable_store.remove_for_question(question_id)
            await self.vote_ledger.purge(procon_ids)
            await self.question_repository.delete(question_id)

            logfire.info("Question deleted", question_id=str(question_id))

    # ------------------------------------------------------------------
    # Contributions (allow-listed principals and admins)
    # ------------------------------------------------------------------

    async def create_solution(
        self,
        principal: Principal,
        question_id: QuestionId,
        title: str,
        content: str,
    ) -> SolutionView:
        """Attach a solution to a question.

        Raises:
            NotFoundError: Question missing, or inactive for a non-admin
            AccessDeniedError: Principal not on the allow-list
            ValidationError: Empty or oversized title/content
        """
        question = await self._get_existing(question_id)
        self.access_gate.check_write(principal, question)

        clean_title = self._require_text(
            "title", title, self.content_settings.solution_title_max_length
        )
        clean_content = self._require_text(
            "content", content, self.content_settings.solution_content_max_length
        )

        solution = await self.votable_store.add_solution(
            question_id=question.id,
            author_id=principal.id,
            title=clean_title,
            content=clean_content,
        )
        return SolutionView.build(solution, pros=[], cons=[])

    async def create_pro(
        self, principal: Principal, solution_id: SolutionId, content: str
    ) -> ProConView:
        """Attach a pro to a solution."""
        return await self._create_procon(principal, solution_id, Polarity.PRO, content)

    async def create_con(
        self, principal: Principal, solution_id: SolutionId, content: str
    ) -> ProConView:
        """Attach a con to a solution."""
        return await self._create_procon(principal, solution_id, Polarity.CON, content)

    async def vote(
        self, principal: Principal, procon_id: ProConId, value: int
    ) -> VoteResult:
        """Cast a vote on a pro/con after checking access to its question.

        Raises:
            NotFoundError: Pro/con missing or hidden from the principal
            AccessDeniedError: Principal not on the allow-list
            InvalidVoteValueError: Value is not +1 or -1
            ConflictError: Concurrent change the ledger could not resolve
        """
        procon = await self.votable_store.get_procon(procon_id)
        if procon is None:
            raise NotFoundError("ProCon", str(procon_id))

        solution = await self.votable_store.get_solution(procon.solution_id)
        if solution is None or (not solution.is_active and not principal.is_admin):
            raise NotFoundError("ProCon", str(procon_id))

        question = await self._get_existing(solution.question_id)
        self.access_gate.check_write(principal, question)

        return await self.vote_ledger.cast_vote(principal, procon.id, value)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _create_procon(
        self,
        principal: Principal,
        solution_id: SolutionId,
        polarity: Polarity,
        content: str,
    ) -> ProConView:
        """Create a pro or con.

        Raises:
            NotFoundError: Solution missing or hidden from the principal
            AccessDeniedError: Principal not on the allow-list
            ValidationError: Empty or oversized content
        """
        solution = await self.votable_store.get_solution(solution_id)
        if solution is None or (not solution.is_active and not principal.is_admin):
            raise NotFoundError("Solution", str(solution_id))

        question = await self._get_existing(solution.question_id)
        self.access_gate.check_write(principal, question)

        clean_content = self._require_text(
            "content", content, self.content_settings.procon_content_max_length
        )

        procon = await self.votable_store.add_procon(
            solution_id=solution.id,
            author_id=principal.id,
            polarity=polarity,
            content=clean_content,
        )
        # Nobody has voted on a brand-new item
        return ProConView.build(procon, VoteState())

    async def _get_existing(self, question_id: QuestionId) -> Question:
        question = await self.question_repository.find_by_id(question_id)
        if question is None:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return question

    @staticmethod
    def _require_text(field: str, value: str, max_length: int) -> str:
        text = value.strip() if value else ""
        if not text:
            raise ValidationError(f"{field} is required")
        if len(text) > max_length:
            raise ValidationError(f"{field} must be at most {max_length} characters")
        return text

    def _clean_tags(self, tags: Sequence[str]) -> list[str]:
        cleaned: list[str] = []
        for tag in tags:
            tag = tag.strip()
            if not tag or tag in cleaned:
                continue
            if len(tag) > self.content_settings.tag_max_length:
                raise ValidationError(
                    f"tag must be at most {self.content_settings.tag_max_length} characters"
                )
            cleaned.append(tag)
        if len(cleaned) > self.content_settings.max_tags:
            raise ValidationError(
                f"at most {self.content_settings.max_tags} tags are allowed"
            )
        return cleaned

    @staticmethod
    def _parse_emails(emails: Sequence[str]) -> list[Email]:
        parsed = []
        for raw in emails:
            try:
                parsed.append(Email(raw))
            except ValueError as e:
                raise ValidationError(f"Invalid email address: {raw!r}") from e
        return parsed
