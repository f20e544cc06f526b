"""
Quiz Engine
===========

Draws a randomized session from the question pool and drives the
answer / advance state machine:

    NotStarted -> InProgress (Unanswered <-> Answered) -> Finished

Every session shuffles the whole pool, keeps the first questions and then
shuffles each question's options, remapping the answer index so the correct
choice never sits in a predictable slot.
"""

import enum
import logging
import random
from dataclasses import replace
from typing import Optional, Sequence

from models.quiz_models import QuestionRecord, QuizResponse, QuizSession

logger = logging.getLogger(__name__)

DEFAULT_SESSION_SIZE = 10


class QuizError(Exception):
    """Base class for quiz contract violations."""


class InsufficientPoolError(QuizError):
    pass


class QuizStateError(QuizError, RuntimeError):
    pass


class InvalidOptionError(QuizError, ValueError):
    pass


class QuizState(enum.Enum):
    NOT_STARTED = "not_started"
    UNANSWERED = "unanswered"
    ANSWERED = "answered"
    FINISHED = "finished"


def shuffle_options(question: QuestionRecord, rng: random.Random) -> QuestionRecord:
    """Returns a copy of the question with shuffled options and the answer remapped."""
    paired = [(text, idx == question.answer) for idx, text in enumerate(question.options)]
    rng.shuffle(paired)
    new_answer = next(idx for idx, (_, is_correct) in enumerate(paired) if is_correct)
    return replace(question, options=tuple(text for text, _ in paired), answer=new_answer)


class QuizEngine:
    def __init__(self, pool: Sequence[QuestionRecord], session_size: int = DEFAULT_SESSION_SIZE,
                 rng: Optional[random.Random] = None):
        ids = [q.id for q in pool]
        if len(ids) != len(set(ids)):
            raise ValueError("Question pool contains duplicate identifiers")
        self._pool = tuple(pool)
        self.session_size = session_size
        self._rng = rng or random.Random()
        self._session: Optional[QuizSession] = None

    @property
    def pool(self):
        return self._pool

    @property
    def session(self) -> Optional[QuizSession]:
        return self._session

    @property
    def state(self) -> QuizState:
        session = self._session
        if session is None:
            return QuizState.NOT_STARTED
        if session.finished:
            return QuizState.FINISHED
        return QuizState.ANSWERED if session.feedback_shown else QuizState.UNANSWERED

    def start(self) -> QuizSession:
        """Builds a fresh session, discarding any previous one."""
        if len(self._pool) < self.session_size:
            raise InsufficientPoolError(
                f"Need {self.session_size} questions, pool only has {len(self._pool)}"
            )

        shuffled = list(self._pool)
        self._rng.shuffle(shuffled)
        selected = [shuffle_options(q, self._rng) for q in shuffled[:self.session_size]]

        self._session = QuizSession(questions=selected)
        logger.debug("Started quiz session with questions %s", [q.id for q in selected])
        return self._session

    def answer(self, option_index: int) -> QuizSession:
        session = self._require_in_progress()
        question = session.current_question

        if not 0 <= option_index < len(question.options):
            raise InvalidOptionError(
                f"Option {option_index} is out of range for question {question.id}"
            )

        # Feedback already shown: ignore double submissions
        if session.feedback_shown:
            return session

        correct = option_index == question.answer
        session.selected_option = option_index
        session.feedback_shown = True
        session.responses.append(QuizResponse(question.id, option_index, correct))
        if correct:
            session.score += 1
        return session

    def advance(self) -> QuizSession:
        session = self._require_in_progress()
        if not session.feedback_shown:
            raise QuizStateError("Answer the current question before advancing")

        if session.current_index + 1 < len(session.questions):
            session.current_index += 1
            session.selected_option = None
            session.feedback_shown = False
        else:
            session.finished = True
            logger.debug("Quiz finished with score %d/%d", session.score, session.total)
        return session

    def _require_in_progress(self) -> QuizSession:
        if self._session is None:
            raise QuizStateError("No quiz session has been started")
        if self._session.finished:
            raise QuizStateError("Quiz session is already finished")
        return self._session
