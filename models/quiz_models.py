"""
Data Models for the Knowledge Lab
=================================

This module defines the data structures used by the quiz engine and the
content catalog. Records coming from the catalog are frozen dataclasses; the
quiz session is the only mutable model and is owned by the engine.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

OPTIONS_PER_QUESTION = 4


@dataclass(frozen=True)
class QuestionRecord:
    id: int
    question: str
    options: Tuple[str, ...]
    answer: int
    explanation: str

    def __post_init__(self):
        # Lists are accepted for convenience but stored as tuples
        object.__setattr__(self, "options", tuple(self.options))
        if len(self.options) != OPTIONS_PER_QUESTION:
            raise ValueError(
                f"Question {self.id} needs exactly {OPTIONS_PER_QUESTION} options, "
                f"got {len(self.options)}"
            )
        if not 0 <= self.answer < len(self.options):
            raise ValueError(f"Question {self.id} answer index {self.answer} is out of range")

    @property
    def correct_option(self) -> str:
        return self.options[self.answer]


@dataclass(frozen=True)
class QuizResponse:
    question_id: int
    selected_option: int
    correct: bool


@dataclass
class QuizSession:
    questions: List[QuestionRecord]
    current_index: int = 0
    score: int = 0
    selected_option: Optional[int] = None
    feedback_shown: bool = False
    finished: bool = False
    responses: List[QuizResponse] = field(default_factory=list)

    @property
    def current_question(self) -> QuestionRecord:
        return self.questions[self.current_index]

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_last_question(self) -> bool:
        return self.current_index + 1 >= len(self.questions)

    @property
    def last_answer_correct(self) -> Optional[bool]:
        """Correctness of the pick on the current question, None until answered."""
        if not self.feedback_shown or self.selected_option is None:
            return None
        return self.selected_option == self.current_question.answer


@dataclass(frozen=True)
class CyberCrime:
    id: str
    title: str
    icon: str
    short_desc: str
    what_is_it: str
    how_it_happens: str
    example: str
    prevention: Tuple[str, ...] = ()
