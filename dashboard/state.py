"""
Application State
=================

All UI state lives in one AppState object stored under a single
st.session_state key and handed explicitly to every render function.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

import config
from content.catalog import QUIZ_QUESTIONS, STATIC_INSIGHTS
from models.diagnostic_models import DiagnosticSnapshot, Suggestion
from quiz.engine import QuizEngine

PAGES = ("home", "crimes", "safety", "quiz", "report")
STATE_KEY = "cyberguard"


@dataclass
class AppState:
    engine: QuizEngine
    theme: str = config.DEFAULT_THEME
    current_page: str = "home"
    selected_crime: Optional[str] = None
    quiz_active: bool = False
    diagnostic_open: bool = False
    diagnostic_snapshot: Optional[DiagnosticSnapshot] = None
    suggestions: List[Suggestion] = field(default_factory=list)
    insight_index: int = 0
    last_auto_refresh: int = 0

    def navigate(self, page: str):
        if page not in PAGES:
            raise ValueError(f"Unknown page: {page}")
        self.current_page = page
        self.selected_crime = None
        self.quiz_active = False

    def start_quiz(self):
        self.engine.start()
        self.quiz_active = True

    def rotate_insight(self):
        self.insight_index = (self.insight_index + 1) % len(STATIC_INSIGHTS)

    @property
    def current_insight(self) -> str:
        return STATIC_INSIGHTS[self.insight_index % len(STATIC_INSIGHTS)]

    def toggle_theme(self) -> str:
        self.theme = "light" if self.theme == "dark" else "dark"
        return self.theme

    def open_diagnostic(self):
        # Each audit starts from a clean slate; snapshots are never reused
        self.diagnostic_open = True
        self.diagnostic_snapshot = None
        self.suggestions = []

    def close_diagnostic(self):
        self.diagnostic_open = False
        self.diagnostic_snapshot = None
        self.suggestions = []


def new_app_state(theme: str = config.DEFAULT_THEME, rng: Optional[random.Random] = None) -> AppState:
    rng = rng or random.Random()
    return AppState(
        engine=QuizEngine(QUIZ_QUESTIONS, session_size=config.QUIZ_SESSION_SIZE, rng=rng),
        theme=theme,
        insight_index=rng.randrange(len(STATIC_INSIGHTS)),
    )
