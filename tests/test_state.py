import random

import pytest

from content.catalog import STATIC_INSIGHTS
from dashboard.data_management import load_theme_preference, save_theme_preference
from dashboard.state import new_app_state
from quiz.engine import QuizState


@pytest.fixture
def state():
    return new_app_state(rng=random.Random(5))


def test_new_state_defaults(state):
    assert state.current_page == "home"
    assert state.theme == "dark"
    assert state.engine.state == QuizState.NOT_STARTED
    assert 0 <= state.insight_index < len(STATIC_INSIGHTS)
    assert not state.diagnostic_open


def test_navigate_resets_view_state(state):
    state.navigate("crimes")
    state.selected_crime = "phishing"
    state.navigate("quiz")
    assert state.current_page == "quiz"
    assert state.selected_crime is None

    state.start_quiz()
    assert state.quiz_active
    state.navigate("home")
    assert not state.quiz_active


def test_navigate_rejects_unknown_page(state):
    with pytest.raises(ValueError):
        state.navigate("admin")


def test_start_quiz_uses_ten_questions(state):
    state.start_quiz()
    assert len(state.engine.session.questions) == 10
    assert state.engine.state == QuizState.UNANSWERED


def test_rotate_insight_wraps(state):
    state.insight_index = len(STATIC_INSIGHTS) - 1
    state.rotate_insight()
    assert state.insight_index == 0
    assert state.current_insight == STATIC_INSIGHTS[0]


def test_toggle_theme(state):
    assert state.toggle_theme() == "light"
    assert state.toggle_theme() == "dark"


def test_diagnostic_is_discarded_on_close(state):
    state.open_diagnostic()
    assert state.diagnostic_open
    state.diagnostic_snapshot = object()
    state.suggestions = ["x"]
    state.close_diagnostic()
    assert not state.diagnostic_open
    assert state.diagnostic_snapshot is None
    assert state.suggestions == []


def test_theme_preference_round_trip():
    params = {}
    assert load_theme_preference(params) == "dark"
    save_theme_preference(params, "light")
    assert params == {"theme": "light"}
    assert load_theme_preference(params) == "light"


def test_theme_preference_is_kept_per_client():
    first_browser, second_browser = {}, {}
    save_theme_preference(first_browser, "light")
    assert load_theme_preference(first_browser) == "light"
    assert load_theme_preference(second_browser) == "dark"

    save_theme_preference(second_browser, "dark")
    assert load_theme_preference(first_browser) == "light"


def test_theme_preference_ignores_garbage():
    assert load_theme_preference({"theme": "purple"}) == "dark"


def test_save_rejects_unknown_theme():
    params = {}
    with pytest.raises(ValueError):
        save_theme_preference(params, "purple")
    assert params == {}
