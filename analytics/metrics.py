"""
Quiz Results Analytics
======================

This module turns a quiz session into the structures rendered on the
results screen: a verdict line, a per-question review table and a score
breakdown chart.
"""

import pandas as pd
import plotly.express as px

import config
from models.quiz_models import QuizSession

REVIEW_COLUMNS = ["#", "Question", "Your Answer", "Correct Answer", "Correct", "Explanation"]


def performance_verdict(score: int, threshold: int = config.ADVANCED_SCORE_THRESHOLD) -> str:
    if score >= threshold:
        return "Advanced Security Consciousness."
    return "Further training recommended."


def session_review_frame(session: QuizSession) -> pd.DataFrame:
    """
    One row per answered question, in the order they were asked.
    Options are reported as text since the letters were reshuffled.
    """
    questions = {q.id: q for q in session.questions}
    rows = []
    for number, response in enumerate(session.responses, start=1):
        question = questions[response.question_id]
        rows.append({
            "#": number,
            "Question": question.question,
            "Your Answer": question.options[response.selected_option],
            "Correct Answer": question.correct_option,
            "Correct": response.correct,
            "Explanation": question.explanation,
        })
    return pd.DataFrame(rows, columns=REVIEW_COLUMNS)


def score_breakdown(session: QuizSession) -> dict:
    correct = sum(1 for r in session.responses if r.correct)
    return {"Correct": correct, "Incorrect": len(session.responses) - correct}


def score_breakdown_figure(session: QuizSession):
    breakdown = score_breakdown(session)
    df_plot = pd.DataFrame({
        "Outcome": list(breakdown.keys()),
        "Questions": list(breakdown.values()),
    })
    fig = px.bar(
        df_plot,
        x="Outcome",
        y="Questions",
        color="Outcome",
        color_discrete_map={"Correct": "#2ca02c", "Incorrect": "#d62728"},
        text="Questions",
    )
    fig.update_layout(
        yaxis=dict(range=[0, max(session.total, 1)], dtick=1, title=None),
        xaxis=dict(title=None),
        height=260,
        margin=dict(l=10, r=10, t=10, b=10),
        showlegend=False,
    )
    return fig
