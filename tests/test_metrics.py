from __future__ import annotations

import plotly.graph_objects as go

from components.metrics import apply_plotly_theme, ratings_frame
from config import THEME
from data.records import WineRecord


def test_apply_plotly_theme_sets_club_look():
    fig = go.Figure(go.Bar(x=[8.5], y=["Cornas"], orientation="h"))

    themed = apply_plotly_theme(fig, x_title="Rating (1-10)")

    assert themed is fig
    assert fig.layout.paper_bgcolor == THEME["bg_card"]
    assert fig.layout.showlegend is False
    assert fig.layout.xaxis.title.text == "Rating (1-10)"
    assert fig.layout.yaxis.gridcolor == THEME["grid"]


def test_ratings_frame_skips_unrated_wines():
    wines = [
        WineRecord(id=1, event_id=1, name="Hermitage", rating=9.0, is_winner=True),
        WineRecord(id=2, event_id=1, name="Unrated"),
        WineRecord(id=3, event_id=1, name="Crozes", rating=7.5),
    ]

    df = ratings_frame(wines)

    assert list(df["wine"]) == ["Hermitage", "Crozes"]
    assert list(df["result"]) == ["Winner", "Entry"]
