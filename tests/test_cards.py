from __future__ import annotations

from datetime import date

from components.cards import event_card_html, wine_card_html
from data.records import EventRecord, WineRecord

PAYLOAD = '<img src=x onerror="alert(1)">'


def test_event_card_escapes_admin_text():
    event = EventRecord(
        id=7,
        title=PAYLOAD,
        date=date(2025, 9, 12),
        theme="Rhône <Syrah>",
        budget="< 1,500 THB",
        location="Casa & Boo",
        excerpt="</div><script>x()</script>",
        status="completed",
        winner=PAYLOAD,
    )

    html = event_card_html(event)

    assert "<img" not in html
    assert "<script>" not in html
    assert '&lt;img src=x onerror=&quot;alert(1)&quot;&gt;' in html
    assert "Rhône &lt;Syrah&gt;" in html
    assert "Casa &amp; Boo" in html
    assert html.count("<div") == html.count("</div>")


def test_wine_card_escapes_admin_text():
    wine = WineRecord(id=1, event_id=7, name=PAYLOAD, producer="Jamet & Fils", notes="<b>pepper</b>", rating=9.2)

    html = wine_card_html(wine, rank=1)

    assert "<img" not in html
    assert "<b>" not in html
    assert "Jamet &amp; Fils" in html
    assert "9.2/10" in html
