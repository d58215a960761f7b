from __future__ import annotations

import streamlit as st

from config import CLUB_NAME, THEME


# Only classes emitted by components/ and views/ live here
CSS_TEMPLATE = """
<style>
@import url('https://fonts.googleapis.com/css2?family=Playfair+Display:wght@600;700&family=Lato:wght@400;700&display=swap');

:root{
  --burgundy: __BURGUNDY__; --burgundy-hover: __BURGUNDY_HOVER__;
  --wine-deep: __WINE_DEEP__; --wine-dark: __WINE_DARK__; --gold: __GOLD__;
  --cream: __CREAM__; --surface: __SURFACE__; --card: __CARD__; --line: __LINE__;
  --ink: __INK__; --ink-soft: __INK_SOFT__; --shadow: __SHADOW__; --r: __RADIUS__px;
}

#MainMenu, footer { visibility: hidden; }
html, body, [data-testid="stAppViewContainer"]{ background: var(--cream) !important; color: var(--ink) !important; font-family: "Lato", system-ui, sans-serif !important; }
h1, h2, h3, .club-title, .hero-title, .section-title{ font-family: "Playfair Display", Georgia, serif !important; color: var(--wine-deep); }
[data-testid="stSidebar"]{ background: var(--surface) !important; border-right: 1px solid var(--line) !important; }
.block-container{ padding-top: 0.75rem !important; }

.club-header{ display: flex; justify-content: space-between; align-items: center; padding: 10px 16px; margin-bottom: 14px;
  background: var(--surface); border: 1px solid var(--line); border-radius: var(--r); box-shadow: var(--shadow); }
.club-title{ font-size: 22px; font-weight: 700; }
.club-subtitle, .event-card-meta, .page-intro-context, .callout-body{ color: var(--ink-soft); font-size: 14px; line-height: 1.5; }
.pill{ border: 1px solid var(--line); border-radius: 999px; padding: 5px 12px; font-size: 13px; font-weight: 700; color: var(--wine-dark); }
.pill .dot{ display: inline-block; width: 8px; height: 8px; margin-right: 6px; border-radius: 50%; background: var(--gold); }

.hero{ padding: 40px 30px; margin-bottom: 16px; border-radius: var(--r); color: #FFF8EE;
  background: radial-gradient(circle at top right, var(--burgundy), var(--wine-dark) 70%); }
.hero-title{ color: #FFF8EE !important; font-size: 46px; margin-bottom: 8px; }
.hero-narrative{ font-size: 18px; opacity: 0.9; }
.section-title{ font-size: 26px; font-weight: 700; margin: 20px 0 10px; border-bottom: 2px solid var(--gold); display: inline-block; }

.value-card, .event-card, .wine-card, .metric-card, .page-intro{
  background: var(--card); border: 1px solid var(--line); border-radius: var(--r); box-shadow: var(--shadow); padding: 14px; margin-bottom: 10px; }
.value-card-title, .event-card-title, .wine-card-title, .page-intro-title, .callout-title{ font-weight: 700; color: var(--wine-deep); margin-bottom: 6px; }
.value-card-title, .event-card-title, .wine-card-title{ font-size: 18px; }
.value-card-body, .event-card-body{ color: var(--ink-soft); font-size: 15px; line-height: 1.55; margin-top: 8px; }
.wine-card.winner{ border: 2px solid var(--gold); background: #FFFBEF; }
.badge{ display: inline-block; margin: 0 6px 4px 0; padding: 2px 10px; border-radius: 999px; font-size: 12px; font-weight: 700; background: var(--gold); color: var(--wine-deep); }
.badge-outline{ background: transparent; border: 1px solid var(--line); color: var(--wine-dark); }

.metric-card{ text-align: center; }
.metric-value{ font-size: 30px; font-weight: 700; color: var(--burgundy); }
.metric-label{ font-size: 13px; letter-spacing: 0.04em; text-transform: uppercase; color: var(--ink-soft); }

.callout{ margin: 12px 0; padding: 12px 16px; background: var(--card); border: 1px solid var(--line); border-left: 4px solid var(--gold); border-radius: var(--r); }

div.stButton > button, div.stFormSubmitButton > button{ background: var(--burgundy) !important; color: white !important; border-radius: 8px !important; border: none !important; }
div.stButton > button:hover, div.stFormSubmitButton > button:hover{ background: var(--burgundy-hover) !important; }
button[data-baseweb="tab"][aria-selected="true"]{ color: var(--burgundy) !important; }
</style>
"""


def apply_theme() -> None:
    st.set_page_config(
        page_title=CLUB_NAME,
        page_icon="🍷",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    tokens = {
        "__BURGUNDY__": THEME["accent_primary"],
        "__BURGUNDY_HOVER__": THEME["accent_secondary"],
        "__WINE_DEEP__": THEME["wine_900"],
        "__WINE_DARK__": THEME["wine_800"],
        "__GOLD__": THEME["gold"],
        "__CREAM__": THEME["bg_primary"],
        "__SURFACE__": THEME["bg_secondary"],
        "__CARD__": THEME["bg_card"],
        "__LINE__": THEME["border_color"],
        "__INK__": THEME["text_primary"],
        "__INK_SOFT__": THEME["text_secondary"],
        "__SHADOW__": THEME["shadow"],
        "__RADIUS__": int(THEME["radius_px"]),
    }
    css = CSS_TEMPLATE
    for placeholder, value in tokens.items():
        css = css.replace(placeholder, str(value))
    st.markdown(css, unsafe_allow_html=True)
