# streamlit_app.py — Minimal reading UI for tarot-journal-core
# Run:  streamlit run streamlit_app.py

from __future__ import annotations

import os
import sys
from typing import Optional, Union

import streamlit as st

# Ensure repo root is importable (so `tarot_journal` can be imported without installing)
REPO_ROOT = os.path.dirname(os.path.abspath(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from tarot_journal import tarot_core  # noqa: E402
from tarot_journal.config import configure_logging, get_settings  # noqa: E402
from tarot_journal.errors import SpreadNotAllowedError, TarotCoreError  # noqa: E402
from tarot_journal.journal import Journal  # noqa: E402
from tarot_journal.logic import narrate_entry, start_reading  # noqa: E402
from tarot_journal.spreads import list_spreads  # noqa: E402
from tarot_journal.tiers import TIERS, can_use_spread, get_tier  # noqa: E402

configure_logging()
settings = get_settings()

# -----------------------------
# Page setup
# -----------------------------
st.set_page_config(page_title="Tarot Journal", page_icon="🔮", layout="wide")

st.title("🔮 Tarot Journal")
st.caption("Draw a spread, reveal the cards one by one, then save the reading to your journal.")

if "journal" not in st.session_state:
    st.session_state["journal"] = Journal()
journal: Journal = st.session_state["journal"]

# -----------------------------
# Sidebar controls
# -----------------------------
st.sidebar.header("Controls")

tier_keys = list(TIERS.keys())
tier_key = st.sidebar.selectbox(
    "Tier",
    tier_keys,
    index=tier_keys.index(get_tier(settings.default_tier).key),
    format_func=lambda k: f"{TIERS[k].name} ({TIERS[k].label})",
)
tier = get_tier(tier_key)

spreads = list_spreads()
spread_ids = [s.id for s in spreads]
spread_id = st.sidebar.selectbox(
    "Spread",
    spread_ids,
    format_func=lambda sid: next(s.name for s in spreads if s.id == sid)
    + ("" if can_use_spread(tier, sid) else " 🔒"),
)

reversed_probability = st.sidebar.slider(
    "Reversed probability",
    min_value=0.0, max_value=1.0, value=settings.reversed_probability, step=0.05,
    help="Probability a drawn card is reversed.",
)

seed = st.sidebar.text_input(
    "Seed (optional)",
    value="",
    placeholder="Leave empty for random each time",
)

question = st.text_area("Your question (optional)", height=100)

col_btn1, col_btn2 = st.columns([1, 1])
with col_btn1:
    run = st.button("🔀 Draw cards", use_container_width=True)
with col_btn2:
    clear = st.button("🧹 Clear", use_container_width=True)

if clear:
    st.session_state.pop("draw", None)
    st.session_state.pop("entry_id", None)
    st.rerun()

# -----------------------------
# Execute draw
# -----------------------------
if run:
    seed_val: Optional[Union[int, str]] = None
    if seed.strip():
        try:
            seed_val = int(seed)
        except ValueError:
            seed_val = seed
    try:
        st.session_state["draw"] = start_reading(
            spread_id,
            question,
            seed=seed_val,
            reversed_probability=reversed_probability,
            tier=tier.key,
        )
        st.session_state.pop("entry_id", None)
    except SpreadNotAllowedError as e:
        st.warning(str(e))
    except TarotCoreError as e:
        st.error(f"Reading failed: {type(e).__name__}: {e}")

# -----------------------------
# Render draw
# -----------------------------
draw: Optional[tarot_core.Draw] = st.session_state.get("draw")
if draw is not None:
    st.subheader(draw.spread.name)
    st.caption(f"{draw.revealed_count} of {draw.spread.card_count} revealed")

    cols_per_row = 5 if len(draw.cards) >= 5 else max(3, len(draw.cards))
    for row_start in range(0, len(draw.cards), cols_per_row):
        cols = st.columns(cols_per_row, gap="small")
        for col, dc in zip(cols, draw.cards[row_start:row_start + cols_per_row]):
            col.markdown(f"**{dc.position.name}**")
            col.caption(dc.position.description)
            if dc.revealed:
                orientation = "reversed" if dc.reversed else "upright"
                col.markdown(f"{dc.card.name} · `{orientation}`")
                col.write(dc.meaning)
            elif col.button("Reveal", key=f"reveal-{dc.position_id}"):
                tarot_core.reveal(draw, dc.position_id)
                st.rerun()

    if not tarot_core.is_complete(draw):
        if st.button("Reveal all"):
            tarot_core.reveal_all(draw)
            st.rerun()
    elif "entry_id" not in st.session_state:
        if st.button("📓 Save & interpret"):
            with st.spinner("The cards are speaking..."):
                entry = journal.save_draw(draw)
                narrate_entry(journal, entry.id)
            st.session_state["entry_id"] = entry.id
            st.rerun()

    entry_id = st.session_state.get("entry_id")
    entry = journal.get(entry_id) if entry_id else None
    if entry is not None:
        st.markdown("---")
        st.subheader("Reading")
        st.markdown(entry.narrative or "")
else:
    st.info("Choose a spread, optionally enter a question, then click **Draw cards**.")

# -----------------------------
# Journal
# -----------------------------
entries = journal.list_entries()
if entries:
    st.markdown("---")
    st.subheader("Journal")
    for e in entries:
        star = "★" if e.is_favorite else "☆"
        with st.expander(f"{star} {e.created_at:%Y-%m-%d %H:%M} · {e.spread_id} · {e.question or 'General guidance'}"):
            for c in e.cards:
                st.markdown(f"- **{c.position_name}**: {c.card_name}{' (Reversed)' if c.reversed else ''}")
            notes = st.text_area("Notes", value=e.notes or "", key=f"notes-{e.id}")
            c1, c2, c3 = st.columns(3)
            if c1.button("Save notes", key=f"save-{e.id}"):
                journal.update_notes(e.id, notes)
                st.rerun()
            if c2.button("Toggle favorite", key=f"fav-{e.id}"):
                journal.toggle_favorite(e.id)
                st.rerun()
            if c3.button("Delete", key=f"del-{e.id}"):
                journal.delete(e.id)
                st.rerun()
