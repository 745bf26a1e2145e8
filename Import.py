from pathlib import Path
from typing import List

import streamlit as st

from core import ANSWER_LETTERS, Question, parse_exam, questions_to_json

ROMANS = ["I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X"]

# ========================= Parsing (cached) ========================= #

@st.cache_data(show_spinner=False)
def parse_text(text: str, id_prefix: str, source_tag: str) -> List[Question]:
    return parse_exam(text, id_prefix=id_prefix or "bulk_", source_tag=source_tag or None)


def back_to_paste():
    # pasted text survives, the preview does not
    st.session_state.import_step = "paste"
    st.session_state.parsed = []


# ========================= Rendering ========================= #

def render_question(idx: int, q: Question):
    head, remove = st.columns([6, 1])
    with head:
        st.subheader(f"Question {q.number}")
    with remove:
        if st.button("🗑 Remove", key=f"remove_{q.id}", use_container_width=True):
            st.session_state.parsed.pop(idx)
            st.rerun()

    if q.context_text:
        st.write(q.context_text)
    if q.premise_items:
        for i, item in enumerate(q.premise_items):
            label = ROMANS[i] if i < len(ROMANS) else str(i + 1)
            st.markdown(f"**{label}.** {item}")
    st.markdown(f"**{q.question_stem}**")

    for i, opt in enumerate(q.options):
        letter = ANSWER_LETTERS[i] if i < len(ANSWER_LETTERS) else "?"
        if i == q.correct_option_index and q.explanation:
            st.markdown(f"- ✅ **{letter}) {opt}**")
        else:
            st.markdown(f"- {letter}) {opt}")

    if q.explanation:
        with st.expander("Explanation"):
            st.write(q.explanation)
    else:
        st.warning("No solution entry found: answer unknown (defaults to A).")


# ========================= App ========================= #

st.set_page_config(page_title="Bulk Question Import", layout="wide")

# Version label (non-fatal)
version = Path("version.txt").read_text(encoding="utf-8").strip() if Path("version.txt").exists() else "dev"

st.title(f"📥 Bulk Question Import  (v{version})")

with st.sidebar:
    st.header("Settings")
    source_tag = st.text_input("🏷 Source tag", placeholder="2025 Deneme 3")
    id_prefix = st.text_input("ID prefix", value="bulk_")
    uploaded = st.file_uploader("Upload a .txt export", type=["txt"])

if "import_step" not in st.session_state:
    st.session_state.bulk_text = ""
    back_to_paste()

if st.session_state.import_step == "paste":
    if uploaded and not st.session_state.bulk_text:
        st.session_state.bulk_text = uploaded.getvalue().decode("utf-8", errors="ignore")
    raw_text = st.text_area(
        "Paste the questions followed by the solutions (ÇÖZÜM / CEVAP)",
        value=st.session_state.bulk_text,
        height=420,
    )
    if st.button("Parse", type="primary", disabled=not raw_text.strip()):
        st.session_state.bulk_text = raw_text
        st.session_state.parsed = list(parse_text(raw_text, id_prefix, source_tag))
        st.session_state.import_step = "preview"
        st.rerun()

else:
    questions: List[Question] = st.session_state.parsed
    unknown = sum(1 for q in questions if not q.explanation)
    st.write(f"**{len(questions)}** question(s) parsed")
    if unknown:
        st.info(f"{unknown} question(s) have no matching solution entry.")

    if not questions:
        st.warning("Nothing could be parsed. Check the numbering (\"1. \") and the A) ... E) options.")

    for idx, q in enumerate(questions):
        st.markdown("---")
        render_question(idx, q)

    st.markdown("---")
    col1, col2 = st.columns([1, 1])
    if col1.button("⬅ Back to text", use_container_width=True):
        back_to_paste()
        st.rerun()
    col2.download_button(
        f"💾 Download {len(questions)} question(s)",
        data=questions_to_json(questions),
        file_name="questions.json",
        mime="application/json",
        disabled=not questions,
        use_container_width=True,
    )
