import streamlit as st

from core import parse_exam
from keywords import LAYOUTS, OVERRIDE_PATH, PAGE_MARKER_KEYWORD, STEM_KEYWORDS

SAMPLE = """1. Osmanlı Devleti'nin kuruluş dönemine ait aşağıdakilerden hangisi doğrudur?
A) Divan-ı Hümayun kurulmuştur
B) İlk gümüş para bastırılmıştır
C) Tımar sistemi kaldırılmıştır
D) Lale Devri yaşanmıştır
E) Kapitülasyonlar verilmiştir

2. Bir dönemde yapılan düzenlemelerle ilgili olarak,
I. Vergi sistemi yenilenmiştir.
II. Ordu yeniden düzenlenmiştir.
III. Yeni okullar açılmıştır. yargılarından hangileri doğrudur?
A) Yalnız I
B) Yalnız II
C) I ve II
D) II ve III
E) I, II ve III

SAYFA 2

1. ÇÖZÜM: Osmanlı'da ilk gümüş para Orhan Bey döneminde bastırılmıştır.
CEVAP: B
2. ÇÖZÜM: Üç düzenleme de aynı döneme aittir. CEVAP: E
"""

st.title("🧾 Accepted text format")

st.markdown("### 📄 Questions")
st.markdown("- Every question starts on its own line with its number: `7. `")
st.markdown("- Options follow as `A)` ... `E)`, one per line or all on one line")
st.markdown("- Premise lists use Roman numerals `I.` ... `X.`, one per line or inline separated by commas")
st.markdown(f"- Page markers like `{PAGE_MARKER_KEYWORD} 12` on their own line are dropped")

st.markdown("### ✅ Solutions")
st.markdown("- The answer key starts at the first `1. ÇÖZÜM` line, or at a `ÇÖZÜMLER` header line")
st.markdown("- Each entry: `<number>. ÇÖZÜM: <explanation> CEVAP: <A-E>`")
st.markdown("- Questions without an entry are kept, with answer A and an empty explanation")

st.markdown("### 🔑 Question-stem keywords")
st.markdown(
    "When the closing question sentence is glued onto the last premise, it is cut off "
    f"before the first of these words. Override them in `{OVERRIDE_PATH}`."
)
for layout in LAYOUTS:
    st.markdown(f"**{layout}:** " + ", ".join(f"`{k}`" for k in STEM_KEYWORDS[layout]))

st.markdown("### 🧪 Sample")
st.code(SAMPLE, language="text")
sample_questions = parse_exam(SAMPLE)
st.write(f"Parsed questions: **{len(sample_questions)}**")
st.json([q.to_dict() for q in sample_questions])
