# core.py
import json
import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from keywords import PAGE_MARKER_KEYWORD, STEM_KEYWORDS

logger = logging.getLogger(__name__)

ANSWER_LETTERS = "ABCDE"

# ---- types ----
@dataclass
class SolutionEntry:
    number: int
    letter: str  # "A".."E"
    explanation: str


@dataclass
class QuestionBlock:
    number: int
    body: str


@dataclass
class ParsedBody:
    question_stem: str
    context_text: str = ""
    premise_items: List[str] = field(default_factory=list)


@dataclass
class Question:
    id: str
    number: int
    question_stem: str
    options: List[str]
    correct_option_index: int = 0
    explanation: str = ""
    context_text: Optional[str] = None
    premise_items: Optional[List[str]] = None
    source_tag: Optional[str] = None

    def to_dict(self) -> dict:
        out = {"id": self.id}
        if self.context_text:
            out["contextText"] = self.context_text
        if self.premise_items:
            out["premiseItems"] = list(self.premise_items)
        out["questionStem"] = self.question_stem
        out["options"] = list(self.options)
        out["correctOptionIndex"] = self.correct_option_index
        out["explanation"] = self.explanation
        if self.source_tag:
            out["sourceTag"] = self.source_tag
        return out

# ---- regex ----
PAGE_MARKER_RE = re.compile(
    rf"^[ \t]*{re.escape(PAGE_MARKER_KEYWORD)}[ \t]*\d+[^\n]*(?:\n|$)",
    re.IGNORECASE | re.MULTILINE,
)

# "1. ÇÖZÜM" opens the answer key; a bare "ÇÖZÜMLER" header line is the weaker signal
FIRST_SOLUTION_RE = re.compile(r"^[ \t]*1\.\s*ÇÖZÜM", re.IGNORECASE | re.MULTILINE)
SOLUTION_HEADER_RE = re.compile(r"^[ \t]*ÇÖZÜM(?:LER)?[ \t]*$", re.IGNORECASE | re.MULTILINE)

# The explanation may not run into the next "<n>. ÇÖZÜM:" entry
SOLUTION_RE = re.compile(
    r"(\d+)\.\s*ÇÖZÜM:\s*((?:(?!\d+\.\s*ÇÖZÜM:).)*?)CEVAP:\s*([A-E])",
    re.IGNORECASE | re.DOTALL,
)

BLOCK_SPLIT_RE = re.compile(r"\n(?=\d+\.\s)")
BLOCK_NUMBER_RE = re.compile(r"^(\d+)\.\s*")

OPTIONS_START_RE = re.compile(r"(?<!\S)A\)")
OPTION_SPLIT_RE = re.compile(r"(?<!\S)(?=[A-E]\))")
OPTION_MARKER_RE = re.compile(r"^[A-E]\)\s*")

ROMAN = r"(?:VIII|VII|VI|IV|IX|V|X|I{1,3})"
PREMISE_RE = re.compile(rf"(?<!\S){ROMAN}\.\s")
# applied to the trimmed body: marker at the very start or right after a line break
MULTILINE_LAYOUT_RE = re.compile(rf"(?:^|\n)[ \t]*{ROMAN}\.\s")
LINE_MARKER_RE = re.compile(rf"^[ \t]*{ROMAN}\.\s+", re.MULTILINE)
INLINE_MARKER_RE = re.compile(rf"(?<!\S){ROMAN}\.\s+")
TRAILING_COMMA_RE = re.compile(r",\s*$")

WHITESPACE_RE = re.compile(r"\s+")

# ---- normalizing / sections ----
def normalize_text(text: str) -> str:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return PAGE_MARKER_RE.sub("", text)


def split_sections(text: str) -> Tuple[str, str]:
    """Cut the document into (questions, solutions). No boundary -> everything is questions."""
    m = FIRST_SOLUTION_RE.search(text) or SOLUTION_HEADER_RE.search(text)
    if not m:
        return text, ""
    return text[: m.start()], text[m.start():]


def index_solutions(section: str) -> Dict[int, SolutionEntry]:
    answers: Dict[int, SolutionEntry] = {}
    for m in SOLUTION_RE.finditer(section):
        number = int(m.group(1))
        explanation = WHITESPACE_RE.sub(" ", m.group(2)).strip()
        # later entries for the same number overwrite earlier ones
        answers[number] = SolutionEntry(number, m.group(3).upper(), explanation)
    return answers

# ---- question blocks ----
def segment_blocks(section: str) -> List[QuestionBlock]:
    blocks: List[QuestionBlock] = []
    for piece in BLOCK_SPLIT_RE.split(section):
        piece = piece.strip()
        if not piece:
            continue
        m = BLOCK_NUMBER_RE.match(piece)
        if not m:
            logger.debug(f"Skipping block without a question number: {piece[:40]!r}")
            continue
        blocks.append(QuestionBlock(int(m.group(1)), piece[m.end():]))
    return blocks


def split_options(body: str) -> Tuple[str, str]:
    """Return (text before the options, raw option text starting at "A)")."""
    m = OPTIONS_START_RE.search(body)
    if not m:
        return body.strip(), ""
    return body[: m.start()].strip(), body[m.start():].strip()


def parse_options(options_raw: str) -> List[str]:
    options: List[str] = []
    for part in OPTION_SPLIT_RE.split(options_raw):
        text = OPTION_MARKER_RE.sub("", part).replace("\n", " ").strip()
        if text:
            options.append(text)
    return options

# ---- premises (I., II., III. ...) ----
def _line_item(text: str) -> str:
    return text.replace("\n", " ").strip()


def _inline_item(text: str) -> str:
    return TRAILING_COMMA_RE.sub("", text).strip()


@dataclass(frozen=True)
class PremiseLayout:
    name: str
    markers: re.Pattern
    clean_item: Callable[[str], str]


PREMISE_LAYOUTS = {
    "multiline": PremiseLayout("multiline", LINE_MARKER_RE, _line_item),
    "inline": PremiseLayout("inline", INLINE_MARKER_RE, _inline_item),
}


@lru_cache(maxsize=32)
def _stem_pattern(keywords: Tuple[str, ...]) -> re.Pattern:
    # longest first, so "hangisine" is preferred over "hangisi" at the same spot
    alternatives = "|".join(re.escape(k) for k in sorted(keywords, key=len, reverse=True))
    return re.compile(rf"^(.*?)\s+({alternatives})\s*.*?\?\s*$", re.IGNORECASE | re.DOTALL)


def split_stem(item: str, keywords: Sequence[str]) -> Tuple[str, str]:
    """
    Split a last premise item that has the question sentence fused onto it.

    Cuts before the earliest keyword, so the stem is the longest suffix that
    starts with a keyword and ends with "?". Returns (premise, stem); stem is
    "" when the item has no "?" or no keyword boundary.
    """
    if "?" not in item or not keywords:
        return item, ""
    m = _stem_pattern(tuple(keywords)).match(item)
    if not m:
        return item, ""
    return m.group(1).strip(), item[m.start(2):].strip()


def detect_layout(body: str) -> Optional[str]:
    body = body.strip()
    if not PREMISE_RE.search(body):
        return None
    return "multiline" if MULTILINE_LAYOUT_RE.search(body) else "inline"


def extract_premises(body: str, keywords: Optional[Dict[str, List[str]]] = None) -> ParsedBody:
    body = body.strip()
    name = detect_layout(body)
    if name is None:
        return ParsedBody(question_stem=body)

    layout = PREMISE_LAYOUTS[name]
    markers = list(layout.markers.finditer(body))
    if not markers:
        return ParsedBody(question_stem=body)

    intro = body[: markers[0].start()].strip()
    items: List[str] = []
    for i, m in enumerate(markers):
        end = markers[i + 1].start() if i + 1 < len(markers) else len(body)
        items.append(layout.clean_item(body[m.end():end]))

    last_item = items[-1]
    table = keywords if keywords is not None else STEM_KEYWORDS
    premise, stem = split_stem(last_item, table.get(name, []))
    if stem:
        items[-1] = premise
        return ParsedBody(question_stem=stem, context_text=intro, premise_items=items)

    # no clean stem: fall back to the intro, never reporting it twice
    logger.debug(f"No stem keyword in last {name} premise item: {last_item[:40]!r}")
    return ParsedBody(question_stem=intro or last_item or body, premise_items=items)

# ---- parsing ----
def parse_exam(
    text: str,
    id_prefix: str = "bulk_",
    source_tag: Optional[str] = None,
    keywords: Optional[Dict[str, List[str]]] = None,
) -> List[Question]:
    text = normalize_text(text)
    q_section, sol_section = split_sections(text)
    answers = index_solutions(sol_section)
    blocks = segment_blocks(q_section)

    out: List[Question] = []
    for block in blocks:
        pre_options, options_raw = split_options(block.body)
        options = parse_options(options_raw)
        if len(options) < 2:
            logger.debug(f"Skipping question {block.number}: {len(options)} option(s)")
            continue

        parsed = extract_premises(pre_options, keywords)
        sol = answers.get(block.number)
        correct = ANSWER_LETTERS.find(sol.letter) if sol else -1

        out.append(
            Question(
                id=f"{id_prefix}{len(out) + 1}_{block.number}",
                number=block.number,
                question_stem=parsed.question_stem.strip(),
                options=options,
                correct_option_index=correct if correct >= 0 else 0,
                explanation=sol.explanation if sol else "",
                context_text=parsed.context_text or None,
                premise_items=parsed.premise_items or None,
                source_tag=source_tag or None,
            )
        )

    logger.info(f"Parsed {len(out)} question(s) from {len(blocks)} block(s), {len(answers)} solution(s)")
    return out

# ---- export ----
def questions_to_json(questions: Sequence[Question]) -> str:
    return json.dumps([q.to_dict() for q in questions], ensure_ascii=False, indent=2)
