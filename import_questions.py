"""Convert a pasted exam document into question records.

Reads a plain-text export (numbered questions with A) ... E) options, followed
by the "1. ÇÖZÜM: ... CEVAP: X" answer key) and writes one JSON array with a
record per question.

Usage:

    python import_questions.py deneme3.txt
    python import_questions.py deneme3.txt -o data/deneme3.json --source-tag "2025 Deneme 3"
"""

import argparse
import logging
import sys
from pathlib import Path

from core import parse_exam, questions_to_json

OUT = Path("data/questions.json")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Parse bulk exam text into question records.")
    parser.add_argument("src", type=Path, help="text file with questions and solutions")
    parser.add_argument("-o", "--out", type=Path, default=OUT, help=f"output JSON (default: {OUT})")
    parser.add_argument("--source-tag", default=None, help='label stamped on every record, e.g. "2025 Deneme 3"')
    parser.add_argument("--id-prefix", default="bulk_", help="prefix for generated record ids")
    parser.add_argument("-v", "--verbose", action="store_true", help="log skipped blocks")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.src.exists():
        print(f"File not found: {args.src}")
        return 1

    text = args.src.read_text(encoding="utf-8", errors="ignore")
    questions = parse_exam(text, id_prefix=args.id_prefix, source_tag=args.source_tag)

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(questions_to_json(questions), encoding="utf-8")

    print(f"Saved: {args.out.resolve()}")
    print(f"Questions parsed: {len(questions)}")
    if questions:
        print("Example:", questions[0].question_stem)
    return 0


if __name__ == "__main__":
    sys.exit(main())
