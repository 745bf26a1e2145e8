# keywords.py
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

# "SAYFA 12" lines left over from copy/pasting printed booklets
PAGE_MARKER_KEYWORD = "SAYFA"

OVERRIDE_PATH = Path("config/stem_keywords.json")


def load_stem_keywords(path: Optional[Path] = None) -> Dict[str, List[str]]:
    """
    Words that open the closing question sentence ("... hangisidir?") when it is
    glued onto the last Roman-numeral item. One table per premise layout.

    A JSON file {"multiline": [...], "inline": [...]} replaces the table of each
    layout it names; anything else in the file is ignored.
    """
    defaults = {
        "multiline": [
            "durumlarından",
            "yargılarından",
            "ifadelerinden",
            "özelliklerinden",
            "bilgilerinden",
            "gelişmelerinden",
            "hangisi",
            "hangileri",
        ],
        "inline": [
            "Yukarıdakilerden",
            "durumlarından",
            "yargılarından",
            "dönemlerinin",
            "devletlerinden",
            "hangisi",
            "hangileri",
            "hangisine",
            "hangilerinde",
            "hangisinde",
        ],
    }
    p = path or OVERRIDE_PATH
    if not p.exists():
        return defaults
    try:
        overrides = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring keyword overrides in {p}: {e}")
        return defaults
    if isinstance(overrides, dict):
        for layout, words in overrides.items():
            if layout in defaults and isinstance(words, list):
                defaults[layout] = [str(w).strip() for w in words if str(w).strip()]
    return defaults


STEM_KEYWORDS = load_stem_keywords()
LAYOUTS = list(STEM_KEYWORDS.keys())
