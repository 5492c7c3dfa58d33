import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = (".txt", ".md")

# C0 control characters except tab and newline
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


def read_resume(file_path: str | Path) -> str:
    """Read a resume file as plain text.

    Text files are read as UTF-8 and cleaned. Anything else, and text files
    that are not valid UTF-8, is decoded leniently from its raw bytes;
    binary formats are not parsed, so the result may be degraded.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")
    if path.suffix.lower() in TEXT_SUFFIXES:
        try:
            return clean_text(path.read_text(encoding="utf-8"))
        except UnicodeDecodeError:
            logger.warning(
                "%s is not valid UTF-8; undecodable bytes are replaced.", path.name
            )
    else:
        logger.warning(
            "%s is not a plain-text file; extracting text from raw bytes. "
            "Results are best with text-based documents.",
            path.name,
        )
    raw = path.read_bytes().decode("utf-8", errors="replace")
    return clean_text(_CONTROL_CHARS.sub(" ", raw))


def clean_text(text: str) -> str:
    """Normalize pasted or exported resume text.

    Handles: unicode artifacts, inconsistent bullet styles, excessive
    whitespace and runs of blank lines.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    # Unicode artifacts (BOM, zero-width spaces, soft hyphens)
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)

    # Bullets (●, •, ◦, ◆, ■, ▪, ★, ○) become "-"
    text = re.sub(r"^(\s*)[●•◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)

    # Collapse runs of spaces/tabs inside lines, keep indentation
    lines = []
    for line in text.split("\n"):
        stripped = line.lstrip()
        indent = " " * len(line[: len(line) - len(stripped)].replace("\t", "    "))
        stripped = re.sub(r"[ \t]{2,}", " ", stripped).rstrip()
        lines.append(f"{indent}{stripped}" if stripped else "")
    text = "\n".join(lines)

    # 3+ newlines -> 2
    text = re.sub(r"\n{3,}", "\n\n", text)

    return text.strip()
