import re
import logging
from typing import Dict, Optional

from schemas import ParsedCandidateView

logger = logging.getLogger(__name__)

JOB_MARKER_RE = re.compile(r"Job Description:")

# "===== alice.pdf =====" / "----- Bob -----", or a bare "Alice_Smith.pdf" line
BOUNDARY_RE = re.compile(
    r"^[ \t]*[=\-]{3,}[ \t]*(?P<delim>[^\n]*?[^\s=\-][^\n]*?)[ \t]*[=\-]{3,}[ \t]*$"
    r"|^[ \t]*(?P<file>[A-Z][\w .()\-]*\.(?i:pdf|docx?|txt))[ \t]*$",
    re.MULTILINE,
)

SCORE_RE = re.compile(r"Match\s*Score\**\s*(?:\([^)\n]*\))?(?:[\s:*=–—]|-(?=\s))*(-?\d+)", re.IGNORECASE)
EXTENSION_RE = re.compile(r"\.(?:pdf|docx?|txt)$", re.IGNORECASE)

# Leading characters of the job description compared against section headers
JOB_PREFIX_LEN = 30


def extract_match_score(text: str) -> int:
    """Return the first 'Match Score' number in text, clamped to 0-100 (0 if absent)."""
    m = SCORE_RE.search(text or "")
    if not m:
        return 0
    return max(0, min(100, int(m.group(1))))


def clean_header(raw: str) -> str:
    header = raw.strip().strip("=-* \t")
    header = EXTENSION_RE.sub("", header)
    header = header.replace("_", " ")
    return re.sub(r"\s+", " ", header).strip()


def _job_title(jd_text: str) -> str:
    for line in jd_text.splitlines():
        line = line.strip()
        if line:
            return line.rstrip(".:;,… ").lower()
    return ""


def _restates_job(header: str, jd_text: str) -> bool:
    h = header.lower()
    if h.startswith("job description"):
        return True
    jd = (jd_text or "").strip()
    if not jd:
        return False
    title = _job_title(jd)
    if title and (h == title or title in h):
        return True
    return jd[:JOB_PREFIX_LEN].lower() in h


def _strip_job_block(text: str, jd_text: str) -> str:
    """Drop the echoed job description that precedes the first candidate section."""
    marker = JOB_MARKER_RE.search(text)
    first = BOUNDARY_RE.search(text)
    if marker is None or (first is not None and first.start() < marker.start()):
        return text

    start = marker.end()
    jd = (jd_text or "").strip()
    if jd and text[start:].lstrip().startswith(jd):
        start = text.index(jd, start) + len(jd)

    nxt = BOUNDARY_RE.search(text, start)
    return text[nxt.start():] if nxt else ""


def _unique_name(name: str, views: Dict[str, ParsedCandidateView]) -> str:
    if name not in views:
        return name
    n = 2
    while f"{name} ({n})" in views:
        n += 1
    return f"{name} ({n})"


def parse_report(report_text: str, jd_text: Optional[str] = "") -> Dict[str, ParsedCandidateView]:
    """
    Split a combined analysis report back into per-candidate views.

    Best effort: the model output is free-form text, so sections are found
    with a heuristic boundary pattern. Keys keep report order.
    """
    text = _strip_job_block(report_text or "", jd_text or "")
    matches = list(BOUNDARY_RE.finditer(text))
    # Delimited sections win; bare filename lines then belong to the body.
    delimited = [m for m in matches if m.group("delim")]
    if delimited:
        matches = delimited

    views: Dict[str, ParsedCandidateView] = {}
    for m, nxt in zip(matches, matches[1:] + [None]):
        header = clean_header(m.group("delim") or m.group("file"))
        if not header or _restates_job(header, jd_text or ""):
            logger.debug(f"Skipping section '{header}'")
            continue

        body = text[m.end():nxt.start() if nxt else len(text)].strip()
        name = _unique_name(header, views)
        views[name] = ParsedCandidateView(
            display_name=name,
            match_score=extract_match_score(body),
            body_text=body,
        )
    return views
