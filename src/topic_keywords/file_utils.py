import os
import re
from glob import glob
from typing import List, Optional, Set

from bs4 import BeautifulSoup

from .constants import HTML_SUFFIXES, NON_CONTENT_TAGS
from .text_utils import normalize_space


def ensure_dir(path: str) -> None:
    if path:
        os.makedirs(path, exist_ok=True)


def resolve_input_paths(input_files: Optional[List[str]], input_glob: Optional[str]) -> List[str]:
    if input_files:
        return list(input_files)
    if input_glob:
        return sorted(glob(input_glob))
    return []


def html_to_text(html: str) -> str:
    """
    Visible page text: drop script/style/nav/footer/header/aside/form elements and
    read what remains of the body (the whole document if there is no body).
    """
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for el in soup.find_all(list(NON_CONTENT_TAGS)):
        el.decompose()
    root = soup.body or soup
    return normalize_space(root.get_text(" "))


def load_document(path: str) -> str:
    """Read one input file as plain text; saved HTML pages go through html_to_text."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        raw = f.read()
    if path.lower().endswith(HTML_SUFFIXES):
        return html_to_text(raw)
    return raw


def load_ignore_terms(path: str) -> Set[str]:
    """
    Newline or comma separated ignore terms. Blank lines and '#' comments are skipped.
    """
    terms: Set[str] = set()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            for tok in re.split(r"[,\s]+", line):
                tok = tok.strip().lower()
                if tok and not tok.startswith("#"):
                    terms.add(tok)
    return terms


def parse_ignore_arg(value: Optional[str]) -> Set[str]:
    if not value:
        return set()
    return {t.strip().lower() for t in value.split(",") if t.strip()}
