#!/usr/bin/env python3
"""
Keyword ranking and content-topic planning for a handful of saved web pages.

- Reads one or many local documents (plain text, or saved .html pages with markup stripped)
- Ranks candidate keyword phrases with corpus TF-IDF (2-5 word phrases preferred)
- Writes a JSON plan: keyword pool, keyword chart records, topics, and summaries

Usage examples:
  python3 -m src.topic_keywords --input-file pages/a.html --input-file pages/b.html
  python3 -m src.topic_keywords --input-glob "pages/*.html" --topics 10 --output output/plan.json
  python3 -m src.topic_keywords --input-glob "pages/*.txt" --ignore "acme,brand" --seed 7

Output:
  {
    "domain_analysis": { "niche": "...", "target_audience": "...", "competitor_insights": "..." },
    "keyword_pool": [ { "term": "retail space leasing", "score": 3.12 }, ... ],
    "keywords": [ { "keyword": "Retail Space Leasing", "volume": 100, "difficulty": 50,
                    "intent": "Informational", "relevance_score": 3.12 }, ... ],
    "topics": [ { "title": "...", "description": "...", "primary_keyword": "...",
                  "secondary_keywords": ["...", "..."], "content_type": "Guide",
                  "projected_traffic": "Very High" }, ... ],
    "strategic_summary": "..."
  }

Fetching pages is not done here; save them first and point this tool at the files.
"""
from __future__ import annotations

import argparse
import json
import os
import random
import sys
from typing import List, Optional, Set

from . import config
from .analysis import analyze_corpus
from .file_utils import (
    ensure_dir,
    load_document,
    load_ignore_terms,
    parse_ignore_arg,
    resolve_input_paths,
)


def process_inputs(
    input_paths: List[str],
    output_path: Optional[str],
    topic_count: int = config.DEFAULT_TOPIC_COUNT,
    ignore_terms: Optional[Set[str]] = None,
    ignore_file: Optional[str] = None,
    keyword_limit: int = config.DEFAULT_KEYWORD_LIMIT,
    seed: Optional[int] = None,
) -> int:
    if not input_paths:
        print("No input files matched.", file=sys.stderr)
        return 1

    extra_ignore: Set[str] = set(ignore_terms or set())
    if ignore_file:
        try:
            loaded = load_ignore_terms(ignore_file)
            extra_ignore |= loaded
            print(f"[ignore] loaded {len(loaded)} ignore term(s) from {ignore_file}", file=sys.stderr)
        except OSError as e:
            print(f"[ignore] failed to load ignore terms from {ignore_file}: {e}", file=sys.stderr)

    texts: List[str] = []
    for p in input_paths:
        try:
            text = load_document(p)
        except OSError as e:
            print(f"[load] failed to read {p}: {e}", file=sys.stderr)
            continue
        if not text.strip():
            print(f"[load] {p} has no text after markup stripping; skipping", file=sys.stderr)
            continue
        texts.append(text)
        print(f"[load] {p} ({len(text):,} chars)", file=sys.stderr)

    if not texts:
        print("No usable input documents.", file=sys.stderr)
        return 1

    rng = random.Random(seed) if seed is not None else None
    result = analyze_corpus(
        texts,
        extra_ignore_terms=extra_ignore,
        topic_count=topic_count,
        keyword_limit=keyword_limit,
        rng=rng,
        verbose=True,
    )

    payload = json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
    if output_path:
        ensure_dir(os.path.dirname(output_path))
        with open(output_path, "w", encoding="utf-8") as fout:
            fout.write(payload + "\n")
        print(f"[done] wrote {len(result.topics)} topics to {output_path}", file=sys.stderr)
    else:
        sys.stdout.write(payload + "\n")
        print(f"[done] wrote {len(result.topics)} topics to stdout", file=sys.stderr)
    return 0


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {n}")
    return n


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Rank keyword phrases across saved web pages with TF-IDF and draft content topics.")
    g = ap.add_mutually_exclusive_group(required=True)
    g.add_argument("--input-file", type=str, action="append", help="Path to one text or .html document (repeatable)")
    g.add_argument("--input-glob", type=str, help="Glob for many documents, e.g., 'pages/*.html'")
    ap.add_argument("--output", type=str, default=None, help="Path for the JSON plan (default: stdout)")
    ap.add_argument("--topics", type=_positive_int, default=config.DEFAULT_TOPIC_COUNT, help="Number of content topics to generate")
    ap.add_argument("--ignore", type=str, default=None, help="Comma-separated extra terms to ignore (case-insensitive)")
    ap.add_argument("--ignore-file", type=str, default=None, help="Path to newline/comma-delimited file of extra terms to ignore")
    ap.add_argument("--keywords-limit", type=int, default=config.DEFAULT_KEYWORD_LIMIT, help="How many keyword chart records to emit from the top of the pool")
    ap.add_argument("--seed", type=int, default=None, help="Randomize keyword volume/difficulty with this seed (default: deterministic midpoints)")

    args = ap.parse_args(argv)

    inputs = resolve_input_paths(args.input_file, args.input_glob)
    return process_inputs(
        input_paths=inputs,
        output_path=args.output,
        topic_count=args.topics,
        ignore_terms=parse_ignore_arg(args.ignore),
        ignore_file=args.ignore_file,
        keyword_limit=args.keywords_limit,
        seed=args.seed,
    )


if __name__ == "__main__":
    sys.exit(main())
