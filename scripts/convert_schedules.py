"""Convert a YAML list of schedule phrases into RRULE strings."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

import yaml

from converter import convert

logger = logging.getLogger(__name__)


def read_phrases(path: Path) -> List[str]:
    """Return the phrases stored in ``path``.

    Entries may be plain strings or mappings with a ``text`` key; anything
    else is skipped with a warning.
    """

    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or []
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a YAML list of phrases")

    phrases: List[str] = []
    for index, entry in enumerate(data):
        if isinstance(entry, str):
            phrases.append(entry)
        elif isinstance(entry, dict) and isinstance(entry.get("text"), str):
            phrases.append(entry["text"])
        else:
            logger.warning("Skipping entry %d in %s: no phrase text", index, path)
    return phrases


def convert_phrases(
    phrases: List[str], locale: str | None = None
) -> List[Dict[str, Any]]:
    """Return ``{text, result}`` records for each phrase."""

    return [
        {"text": phrase, "result": convert(phrase, locale).model_dump(exclude_none=True)}
        for phrase in phrases
    ]


def write_results(records: List[Dict[str, Any]], path: Path | None) -> None:
    """Write ``records`` as YAML to ``path`` or stdout."""

    if path is None:
        yaml.safe_dump(records, sys.stdout, sort_keys=False, allow_unicode=True)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(records, handle, sort_keys=False, allow_unicode=True)
    logger.info("Wrote %d conversions to %s", len(records), path)


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert schedule phrases from a YAML file into RRULE strings."
    )
    parser.add_argument("input", help="YAML file containing a list of phrases.")
    parser.add_argument(
        "-o",
        "--output",
        help="Where to write the YAML results. Defaults to stdout.",
    )
    parser.add_argument("--locale", default=None, help="Phrase locale (default: en).")
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    phrases = read_phrases(Path(args.input))
    records = convert_phrases(phrases, args.locale)
    write_results(records, Path(args.output) if args.output else None)
    failures = sum("unsupported" in record["result"] for record in records)
    if failures:
        logger.warning("%d of %d phrases were unsupported", failures, len(phrases))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
