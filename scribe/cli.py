#!/usr/bin/env python3
# =============================================================
# scribe CLI
# -------------------------------------------------------------
#   scribe --vault ~/notes summarize inbox/idea.md
#   scribe --vault ~/notes flashcards inbox/idea.md --cursor 120
#   scribe --vault ~/notes payload inbox/idea.md --task flashcards
#
# Exit codes: 0 ok, 1 completion failed, 2 configuration error.
# =============================================================

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from scribe.generate import ConfigurationError, NoteGenerator, NoteTask, build_payload
from scribe.settings import Settings, settings as default_settings
from scribe.vault import FileVault, VaultPathError
from scribe.workflow import NoteOutcome, NoteWorkflow

logger = logging.getLogger("scribe")


def _setup_logging(level: str) -> None:
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
        logger.addHandler(h)
    logger.setLevel(level.upper())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scribe", description="Summaries and flashcards for a Markdown vault.")
    parser.add_argument("--vault", default=".", help="Vault root directory (default: current directory)")
    parser.add_argument("--log-level", dest="log_level", default=None, help="Override LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    summarize = sub.add_parser("summarize", help="Append a summary to the note")
    summarize.add_argument("note", help="Note path, relative to the vault")

    cards = sub.add_parser("flashcards", help="Create a flashcard note and link it")
    cards.add_argument("note", help="Note path, relative to the vault")
    cards.add_argument("--cursor", type=int, default=None, help="Character offset for the link (default: append)")
    cards.add_argument("--no-link", action="store_false", dest="link", help="Do not link from the source note")

    payload = sub.add_parser("payload", help="Print the request body without sending it")
    payload.add_argument("note", help="Note path, relative to the vault")
    payload.add_argument("--task", choices=[t.value for t in NoteTask], default=NoteTask.SUMMARY.value)
    return parser


def _report(outcome: NoteOutcome) -> int:
    if not outcome.ok:
        print(f"!! {outcome.task.value} failed for {outcome.source}: {outcome.result.describe()}", file=sys.stderr)
        return 1
    print(f">> {outcome.task.value}: {outcome.source} -> {outcome.target}")
    if outcome.link:
        print(f">> linked {outcome.link}")
    return 0


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    settings = settings or default_settings
    _setup_logging(args.log_level or settings.LOG_LEVEL)

    vault = FileVault(args.vault)
    generator = NoteGenerator.from_settings(settings)
    try:
        note = vault.relative(args.note)
        if args.command == "payload":
            task = NoteTask(args.task)
            config = generator.generation_config(task)
            body = build_payload(generator.messages_for(vault.read(note), task, config), config)
            print(json.dumps(body, indent=2, ensure_ascii=False))
            return 0

        workflow = NoteWorkflow(generator, source=vault, sink=vault, settings=settings)
        if args.command == "summarize":
            return _report(workflow.summarize(note))
        return _report(workflow.flashcards(note, cursor=args.cursor, link=args.link))
    except ConfigurationError as e:
        logger.error("configuration error: %s", e)
        return 2
    except (VaultPathError, UnicodeDecodeError, OSError) as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
