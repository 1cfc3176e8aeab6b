"""Command-line helper to run the resume context pipeline."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from resume_context import ExtractionConfig, ResumeParser, ResumeParsingError, extract_contact_info

LOGGER = logging.getLogger("run_pipeline")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn a resume into an interview briefing")
    parser.add_argument("file", type=Path, help="Path to the resume file (PDF/DOCX)")
    parser.add_argument("--name", default=None, help="Candidate name to include in the prompt")
    parser.add_argument("--config", type=Path, default=None, help="JSON file with keyword lists and patterns")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--prompt", action="store_true", help="Print only the formatted prompt")
    mode.add_argument("--metadata", action="store_true", help="Print word count metadata")
    mode.add_argument("--contact", action="store_true", help="Print contact details")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to save the output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    extraction_config = ExtractionConfig.from_json(args.config) if args.config else None
    resume_parser = ResumeParser(extraction_config=extraction_config)

    try:
        if args.metadata:
            output = json.dumps(resume_parser.metadata(resume_parser.parse(args.file)).to_dict(), indent=2)
        elif args.contact:
            output = json.dumps(extract_contact_info(resume_parser.parse(args.file)).to_dict(), indent=2)
        else:
            context = resume_parser.interview_context(args.file, args.name)
            output = context.prompt if args.prompt else json.dumps(context.to_dict(), indent=2, ensure_ascii=False)
    except ResumeParsingError as exc:
        LOGGER.error("Could not process %s: %s", args.file, exc.message)
        print(f"error: {exc.message}", file=sys.stderr)
        return 1

    print(output)
    if args.output:
        args.output.write_text(output, encoding="utf-8")
        LOGGER.info("Saved output to %s", args.output)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
