"""Command line entry point: print a summary of one article."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from articlesum.config import get_settings
from articlesum.metrics.observability import configure_logging, get_logger
from articlesum.services.summary import build_summary_service


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize a web article with a hosted language model.")
    parser.add_argument("--url", type=str, default=None, help="Article URL to summarize")
    parser.add_argument("--question", type=str, default=None, help="Instruction sent along with the article")
    parser.add_argument("--model-id", type=str, default=None, help="Bedrock model identifier")
    parser.add_argument("--max-tokens", type=int, default=None, help="Maximum tokens to sample")
    parser.add_argument("--temperature", type=float, default=None, help="Sampling temperature")
    parser.add_argument("--log-level", type=str, default=None, help="Log level, e.g. INFO or DEBUG")
    return parser.parse_args(argv)


def _overrides(args: argparse.Namespace) -> dict[str, object]:
    mapping = {
        "source_url": args.url,
        "question": args.question,
        "bedrock_model_id": args.model_id,
        "max_tokens": args.max_tokens,
        "temperature": args.temperature,
        "log_level": args.log_level,
    }
    return {key: value for key, value in mapping.items() if value is not None}


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        settings = get_settings(_overrides(args))
        configure_logging(settings.log_level)
        service = build_summary_service(settings)
        text = service.run()
    except Exception as exc:
        # Falls back to the default level when settings failed to load.
        get_logger("cli").error("summary.failed", error=str(exc), error_type=type(exc).__name__)
        return 1

    print(text)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    sys.exit(main())
