#!/usr/bin/env python3
"""Parse a generated investment report into its structured JSON record.

Usage:
    python scripts/parse_report.py report.md --topic-type company
    python scripts/parse_report.py report.md --metadata meta.json --topic 삼성전자
    python scripts/parse_report.py report.md --topic "반도체 산업" --output parsed.json

When --topic-type is omitted the type is guessed from --topic.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from invest_report.assembler import assemble_report  # noqa: E402
from invest_report.config.logging_config import get_logger, setup_logging  # noqa: E402
from invest_report.topics import TopicType, classify_topic  # noqa: E402

logger = get_logger("scripts.parse_report")


def load_metadata(path: Path | None) -> dict:
    """Load a metadata bundle JSON file; a missing path gives an empty bundle."""
    if path is None:
        return {}
    data = json.loads(path.read_text(encoding="utf-8"))
    # API responses wrap the bundle as {"report": ..., "metadata": {...}}
    if isinstance(data, dict) and isinstance(data.get("metadata"), dict):
        return data["metadata"]
    return data if isinstance(data, dict) else {}


def resolve_topic_type(topic_type: str | None, topic: str) -> TopicType:
    """Explicit topic type, else a guess from the topic text."""
    if topic_type:
        return TopicType(topic_type)
    if topic:
        return classify_topic(topic)
    return TopicType.COMPANY


def parse_report_file(
    report_path: Path,
    topic_type: str | None = None,
    metadata_path: Path | None = None,
    topic: str = "",
) -> dict:
    """Parse a report file and return the camelCase JSON dict."""
    raw_text = report_path.read_text(encoding="utf-8")
    report = assemble_report(
        raw_text,
        resolve_topic_type(topic_type, topic),
        metadata=load_metadata(metadata_path),
        topic=topic,
    )
    return report.to_json_dict()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Parse an AI-generated investment report into structured JSON.",
    )
    parser.add_argument("report", type=Path, help="Markdown report file")
    parser.add_argument(
        "--topic-type", "-t",
        choices=[t.value for t in TopicType],
        default=None,
        help="Report topic type (default: guessed from --topic)",
    )
    parser.add_argument("--topic", default="", help="Search topic, used for the title")
    parser.add_argument(
        "--metadata", "-m",
        type=Path,
        default=None,
        help="Metadata bundle JSON file",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Write JSON here instead of stdout",
    )
    args = parser.parse_args(argv)

    setup_logging()

    if not args.report.is_file():
        parser.error(f"report file not found: {args.report}")
    if args.metadata is not None and not args.metadata.is_file():
        parser.error(f"metadata file not found: {args.metadata}")

    try:
        parsed = parse_report_file(
            args.report,
            topic_type=args.topic_type,
            metadata_path=args.metadata,
            topic=args.topic,
        )
    except json.JSONDecodeError as exc:
        parser.error(f"metadata is not valid JSON: {exc}")

    output = json.dumps(parsed, ensure_ascii=False, indent=2)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output, encoding="utf-8")
        logger.info("report_written", path=str(args.output))
    else:
        print(output)


if __name__ == "__main__":
    main()
