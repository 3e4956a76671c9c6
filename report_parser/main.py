"""CLI entry point for the account report table extractor."""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from report_parser.config import ReportConfig, load_config
from report_parser.errors import ReportParserError
from report_parser.pipeline.loader import is_url, load_document
from report_parser.pipeline.sectioner import extract_report
from report_parser.pipeline.assembler import assemble
from report_parser.pipeline.publisher import publish_report

logger = logging.getLogger(__name__)


def run_pipeline(
    source: str,
    user_id: str | None = None,
    use_codes: bool = False,
    config: ReportConfig | None = None,
) -> dict:
    """Run the full extraction pipeline, return final state."""
    state: dict = {
        "source": source,
        "user_id": user_id,
        "use_codes": use_codes,
        "config": config or load_config(),
    }

    state.update(load_document(state))
    state.update(extract_report(state))
    state.update(assemble(state))

    if user_id:
        state.update(publish_report(state))

    return state


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extract whitelisted tables from an account data report.")
    parser.add_argument("source", help="Path or http(s) URL of the HTML report")
    parser.add_argument("--output", "-o", default="output/report.json")
    parser.add_argument("--user-id", help="Publish the result to the blob store for this user")
    parser.add_argument("--codes", action="store_true",
                        help="Key the written output by short codes (the published copy keeps full headings)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if not is_url(args.source) and not Path(args.source).exists():
        logger.error("File not found: %s", args.source)
        return 1

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    start = time.time()
    logger.info("Extracting tables from %s", args.source)

    try:
        state = run_pipeline(args.source, user_id=args.user_id, use_codes=args.codes)
    except ReportParserError as exc:
        logger.error("%s", exc)
        return 1
    except Exception:
        logger.exception("Pipeline failed")
        return 1

    output = state["output"]

    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(output, fh, indent=2, ensure_ascii=False)

    if "published" in state:
        print(json.dumps({"url": state["published"]["url"]}))

    logger.info("Done: %d sections -> %s (%.1fs)",
                len(output), output_path, time.time() - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
