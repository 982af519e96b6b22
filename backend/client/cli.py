import argparse
import logging
import os
import sys

from client.controller import SummarizeFormController
from client.render import render
from client.state import ErrorState, LoadingState

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarize text with the Smart Content Summarizer API")
    parser.add_argument("file", nargs="?", help="Text file to summarize (default: stdin)")
    parser.add_argument(
        "--length",
        choices=["short", "medium", "detailed"],
        default="medium",
        help="Summary length (default: medium)"
    )
    parser.add_argument(
        "--url",
        default=os.getenv("SUMMARIZER_API_URL", "http://localhost:5000"),
        help="API base URL (env: SUMMARIZER_API_URL)"
    )
    parser.add_argument("--timeout", type=float, default=60.0, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    controller = SummarizeFormController(base_url=args.url, timeout=args.timeout)
    # Loading is transient here; show it on stderr so stdout stays the summary
    controller.subscribe(
        lambda state: print(render(state), file=sys.stderr) if isinstance(state, LoadingState) else None
    )
    state = controller.submit(text, args.length)

    if isinstance(state, ErrorState):
        print(render(state), file=sys.stderr)
        return 1
    print(render(state))
    return 0

if __name__ == "__main__":
    sys.exit(main())
