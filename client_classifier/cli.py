"""
Client Classifier CLI - classify User-Agent strings offline.

Usage:
    client-classify --user-agent "Mozilla/5.0 (Windows NT 10.0; ...)"
    client-classify --client-hints '{"brands": [{"brand": "Google Chrome", "version": "140"}], "platform": "Windows"}'
    cat agents.txt | client-classify

An explicit User-Agent, from --user-agent or stdin, is always parsed as a
string; --client-hints is only used when no User-Agent is given.
"""

import argparse
import json
import sys
from typing import List, Optional

from pydantic import ValidationError

from client_classifier.core.classifier import classify
from client_classifier.core.models import ClientHintsData, RuntimeSignals
from client_classifier.core.schemas import ClientHintsModel


def parse_client_hints(raw: Optional[str]) -> Optional[ClientHintsData]:
    """
    Parse a navigator.userAgentData-shaped JSON object

    Raises:
        ValidationError: malformed JSON or values of the wrong type
    """
    if not raw:
        return None
    return ClientHintsModel.model_validate_json(raw).to_client_hints()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Classify browser, OS, device and engine")
    parser.add_argument("--user-agent", help="User-Agent string to classify (takes precedence over --client-hints)")
    parser.add_argument("--client-hints", help="Client hints as a JSON object")
    parser.add_argument("--platform", default="", help="navigator.platform (e.g. MacIntel)")
    parser.add_argument("--max-touch-points", type=int, default=0, help="navigator.maxTouchPoints")
    parser.add_argument("--brave", action="store_true", help="navigator.brave is present")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        client_hints = parse_client_hints(args.client_hints)
    except ValidationError as e:
        print(f"Invalid --client-hints: {e}", file=sys.stderr)
        return 1

    def signals_for(user_agent: str) -> RuntimeSignals:
        return RuntimeSignals(
            user_agent=user_agent,
            client_hints=client_hints,
            platform=args.platform,
            max_touch_points=args.max_touch_points,
            is_brave=args.brave,
        )

    if args.user_agent is not None or client_hints is not None:
        results = [classify(args.user_agent or None, signals_for(args.user_agent or ""))]
    else:
        agents = [line.strip() for line in sys.stdin if line.strip()]
        if not agents:
            print("Provide --user-agent, --client-hints, or pipe User-Agents via stdin.", file=sys.stderr)
            return 1
        results = [classify(agent, signals_for(agent)) for agent in agents]

    output = [r.to_dict() for r in results]
    print(json.dumps(output[0] if len(output) == 1 else output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
