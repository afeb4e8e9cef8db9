"""Entry point: open the default mail client with a new message."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from mailto_mua import (
    AgentRegistry,
    ComposeRequest,
    MailClientError,
    MailtoController,
    load_config,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compose mail with the desktop's default mail client.")
    parser.add_argument("--to", help="Recipient address")
    parser.add_argument("--subject", help="Subject line")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    logging.basicConfig(level=config.log_level_number, format="%(levelname)s %(name)s: %(message)s")

    registry = AgentRegistry()
    try:
        controller = MailtoController.from_config(config, registry)
        controller.activate()
        controller.compose(ComposeRequest(to=args.to, subject=args.subject))
    except MailClientError as exc:
        raise SystemExit(f"Could not open the mail client: {exc}") from exc
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
