import argparse
import json
import sys

import structlog
from pydantic import ValidationError

from .client import SlackClient
from .config import Settings
from .domain.exceptions import SlackError
from .infrastructure.logging import configure_logging

logger = structlog.get_logger()


def _json_object(value: str) -> dict:
    try:
        data = json.loads(value)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON: {e.msg}") from e
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError("attachment must be a JSON object")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slackhook",
        description="Send a message to a Slack incoming webhook.",
    )
    parser.add_argument("text", help="Message text")
    parser.add_argument("--channel", help="Override the default channel")
    parser.add_argument("--username", help="Override the default username")
    parser.add_argument("--icon", help="Emoji token (:ghost:) or icon URL")
    parser.add_argument(
        "--attachment",
        action="append",
        default=[],
        type=_json_object,
        help="Attachment as a JSON object; may be repeated",
    )
    return parser


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Send one message from the command line. Returns the exit code."""
    args = build_parser().parse_args(argv)

    if settings is None:
        try:
            settings = Settings()
        except ValidationError as e:
            logger.error("Invalid configuration", error=str(e))
            return 1

    configure_logging(settings.service_name, settings.log_level, settings.log_json)

    try:
        client = SlackClient.from_settings(settings)
    except SlackError as e:
        logger.error("Message not sent", error=str(e))
        return 1

    try:
        message = client.create_message()
        if args.channel:
            message.to(args.channel)
        if args.username:
            message.from_(args.username)
        if args.icon:
            message.with_icon(args.icon)
        message.set_attachments(args.attachment)
        message.send(args.text)
    except SlackError as e:
        logger.error("Message not sent", error=str(e))
        return 1
    finally:
        client.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
