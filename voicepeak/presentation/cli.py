"""Command-line front end for the VOICEPEAK wrapper.

Usage:
  voicepeak-wrapper say "こんにちは" -o hello.wav -n "Japanese Female 1" -e happy=50 --speed 120
  voicepeak-wrapper say-file script.txt -o script.wav
  voicepeak-wrapper narrators --with-emotions --json
  voicepeak-wrapper emotions "Japanese Female 1"

Notes:
- The executable path comes from --exe, then VOICEPEAK_EXE_PATH, then the platform default.
- Exit code 1 on any wrapper error, 2 on usage errors.
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Dict, List, Optional

from voicepeak.core.config import settings
from voicepeak.core.exceptions import VoicepeakError
from voicepeak.core.logging_setup import setup_logging
from voicepeak.infrastructure.adapters.voicepeak_client import VoicepeakClient

logger = logging.getLogger(__name__)


def parse_emotion(value: str) -> tuple[str, int]:
    """Parse one `label=intensity` pair."""
    label, sep, intensity = value.partition("=")
    label = label.strip()
    if not sep or not label:
        raise argparse.ArgumentTypeError(
            f"invalid emotion '{value}', expected label=intensity"
        )
    try:
        return label, int(intensity)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid intensity in '{value}', expected an integer"
        ) from None


def _add_speech_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-o", "--output", help="Output audio file path")
    parser.add_argument("-n", "--narrator", help="Narrator name")
    parser.add_argument(
        "-e",
        "--emotion",
        action="append",
        type=parse_emotion,
        default=[],
        metavar="LABEL=INTENSITY",
        help="Emotion intensity, repeatable (needs --narrator)",
    )
    parser.add_argument("--speed", type=int, help="Speech speed (50..200)")
    parser.add_argument("--pitch", type=int, help="Speech pitch (-300..300)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="voicepeak-wrapper",
        description="Drive the VOICEPEAK text-to-speech executable",
    )
    parser.add_argument("--exe", help="Path to the VOICEPEAK executable")
    parser.add_argument(
        "--timeout", type=float, help="Seconds to wait for each VOICEPEAK call"
    )
    parser.add_argument(
        "--log-level", default=None, help=f"Logging level (default {settings.log_level})"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    say = sub.add_parser("say", help="Speak literal text")
    say.add_argument("text", help="Text to speak")
    _add_speech_options(say)

    say_file = sub.add_parser("say-file", help="Speak the contents of a text file")
    say_file.add_argument("text_file", help="Path to the text file")
    _add_speech_options(say_file)

    narrators = sub.add_parser("narrators", help="List installed narrators")
    narrators.add_argument(
        "--with-emotions",
        action="store_true",
        help="Also list the emotions of each narrator",
    )
    narrators.add_argument("--json", action="store_true", help="Print JSON")

    emotions = sub.add_parser("emotions", help="List emotions for a narrator")
    emotions.add_argument("name", help="Narrator name")
    emotions.add_argument("--json", action="store_true", help="Print JSON")

    return parser


async def _dispatch(client: VoicepeakClient, args: argparse.Namespace) -> None:
    if args.command in ("say", "say-file"):
        emotions: Dict[str, int] = dict(args.emotion)
        speech = dict(
            output_path=args.output,
            narrator=args.narrator,
            emotions=emotions or None,
            speed=args.speed,
            pitch=args.pitch,
        )
        if args.command == "say":
            await client.say_text(args.text, **speech)
        else:
            await client.say_text_file(args.text_file, **speech)
        return

    if args.command == "narrators":
        if args.with_emotions:
            narrators = await client.get_narrator_list()
            if args.json:
                print(json.dumps([n.model_dump() for n in narrators], ensure_ascii=False))
            else:
                for n in narrators:
                    print(f"{n.name}: {', '.join(n.emotions)}")
            return
        names = await client.get_narrator_name_list()
        _print_list(names, args.json)
        return

    if args.command == "emotions":
        _print_list(await client.get_emotion_list(args.name), args.json)


def _print_list(items: List[str], as_json: bool) -> None:
    if as_json:
        print(json.dumps(items, ensure_ascii=False))
    else:
        for item in items:
            print(item)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        client = VoicepeakClient(args.exe, timeout=args.timeout)
        asyncio.run(_dispatch(client, args))
    except VoicepeakError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
