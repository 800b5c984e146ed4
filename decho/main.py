import os, sys, argparse
from typing import List, Mapping, Optional, TextIO
from dotenv import find_dotenv, load_dotenv

from decho.ingest.stdin import collect_text
from decho.format.message import build_message
from decho.senders.discord import send_message
from decho.util.errors import DechoError
from decho.util.webhook import resolve_webhook


def _debug(on: bool, msg: str) -> None:
    # stdout may be piped somewhere; keep diagnostics off it
    if on:
        print(msg, file=sys.stderr)


# ----------------------------------- action -----------------------------------

def main_action(
    file_path: Optional[str],
    webhook_arg: Optional[str],
    stdin: TextIO,
    args: Optional[List[str]] = None,
    env: Optional[Mapping[str, str]] = None,
    debug: bool = False,
) -> None:
    """Resolve the webhook, assemble the message and send it. Nothing is sent if any step fails."""
    # 1) destination
    webhook = resolve_webhook(webhook_arg, env)
    _debug(debug, "[config] webhook resolved")

    # 2) input
    text = collect_text(stdin, args)
    _debug(debug, f"[input] chars={len(text)} args={len(args or [])}")

    # 3) assemble
    message = build_message(text, file_path)
    _debug(debug, f"[message] text_chars={len(message.text)} attachments={[a.name for a in message.attachments]}")

    # 4) deliver
    _debug(debug, f"[send] {'multipart' if message.has_attachments else 'json'}")
    send_message(message, webhook)


# --------------------------------- CLI args -----------------------------------

def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="decho",
        description="Echo text (and an optional file) to a Discord webhook.",
        usage="decho -f <file> -w <webhook> <text>",
        epilog="Pipe usage: <command> | decho -f <file> -w <webhook>",
    )
    p.add_argument("-f", "--file", type=str, default="", help="Path to a file to attach")
    p.add_argument("-w", "--webhook", type=str, default="", help="Discord webhook URL (default: $DECHO_DISCORD_WEBHOOK)")
    p.add_argument("--debug", action="store_true", help="Verbose debug output to stderr")
    p.add_argument("text", nargs="*", help="Message text, joined with spaces")
    return p


# ----------------------------------- main -------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = _parser().parse_intermixed_args(argv)
    debug = args.debug or bool(os.getenv("DEBUG"))

    try:
        main_action(args.file, args.webhook, sys.stdin, args.text, debug=debug)
    except DechoError as e:
        print(f"[decho] error: {e}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()


# Local examples:
# echo "hi" | python -m decho.main -w "$DECHO_DISCORD_WEBHOOK"
# python -m decho.main -f build.log "nightly build finished"
# make test 2>&1 | decho --debug
