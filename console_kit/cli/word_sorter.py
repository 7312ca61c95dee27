"""word-sorter: read three words and print them in alphabetical order"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from console_kit.cli.prompts import PromptReader
from console_kit.config import Settings, settings as default_settings
from console_kit.domain.exceptions import InputError
from console_kit.domain.words import sort_words
from console_kit.infrastructure.observability.logging import log_sort, setup_logging
from console_kit.infrastructure.observability.metrics import input_error_counter, word_sort_counter

PROMPTS = [
    "Enter the first word: ",
    "Enter the second word: ",
    "Enter the third word: ",
]


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="word-sorter",
        description="Sort three words in alphabetical (ordinal) order.",
    )


def run(reader: PromptReader, stdout: TextIO) -> List[str]:
    words = [reader.read_token(prompt) for prompt in PROMPTS]
    ordered = sort_words(words)

    stdout.write("\nWords in alphabetical order:\n")
    for word in ordered:
        stdout.write(f"{word}\n")

    word_sort_counter.inc()
    log_sort(ordered)
    return ordered


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    settings: Optional[Settings] = None,
) -> int:
    build_parser().parse_args(argv)
    settings = settings or default_settings
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    setup_logging(settings.log_level, settings.service_name)

    try:
        run(PromptReader(stdin, stdout), stdout)
    except InputError as e:
        input_error_counter.labels(program="word-sorter").inc()
        logging.warning(f"Input error: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
