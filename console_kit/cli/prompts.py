"""Interactive prompts that read whitespace-delimited tokens like scanf"""

import math
from collections import deque
from typing import Deque, Optional, TextIO

from console_kit.domain.exceptions import InputError


class PromptReader:
    """
    Write a prompt, then read the next whitespace-delimited token.

    Blank lines are skipped and extra tokens on a line are kept for the
    following prompts, so "apple pear fig" on one line answers three prompts.
    """

    def __init__(self, stdin: TextIO, stdout: TextIO):
        self.stdin = stdin
        self.stdout = stdout
        self._pending: Deque[str] = deque()

    def read_token(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()

        while not self._pending:
            line = self.stdin.readline()
            if not line:
                raise InputError(f"Input closed before a value was read for {prompt.strip()!r}")
            self._pending.extend(line.split())

        return self._pending.popleft()

    def read_float(self, prompt: str) -> float:
        token = self.read_token(prompt)
        value: Optional[float]
        try:
            value = float(token)
        except ValueError:
            value = None

        if value is None or not math.isfinite(value):
            raise InputError(f"Expected a number, got {token!r}")
        return value

    def read_int(self, prompt: str) -> int:
        token = self.read_token(prompt)
        try:
            return int(token)
        except ValueError:
            raise InputError(f"Expected a whole number, got {token!r}") from None
