from dataclasses import dataclass
from typing import List


@dataclass
class Command:
    action: str
    operands: List[str]

    @property
    def arity(self):
        """Token count including the action word."""
        return len(self.operands) + 1


class Listener:
    def __init__(self, collapse_whitespace=False):
        """
        The Listener turns raw input into a Command. Nothing else.
        By default it splits on single spaces, so doubled spaces yield empty
        operands. With collapse_whitespace it splits on runs of whitespace.
        """
        self.collapse_whitespace = collapse_whitespace

    def parse(self, line):
        if self.collapse_whitespace:
            tokens = line.split()
        else:
            tokens = line.split(" ")

        if not tokens:
            # "".split() is []; keep the empty action so it falls through to unknown
            return Command(action="", operands=[])
        return Command(action=tokens[0], operands=tokens[1:])
