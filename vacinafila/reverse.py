"""Print a word backwards by pushing its letters onto a stack."""

from __future__ import annotations

import argparse
import sys

from .stack import Stack


def reverse_word(word: str) -> str:
    """Return the word with its characters in reverse order."""
    stack = Stack()
    for char in word:
        stack.push(char)
    letters = []
    while not stack.empty():
        letters.append(stack.pop())
    return "".join(letters)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print a word backwards.")
    parser.add_argument("word", nargs="?", help="the word to reverse")
    args = parser.parse_args(argv)

    word = args.word
    if word is None:
        print("Insira a palavra: ", end="", flush=True)
        tokens = sys.stdin.readline().split()
        word = tokens[0] if tokens else ""
    print(f"Palavra ao contrario: {reverse_word(word)}")
    return 0