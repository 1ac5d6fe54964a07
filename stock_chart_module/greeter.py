"""Greeting formatter with an optional record-store side effect."""
from __future__ import annotations

from typing import Optional

from .store import RecordStore


class Greeter:
    """Object that displays a greeting."""

    def __init__(self, greeting: str) -> None:
        self._greeting = greeting

    def greeting(self, thing: str) -> str:
        """Return ``"<greeting> <thing>"``."""

        return f"{self._greeting} {thing}"

    def greet(self, thing: str, store: Optional[RecordStore] = None) -> str:
        """Seed the record store, then print the greeting.

        ``StoreError`` propagates before anything is printed.
        """

        (store or RecordStore()).initialize()
        message = self.greeting(thing)
        print(message)
        return message
