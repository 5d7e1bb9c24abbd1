"""A telephone abonent that talks to the exchange with text requests."""

from __future__ import annotations

import argparse
import re
import sys
import threading
from enum import IntEnum
from typing import Callable, List, Optional, Sequence

from polyats.transport import Communicator

NETWORK_HOST = "127.0.0.1"
SERVER_PORT = 1984
NEW_CLIENT_PORT = 1

_TWO_NUMBERS = re.compile(r"(?:\d+\s+){2}", re.ASCII)
_ONE_NUMBER = re.compile(r"(?:\d+\s+){1}", re.ASCII)

Send = Callable[[str], None]


class Status(IntEnum):
    """The state of an abonent as the exchange sees it."""

    IDLE = 0
    READY = 1
    BUSY = 2
    RINGING = 3
    IN_CALL = 4


def _request_type(tokens: List[str]) -> int:
    if not tokens:
        raise ValueError("empty message")
    try:
        return int(tokens[0])
    except ValueError:
        raise ValueError(f"bad message type: {tokens[0]!r}") from None


def _number_at(tokens: List[str], position: int) -> int:
    try:
        token = tokens[position]
    except IndexError:
        raise ValueError("message is missing a number") from None
    if not token.isascii() or not token.isdigit() or int(token) > 0xFFFF:
        raise ValueError(f"bad number: {token!r}")
    return int(token)


def describe_event(message: str) -> Optional[str]:
    """Return the text to show for a message from the exchange, or None if it has none."""
    tokens = message.split()
    kind = _request_type(tokens)
    if kind == 0:
        return f"Your number is {_number_at(tokens, 1)}"
    if kind == 1:
        full = len(tokens) > 1 and tokens[1] == "1"
        return "ATS is busy!" if full else "Ready to call!"
    if kind == 2:
        return "Call is rejected or aborted"
    if kind == 3:
        return f"{_number_at(tokens, 1)} is calling you!"
    if kind == 4:
        return "Connection is established!"
    if kind == 5:
        sender = _number_at(tokens, 1)
        return f"[{sender}]: {_TWO_NUMBERS.sub('', message)}"
    if kind == 6:
        return "Call is over!"
    if kind == 7:
        return f"[SERVER]: {_ONE_NUMBER.sub('', message)}"
    return None


class Abonent:
    """Client-side call state; requests to the exchange go out through *send*."""

    def __init__(self, send: Send) -> None:
        self._send = send
        self.number: Optional[int] = None
        self.status = Status.IDLE
        self.in_call_with: Optional[int] = None

    def _require_number(self) -> int:
        if self.number is None:
            raise RuntimeError("the abonent has no number yet")
        return self.number

    def register(self) -> None:
        """Ask the exchange for a number."""
        self._send("0")

    def handle_message(self, message: str) -> Optional[str]:
        """Apply a message from the exchange and return the text to show for it."""
        description = describe_event(message)
        tokens = message.split()
        kind = _request_type(tokens)
        if kind == 0:
            self.number = _number_at(tokens, 1)
            self.status = Status.IDLE
        elif kind == 1:
            full = len(tokens) > 1 and tokens[1] == "1"
            self.status = Status.BUSY if full else Status.READY
        elif kind in (2, 6):
            self.status = Status.IDLE
        elif kind == 3:
            self.status = Status.RINGING
            self.in_call_with = _number_at(tokens, 1)
        elif kind == 4:
            self.status = Status.IN_CALL
        elif kind == 7:
            self.status = Status.BUSY
        return description

    def call(self, number: int) -> None:
        """Ask the exchange to ring *number*."""
        own = self._require_number()
        if number == own:
            raise ValueError("You can't call yourself!")
        self.in_call_with = number
        self._send(f"2 {own} {number}")
        self.status = Status.RINGING

    def answer(self, who: int) -> None:
        """Accept the call from *who*."""
        self._send(f"3 {self._require_number()} {who} 1")

    def hang_up(self, who: Optional[int] = None) -> None:
        """Reject a ringing call or end the current one."""
        own = self._require_number()
        partner = self.in_call_with if who is None else who
        if self.status is Status.RINGING:
            self._send(f"3 {own} {partner} 0")
        elif self.status is Status.IN_CALL:
            self._send(f"6 {own}")
        self.status = Status.IDLE

    def pick_up(self) -> None:
        """Ask the exchange whether a call can be placed."""
        self._send(f"1 {self._require_number()}")

    def send_text(self, text: str) -> bool:
        """Send *text* to the partner; return False if not in a call or the text is blank."""
        if self.status is not Status.IN_CALL or not text.strip():
            return False
        self._send(f"5 {self._require_number()} {text}")
        return True

    def close(self) -> None:
        """Tell the exchange to release this abonent's number."""
        if self.number is not None:
            self._send(f"7 {self.number}")


class _Link:
    """Sends requests to the exchange through whichever socket is current."""

    def __init__(self, communicator: Communicator) -> None:
        self.communicator = communicator

    def __call__(self, message: str) -> None:
        self.communicator.send(message, NETWORK_HOST, SERVER_PORT)


_HELP = "commands: check | call NUMBER | answer | hangup | say TEXT | quit"


def _run_command(abonent: Abonent, line: str) -> bool:
    command, _, rest = line.strip().partition(" ")
    if command == "quit":
        return False
    if command == "check":
        abonent.pick_up()
    elif command == "call":
        abonent.call(int(rest))
    elif command == "answer":
        if abonent.in_call_with is None:
            raise ValueError("nobody is calling")
        abonent.answer(abonent.in_call_with)
    elif command == "hangup":
        abonent.hang_up()
    elif command == "say":
        if not abonent.send_text(rest):
            print("Not in a call or nothing to send.", flush=True)
    elif command:
        print(_HELP, flush=True)
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Register with the local exchange and run an interactive telephone."""
    parser = argparse.ArgumentParser(
        prog="polyats-phone", description="A telephone for the exchange."
    )
    parser.add_argument("--timeout", type=float, default=5.0)
    args = parser.parse_args(argv)

    with Communicator(NETWORK_HOST, NEW_CLIENT_PORT) as first:
        link = _Link(first)
        abonent = Abonent(link)
        abonent.register()
        reply = first.receive(args.timeout)
    if reply is None:
        print("The exchange did not answer.", file=sys.stderr)
        return 1
    abonent.handle_message(reply)
    if abonent.number is None:
        print("The exchange refused a number.", file=sys.stderr)
        return 1

    lock = threading.Lock()
    stop = threading.Event()
    with Communicator(NETWORK_HOST, abonent.number) as communicator:
        link.communicator = communicator

        def listen() -> None:
            while not stop.is_set():
                message = communicator.receive(0.5)
                if message is None:
                    continue
                try:
                    with lock:
                        text = abonent.handle_message(message)
                except ValueError as error:
                    text = f"Bad message: {error}"
                if text:
                    print(text, flush=True)

        listener = threading.Thread(target=listen, daemon=True)
        listener.start()
        print(f"Your number is {abonent.number}", flush=True)
        print(_HELP, flush=True)
        try:
            for line in sys.stdin:
                try:
                    with lock:
                        if not _run_command(abonent, line):
                            break
                except (ValueError, RuntimeError) as error:
                    print(error, flush=True)
        except KeyboardInterrupt:
            pass
        finally:
            with lock:
                abonent.close()
            stop.set()
            listener.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())