"""The exchange: assigns numbers to abonents and switches calls between them."""

from __future__ import annotations

import argparse
import re
import sys
from collections import deque
from typing import Callable, Deque, Dict, Iterable, List, Optional, Sequence, Tuple

from polyats.transport import Communicator

NETWORK_HOST = "127.0.0.1"
SERVER_PORT = 1984
NEW_CLIENT_PORT = 1
FIRST_ID = 10000
ID_LIMIT = 2 ** 16 - 1

IDLE = 0
READY = 1
BUSY = 2
RINGING = 3
IN_CALL = 4

_MAX_BITS = 10000
_LEADING_NUMBERS = re.compile(r"(?:\d+\s+){2}", re.ASCII)

Send = Callable[[str, int], None]


def index_find_call(calls: Iterable[Tuple[int, int]], key: int) -> int:
    """Return the index of the call that *key* takes part in, or -1."""
    for index, (first, second) in enumerate(calls):
        if first == key or second == key:
            return index
    return -1


def index_find_abonent(abonents: Iterable[Tuple[int, int]], key: int) -> int:
    """Return the index of the (number, status) pair for *key*, or -1."""
    for index, (number, _status) in enumerate(abonents):
        if number == key:
            return index
    return -1


def _read_number(tokens: Deque[str]) -> Optional[int]:
    if not tokens:
        return None
    token = tokens.popleft()
    if not token.isascii() or not token.isdigit():
        tokens.clear()
        return None
    return int(token)


def _read_port(tokens: Deque[str]) -> Optional[int]:
    value = _read_number(tokens)
    if value is None or value > 0xFFFF:
        tokens.clear()
        return None
    return value


class Server:
    """Call-switching state machine driven by text requests.

    Requests are ``<type> <arguments>``; replies go out through *send*,
    called as ``send(message, port)``.
    """

    def __init__(self, connection_bits: int, abonent_bits: int, send: Send) -> None:
        if connection_bits < 0 or abonent_bits < 0:
            raise ValueError("bit counts must not be negative")
        self.max_connections = 2 ** connection_bits
        self.max_abonents = 2 ** abonent_bits - 1
        self._send = send
        self._free_ids: List[int] = list(range(FIRST_ID, ID_LIMIT))
        self.abonents: Dict[int, int] = {}
        self.calls: List[Tuple[int, int]] = []
        self._handlers = {
            0: self._register,
            1: self._ping,
            2: self._call,
            3: self._answer,
            5: self._relay,
            6: self._hang_up,
            7: self._remove,
        }

    def handle_message(self, message: str) -> bool:
        """Process one request; return True if the visible state should be refreshed."""
        tokens = deque(message.split())
        request = _read_number(tokens)
        handler = self._handlers.get(request) if request is not None else None
        if handler is None:
            return True
        return handler(tokens, message)

    def status_lines(self) -> List[str]:
        """Describe connected abonents and current calls."""
        lines = [f"Connected abonents ({len(self.abonents)}/{self.max_abonents}):"]
        lines.extend(
            f"Number: {number} Status: {status}"
            for number, status in self.abonents.items()
        )
        lines.append(f"Current calls ({len(self.calls)}/{self.max_connections}):")
        lines.extend(f"{{{first},{second}}}" for first, second in self.calls)
        return lines

    def serve(self, communicator: Communicator) -> None:
        """Handle requests from *communicator* until it yields no message."""
        while (message := communicator.receive()) is not None:
            if self.handle_message(message):
                print("\n".join(self.status_lines()), flush=True)

    def _set_status(self, number: int, status: int) -> None:
        if number in self.abonents:
            self.abonents[number] = status

    def _partner(self, number: int) -> Optional[int]:
        index = index_find_call(self.calls, number)
        if index == -1:
            return None
        first, second = self.calls[index]
        return second if number == first else first

    def _register(self, tokens: Deque[str], message: str) -> bool:
        if len(self.abonents) >= self.max_abonents or not self._free_ids:
            return False
        number = self._free_ids.pop()
        self._send(f"0 {number}", NEW_CLIENT_PORT)
        self.abonents[number] = IDLE
        return True

    def _ping(self, tokens: Deque[str], message: str) -> bool:
        requestee = _read_port(tokens)
        if requestee is None:
            return True
        if len(self.calls) < self.max_connections:
            self._set_status(requestee, READY)
            self._send("1 0", requestee)
        else:
            self._set_status(requestee, BUSY)
            self._send("1 1", requestee)
        return True

    def _call(self, tokens: Deque[str], message: str) -> bool:
        requestee = _read_port(tokens)
        if requestee is None:
            return True
        addressee = _read_port(tokens)
        if addressee is None:
            self._send("7 Error while parsing data!", requestee)
            return True
        if addressee not in self.abonents:
            self._send("7 Number not found!", requestee)
            return False
        if self.abonents[addressee] in (RINGING, IN_CALL, READY):
            self._set_status(requestee, IDLE)
            self._send("7 Number is busy!", requestee)
            return False
        self._set_status(requestee, RINGING)
        self._set_status(addressee, RINGING)
        self._send(f"3 {requestee}", addressee)
        return True

    def _answer(self, tokens: Deque[str], message: str) -> bool:
        respondent = _read_port(tokens)
        caller = _read_port(tokens)
        if respondent is None or caller is None:
            return True
        accepted = bool(tokens) and tokens.popleft() == "1"
        if accepted:
            self._set_status(respondent, IN_CALL)
            self._set_status(caller, IN_CALL)
            self.calls.append((respondent, caller))
            self._send("4", respondent)
            self._send("4", caller)
        else:
            self._set_status(respondent, IDLE)
            self._set_status(caller, IDLE)
            self._send("2", caller)
            self._send("2", respondent)
        return True

    def _relay(self, tokens: Deque[str], message: str) -> bool:
        sender = _read_port(tokens)
        if sender is None:
            return True
        partner = self._partner(sender)
        if partner is not None:
            text = _LEADING_NUMBERS.sub("", message)
            self._send(f"5 {sender} {text}", partner)
        return True

    def _hang_up(self, tokens: Deque[str], message: str) -> bool:
        sender = _read_port(tokens)
        if sender is None:
            return True
        index = index_find_call(self.calls, sender)
        if index == -1:
            return True
        partner = self._partner(sender)
        self._send("6", sender)
        self._set_status(sender, IDLE)
        if partner is not None:
            self._send("6", partner)
            self._set_status(partner, IDLE)
        del self.calls[index]
        return True

    def _remove(self, tokens: Deque[str], message: str) -> bool:
        abonent = _read_port(tokens)
        if abonent is None:
            return True
        index = index_find_call(self.calls, abonent)
        if index != -1:
            del self.calls[index]
        if abonent in self.abonents:
            del self.abonents[abonent]
            self._free_ids.append(abonent)
        return True


def _bits(text: str) -> int:
    value = int(text)
    if not 0 <= value <= _MAX_BITS:
        raise argparse.ArgumentTypeError(f"must be between 0 and {_MAX_BITS}")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the exchange on the local server port until interrupted."""
    parser = argparse.ArgumentParser(
        prog="polyats-server",
        description="Run the call-switching exchange.",
    )
    parser.add_argument("connection_bits", type=_bits, help="at most 2**K calls")
    parser.add_argument("abonent_bits", type=_bits, help="at most 2**N-1 abonents")
    args = parser.parse_args(argv)
    with Communicator(NETWORK_HOST, SERVER_PORT) as communicator:
        server = Server(
            args.connection_bits,
            args.abonent_bits,
            lambda message, port: communicator.send(message, NETWORK_HOST, port),
        )
        try:
            server.serve(communicator)
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())