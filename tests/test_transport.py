import pytest

from polyats.transport import Communicator


def test_send_and_receive_round_trip():
    with Communicator("127.0.0.1", 0) as receiver, Communicator("127.0.0.1", 0) as sender:
        host, port = receiver.address
        sender.send("2 10000 10001", host, port)
        assert receiver.receive(timeout=2.0) == "2 10000 10001"


def test_unicode_text_survives():
    with Communicator("127.0.0.1", 0) as receiver, Communicator("127.0.0.1", 0) as sender:
        host, port = receiver.address
        sender.send("5 10000 привет", host, port)
        assert receiver.receive(timeout=2.0) == "5 10000 привет"


def test_messages_arrive_in_order_one_per_receive():
    with Communicator("127.0.0.1", 0) as receiver, Communicator("127.0.0.1", 0) as sender:
        host, port = receiver.address
        sender.send("first", host, port)
        sender.send("second", host, port)
        assert [receiver.receive(timeout=2.0), receiver.receive(timeout=2.0)] == [
            "first",
            "second",
        ]


def test_receive_times_out_with_none():
    with Communicator("127.0.0.1", 0) as receiver:
        assert receiver.receive(timeout=0.05) is None


def test_bound_address_is_local():
    with Communicator("127.0.0.1", 0) as communicator:
        host, port = communicator.address
        assert host == "127.0.0.1"
        assert port > 0


def test_send_after_close_raises():
    communicator = Communicator("127.0.0.1", 0)
    communicator.close()
    with pytest.raises(OSError):
        communicator.send("0", "127.0.0.1", 9)


def test_binding_taken_port_raises():
    with Communicator("127.0.0.1", 0) as first:
        _host, port = first.address
        with pytest.raises(OSError):
            Communicator("127.0.0.1", port)