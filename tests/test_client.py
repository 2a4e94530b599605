import io
import os
import signal
from unittest import mock

import pytest

from sigtalk.client import send_message, main
from sigtalk.protocol import CharDecoder, Signal, encode_message
from sigtalk.server import Server


def _decode(calls):
    decoder = CharDecoder()
    out = bytearray()
    for sig in calls:
        byte = decoder.feed(sig)
        if byte is not None:
            out.append(byte)
    return bytes(out)


@pytest.fixture
def restore_handlers():
    saved = {sig: signal.getsignal(sig) for sig in Signal}
    yield
    for sig, handler in saved.items():
        signal.signal(sig, handler)


def test_send_message_signals_target_in_order():
    with mock.patch("os.kill") as kill:
        count = send_message(4321, "hi", delay=0)
    assert count == 16
    assert {c.args[0] for c in kill.call_args_list} == {4321}
    sent = [c.args[1] for c in kill.call_args_list]
    assert sent == list(encode_message("hi"))
    assert _decode(sent) == b"hi"


def test_send_message_sleeps_after_each_bit():
    with mock.patch("os.kill"), mock.patch("time.sleep") as sleep:
        count = send_message(4321, "a", delay=0.5)
    assert count == 8
    assert sleep.call_count == 8
    assert all(c.args == (0.5,) for c in sleep.call_args_list)


def test_empty_message_sends_nothing():
    with mock.patch("os.kill") as kill:
        assert send_message(4321, "", delay=0) == 0
    assert kill.call_count == 0


@pytest.mark.parametrize("pid", [0, -1])
def test_send_message_rejects_non_process_ids(pid):
    with pytest.raises(ValueError):
        send_message(pid, "x", delay=0)


def test_send_message_reaches_real_server(restore_handlers):
    stream = io.BytesIO()
    Server(stream).install()
    send_message(os.getpid(), "round trip", delay=0)
    assert stream.getvalue() == b"round trip"


@pytest.mark.parametrize("argv", [[], ["123"], ["123", "a", "b"]])
def test_main_wrong_argument_count(argv):
    with mock.patch("os.kill") as kill:
        assert main(argv) == 1
    assert kill.call_count == 0


def test_main_parses_pid_like_atoi():
    with mock.patch("os.kill") as kill, mock.patch("time.sleep"):
        assert main(["  +77abc", "yo"]) == 0
    assert {c.args[0] for c in kill.call_args_list} == {77}
    assert _decode(c.args[1] for c in kill.call_args_list) == b"yo"


def test_main_reports_bad_pid(capsys):
    with mock.patch("os.kill") as kill:
        assert main(["abc", "x"]) == 1
    assert kill.call_count == 0
    assert "client:" in capsys.readouterr().err


def test_main_reports_delivery_failure(capsys):
    with mock.patch("os.kill", side_effect=ProcessLookupError("no such process")):
        assert main(["4321", "x"]) == 1
    assert "no such process" in capsys.readouterr().err