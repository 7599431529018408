"""Tests for the last-error slot."""

import threading

from hookxml import clear_last_error, get_last_error
from hookxml.diagnostics import record_last_error


def test_record_and_clear():
    """Test the slot holds the most recent message until cleared."""
    assert get_last_error() is None

    record_last_error("first")
    record_last_error("second")
    assert get_last_error() == "second"

    clear_last_error()
    assert get_last_error() is None


def test_slot_is_process_global():
    """Test a message recorded on another thread is visible here."""
    worker = threading.Thread(target=record_last_error, args=("from worker",))
    worker.start()
    worker.join()

    assert get_last_error() == "from worker"
