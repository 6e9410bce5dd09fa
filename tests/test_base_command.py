import pytest

from firebase_ci.base import BaseCommand
from firebase_ci.exceptions import CommandError


class FailingCommand(BaseCommand):
    def __init__(self, services, error):
        super().__init__(services)
        self.error = error

    def execute(self) -> None:
        raise self.error


def test_error_message_with_brackets_is_printed_literally(make_services, output):
    error = CommandError("Command failed: echo [/x] [bold]", returncode=1, stderr="[/oops]")

    with pytest.raises(SystemExit) as exc_info:
        FailingCommand(make_services(), error).run()

    assert exc_info.value.code == 1
    text = output.export_text()
    assert "Command failed: echo [/x] [bold]" in text
    assert "[/oops]" in text


def test_unexpected_error_with_brackets(make_services, output):
    with pytest.raises(SystemExit) as exc_info:
        FailingCommand(make_services(), ValueError("bad [/value]")).run()

    assert exc_info.value.code == 1
    assert "ValueError: bad [/value]" in output.export_text()


def test_keyboard_interrupt_exits_130(make_services):
    with pytest.raises(SystemExit) as exc_info:
        FailingCommand(make_services(), KeyboardInterrupt()).run()
    assert exc_info.value.code == 130
