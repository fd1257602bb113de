import io
import termios

import pytest

from ui.terminal import Terminal


class FakeStdin:
    def fileno(self):
        return 7


@pytest.fixture
def tty_calls(monkeypatch):
    calls = []
    original = [0, 0, 0, termios.ICANON | termios.ECHO | termios.ISIG, 0, 0, []]

    def fake_tcgetattr(fd):
        calls.append(("get", fd))
        return list(original)

    def fake_tcsetattr(fd, when, attrs):
        calls.append(("set", fd, when, list(attrs)))

    monkeypatch.setattr(termios, "tcgetattr", fake_tcgetattr)
    monkeypatch.setattr(termios, "tcsetattr", fake_tcsetattr)
    return calls


def test_setup_disables_canonical_mode_and_echo(tty_calls):
    terminal = Terminal(FakeStdin(), io.StringIO())
    terminal.setup()

    assert terminal.is_setup
    _, fd, when, attrs = tty_calls[-1]
    assert (fd, when) == (7, termios.TCSANOW)
    assert not attrs[3] & termios.ICANON
    assert not attrs[3] & termios.ECHO
    assert attrs[3] & termios.ISIG


def test_restore_puts_back_original_settings(tty_calls):
    terminal = Terminal(FakeStdin(), io.StringIO())
    terminal.setup()
    terminal.restore()

    assert not terminal.is_setup
    _, _, _, attrs = tty_calls[-1]
    assert attrs[3] == termios.ICANON | termios.ECHO | termios.ISIG


def test_context_manager_restores_on_error(tty_calls):
    terminal = Terminal(FakeStdin(), io.StringIO())
    with pytest.raises(KeyError):
        with terminal:
            assert terminal.is_setup
            raise KeyError("boom")

    assert not terminal.is_setup
    assert tty_calls[-1][3][3] & termios.ICANON


def test_double_setup_and_unmatched_restore_raise(tty_calls):
    terminal = Terminal(FakeStdin(), io.StringIO())
    with pytest.raises(RuntimeError):
        terminal.restore()
    terminal.setup()
    with pytest.raises(RuntimeError):
        terminal.setup()


def test_clear_screen_writes_escape_codes():
    out = io.StringIO()
    Terminal(FakeStdin(), out).clear_screen()
    assert out.getvalue() == "\033[2J\033[0;0H"
