from unittest.mock import MagicMock, patch

from blessed.keyboard import Keystroke

from pidgypost.main import main


def _terminal(keys):
    term = MagicMock()
    term.width = 90
    term.height = 30
    term.inkey.side_effect = keys
    return term


def test_main_reports_error(capsys):
    with patch("pidgypost.app.Terminal", side_effect=RuntimeError("boom")):
        assert main([]) == 1
    assert "Alas, there's been an error: boom" in capsys.readouterr().out


def test_main_quits_on_q():
    term = _terminal([Keystroke("q")])
    with patch("pidgypost.app.Terminal", return_value=term):
        assert main([]) == 0
    assert term.inkey.call_count == 1


def test_main_select_then_escape_then_quit():
    term = _terminal([Keystroke("\r"), Keystroke("\x1b"), Keystroke("q")])
    with patch("pidgypost.app.Terminal", return_value=term):
        assert main([]) == 0
    assert term.inkey.call_count == 3


def test_main_q_while_selected_does_not_quit():
    term = _terminal([Keystroke("\r"), Keystroke("q")])
    with patch("pidgypost.app.Terminal", return_value=term):
        assert main([]) == 1
    assert term.inkey.call_count == 3