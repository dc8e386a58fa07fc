import io

from snakesladders.cli import main


def run(monkeypatch, capsys, text, argv=None):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv if argv is not None else ["--random-seed", "1"])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_default_game_end(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "0\nE\n")
    assert code == 0
    assert out.startswith("Welcome to the Snakes and Ladders Game")
    assert "Game Type: Manual" in out
    assert "Thanks for playing!!!" in out


def test_default_game_eof(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "0\n")
    assert code == 0
    assert "<<< GAME OVER >>>" in out


def test_custom_automatic_win(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "1\n2\n0\n0\n1\n5\n0\n0\nA\n")
    assert code == 0
    assert "Game Type: Automatic" in out
    assert "Player 1 is the winner!!!" in out


def test_custom_manual_commands(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "1 2 0 0 1 5 0 0 M C\n")
    assert code == 0
    assert "Turn 1" in out
    assert "Player 1 is the winner!!!" in out


def test_unknown_game_type_plays_nothing(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "1\n5\n0\n0\n1\n5\n0\n0\nX\n")
    assert code == 0
    assert "Game Type" not in out.replace("Game Type (A/M)", "")


def test_bad_number(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, "1\nmany\n")
    assert code == 1
    assert "expected a number" in err


def test_board_that_cannot_fit(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, "1\n2\n5\n5\n1\n5\n0\n0\nA\n")
    assert code == 1
    assert "do not fit" in err