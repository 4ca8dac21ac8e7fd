from quanlyvattu import console


def _reader(answers, prompts):
    answers = iter(answers)

    def read(prompt):
        prompts.append(prompt)
        return next(answers)

    return read


def test_check_password_accepts_on_later_attempt(capsys):
    prompts = []
    assert console.check_password(_reader(["wrong", "secret"], prompts), 3, "secret") is True
    assert len(prompts) == 2
    assert "Password sai. Hay nhap lai" in capsys.readouterr().out


def test_check_password_gives_up_after_attempts(capsys):
    prompts = []
    result = console.check_password(_reader(["a", "b", "c", "d"], prompts), 3, "secret")
    assert result is False
    assert len(prompts) == 3
    assert capsys.readouterr().out.count("Password sai. Hay nhap lai") == 3


def test_check_password_default_expected():
    prompts = []
    assert console.check_password(_reader([console.PASSWORD], prompts)) is True
    assert prompts == ["Password :"]


def test_move_cursor_origin(capsys):
    console.move_cursor(0, 0)
    assert capsys.readouterr().out == "\x1b[1;1H"


def test_move_cursor_distinct_positions(capsys):
    console.move_cursor(3, 7)
    first = capsys.readouterr().out
    console.move_cursor(7, 3)
    second = capsys.readouterr().out
    assert first.startswith("\x1b[") and first.endswith("H")
    assert first != second


def test_foreground_masks_high_bits(capsys):
    console.foreground(0x3)
    low = capsys.readouterr().out
    console.foreground(0x13)
    assert capsys.readouterr().out == low


def test_foreground_bright_differs(capsys):
    console.foreground(0x3)
    normal = capsys.readouterr().out
    console.foreground(0xB)
    bright = capsys.readouterr().out
    assert normal.endswith("m") and bright.endswith("m")
    assert normal != bright


def test_background_differs_from_foreground(capsys):
    console.foreground(0x4)
    fg = capsys.readouterr().out
    console.background(0x4)
    bg = capsys.readouterr().out
    assert bg.startswith("\x1b[") and bg.endswith("m")
    assert fg != bg


def test_background_masks_high_bits(capsys):
    console.background(0x2)
    low = capsys.readouterr().out
    console.background(0xF2)
    assert capsys.readouterr().out == low


def test_clear_and_cursor_visibility(capsys):
    console.clear_screen()
    assert capsys.readouterr().out == console.CLEAR_SCREEN
    console.hide_cursor()
    assert capsys.readouterr().out == console.HIDE_CURSOR
    console.show_cursor()
    assert capsys.readouterr().out == console.SHOW_CURSOR


def test_console_size_from_environment(monkeypatch):
    monkeypatch.setenv("COLUMNS", "120")
    monkeypatch.setenv("LINES", "40")
    assert console.console_size() == (120, 40)