import re

from passforge.cli import main
from passforge.charsets import CharacterClass
from passforge.config import load_config

def _passwords(out):
    return re.findall(r"Password #\d+: (\S+)", out)

def test_generate_copies(capsys):
    assert main(["generate", "--length", "14", "--copies", "3"]) == 0
    pws = _passwords(capsys.readouterr().out)
    assert len(pws) == 3
    assert all(len(p) == 14 for p in pws)

def test_generate_without_classes(capsys):
    assert main(["generate", "--length", "20", "--no-symbols", "--no-upper", "--no-lower"]) == 0
    (pw,) = _passwords(capsys.readouterr().out)
    assert pw.isdigit()

def test_generate_seed_is_reproducible(capsys):
    main(["generate", "--seed", "11", "--copies", "2"])
    first = capsys.readouterr().out
    main(["generate", "--seed", "11", "--copies", "2"])
    assert capsys.readouterr().out == first

def test_generate_show_strength(capsys):
    main(["generate", "--length", "16", "--show-strength"])
    assert "(Strong)" in capsys.readouterr().out

def test_generate_no_classes_fails(capsys):
    code = main(["generate", "--no-symbols", "--no-upper", "--no-lower", "--no-digits"])
    assert code == 1
    assert "no character class selected" in capsys.readouterr().out

def test_generate_invalid_length_fails(capsys):
    assert main(["generate", "--length", "0"]) == 1
    assert "invalid length" in capsys.readouterr().out

def test_generate_uses_configured_defaults(capsys):
    main(["config", "set", "--length", "10", "--classes", "number"])
    capsys.readouterr()
    main(["generate"])
    (pw,) = _passwords(capsys.readouterr().out)
    assert len(pw) == 10
    assert all(CharacterClass.NUMBER.contains(c) for c in pw)

def test_score(capsys):
    assert main(["score", "Abcdefgh123!"]) == 0
    out = capsys.readouterr().out
    assert "STRONG" in out
    assert "(4/4)" in out

def test_score_too_weak(capsys):
    main(["score", "abc"])
    out = capsys.readouterr().out
    assert "TOO WEAK" in out
    assert "Length: 3" in out

def test_config_set_and_show(capsys):
    assert main(["config", "set", "--classes", "symbol,upper", "--log-level", "info"]) == 0
    cfg = load_config()
    assert cfg["default_classes"] == ["upper", "symbol"]
    assert cfg["log_level"] == "INFO"
    capsys.readouterr()
    main(["config", "show"])
    assert "upper, symbol" in capsys.readouterr().out

def test_config_set_rejects_unknown_class(capsys, isolated_config):
    assert main(["config", "set", "--classes", "upper,runes"]) == 1
    assert "runes" in capsys.readouterr().out
    assert not isolated_config.exists()

def test_lowercase_log_level_in_settings_file(capsys, isolated_config):
    isolated_config.write_text('{"log_level": "info"}', encoding="utf-8")
    assert main(["score", "abc"]) == 0
    assert "TOO WEAK" in capsys.readouterr().out

def test_non_list_classes_in_settings_file_uses_defaults(capsys, isolated_config):
    isolated_config.write_text('{"default_classes": 5}', encoding="utf-8")
    assert main(["generate", "--length", "12"]) == 0
    (pw,) = _passwords(capsys.readouterr().out)
    assert len(pw) == 12

def test_long_password_stays_on_one_line(capsys):
    assert main(["generate", "--length", "120", "--no-symbols", "--copies", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    pws = _passwords("\n".join(lines))
    assert [len(p) for p in pws] == [120, 120]
