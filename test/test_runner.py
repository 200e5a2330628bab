import pytest

from txa.tests import __main__ as runner


def test_runner_passes_arguments_to_pytest(monkeypatch):
    calls = []

    def fake_main(args):
        calls.append(args)
        return 0

    monkeypatch.setattr(runner.pytest, "main", fake_main)
    monkeypatch.setattr(runner.sys, "argv", ["txa.tests", "-q", "-k", "color"])
    with pytest.raises(SystemExit) as exit_info:
        runner.main()
    assert exit_info.value.code == 0
    (args,) = calls
    assert args[0].endswith("test")
    assert args[1:] == ["-q", "-k", "color"]
