"""
Smoke test for the headless runner script.
"""

import sys
import pytest
from pathlib import Path

# Add scripts directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

from run_headless import main


def test_runs_default_tank(capsys):
    code = main(['--ticks', '5', '--quiet', '--hold', 'right', '--hold', 's', '--food', '300,300'])
    out = capsys.readouterr().out

    assert code == 0
    assert "[OK] Tank 'Living Room Tank' loaded: 2 fish, 4 food" in out
    assert "[OK] Ran 5 ticks" in out
    assert "xiao-0000" in out
    assert "status=Speeding" in out


def test_unbound_hold_key_warns(capsys):
    assert main(['--ticks', '1', '--quiet', '--hold', 'q']) == 0
    assert "[WARN] Key 'q' is not bound" in capsys.readouterr().out


def test_missing_tank_fails(tmp_path, capsys):
    code = main(['--tank', str(tmp_path / "nope.yaml"), '--ticks', '1'])
    assert code == 1
    assert "[FAIL]" in capsys.readouterr().out


def test_malformed_food_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['--ticks', '1', '--food', 'abc'])

    assert excinfo.value.code == 2
    assert "expected x,y" in capsys.readouterr().err
