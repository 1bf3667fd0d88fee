"""
Tests for the command line interface.
"""

import numpy as np
import pytest

from distances.cli import main, parse_vector


def _values(output):
    """Parse 'name: value' lines into a dict of floats."""
    result = {}
    for line in output.strip().splitlines():
        name, value = line.split(': ')
        result[name] = float(value)
    return result


class TestParseVector:
    """Comma separated vector arguments."""

    def test_floats(self):
        """Mixed literals parse as floats."""
        np.testing.assert_array_equal(parse_vector("1.5,2,3"), [1.5, 2.0, 3.0])

    def test_integers_stay_integers(self):
        """All-integer input keeps an integer dtype."""
        assert parse_vector("1,2,3").dtype.kind == 'i'

    def test_spaces(self):
        """Whitespace around separators is ignored."""
        assert len(parse_vector("1, 2, 3")) == 3


class TestCommands:
    """Subcommands and their exit codes."""

    def test_pearson(self, isolated, capsys):
        """Linear pair prints a distance of 0."""
        code = main(['pearson', '1,2,3,5,8', '0.11,0.12,0.13,0.15,0.18'])
        assert code == 0
        assert _values(capsys.readouterr().out)['pearson'] == pytest.approx(0.0, abs=1e-12)

    def test_pearson_f32(self, isolated, capsys):
        """--dtype f32 selects the float32 accumulator."""
        assert main(['--dtype', 'f32', 'pearson', '1,2,3', '3,2,1']) == 0
        assert _values(capsys.readouterr().out)['pearson'] == pytest.approx(2.0, abs=1e-5)

    def test_stats(self, isolated, capsys):
        """Single vector prints mean and std_dev."""
        assert main(['stats', '2,4,4,4,5,5,7,9']) == 0
        values = _values(capsys.readouterr().out)
        assert values == {'mean': 5.0, 'std_dev': 2.0}

    def test_stats_with_y(self, isolated, capsys):
        """Second vector adds covariance and pearson, truncated."""
        assert main(['stats', '1,2,3', '1,2']) == 0
        values = _values(capsys.readouterr().out)
        assert values['covariance'] == 0.25
        assert values['pearson'] == pytest.approx(0.0, abs=1e-12)

    def test_strict_mismatch(self, isolated, capsys):
        """--strict turns a length mismatch into exit code 1."""
        assert main(['--strict', 'pearson', '1,2,3', '1,2']) == 1

    def test_strict_from_config(self, isolated):
        """length_policy: strict in the config file applies without a flag."""
        (isolated / 'distances.yaml').write_text("length_policy: strict\n")
        assert main(['pearson', '1,2,3', '1,2']) == 1

    def test_no_strict_overrides_config(self, isolated, capsys):
        """--no-strict truncates even when the config file is strict."""
        (isolated / 'distances.yaml').write_text("length_policy: strict\n")
        assert main(['--no-strict', 'pearson', '1,2,3', '1,2']) == 0
        assert _values(capsys.readouterr().out)['pearson'] == pytest.approx(0.0, abs=1e-12)

    def test_bad_config(self, isolated):
        """Invalid config value exits with 1."""
        (isolated / 'distances.yaml').write_text("accumulator: f8\n")
        assert main(['pearson', '1,2,3', '1,2,3']) == 1

    def test_pdist(self, isolated, capsys):
        """One condensed distance per line, blank lines skipped."""
        path = isolated / 'vectors.txt'
        path.write_text("1,2,3,5,8\n0.11 0.12 0.13 0.15 0.18\n\n8,5,3,2,1\n")

        assert main(['pdist', str(path)]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 3
        assert float(lines[0]) == pytest.approx(0.0, abs=1e-12)

    def test_pdist_missing_file(self, isolated):
        """Missing vectors file exits with 1."""
        assert main(['pdist', str(isolated / 'missing.txt')]) == 1

    def test_invalid_vector(self, isolated):
        """Non-numeric vector is an argparse usage error."""
        with pytest.raises(SystemExit) as exc:
            main(['pearson', '1,a,3', '1,2,3'])
        assert exc.value.code == 2
