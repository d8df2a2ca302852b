# This source code is part of the nucpack package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import logging
import subprocess
import sys
import pytest
import nucpack
import nucpack.sequence as seq
from nucpack.nuccount import count_nucleotides, main


def test_count_nucleotides():
    N = seq.Nucleotide
    assert count_nucleotides("acgTTT") == [(N.A, 1), (N.C, 1), (N.G, 1), (N.T, 3)]


def test_output(capsys):
    assert main(["--dna", "ACGTTT"]) == 0
    assert capsys.readouterr().out == "Input: ACGTTT\n\nA: 1\nC: 1\nG: 1\nT: 3\n"


def test_short_option(capsys):
    assert main(["-d", "gattaca"]) == 0
    assert capsys.readouterr().out == "Input: gattaca\n\nA: 3\nC: 1\nG: 1\nT: 2\n"


def test_invalid_input(capsys, caplog):
    """
    An invalid sequence is still echoed, but instead of counts an error
    is logged and a non-zero exit status is returned.
    """
    with caplog.at_level(logging.ERROR):
        assert main(["--dna", "ACGUT"]) == 1
    assert capsys.readouterr().out == "Input: ACGUT\n\n"
    assert "Invalid DNA sequence" in caplog.text
    assert "position 4" in caplog.text


def test_missing_argument():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code != 0


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == nucpack.__version__


@pytest.mark.parametrize(
    "dna, exp_returncode", [("ACGTTGCACT", 0), ("ACGTX", 1)]
)
def test_module_execution(dna, exp_returncode):
    """
    Run ``nuccount`` as a separate process and check its exit status.
    """
    result = subprocess.run(
        [sys.executable, "-m", "nucpack.nuccount", "--dna", dna],
        capture_output=True,
        text=True,
    )
    assert result.returncode == exp_returncode
    assert result.stdout.startswith(f"Input: {dna}\n")
    if exp_returncode == 0:
        assert result.stdout.endswith("A: 2\nC: 3\nG: 2\nT: 3\n")
    else:
        assert "ERROR:Invalid DNA sequence" in result.stderr
