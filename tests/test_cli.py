import logging

import pytest

from qmc_minimizer.cli import init_logger, main, verbosity_level


def test_patterns_output(capsys):
    code = main(["-m", "4", "8", "10", "11", "12", "15", "-d", "9", "14", "-f", "patterns"])
    assert code == 0
    lines = capsys.readouterr().out.split()
    assert len(lines) == 3
    assert "*100" in lines
    assert "1*1*" in lines


def test_text_output(capsys):
    assert main(["-m", "1", "2", "9", "11", "12", "14", "15"]) == 0
    out = capsys.readouterr().out
    assert "Quine-McCluskey Minimizer" in out
    assert "Selected terms: 4" in out


def test_truth_table_input(capsys):
    assert main(["-t", "1011011111------", "-f", "equations", "--check"]) == 0
    out = capsys.readouterr().out
    assert "Inputs: A, B, C, D" in out
    assert "All correct: True" in out


def test_pattern_input_with_var_names(capsys):
    assert main(["-p", "1*0", "1*1", "--vars", "x,y,z", "-f", "equations"]) == 0
    assert "F = x" in capsys.readouterr().out


def test_maxsat_method(capsys):
    assert main(["-m", "1", "2", "9", "11", "12", "14", "15", "--method", "maxsat", "-f", "patterns"]) == 0
    assert len(capsys.readouterr().out.split()) == 4


def test_verilog_output(capsys):
    assert main(["-m", "1", "2", "-w", "3", "-f", "verilog"]) == 0
    out = capsys.readouterr().out
    assert "input  wire [2:0] in," in out


def test_c_output(capsys):
    assert main(["-m", "3", "-f", "c"]) == 0
    assert "return (A && B);" in capsys.readouterr().out


def test_invalid_pattern(capsys):
    assert main(["-p", "1x0"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_width_too_small(capsys):
    assert main(["-m", "8", "-w", "2"]) == 1
    assert "width 2" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [
    [],
    ["-d", "1"],
    ["-m", "1", "-w", "40"],
    ["-m", "-1"],
    ["-m", "1", "-t", "01"],
    ["-m", "1", "2", "--vars", "a,b,c"],
    ["-m", "1", "--method", "espresso"],
])
def test_bad_arguments(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_debug_logging_goes_to_stderr(capsys):
    assert main(["-m", "4", "12", "-vv", "-f", "patterns"]) == 0
    err = capsys.readouterr().err
    assert "100 + 1100 => *100" in err


def test_verbosity_level():
    assert verbosity_level(0, False) == logging.WARNING
    assert verbosity_level(1, False) == logging.INFO
    assert verbosity_level(2, False) == logging.DEBUG
    assert verbosity_level(2, True) == logging.ERROR


def test_init_logger():
    logger = init_logger(logging.INFO)
    init_logger(logging.DEBUG)
    assert logger.name == "qmc_minimizer"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_pattern_matching_merged_term(capsys):
    assert main(["-p", "1*", "11", "-f", "patterns"]) == 0
    assert capsys.readouterr().out.split() == ["1*"]
