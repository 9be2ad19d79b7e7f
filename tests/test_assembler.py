import io

import pytest

from csworks.assembler import assembly, evaluate, main, postfix, postfix_main

EXPRESSIONS = [
    "( AX + ( B * C ) ) ;",
    "( ( AX + ( B * CY ) ) / ( D - E ) ) ;",
    "( ( A + B ) * ( C + E ) ) ;",
    "( AX * ( BX * ( ( ( CY + AY ) + BY ) * CX ) ) ) ;",
    "( ( H * ( ( ( ( A + ( ( B + C ) * D ) ) * F ) * G ) * E ) ) + J ) ;",
]

OPERATORS = {"+", "-", "*", "/"}


def _operands(tokens):
    return [t for t in tokens if t not in OPERATORS and t not in {"(", ")", ";"}]


def test_postfix_simple_example():
    assert postfix("( AX + ( B * C ) ) ;") == "AX B C * +"


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_postfix_keeps_operands_in_order(expression):
    result = postfix(expression).split(" ")
    assert _operands(result) == _operands(expression.split(" "))


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_postfix_keeps_all_operators(expression):
    result = postfix(expression).split(" ")
    in_ops = sorted(t for t in expression.split(" ") if t in OPERATORS)
    out_ops = sorted(t for t in result if t in OPERATORS)
    assert out_ops == in_ops
    assert "(" not in result and ")" not in result and ";" not in result


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_postfix_ends_with_outermost_operator(expression):
    tokens = expression.split(" ")
    result = postfix(expression).split(" ")
    assert result[-1] in OPERATORS
    assert result[-1] in tokens


def test_postfix_ignores_text_after_terminator():
    assert postfix("( A + B ) ; ( C - D )") == postfix("( A + B ) ;")


def test_postfix_requires_terminator():
    with pytest.raises(ValueError):
        postfix("( A + B )")


def test_postfix_unbalanced_raises():
    with pytest.raises(ValueError):
        postfix("A ) ;")


def test_evaluate_writes_load_operate_store():
    out = io.StringIO()
    result = evaluate(3, out, "X", "*", "Y")
    lines = out.getvalue().splitlines()
    assert result == "TMP3"
    assert lines == ["    LD    X", "    MU    Y", "    ST    TMP3"]


@pytest.mark.parametrize("token", ["+", "-", "*", "/"])
def test_evaluate_opcodes_differ_and_store_register(token):
    out = io.StringIO()
    result = evaluate(7, out, "L", token, "R")
    lines = out.getvalue().splitlines()
    assert lines[0] == "    LD    L"
    assert lines[1].endswith("    R")
    assert lines[2] == "    ST    " + result


def test_evaluate_opcodes_are_distinct():
    codes = set()
    for token in ["+", "-", "*", "/"]:
        out = io.StringIO()
        evaluate(1, out, "L", token, "R")
        codes.add(out.getvalue().splitlines()[1].split()[0])
    assert len(codes) == 4


def test_evaluate_unknown_operator():
    with pytest.raises(ValueError):
        evaluate(1, io.StringIO(), "A", "%", "B")


def test_assembly_worked_example():
    out = io.StringIO()
    result = assembly("AX B C * +", out)
    assert result == "TMP2"
    assert out.getvalue().splitlines() == [
        "    LD    B",
        "    MU    C",
        "    ST    TMP1",
        "    LD    AX",
        "    AD    TMP1",
        "    ST    TMP2",
    ]


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_assembly_uses_one_register_per_operator(expression):
    converted = postfix(expression)
    n_ops = sum(1 for t in converted.split(" ") if t in OPERATORS)
    out = io.StringIO()
    result = assembly(converted, out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 3 * n_ops
    stores = [line for line in lines if line.startswith("    ST    ")]
    assert len(stores) == n_ops
    assert stores[-1] == "    ST    " + result


def test_assembly_single_operand_returns_it():
    out = io.StringIO()
    assert assembly("A", out) == "A"
    assert out.getvalue() == ""


def test_assembly_missing_operand_raises():
    with pytest.raises(ValueError):
        assembly("A +", io.StringIO())


def test_postfix_main_without_arguments(capsys):
    assert postfix_main([]) == 1
    captured = capsys.readouterr()
    assert "Missing input file" in captured.err
    assert captured.out.splitlines()[0] == "1"


def test_postfix_main_to_stdout(tmp_path, capsys):
    infile = tmp_path / "infix.txt"
    infile.write_text("\n".join(EXPRESSIONS) + "\n")
    assert postfix_main([str(infile)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "2"
    assert lines[1:] == [postfix(e) for e in EXPRESSIONS]


def test_postfix_main_to_file(tmp_path, capsys):
    infile = tmp_path / "infix.txt"
    outfile = tmp_path / "postfix.txt"
    infile.write_text("\n".join(EXPRESSIONS) + "\n")
    assert postfix_main([str(infile), str(outfile)]) == 0
    assert capsys.readouterr().out.splitlines() == ["3"]
    assert outfile.read_text().splitlines() == [postfix(e) for e in EXPRESSIONS]


def test_main_writes_postfix_and_assembly(tmp_path):
    infile = tmp_path / "infix.txt"
    outfile = tmp_path / "asm.txt"
    infile.write_text(EXPRESSIONS[0] + "\n" + EXPRESSIONS[2] + "\n")
    assert main([str(infile), str(outfile)]) == 0
    text = outfile.read_text()
    expected = io.StringIO()
    for e in (EXPRESSIONS[0], EXPRESSIONS[2]):
        expected.write("Postfix: " + postfix(e) + "\n")
        assembly(postfix(e), expected)
    assert text == expected.getvalue()
    assert text.count("Postfix: ") == 2


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "absent.txt" in capsys.readouterr().err