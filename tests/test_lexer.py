from __future__ import annotations

from asmintr.lexer import source_lines, split_line, strip_comment, tokenize


def test_strip_comment_and_whitespace():
    assert strip_comment("   mov a, 5   ; set a") == "mov a, 5"
    assert strip_comment("; whole line") == ""
    assert strip_comment("\t\t") == ""


def test_split_line_operands_are_trimmed():
    line = split_line("  add   a ,  b  ")
    assert line.mnemonic == "add"
    assert line.operands == ("a", "b")


def test_split_line_blank_and_label():
    blank = split_line("   ; nothing here", lineno=7)
    assert blank.is_blank
    assert blank.lineno == 7
    assert blank.operands == ()

    label = split_line("proc_fact:")
    assert label.is_label
    assert label.mnemonic == "proc_fact:"


def test_split_line_removes_mnemonic_once():
    line = split_line("msg 'msg', a")
    assert line.mnemonic == "msg"
    assert line.operands == ("'msg'", "a")


def test_msg_literal_with_comma_keeps_bare_quotes():
    line = split_line("msg 'gcd(', a, ', ', b, ') = ', c")
    assert line.operands == ("'gcd('", "a", "'", "'", "b", "') = '", "c")


def test_tokenize_numbers_lines_from_one():
    lines = tokenize("mov a, 1\n\ninc a\n")
    assert [ln.lineno for ln in lines] == [1, 2, 3]
    assert [ln.mnemonic for ln in lines] == ["mov", None, "inc"]


def test_source_lines_split_on_newline_only():
    assert source_lines("a\r\nb\rc\x0cd e\n") == ["a", "b\rc\x0cd e"]
    assert source_lines("a\n\n") == ["a", ""]
    assert source_lines("a") == ["a"]
    assert source_lines("\n") == [""]
    assert source_lines("") == []


def test_tokenize_keeps_line_numbers_with_odd_separators():
    lines = tokenize("mov a, 1\x0c\ninc a\r\nend")
    assert [ln.lineno for ln in lines] == [1, 2, 3]
    assert [ln.mnemonic for ln in lines] == ["mov", "inc", "end"]
