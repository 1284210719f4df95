from aoeui.chart import format_chart, main
from aoeui.utf8 import encode


def test_default_chart():
    assert format_chart() == b"0x203b\t" + "\u203b".encode("utf-8") + b"\n"


def test_small_chart():
    assert format_chart(0x41, 3) == b"0x0041\tA\tB\tC\n"


def test_eight_per_line():
    chart = format_chart(0x41, 9)
    lines = chart.split(b"\n")
    assert len(lines) == 3 and lines[-1] == b""
    assert lines[0].count(b"\t") == 8
    assert lines[1] == b"0x0049\t" + encode(0x49)


def test_exact_line_has_no_extra_newline():
    chart = format_chart(0x61, 8)
    assert chart.count(b"\n") == 1
    assert chart.endswith(b"\n")


def test_zero_count_is_empty():
    assert format_chart(0x41, 0) == b""


def test_nul_prints_nothing():
    assert format_chart(0, 1) == b"0x0000\t\n"


def test_main_default(capsysbinary):
    assert main([]) == 0
    assert capsysbinary.readouterr().out == format_chart()


def test_main_arguments(capsysbinary):
    assert main(["41", "3"]) == 0
    assert capsysbinary.readouterr().out == format_chart(0x41, 3)


def test_main_prefixed_arguments(capsysbinary):
    main(["0x41", "0x3"])
    assert capsysbinary.readouterr().out == format_chart(0x41, 3)


def test_main_lenient_parse(capsysbinary):
    main(["e9zz", "2junk"])
    assert capsysbinary.readouterr().out == format_chart(0xE9, 2)