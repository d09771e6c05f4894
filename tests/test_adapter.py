import pytest

from lldpatterns.adapter import (
    BadPrinter,
    LegacyPrinter,
    LegacyPrinterAdapter,
    Printer,
    bad_adapter,
    good_adapter,
)


def test_adapter_delegates_to_legacy(capsys):
    LegacyPrinter().print("hello")
    direct = capsys.readouterr().out
    LegacyPrinterAdapter(legacy=LegacyPrinter()).print_message("hello")
    adapted = capsys.readouterr().out
    assert adapted == direct
    assert adapted.startswith("Legacy Printer:")


def test_adapter_uses_the_given_legacy_printer(capsys):
    class RecordingLegacy(LegacyPrinter):
        def print(self, msg):
            super().print(f"[recorded] {msg}")

    LegacyPrinterAdapter(legacy=RecordingLegacy()).print_message("text")
    assert capsys.readouterr().out == "Legacy Printer: [recorded] text\n"


def test_bad_printer_writes_text_without_newline(capsys):
    BadPrinter().print_directly(LegacyPrinter(), "raw")
    assert capsys.readouterr().out == "raw"


def test_printer_interface_is_abstract():
    with pytest.raises(TypeError):
        Printer()


def test_bad_adapter_output(capsys):
    bad_adapter()
    assert capsys.readouterr().out == "No Adapter Used ❌"


def test_good_adapter_output(capsys):
    good_adapter()
    assert capsys.readouterr().out == "Legacy Printer: Using Adapter Pattern ✅\n"