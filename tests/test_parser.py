"""
Unit tests for the Win32_Printer output parser
"""
from win_printers.models import Printer
from win_printers.parser import (
    is_valid_printer,
    parse_blocks,
    parse_paper_sizes,
    parse_printers,
)

from conftest import SAMPLE_OUTPUT


class TestParseBlocks:
    """Splitting raw output into per-printer blocks"""

    def test_splits_on_blank_lines(self):
        blocks = parse_blocks("DeviceID : A\nName : a\n\nDeviceID : B\nName : b")
        assert blocks == ["DeviceID : A\nName : a", "DeviceID : B\nName : b"]

    def test_crlf_and_multiple_blank_lines(self):
        blocks = parse_blocks(SAMPLE_OUTPUT)
        assert len(blocks) == 2
        assert blocks[0].startswith("DeviceID")
        assert blocks[1].endswith("{A4, A3}")

    def test_whitespace_only_separator_lines(self):
        blocks = parse_blocks("DeviceID : A\n   \nDeviceID : B")
        assert blocks == ["DeviceID : A", "DeviceID : B"]

    def test_single_newline_does_not_split(self):
        assert parse_blocks("DeviceID : A\nName : a") == ["DeviceID : A\nName : a"]

    def test_empty_text(self):
        assert parse_blocks("") == []
        assert parse_blocks("\r\n\r\n  \n") == []


class TestParsePaperSizes:

    def test_braced_list(self):
        assert parse_paper_sizes("{A4, Letter}") == ["A4", "Letter"]

    def test_order_preserved(self):
        assert parse_paper_sizes("{Letter, Legal, A4, A5}") == ["Letter", "Legal", "A4", "A5"]

    def test_empty_list(self):
        assert parse_paper_sizes("{}") == []
        assert parse_paper_sizes("") == []

    def test_single_entry_without_braces(self):
        assert parse_paper_sizes("A4") == ["A4"]


class TestIsValidPrinter:
    """Validation of a single printer block"""

    def test_example_block(self):
        """Test the documented example parses into the expected record"""
        result = is_valid_printer("DeviceID : HP01\nName : HP LaserJet\nPrinterPaperNames : {A4, Letter}")

        assert result.is_valid is True
        assert result.printer_data == Printer(
            device_id="HP01", name="HP LaserJet", paper_sizes=["A4", "Letter"]
        )

    def test_missing_device_id(self):
        result = is_valid_printer("Name : HP LaserJet\nPrinterPaperNames : {A4}")
        assert result.is_valid is False
        assert result.printer_data is None

    def test_missing_name(self):
        result = is_valid_printer("DeviceID : HP01")
        assert result.is_valid is False

    def test_empty_values_are_invalid(self):
        result = is_valid_printer("DeviceID : \nName : HP LaserJet")
        assert result.is_valid is False

    def test_paper_sizes_optional(self):
        result = is_valid_printer("DeviceID : HP01\nName : HP LaserJet")
        assert result.is_valid is True
        assert result.printer_data.paper_sizes == ()

    def test_labels_case_insensitive_and_padded(self):
        result = is_valid_printer("deviceid    : X1\r\nNAME        : Label Printer\r\n")
        assert result.printer_data.device_id == "X1"
        assert result.printer_data.name == "Label Printer"

    def test_value_keeps_colons_after_first(self):
        result = is_valid_printer("DeviceID : Microsoft Print to PDF\nName : PDF: office")
        assert result.printer_data.name == "PDF: office"

    def test_unrelated_lines_ignored(self):
        block = (
            "PSComputerName    :\n"
            "DeviceID          : HP01\n"
            "garbage line\n"
            "Name              : HP LaserJet\n"
        )
        result = is_valid_printer(block)
        assert result.is_valid is True
        assert result.printer_data.device_id == "HP01"


class TestParsePrinters:

    def test_one_record_per_block_in_order(self):
        printers = parse_printers(SAMPLE_OUTPUT)

        assert [p.device_id for p in printers] == ["HP01", "Canon_Pixma"]
        assert printers[1].paper_sizes == ("A4", "A3")

    def test_invalid_blocks_dropped(self):
        text = "DeviceID : A\nName : a\n\nName : only-name\n\nDeviceID : C\nName : c"
        printers = parse_printers(text)
        assert [p.device_id for p in printers] == ["A", "C"]

    def test_empty_output(self):
        assert parse_printers("") == []
