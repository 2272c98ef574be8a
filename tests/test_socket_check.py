# tests/test_socket_check.py
from checks.socket_check import check_socket
from models import Part, PartSelection, STATUS_COMPATIBLE, STATUS_INCOMPATIBLE, STATUS_WAITING


def _make_selection(cpu_socket="LGA1700", mb_socket="LGA1700"):
    return PartSelection.from_parts([
        Part("cpu-1", "Test CPU", "cpu", specifications={"socket": cpu_socket}),
        Part("mb-1", "Test Board", "motherboard", specifications={"socket": mb_socket}),
    ])


def test_matching_socket():
    result = check_socket(_make_selection())
    assert result.status == STATUS_COMPATIBLE
    assert result.compatible
    assert "LGA1700" in result.message


def test_socket_mismatch():
    result = check_socket(_make_selection(cpu_socket="AM5"))
    assert result.status == STATUS_INCOMPATIBLE
    assert "AM5" in result.message
    assert "LGA1700" in result.message
    assert result.cpu_socket == "AM5"
    assert result.motherboard_socket == "LGA1700"


def test_socket_comparison_is_exact():
    result = check_socket(_make_selection(cpu_socket="LGA 1700"))
    assert result.status == STATUS_INCOMPATIBLE


def test_missing_socket_is_incomplete():
    result = check_socket(_make_selection(mb_socket=None))
    assert result.status == STATUS_INCOMPATIBLE
    assert "incomplete" in result.message


def test_waiting_without_motherboard():
    selection = PartSelection.from_parts([Part("cpu-1", "Test CPU", "cpu", specifications={"socket": "AM5"})])
    result = check_socket(selection)
    assert result.status == STATUS_WAITING
    assert result.waiting
    assert result.compatible


def test_trailing_whitespace_is_a_mismatch():
    result = check_socket(_make_selection(cpu_socket="LGA1700 "))
    assert result.status == STATUS_INCOMPATIBLE
    assert "LGA1700 " in result.message


def test_socket_comparison_is_case_sensitive():
    result = check_socket(_make_selection(cpu_socket="am5", mb_socket="AM5"))
    assert result.status == STATUS_INCOMPATIBLE
    assert "am5" in result.message
    assert "AM5" in result.message


def test_non_string_socket_is_incomplete():
    result = check_socket(_make_selection(cpu_socket=1700, mb_socket="1700"))
    assert result.status == STATUS_INCOMPATIBLE
    assert result.message == "Socket information incomplete"
