import pytest

from labdevices.borrowing import (
    Borrower,
    BorrowList,
    add_days,
    standardize_borrower_name,
)


def _loan(name, device_id="ID1"):
    return Borrower(name, "Scope", device_id, "01/01/2024", "04/01/2024")


@pytest.fixture
def abc():
    loans = BorrowList()
    for name in ("A", "B", "C"):
        loans.add_last(_loan(name, f"id-{name}"))
    return loans


def _names(loans):
    return [b.name for b in loans]


def test_add_days_simple():
    assert add_days("01/01/2024", 3) == "04/01/2024"


def test_add_days_crosses_month():
    assert add_days("30/01/2024", 3) == "02/02/2024"


def test_add_days_zero_is_identity():
    assert add_days("15/07/2023", 0) == "15/07/2023"


def test_add_days_round_trip():
    for days in (3, 7, 30):
        assert add_days(add_days("28/12/2023", days), -days) == "28/12/2023"


def test_add_days_invalid():
    with pytest.raises(ValueError):
        add_days("not a date", 3)


def test_standardize_borrower_name():
    once = standardize_borrower_name("  nGUYEN   van  a ")
    assert once.split() == ["Nguyen", "Van", "A"]
    assert standardize_borrower_name(once) == once


def test_format_row_columns():
    loan = Borrower("Alice", "Scope", "X1", "01/01/2024", "04/01/2024")
    row = loan.format_row()
    assert row[:20].rstrip() == "Alice"
    assert row[20:35].rstrip() == "Scope"
    assert row[35:45].rstrip() == "X1"
    assert row[45:55] == "01/01/2024"
    assert row[55:] == "04/01/2024"


def test_format_row_does_not_truncate():
    long_name = "N" * 30
    assert Borrower(long_name, "d", "i", "t").format_row().startswith(long_name + "d")


def test_add_first_and_last_order():
    loans = BorrowList()
    loans.add_last(_loan("B"))
    loans.add_first(_loan("A"))
    loans.add_last(_loan("C"))
    assert _names(loans) == ["A", "B", "C"]
    assert len(loans) == 3


def test_insert_at_first_position(abc):
    assert abc.insert_at(_loan("X"), 1)
    assert _names(abc) == ["X", "A", "B", "C"]


def test_insert_at_inserts_after_position(abc):
    assert abc.insert_at(_loan("X"), 2)
    assert _names(abc) == ["A", "B", "X", "C"]


def test_insert_at_last_position(abc):
    assert abc.insert_at(_loan("X"), 3)
    assert _names(abc) == ["A", "B", "C", "X"]


def test_insert_at_out_of_range(abc):
    assert not abc.insert_at(_loan("X"), 0)
    assert not abc.insert_at(_loan("X"), 4)
    assert _names(abc) == ["A", "B", "C"]


def test_insert_at_empty_list_does_nothing():
    loans = BorrowList()
    assert not loans.insert_at(_loan("X"), 1)
    assert len(loans) == 0


def test_delete_first_and_last(abc):
    abc.delete_first()
    assert _names(abc) == ["B", "C"]
    abc.delete_last()
    assert _names(abc) == ["B"]


def test_delete_on_empty_list():
    loans = BorrowList()
    loans.delete_first()
    loans.delete_last()
    assert not loans.delete_at(1)
    assert len(loans) == 0


def test_delete_at(abc):
    assert abc.delete_at(2)
    assert _names(abc) == ["A", "C"]
    assert not abc.delete_at(3)
    assert _names(abc) == ["A", "C"]


def test_find_by_name_or_id(abc):
    assert _names(abc.find("B")) == ["B"]
    assert _names(abc.find("id-C")) == ["C"]
    assert abc.find("nobody") == []


def test_remove_by_name_removes_all(abc):
    abc.add_last(_loan("A", "other"))
    assert abc.remove_by_name("A") == 2
    assert _names(abc) == ["B", "C"]
    assert abc.remove_by_name("A") == 0


def test_format_table(abc):
    lines = abc.format_table().splitlines()
    assert lines[0].startswith("Name Borrower")
    assert "Expired Day" in lines[0]
    assert len(lines) == 2 + len(abc)
    assert lines[2:] == [b.format_row() for b in abc]


def test_format_search_with_match(abc):
    text = abc.format_search("id-B")
    assert "Return Date" in text
    assert abc.find("id-B")[0].format_row() in text
    assert "Back to menu !!" in text
    assert "Your search return nothing!!" not in text


def test_format_search_without_match(abc):
    text = abc.format_search("nobody")
    assert text.endswith("Your search return nothing!!\n")
    assert all(b.format_row() not in text for b in abc)