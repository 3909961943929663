from decimal import Decimal
from pathlib import Path

import pytest
from billzy.runtime import SplitFileError, load_split_file


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "split.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_split_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
[[people]]
id = "a"
name = "Alice"

[[people]]
id = "b"

[[items]]
name = "Pizza"
price = "18.00"
assignees = ["a", "b"]
merchant = "Luigi's"

[[items]]
name = "Wings"
price = 12.5
quantity = 2
assignees = ["a"]
""",
    )

    split = load_split_file(path)

    assert [(p.id, p.name) for p in split.people] == [("a", "Alice"), ("b", "")]
    pizza, wings = split.items
    assert (pizza.id, pizza.price, pizza.assignee_ids, pizza.merchant) == (
        "i1",
        Decimal("18.00"),
        {"a", "b"},
        "Luigi's",
    )
    assert (wings.id, wings.price, wings.quantity, wings.merchant) == ("i2", Decimal("12.5"), 2, None)


def test_load_split_file_generates_person_ids(tmp_path: Path) -> None:
    path = _write(tmp_path, '[[people]]\nname = "Alice"\n\n[[people]]\nname = "Bob"\n')

    split = load_split_file(path)

    assert [p.id for p in split.people] == ["p1", "p2"]
    assert split.items == ()


def test_load_split_file_accepts_dollar_prices(tmp_path: Path) -> None:
    path = _write(tmp_path, '[[items]]\nname = "Soda"\nprice = "$2.50"\n')

    assert load_split_file(path).items[0].price == Decimal("2.50")


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ('[[people]]\nid = "a"\n\n[[people]]\nid = "a"\n', "duplicate id"),
        ('[[items]]\nname = "Soda"\n', "missing price"),
        ('[[items]]\nname = "Soda"\nprice = "-1.00"\n', "non-negative"),
        ('[[items]]\nname = "Soda"\nprice = "abc"\n', "invalid price"),
        ('[[items]]\nname = "Soda"\nprice = true\n', "number or string"),
        ('[[items]]\nname = ""\nprice = "1.00"\n', "name must not be empty"),
        ('[[items]]\nname = "Soda"\nprice = "1.00"\nquantity = 0\n', "positive integer"),
        ('[[items]]\nname = "Soda"\nprice = "1.00"\nassignees = "a"\n', "assignees must be an array"),
        ('people = "Alice"\n', "people must be an array"),
        ("[[items]\n", "split.toml"),
    ],
)
def test_load_split_file_rejects_malformed_files(tmp_path: Path, content: str, message: str) -> None:
    path = _write(tmp_path, content)

    with pytest.raises(SplitFileError, match=message):
        load_split_file(path)


def test_load_split_file_missing(tmp_path: Path) -> None:
    with pytest.raises(SplitFileError, match="not found"):
        load_split_file(tmp_path / "missing.toml")
