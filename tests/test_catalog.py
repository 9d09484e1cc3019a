import pytest

from _01_puzzle import actions
from _01_puzzle.catalog import ActionCatalog, default_catalog
from _01_puzzle.exceptions import DuplicateSymbolError


def test_default_catalog_has_nineteen_unique_symbols():
    catalog = default_catalog()
    assert len(catalog) == 19
    assert len(set(catalog.symbols)) == 19


def test_default_catalog_keeps_registration_order():
    catalog = default_catalog()
    assert catalog.symbols[:4] == ("➕", "➖", "✖️", "➗")
    assert catalog.symbols[-5:] == ("1️⃣", "2️⃣", "3️⃣", "4️⃣", "5️⃣")


def test_describe_lists_every_symbol():
    catalog = default_catalog()
    described = catalog.describe()
    assert [symbol for symbol, _ in described] == list(catalog.symbols)
    assert ("➕", "Adds 5 to the number") in described
    assert all(description for _, description in described)


def test_duplicate_symbols_rejected():
    with pytest.raises(DuplicateSymbolError, match="already registered"):
        ActionCatalog([actions.add("a", 1), actions.subtract("a", 1)])


def test_catalog_is_read_only_mapping():
    catalog = default_catalog()
    assert "🔟" in catalog
    assert "🙂" not in catalog
    assert catalog["💯"].params == (100,)
    with pytest.raises(TypeError):
        catalog["🙂"] = actions.add("🙂", 1)
