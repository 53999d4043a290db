from tx_tax_auctions.normalize import clean_cell_text, normalize_name, parse_currency


def test_parse_currency():
    assert parse_currency("$1,234.50") == 1234.50
    assert parse_currency("90,000") == 90000.0
    assert parse_currency(" $ 310,000 ") == 310000.0


def test_parse_currency_unparseable():
    assert parse_currency("") is None
    assert parse_currency(None) is None
    assert parse_currency("N/A") is None
    assert parse_currency("nan") is None
    assert parse_currency("inf") is None
    assert parse_currency("1_000") is None
    assert parse_currency("1e3") is None
    assert parse_currency("-5") is None
    assert parse_currency("12.") is None


def test_clean_cell_text_collapses_nbsp():
    assert clean_cell_text("\u00a0 00012\u00a0") == "00012"
    assert clean_cell_text("12\u00a0B") == "12 B"
    assert clean_cell_text(None) == ""


def test_normalize_name():
    assert normalize_name("  Fort   Bend ") == "fort bend"
