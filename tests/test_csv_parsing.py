from ohc_impact.services.csv_series_parser_service import parse_ohc_csv


def test_parse_keeps_only_well_formed_rows_in_order():
    text = "\n".join([
        "date,ohc_zj",
        "2001-01-15,1.0",
        "2001-06-15,abc",
        "not-a-date,2.0",
        "2002-03-01,5.5",
        "",
        "2003,7",
        "2004-01-01,nan",
        "2005-01-01,inf",
        "2006-01-01",
    ])

    samples = parse_ohc_csv(text)

    assert [(s.timestamp, s.year, s.value) for s in samples] == [
        ("2001-01-15", 2001, 1.0),
        ("2002-03-01", 2002, 5.5),
        ("2003", 2003, 7.0),
    ]


def test_parse_handles_any_line_ending_and_whitespace():
    text = "year,value\r\n  1990 , 1.5 \r\n1991,2.5\r1992,3.5\n\n"

    samples = parse_ohc_csv(text)

    assert [s.year for s in samples] == [1990, 1991, 1992]
    assert [s.value for s in samples] == [1.5, 2.5, 3.5]


def test_header_is_skipped_even_if_it_looks_like_data():
    samples = parse_ohc_csv("1990,1.0\n1991,2.0")
    assert [s.year for s in samples] == [1991]


def test_month_only_dates_resolve_to_year():
    samples = parse_ohc_csv("date,value\n2001-06,3.0\n2002-12,4.0")
    assert [s.year for s in samples] == [2001, 2002]


def test_split_on_first_comma_only():
    # Extra columns end up in the value field and make the row malformed
    samples = parse_ohc_csv("date,value\n2001-01-01,1.0,extra\n2002-01-01,2.0")
    assert [s.year for s in samples] == [2002]


def test_empty_and_header_only_inputs_return_empty_list():
    assert parse_ohc_csv("") == []
    assert parse_ohc_csv("\n\n  \n") == []
    assert parse_ohc_csv("date,ohc_zj\n") == []


def test_odd_header_still_parses(caplog):
    samples = parse_ohc_csv("ohc\n2001,1.0")
    assert len(samples) == 1
    assert any("header" in rec.message.lower() for rec in caplog.records)


def test_relative_date_words_are_dropped():
    text = "date,value\nnow,5.0\ntoday,6.0\ntomorrow,7.0\nyesterday,8.0\n2001-01-01,1.0"

    samples = parse_ohc_csv(text)

    assert [(s.timestamp, s.year) for s in samples] == [("2001-01-01", 2001)]


def test_values_with_digit_separators_are_dropped():
    samples = parse_ohc_csv("date,value\n2001-01-01,1_000\n2002-01-01,1000")

    assert [(s.year, s.value) for s in samples] == [(2002, 1000.0)]
