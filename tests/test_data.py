import pytest

from backtester.data import CsvTickLoader, parse_tick
from backtester.models import Side


@pytest.fixture
def market_csv(tmp_path):
    path = tmp_path / "test_market_data.csv"
    path.write_text(
        "timestamp,price,quantity,side\n"
        "1600000001,100.50,10.0,Buy\n"
        "1600000002,101.00,5.0,Sell\n"
        "1600000003,100.75,2.5,Unknown\n",
        encoding="utf-8",
    )
    return path


def test_reads_ticks_correctly(market_csv):
    loader = CsvTickLoader(market_csv)

    tick1 = loader.next()
    assert tick1 is not None
    assert tick1.timestamp == 1600000001
    assert tick1.price == pytest.approx(100.50)
    assert tick1.side is Side.BUY

    tick2 = loader.next()
    assert tick2 is not None
    assert tick2.timestamp == 1600000002
    assert tick2.side is Side.SELL

    tick3 = loader.next()
    assert tick3 is not None
    assert tick3.side is Side.UNKNOWN

    assert loader.next() is None
    loader.close()


def test_handles_missing_file(tmp_path, capsys):
    loader = CsvTickLoader(tmp_path / "non_existent_file.csv")
    assert loader.next() is None
    assert "[Error] Failed to open file" in capsys.readouterr().err


def test_iteration_yields_all_ticks(market_csv):
    with CsvTickLoader(market_csv) as loader:
        ticks = list(loader)
    assert [t.timestamp for t in ticks] == [1600000001, 1600000002, 1600000003]
    assert [t.quantity for t in ticks] == [10.0, 5.0, 2.5]


def test_close_stops_reading(market_csv):
    loader = CsvTickLoader(market_csv)
    loader.close()
    assert loader.next() is None


def test_empty_line_ends_stream(tmp_path):
    path = tmp_path / "gap.csv"
    path.write_text("h\n1,1.0,1.0,buy\n\n2,2.0,1.0,sell\n", encoding="utf-8")
    with CsvTickLoader(path) as loader:
        assert [t.timestamp for t in loader] == [1]


def test_last_line_without_newline(tmp_path):
    path = tmp_path / "tail.csv"
    path.write_text("h\n1,1.0,1.0,s", encoding="utf-8")
    with CsvTickLoader(path) as loader:
        ticks = list(loader)
    assert len(ticks) == 1
    assert ticks[0].side is Side.SELL


@pytest.mark.parametrize(
    ("text", "side"),
    [
        ("buy", Side.BUY),
        ("B", Side.BUY),
        ("1", Side.BUY),
        ("SELL", Side.SELL),
        ("s", Side.SELL),
        ("0", Side.SELL),
        ("hold", Side.UNKNOWN),
    ],
)
def test_parse_tick_side_words(text, side):
    tick = parse_tick(f"10,2.5,3.0,{text}")
    assert tick is not None
    assert tick.side is side


@pytest.mark.parametrize(
    "line",
    ["abc,1.0,1.0,buy", "1,x,1.0,buy", "1,1.0,,buy", "1,1.0,1.0", "1,1.0,1.0,", ""],
)
def test_parse_tick_rejects_malformed(line):
    assert parse_tick(line) is None


def test_parse_tick_ignores_extra_fields():
    tick = parse_tick("7,1.5,2.0,buy,extra")
    assert tick is not None
    assert (tick.timestamp, tick.price, tick.quantity) == (7, 1.5, 2.0)


def test_parse_tick_rejects_out_of_range_timestamp():
    assert parse_tick("99999999999999999999,1.0,1.0,buy") is None