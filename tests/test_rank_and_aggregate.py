from tx_tax_auctions.aggregate import ResultAggregator, aggregate, rank
from tx_tax_auctions.models import County, ListingRecord


COUNTY_A = County(id="1", name="CountyA")
COUNTY_B = County(id="2", name="CountyB")


def _record(account, value, county=COUNTY_A, bid=0.0):
    return ListingRecord(
        county=county, account_number=account, adjudged_value=value, minimum_bid=bid
    )


def test_rank_is_descending_and_stable():
    records = [_record("A", 100.0), _record("B", 200.0), _record("C", 100.0)]
    assert [r.account_number for r in rank(records)] == ["B", "A", "C"]


def test_rank_does_not_round():
    records = [_record("A", 100.004), _record("B", 100.006), _record("C", 100.001)]
    assert [r.account_number for r in rank(records)] == ["B", "A", "C"]


def test_aggregate_keeps_county_order_and_skips_empty_batches():
    batch_a = [_record("A1", 5.0), _record("A2", 50.0)]
    batch_b = [_record("B1", 500.0, county=COUNTY_B)]
    merged = aggregate([batch_a, [], batch_b])
    assert [r.account_number for r in merged] == ["A2", "A1", "B1"]


def test_aggregator_drops_invalid_records():
    aggregator = ResultAggregator()
    ranked = aggregator.add(
        [
            _record("ok", 10.0),
            _record("neg", -1.0),
            _record("bid", 20.0, bid=float("nan")),
        ]
    )
    assert [r.account_number for r in ranked] == ["ok"]
    assert aggregator.dropped == 2
    assert len(aggregator) == 1


def test_aggregator_records_is_a_copy():
    aggregator = ResultAggregator()
    aggregator.add([_record("A", 1.0)])
    aggregator.records.clear()
    assert len(aggregator.records) == 1
