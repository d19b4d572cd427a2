from tempmap.data.demo import make_demo_payload, make_variance_df
from tempmap.data.loader import Dataset


def test_variance_df_covers_every_month():
    df = make_variance_df(start_year=1900, end_year=1904)
    assert len(df) == 5 * 12
    assert sorted(df["month"].unique()) == list(range(1, 13))
    assert df["year"].min() == 1900
    assert df["year"].max() == 1904


def test_variance_df_is_reproducible():
    a = make_variance_df(start_year=1900, end_year=1901, seed=7)
    b = make_variance_df(start_year=1900, end_year=1901, seed=7)
    assert a.equals(b)


def test_demo_payload_parses():
    dataset = Dataset.from_json(make_demo_payload(start_year=2000, end_year=2001))
    assert len(dataset) == 24
    assert dataset.base_temperature == 8.66
