import math

import polars as pl

from ais_navlog.cleaning.ordering import collapse_duplicate_ticks, sort_by_utc
from ais_navlog.cleaning.vessel_filter import filter_vessels

NAN = float("nan")


def records(ticks, mmsis=None):
    mmsis = mmsis or [235001234] * len(ticks)
    return pl.DataFrame(
        {
            "utc_timestamp": ticks,
            "mmsi": mmsis,
            "ship_name": [f"row{i}" for i in range(len(ticks))],
        },
        schema={"utc_timestamp": pl.Float64, "mmsi": pl.UInt32, "ship_name": pl.Utf8},
    )


def test_filter_keeps_only_selected_vessels():
    df = records([1.0, 2.0, 3.0], [235001234, 992345678, 235001234])

    result = filter_vessels(df, [235001234])

    assert result["mmsi"].to_list() == [235001234, 235001234]
    assert result["ship_name"].to_list() == ["row0", "row2"]


def test_empty_filter_keeps_everything():
    df = records([1.0, 2.0, 3.0], [235001234, None, 992345678])

    assert filter_vessels(df, []).equals(df)
    assert filter_vessels(df, None).equals(df)


def test_filter_drops_rows_without_identifier():
    df = records([1.0, 2.0], [None, 235001234])

    assert filter_vessels(df, {235001234})["ship_name"].to_list() == ["row1"]


def test_filter_with_no_match_is_empty():
    df = records([1.0], [235001234])

    assert filter_vessels(df, [111]).is_empty()


def test_sort_is_stable_for_equal_ticks():
    df = records([5.0, 3.0, 5.0, 1.0])

    result = sort_by_utc(df)

    assert result["utc_timestamp"].to_list() == [1.0, 3.0, 5.0, 5.0]
    assert result["ship_name"].to_list() == ["row3", "row1", "row0", "row2"]


def test_sort_puts_nan_ticks_last():
    df = records([NAN, 2.0, 1.0])

    result = sort_by_utc(df)

    assert result["ship_name"].to_list() == ["row2", "row1", "row0"]
    assert math.isnan(result["utc_timestamp"][-1])


def test_sort_and_collapse_keep_first_record_of_each_tick():
    """Ticks [T, T, T+1] reduce to [T, T+1], keeping the first T record."""
    t = 63659469600.0
    df = records([t + 1, t, t])

    result = collapse_duplicate_ticks(sort_by_utc(df))

    assert result["utc_timestamp"].to_list() == [t, t + 1]
    assert result["ship_name"].to_list() == ["row1", "row0"]


def test_collapse_keeps_all_nan_ticks():
    df = sort_by_utc(records([NAN, 1.0, NAN, 1.0]))

    result = collapse_duplicate_ticks(df)

    assert result.height == 3
    assert result["ship_name"].to_list() == ["row1", "row0", "row2"]


def test_collapse_empty_frame():
    df = records([])

    assert collapse_duplicate_ticks(df).is_empty()
