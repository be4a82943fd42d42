import pandas as pd
import pytest

from walesDataStream.core.errors import NotFoundError
from walesDataStream.models.measure import Measure


def test_code_is_lowercased():
    measure = Measure("PoP", "Population")
    assert measure.code == "pop"
    assert measure.get_code() == "pop"
    assert measure.label == "Population"


def test_set_then_get_value():
    measure = Measure("pop", "Population")
    measure.set_value(1999, 12345678.9)
    measure.set_value(2001, 12.5)
    assert measure.get_value(1999) == 12345678.9
    assert measure.get_value(2001) == 12.5
    assert measure.size() == 2


def test_set_value_overwrites():
    measure = Measure("pop", "Population")
    measure.set_value(2000, 1.0)
    measure.set_value(2000, 2.0)
    assert measure.get_value(2000) == 2.0
    assert len(measure) == 1


def test_missing_year_raises_not_found():
    measure = Measure("pop", "Population")
    measure.set_value(2000, 1.0)
    with pytest.raises(NotFoundError, match="No value found for year 2001"):
        measure.get_value(2001)


def test_not_found_is_a_key_error():
    with pytest.raises(KeyError):
        Measure("pop", "Population").get_value(1990)


def test_label_can_change():
    measure = Measure("pop", "Population")
    measure.set_label("New Population")
    assert measure.get_label() == "New Population"


def test_combine_other_wins_and_keeps_own_years():
    a = Measure("pop", "Population")
    a.set_value(2000, 1.0)
    a.set_value(2001, 2.0)
    b = Measure("pop", "Population")
    b.set_value(2001, 20.0)
    b.set_value(2002, 30.0)

    a.combine(b)

    assert a.values == {2000: 1.0, 2001: 20.0, 2002: 30.0}
    assert b.values == {2001: 20.0, 2002: 30.0}


def test_recombining_original_keeps_years_unique_to_other():
    a = Measure("pop", "Population")
    a.set_value(2000, 1.0)
    a.set_value(2001, 2.0)
    b = Measure("pop", "Population")
    b.set_value(2001, 20.0)
    b.set_value(2002, 30.0)

    result = a.copy()
    result.combine(b)
    result.combine(a)

    assert result.get_value(2002) == 30.0
    assert result.get_value(2000) == 1.0
    # a was applied last so it wins on the shared year
    assert result.get_value(2001) == 2.0


def test_empty_series_statistics_are_zero():
    measure = Measure("pop", "Population")
    assert measure.get_average() == 0
    assert measure.get_difference() == 0
    assert measure.get_difference_as_percentage() == 0


def test_single_value_statistics():
    measure = Measure("pop", "Population")
    measure.set_value(2020, 12345.0)
    assert measure.get_average() == 12345.0
    assert measure.get_difference() == 0
    assert measure.get_difference_as_percentage() == 0


def test_difference_uses_chronological_order():
    measure = Measure("pop", "Population")
    measure.set_value(2010, 150.0)
    measure.set_value(1990, 100.0)
    measure.set_value(2000, 500.0)

    assert measure.get_difference() == pytest.approx(50.0)
    assert measure.get_difference_as_percentage() == pytest.approx(50.0)
    assert measure.get_average() == pytest.approx(250.0)


def test_percentage_difference_zero_when_first_value_is_zero():
    measure = Measure("pop", "Population")
    measure.set_value(2000, 0.0)
    measure.set_value(2001, 10.0)
    assert measure.get_difference() == 10.0
    assert measure.get_difference_as_percentage() == 0


def test_equality():
    a = Measure("POP", "Population")
    b = Measure("pop", "Population")
    a.set_value(2000, 1.0)
    b.set_value(2000, 1.0)
    assert a == b

    b.set_label("Other")
    assert a != b


def test_to_series_is_indexed_by_year():
    measure = Measure("pop", "Population")
    measure.set_value(2011, 2.0)
    measure.set_value(2010, 1.0)

    series = measure.to_series()

    assert list(series.index) == [2010, 2011]
    assert list(series.values) == [1.0, 2.0]
    assert series.name == "pop"
    assert series.dtype == "float64"


def test_to_series_of_empty_measure():
    series = Measure("pop", "Population").to_series()
    assert isinstance(series, pd.Series)
    assert series.empty
