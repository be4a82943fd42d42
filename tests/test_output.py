import io
import json

from conftest import AREAS_COLS, AREAS_CSV
from walesDataStream.core.columns import SourceDataType
from walesDataStream.models.area import Area
from walesDataStream.models.areas import Areas
from walesDataStream.models.measure import Measure
from walesDataStream.output.text_output import area_title, measure_table, render_areas


def build_areas():
    areas = Areas()
    powys = Area("W06000023")
    powys.set_name("eng", "Powys")
    powys.set_name("cym", "Powys")
    pop = Measure("pop", "Population")
    pop.set_value(2011, 133000.0)
    pop.set_value(2010, 132000.0)
    powys.set_measure("pop", pop)
    dens = Measure("dens", "Population density")
    dens.set_value(2010, 25.5)
    powys.set_measure("dens", dens)
    areas.insert_area(powys)

    cardiff = Area("W06000015")
    cardiff.set_name("eng", "Cardiff")
    areas.insert_area(cardiff)

    areas.insert_area(Area("W06000099"))
    return areas


def test_json_structure():
    data = json.loads(build_areas().to_json())

    assert list(data) == ["W06000015", "W06000023", "W06000099"]
    assert data["W06000023"] == {
        "names": {"eng": "Powys", "cym": "Powys"},
        "measures": {
            "dens": {"2010": 25.5},
            "pop": {"2010": 132000.0, "2011": 133000.0},
        },
    }
    assert data["W06000015"] == {"names": {"eng": "Cardiff"}, "measures": {}}


def test_json_omits_welsh_name_when_absent():
    data = build_areas().to_dict()
    assert "cym" not in data["W06000015"]["names"]
    assert data["W06000099"]["names"] == {}


def test_names_round_trip_through_json(populator):
    areas = Areas()
    populator.populate(areas, io.StringIO(AREAS_CSV), SourceDataType.AUTHORITY_CODE_CSV, AREAS_COLS)

    names = {code: entry["names"] for code, entry in json.loads(areas.to_json()).items()}

    assert names == {
        "W06000011": {"eng": "Swansea", "cym": "Abertawe"},
        "W06000015": {"eng": "Cardiff", "cym": "Caerdydd"},
        "W06000023": {"eng": "Powys", "cym": "Powys"},
    }


def test_area_titles():
    areas = build_areas()
    assert area_title(areas.get_area("W06000023")) == "Powys / Powys (W06000023)"
    assert area_title(areas.get_area("W06000015")) == "Cardiff (W06000015)"
    assert area_title(areas.get_area("W06000099")) == "Unnamed (W06000099)"


def test_measure_table_columns():
    pop = build_areas().get_area("W06000023").get_measure("pop")
    table = measure_table(pop)

    assert list(table.columns) == ["2010", "2011", "Average", "Diff.", "% Diff."]
    row = table.iloc[0]
    assert row["Average"] == 132500.0
    assert row["Diff."] == 1000.0
    assert round(row["% Diff."], 6) == round(1000.0 / 132000.0 * 100, 6)


def test_text_rendering_order_and_content():
    text = render_areas(build_areas())

    cardiff = text.index("Cardiff (W06000015)")
    powys = text.index("Powys / Powys (W06000023)")
    unnamed = text.index("Unnamed (W06000099)")
    assert cardiff < powys < unnamed

    # measures in code order
    assert text.index("Population density (dens)") < text.index("Population (pop)")
    assert "<no measures>" in text[cardiff:powys]
    assert "132000.000000" in text
    assert str(build_areas()) == text


def test_empty_collection_renders_nothing():
    assert render_areas(Areas()) == ""
