import io
import json
import logging

import pytest

from walesDataStream.core.columns import SourceColumn
from walesDataStream.data.populator import DataPopulator
from walesDataStream.models.areas import Areas


AREAS_CSV = (
    "Local authority code,Name (eng),Name (cym)\n"
    "W06000011,Swansea,Abertawe\n"
    "W06000023,Powys,Powys\n"
    "W06000015,Cardiff,Caerdydd\n"
)

POP_BY_YEAR_CSV = (
    "AuthorityCode,2009,2010,2011,2012,2013\n"
    "W06000011,239000,239500,240000,240500,241000\n"
    "W06000023,132000,132500,133000,133500,134000\n"
)

AREAS_COLS = {
    SourceColumn.AUTH_CODE: "Local authority code",
    SourceColumn.AUTH_NAME_ENG: "Name (eng)",
    SourceColumn.AUTH_NAME_CYM: "Name (cym)",
}

POP_COLS = {
    SourceColumn.AUTH_CODE: "AuthorityCode",
    SourceColumn.SINGLE_MEASURE_CODE: "pop",
    SourceColumn.SINGLE_MEASURE_NAME: "Population",
}

POPDEN_COLS = {
    SourceColumn.AUTH_CODE: "Localauthority_Code",
    SourceColumn.AUTH_NAME_ENG: "Localauthority_ItemName_ENG",
    SourceColumn.MEASURE_CODE: "Measure_Code",
    SourceColumn.MEASURE_NAME: "Measure_ItemName_ENG",
    SourceColumn.YEAR: "Year_Code",
    SourceColumn.VALUE: "Data",
}

TRAINS_COLS = {
    SourceColumn.AUTH_CODE: "LocalAuthority_Code",
    SourceColumn.AUTH_NAME_ENG: "LocalAuthority_ItemName_ENG",
    SourceColumn.YEAR: "Year_Code",
    SourceColumn.VALUE: "Data",
    SourceColumn.SINGLE_MEASURE_CODE: "rail",
    SourceColumn.SINGLE_MEASURE_NAME: "Rail passenger journeys",
}


def popden_record(code, name, measure, label, year, value):
    return {
        "Localauthority_Code": code,
        "Localauthority_ItemName_ENG": name,
        "Measure_Code": measure,
        "Measure_ItemName_ENG": label,
        "Year_Code": str(year),
        "Data": value,
    }


def trains_record(code, name, year, value):
    return {
        "LocalAuthority_Code": code,
        "LocalAuthority_ItemName_ENG": name,
        "Year_Code": str(year),
        "Data": value,
    }


def json_stream(records):
    return io.StringIO(json.dumps({"value": records}))


@pytest.fixture
def logger():
    return logging.getLogger("walesDataStream.tests")


@pytest.fixture
def populator(logger):
    return DataPopulator(logger)


@pytest.fixture
def areas():
    return Areas()


@pytest.fixture
def loaded_areas(populator, areas):
    """Areas with the three sample authorities already imported."""
    populator.populate(areas, io.StringIO(AREAS_CSV), "authority_code_csv", AREAS_COLS)
    return areas
