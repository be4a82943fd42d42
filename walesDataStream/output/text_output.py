"""
Plain-text table rendering of an Areas collection.

Areas are printed in authority-code order and measures in code order. Each
measure is a one-row table of its yearly values followed by the average,
the first-to-last difference and the percentage difference.
"""

from typing import List, TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from ..models.area import Area
    from ..models.areas import Areas
    from ..models.measure import Measure

NO_MEASURES = "<no measures>"
UNNAMED = "Unnamed"
STAT_COLUMNS = ['Average', 'Diff.', '% Diff.']


def _format_float(value: float) -> str:
    return f"{value:.6f}"


def area_title(area: 'Area') -> str:
    """English and Welsh names, whichever single name exists, or 'Unnamed'."""
    names = area.names
    if 'eng' in names and 'cym' in names:
        title = f"{names['eng']} / {names['cym']}"
    elif 'eng' in names:
        title = names['eng']
    elif names:
        title = next(iter(names.values()))
    else:
        title = UNNAMED
    return f"{title} ({area.authority_code})"


def measure_table(measure: 'Measure') -> pd.DataFrame:
    """One-row table: a column per year, then the derived statistics."""
    series = measure.to_series()
    columns = [str(year) for year in series.index] + STAT_COLUMNS
    row = list(series.values) + [
        measure.get_average(),
        measure.get_difference(),
        measure.get_difference_as_percentage(),
    ]
    return pd.DataFrame([row], columns=columns)


def render_measure(measure: 'Measure') -> str:
    table = measure_table(measure).to_string(index=False, float_format=_format_float)
    return f"{measure.label} ({measure.code})\n{table}\n"


def render_area(area: 'Area') -> str:
    lines: List[str] = [area_title(area)]
    measures = area.measures
    if not measures:
        lines.append(NO_MEASURES)
    else:
        for measure in measures.values():
            lines.append(render_measure(measure))
    return "\n".join(lines) + "\n"


def render_areas(areas: 'Areas') -> str:
    return "\n".join(render_area(area) for area in areas)
