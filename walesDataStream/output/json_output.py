"""
JSON serialisation of an Areas collection.

Shape:
    {"<code>": {"names": {"eng": ..., "cym": ...},
                "measures": {"<measure>": {"<year>": value}}}}
"""

import json
from typing import Any, Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.areas import Areas

NAME_LANGUAGES = ('eng', 'cym')


def areas_to_dict(areas: 'Areas') -> Dict[str, Any]:
    """Build the nested dictionary for every area, in authority-code order."""
    result: Dict[str, Any] = {}
    for area in areas:
        # English is the primary name; Welsh only when the source had one
        names = {
            lang: area.get_name(lang)
            for lang in NAME_LANGUAGES
            if area.has_name(lang)
        }
        measures = {
            code: {str(year): value for year, value in measure.items()}
            for code, measure in area.measures.items()
        }
        result[area.authority_code] = {'names': names, 'measures': measures}
    return result


def areas_to_json(areas: 'Areas', indent=None) -> str:
    return json.dumps(areas_to_dict(areas), indent=indent, ensure_ascii=False)
