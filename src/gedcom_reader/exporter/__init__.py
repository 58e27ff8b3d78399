"""
Exporter package.

    from gedcom_reader.exporter import export_result_set_json
"""

from .json_exporter import (
    export_result_set_json,
    result_set_to_dict,
    serialize_result_set,
)

__all__ = [
    "export_result_set_json",
    "result_set_to_dict",
    "serialize_result_set",
]
