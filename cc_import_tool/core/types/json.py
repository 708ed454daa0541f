# cc_import_tool/core/types/json.py

"""JSON type definitions for type-safe JSON handling"""

# JSON Type Usage Guide:
# - JSONDict: loaded config files, registry snapshots, exported proposals
# - JSONList: arrays of records
# - JSONType: nested data of unknown shape

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList"]
