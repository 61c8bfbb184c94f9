"""
Dot-path access into CV data, e.g. ``personal_info.name`` or ``experience.0.company``.

CV data is a plain JSON value tree: dicts, lists and scalars.
"""

from typing import Any, Dict, List, Union

JsonScalar = Union[str, int, float, bool, None]
JsonValue = Union[JsonScalar, List[Any], Dict[str, Any]]


def _split(path: str) -> List[str]:
    if not path:
        raise ValueError("Path must not be empty")
    return path.split(".")


def get_path(document: JsonValue, path: str) -> JsonValue:
    """Returns the value at ``path``, or None if any step along it is missing."""
    current = document
    for key in _split(path):
        if isinstance(current, dict):
            if key not in current:
                return None
            current = current[key]
        elif isinstance(current, list) and key.isdigit():
            index = int(key)
            if index >= len(current):
                return None
            current = current[index]
        else:
            return None
    return current


def set_path(document: Dict[str, Any], path: str, value: JsonValue) -> None:
    """
    Sets the value at ``path``, creating intermediate dicts as needed.

    An intermediate that exists but is not a dict or list is replaced by an
    empty dict. In a list, the index equal to its length appends a new item.

    Raises:
        ValueError: If the path is empty, or a list step is not a number or
            lies past the end of the list.
    """
    *parents, last = _split(path)
    target = document
    for key in parents:
        if isinstance(target, list):
            slot = _list_slot(target, key, path)
            child = target[slot]
        else:
            slot = key
            child = target.get(key)
        if not isinstance(child, (dict, list)):
            child = target[slot] = {}
        target = child

    slot = _list_slot(target, last, path) if isinstance(target, list) else last
    target[slot] = value


def _list_slot(target: List[Any], key: str, path: str) -> int:
    if not key.isdigit() or int(key) > len(target):
        raise ValueError(
            f"Cannot use '{key}' as an index into a list of {len(target)} in '{path}'"
        )
    index = int(key)
    if index == len(target):
        target.append(None)
    return index
