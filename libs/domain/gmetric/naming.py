from __future__ import annotations

from collections.abc import Sequence

from shared.contracts.v1.results import QueryResult


def clean(part: str) -> str:
    """Make one key component safe: dots become underscores, spaces and quotes go."""
    return part.replace(".", "_").replace(" ", "").replace('"', "")


def type_name_values(type_name: str, type_names: Sequence[str]) -> str:
    """'type=GarbageCollector,name=PS Scavenge' + ['name'] -> 'PS Scavenge'.

    Values are emitted in `type_names` order and joined with '_'.
    """
    if not type_name or not type_names:
        return ""
    props: dict[str, str] = {}
    for pair in type_name.split(","):
        k, sep, v = pair.partition("=")
        if sep:
            props[k.strip()] = v.strip()
    return "_".join(props[t] for t in type_names if props.get(t))


class DefaultKeyNamer:
    """`<class alias|class name>.[<type name values>.]<attribute>[.<value key>]`"""

    def __init__(self, type_names: Sequence[str] = ()) -> None:
        self.type_names = tuple(type_names)

    def __call__(self, result: QueryResult, value_key: str) -> str:
        class_name = result.class_name_alias or result.query.alias or result.class_name
        if value_key.startswith(result.attribute_name):
            key = value_key
        else:
            key = f"{result.attribute_name}.{value_key}"

        parts = []
        if class_name:
            parts.append(clean(class_name))
        tn = clean(type_name_values(result.type_name, self.type_names))
        if tn:
            parts.append(tn)
        parts.append(key.replace(" ", "").replace('"', ""))
        return ".".join(parts)
