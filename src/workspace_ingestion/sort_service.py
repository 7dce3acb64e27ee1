# -*- coding: utf-8 -*-


def _sort_value(value):
    # Missing values sort after every present one.
    if value is None:
        return (1, "")
    return (0, str(value).lower())


def sort_data_by_group(data: list, group_key: str, sort_key: str) -> list:
    """
    Returns a new list of records ordered by group, then by the tie-break field.

    Comparison is case-insensitive on the string form of each value; records
    missing either field go last within their level.
    """
    return sorted(data, key=lambda record: (_sort_value(record.get(group_key)), _sort_value(record.get(sort_key))))
