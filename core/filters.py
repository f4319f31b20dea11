"""List-view query helpers shared by the listing screens."""

ALL = "all"


def matches_search(term, *values):
    """Case-insensitive substring match of ``term`` against any of ``values``."""
    term = (term or "").strip().lower()
    if not term:
        return True
    return any(term in str(v or "").lower() for v in values)


def matches_choice(selected, value):
    """Equality filter; blank or ``all`` selects everything."""
    selected = (selected or "").strip()
    if not selected or selected.lower() == ALL:
        return True
    return selected.lower() == str(value or "").strip().lower()


def sort_records(records, key_funcs, sort_by):
    """Stable sort by the key registered under ``sort_by``; unknown keys keep order."""
    key = key_funcs.get(sort_by)
    if key is None:
        return list(records)
    return sorted(records, key=key)
