import re


def split_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten a Click option value into non-empty items.

    Accepts one string (which may hold several comma/space separated items)
    or a sequence of such strings, as produced by repeatable options.
    """
    if value is None:
        return []
    values = [value] if isinstance(value, str) else list(value)
    return [s for v in values for s in re.split(r"[,\s]+", v) if s]
