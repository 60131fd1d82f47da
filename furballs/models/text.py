def as_text(value: ...) -> str:
    # Legacy records may hold numbers where text is expected
    return "" if value is None else str(value)
