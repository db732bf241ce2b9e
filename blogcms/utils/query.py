LIKE_ESCAPE = "\\"


def like_term(keyword: str) -> str:
    """``%keyword%`` with the LIKE wildcards in ``keyword`` matched literally."""
    escaped = (
        keyword.strip()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
