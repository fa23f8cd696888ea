def clean_text(s: str) -> str:
    return (s or "").encode("utf-8", "ignore").decode("utf-8", "ignore").replace("\r", "")


def is_blank(s: str | None) -> bool:
    return not s or not s.strip()
