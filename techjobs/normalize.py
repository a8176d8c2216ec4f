def name_key(name: str) -> str:
    """Key under which an entity name is interned (case-insensitive)."""
    return name.lower()


def contains_ignore_case(text: str, term: str) -> bool:
    return term.lower() in text.lower()


def is_all(selector: str) -> bool:
    """True for the "all" value selector, in any letter case."""
    return selector.lower() == "all"
