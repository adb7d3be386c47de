"""Pure tag-set transitions for the entry being edited.

Every function returns a new list; inputs are never mutated.
"""


def add_tag(tags: list[str], candidate: str) -> list[str]:
    """Append the trimmed candidate unless it is blank or already present."""
    tag = candidate.strip()
    if not tag or tag in tags:
        return list(tags)
    return [*tags, tag]


def remove_tag(tags: list[str], target: str) -> list[str]:
    """Drop every occurrence of target."""
    return [t for t in tags if t != target]


def merge_suggested(tags: list[str], suggested: list[str]) -> list[str]:
    """Existing tags in order, then new suggestions in the order given."""
    merged = list(tags)
    seen = set(merged)
    for tag in suggested:
        if tag not in seen:
            merged.append(tag)
            seen.add(tag)
    return merged


def unique_tags(tags: list[str]) -> list[str]:
    """First occurrence of each tag, in order."""
    return list(dict.fromkeys(tags))
