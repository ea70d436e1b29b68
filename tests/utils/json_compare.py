from typing import Dict, Iterable


def exclude_keys(data: Dict, keys: Iterable[str]) -> Dict:
    keys = set(keys)
    return {k: v for k, v in data.items() if k not in keys}


def same_payload(left: Dict, right: Dict, ignore: Iterable[str] = ()) -> bool:
    """Compare two JSON objects, ignoring volatile keys such as ids"""
    return exclude_keys(left, ignore) == exclude_keys(right, ignore)
