import re
from collections.abc import Iterable

from passlist.schemas import Record


# Trailing run of at least two letters, digits, "-" or "_"; letters include non-ASCII ones.
TRAILING_LABEL = re.compile(r"[-\w]{2,}\Z")

# Second-level labels registries put under a country code, as in amazon.co.uk.
COUNTRY_SECOND_LEVEL = frozenset({"ac", "co", "com", "edu", "gov", "net", "or", "org"})


def _domain_label(parts: list[str]) -> str:
    if len(parts) > 2 and len(parts[-1]) == 2 and fold_case(parts[-2]) in COUNTRY_SECOND_LEVEL:
        return parts[-3]
    return parts[-2]


def fold_case(value: str) -> str:
    return value.lower()


def derive_key(name: str) -> str:
    # accounts.ard.de -> ard, colibri.ai -> colibri, amazon.co.uk -> amazon
    parts = name.split(".")
    if len(parts) > 1:
        key = fold_case(_domain_label(parts))
    else:
        key = fold_case(name)

    match = TRAILING_LABEL.search(key)
    if match:
        key = match.group(0)
    return fold_case(key)


def sort_records(records: Iterable[Record]) -> list[Record]:
    # sorted() is stable; original_index still breaks ties explicitly.
    return sorted(records, key=lambda record: (fold_case(record.sort_key), record.original_index))
