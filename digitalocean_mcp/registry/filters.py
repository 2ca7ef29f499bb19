"""
Parsing and matching of service specifications.

A service specification is a list of tokens, each either "service" or
"service:category":

    ["droplets", "droplets:actions", "networking:all"]

becomes

    {"droplets": ["basic", "actions"], "networking": ["all"]}

A bare service name means the "basic" category. "all" matches every
category of a service.
"""

from typing import Iterable, Mapping, Sequence

DEFAULT_CATEGORY = "basic"
ALL_CATEGORIES = "all"


def parse_service_filters(
    services: Iterable[str], defaults: Mapping[str, str] | None = None
) -> dict[str, list[str]]:
    """
    Group category tokens by service.

    - "service:category" appends the category to the service's list. An
      empty category ("service:") is ignored and creates no entry.
    - "service" seeds the list with the service's default category from
      `defaults` (DEFAULT_CATEGORY when absent), but only when the service
      has not been seen yet.

    Services are not checked against the catalog here.
    """
    result: dict[str, list[str]] = {}

    for token in services:
        service, sep, category = token.partition(":")
        if sep:
            if category:
                result.setdefault(service, []).append(category)
        elif service not in result:
            result[service] = [(defaults or {}).get(service, DEFAULT_CATEGORY)]

    return result


def has_category(categories: Sequence[str], wanted: str) -> bool:
    """True if `wanted` was requested, or if "all" was requested."""
    return wanted in categories or ALL_CATEGORIES in categories
