"""Wire encoding of resource parameters.

Garoon expects a flat parameter mapping. Resource clients describe which of
their parameters need special treatment and this module applies the rules:

- list-of-scalar parameters are joined with ``,`` (an empty list is omitted)
- sort specifications ``{"property": "createdAt", "order": "asc"}`` become
  ``"createdAt asc"``
- parameters whose value is None are omitted, never sent as null
- everything else (scalars, nested objects, lists of objects) passes through
- path identifiers are taken out of the parameters and substituted into the
  path template

Example:
    ```python
    >>> encode_params(
    ...     {"fields": ["id", "creator"], "orderBy": {"property": "createdAt", "order": "asc"}, "limit": 100},
    ...     list_keys=("fields",),
    ...     order_keys=("orderBy",),
    ... )
    {'fields': 'id,creator', 'orderBy': 'createdAt asc', 'limit': 100}
    ```
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from garoon_rest.errors.exceptions import EncodingError

SORT_ORDERS = frozenset(["asc", "desc"])

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

Params = dict[str, Any]


def encode_list(values: Iterable[Any], *, param: str | None = None) -> str | None:
    """Join a list of scalars with commas.

    Returns:
        The joined string, or None for an empty list (the key is then omitted)
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise EncodingError(f"Parameter {param or 'value'!r} must be a list, got {type(values).__name__}", param)

    items = list(values)
    for item in items:
        if isinstance(item, (Mapping, list, tuple)):
            raise EncodingError(f"Parameter {param or 'value'!r} must only contain scalars", param)
    if not items:
        return None
    return ",".join(_scalar_to_str(item) for item in items)


def _scalar_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_order_by(spec: Mapping[str, Any], *, param: str | None = None) -> str:
    """Encode a sort specification as ``"<property> <order>"``."""
    name = param or "orderBy"
    if not isinstance(spec, Mapping):
        raise EncodingError(f"Parameter {name!r} must be a mapping with 'property' and 'order'", param)

    prop = spec.get("property")
    order = spec.get("order")
    if not prop:
        raise EncodingError(f"Parameter {name!r} is missing 'property'", param)
    if not order:
        raise EncodingError(f"Parameter {name!r} is missing 'order'", param)
    if order not in SORT_ORDERS:
        raise EncodingError(f"Parameter {name!r} has invalid order {order!r}, expected 'asc' or 'desc'", param)
    return f"{prop} {order}"


def encode_params(
    params: Mapping[str, Any] | None,
    *,
    list_keys: Iterable[str] = (),
    order_keys: Iterable[str] = (),
) -> Params:
    """Encode a parameter set into the flat mapping sent on the wire.

    Args:
        params: Parameters as given by the caller; None means no parameters
        list_keys: Names of list-of-scalar parameters to join with commas
        order_keys: Names of sort-specification parameters

    Returns:
        A new dict holding only the supplied keys

    Raises:
        EncodingError: If a listed parameter does not have the expected shape
    """
    if params is None:
        return {}

    list_keys = frozenset(list_keys)
    order_keys = frozenset(order_keys)

    encoded: Params = {}
    for key, value in params.items():
        if value is None:
            continue
        if key in list_keys:
            joined = encode_list(value, param=key)
            if joined is not None:
                encoded[key] = joined
        elif key in order_keys:
            encoded[key] = encode_order_by(value, param=key)
        else:
            encoded[key] = value
    return encoded


def pop_path_params(params: Mapping[str, Any] | None, *names: str) -> tuple[Params, Params]:
    """Split path identifiers from the rest of the parameters.

    Returns:
        ``(path_values, rest)``; the caller's mapping is not modified

    Raises:
        EncodingError: If an identifier is missing
    """
    rest: Params = dict(params or {})
    path_values: Params = {}
    for name in names:
        value = rest.pop(name, None)
        if value is None or value == "":
            raise EncodingError(f"Path parameter {name!r} is required", name)
        path_values[name] = value
    return path_values, rest


def build_path(template: str, **values: Any) -> str:
    """Substitute ``{name}`` placeholders in a path template.

    Values are interpolated with ``str()``; numeric ids are not encoded further.

    Example:
        ```python
        >>> build_path("/api/v1/schedule/events/{id}", id=1)
        '/api/v1/schedule/events/1'
        ```
    """

    def replace(match: re.Match) -> str:
        name = match.group(1)
        if name not in values:
            raise EncodingError(f"Path parameter {name!r} is required", name)
        return str(values[name])

    return _PLACEHOLDER.sub(replace, template)
