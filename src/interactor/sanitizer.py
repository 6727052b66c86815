"""Allow-list filtering of call parameters."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

log = getLogger(__name__)


def sanitize(params: Mapping[str, Any], attribute_names: Sequence[str]) -> Mapping[str, Any]:
    """Keep exactly the declared ``attribute_names``, in declaration order.

    Without declared names ``params`` is returned as is. Otherwise undeclared keys
    are dropped and missing declared keys map to ``None``.
    """

    if not attribute_names:
        return params

    dropped = [key for key in params if key not in attribute_names]
    if dropped:
        log.debug("Dropping undeclared parameters: %s", ", ".join(map(str, dropped)))
    return {name: params.get(name) for name in attribute_names}
