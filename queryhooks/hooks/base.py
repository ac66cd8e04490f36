from collections.abc import Mapping
from typing import Any, Protocol


class Hook(Protocol):
    """A single query-shaping stage.

    A hook receives the query built so far and the request parameters, and
    returns a query of the same kind. It must not mutate its input.
    """

    def run(self, query: Any, params: Mapping[str, Any]) -> Any: ...
