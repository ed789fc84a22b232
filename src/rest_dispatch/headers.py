"""HeaderMapperChain — ordered header enrichment pipeline."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from rest_dispatch._types import HeaderMapper, Headers


class HeaderMapperChain:
    """Append-only list of header mappers, applied in registration order."""

    def __init__(self, *mappers: HeaderMapper) -> None:
        self._mappers: list[HeaderMapper] = list(mappers)

    def register(self, mapper: HeaderMapper) -> None:
        self._mappers.append(mapper)

    def apply(self, initial: Mapping[str, str] | None = None) -> Headers:
        """Fold the chain over a copy of ``initial``.

        Each mapper receives the previous mapper's output. Keys supplied by
        the caller survive unless a mapper overwrites them.
        """
        headers: Headers = dict(initial or {})
        for mapper in tuple(self._mappers):
            headers = mapper(headers)
        return headers

    def __len__(self) -> int:
        return len(self._mappers)

    def __iter__(self) -> Iterator[HeaderMapper]:
        return iter(tuple(self._mappers))
