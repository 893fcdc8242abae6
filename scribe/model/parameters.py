"""Ordered, percent-encoding-aware key/value collection.

A :class:`ParameterList` backs query strings, form bodies, and the OAuth
protocol parameters of a request. Keys may repeat and iteration follows
insertion order; only :meth:`ParameterList.as_oauth_base_string` sorts.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, Union
from urllib.parse import unquote_plus, urlsplit

from scribe.core.exceptions import InvalidUrlError
from scribe.model.encoding import percent_encode

_QUERY_SEPARATOR = "?"
_PARAM_SEPARATOR = "&"
_PAIR_SEPARATOR = "="


@dataclass(frozen=True)
class Parameter:
    """A single key/value pair."""

    key: str
    value: str

    def as_url_encoded_pair(self) -> str:
        return f"{percent_encode(self.key)}{_PAIR_SEPARATOR}{percent_encode(self.value)}"

    def sort_key(self) -> Tuple[str, str]:
        """Order by encoded key, then encoded value."""
        return percent_encode(self.key), percent_encode(self.value)


class ParameterList:
    """Ordered multimap of string keys to string values."""

    def __init__(self, params: Optional[Iterable[Union[Parameter, Tuple[str, str]]]] = None):
        self._params: list[Parameter] = []
        for param in params or ():
            if isinstance(param, Parameter):
                self._params.append(param)
            else:
                self.add(*param)

    def add(self, key: str, value: str) -> None:
        self._params.append(Parameter(str(key), str(value)))

    def add_all(self, other: "ParameterList") -> None:
        self._params.extend(other)

    def add_querystring(self, raw: Optional[str]) -> None:
        """Add the pairs of a raw ``a=1&b=2`` query string, decoding keys and values.

        The query is form encoded, so ``+`` decodes to a space. A pair without
        ``=`` is added with an empty value.
        """
        if not raw:
            return
        for pair in raw.split(_PARAM_SEPARATOR):
            if not pair:
                continue
            key, _, value = pair.partition(_PAIR_SEPARATOR)
            self.add(unquote_plus(key), unquote_plus(value))

    def remove(self, key: str) -> int:
        """Drop every pair with ``key``; returns how many were removed."""
        before = len(self._params)
        self._params = [p for p in self._params if p.key != key]
        return before - len(self._params)

    def contains(self, key: str) -> bool:
        return any(p.key == key for p in self._params)

    def get(self, key: str) -> Optional[str]:
        """First value stored for ``key``."""
        for param in self._params:
            if param.key == key:
                return param.value
        return None

    def append_to(self, url: str) -> str:
        """Append the encoded pairs to ``url``, merging with any existing query.

        Raises:
            InvalidUrlError: If ``url`` has no scheme or host.
        """
        try:
            parts = urlsplit(url or "")
        except ValueError as e:
            raise InvalidUrlError(url, "Cannot append parameters to an invalid URL") from e
        if not parts.scheme or not parts.netloc:
            raise InvalidUrlError(url, "Cannot append parameters to an invalid URL")

        query_string = self.as_form_url_encoded_string()
        if not query_string:
            return url

        base, hash_mark, fragment = url.partition("#")
        separator = _PARAM_SEPARATOR if _QUERY_SEPARATOR in base else _QUERY_SEPARATOR
        if base.endswith((_QUERY_SEPARATOR, _PARAM_SEPARATOR)):
            separator = ""
        return f"{base}{separator}{query_string}{hash_mark}{fragment}"

    def as_form_url_encoded_string(self) -> str:
        return _PARAM_SEPARATOR.join(p.as_url_encoded_pair() for p in self._params)

    def as_oauth_base_string(self) -> str:
        """Sorted ``key=value`` pairs joined by ``&``, as required by OAuth 1.0a."""
        return self.sort().as_form_url_encoded_string()

    def sort(self) -> "ParameterList":
        """Return a new list ordered by encoded key, then encoded value."""
        return ParameterList(sorted(self._params, key=Parameter.sort_key))

    def __iter__(self) -> Iterator[Parameter]:
        return iter(list(self._params))

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterList):
            return NotImplemented
        return self._params == other._params

    def __repr__(self) -> str:
        pairs = ", ".join(f"{p.key}={p.value!r}" for p in self._params)
        return f"ParameterList({pairs})"
