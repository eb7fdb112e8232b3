"""Path builder collecting API segments until an HTTP verb is called."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._constants import RESERVED_NAMES

if TYPE_CHECKING:
    from ._client import ProxmoxAPI


def _normalize(value: Any) -> str:
    segment = str(value).strip("/")
    if not segment:
        raise ValueError(f"Empty path segment: {value!r}")
    return segment


class ApiPath:
    """An API path that has not been requested yet.

    Attribute access and indexing append a segment and return the same
    builder, so a chain reads like the endpoint it targets::

        api.nodes["pve1"].lxc[101].status.current.get()

    A builder is consumed by its verb call. Reusing one partially built path
    for several requests, or sharing it between threads, is not supported.
    """

    # __getitem__ would otherwise make every builder an endless iterable
    __iter__ = None

    def __init__(self, api: ProxmoxAPI):
        from ._client import ProxmoxAPI

        if not isinstance(api, ProxmoxAPI):
            raise TypeError(f"Not an instance of ProxmoxAPI: {type(api).__name__}")
        self._api = api
        self._segments: list[str] = []

    def __getitem__(self, index: Any) -> ApiPath:
        self._segments.append(_normalize(index))
        return self

    def __getattr__(self, name: str) -> ApiPath:
        # Leave private and dunder lookups (copy, pickle, mocks) alone
        if name.startswith("_"):
            raise AttributeError(name)
        return self.dispatch(name)

    def dispatch(self, name: str, *args: Any) -> Any:
        """Execute ``name`` if it is a verb, otherwise append it as a segment."""
        if name in RESERVED_NAMES:
            return self._api._submit(name, self.path_string(), *args[:1])
        self._segments.append(_normalize(name))
        return self

    def path_string(self) -> str:
        return "/".join(self._segments)

    def path_segments(self) -> list[str]:
        return list(self._segments)

    def __str__(self) -> str:
        return self.path_string()

    def __repr__(self) -> str:
        return f"<ApiPath {self.path_string()!r}>"

    # ---------- Verbs ----------
    def get(self, data: dict | None = None) -> Any:
        return self.dispatch("get", data)

    def post(self, data: dict | None = None) -> Any:
        return self.dispatch("post", data)

    def put(self, data: dict | None = None) -> Any:
        return self.dispatch("put", data)

    def delete(self, data: dict | None = None) -> Any:
        return self.dispatch("delete", data)

    # ---------- Verbs returning None instead of raising on HTTP errors ----------
    def get_dangerous(self, data: dict | None = None) -> Any:
        return self.dispatch("get_dangerous", data)

    def post_dangerous(self, data: dict | None = None) -> Any:
        return self.dispatch("post_dangerous", data)

    def put_dangerous(self, data: dict | None = None) -> Any:
        return self.dispatch("put_dangerous", data)

    def delete_dangerous(self, data: dict | None = None) -> Any:
        return self.dispatch("delete_dangerous", data)
