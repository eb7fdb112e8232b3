"""Defaults and reserved names shared across the client."""

DEFAULT_PORT = 8006
API_PREFIX = "/api2/json/"

# Fields forwarded to POST access/ticket in ticket mode
AUTH_PARAMS = ("username", "realm", "password", "otp")

# Options applied to the underlying requests.Session
CONNECTION_OPTIONS = ("verify_ssl", "ca_file", "ca_path", "headers")

AUTH_COOKIE = "PVEAuthCookie"
CSRF_HEADER = "CSRFPreventionToken"
TOKEN_AUTH_SCHEME = "PVEAPIToken"

REST_METHODS = ("get", "post", "put", "delete")
DANGEROUS_SUFFIX = "_dangerous"

# Names that execute a request instead of extending the path
RESERVED_NAMES = frozenset(REST_METHODS) | frozenset(m + DANGEROUS_SUFFIX for m in REST_METHODS)
