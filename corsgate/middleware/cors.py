"""
CORS middleware module.
Applies Cross-Origin Resource Sharing headers to preflight and actual requests.

A policy is built once at startup from functional options and then shared
read-only by every wrapped handler:

    policy = build_policy(
        allow_origins(["https://app.example.com"]),
        allow_methods(["GET", "POST"]),
        allow_credentials(True),
        allow_headers(["Content-Type", "X-Auth-Token"]),
    )
    app.add_middleware(CORSMiddleware, policy=policy)

Note: when requests need user authentication, CORS has to wrap the auth
layer and not the other way around. Preflights are sent without cookies, so
an auth middleware that exits early on a missing cookie would stop the
preflight before it ever reaches CORS.

    Do this...   policy.apply(auth_middleware(app))
    Not this...  auth_middleware(policy.apply(app))
"""
import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Iterable, Mapping, Optional, Set

from starlette.datastructures import Headers, MutableHeaders
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
ALLOW_HEADERS = "Access-Control-Allow-Headers"

PREFLIGHT_METHOD = "OPTIONS"


class CORSConfigurationError(ValueError):
    """Raised when a CORS option is given an unusable value"""
    pass


class CORSPolicy:
    """
    Allowed origins, allowed methods and the extra headers written on every
    response. Only the option functions populate it, and only while
    build_policy() runs.
    """

    def __init__(self):
        self._headers: Dict[str, str] = {}
        self._origins: Set[str] = set()
        self._methods: Set[str] = set()

    @property
    def headers(self) -> Mapping[str, str]:
        return MappingProxyType(self._headers)

    @property
    def origins(self) -> FrozenSet[str]:
        return frozenset(self._origins)

    @property
    def methods(self) -> FrozenSet[str]:
        return frozenset(self._methods)

    def __repr__(self) -> str:
        return (
            f"CORSPolicy(origins={sorted(self._origins)}, "
            f"methods={sorted(self._methods)}, headers={self._headers})"
        )

    def cors_headers(self, origin: Optional[str], method: Optional[str]) -> Dict[str, str]:
        """Headers to emit for a request carrying the given Origin and Method values"""
        result = {}
        if origin is not None and origin in self._origins:
            result[ALLOW_ORIGIN] = origin
        if method is not None and method in self._methods:
            result[ALLOW_METHODS] = method
        result.update(self._headers)
        return result

    def write_headers(self, request: Any, response_headers: Any) -> None:
        """
        Write the CORS headers for `request` into `response_headers`.

        `request` needs a `headers` mapping with a `get` method (a Starlette
        Request, or anything shaped like one). The allowed-methods check
        reads the request's `Method` header, not its request-line method.
        """
        origin = request.headers.get("Origin")
        method = request.headers.get("Method")
        for name, value in self.cors_headers(origin, method).items():
            response_headers[name] = value

    def apply_fn(self, handler: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
        """
        Wrap a `handler(request, response_headers)` callable.

        Preflight requests get their headers and return None without
        reaching `handler`; every other request gets its headers and is
        then forwarded.
        """
        def wrapped(request, response_headers):
            self.write_headers(request, response_headers)
            if request.method == PREFLIGHT_METHOD:
                logger.debug("Answered CORS preflight without forwarding")
                return None
            return handler(request, response_headers)

        return wrapped

    def apply(self, app: ASGIApp) -> "CORSMiddleware":
        """Wrap an ASGI application"""
        return CORSMiddleware(app, policy=self)


CORSOption = Callable[[CORSPolicy], None]


def _as_list(name: str, values: Iterable[str]) -> list:
    if isinstance(values, (str, bytes)):
        raise CORSConfigurationError(
            f"{name} expects a list of strings, got a single string: {values!r}"
        )
    return list(values)


def build_policy(*options: CORSOption) -> CORSPolicy:
    """Create a CORSPolicy by applying each option, in order, to an empty policy"""
    policy = CORSPolicy()
    for option in options:
        option(policy)
    logger.debug("Built %r", policy)
    return policy


def allow_origins(origins: Iterable[str]) -> CORSOption:
    """
    Allow-list origins (scheme, host and port, matched exactly) that may
    access resources on this host.
    """
    origins = _as_list("allow_origins", origins)

    def option(policy: CORSPolicy) -> None:
        policy._origins.update(origins)

    return option


def allow_methods(methods: Iterable[str]) -> CORSOption:
    """
    Allow-list HTTP methods, e.g. allow_methods(["GET", "POST"]).
    """
    methods = _as_list("allow_methods", methods)

    def option(policy: CORSPolicy) -> None:
        policy._methods.update(methods)

    return option


def allow_credentials(allow: bool) -> CORSOption:
    """Allow credentials such as site cookies to be sent cross-origin"""
    value = "true" if allow else "false"

    def option(policy: CORSPolicy) -> None:
        policy._headers[ALLOW_CREDENTIALS] = value

    return option


def allow_headers(headers: Iterable[str]) -> CORSOption:
    """
    Allow-list non-simple request headers, e.g. `Content-Type` carrying
    `application/json`, or custom headers like `X-Auth-Token`.
    See https://developer.mozilla.org/en-US/docs/Web/HTTP/CORS
    """
    headers = _as_list("allow_headers", headers)

    def option(policy: CORSPolicy) -> None:
        if headers:
            policy._headers[ALLOW_HEADERS] = ", ".join(headers)

    return option


class CORSMiddleware:
    """
    Pure ASGI middleware applying a CORSPolicy.

    Preflights are answered here with an empty 200 response. Other requests
    reach the wrapped app, and the CORS headers are added to its response
    start message unless the app already set the same header itself.
    """

    def __init__(self, app: ASGIApp, policy: CORSPolicy):
        self.app = app
        self.policy = policy

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_headers = Headers(scope=scope)
        cors_headers = self.policy.cors_headers(
            request_headers.get("Origin"), request_headers.get("Method")
        )

        if scope["method"] == PREFLIGHT_METHOD:
            logger.debug("Answered CORS preflight for %s", scope.get("path"))
            response = Response(status_code=200, headers=cors_headers)
            await response(scope, receive, send)
            return

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                response_headers = MutableHeaders(scope=message)
                for name, value in cors_headers.items():
                    response_headers.setdefault(name, value)
            await send(message)

        await self.app(scope, receive, send_with_cors)


def policy_from_settings(settings: Any) -> CORSPolicy:
    """Build a CORSPolicy from the cors_* fields of the application settings"""
    options = [
        allow_origins(settings.cors_origins),
        allow_methods(settings.cors_methods),
        allow_headers(settings.cors_headers),
    ]
    if settings.cors_allow_credentials is not None:
        options.append(allow_credentials(settings.cors_allow_credentials))
    return build_policy(*options)
