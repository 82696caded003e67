from starlette.requests import Request


def original_url(request: Request) -> str:
    """Return the request target as the client sent it, still percent-encoded.

    ``raw_path`` is preferred over ``request.url.path``, which is decoded.  Some
    servers leave the query string on ``raw_path`` and some do not, so it is cut
    off there and re-attached from ``query_string``.
    """
    raw_path: bytes | None = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        path = request.scope["path"]
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path
