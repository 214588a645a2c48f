from typing import Optional
from urllib.parse import unquote


def vhost_from_path(path: Optional[str]) -> Optional[str]:
    """
    Derives the AMQP virtual host from the raw (still percent-encoded) path of a URI.
    Exactly one leading slash is removed, the rest is percent-decoded.
    Malformed escape sequences are kept as they are.
    :param path: Raw path component, e.g. "/%2Fproduction"
    :return: Virtual host, or None if the path carries no virtual host (default of the client should be used)
    """
    if not path:
        return None
    if path.startswith("/"):
        path = path[1:]
    if not path:
        return None
    return unquote(path)
