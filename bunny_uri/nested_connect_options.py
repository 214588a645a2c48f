from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from .amqp_uri import AmqpUri

LOGGER = logging.getLogger(__name__)

TUNE_PARAMS = ("heartbeat", "channel_max", "frame_max")


class TuneOptions(TypedDict, total=False):
    heartbeat: str
    channel_max: str
    frame_max: str


# "pass" is a keyword
NestedConnectOptions = TypedDict("NestedConnectOptions", {
    "host": str,
    "port": int,
    "user": str,
    "pass": str,
    "vhost": str,
    "timeout": str,
    "tls": bool,
    "tune": TuneOptions,
}, total=False)


def to_nested_connect_options(uri: AmqpUri) -> NestedConnectOptions:
    """
    Projects a parsed URI to the options of an asynchronous client, which groups
    heartbeat, channel_max and frame_max under "tune".
    Unlike the flat options, connection_timeout is copied whenever it is present, even if it is "0".
    :param uri: Parsed AMQP URI
    :return: Options, "tune" is only set if at least one tuning parameter is given
    """
    options: NestedConnectOptions = {}

    if uri.host is not None:
        options["host"] = uri.host
    options["port"] = uri.port
    if uri.user is not None:
        options["user"] = uri.user
    if uri.password is not None:
        options["pass"] = uri.password
    vhost = uri.vhost
    if vhost is not None:
        options["vhost"] = vhost

    timeout = uri.query_param("connection_timeout")
    if timeout is not None:
        options["timeout"] = timeout
    if uri.secure:
        options["tls"] = True

    tune: TuneOptions = {}
    for param in TUNE_PARAMS:
        value = uri.query_param(param)
        if value is not None:
            tune[param] = value
    if tune:
        options["tune"] = tune

    LOGGER.debug(f"Nested connect options for {uri.masked()}: {sorted(options)}")
    return options
