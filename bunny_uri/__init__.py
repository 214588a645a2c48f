from .virtual_host import vhost_from_path
from .flat_connect_options import FlatConnectOptions, to_flat_connect_options
from .nested_connect_options import NestedConnectOptions, TuneOptions, to_nested_connect_options
from .amqp_uri import AmqpUri, DEFAULT_PORT, parse_amqp_uri

__all__ = [
    "AmqpUri",
    "DEFAULT_PORT",
    "parse_amqp_uri",
    "vhost_from_path",
    "FlatConnectOptions",
    "to_flat_connect_options",
    "NestedConnectOptions",
    "TuneOptions",
    "to_nested_connect_options"
]
