from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from multidict import MultiDictProxy
from yarl import URL

from .flat_connect_options import FlatConnectOptions, to_flat_connect_options
from .nested_connect_options import NestedConnectOptions, to_nested_connect_options
from .virtual_host import vhost_from_path

DEFAULT_PORT = 5672
SECURE_SCHEME = "amqps"

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AmqpUri:
    """
    Read-only view of an AMQP (RabbitMQ) connection URI, see https://www.rabbitmq.com/uri-spec.html
    Generic URI parsing is done by yarl, this class only adds the AMQP rules on top of it:
    the default port, the secure flag and the virtual host stored in the path.
    Use flat_connect_options() or nested_connect_options() to get options for a client connect call.
    """
    url: URL

    @classmethod
    def parse(cls, value: Union[str, URL]) -> AmqpUri:
        """
        Parses a connection URI.
        The string is taken as written: its path is not normalized, so "." and ".." stay part of the vhost.
        :param value: URI string or an already parsed yarl URL (used as it is)
        :return: Parsed URI
        :raise: TypeError if value is neither a string nor a URL, ValueError if yarl rejects the URI
        """
        if isinstance(value, URL):
            url = value
        elif isinstance(value, str):
            url = URL(value, encoded=True)
        else:
            raise TypeError(f"Expected str or URL, got {type(value).__name__}")
        uri = cls(url)
        LOGGER.debug(f"Parsed AMQP URI: {uri.masked()}")
        return uri

    @classmethod
    def from_env(cls, variable: str = "AMQP_URI", default: str = "amqp://localhost") -> AmqpUri:
        """
        Parses the connection URI stored in an environment variable.
        :param variable: Name of the environment variable
        :param default: URI used when the variable is not set
        :return: Parsed URI
        """
        value = os.getenv(variable)
        if value is None:
            LOGGER.debug(f"{variable} is not set, using the default URI")
            value = default
        return cls.parse(value)

    @property
    def scheme(self) -> str:
        return self.url.scheme

    @property
    def host(self) -> Optional[str]:
        return self.url.host

    @property
    def port(self) -> int:
        """
        :return: Port given in the URI, 5672 if there is none (amqps uses the same default)
        """
        return self.url.port or DEFAULT_PORT

    @property
    def user(self) -> Optional[str]:
        return self.url.user

    @property
    def password(self) -> Optional[str]:
        return self.url.password

    @property
    def path(self) -> str:
        """
        :return: Raw path, percent-encoding is kept
        """
        return self.url.raw_path

    @property
    def secure(self) -> bool:
        return self.scheme == SECURE_SCHEME

    @property
    def vhost(self) -> Optional[str]:
        """
        vhost is the path of the URI without its leading slash, unescaped.
        :return: Virtual host, None if the URI has none (the client's default should be used)
        """
        return vhost_from_path(self.path)

    @property
    def query(self) -> MultiDictProxy[str]:
        """
        :return: Query parameters, pairs are separated by "&" or ";"
        """
        raw_query = self.url.raw_query_string
        if ";" not in raw_query:
            return self.url.query
        return URL.build(query_string=raw_query.replace(";", "&"), encoded=True).query

    def query_param(self, name: str) -> Optional[str]:
        """
        :param name: Query parameter name, see https://www.rabbitmq.com/uri-query-parameters.html
        :return: First value of the parameter, None if it is missing
        """
        return self.query.get(name)

    def query_params(self, name: str) -> List[str]:
        """
        :param name: Query parameter name
        :return: All values of the parameter in the order they appear in the URI
        """
        return self.query.getall(name, [])

    def flat_connect_options(self) -> Tuple[Optional[str], FlatConnectOptions]:
        """
        :return: Tuple of (host, options) for a synchronous client, see to_flat_connect_options
        """
        return to_flat_connect_options(self)

    def nested_connect_options(self) -> NestedConnectOptions:
        """
        :return: Options for an asynchronous client, see to_nested_connect_options
        """
        return to_nested_connect_options(self)

    def masked(self) -> str:
        """
        :return: The URI as a string with the password hidden, safe for logging
        """
        if self.url.password is None:
            return str(self.url)
        return str(self.url.with_password("******"))

    def __str__(self) -> str:
        return self.masked()


def parse_amqp_uri(value: Union[str, URL]) -> AmqpUri:
    return AmqpUri.parse(value)

