"""Data models for cached server endpoints.

This module defines ServerEndpoint, the immutable value stored in the
server list cache: an IP address and a TCP/UDP port.
"""

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address, ip_address

IPAddress = IPv4Address | IPv6Address

MAX_PORT = 65535


@dataclass(frozen=True)
class ServerEndpoint:
    """A server reachable at an IP address and port.

    Endpoints have no identity beyond their value: two endpoints with the
    same address and port compare equal and hash the same. A textual address
    is coerced with ``ipaddress.ip_address`` on construction.
    """

    address: IPAddress
    port: int

    def __post_init__(self) -> None:
        """Validate the port and coerce a textual address."""
        if not isinstance(self.address, IPv4Address | IPv6Address):
            try:
                address = ip_address(self.address)
            except ValueError as e:
                msg = f"Invalid IP address: {self.address!r}"
                raise ValueError(msg) from e
            object.__setattr__(self, "address", address)

        if isinstance(self.port, bool) or not isinstance(self.port, int):
            msg = f"Port must be an integer, got {type(self.port).__name__}"
            raise TypeError(msg)

        if self.port < 0 or self.port > MAX_PORT:
            msg = f"Port out of range (0-{MAX_PORT}): {self.port}"
            raise ValueError(msg)

    @classmethod
    def parse(cls, endpoint_string: str) -> "ServerEndpoint":
        """Parse ``'a.b.c.d:port'`` or ``'[v6]:port'`` into an endpoint.

        Raises:
            ValueError: If the string is not an IP literal followed by a port

        """
        if ":" not in endpoint_string:
            msg = f"Invalid endpoint format: {endpoint_string}. Expected 'address:port'"
            raise ValueError(msg)

        host, port_str = endpoint_string.rsplit(":", 1)
        if host.startswith("[") and host.endswith("]"):
            host = host[1:-1]
            if ":" not in host:
                msg = f"Only IPv6 endpoints may be bracketed: {endpoint_string}"
                raise ValueError(msg)
        elif ":" in host:
            msg = f"IPv6 endpoints must be bracketed: {endpoint_string}"
            raise ValueError(msg)

        try:
            port = int(port_str)
        except ValueError as e:
            msg = f"Invalid port in endpoint string: {endpoint_string}"
            raise ValueError(msg) from e

        return cls(host, port)  # type: ignore[arg-type]

    def __str__(self) -> str:
        """Return the endpoint as ``address:port``."""
        if self.address.version == 6:
            return f"[{self.address}]:{self.port}"
        return f"{self.address}:{self.port}"
