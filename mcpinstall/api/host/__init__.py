"""Host application identities and configuration locations."""

from .HostIdentity import HostIdentity
from .HostLocation import HostLocation
from .get_host_location import get_host_location

__all__ = ["HostIdentity", "HostLocation", "get_host_location"]
