from enum import Enum
from typing import Any, Dict, Protocol

from mac_addr import MacAddr


class NetType(Enum):
    USER = 0
    ETHERNET = 1
    VHOSTUSER = 2
    SERVER = 3
    CLIENT = 4
    MCAST = 5
    NETWORK = 6
    BRIDGE = 7
    INTERNAL = 8
    DIRECT = 9
    HOSTDEV = 10
    UDP = 11


class SnoopError(RuntimeError):
    pass


class DhcpSnooper(Protocol):
    """Per-interface DHCP lease snooping, as driven by the network filter layer.

    init() and shutdown() bracket the snooper's own state. req() starts
    monitoring one interface and raises SnoopError if it cannot; end() stops it.
    """

    def init(self) -> None:
        pass

    def shutdown(self) -> None:
        pass

    def req(self,
            tech_driver: Any,
            ifname: str,
            linkdev: str | None,
            nettype: NetType,
            vm_uuid: bytes,
            mac: MacAddr,
            filter_name: str,
            filter_params: Dict[str, str],
            driver: Any) -> None:
        pass

    def end(self, ifname: str) -> None:
        pass
