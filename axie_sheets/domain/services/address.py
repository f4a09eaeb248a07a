from __future__ import annotations


RONIN_PREFIX = "ronin:"
HEX_PREFIX = "0x"


def normalize_address(address: str | None) -> str | None:
    if address is None:
        return None
    if address.startswith(RONIN_PREFIX):
        return HEX_PREFIX + address[len(RONIN_PREFIX):]
    return address
