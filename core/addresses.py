"""Base58Check address decoding for alias validation."""

import base58

ADDRESS_LENGTH = 20


def b58c_to_address(text: str) -> bytes:
    """Return the 20-byte address encoded by ``text`` or raise ``ValueError``.

    The decoded body is one version byte followed by the address; any version is accepted.
    """
    value = (text or "").strip()
    if not value:
        raise ValueError("Address is empty")
    decoded = base58.b58decode_check(value)
    if len(decoded) != 1 + ADDRESS_LENGTH:
        raise ValueError(f"Address payload must be {ADDRESS_LENGTH} bytes, got {max(len(decoded) - 1, 0)}")
    return decoded[1:]


def is_valid_address(text: str) -> bool:
    try:
        b58c_to_address(text)
    except ValueError:
        return False
    return True


def address_to_b58c(address: bytes, version: int = 0) -> str:
    return base58.b58encode_check(bytes([version]) + bytes(address)).decode("ascii")
