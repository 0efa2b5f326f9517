"""Parses the address out of ssh/scp destinations"""


def is_bracketed(destination: str) -> bool:
    """Whether the destination uses the "[address]:path" form"""
    return destination.startswith("[")


def extract_address(destination: str) -> str:
    """Returns the address literal of a destination

    Handles "address", "address:path" and "[address]:path" destinations.

    Args:
        destination: The ssh/scp destination

    Returns:
        The address without brackets or path
    """
    if is_bracketed(destination):
        closing_index = destination.find("]")
        if closing_index != -1:
            return destination[1:closing_index]
        # No closing bracket, drop the first and last character of the host segment
        return destination.split(":")[0][1:-1]
    return destination.split(":")[0]


def replace_address(destination: str, address: str, instance_name: str) -> str:
    """Replaces every occurrence of an address in a destination with an instance name

    Bracketed addresses lose their brackets, "[10.0.0.1]:/tmp" becomes "name:/tmp".

    Args:
        destination: The ssh/scp destination
        address: The address literal found in the destination
        instance_name: The name replacing the address

    Returns:
        The rewritten destination
    """
    if is_bracketed(destination):
        return destination.replace(f"[{address}]", instance_name)
    return destination.replace(address, instance_name)
