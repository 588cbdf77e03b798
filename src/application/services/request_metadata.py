"""Request metadata passed alongside auth events."""


def request_metadata(
    ip_address: str | None, user_agent: str | None
) -> dict[str, str]:
    """Build the event metadata dict, omitting unknown values."""
    metadata: dict[str, str] = {}
    if ip_address:
        metadata["ip_address"] = ip_address
    if user_agent:
        metadata["user_agent"] = user_agent
    return metadata
