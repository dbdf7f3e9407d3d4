"""Policies for transfer recipients."""


def is_valid_recipient(recipient: str | None) -> bool:
    """Return True when the recipient address is non-empty once trimmed."""
    if recipient is None:
        return False
    return bool(recipient.strip())


__all__ = ["is_valid_recipient"]
