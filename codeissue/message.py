"""Issue message length policy.

Messages are stored in a column of ``MESSAGE_STORAGE_BYTES`` bytes. Text is
encoded with up to ``MAX_BYTES_PER_CHAR`` bytes per character, so the
character budget is the byte budget divided by that worst case. The cap is a
character count and does not depend on the actual content.
"""

from codeissue.logging import get_logger

MESSAGE_STORAGE_BYTES = 4000
MAX_BYTES_PER_CHAR = 3

LOG = get_logger(__name__)


def max_message_length(
    storage_bytes: int = MESSAGE_STORAGE_BYTES,
    bytes_per_char: int = MAX_BYTES_PER_CHAR,
) -> int:
    """Number of characters that always fit in ``storage_bytes``."""
    if storage_bytes < 0 or bytes_per_char < 1:
        raise ValueError(f"Invalid message storage budget: {storage_bytes} bytes, {bytes_per_char} bytes per char")
    return storage_bytes // bytes_per_char


MESSAGE_MAX_LENGTH = max_message_length()


def truncate_message(message: str | None, max_length: int = MESSAGE_MAX_LENGTH) -> str | None:
    """Keep the first ``max_length`` characters of ``message``.

    None and messages within the budget are returned unchanged.
    """
    if message is None or len(message) <= max_length:
        return message
    LOG.debug("Truncating issue message from %d to %d characters", len(message), max_length)
    return message[:max_length]
