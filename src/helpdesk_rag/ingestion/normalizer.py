"""
Text decoding and newline normalization for Helpdesk RAG.
"""


def decode_source(raw: bytes, encoding: str = "utf-8") -> str:
    """
    Decode raw source bytes.

    A leading byte-order mark is dropped. Decoding errors are raised as
    UnicodeDecodeError so the loader can record them against the source.

    Args:
        raw: Bytes as returned by the corpus provider
        encoding: Text encoding of the corpus

    Returns:
        Decoded text
    """
    text = raw.decode(encoding)
    if text.startswith("\ufeff"):
        text = text[1:]
    return text


def normalize_newlines(text: str) -> str:
    """
    Convert \\r\\n and lone \\r line endings to \\n.

    Segmentation works on line boundaries, so files saved on Windows must
    split the same way as files saved elsewhere.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n")
