"""Payload decoding and the composed single-stream decoder."""

from .decoder import StreamDecoder, decode_text
from .payload import PayloadDecoder, extract_path

__all__ = ["PayloadDecoder", "StreamDecoder", "decode_text", "extract_path"]
