"""Trigram decoding module for trigrameyes.

Turns assembled trigram grids into canonical congruence-class indices.

Public API:
    Decoder -- End-to-end image decoder
    TriangleCatalog -- Triangle signatures and their unique classes
    encode / decode_code -- Base-5 trigram codes
    get_method -- Look up a registered decode method by name
"""

from trigrameyes.decode.alphabet import AlphabetLoadError, AlphabetTable
from trigrameyes.decode.base import (
    DecodeError,
    DecodeMethod,
    InvalidTrigramCode,
    UnknownDecodeMethod,
    UnknownDirectionSymbol,
    UnmatchedTriangleSignature,
    available_methods,
    get_method,
)
from trigrameyes.decode.decoder import Decoder, grid_to_json
from trigrameyes.decode.encoder import decode_code, encode
from trigrameyes.decode.triangles import TriangleCatalog, UniqueTrianglesMethod, default_catalog

__all__ = [
    "AlphabetLoadError",
    "AlphabetTable",
    "DecodeError",
    "DecodeMethod",
    "Decoder",
    "InvalidTrigramCode",
    "TriangleCatalog",
    "UniqueTrianglesMethod",
    "UnknownDecodeMethod",
    "UnknownDirectionSymbol",
    "UnmatchedTriangleSignature",
    "available_methods",
    "decode_code",
    "default_catalog",
    "encode",
    "get_method",
    "grid_to_json",
]
