"""
barcodes - Symbology checks, internal code minting and Code 128 encoding.

Public API:
    checksum(kind, digits)          → check digit string
    detect(barcode) / validate(barcode)
    generate_internal_code(prefix), is_generated(code), clear_registry()
    encode_code128(text)            → '1'/'0' module pattern
"""

from barcodes.checksum import (                                    # noqa: F401
    checksum, ean13_check_digit, ean8_check_digit, upca_check_digit,
)
from barcodes.formats import (                                     # noqa: F401
    DEFAULT_INTERNAL_PREFIX, Symbology, ValidationResult,
    detect, validate,
    is_valid_ean13, is_valid_ean8, is_valid_upca,
    is_valid_code128, is_valid_internal_code,
)
from barcodes.internal_code import (                               # noqa: F401
    CodeRegistry, InternalCodeGenerator, RegistryExhaustedError,
    generate_internal_code, is_generated, clear_registry, default_generator,
)
from barcodes.code128 import encode_code128, encode_values, bar_runs  # noqa: F401
