from __future__ import annotations

# Counters in the firmware decoder are signed 64-bit.
INT64_MAX = 2**63 - 1

SYMBOLS_PER_GROUP = 4
BYTES_PER_GROUP = 3
BITS_PER_SYMBOL = 6

# Fixed signature buffer of the OTA file context (sig-sha256-ecdsa).
OTA_MAX_SIGNATURE_SIZE = 256
