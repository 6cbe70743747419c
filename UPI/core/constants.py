"""UPI service constants.

- BANK_SUFFIX is appended to every VPA prefix (john.doe -> john.doe@digitalbank).
- COLLECT_REQUEST_TTL is how long a collect request stays open before the
  storage retention event removes it.
"""

import os
from datetime import timedelta
from decimal import Decimal

BANK_SUFFIX = os.getenv("UPI_BANK_SUFFIX", "@digitalbank")

COLLECT_REQUEST_TTL = timedelta(hours=24)

# Reference prefixes for generated identifiers
TXN_ID_PREFIX = "UPI"
MANDATE_ID_PREFIX = "MND"

# Ledger pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Bounds of the DECIMAL(15, 2) amount columns
AMOUNT_QUANTUM = Decimal("0.01")
MAX_AMOUNT = Decimal(10) ** 13

# Display name returned for resolvable addresses until a profile lookup exists
VERIFIED_DISPLAY_NAME = "Verified User"
