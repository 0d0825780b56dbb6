"""Runtime settings read from the environment.

Persistence settings are not here: databases, brokers and the event store are
configured through Protean's own config (``domain.toml`` and ``PROTEAN_ENV``).
"""

import os

JWT_SECRET = os.getenv("JWT_SECRET", "orderly-dev-secret-change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
TOKEN_TTL_MINUTES = int(os.getenv("TOKEN_TTL_MINUTES", "1440"))

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

PORT = int(os.getenv("PORT", "3000"))

# Fixed listing windows
ORDER_PAGE_SIZE = 5
USER_PAGE_SIZE = 5
PRODUCT_PAGE_SIZE = 10
