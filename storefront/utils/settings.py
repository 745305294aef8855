# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

# pusty adres -> wbudowana bramka platnosci (in-process)
PAYMENT_SERVICE_URL = os.getenv("PAYMENT_SERVICE_URL", "")
PAYMENT_TIMEOUT_SECONDS = float(os.getenv("PAYMENT_TIMEOUT_SECONDS", 8.0))
PAYMENT_CURRENCY = os.getenv("PAYMENT_CURRENCY", "USD")
PAYMENT_DECLINE_PREFIX = os.getenv("PAYMENT_DECLINE_PREFIX", "4000000000000002")

ORDER_ID_PREFIX = os.getenv("ORDER_ID_PREFIX", "order-")
ORDER_ID_BYTES = int(os.getenv("ORDER_ID_BYTES", 32))

SEED_CATALOG = os.getenv("SEED_CATALOG", "true").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
