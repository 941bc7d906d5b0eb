"""Common constants used across the application."""

# Phone numbers treated as registered GoPay wallets
REGISTERED_PHONE_NUMBERS = frozenset(
    {
        "081293846571",
        "085773092184",
        "087812349091",
        "082229901765",
        "081317758842",
        "085266104738",
        "085978452203",
        "081996731156",
        "087754209934",
        "083159914870",
    }
)

# Reference id prefix for simulated GoPay transactions
DEFAULT_GOPAY_REF_PREFIX = "GP-SIM-"

# Outcome messages
MESSAGE_INVALID_PARAMETERS = "invalid parameters"
MESSAGE_TOPUP_SUCCESS = "top-up processed successfully"
MESSAGE_PHONE_NOT_REGISTERED = "phone number not registered"

HEALTH_MESSAGE = "GoPay Spring Boot Service is running!"

API_PREFIX = "/api/v1/gopay"
