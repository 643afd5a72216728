# agromart_ussd/domain/services/ussd_text.py
"""User-facing USSD strings.

Prefix helpers produce the gateway envelope: ``CON`` keeps the dialogue
open, ``END`` closes it.
"""

CON = "CON"
END = "END"

TEXT = {
    "MAIN_MENU": (
        "Welcome to Lovitti Agro Mart\n"
        "1. Browse listings\n"
        "2. My orders\n"
        "3. Help\n"
        "4. KYC Registration\n"
        "5. Track Order"
    ),
    "BROWSE_MENU": (
        "Browse Products\n"
        "1. Grains\n"
        "2. Vegetables\n"
        "3. Fruits\n"
        "4. Livestock"
    ),
    "BROWSE_COMING_SOON": "Coming soon: category results via SMS link.",
    "ORDERS_SMS": "Order tracking sent via SMS. Visit lovitti.agro/orders for details.",
    "HELP": "For help, call 0800-AGRO or visit lovitti.agro/help",
    "TRACK_ORDER": "Enter Order ID:\nFormat: ORD-XXXXXX",
    "ROLE_MENU": (
        "Select Role:\n"
        "1. Farmer\n"
        "2. Distributor\n"
        "3. Transporter\n"
        "4. Buyer\n"
        "5. Veterinarian"
    ),
    "ROLE_START": "{role} Registration\nEnter Full Name:",
    "KYC_SUCCESS": "KYC submitted successfully! Your {role} application is under review.",
    "INVALID_SELECTION": "Invalid selection. Please try again.",
    "INVALID_ROLE": "Invalid role selection.",
    "INVALID_STEP": "Invalid step. Please start over.",
    "SERVER_ERROR": "Sorry, there was an error processing your request. Please try again later.",
}


def con(key: str, **kwargs) -> str:
    return f"{CON} {TEXT[key].format(**kwargs)}"


def end(key: str, **kwargs) -> str:
    return f"{END} {TEXT[key].format(**kwargs)}"
