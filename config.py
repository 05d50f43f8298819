import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DATA_DIR = data.get("DATA_DIR", os.path.join(ROOT_PATH, "data"))
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Rendering
    DEFAULT_CURRENCY = data.get("DEFAULT_CURRENCY", "USD")
    DEFAULT_TEMPLATE = data.get("DEFAULT_TEMPLATE", "professional")

    # New invoice defaults
    INVOICE_NUMBER_PREFIX = data.get("INVOICE_NUMBER_PREFIX", "INV-")
    DEFAULT_DUE_DAYS = int(data.get("DEFAULT_DUE_DAYS", 14))
    DEFAULT_TERMS = data.get("DEFAULT_TERMS", "Payment due within 14 days")
