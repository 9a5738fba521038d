import os


def _env_bool(name, default):
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # seed the three default products when the catalog is empty
    SEED_DEFAULT_PRODUCTS = _env_bool("SEED_DEFAULT_PRODUCTS", True)

    # UPI payment QR
    UPI_PAYEE_ID = os.getenv("UPI_PAYEE_ID", "paatispantry@paytm")
    UPI_PAYEE_NAME = os.getenv("UPI_PAYEE_NAME", "Paati's Pantry")
    UPI_DEFAULT_NOTE = os.getenv("UPI_DEFAULT_NOTE", "Order Payment")
    UPI_CURRENCY = os.getenv("UPI_CURRENCY", "INR")

    @staticmethod
    def init_app(app):
        if not os.getenv("DATABASE_URL"):
            os.makedirs(app.instance_path, exist_ok=True)
            app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{os.path.join(app.instance_path, 'pantry.db')}"
        else:
            app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL")


class TestConfig(Config):
    __test__ = False  # not a pytest class

    TESTING = True
    SEED_DEFAULT_PRODUCTS = False
    LOG_LEVEL = "WARNING"

    @staticmethod
    def init_app(app):
        app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
