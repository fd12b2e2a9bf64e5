import os

class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JSON_SORT_KEYS = False
    TESTING = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    @staticmethod
    def init_app(app):
        uri = os.getenv("DATABASE_URL") or os.getenv("SQLALCHEMY_DATABASE_URI")
        if not uri:
            os.makedirs(app.instance_path, exist_ok=True)
            uri = f"sqlite:///{os.path.join(app.instance_path, 'checkout.db')}"
        app.config["SQLALCHEMY_DATABASE_URI"] = uri


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"

    @staticmethod
    def init_app(app):
        app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
