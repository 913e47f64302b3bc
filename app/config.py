from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
    }

    app_name: str = "Explore California Tour Ratings"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # features.<name> flags, e.g. FEATURES='{"tour-ratings": true}'
    features: dict[str, bool] = {}

    user_username: str = "user"
    user_password: str = "password"
    admin_username: str = "admin"
    admin_password: str = "admin123"

    # Known tours and customers, e.g. TOUR_IDS='[1, 2, 999]'
    tour_ids: list[int] = []
    customer_ids: list[int] = []
