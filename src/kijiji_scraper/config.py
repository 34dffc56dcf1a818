from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "127.0.0.1"
    port: int = 8001

    # Kijiji mobile API
    kijiji_ad_url: str = "https://mingle.kijiji.ca/api/ads/{}"
    kijiji_user_agent: str = (
        "com.ebay.kijiji.ca 6.5.0 (samsung SM-G930U; Android 8.0.0; en_US)"
    )
    kijiji_accept_language: str = "en-CA"
    # Static credential baked into the Android app
    kijiji_authorization: str = "Basic Y2FfYW5kcm9pZF9hcHA6YXBwQ2xAc3NpRmllZHMh"
    scraper_request_timeout: int = 30

    # Log
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
