from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    database_url: str = "sqlite:///database.sqlite"
    seed_sample_data: bool = True
    featured_limit: int = 4
    log_level: str = "INFO"
