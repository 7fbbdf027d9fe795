from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Avoca"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 8000

    max_follow_up_questions: int = 3
    short_message_length: int = 50
    keep_question_pairs: bool = False
    use_conversation_history: bool = False

    model_config = {"env_file": ".env", "env_prefix": "AVOCA_"}


settings = Settings()
