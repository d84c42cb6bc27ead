"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="CAMPUS_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Service
    service_name: str = "campus-analytics"
    log_level: str = "INFO"

    # Academic defaults applied when a request carries no settings
    min_attendance: float = 75.0
    pass_marks: float = 20.0
    weight_test1: float = 0.3
    weight_test2: float = 0.3
    weight_assignment: float = 0.4

    def academic_defaults(self) -> dict:
        """Raw settings record in the shape resolve_settings() expects"""
        return {
            "min_attendance": self.min_attendance,
            "pass_marks": self.pass_marks,
            "weightage": {
                "test1": self.weight_test1,
                "test2": self.weight_test2,
                "assignment": self.weight_assignment,
            },
        }


settings = Settings()
