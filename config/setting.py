from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    API_PREFIX: str = "/api/v1"
    SECRET_KEY: str = ""
    LOG_LEVEL: str = "INFO"
    TEMPLATE_FOLDER: str = "template"
    SITE_TITLE: str = "Kauhan Hernandes"
    EMAILJS_API_URL: str = "https://api.emailjs.com/api/v1.0/email/send"
    EMAILJS_SERVICE_ID: str = "service_auvjtef"
    EMAILJS_TEMPLATE_ID: str = "template_ih36ho8"
    EMAILJS_PUBLIC_KEY: str = "el4ZwZ0FP5UayapwI"
    CONTACT_DESTINATION_EMAIL: str = "kauhanhernandes@gmail.com"
    RECAPTCHA_SITE_KEY: str = "6LfdOP0qAAAAAMhwOC6fpILAFlEy1Ji1lncgsjnf"
    DELIVERY_TIMEOUT_SECONDS: Optional[float] = None
    MAX_CONTACT_SESSIONS: int = 1000
    ASSETS_FOLDER: str = "imgs"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
