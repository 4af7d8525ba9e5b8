import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()

def build_db_url():
    url = os.getenv("DATABASE_URL") or os.getenv("DB_URL")
    if url:
        return url  # if you ever set it explicitly

    user = os.getenv("DB_USER")
    pwd  = os.getenv("DB_PASSWORD")
    host = os.getenv("DB_HOST")
    port = os.getenv("DB_PORT", "5432")
    name = os.getenv("DB_NAME")

    if not all([user, pwd, host, name]):
        return "sqlite:///./finance_tracker.db"

    return f"postgresql+psycopg2://{user}:{quote_plus(pwd)}@{host}:{port}/{name}"

def cors_allow_origins():
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]

DATABASE_URL = build_db_url()

SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
