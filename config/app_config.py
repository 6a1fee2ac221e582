import os
from dotenv import load_dotenv


load_dotenv()


class AppConfig:
  APP_ENV = os.getenv("APP_ENV", "dev")
  LOG_TIMEZONE = os.getenv("LOG_TIMEZONE", "Asia/Seoul")

  LLM_API_KEY = os.getenv("LLM_API_KEY", "")
  LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://api.groq.com/openai/v1")
  PROMPT_MODEL = os.getenv("PROMPT_MODEL", "llama-3.3-70b-versatile")

  MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", 20 * 1024 * 1024))
  PIPELINE_TIMEOUT = float(os.getenv("PIPELINE_TIMEOUT", 300))
