import logging
from contextlib import asynccontextmanager

import httpx
from openai import AsyncOpenAI

from app.common.constants import LLM_TIMEOUT
from app.common.exception.custom_exception import CommonException
from app.common.exception.error_code import ErrorCode
from config.app_config import AppConfig


@asynccontextmanager
async def get_prompt_async_client():
  if not AppConfig.LLM_API_KEY:
    raise CommonException(ErrorCode.LLM_SETTING_LOAD_FAIL)

  httpx_client = httpx.AsyncClient(
      timeout=httpx.Timeout(timeout=LLM_TIMEOUT, connect=30.0),
      http2=False
  )
  async with httpx_client:
    # retries are handled by retry_llm_call
    async with AsyncOpenAI(
        api_key=AppConfig.LLM_API_KEY,
        base_url=AppConfig.LLM_BASE_URL,
        http_client=httpx_client,
        max_retries=0
    ) as client:
      logging.info(f"endpoint: {AppConfig.LLM_BASE_URL}")
      yield client

prompt_deployment_name = AppConfig.PROMPT_MODEL
