import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Any, Tuple

from app.clients.openai_clients import get_prompt_async_client
from app.common.constants import ANALYSIS_COOLDOWN_SECONDS
from app.common.decorators import measure_time
from app.common.exception.custom_exception import CommonException
from app.common.exception.error_code import ErrorCode
from app.containers.service_container import prompt_service
from app.schemas.analysis_response import AnalysisResult
from app.schemas.chunk_schema import ChunkingOutput
from app.schemas.document import IngestionOutput
from app.services.common.ingestion_service import ingest_pdf, ingest_text
from app.services.common.llm_retry import retry_llm_call
from app.services.contract.contract_chunking import chunk_contract
from config.app_config import AppConfig


# asyncio.run joins its default executor on exit; a timed-out run must not
# wait for extraction to finish.
ingestion_executor = ThreadPoolExecutor(max_workers=4,
                                        thread_name_prefix="ingestion")


def analyze_pdf_contract(pdf_bytes: bytes) -> AnalysisResult:
  return asyncio.run(run_with_timeout(ingest_pdf, pdf_bytes))


def analyze_text_contract(raw_text: str) -> AnalysisResult:
  return asyncio.run(run_with_timeout(ingest_text, raw_text))


async def run_with_timeout(
    ingest: Callable[[Any], IngestionOutput], payload: Any) -> AnalysisResult:
  try:
    return await asyncio.wait_for(analyze_contract(ingest, payload),
                                  timeout=AppConfig.PIPELINE_TIMEOUT)
  except asyncio.TimeoutError:
    logging.error(
        f"[run_with_timeout]: pipeline exceeded {AppConfig.PIPELINE_TIMEOUT}s")
    raise CommonException(ErrorCode.PIPELINE_TIMEOUT)


@measure_time
async def analyze_contract(
    ingest: Callable[[Any], IngestionOutput], payload: Any) -> AnalysisResult:
  # ingestion + chunking off the loop so the pipeline timeout covers them
  loop = asyncio.get_running_loop()
  ingestion, chunking = await loop.run_in_executor(
      ingestion_executor, ingest_and_chunk, ingest, payload)
  logging.info(
      f"[analyze_contract]: {ingestion.metadata.source_type.value} input, "
      f"{ingestion.metadata.page_count} pages, {len(chunking.clauses)} clauses")

  async with get_prompt_async_client() as prompt_client:
    # classify + score + recommend in one call
    analysed_clauses = await retry_llm_call(
        prompt_service.analyse_all_clauses, prompt_client, chunking.clauses)

    await asyncio.sleep(ANALYSIS_COOLDOWN_SECONDS)

    summary = await retry_llm_call(
        prompt_service.generate_summary, prompt_client, analysed_clauses)

  return AnalysisResult(clauses=analysed_clauses, summary=summary)


def ingest_and_chunk(ingest: Callable[[Any], IngestionOutput],
    payload: Any) -> Tuple[IngestionOutput, ChunkingOutput]:
  ingestion = ingest(payload)
  return ingestion, chunk_contract(ingestion.cleaned_text)
