"""End-to-end pipeline tests against a scripted model."""
import asyncio
import time

import pytest

from app.common.exception.custom_exception import CommonException
from app.common.exception.error_code import ErrorCode
from app.schemas.analysis_response import ClauseCategory, SeverityLevel
from app.services.common.ingestion_pipeline import analyze_pdf_contract, \
  analyze_text_contract, run_with_timeout
from app.services.common.ingestion_service import ingest_text
from config.app_config import AppConfig
from conftest import SAMPLE_CONTRACT, SUMMARY_RESPONSE, analysis_for_all, \
  user_prompt


class TestAnalyzeTextContract:
  def test_full_pipeline(self, fake_llm) -> None:
    client = fake_llm([analysis_for_all("High", "payment"), SUMMARY_RESPONSE])

    result = analyze_text_contract(SAMPLE_CONTRACT)

    assert [c.clause_id for c in result.clauses] == [
      "section-1", "clause-1", "clause-2"]
    assert all(c.severity == SeverityLevel.HIGH for c in result.clauses)
    assert all(c.category == ClauseCategory.PAYMENT for c in result.clauses)
    assert result.clauses[2].recommendation == "Negotiate clause-2"
    assert result.summary.total_high == 3
    assert result.summary.total_low == 0
    assert result.summary.executive_summary \
           == "The contract carries high payment risk."

    # analysis first, then summary over the analysed clauses
    assert len(client.completions.calls) == 2
    assert "Reasoning for clause-2" in user_prompt(client.completions.calls[1])

  def test_chunking_failure_skips_model(self, fake_llm) -> None:
    client = fake_llm([])
    with pytest.raises(CommonException) as exc_info:
      analyze_text_contract("Short note.")
    assert exc_info.value.error_code == ErrorCode.CHUNKING_FAIL
    assert client.completions.calls == []

  def test_empty_text(self, fake_llm) -> None:
    with pytest.raises(CommonException) as exc_info:
      analyze_text_contract("   ")
    assert exc_info.value.error_code == ErrorCode.EMPTY_TEXT_INPUT

  def test_pipeline_timeout(self, fake_llm, monkeypatch) -> None:
    monkeypatch.setattr(AppConfig, "PIPELINE_TIMEOUT", 0.05)
    fake_llm([analysis_for_all(), SUMMARY_RESPONSE], delay=1.0)
    with pytest.raises(CommonException) as exc_info:
      analyze_text_contract(SAMPLE_CONTRACT)
    assert exc_info.value.error_code == ErrorCode.PIPELINE_TIMEOUT

  def test_timeout_covers_slow_ingestion(self, fake_llm, monkeypatch) -> None:
    client = fake_llm([])
    monkeypatch.setattr(AppConfig, "PIPELINE_TIMEOUT", 0.1)

    def slow_ingest(payload):
      time.sleep(1.0)
      return ingest_text(payload)

    started = time.monotonic()
    with pytest.raises(CommonException) as exc_info:
      asyncio.run(run_with_timeout(slow_ingest, SAMPLE_CONTRACT))

    assert exc_info.value.error_code == ErrorCode.PIPELINE_TIMEOUT
    assert time.monotonic() - started < 0.9
    assert client.completions.calls == []

  def test_summary_parse_failure_propagates(self, fake_llm) -> None:
    fake_llm([analysis_for_all(), "not json at all"])
    with pytest.raises(CommonException) as exc_info:
      analyze_text_contract(SAMPLE_CONTRACT)
    assert exc_info.value.error_code == ErrorCode.LLM_RESPONSE_PARSE_FAILED

  def test_missing_api_key(self, no_backoff, monkeypatch) -> None:
    monkeypatch.setattr(AppConfig, "LLM_API_KEY", "")
    with pytest.raises(CommonException) as exc_info:
      analyze_text_contract(SAMPLE_CONTRACT)
    assert exc_info.value.error_code == ErrorCode.LLM_SETTING_LOAD_FAIL


class TestAnalyzePdfContract:
  def test_corrupt_pdf(self, fake_llm) -> None:
    client = fake_llm([])
    with pytest.raises(CommonException) as exc_info:
      analyze_pdf_contract(b"this is not a pdf")
    assert exc_info.value.error_code == ErrorCode.PDF_LOAD_FAILED
    assert client.completions.calls == []
