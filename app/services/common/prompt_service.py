import json
import logging
from typing import List, Any, Dict

from openai import AsyncOpenAI

from app.common.constants import MAX_CLAUSE_PROMPT_CHARS, ANALYSIS_TEMPERATURE, \
  SUMMARY_TEMPERATURE
from app.common.decorators import measure_time
from app.common.exception.custom_exception import CommonException
from app.common.exception.error_code import ErrorCode
from app.schemas.analysis_response import AnalysedClause, ClassifiedClause, \
  ScoredClause, ExecutiveSummary, SeverityLevel
from app.schemas.chunk_schema import ClauseChunk
from app.services.contract.response_validator import validate_category, \
  validate_severity, validate_reasoning, validate_recommendation, \
  validate_count, validate_string_list, validate_executive_summary, \
  count_severities, DEFAULT_CATEGORY, DEFAULT_SEVERITY

ANALYSIS_SYSTEM_PROMPT = """You are a senior contract risk analyst and commercial negotiation advisor specialising in UK commercial contracts.

For EACH contract clause provided, you must produce ALL of the following in a single pass:

1. CATEGORY - Classify the clause into exactly ONE of these categories:
   liability, IP, termination, payment, change_control, confidentiality, data_protection, indemnity, warranties, governing_law, insurance, other

2. SEVERITY - Score risk from the CLIENT's perspective:
   - High: Significant financial, legal, or operational exposure (e.g., liability cap far below contract value, unlimited indemnity, overly broad IP assignment)
   - Medium: Potentially unfavourable but not immediately dangerous (e.g., auto-renewal, moderately long payment terms)
   - Low: Standard commercial practice, minimal risk (e.g., standard confidentiality, reasonable warranties)

3. REASONING - 1-2 sentence specific risk explanation referencing actual values, timeframes, or percentages from the clause.

4. RECOMMENDATION - A specific, actionable negotiation recommendation:
   - Reference actual values, percentages, timeframes
   - Suggest concrete alternative language or thresholds
   - Frame as negotiation actions, not observations
   - For low-risk clauses, briefly confirm acceptability

SCORING RULES:
- A liability cap must be assessed relative to the contract value
- Payment terms of 90 days are worse than 30 days
- IP assignment capturing pre-existing tools is HIGH risk
- Termination with only 7 days to cure is HIGH risk
- Exclusion of indirect/consequential losses favours the supplier

Respond ONLY with valid JSON. No markdown."""

SUMMARY_SYSTEM_PROMPT = """You are a senior contract risk advisor preparing an executive briefing for a non-legal project manager.

Your task is to produce a concise executive summary of the contract risk analysis. The summary should:

1. Be written in plain English, no legal jargon
2. Clearly state the overall risk posture
3. Highlight the most critical red flags that need immediate attention
4. Prioritise which clauses to negotiate first
5. Be suitable for someone who needs to decide whether to sign or push back

The executive summary paragraph should be 3-5 sentences, covering:
- Overall risk level of the contract
- The most dangerous clauses and why
- A clear recommendation on whether to sign as-is or negotiate

Respond ONLY with valid JSON."""


def clean_markdown_block(response_text: str) -> Dict[str, Any]:
  response_text_cleaned = response_text.strip()

  if response_text_cleaned.startswith(
      "```json") and response_text_cleaned.endswith("```"):
    response_text_cleaned = response_text_cleaned[7:-3].strip()
  elif response_text_cleaned.startswith(
      "```") and response_text_cleaned.endswith("```"):
    response_text_cleaned = response_text_cleaned[3:-3].strip()

  try:
    parsed_response = json.loads(response_text_cleaned)
  except json.JSONDecodeError as e:
    logging.error(
        f"[PromptService]: jsonDecodeError: {e} | raw response: {response_text_cleaned}")
    raise CommonException(ErrorCode.LLM_RESPONSE_PARSE_FAILED) from e

  if not isinstance(parsed_response, dict):
    logging.error(
        f"[PromptService]: response is not a JSON object | raw response: {response_text_cleaned}")
    raise CommonException(ErrorCode.LLM_RESPONSE_PARSE_FAILED)

  return parsed_response


def extract_content(response: Any) -> str:
  choices = getattr(response, "choices", None) or []
  content = choices[0].message.content if choices else None
  if not content or not content.strip():
    raise CommonException(ErrorCode.LLM_EMPTY_RESPONSE)
  return content


def build_analysis_prompt(clauses: List[ClauseChunk]) -> str:
  clause_list = "\n\n---\n\n".join(
      f'[{c.clause_id}] "{c.clause_title}"\n{c.clause_text[:MAX_CLAUSE_PROMPT_CHARS]}'
      for c in clauses
  )

  return f"""Analyse each clause below. Return JSON:
{{"analysis": [{{"clause_id": "...", "category": "...", "severity": "High|Medium|Low", "reasoning": "...", "recommendation": "..."}}]}}

Clauses:

{clause_list}"""


def build_summary_prompt(clauses: List[AnalysedClause]) -> str:
  clause_summaries = "\n\n".join(
      f"[{c.clause_id}] {c.clause_title} | {c.category.value} | {c.severity.value}\n"
      f"Risk: {c.reasoning}\nRecommendation: {c.recommendation}"
      for c in clauses
  )
  counts = count_severities(clauses)
  high = counts[SeverityLevel.HIGH]
  medium = counts[SeverityLevel.MEDIUM]
  low = counts[SeverityLevel.LOW]

  return f"""Produce an executive summary of this contract risk analysis.

Risk distribution: {high} High, {medium} Medium, {low} Low

Analysed clauses:

{clause_summaries}

Return JSON:
{{
  "total_high": {high},
  "total_medium": {medium},
  "total_low": {low},
  "key_red_flags": ["3-5 most critical issues as short bullet points"],
  "negotiation_priority": ["ordered list of clause IDs or titles to negotiate first"],
  "executive_summary": "3-5 sentence plain-English summary for a project manager"
}}"""


def enrich_clause(clause: ClauseChunk, item: Dict[str, Any]) -> AnalysedClause:
  classified = ClassifiedClause.from_chunk(
      clause, validate_category(item.get("category")))
  scored = ScoredClause.from_classified(
      classified,
      validate_severity(item.get("severity")),
      validate_reasoning(item.get("reasoning")))
  return AnalysedClause.from_scored(
      scored, validate_recommendation(item.get("recommendation")))


class PromptService:
  def __init__(self, deployment_name):
    self.deployment_name = deployment_name

  @measure_time
  async def analyse_all_clauses(self, prompt_client: AsyncOpenAI,
      clauses: List[ClauseChunk]) -> List[AnalysedClause]:
    """Classify, score and recommend on every clause with one model call."""
    response = await prompt_client.chat.completions.create(
        model=self.deployment_name,
        temperature=ANALYSIS_TEMPERATURE,
        response_format={"type": "json_object"},
        messages=[
          {"role": "system", "content": ANALYSIS_SYSTEM_PROMPT},
          {"role": "user", "content": build_analysis_prompt(clauses)}
        ]
    )

    parsed = clean_markdown_block(extract_content(response))
    analysis = parsed.get("analysis")
    items = analysis if isinstance(analysis, list) else []
    result_map = {
      item["clause_id"]: item for item in items
      if isinstance(item, dict) and isinstance(item.get("clause_id"), str)
    }

    missing = [c.clause_id for c in clauses if c.clause_id not in result_map]
    if missing:
      logging.warning(
          f"[PromptService]: no analysis returned for {missing}, using {DEFAULT_CATEGORY.value}/{DEFAULT_SEVERITY.value}")

    return [enrich_clause(clause, result_map.get(clause.clause_id, {}))
            for clause in clauses]

  @measure_time
  async def generate_summary(self, prompt_client: AsyncOpenAI,
      clauses: List[AnalysedClause]) -> ExecutiveSummary:
    response = await prompt_client.chat.completions.create(
        model=self.deployment_name,
        temperature=SUMMARY_TEMPERATURE,
        response_format={"type": "json_object"},
        messages=[
          {"role": "system", "content": SUMMARY_SYSTEM_PROMPT},
          {"role": "user", "content": build_summary_prompt(clauses)}
        ]
    )

    parsed = clean_markdown_block(extract_content(response))
    counts = count_severities(clauses)

    return ExecutiveSummary(
        total_high=validate_count(parsed.get("total_high"),
                                  counts[SeverityLevel.HIGH]),
        total_medium=validate_count(parsed.get("total_medium"),
                                    counts[SeverityLevel.MEDIUM]),
        total_low=validate_count(parsed.get("total_low"),
                                 counts[SeverityLevel.LOW]),
        key_red_flags=validate_string_list(parsed.get("key_red_flags")),
        negotiation_priority=validate_string_list(
            parsed.get("negotiation_priority")),
        executive_summary=validate_executive_summary(
            parsed.get("executive_summary"))
    )
