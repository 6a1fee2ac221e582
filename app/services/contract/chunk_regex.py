# Ordered: the first matching rule wins
HEADING_REGEX = [
  {
    "name": "KEYWORD_WITH_SEPARATOR",
    "regex": r"^(?:clause|section|part|article)\s+[\dIVXivx]+[\s—–\-.:]",
    "ignore_case": True
  },
  {
    "name": "KEYWORD_ONLY",
    "regex": r"^(?:clause|section|part|article)\s+[\dIVXivx]+\s*$",
    "ignore_case": True
  },
  {
    "name": "NUMBERED_TITLE_CASE",
    "regex": r"^\d{1,3}\.?\s+[A-Z][A-Za-z]+(?:[\s,&]+[A-Za-z]+)+\s*$",
    "ignore_case": False,
    "min_length": 5,
    "max_length": 120
  },
  {
    "name": "NUMBERED_ALL_CAPS",
    "regex": r"^\d{1,3}\.?\s+[A-Z][A-Z\s,&]+$",
    "ignore_case": False
  }
]

HEADING_NUMBER_PREFIX = r"^\d{1,3}\.?\s+"

# Designators like 2A, B1, II or ONE. "Schedule of Rates" is body text.
ANNEX_DESIGNATOR_WORDS = "one|two|three|four|five|six|seven|eight|nine|ten"
ANNEX_HEADING = (r"^(?:annex|schedule|appendix|exhibit)\s+"
                 r"(\d+[A-Z]?|[A-Z]\d*|[IVX]+|" + ANNEX_DESIGNATOR_WORDS + r")\b")

HEADING_KEYWORD_PREFIX = r"^(?:clause|section|part|article)\s+"
DASH_SEPARATOR = r"\s*[—–\-]\s+|\s+[—–\-]\s*"

CLAUSE_NUMBER = r"^(\d+[A-Z]?)"
TITLE_NUMBER_PREFIX = r"^\d+(?:\.\d+)*\.?\s*"
TITLE_DASH_PREFIX = r"^[—–\-:]\s*"
